from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from .errors import PlaylistWriteError
from .types import TrackEntry

logger = logging.getLogger(__name__)

console = Console()


def sort_tracks(tracks: Iterable[TrackEntry]) -> List[TrackEntry]:
    # sorted() is stable: equal orders keep their scan order.
    return sorted(tracks, key=lambda t: t.order)


def render_playlist(tracks: Iterable[TrackEntry]) -> str:
    """Bare m3u8 body: one base name per line, no #EXT directives."""
    return "".join(f"{t.name}\n" for t in tracks)


def print_progress(tracks: Iterable[TrackEntry], out: Optional[Console] = None) -> None:
    out = out or console
    for t in tracks:
        out.print(
            f"[white]writing track[/white] [bold bright_green]#{t.order:02d}[/bold bright_green]: {escape(t.name)}",
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


def _file_mode() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def write_playlist(path: Path | str, text: str) -> None:
    """Replace path with text in one step.

    The data goes to a temporary file next to path which is then renamed
    over it, so a failed write never leaves a truncated playlist behind.
    """
    path = Path(path)
    tmp: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp = Path(fh.name)
            fh.write(text)
        os.chmod(tmp, _file_mode())
        os.replace(tmp, path)
    except OSError as e:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise PlaylistWriteError(path, e.strerror or str(e)) from e
    logger.debug("Wrote %d byte(s) to %s", len(text.encode("utf-8")), path)
