from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Protocol, Tuple

from .constants import TRACK_TAG, TRACK_TAG_ALIASES
from .errors import DemuxerError
from .ordering import track_from_tags

logger = logging.getLogger(__name__)


class TagReader(Protocol):
    def read_tags(self, path: Path) -> Iterable[Tuple[str, str]]:
        """Container tags as (key, value) pairs; raises DemuxerError if unreadable."""
        ...


def _canonical_key(key: str) -> str:
    if key.lower() in TRACK_TAG_ALIASES:
        return TRACK_TAG
    return key


def _as_text(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _iter_tag_pairs(tags) -> Iterator[Tuple[str, str]]:
    for key in tags.keys():
        values = tags[key]
        if not isinstance(values, (list, tuple)):
            values = [values]
        canonical = _canonical_key(key)
        for value in values:
            yield canonical, _as_text(value)


def parse_format_tags(data: dict) -> List[Tuple[str, str]]:
    """(key, value) pairs from ffprobe's JSON `format.tags`, in container order."""
    tags_raw = (data.get("format") or {}).get("tags") or {}
    pairs: List[Tuple[str, str]] = []
    for k, v in tags_raw.items():
        if v is None:
            continue
        pairs.append((_canonical_key(str(k)), str(v)))
    return pairs


class FfprobeTagReader:
    """TagReader that asks ffprobe for container-level tags.

    Covers containers mutagen cannot parse (Matroska, CAF). The binary is
    looked up on first use.
    """

    def __init__(self, binary: str = "ffprobe") -> None:
        self.binary = binary
        self._exe: Optional[str] = None

    def _resolve(self, path: Path) -> str:
        if self._exe is None:
            exe = shutil.which(self.binary)
            if exe is None:
                raise DemuxerError(path, f"cannot read tags: {self.binary} not found, install ffmpeg")
            logger.debug("Using %s for tag lookups", exe)
            self._exe = exe
        return self._exe

    def read_tags(self, path: Path) -> List[Tuple[str, str]]:
        exe = self._resolve(path)
        try:
            proc = subprocess.run(
                [exe, "-v", "error", "-show_entries", "format_tags", "-of", "json", "--", os.fspath(path)],
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise DemuxerError(path, f"cannot read tags: {e}") from e

        if proc.returncode != 0:
            reason = proc.stderr.strip() or f"{self.binary} exited with status {proc.returncode}"
            raise DemuxerError(path, f"cannot read tags: {reason}")
        try:
            data = json.loads(proc.stdout or "{}")
        except json.JSONDecodeError as e:
            raise DemuxerError(path, f"cannot read tags: bad {self.binary} output ({e})") from e
        return parse_format_tags(data)


class MutagenTagReader:
    """TagReader backed by mutagen.

    mutagen is imported on the first lookup so runs where every file name
    carries its track number never load it. Files mutagen does not
    recognise go to `fallback`, when one is given.
    """

    def __init__(self, fallback: Optional[TagReader] = None) -> None:
        self._mutagen = None
        self.fallback = fallback

    def _load(self):
        if self._mutagen is None:
            import mutagen

            logger.debug("Loaded mutagen %s for tag lookups", mutagen.version_string)
            self._mutagen = mutagen
        return self._mutagen

    @property
    def loaded(self) -> bool:
        return self._mutagen is not None

    def read_tags(self, path: Path) -> List[Tuple[str, str]]:
        mutagen = self._load()
        try:
            audio = mutagen.File(os.fspath(path), easy=True)
        except (mutagen.MutagenError, OSError) as e:
            raise DemuxerError(path, f"cannot read tags: {e}") from e

        if audio is None:
            if self.fallback is not None:
                logger.debug("mutagen does not know %s, trying fallback reader", path)
                return list(self.fallback.read_tags(path))
            return []
        if audio.tags is None:
            logger.debug("No tags in %s", path)
            return []
        return list(_iter_tag_pairs(audio.tags))


def default_tag_reader() -> MutagenTagReader:
    return MutagenTagReader(fallback=FfprobeTagReader())


def read_metadata_order(reader: TagReader, path: Path) -> Optional[int]:
    return track_from_tags(reader.read_tags(path))
