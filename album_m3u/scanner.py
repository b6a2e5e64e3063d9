from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .errors import DemuxerError, NonTextPathError, ScanError
from .metadata import TagReader, read_metadata_order
from .ordering import classify
from .types import NotAudio, Ordered, TrackEntry

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = "initialising metadata fallback as a file name contains no track number"


@dataclass(frozen=True)
class ScanOptions:
    fold_case: bool = False
    skip_unreadable: bool = False


@dataclass
class ScanState:
    """Per-scan bookkeeping; a fresh one is created for every scan."""
    fallback_engaged: bool = False


def _text_name(directory: Path, raw_name: str) -> str:
    # Undecodable bytes arrive as lone surrogates (PEP 383).
    try:
        raw_name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NonTextPathError(directory / raw_name, "file name is not valid UTF-8") from e
    return raw_name


def _scan_entry(
    directory: Path,
    entry: os.DirEntry,
    reader: TagReader,
    options: ScanOptions,
    state: ScanState,
) -> Optional[TrackEntry]:
    try:
        is_file = entry.is_file(follow_symlinks=False)
    except OSError as e:
        raise ScanError(entry.path, f"cannot stat: {e.strerror or e}") from e
    if not is_file:
        return None

    name = _text_name(directory, entry.name)
    result = classify(name, fold_case=options.fold_case)
    if isinstance(result, NotAudio):
        return None

    path = directory / name
    if isinstance(result, Ordered):
        return TrackEntry(order=result.order, path=path)

    if not state.fallback_engaged:
        state.fallback_engaged = True
        logger.warning(FALLBACK_NOTICE)

    try:
        order = read_metadata_order(reader, path)
    except DemuxerError as e:
        if not options.skip_unreadable:
            raise
        logger.warning("skipping `%s`: %s", name, e.reason)
        return None

    if order is None:
        logger.warning("tried to treat `%s` as an audio file, but it could not be ordered", name)
        return None

    logger.debug("`%s` ordered as #%d from its tags", name, order)
    return TrackEntry(order=order, path=path)


def scan_album(
    directory: Path | str,
    reader: TagReader,
    options: Optional[ScanOptions] = None,
) -> List[TrackEntry]:
    """Collect the orderable audio files directly inside directory.

    Subdirectories are not entered. Any I/O failure aborts the scan with
    a ScanError; files that cannot be ordered are logged and left out.
    """
    directory = Path(directory)
    options = options or ScanOptions()
    state = ScanState()
    tracks: List[TrackEntry] = []

    try:
        with os.scandir(directory) as it:
            for entry in tqdm(it, desc="Scanning", unit="file", disable=None, leave=False):
                track = _scan_entry(directory, entry, reader, options, state)
                if track is not None:
                    tracks.append(track)
    except OSError as e:
        raise ScanError(directory, f"cannot read directory: {e.strerror or e}") from e

    logger.debug("Collected %d track(s) from %s", len(tracks), directory)
    return tracks
