from __future__ import annotations

from pathlib import Path


class PlaylistError(Exception):
    """Base class for failures that abort a run."""


class ScanError(PlaylistError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.display_path()}: {reason}")

    def display_path(self) -> str:
        return str(self.path)


class NonTextPathError(ScanError):
    """A file name in the album directory is not valid UTF-8."""

    def display_path(self) -> str:
        # Surrogate-escaped names cannot be encoded by strict handlers.
        return ascii(str(self.path))


class DemuxerError(ScanError):
    """The tag reader could not open or parse a file."""


class PlaylistWriteError(PlaylistError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write playlist {path}: {reason}")
