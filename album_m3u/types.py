from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class TrackEntry:
    """One audio file of the album with its position in the playlist."""
    order: int
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class Ordered:
    """Audio extension and a numeric filename prefix."""
    name: str
    order: int


@dataclass(frozen=True)
class Unordered:
    """Audio extension, but the name does not start with a digit."""
    name: str


@dataclass(frozen=True)
class NotAudio:
    name: str


Classification = Union[Ordered, Unordered, NotAudio]
