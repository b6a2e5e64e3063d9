from __future__ import annotations

import struct
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from album_m3u.errors import DemuxerError


class FakeTagReader:
    """In-memory stand-in for mutagen, keyed by base name."""

    def __init__(self, tags: Dict[str, List[Tuple[str, str]]] | None = None, broken: Iterable[str] = ()) -> None:
        self.tags = tags or {}
        self.broken = set(broken)
        self.calls: List[str] = []

    def read_tags(self, path: Path) -> List[Tuple[str, str]]:
        self.calls.append(path.name)
        if path.name in self.broken:
            raise DemuxerError(path, "cannot read tags: not a media file")
        return list(self.tags.get(path.name, []))


def touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_bytes(b"")


def _block(code: int, data: bytes, last: bool) -> bytes:
    header = ((0x80 if last else 0) | code).to_bytes(1, "big") + len(data).to_bytes(3, "big")
    return header + data


def make_flac(path: Path, comments: Dict[str, str]) -> Path:
    """Write a header-only FLAC file: STREAMINFO plus a Vorbis comment block."""
    packed = (44100 << 44) | (1 << 41) | (15 << 36) | 44100
    streaminfo = struct.pack(">HH", 4096, 4096) + (0).to_bytes(3, "big") * 2 + struct.pack(">Q", packed) + b"\x00" * 16

    vendor = b"album-m3u tests"
    body = struct.pack("<I", len(vendor)) + vendor + struct.pack("<I", len(comments))
    for key, value in comments.items():
        entry = f"{key}={value}".encode("utf-8")
        body += struct.pack("<I", len(entry)) + entry

    path.write_bytes(b"fLaC" + _block(0, streaminfo, last=False) + _block(4, body, last=True))
    return path
