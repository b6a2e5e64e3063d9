from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .constants import AUDIO_EXTS, MAX_ORDER, TRACK_TAG
from .types import Classification, NotAudio, Ordered, Unordered


def _is_digit(ch: str) -> bool:
    # ASCII only; str.isdigit() would accept other scripts' digits.
    return "0" <= ch <= "9"


def _parse_decimal(text: str) -> Optional[int]:
    if not text or not all(_is_digit(c) for c in text):
        return None
    value = int(text)
    if value > MAX_ORDER:
        return None
    return value


def split_ext(name: str) -> Optional[str]:
    """Return the text after the final '.', or None when there is no extension.

    Dotfiles such as '.flac' have a stem and no extension.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def is_audio_ext(ext: Optional[str], fold_case: bool = False) -> bool:
    if ext is None:
        return False
    if fold_case:
        ext = ext.lower()
    return ext in AUDIO_EXTS


def parse_filename_order(name: str) -> Optional[int]:
    """Numeric order from the leading run of ASCII digits in a base name.

    '01 Intro.flac' -> 1, '007.flac' -> 7, 'intro.flac' -> None.
    A prefix too large for an unsigned 64-bit value also gives None.
    """
    end = 0
    while end < len(name) and _is_digit(name[end]):
        end += 1
    if end == 0:
        return None
    return _parse_decimal(name[:end])


def parse_track_value(value: str) -> Optional[int]:
    """Parse a track tag value of the form 'N', '+N' or 'N/TOTAL'."""
    number, _, _total = value.partition("/")
    if number.startswith("+"):
        number = number[1:]
    return _parse_decimal(number)


def track_from_tags(tags: Iterable[Tuple[str, str]]) -> Optional[int]:
    """First parseable value among keys equal to 'track' (ASCII case-insensitive)."""
    for key, value in tags:
        if not key.isascii() or key.lower() != TRACK_TAG:
            continue
        order = parse_track_value(value)
        if order is not None:
            return order
    return None


def classify(name: str, fold_case: bool = False) -> Classification:
    if not is_audio_ext(split_ext(name), fold_case=fold_case):
        return NotAudio(name)
    order = parse_filename_order(name)
    if order is None:
        return Unordered(name)
    return Ordered(name, order)
