import pytest

from album_m3u.constants import AUDIO_EXTS
from album_m3u.ordering import (
    classify,
    is_audio_ext,
    parse_filename_order,
    parse_track_value,
    split_ext,
    track_from_tags,
)
from album_m3u.types import NotAudio, Ordered, Unordered


def test_extension_set_is_lowercase():
    assert AUDIO_EXTS == {"mp3", "flac", "opus", "ape", "ogg", "mka", "aac", "alac", "m4a", "caf", "wma", "wav"}


@pytest.mark.parametrize(
    "name, ext",
    [
        ("01 Intro.flac", "flac"),
        ("a.b.mp3", "mp3"),
        ("noext", None),
        (".flac", None),
        ("trailing.", ""),
    ],
)
def test_split_ext(name, ext):
    assert split_ext(name) == ext


def test_is_audio_ext_is_case_sensitive():
    assert is_audio_ext("flac")
    assert not is_audio_ext("FLAC")
    assert not is_audio_ext(None)
    assert not is_audio_ext("jpg")


def test_is_audio_ext_fold_case_opt_in():
    assert is_audio_ext("FLAC", fold_case=True)
    assert not is_audio_ext("TXT", fold_case=True)


@pytest.mark.parametrize(
    "name, order",
    [
        ("01 Intro.flac", 1),
        ("01.flac", 1),
        ("7.flac", 7),
        ("007.flac", 7),
        ("10 Finale.flac", 10),
        ("2-Second.flac", 2),
        ("12_twelve.flac", 12),
        ("42", 42),
    ],
)
def test_parse_filename_order(name, order):
    assert parse_filename_order(name) == order


@pytest.mark.parametrize("name", ["intro.flac", " 01 Intro.flac", "-1.flac", "+1 Intro.flac", "", "١٢.flac"])
def test_parse_filename_order_without_prefix(name):
    assert parse_filename_order(name) is None


def test_parse_filename_order_overflow_is_no_order():
    assert parse_filename_order("18446744073709551615 max.flac") == 2**64 - 1
    assert parse_filename_order("18446744073709551616 over.flac") is None


@pytest.mark.parametrize(
    "value, order",
    [
        ("3", 3),
        ("03/12", 3),
        ("12/", 12),
        ("+3", 3),
        ("+03/12", 3),
        ("", None),
        ("/12", None),
        ("x/12", None),
        (" 3", None),
        ("3a", None),
        ("+", None),
        ("++3", None),
        ("-3", None),
    ],
)
def test_parse_track_value(value, order):
    assert parse_track_value(value) == order


def test_track_from_tags_matches_key_case_insensitively():
    assert track_from_tags([("title", "Intro"), ("TRACK", "4/9")]) == 4


def test_track_from_tags_first_parseable_wins():
    tags = [("track", "side A"), ("Track", "5"), ("track", "6")]
    assert track_from_tags(tags) == 5


def test_track_from_tags_missing():
    assert track_from_tags([]) is None
    assert track_from_tags([("tracktotal", "12"), ("title", "1")]) is None


def test_track_from_tags_ignores_non_ascii_lookalike_keys():
    # U+212A KELVIN SIGN lowercases to "k" under Unicode rules
    assert track_from_tags([("TRAC\u212a", "3")]) is None


def test_classify_outcomes():
    assert classify("01 Intro.flac") == Ordered("01 Intro.flac", 1)
    assert classify("intro.flac") == Unordered("intro.flac")
    assert classify("cover.jpg") == NotAudio("cover.jpg")
    assert classify("README") == NotAudio("README")
    assert classify("01 Intro.FLAC") == NotAudio("01 Intro.FLAC")
    assert classify("01 Intro.FLAC", fold_case=True) == Ordered("01 Intro.FLAC", 1)
