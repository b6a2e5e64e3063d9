from __future__ import annotations

AUDIO_EXTS = frozenset(
    {
        # lossy
        "mp3",
        # open codecs/containers
        "flac",
        "opus",
        "ape",
        "ogg",
        "mka",
        # apple
        "aac",
        "alac",
        "m4a",
        "caf",
        # windows
        "wma",
        "wav",
    }
)

DEFAULT_OUTFILE = "playlist.m3u8"

# Orders are unsigned 64-bit; anything larger counts as unparseable.
MAX_ORDER = 2**64 - 1

TRACK_TAG = "track"

# Container-specific spellings of the track-number tag, case-folded.
TRACK_TAG_ALIASES = frozenset({"track", "tracknumber", "trck", "trkn", "wm/tracknumber"})
