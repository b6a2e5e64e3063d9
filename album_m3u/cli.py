from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_OUTFILE
from .errors import PlaylistError
from .log_utils import setup_logging
from .metadata import TagReader, default_tag_reader
from .playlist import print_progress, render_playlist, sort_tracks, write_playlist
from .scanner import ScanOptions, scan_album


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="album-m3u",
        description="Generate an m3u8 playlist from a ripped album directory",
    )
    p.add_argument("directory", nargs="?", default=".", type=Path, help="The directory to scan as an album (default: .)")
    p.add_argument("-o", "--outfile", default=DEFAULT_OUTFILE, type=Path, help=f"The file to write (default: {DEFAULT_OUTFILE})")
    p.add_argument("-n", "--dry-run", action="store_true", help="Print the track order without writing the playlist")
    p.add_argument("--ignore-case", action="store_true", help="Match audio extensions case-insensitively (e.g. .FLAC)")
    p.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Warn about and skip files whose tags cannot be read instead of aborting",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug output on stderr")
    p.add_argument("--log-file", type=Path, default=None, help="Also write a debug log to this file")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None, reader: Optional[TagReader] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(verbose=args.verbose, log_file=args.log_file)

    options = ScanOptions(fold_case=args.ignore_case, skip_unreadable=args.skip_unreadable)
    reader = reader or default_tag_reader()

    try:
        tracks = scan_album(args.directory, reader, options)
        tracks = sort_tracks(tracks)
        print_progress(tracks)
        if args.dry_run:
            logger.info("Dry run: %s not written", args.outfile)
            return 0
        write_playlist(args.outfile, render_playlist(tracks))
    except PlaylistError as e:
        logger.error("%s", e)
        return 1

    logger.debug("Playlist %s holds %d track(s)", args.outfile, len(tracks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
