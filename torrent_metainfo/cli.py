"""Command-line summary of a .torrent file."""

import argparse
import logging
import sys
from pathlib import Path

from torrent_metainfo.decoder import load_torrent
from torrent_metainfo.errors import TorrentError
from torrent_metainfo.torrent import Torrent


def format_summary(torrent: Torrent, show_files: bool = False) -> str:
    lines = [
        f"name: {torrent.name}",
        f"info hash: {torrent.info_hash_hex}",
        f"size: {torrent.size}",
        f"pieces: {torrent.pieces.count} x {torrent.piece_length}",
        f"private: {'yes' if torrent.is_private else 'no'}",
    ]
    if torrent.comment:
        lines.append(f"comment: {torrent.comment}")
    if torrent.created_by:
        lines.append(f"created by: {torrent.created_by}")
    if torrent.creation_date is not None:
        lines.append(f"creation date: {torrent.creation_date.isoformat()}")
    if torrent.announce_urls:
        for i, tier in enumerate(torrent.announce_urls):
            lines.append(f"tier {i}: {', '.join(tier)}")
    else:
        lines.append("trackers: (none)")
    if show_files:
        for fd in torrent.files:
            lines.append(f"  {fd.path} ({fd.length} bytes, pieces {fd.start_piece_index}-{fd.end_piece_index})")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the metadata stored in a .torrent file.")
    parser.add_argument("torrent", type=Path, help="Path to the .torrent file")
    parser.add_argument("--files", action="store_true", help="List files with their piece ranges")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        torrent = load_torrent(args.torrent)
    except FileNotFoundError:
        logging.error("Torrent file not found: %s", args.torrent)
        return 1
    except TorrentError as e:
        logging.error("Invalid torrent %s: %s", args.torrent, e)
        return 1

    print(format_summary(torrent, show_files=args.files))
    return 0


if __name__ == "__main__":
    sys.exit(main())
