"""Top-level .torrent decoding."""

import logging
import random
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import BinaryIO

from torrent_metainfo.announce import build_announce_tiers
from torrent_metainfo.bencode import compute_info_hash, decode_document, prefer_utf8, text
from torrent_metainfo.errors import InvalidFieldValueError, MalformedDocumentError
from torrent_metainfo.files import assign_piece_ranges
from torrent_metainfo.info import decode_info
from torrent_metainfo.torrent import Torrent

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_metainfo(root: dict, rng: random.Random | None = None, torrent_path: str | None = None) -> Torrent:
    """Build a Torrent from an already decoded top-level dict."""
    info = None
    info_hash = None
    announce = None
    announce_list = None
    creation_date = None
    created_by = None
    encoding = None
    azureus_properties = None
    nodes = None

    for key, value in root.items():
        match key:
            case b"info":
                if not isinstance(value, dict):
                    raise MalformedDocumentError("Missing or invalid 'info' dict")
                info_hash = compute_info_hash(value)
                info = decode_info(value)
            case b"announce":
                announce = value
            case b"announce-list":
                announce_list = value
            case b"creation date":
                if isinstance(value, int):
                    try:
                        creation_date = EPOCH + timedelta(seconds=value)
                    except OverflowError as e:
                        raise InvalidFieldValueError("creation date", f"'creation date' out of range: {value}") from e
            case b"created by":
                created_by = text(value)
            case b"encoding":
                encoding = text(value)
            case b"azureus_properties":
                azureus_properties = value
            case b"nodes":
                nodes = value
            case b"comment" | b"comment.utf-8" | b"publisher-url" | b"publisher-url.utf-8":
                pass  # resolved below, the .utf-8 variant wins regardless of key order
            case _:
                logger.debug("Ignoring top-level key %r", key)

    if info is None:
        raise MalformedDocumentError("Missing or invalid 'info' dict")

    # piece ranges need the complete file list
    files = assign_piece_ranges(list(info.files), info.piece_length)

    torrent = Torrent(
        info_hash=info_hash,
        name=info.name,
        size=info.size,
        piece_length=info.piece_length,
        pieces=info.pieces,
        files=files,
        announce_urls=build_announce_tiers(announce, announce_list, rng),
        is_private=info.is_private,
        is_multi_file=info.is_multi_file,
        comment=prefer_utf8(root, b"comment"),
        created_by=created_by,
        creation_date=creation_date,
        encoding=encoding,
        publisher=info.publisher,
        publisher_url=prefer_utf8(root, b"publisher-url") or info.publisher_url,
        source=info.source,
        sha1=info.sha1,
        ed2k=info.ed2k,
        azureus_properties=azureus_properties,
        nodes=nodes,
        torrent_path=torrent_path,
    )
    logger.info(
        "Decoded torrent %s: %s (%d files, %d bytes, %d pieces)",
        torrent.info_hash_hex,
        torrent.name,
        len(files),
        torrent.size,
        torrent.pieces.count,
    )
    return torrent


def decode_torrent(raw: bytes, rng: random.Random | None = None) -> Torrent:
    """Decode a bencoded .torrent document."""
    return parse_metainfo(decode_document(raw), rng)


def read_torrent(stream: BinaryIO, rng: random.Random | None = None) -> Torrent:
    return decode_torrent(stream.read(), rng)


def load_torrent(torrent_path: str | Path, rng: random.Random | None = None) -> Torrent:
    """Read and decode a .torrent file from disk."""
    logger.info("Parsing torrent file: %s", torrent_path)
    raw = Path(torrent_path).read_bytes()
    return parse_metainfo(decode_document(raw), rng, torrent_path=str(torrent_path))
