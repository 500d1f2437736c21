"""Decoding of the 'info' dictionary."""

from dataclasses import dataclass

from torrent_metainfo.bencode import prefer_utf8, raw_bytes, text
from torrent_metainfo.errors import InvalidFieldValueError, MissingRequiredFieldError
from torrent_metainfo.files import FileDescriptor, decode_file_list, single_file
from torrent_metainfo.hashes import PieceHashes


@dataclass(frozen=True)
class InfoSection:
    name: str
    piece_length: int
    pieces: PieceHashes
    files: tuple[FileDescriptor, ...]
    size: int
    is_private: bool
    is_multi_file: bool
    publisher: str | None = None
    publisher_url: str | None = None
    source: str | None = None
    sha1: bytes | None = None
    ed2k: bytes | None = None


def _piece_length(info: dict) -> int:
    piece_length = info.get(b"piece length")
    if not isinstance(piece_length, int):
        raise MissingRequiredFieldError("piece length")
    if piece_length <= 0:
        raise InvalidFieldValueError("piece length", f"'piece length' must be > 0, got {piece_length}")
    return piece_length


def _pieces(info: dict) -> PieceHashes:
    pieces_raw = raw_bytes(info.get(b"pieces"))
    if pieces_raw is None:
        raise MissingRequiredFieldError("pieces")
    return PieceHashes(pieces_raw)


def decode_info(info: dict) -> InfoSection:
    """Decode piece layout and file list from an info dict.

    A non-empty 'files' list makes the torrent multi-file; otherwise the
    info-level 'length' (and checksums) describe a single file named 'name'.
    The returned files are drafts: piece ranges are not assigned yet.
    """
    piece_length = _piece_length(info)
    pieces = _pieces(info)
    name = prefer_utf8(info, b"name") or ""

    entries = info.get(b"files")
    if entries is not None and not isinstance(entries, list):
        raise InvalidFieldValueError("files", "'files' must be a list")

    if entries:
        draft, size = decode_file_list(entries)
        is_multi_file = True
    else:
        draft = [single_file(info, name)]
        size = draft[0].length
        is_multi_file = False

    return InfoSection(
        name=name,
        piece_length=piece_length,
        pieces=pieces,
        files=tuple(draft),
        size=size,
        is_private=info.get(b"private") == 1,
        is_multi_file=is_multi_file,
        publisher=prefer_utf8(info, b"publisher"),
        publisher_url=prefer_utf8(info, b"publisher-url"),
        source=text(info.get(b"source")),
        sha1=raw_bytes(info.get(b"sha1")),
        ed2k=raw_bytes(info.get(b"ed2k")),
    )
