"""Per-file layout: decoding the 'files' list and assigning piece ranges."""

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from torrent_metainfo.bencode import raw_bytes, text
from torrent_metainfo.errors import InvalidFieldValueError, MissingRequiredFieldError

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


class Priority(IntEnum):
    DO_NOT_DOWNLOAD = 0
    LOWEST = 1
    LOW = 2
    NORMAL = 4
    HIGH = 8
    HIGHEST = 16
    IMMEDIATE = 32


@dataclass(frozen=True)
class FileDescriptor:
    path: str
    length: int
    md5sum: bytes | None = None
    ed2k: bytes | None = None
    sha1: bytes | None = None
    start_piece_index: int = 0
    end_piece_index: int = 0
    priority: Priority = Priority.NORMAL


def _length(dct: dict, field: str = "length") -> int:
    length = dct.get(b"length")
    if not isinstance(length, int):
        raise MissingRequiredFieldError(field)
    if length < 0:
        raise InvalidFieldValueError(field, f"'{field}' must be >= 0, got {length}")
    return length


def _join_path(parts, field: str) -> str | None:
    if not isinstance(parts, list) or not parts:
        return None
    segments: list[str] = []
    for part in parts:
        segment = text(part)
        if segment is None:
            raise InvalidFieldValueError(field, f"Path segment in '{field}' is not a string")
        segments.append(segment)
    return PATH_SEPARATOR.join(segments).rstrip(PATH_SEPARATOR)


def decode_file_entry(entry: dict, index: int) -> FileDescriptor:
    length = _length(entry, f"files[{index}].length")
    # path.utf-8 wins over path whenever it yields a non-empty path
    path = _join_path(entry.get(b"path.utf-8"), f"files[{index}].path.utf-8")
    if not path:
        path = _join_path(entry.get(b"path"), f"files[{index}].path")
    if not path:
        raise MissingRequiredFieldError(f"files[{index}].path")
    return FileDescriptor(
        path=path,
        length=length,
        md5sum=raw_bytes(entry.get(b"md5sum")),
        ed2k=raw_bytes(entry.get(b"ed2k")),
        sha1=raw_bytes(entry.get(b"sha1")),
    )


def decode_file_list(entries: list) -> tuple[list[FileDescriptor], int]:
    """Decode a multi-file 'files' list in declaration order.

    Returns the draft descriptors (piece ranges not yet assigned) and the
    total size in bytes.
    """
    files: list[FileDescriptor] = []
    total = 0
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidFieldValueError(f"files[{i}]", f"File entry {i} is not a dict")
        fd = decode_file_entry(entry, i)
        files.append(fd)
        total += fd.length
    logger.debug("Decoded %d file entries (%d bytes)", len(files), total)
    return files, total


def single_file(info: dict, name: str) -> FileDescriptor:
    """Synthesize the one-entry file list of a single-file torrent."""
    return FileDescriptor(
        path=name,
        length=_length(info),
        md5sum=raw_bytes(info.get(b"md5sum")),
        ed2k=raw_bytes(info.get(b"ed2k")),
        sha1=raw_bytes(info.get(b"sha1")),
    )


def assign_piece_ranges(files: list[FileDescriptor], piece_length: int) -> tuple[FileDescriptor, ...]:
    """Return new descriptors carrying inclusive [start, end] piece indices.

    Adjacent files may share the piece that straddles their boundary, so each
    file starts at the previous file's end piece. A file whose cumulative end
    lands exactly on a piece boundary ends at the piece before it.

    When the whole torrent is zero bytes there are no pieces, yet every file
    still reports the range (0, 0); consumers should check the piece count
    before indexing the hash table.
    """
    if piece_length <= 0:
        raise InvalidFieldValueError("piece length", f"'piece length' must be > 0, got {piece_length}")
    result: list[FileDescriptor] = []
    start = 0
    consumed = 0
    for fd in files:
        consumed += fd.length
        end = consumed // piece_length
        if consumed % piece_length == 0:
            end -= 1
        # zero-length files (and a zero-length first file) stay on the current piece
        end = max(end, start)
        result.append(replace(fd, start_piece_index=start, end_piece_index=end))
        start = end
    return tuple(result)
