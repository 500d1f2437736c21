"""The decoded torrent model."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from torrent_metainfo.bencode import INFO_HASH_SIZE
from torrent_metainfo.files import FileDescriptor
from torrent_metainfo.hashes import PieceHashes


@dataclass(frozen=True, eq=False)
class Torrent:
    """Immutable view of a .torrent document.

    Identity is the info hash alone: two torrents are equal when both carry a
    20-byte info hash and the bytes match, whatever their trackers or
    comments say. A torrent without a valid info hash equals nothing, not
    even itself.
    """

    info_hash: bytes | None
    name: str
    size: int
    piece_length: int
    pieces: PieceHashes
    files: tuple[FileDescriptor, ...]
    announce_urls: tuple[tuple[str, ...], ...] = ()
    is_private: bool = False
    is_multi_file: bool = False
    comment: str | None = None
    created_by: str | None = None
    creation_date: datetime | None = None
    encoding: str | None = None
    publisher: str | None = None
    publisher_url: str | None = None
    source: str | None = None
    sha1: bytes | None = None
    ed2k: bytes | None = None
    azureus_properties: Any = field(default=None, repr=False)
    nodes: Any = field(default=None, repr=False)
    torrent_path: str | None = None

    def _has_identity(self) -> bool:
        return isinstance(self.info_hash, bytes) and len(self.info_hash) == INFO_HASH_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Torrent):
            return NotImplemented
        if not (self._has_identity() and other._has_identity()):
            return False
        return self.info_hash == other.info_hash

    def __hash__(self) -> int:
        if self._has_identity():
            return hash(self.info_hash)
        return object.__hash__(self)

    def __iter__(self) -> Iterator[FileDescriptor]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __str__(self) -> str:
        return self.name

    @property
    def info_hash_hex(self) -> str | None:
        return self.info_hash.hex() if self.info_hash is not None else None

    def with_metadata(self, *, name: str | None = None, size: int | None = None) -> "Torrent":
        """Return a copy with name and/or size patched from another source."""
        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if size is not None:
            if size < 0:
                raise ValueError(f"size must be >= 0, got {size}")
            changes["size"] = size
        return replace(self, **changes)
