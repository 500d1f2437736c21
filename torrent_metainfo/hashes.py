"""Fixed-stride table of SHA-1 piece hashes."""

from collections.abc import Iterator

from torrent_metainfo.errors import InvalidPieceHashesError

PIECE_HASH_SIZE = 20


class PieceHashes:
    """Concatenated 20-byte piece hashes, indexed by piece number."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        if len(data) % PIECE_HASH_SIZE != 0:
            raise InvalidPieceHashesError(f"Invalid pieces hash list length: {len(data)} is not a multiple of {PIECE_HASH_SIZE}")
        self._data = bytes(data)

    @property
    def raw(self) -> bytes:
        return self._data

    @property
    def count(self) -> int:
        return len(self._data) // PIECE_HASH_SIZE

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> bytes:
        if not isinstance(index, int):
            raise TypeError(f"piece index must be int, not {type(index).__name__}")
        if index < 0 or index >= self.count:
            raise IndexError(f"piece index {index} out of range [0, {self.count})")
        start = index * PIECE_HASH_SIZE
        return self._data[start : start + PIECE_HASH_SIZE]

    def __iter__(self) -> Iterator[bytes]:
        for i in range(0, len(self._data), PIECE_HASH_SIZE):
            yield self._data[i : i + PIECE_HASH_SIZE]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceHashes):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"PieceHashes(count={self.count})"
