"""Test the piece hash table."""

import pytest

from torrent_metainfo.errors import InvalidPieceHashesError, TorrentError
from torrent_metainfo.hashes import PIECE_HASH_SIZE, PieceHashes


def _pieces(count: int) -> bytes:
    return b"".join(bytes([i]) * PIECE_HASH_SIZE for i in range(count))


def test_count_and_len():
    table = PieceHashes(_pieces(3))
    assert table.count == 3
    assert len(table) == 3


def test_empty_table():
    table = PieceHashes(b"")
    assert table.count == 0
    assert list(table) == []


def test_indexed_lookup_in_piece_order():
    table = PieceHashes(_pieces(3))
    assert table[0] == b"\x00" * 20
    assert table[2] == b"\x02" * 20


def test_index_out_of_range():
    table = PieceHashes(_pieces(2))
    with pytest.raises(IndexError):
        table[2]
    with pytest.raises(IndexError):
        table[-1]


def test_iteration_yields_each_hash():
    data = _pieces(4)
    assert b"".join(PieceHashes(data)) == data
    assert PieceHashes(data).raw == data


@pytest.mark.parametrize("size", [1, 19, 21, 39, 41])
def test_length_not_multiple_of_20_rejected(size: int):
    with pytest.raises(InvalidPieceHashesError):
        PieceHashes(b"x" * size)


def test_invalid_piece_hashes_is_torrent_error():
    with pytest.raises(TorrentError):
        PieceHashes(b"x" * 5)


def test_equality_by_content():
    assert PieceHashes(_pieces(2)) == PieceHashes(_pieces(2))
    assert PieceHashes(_pieces(2)) != PieceHashes(_pieces(3))
