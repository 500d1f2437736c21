"""Thin wrapper around bencodepy plus value helpers shared by the decoders."""

import hashlib

import bencodepy

from torrent_metainfo.errors import MalformedDocumentError

INFO_HASH_SIZE = 20


def decode_document(raw: bytes) -> dict:
    """Decode raw bencoded bytes; the top level must be a dict."""
    try:
        root = bencodepy.decode(raw)
    except Exception as e:
        raise MalformedDocumentError(f"Failed to decode torrent: {e}") from e
    # bencodepy stops after the first value; the encoder keeps key order, so a
    # length mismatch means bytes were left over
    if len(bencodepy.encode(root)) != len(raw):
        raise MalformedDocumentError("Failed to decode torrent: data after valid prefix")
    if not isinstance(root, dict):
        raise MalformedDocumentError("Torrent root must be a dict")
    return root


def canonical(value):
    """Copy of a decoded value with every dict rebuilt in sorted key order."""
    if isinstance(value, dict):
        return {k: canonical(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [canonical(v) for v in value]
    return value


def compute_info_hash(info: dict) -> bytes:
    """SHA-1 of the canonical (sorted-key) encoding of the info dict."""
    return hashlib.sha1(bencodepy.encode(canonical(info))).digest()


def text(v) -> str | None:
    if not isinstance(v, (bytes, bytearray)):
        return None
    try:
        return bytes(v).decode("utf-8")
    except UnicodeDecodeError:
        return bytes(v).decode("utf-8", errors="replace")


def raw_bytes(v) -> bytes | None:
    if not isinstance(v, (bytes, bytearray)):
        return None
    return bytes(v)


def prefer_utf8(dct: dict, key: bytes) -> str | None:
    """Return '<key>.utf-8' when present and non-empty, else the legacy '<key>'."""
    utf8 = text(dct.get(key + b".utf-8"))
    if utf8:
        return utf8
    return text(dct.get(key))
