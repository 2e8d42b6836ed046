"""Checksums: MD5 digests in hex, CRC-16 (XMODEM) and CRC-32."""

from __future__ import annotations

import hashlib
import os
import zlib

_CHUNK_SIZE = 8096


def _build_crc16_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index << 8
        for _ in range(8):
            crc = ((crc << 1) ^ 0x1021) if crc & 0x8000 else (crc << 1)
            crc &= 0xFFFF
        table.append(crc)
    return tuple(table)


_CRC16_TABLE = _build_crc16_table()


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _hex_digest(digest: bytes) -> str:
    # The digest is laid out as four 32-bit words whose bytes appear in
    # reversed order, as produced by the framework's native digest type.
    reordered = b"".join(digest[i:i + 4][::-1] for i in range(0, len(digest), 4))
    return reordered.hex().upper()


def md5(data: bytes | bytearray | memoryview | str) -> str:
    """Return the MD5 digest of ``data`` as 32 upper-case hex characters.

    Text is hashed as UTF-8. Each 4-byte word of the digest is written with
    its bytes reversed.
    """
    return _hex_digest(hashlib.md5(_as_bytes(data)).digest())


def file_md5(path: str | os.PathLike) -> str:
    """Return the MD5 digest of a file's content, like :func:`md5`.

    Returns an empty string when the file cannot be opened.
    """
    try:
        stream = open(path, "rb")
    except OSError:
        return ""
    digest = hashlib.md5()
    with stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return _hex_digest(digest.digest())


def crc16(data: bytes | bytearray | memoryview) -> int:
    """CRC-16 with polynomial 0x1021 and initial value 0 (XMODEM)."""
    crc = 0
    for byte in bytes(data):
        crc = _CRC16_TABLE[((crc >> 8) ^ byte) & 0xFF] ^ ((crc << 8) & 0xFFFF)
    return crc


def crc32(data: bytes | bytearray | memoryview) -> int:
    """Standard reflected CRC-32 (polynomial 0xEDB88320)."""
    return zlib.crc32(bytes(data)) & 0xFFFFFFFF