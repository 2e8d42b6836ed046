import string

import pytest

from genesis import hashing


def test_md5_shape():
    result = hashing.md5(b"hello")
    assert len(result) == 32
    assert result == result.upper()
    assert set(result) <= set(string.hexdigits.upper())


def test_md5_text_and_bytes_agree():
    assert hashing.md5("Genesis") == hashing.md5(b"Genesis")


def test_md5_text_is_utf8():
    assert hashing.md5("é") == hashing.md5("é".encode("utf-8"))


def test_md5_deterministic_and_distinct():
    first = hashing.md5(b"a")
    assert first == hashing.md5(b"a")
    assert first != hashing.md5(b"b")
    assert len(first) == 32


def test_file_md5_matches_md5(tmp_path):
    content = bytes(range(256)) * 100  # larger than one read chunk
    target = tmp_path / "blob.bin"
    target.write_bytes(content)
    assert hashing.file_md5(target) == hashing.md5(content)


def test_file_md5_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    assert hashing.file_md5(target) == hashing.md5(b"")


def test_file_md5_missing_file(tmp_path):
    assert hashing.file_md5(tmp_path / "missing") == ""


def test_crc16_empty_is_zero():
    assert hashing.crc16(b"") == 0


@pytest.mark.parametrize(
    "byte, expected",
    [(0x00, 0x0000), (0x01, 0x1021), (0x02, 0x2042), (0xFF, 0x1EF0)],
)
def test_crc16_single_byte_is_table_entry(byte, expected):
    assert hashing.crc16(bytes([byte])) == expected


def test_crc16_check_value():
    assert hashing.crc16(b"123456789") == 0x31C3


def test_crc16_range():
    assert 0 <= hashing.crc16(bytes(range(256)) * 3) <= 0xFFFF


def test_crc32_empty_is_zero():
    assert hashing.crc32(b"") == 0


def test_crc32_check_value():
    assert hashing.crc32(b"123456789") == 0xCBF43926


def test_crc32_accepts_bytearray():
    data = bytearray(b"abcdef")
    assert hashing.crc32(data) == hashing.crc32(bytes(data))
    assert 0 <= hashing.crc32(data) <= 0xFFFFFFFF