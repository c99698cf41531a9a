import hashlib

import pytest

from imgbed.checksum import BLOCK_SIZE, sha256_file


def test_matches_hashlib(tmp_path):
    data = bytes(range(256)) * (BLOCK_SIZE // 100)
    p = tmp_path / "blob.bin"
    p.write_bytes(data)
    assert sha256_file(p) == hashlib.sha256(data).hexdigest()


def test_two_passes_agree(tmp_path):
    p = tmp_path / "a.txt"
    p.write_text("same bytes twice")
    assert sha256_file(str(p)) == sha256_file(p)


def test_empty_file(tmp_path):
    p = tmp_path / "empty"
    p.write_bytes(b"")
    assert sha256_file(p) == hashlib.sha256(b"").hexdigest()


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        sha256_file(tmp_path / "nope")
