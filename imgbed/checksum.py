import hashlib
from pathlib import Path

BLOCK_SIZE = 65536


def sha256_file(path) -> str:
    h = hashlib.sha256()
    with Path(path).open("rb") as f:
        for block in iter(lambda: f.read(BLOCK_SIZE), b""):
            h.update(block)
    return h.hexdigest()
