"""Turn the single CLI argument into a file that can be uploaded."""

import os
import stat
from dataclasses import dataclass

from imgbed.archive import compress_folder, temp_name
from imgbed.exceptions import InputError

FILE = "file"
FOLDER = "folder"
TEXT = "text"
SPECIAL = "special"  # fifo, device, socket


@dataclass(frozen=True)
class UploadSource:
    path: str
    temporary: bool = False
    kind: str = FILE

    @property
    def size(self) -> int:
        return os.stat(self.path).st_size


def classify_input(arg: str) -> str:
    """FOLDER, FILE (regular files only), SPECIAL, or TEXT when ``arg``
    cannot be stat'ed for any reason."""
    try:
        st = os.stat(arg)
    except (OSError, ValueError):
        return TEXT
    if stat.S_ISDIR(st.st_mode):
        return FOLDER
    if stat.S_ISREG(st.st_mode):
        return FILE
    return SPECIAL


def write_text_file(text: str, temp_dir=None) -> str:
    """Write ``text`` verbatim (no trailing newline) to a fresh .txt file."""
    path = temp_name(".txt", temp_dir)
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(text)
    return str(path)


def prepare_source(arg: str, kind=None, temp_dir=None) -> UploadSource:
    kind = kind or classify_input(arg)
    if kind == FOLDER:
        return UploadSource(compress_folder(arg, temp_dir), temporary=True, kind=FOLDER)
    if kind == TEXT:
        return UploadSource(write_text_file(arg, temp_dir), temporary=True, kind=TEXT)
    if kind == SPECIAL:
        raise InputError(f"not a regular file or folder: {arg}")
    return UploadSource(arg, kind=FILE)
