import logging
import os
import tempfile
import time
import zipfile
from pathlib import Path

from imgbed.exceptions import ArchiveError

logger = logging.getLogger(__name__)


def temp_name(suffix: str, temp_dir=None) -> Path:
    """<temp dir>/<unix nanoseconds><suffix>"""
    return Path(temp_dir or tempfile.gettempdir()) / f"{time.time_ns()}{suffix}"


def compress_folder(folder, temp_dir=None) -> str:
    """Zip every regular file under ``folder`` into a fresh temp archive.

    Entries are stored under their path relative to ``folder``; directories
    get no entry of their own. The partial archive is removed on failure.
    """
    root = Path(folder)
    zip_path = temp_name(".zip", temp_dir)

    def raise_walk_error(e):
        raise e

    try:
        with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED, strict_timestamps=False) as zf:
            for dirpath, _dirs, files in os.walk(root, onerror=raise_walk_error):
                for name in sorted(files):
                    file_path = Path(dirpath) / name
                    if not file_path.is_file():
                        continue  # fifos, sockets, devices
                    if os.path.abspath(file_path) == os.path.abspath(zip_path):
                        continue
                    arcname = file_path.relative_to(root).as_posix()
                    zf.write(file_path, arcname)
                    logger.debug("zipped %s", arcname)
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        zip_path.unlink(missing_ok=True)
        raise ArchiveError("failed to compress folder", e) from e

    return str(zip_path)
