"""
Single multipart POST to the image bed.

Body fields:
  file    the file content, streamed through ProgressReader
  sha256  hex digest of the same file, computed in a separate pass first

The service answers with a JSON list like [{"src": "/file/abc.png"}]; the
first ``src`` is joined to the endpoint origin. Anything else is shown raw.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

import requests
from requests_toolbelt.multipart.encoder import MultipartEncoder

from imgbed.checksum import sha256_file
from imgbed.config import UploadConfig
from imgbed.exceptions import UploadError
from imgbed.progress import ProgressReader

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    status_code: int
    reason: str
    body: bytes
    url: Optional[str] = None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def parse_upload_response(body: bytes, origin: str) -> Optional[str]:
    """URL of the first record's ``src``, or None if the body has no usable one."""
    try:
        records = json.loads(body)
    except ValueError:
        return None
    if not isinstance(records, list) or not records:
        return None
    first = records[0]
    if not isinstance(first, dict):
        return None
    src = first.get("src")
    if not isinstance(src, str) or not src:
        return None
    return origin + src


def remove_temp_file(path, out=None):
    try:
        os.remove(path)
    except OSError as e:
        print(f"Warning: failed to remove temp file: {e}", file=out or sys.stderr)
        return False
    logger.debug("removed temp file %s", path)
    return True


def send(path, config: UploadConfig, out=None) -> UploadResult:
    try:
        size = os.stat(path).st_size
    except OSError as e:
        raise UploadError(f"file not found: {path}", e) from e

    try:
        fh = open(path, "rb")
    except OSError as e:
        raise UploadError("failed to open file", e) from e

    with fh:
        try:
            digest = sha256_file(path)
        except OSError as e:
            raise UploadError("failed to calculate SHA256", e) from e
        logger.debug("sha256 %s = %s", path, digest)

        reader = ProgressReader(fh, size, out=out)
        try:
            encoder = MultipartEncoder(fields=[
                ("file", (os.path.basename(path), reader, "application/octet-stream")),
                ("sha256", digest),
            ])
        except (OSError, ValueError) as e:
            raise UploadError("failed to build multipart body", e) from e

        logger.info("POST %s (%d bytes)", config.upload_url, size)
        try:
            resp = requests.post(
                config.upload_url,
                params=config.query_params(),
                data=encoder,
                headers=config.headers(encoder.content_type),
                timeout=config.timeout,
                stream=True,
            )
        except (requests.RequestException, OSError) as e:
            raise UploadError("upload failed", e) from e
        finally:
            # end the \r progress line
            print(file=out or sys.stdout)

    with resp:
        try:
            body = resp.content
        except requests.RequestException as e:
            raise UploadError("failed to read response", e) from e

    return UploadResult(resp.status_code, resp.reason or "", body,
                        url=parse_upload_response(body, config.origin))


def upload_file(path, temporary=False, config=None, out=None) -> UploadResult:
    """Upload ``path`` and print the outcome.

    A temporary file is removed afterwards whether or not the upload worked;
    failing to remove it only prints a warning.
    """
    config = config or UploadConfig.from_env()
    out = out or sys.stdout
    try:
        result = send(path, config, out=out)
    finally:
        if temporary:
            remove_temp_file(path)

    print(f"\nStatus: {result.status_code} {result.reason}".rstrip(), file=out)
    if result.url:
        print(f"File URL: {result.url}", file=out)
    else:
        print(f"Response:\n{result.text}", file=out)
    return result
