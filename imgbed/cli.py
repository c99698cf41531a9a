#!/usr/bin/env python3
"""
imgbed — push a file, a folder or a note to the image bed.

Usage:
  imgbed photo.png          # upload the file
  imgbed ./screenshots      # zip the folder, upload the zip
  imgbed "hello world"      # write the text to a .txt, upload that

Settings come from IMGBED_* environment variables; flags win over them.
"""

import argparse
import logging
import sys

from imgbed import __version__
from imgbed.config import UploadConfig
from imgbed.exceptions import ImgbedError
from imgbed.inputs import FILE, FOLDER, TEXT, classify_input, prepare_source
from imgbed.uploader import upload_file

USAGE = """Usage: imgbed <file_path_or_folder_or_text>
  - If <file_path_or_folder_or_text> is a valid file path, upload that file
  - If it's a folder, compress it to zip and upload
  - Otherwise, create a text file with that content and upload it"""


# flags only count before the input; the first other token is the input
# verbatim, even if it starts with "-", and anything after it is ignored
VALUE_FLAGS = {"--endpoint", "--auth-token", "--channel", "--channel-name", "--timeout"}
BARE_FLAGS = {"-v", "--verbose", "-h", "--help", "--version"}


class ArgParser(argparse.ArgumentParser):
    def error(self, message):
        print(USAGE)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser():
    p = ArgParser(prog="imgbed", usage="imgbed [options] <file_path_or_folder_or_text>",
                  description="Upload a file, folder or text to the image bed")
    p.add_argument("--endpoint", help="image bed origin, e.g. https://img.example.com")
    p.add_argument("--auth-token", help="value sent in the authcode header")
    p.add_argument("--channel", dest="upload_channel", help="uploadChannel query value")
    p.add_argument("--channel-name", help="channelName query value")
    p.add_argument("--timeout", type=float, help="request timeout in seconds")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def split_argv(argv):
    """(leading flags, input or None)"""
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--":
            return argv[:i], argv[i + 1] if i + 1 < len(argv) else None
        name = tok.split("=", 1)[0]
        if name in VALUE_FLAGS:
            i += 1 if "=" in tok else 2
        elif tok in BARE_FLAGS:
            i += 1
        else:
            return argv[:i], tok
    return argv, None


def run(arg, config, temp_dir=None):
    kind = classify_input(arg)
    if kind == FOLDER:
        print(f"Compressing folder: {arg}")
    elif kind == FILE:
        print(f"Uploading file: {arg}")

    try:
        source = prepare_source(arg, kind=kind, temp_dir=temp_dir)
    except OSError as e:
        print(f"Error creating temp file: {e}", file=sys.stderr)
        return 1
    except ImgbedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if kind == FOLDER:
        print(f"Created zip file: {source.path}")
    elif kind == TEXT:
        print(f"Created temp file: {source.path}")
    if source.temporary:
        print("Uploading...")

    try:
        upload_file(source.path, temporary=source.temporary, config=config)
    except ImgbedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    flags, arg = split_argv(sys.argv[1:] if argv is None else list(argv))
    a = build_parser().parse_args(flags)
    if arg is None:
        print(USAGE)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if a.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = UploadConfig.from_env().override(
        endpoint=a.endpoint,
        auth_token=a.auth_token,
        upload_channel=a.upload_channel,
        channel_name=a.channel_name,
        timeout=a.timeout,
    )
    return run(arg, config)


if __name__ == "__main__":
    sys.exit(main())
