"""Errors raised by the imgbed uploader."""


class ImgbedError(Exception):
    """Base class; the CLI prints it and exits 1."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause is not None else message)


class ArchiveError(ImgbedError):
    """Raised when a folder cannot be zipped."""


class UploadError(ImgbedError):
    """Raised when the file cannot be read, sent, or its response read."""


class InputError(ImgbedError):
    """Raised when the argument names something that is neither a file nor a folder."""
