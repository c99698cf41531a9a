"""Upload a file, a folder (zipped) or a piece of text to an image bed."""

__version__ = "0.1.0"
