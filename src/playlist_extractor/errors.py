# src/playlist_extractor/errors.py
from __future__ import annotations


class ExtractorError(Exception):
    """Base class for playlist_extractor errors."""


class PathNotFound(ExtractorError, FileNotFoundError):
    """The folder (or output directory) does not exist."""


class NotADirectory(ExtractorError, NotADirectoryError):
    """The path exists but is not a directory."""


class BadArgument(ExtractorError, ValueError):
    """Invalid command-line usage (e.g. an option missing its value)."""


class UnreadableFile(ExtractorError, OSError):
    """A scanned file could not be opened or read."""


class MalformedJson(ExtractorError, ValueError):
    """A scanned file is not valid JSON (the fallback may still recover fields)."""


class OutputWriteError(ExtractorError, OSError):
    """The report destination could not be written."""
