"""
Custom exceptions for the extraction core.
Extractors raise these; only the dispatcher turns them into ExtractionResult values.
"""
from .value_objects import ErrorKind


class ExtractionError(Exception):
    """Base class for all extraction failures."""
    pass


class UnsupportedFormatError(ExtractionError):
    """Raised when a file name has no registered format."""
    pass


class DecodeError(ExtractionError):
    """Raised when a container or content stream cannot be parsed."""
    pass


class FileReadError(ExtractionError):
    """Raised when the file at the given path is missing or unreadable."""
    pass


class FileTooLargeError(ExtractionError):
    """Raised when a file exceeds the configured size limit."""
    pass


def error_kind_for(e: Exception) -> ErrorKind:
    """
    Map an exception to the error kind reported to callers.
    Keeps extractors free of result-building concerns.
    """
    if isinstance(e, UnsupportedFormatError):
        return ErrorKind.UNSUPPORTED_FORMAT
    elif isinstance(e, FileReadError):
        return ErrorKind.IO_ERROR
    else:
        return ErrorKind.EXTRACTION_FAILED
