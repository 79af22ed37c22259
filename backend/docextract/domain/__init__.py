"""
Domain layer - Contains the extraction core's value types and exceptions.
This layer is independent of parsing libraries and file access.
"""
from .entities import ExtractionRequest, ExtractionResult, SlideUnit
from .exceptions import (
    DecodeError,
    ExtractionError,
    FileReadError,
    FileTooLargeError,
    UnsupportedFormatError,
    error_kind_for,
)
from .value_objects import (
    UNKNOWN_FORMAT,
    ErrorKind,
    SlideUnitKind,
    SupportedFormat,
)

__all__ = [
    "ExtractionRequest",
    "ExtractionResult",
    "SlideUnit",
    "DecodeError",
    "ExtractionError",
    "FileReadError",
    "FileTooLargeError",
    "UnsupportedFormatError",
    "error_kind_for",
    "UNKNOWN_FORMAT",
    "ErrorKind",
    "SlideUnitKind",
    "SupportedFormat",
]
