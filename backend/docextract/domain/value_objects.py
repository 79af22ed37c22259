"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from enum import Enum

# Returned by format_of() for names outside the supported set
UNKNOWN_FORMAT = "unknown"


class SupportedFormat(str, Enum):
    """Closed set of document formats the extractors understand."""
    DOCX = "docx"                  # flowed document (zipped WordprocessingML)
    PDF = "pdf"                    # page-description document
    PRESENTATION = "presentation"  # slide deck (zipped PresentationML)


class ErrorKind(str, Enum):
    """Stable failure categories carried by ExtractionResult."""
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    EXTRACTION_FAILED = "ExtractionFailed"
    IO_ERROR = "IOError"


class SlideUnitKind(str, Enum):
    """Kind of text block produced for a slide deck."""
    SLIDE = "Slide"
    NOTE = "Note"
