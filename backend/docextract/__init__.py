"""
docextract - Text extraction core for uploaded documents.

Resolves a document's format from its file name, dispatches to the matching
extractor (DOCX, PDF, PPT/PPTX) and returns a uniform ExtractionResult.
"""
from .domain import (
    ErrorKind,
    ExtractionRequest,
    ExtractionResult,
    SupportedFormat,
)
from .services.file_processing_service import (
    FileProcessingService,
    extract_text,
    format_of,
    is_supported,
    list_supported_extensions,
)

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "ExtractionRequest",
    "ExtractionResult",
    "SupportedFormat",
    "FileProcessingService",
    "extract_text",
    "format_of",
    "is_supported",
    "list_supported_extensions",
]
