"""
File Processing Service - Turns an uploaded file into normalized plain text.

This is the single boundary where extractor failures become ExtractionResult
values: callers always get a result back, never an exception.
"""
from pathlib import Path
from typing import List, Optional, Union

from .format_resolver import DEFAULT_FORMAT_TABLE, FormatTable, extension_of
from .text_extractors import TextExtractorFactory
from ..core.logging_config import get_logger
from ..domain.entities import ExtractionRequest, ExtractionResult
from ..domain.exceptions import ExtractionError, error_kind_for
from ..domain.value_objects import ErrorKind, SupportedFormat

logger = get_logger(__name__)


class FileProcessingService:
    """
    Dispatcher for text extraction.
    
    Resolves the format from the original file name, runs the matching
    extractor on the stored file and wraps the outcome. Holds only its
    immutable format table and extractor factory.
    """
    
    def __init__(
        self,
        format_table: FormatTable = DEFAULT_FORMAT_TABLE,
        extractor_factory: Optional[TextExtractorFactory] = None
    ):
        """
        Initialize file processing service.
        
        Args:
            format_table: Extension to format mapping
            extractor_factory: Extractor registry (defaults to the built-in extractors)
        """
        self.format_table = format_table
        self.extractor_factory = extractor_factory or TextExtractorFactory()
    
    def extract_text(self, request: ExtractionRequest) -> ExtractionResult:
        """
        Extract text from an uploaded file.
        
        Args:
            request: File path plus the original file name
        
        Returns:
            ExtractionResult.ok(trimmed text) or ExtractionResult.err(kind, message)
        """
        file_format = self.format_table.resolve(request.original_name)
        
        if file_format is None:
            ext = extension_of(request.original_name)
            logger.warning(f"Unsupported file type attempted: {request.original_name} (extension: {ext})")
            return ExtractionResult.err(
                ErrorKind.UNSUPPORTED_FORMAT,
                f"Unsupported file type: {ext}. "
                f"Supported types: {', '.join(self.list_supported_extensions())}"
            )
        
        extractor = self.extractor_factory.get_extractor(file_format)
        logger.debug(f"Extracting text from {request.original_name} using {extractor.format_name} extractor")
        
        try:
            raw_text = extractor.extract(request.file_path)
        except ExtractionError as e:
            logger.error(
                f"Error extracting text from {request.original_name} ({extractor.format_name}): {e}",
                exc_info=True
            )
            return ExtractionResult.err(error_kind_for(e), f"Failed to extract text: {e}")
        except Exception as e:
            logger.error(
                f"Unexpected error extracting text from {request.original_name} ({extractor.format_name}): {e}",
                exc_info=True
            )
            return ExtractionResult.err(error_kind_for(e), f"Failed to extract text: {e}")
        
        text = raw_text.strip()
        logger.info(f"Successfully extracted {len(text)} characters from {request.original_name} ({extractor.format_name})")
        return ExtractionResult.ok(text)
    
    def is_supported(self, file_name: str) -> bool:
        return self.format_table.is_supported(file_name)
    
    def list_supported_extensions(self) -> List[str]:
        return self.format_table.extensions()
    
    def format_of(self, file_name: str) -> Union[SupportedFormat, str]:
        return self.format_table.format_of(file_name)


_default_service: Optional[FileProcessingService] = None


def get_file_processing_service() -> FileProcessingService:
    """Get the shared service built from the default format table."""
    global _default_service
    if _default_service is None:
        _default_service = FileProcessingService()
    return _default_service


def extract_text(file_path: Union[str, Path], original_name: str) -> ExtractionResult:
    """
    Extract text from a stored upload.
    
    Args:
        file_path: Path of the stored file
        original_name: Client-side file name, used only for extension sniffing
    
    Returns:
        ExtractionResult
    """
    return get_file_processing_service().extract_text(ExtractionRequest(file_path, original_name))


def is_supported(file_name: str) -> bool:
    return get_file_processing_service().is_supported(file_name)


def list_supported_extensions() -> List[str]:
    return get_file_processing_service().list_supported_extensions()


def format_of(file_name: str) -> Union[SupportedFormat, str]:
    return get_file_processing_service().format_of(file_name)
