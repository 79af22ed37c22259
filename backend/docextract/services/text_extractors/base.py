"""
Base Text Extractor Interface.

All text extractors must inherit from this base class and implement
the extract_from_bytes() method. File access lives here so every extractor
reads the file the same way and releases the handle before parsing starts.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ...core.config import MAX_FILE_SIZE
from ...core.logging_config import get_logger
from ...domain.exceptions import FileReadError, FileTooLargeError
from ...domain.value_objects import SupportedFormat

logger = get_logger(__name__)


class BaseTextExtractor(ABC):
    """
    Abstract base class for text extractors.
    
    Each supported format has its own extractor class that inherits
    from this base class and implements the extract_from_bytes() method.
    """
    
    def __init__(
        self,
        file_format: SupportedFormat,
        format_name: str,
        max_file_size: Optional[int] = None
    ):
        """
        Initialize the extractor.
        
        Args:
            file_format: Format this extractor handles
            format_name: Human-readable format name (e.g., 'PDF', 'DOCX')
            max_file_size: Size limit in bytes (defaults to MAX_FILE_SIZE; 0 disables)
        """
        self.file_format = file_format
        self.format_name = format_name
        self.max_file_size = MAX_FILE_SIZE if max_file_size is None else max_file_size
    
    def extract(self, file_path: Union[str, Path]) -> str:
        """
        Extract raw text from the file at file_path.
        
        Args:
            file_path: Path to the stored file
            
        Returns:
            Extracted text (not trimmed)
            
        Raises:
            FileReadError: If the file is missing or unreadable
            FileTooLargeError: If the file exceeds the size limit
            DecodeError: If the content cannot be parsed
        """
        file_bytes = self.read_file(Path(file_path))
        logger.debug(f"Read {len(file_bytes)} bytes from {Path(file_path).name} for {self.format_name} extraction")
        return self.extract_from_bytes(file_bytes)
    
    @abstractmethod
    def extract_from_bytes(self, file_bytes: bytes) -> str:
        """
        Extract text from file bytes.
        
        Args:
            file_bytes: Raw file content as bytes
            
        Returns:
            Extracted text content
            
        Raises:
            DecodeError: If the content cannot be parsed
        """
        pass
    
    def read_file(self, file_path: Path) -> bytes:
        """
        Read a file fully into memory.
        
        Args:
            file_path: Path to the stored file
        
        Returns:
            File contents as bytes
        
        Raises:
            FileReadError: If the file is missing or unreadable
            FileTooLargeError: If the file exceeds the size limit
        """
        if not file_path.exists():
            raise FileReadError(f"File not found: {file_path}")
        
        try:
            file_size = file_path.stat().st_size
            if self.max_file_size and file_size > self.max_file_size:
                raise FileTooLargeError(
                    f"File is too large: {file_size} bytes (limit {self.max_file_size} bytes)"
                )
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise FileReadError(f"Error reading file {file_path}: {e}") from e
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.file_format.value!r})"
