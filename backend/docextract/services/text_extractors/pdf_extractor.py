"""
PDF Text Extractor.

Extracts text from PDF files using pypdf library.
Pages are visited through the page tree, so output follows the declared
page order rather than object numbering. Text within a page is emitted in
content-stream order; no layout reconstruction is attempted.
"""
import io
from typing import List

from pypdf import PasswordType, PdfReader

from .base import BaseTextExtractor
from ...core.logging_config import get_logger
from ...domain.exceptions import DecodeError
from ...domain.value_objects import SupportedFormat

logger = get_logger(__name__)


class PDFExtractor(BaseTextExtractor):
    """Extractor for PDF files."""
    
    def __init__(self, max_file_size=None):
        super().__init__(SupportedFormat.PDF, "PDF", max_file_size)
    
    def extract_from_bytes(self, file_bytes: bytes) -> str:
        """
        Extract text from PDF file.
        
        Args:
            file_bytes: PDF file content as bytes
            
        Returns:
            Text of all pages concatenated in page order
            
        Raises:
            DecodeError: If the document is malformed or password-protected
        """
        try:
            reader = PdfReader(io.BytesIO(file_bytes))
            
            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise DecodeError("PDF is password-protected")
            
            page_texts: List[str] = []
            for page in reader.pages:
                page_texts.append(page.extract_text() or "")
                
        except DecodeError:
            raise
        except Exception as e:
            # pypdf surfaces structural damage as a mix of its own errors and builtins
            logger.debug(f"pypdf could not parse document: {e!r}")
            raise DecodeError(f"Invalid PDF document: {e}") from e
        
        logger.debug(f"PDFExtractor: extracted {len(page_texts)} pages")
        return "\n".join(page_texts)
