"""
Text Extractors Module - One extractor per supported document format.

To add support for a new file format:
1. Add a member to SupportedFormat and its extensions to the format table
2. Create an extractor class inheriting from BaseTextExtractor
3. Register it in DEFAULT_EXTRACTOR_BUILDERS
"""
from .base import BaseTextExtractor
from .factory import DEFAULT_EXTRACTOR_BUILDERS, TextExtractorFactory
from .pdf_extractor import PDFExtractor
from .docx_extractor import DOCXExtractor
from .pptx_extractor import PPTXExtractor

__all__ = [
    "BaseTextExtractor",
    "DEFAULT_EXTRACTOR_BUILDERS",
    "TextExtractorFactory",
    "PDFExtractor",
    "DOCXExtractor",
    "PPTXExtractor",
]
