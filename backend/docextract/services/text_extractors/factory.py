"""
Text Extractor Factory.

Maps every SupportedFormat to exactly one extractor. The mapping is checked
for completeness when the factory is built, so adding a format without an
extractor fails at startup instead of at request time.
"""
from typing import Callable, Dict, Iterable, Mapping, Optional

from .base import BaseTextExtractor
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor
from .pptx_extractor import PPTXExtractor
from ...core.logging_config import get_logger
from ...domain.value_objects import SupportedFormat

logger = get_logger(__name__)

ExtractorBuilder = Callable[[Optional[int]], BaseTextExtractor]

DEFAULT_EXTRACTOR_BUILDERS: Mapping[SupportedFormat, ExtractorBuilder] = {
    SupportedFormat.DOCX: DOCXExtractor,
    SupportedFormat.PDF: PDFExtractor,
    SupportedFormat.PRESENTATION: PPTXExtractor,
}


class TextExtractorFactory:
    """
    Registry of one extractor per supported format.
    
    Instances are immutable after construction and hold no per-call state,
    so one factory can serve concurrent extractions.
    """
    
    def __init__(
        self,
        extractors: Optional[Iterable[BaseTextExtractor]] = None,
        max_file_size: Optional[int] = None
    ):
        """
        Initialize the factory.
        
        Args:
            extractors: Extractors to register (defaults to the built-in set)
            max_file_size: Size limit passed to built-in extractors
        
        Raises:
            ValueError: If a format has no extractor or more than one
        """
        if extractors is None:
            extractors = [build(max_file_size) for build in DEFAULT_EXTRACTOR_BUILDERS.values()]
        
        registry: Dict[SupportedFormat, BaseTextExtractor] = {}
        for extractor in extractors:
            if extractor.file_format in registry:
                raise ValueError(f"Duplicate extractor for format '{extractor.file_format.value}'")
            registry[extractor.file_format] = extractor
            logger.debug(f"Registered extractor for {extractor.file_format.value}: {extractor.format_name}")
        
        missing = [fmt.value for fmt in SupportedFormat if fmt not in registry]
        if missing:
            raise ValueError(f"No extractor registered for format(s): {', '.join(missing)}")
        
        self._extractors = registry
    
    def get_extractor(self, file_format: SupportedFormat) -> BaseTextExtractor:
        """
        Get the extractor for a format.
        
        Args:
            file_format: Resolved format
        
        Returns:
            Text extractor instance
        """
        return self._extractors[file_format]
