"""
DOCX Text Extractor.

Extracts paragraph text from DOCX files using python-docx library.
Every w:p of the document body is visited in document order, including
paragraphs inside tables, content controls (w:sdt) and text boxes. Run text
inside tracked insertions is kept; tracked deletions (w:delText) are not.
Headers, footers and images are not read.
"""
import io
from typing import List

from docx import Document as DocxDocument
from docx.oxml.ns import qn

from .base import BaseTextExtractor
from ...core.logging_config import get_logger
from ...domain.exceptions import DecodeError
from ...domain.value_objects import SupportedFormat

logger = get_logger(__name__)

W_P = qn("w:p")
W_T = qn("w:t")
W_TAB = qn("w:tab")
W_BR = qn("w:br")
W_CR = qn("w:cr")
W_PPR = qn("w:pPr")
# Legacy VML copy of a drawing; its Choice twin carries the same text
MC_FALLBACK = "{http://schemas.openxmlformats.org/markup-compatibility/2006}Fallback"


def _collect_run_text(element, parts: List[str]) -> None:
    for child in element:
        tag = child.tag
        if tag == W_P or tag == MC_FALLBACK or tag == W_PPR:
            # Nested paragraphs (text boxes) are emitted on their own;
            # pPr holds tab-stop definitions, not text
            continue
        if tag == W_T:
            parts.append(child.text or "")
        elif tag == W_TAB:
            parts.append("\t")
        elif tag == W_BR or tag == W_CR:
            parts.append("\n")
        else:
            _collect_run_text(child, parts)


def _paragraph_text(p) -> str:
    parts: List[str] = []
    _collect_run_text(p, parts)
    return "".join(parts)


def _in_fallback(p) -> bool:
    return any(ancestor.tag == MC_FALLBACK for ancestor in p.iterancestors())


class DOCXExtractor(BaseTextExtractor):
    """Extractor for DOCX files."""

    def __init__(self, max_file_size=None):
        super().__init__(SupportedFormat.DOCX, "DOCX", max_file_size)

    def extract_from_bytes(self, file_bytes: bytes) -> str:
        """
        Extract text from DOCX file.

        Args:
            file_bytes: DOCX file content as bytes

        Returns:
            Paragraph texts joined by newlines, in document order

        Raises:
            DecodeError: If the package or its main document part is unreadable
        """
        try:
            doc = DocxDocument(io.BytesIO(file_bytes))
            lines: List[str] = [
                _paragraph_text(p)
                for p in doc.element.body.iter(W_P)
                if not _in_fallback(p)
            ]
        except Exception as e:
            logger.debug(f"python-docx could not read package: {e!r}")
            raise DecodeError(f"Invalid DOCX document: {e}") from e

        logger.debug(f"DOCXExtractor: read {len(lines)} paragraphs")
        return "\n".join(lines)
