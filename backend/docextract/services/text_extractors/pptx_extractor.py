"""
PPTX Text Extractor.

Extracts slide and speaker-note text from PowerPoint decks using python-pptx.
Every slide of the deck is visited in presentation order and numbered from 1;
notes pages take the number of the slide they belong to. Output lists all
slide blocks first, then all note blocks, each block headed by its number:

    Slide 1:
    <slide text>

    Note 1:
    <notes text>

Slides or notes without visible text produce no block at all. Images, charts
and diagrams are not captured.
"""
import io
from typing import Any, Iterable, List

from pptx import Presentation
from pptx.shapes.group import GroupShape

from .base import BaseTextExtractor
from ...core.logging_config import get_logger
from ...domain.entities import SlideUnit
from ...domain.exceptions import DecodeError
from ...domain.value_objects import SlideUnitKind, SupportedFormat

logger = get_logger(__name__)


def _extract_shape_text(shape: Any) -> List[str]:
    """Extract text lines from a single shape.

    Handles text-frame shapes, tables and (recursively) group shapes.

    Args:
        shape: A ``pptx.shapes.base.BaseShape`` instance.

    Returns:
        List of text lines (may be empty).
    """
    lines: List[str] = []

    if isinstance(shape, GroupShape):
        for member in shape.shapes:
            lines.extend(_extract_shape_text(member))
        return lines

    if shape.has_text_frame:
        for paragraph in shape.text_frame.paragraphs:
            text = paragraph.text.strip()
            if text:
                lines.append(text)

    if shape.has_table:
        for row in shape.table.rows:
            for cell in row.cells:
                text = cell.text.strip()
                if text:
                    lines.append(text)

    return lines


def _extract_slide_text(slide: Any) -> str:
    lines: List[str] = []
    for shape in slide.shapes:
        lines.extend(_extract_shape_text(shape))
    return "\n".join(lines)


def _extract_notes_text(slide: Any) -> str:
    if not slide.has_notes_slide:
        return ""
    notes_frame = slide.notes_slide.notes_text_frame
    if notes_frame is None:
        return ""
    return notes_frame.text.strip()


def collect_slide_units(slides: Iterable[Any]) -> List[SlideUnit]:
    """
    Build slide and note units for a deck, dropping empty ones.

    Args:
        slides: Slides in presentation order

    Returns:
        All slide units (ascending ordinal) followed by all note units
        (ascending ordinal)
    """
    slide_units: List[SlideUnit] = []
    note_units: List[SlideUnit] = []

    for ordinal, slide in enumerate(slides, start=1):
        slide_units.append(SlideUnit(ordinal, SlideUnitKind.SLIDE, _extract_slide_text(slide)))
        note_units.append(SlideUnit(ordinal, SlideUnitKind.NOTE, _extract_notes_text(slide)))

    return [unit for unit in slide_units + note_units if not unit.is_empty()]


def format_slide_units(units: Iterable[SlideUnit]) -> str:
    """Render units as 'Slide N:' / 'Note N:' blocks, slides before notes."""
    ordered = sorted(
        units,
        key=lambda unit: (unit.kind != SlideUnitKind.SLIDE, unit.ordinal_index)
    )
    return "".join(unit.render() for unit in ordered if not unit.is_empty())


class PPTXExtractor(BaseTextExtractor):
    """Extractor for PPT/PPTX slide decks."""
    
    def __init__(self, max_file_size=None):
        super().__init__(SupportedFormat.PRESENTATION, "PowerPoint", max_file_size)
    
    def extract_from_bytes(self, file_bytes: bytes) -> str:
        """
        Extract slide text followed by speaker-note text.
        
        Args:
            file_bytes: Presentation file content as bytes
            
        Returns:
            Formatted 'Slide N:' blocks followed by 'Note N:' blocks
            
        Raises:
            DecodeError: If the archive cannot be parsed or holds no slides
        """
        try:
            prs = Presentation(io.BytesIO(file_bytes))
            slides = list(prs.slides)
            if not slides:
                raise DecodeError("Presentation contains no slides")
            units = collect_slide_units(slides)
        except DecodeError:
            raise
        except Exception as e:
            logger.debug(f"python-pptx could not read deck: {e!r}")
            raise DecodeError(f"Invalid presentation: {e}") from e
        
        logger.debug(f"PPTXExtractor: {len(slides)} slides, {len(units)} non-empty text blocks")
        return format_slide_units(units)
