"""
Shared fixtures: builders that write real DOCX, PPTX and PDF files to tmp_path.
"""
from pathlib import Path
from typing import Sequence

import pytest
from docx import Document
from pptx import Presentation

BLANK_LAYOUT = 6
TITLE_ONLY_LAYOUT = 5


def build_pdf(page_texts: Sequence[str], reverse_object_ids: bool = False) -> bytes:
    """
    Assemble a minimal PDF with one Helvetica text line per page.

    With reverse_object_ids, page objects are numbered in the opposite order
    to their position in the page tree.
    """
    count = len(page_texts)
    page_ids = [4 + 2 * i for i in range(count)]
    content_ids = [5 + 2 * i for i in range(count)]
    if reverse_object_ids:
        page_ids.reverse()
        content_ids.reverse()

    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for page_id, content_id, text in zip(page_ids, content_ids, page_texts):
        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
        ).encode()
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode() if text else b""
        objects[content_id] = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for number in sorted(objects):
        offsets[number] = len(out)
        out += b"%d 0 obj\n" % number + objects[number] + b"\nendobj\n"

    xref_pos = len(out)
    size = max(objects) + 1
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for number in range(1, size):
        out += b"%010d 00000 n \n" % offsets[number]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_pos)
    return bytes(out)


@pytest.fixture
def make_pdf(tmp_path):
    def _make(page_texts: Sequence[str], name: str = "document.pdf", reverse_object_ids: bool = False) -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(page_texts, reverse_object_ids))
        return path
    return _make


@pytest.fixture
def make_docx(tmp_path):
    def _make(paragraphs: Sequence[str], name: str = "document.docx") -> Path:
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        path = tmp_path / name
        doc.save(str(path))
        return path
    return _make


@pytest.fixture
def make_pptx(tmp_path):
    """
    Build a deck from (slide_title, notes) pairs.

    A None or empty title gives a slide with no text; None notes leaves the
    slide without a notes page.
    """
    def _make(slides: Sequence[tuple], name: str = "deck.pptx") -> Path:
        prs = Presentation()
        for title, notes in slides:
            if title:
                slide = prs.slides.add_slide(prs.slide_layouts[TITLE_ONLY_LAYOUT])
                slide.shapes.title.text = title
            else:
                slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
            if notes is not None:
                slide.notes_slide.notes_text_frame.text = notes
        path = tmp_path / name
        prs.save(str(path))
        return path
    return _make


@pytest.fixture
def write_bytes(tmp_path):
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
