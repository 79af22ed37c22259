import io
import zipfile

import pytest
from docx import Document
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls

from docextract.domain import DecodeError, FileReadError
from docextract.services.text_extractors import DOCXExtractor


def test_paragraphs_joined_in_document_order(make_docx):
    path = make_docx(["First paragraph", "Second paragraph", "Third"])
    assert DOCXExtractor().extract(path) == "First paragraph\nSecond paragraph\nThird"


def test_raw_text_is_not_trimmed(make_docx):
    path = make_docx(["  Hello world  ", ""])
    assert DOCXExtractor().extract(path) == "  Hello world  \n"


def test_table_text_appears_where_the_table_sits(tmp_path):
    doc = Document()
    doc.add_paragraph("Intro")
    table = doc.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "A1"
    table.cell(0, 1).text = "B1"
    doc.add_paragraph("Outro")
    path = tmp_path / "table.docx"
    doc.save(str(path))

    assert DOCXExtractor().extract(path).split("\n") == ["Intro", "A1", "B1", "Outro"]


def test_merged_cells_are_read_once(tmp_path):
    doc = Document()
    table = doc.add_table(rows=1, cols=3)
    merged = table.cell(0, 0).merge(table.cell(0, 1))
    merged.text = "Merged"
    table.cell(0, 2).text = "Single"
    path = tmp_path / "merged.docx"
    doc.save(str(path))

    text = DOCXExtractor().extract(path)
    assert text.count("Merged") == 1
    assert "Single" in text


def test_empty_document(make_docx):
    assert DOCXExtractor().extract(make_docx([])).strip() == ""


def test_not_a_zip_raises_decode_error(write_bytes):
    path = write_bytes("report.docx", b"definitely not a zip archive")
    with pytest.raises(DecodeError):
        DOCXExtractor().extract(path)


def test_zip_without_document_part_raises_decode_error(write_bytes):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("hello.txt", "not a word document")
    path = write_bytes("report.docx", buffer.getvalue())
    with pytest.raises(DecodeError):
        DOCXExtractor().extract(path)


def test_missing_file_raises_file_read_error(tmp_path):
    with pytest.raises(FileReadError):
        DOCXExtractor().extract(tmp_path / "missing.docx")


def test_content_controls_and_tracked_changes(tmp_path):
    doc = Document()
    before = doc.add_paragraph("Before")
    revised = doc.add_paragraph("Kept ")
    doc.add_paragraph("After")
    before._p.addnext(parse_xml(
        f'<w:sdt {nsdecls("w")}><w:sdtContent>'
        f'<w:p><w:r><w:t>InsideControl</w:t></w:r></w:p>'
        f'</w:sdtContent></w:sdt>'
    ))
    revised._p.append(parse_xml(
        f'<w:ins {nsdecls("w")} w:id="1" w:author="Editor">'
        f'<w:r><w:t>Inserted</w:t></w:r></w:ins>'
    ))
    revised._p.append(parse_xml(
        f'<w:del {nsdecls("w")} w:id="2" w:author="Editor">'
        f'<w:r><w:delText>Removed</w:delText></w:r></w:del>'
    ))
    path = tmp_path / "revised.docx"
    doc.save(str(path))

    text = DOCXExtractor().extract(path)

    assert text.split("\n") == ["Before", "InsideControl", "Kept Inserted", "After"]
    assert "Removed" not in text


def test_tabs_and_breaks_inside_runs(tmp_path):
    doc = Document()
    paragraph = doc.add_paragraph()
    run = paragraph.add_run("Name")
    run.add_tab()
    paragraph.add_run("Value").add_break()
    paragraph.add_run("Next line")
    path = tmp_path / "runs.docx"
    doc.save(str(path))

    assert DOCXExtractor().extract(path) == "Name\tValue\nNext line"
