from __future__ import annotations

from pathlib import Path

import pymupdf
import pytest

from bookcat.ingestion.pdf_text import PdfExtractionError, extract_pdf_text


def _build_pdf(path: Path, pages: list[list[str]], *, title: str | None = None) -> None:
    doc = pymupdf.open()
    for lines in pages:
        page = doc.new_page()
        for offset, line in enumerate(lines):
            page.insert_text((72, 72 + offset * 24), line)

    if title:
        doc.set_metadata({"title": title})

    doc.save(str(path))
    doc.close()


def test_extracts_text_from_every_page_in_order(tmp_path: Path) -> None:
    pdf_path = tmp_path / "sample.pdf"
    _build_pdf(pdf_path, [["First page text."], ["Second page text."]])

    pdf = extract_pdf_text(pdf_path)

    assert pdf.source_path == str(pdf_path)
    assert pdf.page_count == 2
    assert pdf.pages_read == 2
    assert pdf.text.index("First page text.") < pdf.text.index("Second page text.")


def test_reads_at_most_max_pages(tmp_path: Path) -> None:
    pdf_path = tmp_path / "long.pdf"
    _build_pdf(pdf_path, [[f"Page number {index}"] for index in range(1, 8)])

    pdf = extract_pdf_text(pdf_path, max_pages=3)

    assert pdf.page_count == 7
    assert pdf.pages_read == 3
    assert "Page number 3" in pdf.text
    assert "Page number 4" not in pdf.text


def test_document_info_is_cleaned(tmp_path: Path) -> None:
    pdf_path = tmp_path / "titled.pdf"
    _build_pdf(pdf_path, [["Body"]], title="  Collected   Works ")

    pdf = extract_pdf_text(pdf_path)

    assert pdf.info["title"] == "Collected Works"
    assert "author" not in pdf.info


def test_missing_file_raises_extraction_error(tmp_path: Path) -> None:
    missing = tmp_path / "nowhere.pdf"

    with pytest.raises(PdfExtractionError) as excinfo:
        extract_pdf_text(missing)

    assert excinfo.value.path == missing
    assert "PDF file not found" in str(excinfo.value)


def test_corrupt_file_raises_extraction_error(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"this is not a pdf at all")

    with pytest.raises(PdfExtractionError, match="Failed to extract text"):
        extract_pdf_text(broken)


def test_max_pages_must_be_positive(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        extract_pdf_text(tmp_path / "any.pdf", max_pages=0)
