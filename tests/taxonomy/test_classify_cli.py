from __future__ import annotations

import json
from pathlib import Path

import pymupdf
import pytest

from bookcat.cli.classify_book import main as classify_book_main


def _write_pdf(path: Path, lines: list[str], *, title: str | None = None) -> None:
    doc = pymupdf.open()
    page = doc.new_page()
    for offset, line in enumerate(lines):
        page.insert_text((72, 72 + offset * 24), line)
    if title:
        doc.set_metadata({"title": title})
    doc.save(str(path))
    doc.close()


def test_cli_classifies_title_and_suggests_related_categories(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = classify_book_main(["--title", "Learning SQL"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["title"] == "Learning SQL"
    assert payload["category"] == "Technology"
    assert payload["analysis_method"] == "keyword_override"
    assert payload["suggested_categories"] == ["Science", "Business", "Education"]
    assert "metadata" not in payload


def test_cli_uses_pdf_text_to_reinforce(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    pdf_path = tmp_path / "notes.pdf"
    _write_pdf(pdf_path, ["Detective murder investigation clue"])

    exit_code = classify_book_main(["--title", "Untitled Notes", "--pdf", str(pdf_path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["category"] == "Mystery"
    assert payload["analysis_method"] == "pdf_analysis"
    assert payload["metadata"]["pages"] == 1


def test_cli_takes_title_from_pdf_metadata(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    pdf_path = tmp_path / "book.pdf"
    _write_pdf(pdf_path, ["Some body text"], title="Learning SQL Basics")

    exit_code = classify_book_main(["--pdf", str(pdf_path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["title"] == "Learning SQL Basics"
    assert payload["metadata"]["title"] == "Learning SQL Basics"
    assert payload["category"] == "Technology"


def test_cli_falls_back_to_title_when_pdf_is_missing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = classify_book_main(
        ["--title", "Untitled Notes", "--pdf", str(tmp_path / "missing.pdf")]
    )
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["category"] == "Fiction"
    assert payload["analysis_method"] == "title_description"
    assert "metadata" not in payload


def test_cli_requires_title_or_pdf() -> None:
    with pytest.raises(SystemExit) as excinfo:
        classify_book_main([])

    assert excinfo.value.code == 2


def test_cli_rejects_invalid_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("BOOKCAT_FALLBACK_THRESHOLD", "lots")

    exit_code = classify_book_main(["--title", "Anything"])

    assert exit_code == 1
    assert capsys.readouterr().out == ""
