from unittest.mock import MagicMock, patch

import pytest

from services.pdf_parser import extract_text_and_pages


def _fake_pdf(*page_texts):
    pages = []
    for text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = text
        pages.append(page)
    opened = MagicMock()
    opened.__enter__.return_value.pages = pages
    return opened


@patch("services.pdf_parser.pdfplumber.open")
def test_extract_text_joins_pages(mock_open):
    mock_open.return_value = _fake_pdf("John Doe\nEngineer", None, "Skills\nPython  ")
    text, pages = extract_text_and_pages(b"%PDF-1.4")
    assert text == "John Doe\nEngineer\n\nSkills\nPython"
    assert pages == 3


@patch("services.pdf_parser.pdfplumber.open")
def test_extract_text_without_pages(mock_open):
    mock_open.return_value = _fake_pdf()
    assert extract_text_and_pages(b"%PDF-1.4") == ("", 1)


def test_extract_text_rejects_garbage():
    with pytest.raises(Exception):
        extract_text_and_pages(b"not a pdf at all")
