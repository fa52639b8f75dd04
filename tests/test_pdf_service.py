import pytest

from src.services.pdf_service import PDFParser, get_pdf_parser


def test_garbage_bytes_raise_value_error():
    with pytest.raises(ValueError, match="Could not extract text"):
        get_pdf_parser().extract_text(b"this is not a pdf")


def test_falls_back_to_pypdf2(monkeypatch):
    monkeypatch.setattr(PDFParser, "_extract_with_pdfplumber", staticmethod(lambda content: ""))
    monkeypatch.setattr(PDFParser, "_extract_with_pypdf2", staticmethod(lambda content: "page one"))

    assert get_pdf_parser().extract_text(b"%PDF") == "page one"
