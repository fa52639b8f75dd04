import io
import logging
import PyPDF2
import pdfplumber

class PDFParser:
    """
    PDF Text Extraction with fallback strategies
    """

    def extract_text(self, content: bytes) -> str:
        """Extract text from in-memory PDF bytes"""

        try:
            text = PDFParser._extract_with_pdfplumber(content)
            if text and text.strip():
                logging.info(f"Extracted {len(text)} char using pdfplumber")
                return text
        except Exception as e:
            logging.error(f"pdfplumber failed: {e}")

        try:
            text = PDFParser._extract_with_pypdf2(content)
            if text and text.strip():
                logging.info(f"Extracted {len(text)} char using PyPDF2")
                return text
        except Exception as e:
            logging.error(f"PyPDF2 failed: {e}")

        raise ValueError("Could not extract text from PDF")

    @staticmethod
    def _extract_with_pdfplumber(content: bytes) -> str:
        text_parts = []

        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)

        return "\n\n".join(text_parts)

    @staticmethod
    def _extract_with_pypdf2(content: bytes) -> str:
        text_parts = []
        reader = PyPDF2.PdfReader(io.BytesIO(content))

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return "\n\n".join(text_parts)

def get_pdf_parser() -> PDFParser:
    """Get PDFParser instance"""
    return PDFParser()
