import logging
from pathlib import PurePath
from typing import Iterable, Optional

from src.config import get_settings
from src.services.pdf_service import get_pdf_parser


class UploadError(Exception):
    """Base error for files that cannot be attached to the project details"""


class UnsupportedFileError(UploadError):
    pass


class FileTooLargeError(UploadError):
    pass


class UnreadableFileError(UploadError):
    pass


def file_block(filename: str, text: str) -> str:
    """Delimited block appended to the details field"""
    return f"\n\n--- FILE CONTENTS ({filename}) ---\n{text}"


def read_upload(
    filename: str,
    content: bytes,
    allowed_extensions: Optional[Iterable[str]] = None,
    max_size: Optional[int] = None
) -> str:
    """
    Decode an uploaded README or source file into text.
    PDFs go through the PDF parser; everything else must be UTF-8.
    """
    settings = get_settings()
    allowed = [ext.lower() for ext in (allowed_extensions or settings.allowed_extensions)]
    limit = max_size if max_size is not None else settings.max_upload_size

    extension = PurePath(filename).suffix.lower()
    if extension not in allowed:
        raise UnsupportedFileError(f"File type not allowed: {extension or filename}")

    size = len(content)
    if size > limit:
        raise FileTooLargeError(f"File size too large: Maximum size {limit} bytes")

    if size == 0:
        raise UnreadableFileError("File is empty")

    if extension == ".pdf":
        try:
            text = get_pdf_parser().extract_text(content)
        except ValueError as e:
            raise UnreadableFileError(str(e)) from e
    else:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise UnreadableFileError(f"{filename} is not valid UTF-8 text") from e

    logging.info(f"Read upload {filename} ({size} bytes, {len(text)} chars)")
    return text
