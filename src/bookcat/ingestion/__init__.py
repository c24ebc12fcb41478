"""PDF extraction hook for document-level category reinforcement."""

from .metadata import BookMetadata, extract_book_metadata
from .pdf_text import PdfExtractionError, PdfText, extract_pdf_text

__all__ = [
    "BookMetadata",
    "PdfExtractionError",
    "PdfText",
    "extract_book_metadata",
    "extract_pdf_text",
]
