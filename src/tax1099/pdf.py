"""
Helpers for PDFs downloaded from Tax1099.
"""

from io import BytesIO
from typing import Iterable

from pypdf import PdfReader, PdfWriter


def count_pages(pdf_bytes: bytes) -> int:
    """Number of pages in a PDF document."""
    return len(PdfReader(BytesIO(pdf_bytes)).pages)


def merge_pdfs(documents: Iterable[bytes]) -> bytes:
    """
    Concatenate PDF documents into one, in order.

    Raises:
        ValueError: If no documents were given
    """
    writer = PdfWriter()
    merged = 0

    for pdf_bytes in documents:
        reader = PdfReader(BytesIO(pdf_bytes))
        for page in reader.pages:
            writer.add_page(page)
        merged += 1

    if merged == 0:
        raise ValueError("No PDF documents to merge")

    output = BytesIO()
    writer.write(output)
    return output.getvalue()
