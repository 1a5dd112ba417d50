import io

import pdfplumber


def extract_text_and_pages(pdf_bytes: bytes) -> tuple[str, int]:
    """Extract all text from a PDF file along with its page count."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip(), max(1, len(pages))
