import io
import re

import pdfplumber

_BLANK_RUNS_RE = re.compile(r"\n{3,}")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, collapsing runs of blank lines."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return _BLANK_RUNS_RE.sub("\n\n", "\n".join(pages)).strip()
