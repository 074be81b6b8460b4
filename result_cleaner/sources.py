"""
Raw text sources: text files, standard input, and saved PDF result pages.
"""

import sys
import logging
import pdfplumber
from typing import List, Optional, TextIO
from pathlib import Path

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"

# Pages are joined with a blank line so they never merge into one block
PAGE_SEPARATOR = "\n\n"


def read_text_file(path: str) -> str:
    """
    Read pasted text saved to a file.

    Args:
        path: Path to text file

    Returns:
        File contents
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    return Path(path).read_text(encoding="utf-8", errors="replace")


def read_stdin(stream: Optional[TextIO] = None) -> str:
    """Read all text from standard input (or the given stream)."""
    return (stream or sys.stdin).read()


def extract_text_from_pdf(pdf_path: str) -> str:
    """
    Extract the text of every page of a PDF.

    Useful for result pages saved with the browser's "Print to PDF".

    Args:
        pdf_path: Path to PDF file

    Returns:
        Text of all pages, separated by blank lines
    """
    if not Path(pdf_path).exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    pages: List[str] = []

    with pdfplumber.open(pdf_path) as pdf:
        for page_num, page in enumerate(pdf.pages):
            text = page.extract_text(x_tolerance=2, y_tolerance=2) or ""
            logger.debug(f"Page {page_num}: {len(text)} characters")
            pages.append(text)

    return PAGE_SEPARATOR.join(pages)


def load_text(source: str, pdf: bool = False) -> str:
    """
    Load raw text from a path, a PDF, or stdin.

    Args:
        source: File path, or "-" for standard input
        pdf: Treat the source as PDF regardless of its suffix

    Returns:
        Raw text
    """
    if source == STDIN_SOURCE:
        return read_stdin()

    if pdf or Path(source).suffix.lower() == ".pdf":
        return extract_text_from_pdf(source)

    return read_text_file(source)
