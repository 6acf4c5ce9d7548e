"""
Format-specific text extractors for uploaded resume documents.

Each extractor takes the raw upload bytes and returns the document text. They
raise whatever their underlying library raises; wrapping into ParseFailureError
is done by the dispatcher in text_extractor.py.
"""

# Standard Library Imports
import io
import logging

# Third-Party Imports
import docx
import pypdf
from striprtf.striprtf import rtf_to_text

logger = logging.getLogger(__name__)


def pdf_text_extractor(data: bytes) -> str:
    """
    Extracts text from every page of a PDF using pypdf.

    Args:
        data: The PDF file content.

    Returns:
        Page texts joined by newlines.
    """
    reader = pypdf.PdfReader(io.BytesIO(data))
    text_parts = [page.extract_text() or "" for page in reader.pages]
    logger.info(f"Extracted {sum(len(part) for part in text_parts)} characters from {len(reader.pages)} PDF pages")
    return "\n".join(text_parts)


def docx_text_extractor(data: bytes) -> str:
    """
    Extracts paragraph and table text from an Office Open XML document.

    Args:
        data: The .docx file content.

    Returns:
        One line per paragraph, followed by one line per table cell.
    """
    document = docx.Document(io.BytesIO(data))
    lines = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.extend(cell.text for cell in row.cells)
    return "\n".join(lines)


def plain_text_extractor(data: bytes) -> str:
    """Decodes a text upload as UTF-8, dropping a BOM and replacing undecodable bytes."""
    return data.decode("utf-8-sig", errors="replace")


def rtf_text_extractor(data: bytes) -> str:
    """Parses RTF control words and returns the plain-text projection."""
    # RTF is 7-bit; non-ASCII characters arrive as \'hh or \uN escapes
    return rtf_to_text(data.decode("latin-1"))
