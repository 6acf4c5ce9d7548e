"""Upload-to-text dispatch and normalization."""

import logging
import re
from typing import Callable, Dict, NamedTuple

from resume_interview.core.exceptions import EmptyContentError, ParseFailureError, UnsupportedFormatError
from resume_interview.core.logger import log_execution_time
from resume_interview.services.extraction.extractors import (
    docx_text_extractor,
    pdf_text_extractor,
    plain_text_extractor,
    rtf_text_extractor,
)

logger = logging.getLogger(__name__)

_LINE_ENDINGS = re.compile(r'\r\n?')
_EXCESS_NEWLINES = re.compile(r'\n{3,}')
_WHITESPACE = re.compile(r'\s+')


class TextFormat(NamedTuple):
    name: str
    extractor: Callable[[bytes], str]


SUPPORTED_FORMATS: Dict[str, TextFormat] = {
    'application/pdf': TextFormat('PDF', pdf_text_extractor),
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': TextFormat('DOCX', docx_text_extractor),
    'application/msword': TextFormat('DOC', docx_text_extractor),
    'text/plain': TextFormat('TXT', plain_text_extractor),
    'application/rtf': TextFormat('RTF', rtf_text_extractor),
}


def normalize_text(text: str) -> str:
    """
    Collapses extracted text to a single line of single-spaced words.

    Line endings become '\\n', runs of three or more newlines become two, then
    every whitespace run (newlines included) becomes one space and the ends are trimmed.
    """
    text = _LINE_ENDINGS.sub('\n', text)
    text = _EXCESS_NEWLINES.sub('\n\n', text)
    text = _WHITESPACE.sub(' ', text)
    return text.strip()


@log_execution_time
def extract_text(data: bytes, mime_type: str) -> str:
    """
    Extracts normalized plain text from an uploaded document.

    Args:
        data: The uploaded file content.
        mime_type: The declared MIME type of the upload.

    Returns:
        Non-empty normalized text.

    Raises:
        UnsupportedFormatError: If mime_type is not one of SUPPORTED_FORMATS.
        ParseFailureError: If the format-specific extractor raised.
        EmptyContentError: If the document holds nothing but whitespace.
    """
    # Parameters such as "; charset=utf-8" do not change the format
    text_format = SUPPORTED_FORMATS.get(mime_type.split(";", 1)[0].strip().lower())
    if text_format is None:
        raise UnsupportedFormatError(mime_type)

    logger.info(f"Processing file type: {mime_type} ({len(data)} bytes)")
    try:
        raw_text = text_format.extractor(data)
    except Exception as e:
        logger.error(f"{text_format.name} parsing error: {e}", exc_info=True)
        raise ParseFailureError(text_format.name, e) from e

    text = normalize_text(raw_text or "")
    if not text:
        raise EmptyContentError()

    logger.info(f"Final text length: {len(text)}")
    return text
