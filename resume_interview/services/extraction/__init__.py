"""Resume document text extraction."""
from .text_extractor import SUPPORTED_FORMATS, extract_text, normalize_text

__all__ = [
    "SUPPORTED_FORMATS",
    "extract_text",
    "normalize_text",
]
