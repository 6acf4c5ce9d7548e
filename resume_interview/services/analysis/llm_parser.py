import json
import logging
import re
from typing import Any

from resume_interview.core.exceptions import InvalidAnalysisFormatError

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
_CLOSING_FENCE = re.compile(r'\s*```$')


def strip_code_fences(raw_text: str) -> str:
    """Removes optional markdown code block markers around an LLM reply."""
    text = raw_text.strip()
    text = _OPENING_FENCE.sub('', text)
    text = _CLOSING_FENCE.sub('', text)
    return text.strip()


def parse_llm_json(raw_text: str) -> Any:
    """
    Parses the JSON payload of an LLM reply.

    Args:
        raw_text: The model output, possibly wrapped in ```json fences.

    Returns:
        The decoded JSON value.

    Raises:
        InvalidAnalysisFormatError: If no JSON document can be recovered.
    """
    if not raw_text or not raw_text.strip():
        raise InvalidAnalysisFormatError("The AI returned an empty response")

    text = strip_code_fences(raw_text)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        first_error = e

    # Fallback: the model wrapped the object in prose
    start_idx = text.find('{')
    end_idx = text.rfind('}')
    if start_idx != -1 and end_idx > start_idx:
        try:
            return json.loads(text[start_idx:end_idx + 1])
        except json.JSONDecodeError:
            pass

    logger.error(f"Could not parse AI response as JSON: {first_error}")
    logger.debug(f"Raw output (first 500 chars): {raw_text[:500]}...")
    raise InvalidAnalysisFormatError(
        "Failed to generate valid analysis format. Please try again.",
        details={"reason": str(first_error)},
    ) from first_error
