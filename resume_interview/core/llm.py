"""
Gemini client configuration.

This module provides:
- A lazily created GenAI SDK client shared by the analysis service
- Generation config built from settings (model name, temperature)
"""
import logging
from typing import Optional

from google import genai
from google.genai import types

from resume_interview.core.config import ClientSettings, get_client_settings

logger = logging.getLogger(__name__)

# Singleton client, created on first use
_genai_client: Optional[genai.Client] = None


def get_genai_client(settings: Optional[ClientSettings] = None) -> genai.Client:
    """Get or create the GenAI SDK client instance."""
    global _genai_client
    if _genai_client is None:
        settings = settings or get_client_settings()
        _genai_client = genai.Client(api_key=settings.GEMINI_API_KEY)
        logger.info(f"GenAI client initialized for model {settings.GEMINI_MODEL}")
    return _genai_client


def get_generation_config(settings: Optional[ClientSettings] = None) -> types.GenerateContentConfig:
    """Generation parameters shared by analysis and guidance calls."""
    settings = settings or get_client_settings()
    return types.GenerateContentConfig(temperature=settings.GEMINI_TEMPERATURE)
