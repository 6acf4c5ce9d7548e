from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_interview.core.exceptions import ConfigurationError


# Get the path to the .env file
CONFIG_DIR = Path(__file__).resolve().parent
# .env lives in the project root (two levels up from resume_interview/core)
PROJECT_ROOT = CONFIG_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / '.env'

# Load environment variables from .env file
load_dotenv(ENV_FILE_PATH)


class ClientSettings(BaseSettings):
    """Settings the practice client needs: the backend URL and the Gemini key."""
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding='utf-8',
        extra='ignore',
        populate_by_name=True,
    )

    DEBUG_MODE: bool = False
    LOG_JSON: bool = False

    # Required: the process refuses to start without it
    GEMINI_API_KEY: str = Field(validation_alias=AliasChoices("GEMINI_API_KEY", "VITE_GEMINI_API_KEY"))

    # Gemini
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.7

    # Base URL the client application talks to
    API_URL: str = "http://localhost:3001/api"


class Settings(ClientSettings):
    """Backend settings; the database URI is required on top of the client keys."""

    MONGODB_URI: str = Field(validation_alias=AliasChoices("MONGODB_URI", "VITE_MONGODB_URI"))
    MONGODB_DATABASE: str = "interview_prep"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 3001


def _load(settings_class, overrides):
    try:
        return settings_class(**overrides)
    except ValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(missing)}",
            details={"fields": missing},
        ) from e


def load_settings(**overrides) -> Settings:
    """
    Build the backend Settings, failing fast with a ConfigurationError.

    Args:
        overrides: Explicit values that take precedence over the environment.

    Returns:
        The validated settings.

    Raises:
        ConfigurationError: If a required key (database URI, Gemini API key) is missing or invalid.
    """
    return _load(Settings, overrides)


def load_client_settings(**overrides) -> ClientSettings:
    """Client-side counterpart of load_settings; MONGODB_URI is not read."""
    return _load(ClientSettings, overrides)


@lru_cache
def get_settings() -> Settings:
    """Process-wide backend settings, loaded once."""
    return load_settings()


@lru_cache
def get_client_settings() -> ClientSettings:
    return load_client_settings()
