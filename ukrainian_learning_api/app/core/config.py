"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: seeded sample content and
the static phrase table for translations.

The translation provider credential is deliberately not part of
``Settings``.  It is looked up on every translation request by
``get_translate_api_key`` so that setting or clearing the variable
takes effect without rebuilding the application.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Environment variables recognised as the translation provider credential.
# The first non-empty one wins.
TRANSLATE_API_KEY_VARS = ("GOOGLE_TRANSLATE_API_KEY", "TRANSLATE_API_KEY")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ukrainian Learning API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Locale used as the target language when the caller gives none.
    default_target_language: str = os.getenv("DEFAULT_TARGET_LANGUAGE", "uk")

    # Google Translate v2 REST endpoint.  The API key is appended as the
    # ``key`` query parameter by the provider.
    translate_api_url: str = os.getenv(
        "TRANSLATE_API_URL",
        "https://translation.googleapis.com/language/translate/v2",
    )
    translate_timeout: float = float(os.getenv("TRANSLATE_TIMEOUT", "10"))

    # Insert the fixed sample records into the store at startup.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}


def get_translate_api_key() -> Optional[str]:
    """Return the configured translation provider credential, if any."""
    for name in TRANSLATE_API_KEY_VARS:
        value = os.getenv(name)
        if value:
            return value
    return None


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
