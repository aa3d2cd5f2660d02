"""
Text translation gateway.

``TranslationService.translate`` picks one of two strategies on every
call:

* ``GoogleTranslateProvider`` when a provider credential is configured
  (``GOOGLE_TRANSLATE_API_KEY`` or ``TRANSLATE_API_KEY``).  It makes a
  single POST to the Google Translate v2 REST API with ``requests``.
  Any transport error, non-2xx status or malformed body raises
  ``ProviderError``; there are no retries.
* ``StaticPhraseTranslator`` otherwise.  It maps a handful of common
  English greetings to Ukrainian and echoes anything else unchanged.

The provider call blocks, so handlers run ``translate`` in the
threadpool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests
from fastapi import Request

from ..core.config import get_translate_api_key, settings
from ..core.errors import ProviderError, ValidationError


logger = logging.getLogger(__name__)


BASIC_TRANSLATIONS: Dict[str, str] = {
    "hello": "Привіт",
    "thank you": "Дякую",
    "please": "Будь ласка",
    "sorry": "Вибачте",
    "yes": "Так",
    "no": "Ні",
    "goodbye": "До побачення",
    "how are you": "Як справи?",
    "good morning": "Доброго ранку",
    "good evening": "Доброго вечора",
}


@dataclass
class TranslateResult:
    translated_text: str
    source_language: Optional[str]
    target_language: Optional[str]


class StaticPhraseTranslator:
    """Offline fallback backed by ``BASIC_TRANSLATIONS``."""

    def __init__(self, phrases: Optional[Dict[str, str]] = None, default_target: Optional[str] = None) -> None:
        self.phrases = BASIC_TRANSLATIONS if phrases is None else phrases
        self.default_target = default_target or settings.default_target_language

    def translate(self, text: str, source: Optional[str] = None, target: Optional[str] = None) -> TranslateResult:
        return TranslateResult(
            translated_text=self.phrases.get(text.lower(), text),
            source_language=source or "auto",
            target_language=target or self.default_target,
        )


class GoogleTranslateProvider:
    """Client for the Google Cloud Translation v2 REST API."""

    def __init__(
        self,
        api_key: str,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        default_target: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url or settings.translate_api_url
        self.timeout = settings.translate_timeout if timeout is None else timeout
        self.default_target = default_target or settings.default_target_language

    def translate(self, text: str, source: Optional[str] = None, target: Optional[str] = None) -> TranslateResult:
        """Translate ``text`` with one request to the provider.

        ``source`` is omitted from the request when not given so the
        provider detects it.  Raises ``ProviderError`` on any failure.
        """
        target = target or self.default_target
        payload = {"q": text, "target": target, "format": "text"}
        if source:
            payload["source"] = source
        try:
            resp = requests.post(
                self.api_url,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            # The URL carries the API key, so log only the exception type and status.
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            logger.error("Translation provider request failed: %s (status %s)", type(exc).__name__, status_code)
            raise ProviderError("Translation API request failed") from exc
        except ValueError as exc:
            logger.error("Translation provider returned a non-JSON body")
            raise ProviderError("Translation API returned an invalid response") from exc

        try:
            first = data["data"]["translations"][0]
            translated = first["translatedText"]
        except (KeyError, IndexError, TypeError) as exc:
            logger.error("Unexpected translation provider response shape")
            raise ProviderError("Translation API returned an invalid response") from exc

        return TranslateResult(
            translated_text=translated,
            source_language=first.get("detectedSourceLanguage") or source,
            target_language=target,
        )


class TranslationService:
    """Chooses between the live provider and the static phrase table.

    Parameters
    ----------
    api_key : Optional[str]
        Fixed provider credential.  When omitted the environment is
        consulted on every call via ``get_translate_api_key``.
    """

    def __init__(self, api_key: Optional[str] = None, fallback: Optional[StaticPhraseTranslator] = None) -> None:
        self.api_key = api_key
        self.fallback = fallback or StaticPhraseTranslator()

    def _provider(self):
        api_key = self.api_key or get_translate_api_key()
        if api_key:
            logger.debug("Using Google Translate provider")
            return GoogleTranslateProvider(api_key)
        logger.debug("No translation credential configured; using static phrase table")
        return self.fallback

    def translate(self, text: Optional[str], source: Optional[str] = None, target: Optional[str] = None) -> TranslateResult:
        if not text:
            raise ValidationError("Text is required")
        return self._provider().translate(text, source, target)


def get_translation_service(request: Request) -> TranslationService:
    """FastAPI dependency returning the gateway attached to the running app."""
    return request.app.state.translation_service
