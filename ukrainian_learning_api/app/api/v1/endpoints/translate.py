"""
Free-text translation endpoint.

Forwards the text to the translation gateway.  Without a provider
credential the gateway answers from a small built-in phrase table, so
the endpoint works in development with no configuration.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from ukrainian_learning_api.app.core.errors import ProviderError, ValidationError
from ukrainian_learning_api.app.schemas.translation import TranslateRequest, TranslateResponse
from ukrainian_learning_api.app.services.translation_service import TranslationService, get_translation_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=TranslateResponse)
async def translate_text(
    request_in: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """Translate ``text`` from ``from`` to ``to``.

    Returns HTTP 400 when ``text`` is missing or empty and HTTP 500 when
    the external provider fails.
    """
    try:
        result = await run_in_threadpool(service.translate, request_in.text, request_in.source, request_in.target)
    except ValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail="Text is required") from exc
    except ProviderError as exc:
        logger.error("Translation error: %s", exc)
        raise HTTPException(status_code=exc.status_code, detail="Translation failed") from exc
    except Exception as exc:
        logger.exception("Translation error")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Translation failed") from exc
    return TranslateResponse(
        translated_text=result.translated_text,
        source_language=result.source_language,
        target_language=result.target_language,
    )
