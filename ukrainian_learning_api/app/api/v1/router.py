"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers (translations,
dictionary, history, ...) under a unified prefix.  When new domains
are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    community,
    dictionary,
    history,
    learning,
    translate,
    translations,
    users,
)

router = APIRouter()

router.include_router(translations.router, prefix="/translations", tags=["translations"])
router.include_router(dictionary.router, prefix="/dictionary", tags=["dictionary"])
router.include_router(history.router, prefix="/history", tags=["history"])
router.include_router(learning.router, prefix="/learning", tags=["learning"])
router.include_router(community.router, prefix="/community", tags=["community"])
router.include_router(translate.router, prefix="/translate", tags=["translate"])
router.include_router(users.router, prefix="/users", tags=["users"])
