"""
Module: info.py
Description: Unauthenticated informational routes.

- GET /        plain-text welcome
- GET /api     HTML page describing how to use the API
- GET /health  JSON health check

Dependencies: FastAPI, Jinja2, python-slugify
Author: Catalog API Team
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from slugify import slugify

from catalog_api.config.settings import Settings
from catalog_api.dependencies import get_settings
from catalog_api.utils.logger import get_logger

router = APIRouter(tags=["info"])
logger = get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

WELCOME_TEXT = "Welcome to the API"
API_ROUTES = [
    ("Register User", "/api/users/register"),
    ("Get Products", "/api/products"),
]

# Characters outside this set are dropped from the notice slug
NOTICE_DISALLOWED_CHARS = r"[^-a-z0-9_$+~.()!:@]+"


def make_notice(text: str) -> str:
    """
    Slugify text for the /api page notice, words joined by '*'.

    Example:
        >>> make_notice("Welcome to the API interface!")
        'welcome*to*the*api*interface!'
    """
    return slugify(text, separator="*", lowercase=True, regex_pattern=NOTICE_DISALLOWED_CHARS)


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return WELCOME_TEXT


@router.get("/api", response_class=HTMLResponse)
async def api_info(request: Request):
    """Describe the API and list its main routes."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": "API Home",
            "notice": make_notice("Welcome to the API interface!"),
            "howto": "Follow the instructions below to use the API:",
            "routes": API_ROUTES,
        },
    )


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Returns basic application health information.
    """
    logger.info("Health check requested")

    return {
        "status": "ok",
        "message": f"{settings.app_name} is healthy",
        "version": settings.app_version,
        "storage": settings.storage_backend,
    }
