"""KAHU Studio website: FastAPI application."""

import html as html_mod
import os
from contextlib import asynccontextmanager
from pathlib import Path

import markdown as _md
import markupsafe
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from kahu_studio.i18n import DEFAULT_LANGUAGE, setup_jinja2_i18n
from kahu_studio.i18n.middleware import LocaleMiddleware
from kahu_studio.logging_config import setup_logging
from kahu_studio.middleware import SecurityHeadersMiddleware
from kahu_studio.rate_limit import limiter
from kahu_studio.redirects import LegacyRedirectMiddleware
from kahu_studio.routes.api import router as api_router
from kahu_studio.routes.api import templates as api_templates
from kahu_studio.routes.pages import page_context
from kahu_studio.routes.pages import router as pages_router
from kahu_studio.routes.pages import templates as pages_templates
from kahu_studio.services.cloudinary import (
    get_blur_placeholder,
    get_image_src_set,
    get_optimized_image_url,
)
from kahu_studio.services.content_service import ContentService
from kahu_studio.utils.text import format_price

setup_logging()

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"
IMAGES_DIR = STATIC_DIR / "images"


@asynccontextmanager
async def lifespan(app: FastAPI):
    content = ContentService()
    app.state.content = content
    if content.is_configured():
        logger.info("Content service ready (Notion databases configured).")
    else:
        logger.warning("NOTION_API_KEY or database IDs missing, catalog pages will be empty.")
    yield


app = FastAPI(
    title="KAHU Studio",
    description="Bilingual catalog website for an artisanal furniture studio",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

# Security: rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

# Middleware runs outermost-last-added: security headers, legacy redirects, locale
app.add_middleware(LocaleMiddleware)
app.add_middleware(LegacyRedirectMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Mount static files
IMAGES_DIR.mkdir(parents=True, exist_ok=True)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.mount("/images", StaticFiles(directory=str(IMAGES_DIR)), name="images")

app.include_router(api_router, prefix="/api")
app.include_router(pages_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render the localized not-found page for HTML 404s."""
    if exc.status_code != 404 or request.url.path.startswith("/api"):
        return await http_exception_handler(request, exc)
    lang = getattr(request.state, "lang", DEFAULT_LANGUAGE)
    return templates.TemplateResponse(
        request,
        "not_found.html",
        page_context(request, lang, active_page=None),
        status_code=404,
    )


# Register shared Jinja2 filters on all template instances
def _md_filter(text: str) -> markupsafe.Markup:
    """Convert markdown to HTML, safe for Jinja2 rendering. Raw HTML is escaped first."""
    if not text:
        return markupsafe.Markup("")
    html = _md.markdown(html_mod.escape(text), extensions=["nl2br"])
    return markupsafe.Markup(html)


for t in (templates, api_templates, pages_templates):
    t.env.filters["markdown"] = _md_filter
    t.env.filters["price"] = format_price
    # Raises ValueError on an unknown preset name, whatever the URL
    t.env.filters["cloudinary"] = get_optimized_image_url
    t.env.filters["srcset"] = get_image_src_set
    t.env.filters["blur"] = get_blur_placeholder
    setup_jinja2_i18n(t.env)


def main() -> None:
    dev_mode = os.environ.get("KAHU_DEV", "0") == "1"
    uvicorn.run(
        "kahu_studio.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8000")),
        reload=dev_mode,
    )


if __name__ == "__main__":
    main()
