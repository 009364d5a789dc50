"""HTMX partial endpoints and health check."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from kahu_studio.i18n import DEFAULT_LANGUAGE, DEFAULT_REGISTRY, load_dictionary
from kahu_studio.models.enums import ProductFilter
from kahu_studio.rate_limit import limiter

router = APIRouter(tags=["API - HTMX Partials"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


def validate_filter(value: str) -> ProductFilter:
    try:
        return ProductFilter(value)
    except ValueError as err:
        raise HTTPException(404, detail=f"Unknown product filter {value}") from err


@router.get("/products", response_class=HTMLResponse)
@limiter.limit("30/minute")
async def products_api(
    request: Request,
    filter: str = Query(default=ProductFilter.ALL.value, max_length=20),
    lang: str = Query(default=DEFAULT_LANGUAGE, max_length=5),
):
    """Product grid fragment for the catalog filter buttons."""
    product_filter = validate_filter(filter)
    if not DEFAULT_REGISTRY.is_valid_locale(lang):
        lang = DEFAULT_REGISTRY.default_locale
    products = await request.app.state.content.get_filtered_products(product_filter)
    return templates.TemplateResponse(
        request,
        "partials/product_grid.html",
        {
            "products": products,
            "lang": lang,
            "t": load_dictionary(lang),
            "empty_message_key": "noProducts",
        },
    )


@router.get("/health", response_class=JSONResponse, tags=["Health"])
@limiter.limit("120/minute")
async def health(request: Request):
    """Health check endpoint."""
    content = request.app.state.content
    return {
        "status": "ok",
        "notion_configured": content.is_configured(),
        "locales": list(DEFAULT_REGISTRY.locales),
    }
