"""HTML page routes, all served under a ``/{lang}`` prefix."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.templating import Jinja2Templates

from kahu_studio.data.materials import BIO_MATERIALS
from kahu_studio.data.team import get_artisans, get_founder
from kahu_studio.data.woods import WOOD_ESSENCES
from kahu_studio.i18n import DEFAULT_REGISTRY, load_dictionary
from kahu_studio.models.enums import MaterialStatus, ProductCategory, ProductFilter
from kahu_studio.rate_limit import limiter
from kahu_studio.utils.text import generate_whatsapp_link

router = APIRouter(tags=["Pages"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

# Overview pages: (url segment, dictionary key under "<section>.sections")
OVERVIEW_SECTIONS: dict[str, list[tuple[str, str]]] = {
    "objet": [("capsules", "capsules"), ("collections", "collections"), ("sur-mesure", "surMesure")],
    "espace": [
        ("renovation", "renovation"),
        ("amenagement", "amenagement"),
        ("agrandissement", "agrandissement"),
    ],
    "atelier": [("equipe", "equipe"), ("lieu", "lieu"), ("portfolio", "portfolio")],
    "materiaux": [
        ("essences", "essences"),
        ("bio-materiaux", "bioMateriaux"),
        ("labo-kahu", "laboKahu"),
    ],
}

ESPACE_SERVICES: tuple[str, ...] = ("renovation", "amenagement", "agrandissement")


def validate_lang(lang: str) -> str:
    if not DEFAULT_REGISTRY.is_valid_locale(lang):
        raise HTTPException(404, detail=f"Unknown locale {lang}")
    return lang


def page_context(request: Request, lang: str, **kwargs) -> dict:
    """Build the context shared by every page: dictionary, locales, language links."""
    path = request.url.path
    return {
        "lang": lang,
        "t": load_dictionary(lang),
        "locales": DEFAULT_REGISTRY.locales,
        "alternate_paths": {
            locale: DEFAULT_REGISTRY.switch_locale_path(path, locale)
            for locale in DEFAULT_REGISTRY.locales
        },
        "whatsapp_link": generate_whatsapp_link(),
        **kwargs,
    }


def _content(request: Request):
    return request.app.state.content


def _render(request: Request, name: str, lang: str, **kwargs):
    return templates.TemplateResponse(request, name, page_context(request, lang, **kwargs))


def _overview(request: Request, lang: str, section: str, **kwargs):
    return _render(
        request,
        "overview.html",
        lang,
        section=section,
        subsections=OVERVIEW_SECTIONS[section],
        active_page=section,
        **kwargs,
    )


@router.get("/{lang}")
@limiter.limit("60/minute")
async def home(request: Request, lang: str):
    validate_lang(lang)
    content = _content(request)
    return _render(
        request,
        "home.html",
        lang,
        featured=await content.get_featured_products(4),
        flash_sale=await content.has_active_flash_sale(),
        active_page="home",
    )


# ── Objet ────────────────────────────────────────────────────────────────


@router.get("/{lang}/objet")
@limiter.limit("60/minute")
async def objet(request: Request, lang: str):
    validate_lang(lang)
    return _overview(request, lang, "objet")


@router.get("/{lang}/objet/capsules")
@limiter.limit("60/minute")
async def objet_capsules(request: Request, lang: str):
    validate_lang(lang)
    products = await _content(request).get_products_by_category(ProductCategory.CAPSULE)
    return _render(
        request,
        "product_list.html",
        lang,
        page_key="capsules",
        products=products,
        filters=None,
        active_page="objet",
    )


@router.get("/{lang}/objet/collections")
@limiter.limit("60/minute")
async def objet_collections(request: Request, lang: str):
    validate_lang(lang)
    products = await _content(request).get_products()
    return _render(
        request,
        "product_list.html",
        lang,
        page_key="collections",
        products=products,
        filters=list(ProductFilter),
        active_filter=ProductFilter.ALL,
        active_page="objet",
    )


@router.get("/{lang}/objet/sur-mesure")
@limiter.limit("60/minute")
async def objet_sur_mesure(request: Request, lang: str):
    validate_lang(lang)
    return _render(request, "sur_mesure.html", lang, active_page="objet")


@router.get("/{lang}/objet/{slug}")
@limiter.limit("60/minute")
async def product_detail(request: Request, lang: str, slug: str):
    validate_lang(lang)
    content = _content(request)
    product = await content.get_product_by_slug(slug)
    if product is None:
        raise HTTPException(404, detail=f"Unknown product {slug}")
    similar = await content.get_similar_products(product.slug, product.categorie, 4)
    return _render(
        request,
        "product_detail.html",
        lang,
        product=product,
        similar=similar,
        order_link=generate_whatsapp_link(product.nom),
        active_page="objet",
    )


# ── Espace ───────────────────────────────────────────────────────────────


@router.get("/{lang}/espace")
@limiter.limit("60/minute")
async def espace(request: Request, lang: str):
    validate_lang(lang)
    projects = await _content(request).get_projects()
    return _overview(request, lang, "espace", projects=projects)


@router.get("/{lang}/espace/{slug}")
@limiter.limit("60/minute")
async def espace_detail(request: Request, lang: str, slug: str):
    """Service pages (renovation, ...) first, then project slugs."""
    validate_lang(lang)
    if slug in ESPACE_SERVICES:
        return _render(request, "espace_service.html", lang, service=slug, active_page="espace")

    project = await _content(request).get_project_by_slug(slug)
    if project is None:
        raise HTTPException(404, detail=f"Unknown project {slug}")
    return _render(
        request,
        "project_detail.html",
        lang,
        project=project,
        discuss_link=generate_whatsapp_link(),
        active_page="espace",
    )


# ── Atelier ──────────────────────────────────────────────────────────────


@router.get("/{lang}/atelier")
@limiter.limit("60/minute")
async def atelier(request: Request, lang: str):
    validate_lang(lang)
    return _overview(request, lang, "atelier")


@router.get("/{lang}/atelier/equipe")
@limiter.limit("60/minute")
async def atelier_equipe(request: Request, lang: str):
    validate_lang(lang)
    return _render(
        request,
        "team.html",
        lang,
        founder=get_founder(),
        artisans=get_artisans(),
        active_page="atelier",
    )


@router.get("/{lang}/atelier/lieu")
@limiter.limit("60/minute")
async def atelier_lieu(request: Request, lang: str):
    validate_lang(lang)
    return _render(request, "lieu.html", lang, active_page="atelier")


@router.get("/{lang}/atelier/portfolio")
@limiter.limit("60/minute")
async def atelier_portfolio(request: Request, lang: str):
    validate_lang(lang)
    content = _content(request)
    return _render(
        request,
        "portfolio.html",
        lang,
        products=await content.get_products(),
        projects=await content.get_projects(),
        years=await content.get_project_years(),
        active_page="atelier",
    )


# ── Materiaux ────────────────────────────────────────────────────────────


@router.get("/{lang}/materiaux")
@limiter.limit("60/minute")
async def materiaux(request: Request, lang: str):
    validate_lang(lang)
    return _overview(request, lang, "materiaux")


@router.get("/{lang}/materiaux/essences")
@limiter.limit("60/minute")
async def materiaux_essences(request: Request, lang: str):
    validate_lang(lang)
    return _render(request, "essences.html", lang, woods=WOOD_ESSENCES, active_page="materiaux")


@router.get("/{lang}/materiaux/bio-materiaux")
@limiter.limit("60/minute")
async def materiaux_bio(request: Request, lang: str):
    validate_lang(lang)
    return _render(
        request,
        "bio_materials.html",
        lang,
        materials=BIO_MATERIALS,
        statuses=list(MaterialStatus),
        active_page="materiaux",
    )


@router.get("/{lang}/materiaux/labo-kahu")
@limiter.limit("60/minute")
async def materiaux_labo(request: Request, lang: str):
    validate_lang(lang)
    return _render(request, "labo.html", lang, active_page="materiaux")


# ── Contact ──────────────────────────────────────────────────────────────


@router.get("/{lang}/contact")
@limiter.limit("60/minute")
async def contact(request: Request, lang: str):
    validate_lang(lang)
    return _render(request, "contact.html", lang, active_page="contact")
