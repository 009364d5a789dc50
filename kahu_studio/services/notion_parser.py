"""Convert raw Notion page payloads into :class:`Product` / :class:`Project`."""

import re
from typing import Any

from kahu_studio.models.content import Product, Project
from kahu_studio.models.enums import ProductCategory, ProductStatus
from kahu_studio.utils.text import is_flash_sale_active

_LINE_SPLIT_RE = re.compile(r"[\n\r]+")


def _prop(props: dict[str, Any], name: str) -> dict[str, Any]:
    value = props.get(name)
    return value if isinstance(value, dict) else {}


def _plain_text(fragments: list[dict] | None, first_only: bool = False) -> str:
    if not fragments:
        return ""
    if first_only:
        return fragments[0].get("plain_text", "")
    return "".join(f.get("plain_text", "") for f in fragments)


def _select_name(prop: dict[str, Any]) -> str | None:
    select = prop.get("select")
    return select.get("name") if isinstance(select, dict) else None


def _file_urls(files: list[dict] | None) -> list[str]:
    urls = []
    for item in files or []:
        url = (item.get("external") or {}).get("url") or (item.get("file") or {}).get("url")
        if url:
            urls.append(url)
    return urls


def extract_photos(prop: dict[str, Any]) -> list[str]:
    """Photos may be a Files property, a URL property or newline-separated rich text."""
    photos = _file_urls(prop.get("files")) if isinstance(prop.get("files"), list) else []
    if not photos and prop.get("url"):
        photos = [prop["url"]]
    if not photos and prop.get("rich_text"):
        raw = _plain_text(prop["rich_text"])
        photos = [
            line.strip()
            for line in _LINE_SPLIT_RE.split(raw)
            if line.strip().startswith("http")
        ]
    return photos


def _enum_or(enum_cls, value: str | None, default):
    try:
        return enum_cls(value) if value else default
    except ValueError:
        return default


def parse_product(page: dict[str, Any]) -> Product:
    props = page.get("properties") or {}

    quantite_raw = _prop(props, "Quantite").get("number")
    quantite = 1 if quantite_raw is None else int(quantite_raw)
    statut = _enum_or(ProductStatus, _select_name(_prop(props, "Statut")), ProductStatus.DRAFT)
    if quantite == 0:
        statut = ProductStatus.SOLD

    date_fin_flash = (_prop(props, "Date fin flash").get("date") or {}).get("start")
    flash_checked = bool(_prop(props, "Vente Flash").get("checkbox", False))
    dimensions = _plain_text(_prop(props, "Dimensions").get("rich_text"), first_only=True)
    ordre = _prop(props, "Ordre").get("number")
    prix = _prop(props, "Prix").get("number")

    return Product(
        id=page.get("id", ""),
        nom=_plain_text(_prop(props, "Nom").get("title"), first_only=True),
        slug=_plain_text(_prop(props, "Slug").get("rich_text"), first_only=True),
        prix=prix if prix is not None else 0,
        quantite=quantite,
        statut=statut,
        categorie=_enum_or(
            ProductCategory, _select_name(_prop(props, "Categorie")), ProductCategory.FURNITURE
        ),
        vente_flash=flash_checked and is_flash_sale_active(date_fin_flash),
        date_fin_flash=date_fin_flash,
        description=_plain_text(_prop(props, "Description").get("rich_text")),
        materiaux=_plain_text(_prop(props, "Materiaux").get("rich_text")),
        dimensions=dimensions or None,
        photos=extract_photos(_prop(props, "Photos")),
        ordre=int(ordre) if ordre is not None else 999,
    )


def parse_project(page: dict[str, Any]) -> Project:
    props = page.get("properties") or {}
    annee = _prop(props, "Annee").get("number")
    return Project(
        id=page.get("id", ""),
        nom=_plain_text(_prop(props, "Nom").get("title"), first_only=True),
        slug=_plain_text(_prop(props, "Slug").get("rich_text"), first_only=True),
        description=_plain_text(_prop(props, "Description").get("rich_text")),
        photos=_file_urls(_prop(props, "Photos").get("files")),
        annee=int(annee) if annee is not None else None,
        visible=bool(_prop(props, "Visible").get("checkbox", True)),
    )
