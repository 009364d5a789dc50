"""Per-locale translation bundles stored as JSON next to this module."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from loguru import logger

from kahu_studio.i18n.registry import DEFAULT_REGISTRY, LocaleRegistry

DICTIONARY_DIR = Path(__file__).parent / "dictionaries"


@lru_cache
def _load(locale: str) -> dict[str, Any]:
    path = DICTIONARY_DIR / f"{locale}.json"
    if not path.exists():
        logger.warning("No dictionary bundle for locale {}", locale)
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def load_dictionary(locale: str, registry: LocaleRegistry = DEFAULT_REGISTRY) -> dict[str, Any]:
    """Synchronous variant of :func:`get_dictionary`."""
    if not registry.is_valid_locale(locale):
        locale = registry.default_locale
    return _load(locale)


async def get_dictionary(
    locale: str, registry: LocaleRegistry = DEFAULT_REGISTRY
) -> dict[str, Any]:
    """Return the key/value bundle for *locale*, or the default locale's bundle."""
    return load_dictionary(locale, registry)


def _get_nested(bundle: dict[str, Any], key: str) -> str | None:
    cur: Any = bundle
    for part in key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return None
    return cur if isinstance(cur, str) else None


def translate(
    key: str,
    locale: str,
    default: str = "",
    registry: LocaleRegistry = DEFAULT_REGISTRY,
) -> str:
    """Look up a dotted key, falling back to the default locale, then *default*, then the key."""
    value = _get_nested(load_dictionary(locale, registry), key)
    if value:
        return value
    value = _get_nested(_load(registry.default_locale), key)
    if value:
        return value
    return default or key
