"""Internationalization support for the French/English site."""

import contextvars

from jinja2 import Environment

from kahu_studio.i18n.dictionaries import get_dictionary, load_dictionary, translate
from kahu_studio.i18n.registry import DEFAULT_REGISTRY, LocaleRegistry

SUPPORTED_LANGUAGES: tuple[str, ...] = DEFAULT_REGISTRY.locales
DEFAULT_LANGUAGE: str = DEFAULT_REGISTRY.default_locale

_locale_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "locale", default=DEFAULT_LANGUAGE
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_REGISTRY",
    "SUPPORTED_LANGUAGES",
    "LocaleRegistry",
    "get_dictionary",
    "get_locale",
    "gettext",
    "is_valid_locale",
    "load_dictionary",
    "ngettext",
    "set_locale",
    "setup_jinja2_i18n",
    "translate",
]


def is_valid_locale(candidate: object) -> bool:
    """Membership test against the process-wide registry."""
    return DEFAULT_REGISTRY.is_valid_locale(candidate)


def get_locale() -> str:
    """Return the current request's locale from the ContextVar."""
    return _locale_var.get()


def set_locale(lang: str) -> None:
    """Set the current request's locale in the ContextVar."""
    _locale_var.set(lang)


def gettext(key: str) -> str:
    """Look up a dotted dictionary key for the current locale.

    Falls back to the key itself if no translation is found.
    """
    return translate(key, get_locale())


def ngettext(singular: str, plural: str, n: int) -> str:
    """Simple plural-aware translation lookup."""
    key = singular if n == 1 else plural
    return gettext(key)


def setup_jinja2_i18n(env: Environment) -> None:
    """Install gettext callables on a Jinja2 environment."""
    env.add_extension("jinja2.ext.i18n")
    env.install_gettext_callables(gettext, ngettext, newstyle=False)  # type: ignore[attr-defined]
