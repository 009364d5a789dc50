"""Locale resolution: decide, per request, which locale prefix to serve.

The decision is a pure function of the request's path, locale cookie and
``Accept-Language`` header plus the static :class:`LocaleRegistry`.
Applying it (redirect response, ``Set-Cookie``) is left to
:class:`kahu_studio.i18n.middleware.LocaleMiddleware`.

Precedence for a path without a locale prefix, first match wins:

1. locale cookie, when it still names a registered locale
2. first ``Accept-Language`` entry whose primary subtag is registered
3. the registry's default locale
"""

from dataclasses import dataclass
from enum import StrEnum

from kahu_studio.config import (
    BYPASS_PREFIXES,
    FAVICON_PATH,
    LOCALE_COOKIE,
    LOCALE_COOKIE_MAX_AGE,
)
from kahu_studio.i18n.registry import DEFAULT_REGISTRY, LocaleRegistry


class LocaleAction(StrEnum):
    BYPASS = "bypass"
    PASS = "pass"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class CookieOp:
    """A ``Set-Cookie`` to emit for the locale preference."""

    value: str
    name: str = LOCALE_COOKIE
    path: str = "/"
    max_age: int = LOCALE_COOKIE_MAX_AGE
    samesite: str = "lax"


@dataclass(frozen=True)
class RequestView:
    """The parts of an inbound request the resolver reads."""

    path: str
    cookie_locale: str | None = None
    accept_language: str | None = None
    query: str = ""


@dataclass(frozen=True)
class LocaleDecision:
    action: LocaleAction
    locale: str | None = None
    location: str | None = None
    cookie: CookieOp | None = None


@dataclass(frozen=True)
class ExclusionRules:
    """Paths the resolver never touches (assets, API, files)."""

    prefixes: tuple[str, ...] = BYPASS_PREFIXES
    exact: tuple[str, ...] = (FAVICON_PATH,)

    def is_excluded(self, path: str) -> bool:
        return (
            any(path.startswith(prefix) for prefix in self.prefixes)
            or "." in path
            or path in self.exact
        )


DEFAULT_EXCLUSIONS = ExclusionRules()


def locale_from_accept_language(
    header: str | None, registry: LocaleRegistry = DEFAULT_REGISTRY
) -> str | None:
    """Return the first registered primary subtag in header order.

    Quality weights are ignored; empty or malformed entries are skipped.
    """
    if not header:
        return None
    for entry in header.split(","):
        tag = entry.split(";", 1)[0].strip()
        if not tag:
            continue
        primary = tag[:2].lower()
        if registry.is_valid_locale(primary):
            return primary
    return None


def preferred_locale(view: RequestView, registry: LocaleRegistry = DEFAULT_REGISTRY) -> str:
    """Cookie, then ``Accept-Language``, then the default locale."""
    if registry.is_valid_locale(view.cookie_locale):
        return view.cookie_locale  # type: ignore[return-value]
    from_header = locale_from_accept_language(view.accept_language, registry)
    if from_header:
        return from_header
    return registry.default_locale


def localized_path(path: str, locale: str) -> str:
    """Prefix *path* with *locale*; ``/`` collapses to ``/{locale}``."""
    if path in ("", "/"):
        return f"/{locale}"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"/{locale}{path}"


def resolve(
    view: RequestView,
    registry: LocaleRegistry = DEFAULT_REGISTRY,
    exclusions: ExclusionRules = DEFAULT_EXCLUSIONS,
) -> LocaleDecision:
    """Decide how to serve *view*. Never raises for any request input."""
    if exclusions.is_excluded(view.path):
        return LocaleDecision(LocaleAction.BYPASS)

    path_locale = registry.path_locale(view.path)
    if path_locale is not None:
        # Once the URL carries a locale, the cookie follows the URL
        cookie = None if view.cookie_locale == path_locale else CookieOp(path_locale)
        return LocaleDecision(LocaleAction.PASS, locale=path_locale, cookie=cookie)

    locale = preferred_locale(view, registry)
    location = localized_path(view.path, locale)
    if view.query:
        location = f"{location}?{view.query}"
    return LocaleDecision(
        LocaleAction.REDIRECT,
        locale=locale,
        location=location,
        cookie=CookieOp(locale),
    )
