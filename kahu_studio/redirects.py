"""Legacy URL redirects: retired paths mapped onto locale-prefixed routes.

Consulted before locale resolution. Rules are tried in declaration order
and the first structural match wins; all of them are permanent.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from kahu_studio.i18n.middleware import raw_request_path


def _split(path: str) -> list[str]:
    return [segment for segment in path.strip("/").split("/") if segment] if path else []


@dataclass(frozen=True)
class RedirectRule:
    """``source`` may hold one ``:name`` segment, reused verbatim in ``destination``."""

    source: str
    destination: str
    permanent: bool = True

    def __post_init__(self) -> None:
        params = [s[1:] for s in _split(self.source) if s.startswith(":")]
        if len(params) > 1:
            raise ValueError(f"Redirect source {self.source!r} has more than one wildcard")
        for segment in _split(self.destination):
            if segment.startswith(":") and segment[1:] not in params:
                raise ValueError(
                    f"Redirect destination {self.destination!r} references unknown "
                    f"parameter {segment!r}"
                )

    def match(self, path: str) -> str | None:
        """Return the destination for *path*, or ``None`` if the rule does not apply."""
        pattern = _split(self.source)
        segments = _split(path)
        if len(pattern) != len(segments):
            return None

        captured: dict[str, str] = {}
        for expected, actual in zip(pattern, segments):
            if expected.startswith(":"):
                captured[expected[1:]] = actual
            elif expected != actual:
                return None

        if not captured:
            return self.destination
        parts = [
            captured[s[1:]] if s.startswith(":") else s for s in _split(self.destination)
        ]
        return "/" + "/".join(parts)


class RedirectTable:
    """Ordered, immutable list of :class:`RedirectRule`."""

    def __init__(self, rules: Iterable[RedirectRule]) -> None:
        self._rules: tuple[RedirectRule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def find(self, path: str) -> tuple[RedirectRule, str] | None:
        for rule in self._rules:
            destination = rule.match(path)
            if destination is not None:
                return rule, destination
        return None

    def match(self, path: str) -> str | None:
        found = self.find(path)
        return found[1] if found else None


LEGACY_REDIRECTS = RedirectTable(
    [
        # Home
        RedirectRule("/home", "/fr"),
        # Creations -> Objet
        RedirectRule("/creations", "/fr/objet/collections"),
        RedirectRule("/creations/:slug", "/fr/objet/:slug"),
        RedirectRule("/collections", "/fr/objet/collections"),
        RedirectRule("/capsules", "/fr/objet/capsules"),
        # Sur-mesure
        RedirectRule("/sur-mesure", "/fr/objet/sur-mesure"),
        RedirectRule("/bespoke", "/en/objet/sur-mesure"),
        # Espaces -> Espace
        RedirectRule("/espaces", "/fr/espace"),
        RedirectRule("/espaces/:slug", "/fr/espace/:slug"),
        RedirectRule("/spaces", "/en/espace"),
        RedirectRule("/renovation", "/fr/espace/renovation"),
        RedirectRule("/amenagement", "/fr/espace/amenagement"),
        RedirectRule("/agrandissement", "/fr/espace/agrandissement"),
        # Atelier
        RedirectRule("/atelier", "/fr/atelier"),
        RedirectRule("/studio", "/en/atelier"),
        RedirectRule("/equipe", "/fr/atelier/equipe"),
        RedirectRule("/team", "/en/atelier/equipe"),
        RedirectRule("/portfolio", "/fr/atelier/portfolio"),
        # Materiaux
        RedirectRule("/materiaux", "/fr/materiaux"),
        RedirectRule("/materials", "/en/materiaux"),
        RedirectRule("/essences", "/fr/materiaux/essences"),
        RedirectRule("/woods", "/en/materiaux/essences"),
        RedirectRule("/bio-materiaux", "/fr/materiaux/bio-materiaux"),
        RedirectRule("/labo", "/fr/materiaux/labo-kahu"),
        RedirectRule("/lab", "/en/materiaux/labo-kahu"),
        # Contact
        RedirectRule("/contact", "/fr/contact"),
        # Objet (direct access)
        RedirectRule("/objet", "/fr/objet"),
        RedirectRule("/objects", "/en/objet"),
        # Misc
        RedirectRule("/about", "/fr/atelier"),
        RedirectRule("/a-propos", "/fr/atelier"),
        RedirectRule("/produits", "/fr/objet/collections"),
        RedirectRule("/products", "/en/objet/collections"),
        RedirectRule("/projets", "/fr/espace"),
        RedirectRule("/projects", "/en/espace"),
    ]
)


class LegacyRedirectMiddleware(BaseHTTPMiddleware):
    """Answer legacy paths with a permanent redirect before locale resolution."""

    def __init__(self, app: ASGIApp, table: RedirectTable = LEGACY_REDIRECTS) -> None:
        super().__init__(app)
        self.table = table

    async def dispatch(self, request: Request, call_next) -> Response:
        path = raw_request_path(request)
        found = self.table.find(path)
        if found is None:
            return await call_next(request)

        rule, destination = found
        if request.url.query:
            destination = f"{destination}?{request.url.query}"
        logger.debug("Legacy redirect {} -> {}", path, destination)
        return RedirectResponse(url=destination, status_code=308 if rule.permanent else 307)
