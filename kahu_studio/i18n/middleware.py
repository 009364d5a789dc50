"""Locale middleware: redirect unprefixed paths and keep the locale cookie in sync."""

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from kahu_studio.config import LOCALE_COOKIE
from kahu_studio.i18n import set_locale
from kahu_studio.i18n.registry import DEFAULT_REGISTRY, LocaleRegistry
from kahu_studio.i18n.resolver import (
    DEFAULT_EXCLUSIONS,
    CookieOp,
    ExclusionRules,
    LocaleAction,
    RequestView,
    resolve,
)


def raw_request_path(request: Request) -> str:
    """The request path as sent by the client, still percent-encoded.

    Redirect targets are built from it so ``%3F`` or ``%25`` inside a segment
    stay escaped instead of turning into a query separator or a bare ``%``.
    """
    raw = request.scope.get("raw_path")
    return raw.decode("latin-1") if raw else request.url.path


def apply_cookie(response: Response, op: CookieOp) -> None:
    response.set_cookie(
        op.name,
        op.value,
        max_age=op.max_age,
        path=op.path,
        samesite=op.samesite,  # type: ignore[arg-type]
    )


class LocaleMiddleware(BaseHTTPMiddleware):
    """Apply :func:`resolve` to every request before routing."""

    def __init__(
        self,
        app: ASGIApp,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        exclusions: ExclusionRules = DEFAULT_EXCLUSIONS,
    ) -> None:
        super().__init__(app)
        self.registry = registry
        self.exclusions = exclusions

    async def dispatch(self, request: Request, call_next) -> Response:
        view = RequestView(
            path=raw_request_path(request),
            cookie_locale=request.cookies.get(LOCALE_COOKIE),
            accept_language=request.headers.get("accept-language"),
            query=request.url.query,
        )
        decision = resolve(view, self.registry, self.exclusions)

        if decision.action == LocaleAction.BYPASS:
            return await call_next(request)

        if decision.action == LocaleAction.REDIRECT:
            logger.debug("Locale redirect {} -> {}", view.path, decision.location)
            response: Response = RedirectResponse(url=decision.location, status_code=307)
        else:
            set_locale(decision.locale)
            request.state.lang = decision.locale
            response = await call_next(request)

        if decision.cookie is not None:
            apply_cookie(response, decision.cookie)
        return response
