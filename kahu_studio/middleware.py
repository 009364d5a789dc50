"""Security headers added to every response, redirects included."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from kahu_studio.config import CLOUDINARY_HOST

# Remote image hosts: Cloudinary CDN plus Notion-hosted uploads
_IMG_SOURCES = f"'self' data: https://{CLOUDINARY_HOST} https://*.amazonaws.com https://www.notion.so"

_CSP_DIRECTIVES: tuple[str, ...] = (
    "default-src 'self'",
    "script-src 'self' https://unpkg.com 'unsafe-inline'",
    "style-src 'self' 'unsafe-inline'",
    f"img-src {_IMG_SOURCES}",
    "font-src 'self'",
    "connect-src 'self'",
    "frame-ancestors 'none'",
)

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": "; ".join(_CSP_DIRECTIVES),
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=(), payment=()",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response
