"""Text helpers: slugs, prices, WhatsApp links, flash-sale dates."""

import re
import unicodedata
from datetime import UTC, datetime
from urllib.parse import quote

from kahu_studio.config import CURRENCY_SUFFIX, WHATSAPP_NUMBER

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def strip_diacritics(text: str) -> str:
    """Remove diacritical marks from text (e.g. é→e, ç→c)."""
    nfkd = unicodedata.normalize("NFD", text)
    return "".join(c for c in nfkd if unicodedata.category(c) != "Mn")


def slugify(text: str) -> str:
    """Lowercase, strip accents and join alphanumeric runs with dashes."""
    return _NON_ALNUM_RE.sub("-", strip_diacritics(text.lower())).strip("-")


def format_price(price: float) -> str:
    """Format a price in FCFA with space-grouped thousands: ``1 250 000 FCFA``."""
    grouped = f"{round(price):,}".replace(",", " ")
    return f"{grouped} {CURRENCY_SUFFIX}"


def generate_whatsapp_link(product_name: str | None = None, number: str | None = None) -> str:
    """Build a wa.me link with a pre-filled French message."""
    if product_name:
        message = f"Bonjour, je suis interesse(e) par << {product_name} >>."
    else:
        message = "Bonjour, je souhaite discuter d'un projet sur-mesure."
    return f"https://wa.me/{number or WHATSAPP_NUMBER}?text={quote(message, safe='')}"


def _parse_date(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_flash_sale_active(date_fin_flash: str | None, now: datetime | None = None) -> bool:
    """A flash sale without end date runs forever; otherwise until the end date.

    An unparseable end date is treated as already expired.
    """
    if not date_fin_flash:
        return True
    end = _parse_date(date_fin_flash)
    if end is None:
        return False
    return end > (now or datetime.now(tz=UTC))
