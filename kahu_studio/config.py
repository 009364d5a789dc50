"""Central configuration: Notion, locales, cache and contact constants."""

import os

# Notion (headless content store)
NOTION_API_BASE = "https://api.notion.com/v1"
NOTION_API_KEY = os.environ.get("NOTION_API_KEY", "")
NOTION_PRODUCTS_DB = os.environ.get("NOTION_PRODUCTS_DB", "")
NOTION_PROJECTS_DB = os.environ.get("NOTION_PROJECTS_DB", "")
NOTION_VERSION = os.environ.get("NOTION_VERSION", "2022-06-28")
NOTION_TIMEOUT = 15.0  # seconds per request
NOTION_PAGE_SIZE = 100

# Pages revalidate their content every minute
CONTENT_CACHE_TTL = int(os.environ.get("CONTENT_CACHE_TTL", "60"))

# Cloudinary (image CDN)
CLOUDINARY_HOST = "res.cloudinary.com"

# i18n
SUPPORTED_LOCALES: tuple[str, ...] = tuple(
    code.strip() for code in os.environ.get("SUPPORTED_LOCALES", "fr,en").split(",") if code.strip()
)
DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "fr")
LOCALE_COOKIE = "KAHU_LOCALE"
LOCALE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # 1 year

# Paths never touched by the locale resolver
BYPASS_PREFIXES: tuple[str, ...] = ("/static", "/api", "/images")
FAVICON_PATH = "/favicon.ico"

# Contact
WHATSAPP_NUMBER = os.environ.get("WHATSAPP_NUMBER", "2250704160700")
CURRENCY_SUFFIX = "FCFA"
