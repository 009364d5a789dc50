"""Supported locales: the single source of truth for locale codes."""

from dataclasses import dataclass

from kahu_studio.config import DEFAULT_LOCALE, SUPPORTED_LOCALES


@dataclass(frozen=True)
class LocaleRegistry:
    """Immutable set of locale codes with exactly one default.

    Attributes:
        locales: Locale codes in display order.
        default_locale: Code used when no other signal applies.
    """

    locales: tuple[str, ...]
    default_locale: str

    def __post_init__(self) -> None:
        if not self.locales:
            raise ValueError("LocaleRegistry needs at least one locale")
        if len(set(self.locales)) != len(self.locales):
            raise ValueError(f"Duplicate locale codes in {self.locales!r}")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale!r} is not one of {self.locales!r}"
            )

    def is_valid_locale(self, candidate: object) -> bool:
        """Exact, case-sensitive membership test. Never raises."""
        return isinstance(candidate, str) and candidate in self.locales

    def path_locale(self, path: str) -> str | None:
        """Return the locale carried by the first path segment, if any."""
        for locale in self.locales:
            if path == f"/{locale}" or path.startswith(f"/{locale}/"):
                return locale
        return None

    def switch_locale_path(self, path: str, new_locale: str) -> str:
        """Rewrite *path* so its first segment is *new_locale*."""
        segments = path.split("/")
        if len(segments) > 1 and self.is_valid_locale(segments[1]):
            segments[1] = new_locale
        else:
            segments.insert(1, new_locale)
        new_path = "/".join(segments).rstrip("/")
        return new_path or f"/{new_locale}"


DEFAULT_REGISTRY = LocaleRegistry(locales=SUPPORTED_LOCALES, default_locale=DEFAULT_LOCALE)
