"""Static studio content: wood species, bio-materials, team members."""

from typing import TypeVar

from kahu_studio.i18n import DEFAULT_LANGUAGE

T = TypeVar("T")


def localized(value: dict[str, T], lang: str) -> T:
    """Pick the *lang* entry of a bilingual field, falling back to the default language."""
    return value.get(lang, value[DEFAULT_LANGUAGE])
