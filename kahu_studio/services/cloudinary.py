"""Cloudinary URL helpers: size presets, srcset and blur placeholders.

Pure string transforms; URLs not served by Cloudinary pass through unchanged.
"""

from dataclasses import dataclass

from kahu_studio.config import CLOUDINARY_HOST

_UPLOAD_MARKER = "/upload/"
SRCSET_WIDTHS: tuple[int, ...] = (400, 600, 800, 1200)


@dataclass(frozen=True)
class ImagePreset:
    width: int
    quality: int
    height: int | None = None
    crop: str | None = None

    def transformation(self) -> str:
        parts = [
            f"w_{self.width}",
            f"h_{self.height}" if self.height else None,
            f"q_{self.quality}",
            f"c_{self.crop}" if self.crop else None,
            "f_auto",
            "dpr_auto",
        ]
        return ",".join(p for p in parts if p)


PRESETS: dict[str, ImagePreset] = {
    "thumbnail": ImagePreset(width=400, height=533, quality=70, crop="fill"),
    "card": ImagePreset(width=600, height=800, quality=80, crop="fill"),
    "full": ImagePreset(width=1200, height=1600, quality=85, crop="fill"),
    "hero": ImagePreset(width=1920, height=1080, quality=85, crop="fill"),
    "gallery": ImagePreset(width=1600, height=1200, quality=85, crop="fill"),
}


def is_cloudinary_url(url: str) -> bool:
    return CLOUDINARY_HOST in url


def _insert_transformation(url: str, transformation: str) -> str:
    parts = url.split(_UPLOAD_MARKER)
    if len(parts) != 2:
        return url
    return f"{parts[0]}{_UPLOAD_MARKER}{transformation}/{parts[1]}"


def get_optimized_image_url(url: str, preset: str = "card") -> str:
    """Insert the transformation for *preset* after ``/upload/``.

    Raises:
        ValueError: if *preset* is not one of :data:`PRESETS`.
    """
    if preset not in PRESETS:
        raise ValueError(f"Unknown image preset {preset!r}")
    if not url or not is_cloudinary_url(url):
        return url
    return _insert_transformation(url, PRESETS[preset].transformation())


def get_image_src_set(url: str) -> str:
    """Responsive ``srcset`` value for the standard widths."""
    entries = []
    for width in SRCSET_WIDTHS:
        optimized = (
            url.replace(_UPLOAD_MARKER, f"{_UPLOAD_MARKER}w_{width},q_auto,f_auto/")
            if is_cloudinary_url(url)
            else url
        )
        entries.append(f"{optimized} {width}w")
    return ", ".join(entries)


def get_blur_placeholder(url: str) -> str:
    """Tiny blurred variant for lazy-loading placeholders."""
    if not url or not is_cloudinary_url(url):
        return url
    return _insert_transformation(url, "w_20,q_10,e_blur:1000")
