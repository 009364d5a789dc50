"""Tests for Cloudinary URL helpers."""

import re
from pathlib import Path

import pytest

import kahu_studio
from kahu_studio.services.cloudinary import (
    PRESETS,
    get_blur_placeholder,
    get_image_src_set,
    get_optimized_image_url,
)

URL = "https://res.cloudinary.com/kahu/image/upload/v1/products/table.jpg"


class TestGetOptimizedImageUrl:
    def test_default_card_preset(self):
        assert get_optimized_image_url(URL) == (
            "https://res.cloudinary.com/kahu/image/upload/"
            "w_600,h_800,q_80,c_fill,f_auto,dpr_auto/v1/products/table.jpg"
        )

    def test_hero_preset(self):
        result = get_optimized_image_url(URL, "hero")
        assert "/upload/w_1920,h_1080,q_85,c_fill,f_auto,dpr_auto/" in result

    def test_non_cloudinary_is_identity(self):
        url = "https://s3.amazonaws.com/notion/photo.jpg"
        assert get_optimized_image_url(url, "thumbnail") == url

    def test_missing_upload_marker_is_identity(self):
        url = "https://res.cloudinary.com/kahu/image/fetch/photo.jpg"
        assert get_optimized_image_url(url) == url

    def test_empty_url(self):
        assert get_optimized_image_url("") == ""

    def test_unknown_preset_raises(self):
        with pytest.raises(ValueError, match="Unknown image preset"):
            get_optimized_image_url(URL, "poster")

    def test_all_presets_fill_crop(self):
        assert set(PRESETS) == {"thumbnail", "card", "full", "hero", "gallery"}
        assert all(p.crop == "fill" for p in PRESETS.values())


class TestSrcSet:
    def test_cloudinary_widths(self):
        result = get_image_src_set(URL)
        entries = result.split(", ")
        assert len(entries) == 4
        assert entries[0].endswith(" 400w")
        assert "/upload/w_1200,q_auto,f_auto/" in entries[3]

    def test_other_host_repeats_url(self):
        result = get_image_src_set("/images/woods/iroko.jpg")
        assert result.startswith("/images/woods/iroko.jpg 400w")


class TestBlurPlaceholder:
    def test_cloudinary(self):
        assert "/upload/w_20,q_10,e_blur:1000/v1/" in get_blur_placeholder(URL)

    def test_other_host(self):
        assert get_blur_placeholder("/images/a.jpg") == "/images/a.jpg"


class TestPresetNames:
    def test_unknown_preset_raises_for_any_url(self):
        with pytest.raises(ValueError, match="Unknown image preset"):
            get_optimized_image_url("/images/woods/iroko.jpg", "cards")

    def test_templates_use_known_presets(self):
        templates_dir = Path(kahu_studio.__file__).parent / "templates"
        used = {
            match
            for path in templates_dir.rglob("*.html")
            for match in re.findall(r"cloudinary\(['\"](\w+)['\"]\)", path.read_text(encoding="utf-8"))
        }
        assert used
        assert used <= set(PRESETS)
