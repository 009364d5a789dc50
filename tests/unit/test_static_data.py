"""Tests for the bundled studio data."""

from kahu_studio.data import localized
from kahu_studio.data.materials import (
    BIO_MATERIALS,
    get_bio_material_by_id,
    get_bio_materials_by_status,
)
from kahu_studio.data.team import TEAM_MEMBERS, get_artisans, get_founder, get_team_member_by_id
from kahu_studio.data.woods import WOOD_ESSENCES, get_wood_by_id
from kahu_studio.models.enums import MaterialStatus


class TestWoods:
    def test_nine_species(self):
        assert len(WOOD_ESSENCES) == 9
        assert len({w.id for w in WOOD_ESSENCES}) == 9

    def test_lookup(self):
        assert get_wood_by_id("iroko").scientific_name == "Milicia excelsa"
        assert get_wood_by_id("oak") is None

    def test_bilingual_fields(self):
        for wood in WOOD_ESSENCES:
            assert set(wood.description) == {"fr", "en"}
            assert set(wood.characteristics) == {"fr", "en"}
            assert 1 <= wood.durability <= 5


class TestBioMaterials:
    def test_lookup(self):
        assert get_bio_material_by_id("graine").status == MaterialStatus.PROTOTYPE
        assert get_bio_material_by_id("plastic") is None

    def test_by_status(self):
        production = get_bio_materials_by_status(MaterialStatus.PRODUCTION)
        assert [m.id for m in production] == ["bio-terrazzo"]
        assert sum(len(get_bio_materials_by_status(s)) for s in MaterialStatus) == len(BIO_MATERIALS)


class TestTeam:
    def test_single_founder(self):
        assert get_founder().id == "mouna-shaima"
        assert sum(m.is_founder for m in TEAM_MEMBERS) == 1

    def test_artisans_exclude_founder(self):
        artisans = get_artisans()
        assert len(artisans) == 3
        assert all(not m.is_founder for m in artisans)

    def test_lookup(self):
        assert get_team_member_by_id("kouadio-yao").experience == 25
        assert get_team_member_by_id("nobody") is None


class TestLocalized:
    def test_picks_language(self):
        assert localized({"fr": "Bois", "en": "Wood"}, "en") == "Wood"

    def test_falls_back_to_default(self):
        assert localized({"fr": "Bois", "en": "Wood"}, "de") == "Bois"
