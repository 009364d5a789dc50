"""Unit tests for Notion page parsing."""

from kahu_studio.models.enums import ProductCategory, ProductStatus
from kahu_studio.services.notion_parser import extract_photos, parse_product, parse_project
from tests.fixtures.sample_data import CLOUDINARY_PHOTO, make_product_page, make_project_page


class TestExtractPhotos:
    def test_files_external_and_hosted(self):
        prop = {
            "files": [
                {"external": {"url": "https://res.cloudinary.com/a.jpg"}},
                {"file": {"url": "https://s3.amazonaws.com/b.jpg"}},
                {"name": "broken"},
            ]
        }
        assert extract_photos(prop) == [
            "https://res.cloudinary.com/a.jpg",
            "https://s3.amazonaws.com/b.jpg",
        ]

    def test_url_property(self):
        assert extract_photos({"url": "https://res.cloudinary.com/a.jpg"}) == [
            "https://res.cloudinary.com/a.jpg"
        ]

    def test_rich_text_lines_keep_only_http(self):
        prop = {
            "rich_text": [
                {"plain_text": "https://res.cloudinary.com/a.jpg\n  note interne\n"},
                {"plain_text": "https://res.cloudinary.com/b.jpg"},
            ]
        }
        assert extract_photos(prop) == [
            "https://res.cloudinary.com/a.jpg",
            "https://res.cloudinary.com/b.jpg",
        ]

    def test_empty(self):
        assert extract_photos({}) == []
        assert extract_photos({"files": []}) == []


class TestParseProduct:
    def test_full_page(self):
        product = parse_product(make_product_page())
        assert product.id == "page-table-iroko"
        assert product.nom == "Table Iroko"
        assert product.slug == "table-iroko"
        assert product.prix == 450000
        assert product.statut == ProductStatus.AVAILABLE
        assert product.categorie == ProductCategory.FURNITURE
        assert product.description == "Plateau massif, pieds fuselés."
        assert product.dimensions == "180 x 90 x 75 cm"
        assert product.photos == [CLOUDINARY_PHOTO]
        assert product.ordre == 1

    def test_defaults_for_missing_properties(self):
        product = parse_product({"id": "p1", "properties": {}})
        assert product.quantite == 1
        assert product.statut == ProductStatus.DRAFT
        assert product.categorie == ProductCategory.FURNITURE
        assert product.prix == 0
        assert product.ordre == 999
        assert product.dimensions is None
        assert product.photos == []

    def test_zero_quantity_forces_sold(self):
        product = parse_product(make_product_page(quantite=0, statut="Disponible"))
        assert product.statut == ProductStatus.SOLD
        assert product.is_sold

    def test_missing_quantity_is_one(self):
        assert parse_product(make_product_page(quantite=None)).quantite == 1

    def test_unknown_status_is_draft(self):
        assert parse_product(make_product_page(statut="Archivé")).statut == ProductStatus.DRAFT

    def test_capsule_category(self):
        assert parse_product(make_product_page(categorie="Capsule")).categorie == ProductCategory.CAPSULE

    def test_flash_without_end_date(self):
        assert parse_product(make_product_page(vente_flash=True)).vente_flash is True

    def test_flash_future_end_date(self):
        page = make_product_page(vente_flash=True, date_fin_flash="2099-12-31")
        assert parse_product(page).vente_flash is True

    def test_flash_expired(self):
        page = make_product_page(vente_flash=True, date_fin_flash="2000-01-01")
        product = parse_product(page)
        assert product.vente_flash is False
        assert product.date_fin_flash == "2000-01-01"

    def test_end_date_without_checkbox(self):
        page = make_product_page(vente_flash=False, date_fin_flash="2099-12-31")
        assert parse_product(page).vente_flash is False


class TestParseProject:
    def test_full_page(self):
        project = parse_project(make_project_page())
        assert project.nom == "Villa Cocody"
        assert project.annee == 2024
        assert project.visible is True
        assert project.photos == ["https://s3.amazonaws.com/notion/villa.jpg"]

    def test_missing_year(self):
        assert parse_project(make_project_page(annee=None)).annee is None

    def test_visible_defaults_true(self):
        assert parse_project({"id": "x", "properties": {}}).visible is True
