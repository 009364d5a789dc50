"""Catalog records parsed from Notion database pages."""

from dataclasses import dataclass, field

from kahu_studio.models.enums import ProductCategory, ProductStatus


@dataclass
class Product:
    """A piece of furniture or object from the products database.

    Attributes:
        id: Notion page ID.
        nom: Display name.
        slug: URL slug, unique across products.
        prix: Price in FCFA.
        quantite: Units in stock; 0 forces the status to ``Vendu``.
        statut: Publication / sale status.
        categorie: Capsule series or regular furniture.
        vente_flash: True only while a flash sale is running.
        date_fin_flash: ISO end date of the flash sale, if any.
        description: Free text, may contain markdown.
        materiaux: Free text list of materials.
        dimensions: Free text dimensions, if given.
        photos: Image URLs, Cloudinary or Notion-hosted.
        ordre: Manual sort key, lower first.
    """

    id: str
    nom: str
    slug: str
    prix: float = 0
    quantite: int = 1
    statut: ProductStatus = ProductStatus.DRAFT
    categorie: ProductCategory = ProductCategory.FURNITURE
    vente_flash: bool = False
    date_fin_flash: str | None = None
    description: str = ""
    materiaux: str = ""
    dimensions: str | None = None
    photos: list[str] = field(default_factory=list)
    ordre: int = 999

    @property
    def is_sold(self) -> bool:
        return self.statut == ProductStatus.SOLD

    @property
    def is_available(self) -> bool:
        return self.statut == ProductStatus.AVAILABLE

    @property
    def cover(self) -> str | None:
        return self.photos[0] if self.photos else None


@dataclass
class Project:
    """An interior-design project from the projects database."""

    id: str
    nom: str
    slug: str
    description: str = ""
    photos: list[str] = field(default_factory=list)
    annee: int | None = None
    visible: bool = True

    @property
    def cover(self) -> str | None:
        return self.photos[0] if self.photos else None
