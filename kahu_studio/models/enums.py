"""Domain enumerations for the Notion catalog."""

from enum import StrEnum


class ProductStatus(StrEnum):
    """Select values of the ``Statut`` property."""

    AVAILABLE = "Disponible"
    SOLD = "Vendu"
    DRAFT = "Brouillon"


class ProductCategory(StrEnum):
    """Select values of the ``Categorie`` property."""

    CAPSULE = "Capsule"
    FURNITURE = "Mobilier"


class ProductFilter(StrEnum):
    """Filters offered on the product grid."""

    ALL = "tous"
    CAPSULE = "capsule"
    FURNITURE = "mobilier"
    FLASH = "flash"


class MaterialStatus(StrEnum):
    RESEARCH = "research"
    PROTOTYPE = "prototype"
    PRODUCTION = "production"
