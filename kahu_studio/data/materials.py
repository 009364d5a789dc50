"""Bio-materials developed in the KAHU lab from workshop waste."""

from dataclasses import dataclass

from kahu_studio.models.enums import MaterialStatus


@dataclass(frozen=True)
class BioMaterial:
    id: str
    name: str
    year: int
    description: dict[str, str]
    image: str
    status: MaterialStatus
    ingredients: dict[str, list[str]]


BIO_MATERIALS: tuple[BioMaterial, ...] = (
    BioMaterial(
        id="bio-terrazzo",
        name="Bio-Terrazzo",
        year=2023,
        description={
            "fr": "Surface décorative composée de chutes de bois et de résine bio-sourcée. Une alternative écologique au terrazzo traditionnel, valorisant nos déchets d'atelier.",
            "en": "Decorative surface made from wood offcuts and bio-sourced resin. An ecological alternative to traditional terrazzo, repurposing our workshop waste.",
        },
        image="/images/materials/bio-terrazzo.jpg",
        status=MaterialStatus.PRODUCTION,
        ingredients={
            "fr": ["Chutes de bois précieux", "Résine bio-sourcée", "Pigments naturels"],
            "en": ["Precious wood offcuts", "Bio-sourced resin", "Natural pigments"],
        },
    ),
    BioMaterial(
        id="graine",
        name="Graine",
        year=2024,
        description={
            "fr": "Matériau composite à base de coques de graines locales et de liant naturel. Texture unique et empreinte carbone minimale.",
            "en": "Composite material based on local seed shells and natural binder. Unique texture and minimal carbon footprint.",
        },
        image="/images/materials/graine.jpg",
        status=MaterialStatus.PROTOTYPE,
        ingredients={
            "fr": ["Coques de graines", "Liant végétal", "Fibres naturelles"],
            "en": ["Seed shells", "Plant-based binder", "Natural fibers"],
        },
    ),
    BioMaterial(
        id="tiles",
        name="Tiles",
        year=2025,
        description={
            "fr": "Carreaux modulaires fabriqués à partir de sciure compressée et de cire d'abeille. Projet en développement pour revêtements muraux.",
            "en": "Modular tiles made from compressed sawdust and beeswax. Project in development for wall coverings.",
        },
        image="/images/materials/tiles.jpg",
        status=MaterialStatus.RESEARCH,
        ingredients={
            "fr": ["Sciure compressée", "Cire d'abeille", "Huiles essentielles"],
            "en": ["Compressed sawdust", "Beeswax", "Essential oils"],
        },
    ),
)


def get_bio_material_by_id(material_id: str) -> BioMaterial | None:
    return next((m for m in BIO_MATERIALS if m.id == material_id), None)


def get_bio_materials_by_status(status: MaterialStatus) -> list[BioMaterial]:
    return [m for m in BIO_MATERIALS if m.status == status]
