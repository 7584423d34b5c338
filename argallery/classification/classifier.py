"""Mini README: Static taxonomy mapping model names to categories and descriptions.

Structure:
    * Category - enumerated gallery categories.
    * classify / describe - pure, case-insensitive exact-match lookups.
    * ModelClassification - pair returned by a taxonomy lookup.
    * Taxonomy - protocol consumed by the asset service.
    * StaticTaxonomy - default implementation backed by the tables below.

Matching is exact on the lower-cased name: ``"helmet"`` does not match
``"damaged_helmet"``. Reclassifying a model only requires editing these
tables; stored files are never touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Protocol, Tuple

FALLBACK_DESCRIPTION = "A 3D model for AR viewing and interaction."


class Category(str, Enum):
    """Gallery categories, in no particular order."""

    GEOMETRIC = "Geometric"
    EDUCATIONAL = "Educational"
    ANIMALS = "Animals"
    OBJECTS = "Objects"
    EQUIPMENT = "Equipment"
    GENERAL = "General"


# Checked in this order; first match wins.
_CATEGORY_MEMBERS: Tuple[Tuple[Category, FrozenSet[str]], ...] = (
    (Category.GEOMETRIC, frozenset({"cube", "sphere", "cylinder", "square"})),
    (Category.EDUCATIONAL, frozenset({"alphabet"})),
    (
        Category.ANIMALS,
        frozenset(
            {
                "cat",
                "dog",
                "elephant",
                "fox",
                "goat",
                "hen",
                "lion",
                "monkey",
                "owl",
                "parrot",
                "quail",
                "rat",
                "zebra",
            }
        ),
    ),
    (
        Category.OBJECTS,
        frozenset(
            {
                "apple",
                "ball",
                "icecream",
                "jug",
                "kite",
                "nest",
                "ship",
                "telephone",
                "umbrella",
                "van",
                "watch",
                "xylophone",
                "yacht",
            }
        ),
    ),
    (Category.EQUIPMENT, frozenset({"damaged_helmet"})),
)

_DESCRIPTIONS: Dict[str, str] = {
    "cube": "A three-dimensional solid object bounded by six square faces, facets or sides, with three meeting at each vertex.",
    "cylinder": "A three-dimensional solid that holds two parallel bases joined by a curved surface, at a fixed distance.",
    "sphere": "A perfectly round three-dimensional object where every point on the surface is equidistant from the center.",
    "square": "A two-dimensional shape with four equal sides and four right angles.",
    "alphabet": "Educational model for learning the alphabet.",
    "apple": "A round fruit with red, yellow, or green skin and white flesh.",
    "ball": "A spherical object used in various sports and games.",
    "cat": "A small domesticated carnivorous mammal with soft fur.",
    "dog": "A domesticated carnivorous mammal, typically kept as a pet.",
    "elephant": "A large gray mammal with a long trunk and tusks.",
    "fox": "A small wild canine with a bushy tail and pointed ears.",
    "goat": "A domesticated ruminant mammal with backward-curving horns.",
    "hen": "A female chicken, especially one kept for egg production.",
    "icecream": "A sweet frozen food made from dairy products.",
    "jug": "A container for holding liquids, typically with a handle and spout.",
    "kite": "A light frame covered with paper or cloth, flown in the wind.",
    "lion": "A large wild cat with a tawny coat and a flowing mane.",
    "monkey": "A small to medium-sized primate with a long tail.",
    "nest": "A structure built by birds to hold their eggs and young.",
    "owl": "A nocturnal bird of prey with large eyes and a hooked beak.",
    "parrot": "A colorful tropical bird with a curved beak and the ability to mimic speech.",
    "quail": "A small ground-dwelling bird with a plump body.",
    "rat": "A rodent with a long tail and pointed snout.",
    "ship": "A large vessel for transporting passengers or cargo by sea.",
    "telephone": "A device for transmitting sound over long distances.",
    "umbrella": "A device used for protection against rain or sun.",
    "van": "A motor vehicle used for transporting goods or people.",
    "watch": "A small timepiece worn on the wrist.",
    "xylophone": "A musical instrument with wooden bars struck by mallets.",
    "yacht": "A medium-sized sailing vessel used for recreation.",
    "zebra": "A wild horse with black and white stripes.",
    "damaged_helmet": "A protective headgear that has been damaged or worn.",
}


def classify(display_name: str) -> Category:
    """Return the category for ``display_name``, defaulting to ``General``."""

    key = display_name.lower()
    for category, members in _CATEGORY_MEMBERS:
        if key in members:
            return category
    return Category.GENERAL


def describe(display_name: str) -> str:
    """Return the stored description or the generic fallback."""

    return _DESCRIPTIONS.get(display_name.lower(), FALLBACK_DESCRIPTION)


@dataclass(frozen=True, slots=True)
class ModelClassification:
    """Category and description resolved for one display name."""

    category: Category
    description: str


class Taxonomy(Protocol):
    """Anything that can resolve a display name to a classification."""

    def lookup(self, display_name: str) -> ModelClassification:
        ...


class StaticTaxonomy:
    """Taxonomy backed by the module-level lookup tables."""

    def lookup(self, display_name: str) -> ModelClassification:
        return ModelClassification(
            category=classify(display_name),
            description=describe(display_name),
        )

    def export_categories(self) -> List[str]:
        """Expose category labels for UI consumption."""

        return [category.value for category in Category]
