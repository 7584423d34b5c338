"""Mini README: Display-name classification for gallery models.

Exports the category enum, the pure ``classify``/``describe`` helpers and the
``StaticTaxonomy`` default. Callers depend on the ``Taxonomy`` protocol so a
real lookup service can replace the static tables later.
"""

from .classifier import (
    FALLBACK_DESCRIPTION,
    Category,
    ModelClassification,
    StaticTaxonomy,
    Taxonomy,
    classify,
    describe,
)

__all__ = [
    "FALLBACK_DESCRIPTION",
    "Category",
    "ModelClassification",
    "StaticTaxonomy",
    "Taxonomy",
    "classify",
    "describe",
]
