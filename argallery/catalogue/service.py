"""Mini README: Upload, enumerate and remove gallery assets.

Structure:
    * derive_display_name / present_name - filename to human-readable name.
    * AssetRecord - enriched view of one stored file, rebuilt per query.
    * EnumerationResult - ``{success, models, message}`` envelope.
    * AssetService - thin orchestration over ``AssetStore`` and a ``Taxonomy``.

No metadata is persisted: every record is recomputed from the filename on
each call, so the filesystem is the only state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..classification import StaticTaxonomy, Taxonomy
from ..logging_utils import get_logger
from ..storage import AssetStore, RemovalOutcome, StorageError

LOGGER = get_logger(__name__)

LIST_FAILURE_MESSAGE = "Error reading models directory"

_STAMP_PREFIX = re.compile(r"^\d+-")


def derive_display_name(filename: str, extension: str = ".glb") -> str:
    """Strip the ``<digits>-`` upload prefix and the asset extension."""

    name = _STAMP_PREFIX.sub("", filename, count=1)
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name


def present_name(display_name: str) -> str:
    """Upper-case the first character only."""

    return display_name[:1].upper() + display_name[1:]


@dataclass(frozen=True, slots=True)
class AssetRecord:
    """A stored model enriched with derived presentation metadata."""

    filename: str
    name: str
    category: str
    description: str
    thumbnail_url: Optional[str] = None

    @property
    def id(self) -> str:
        return self.filename

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "id": self.id,
            "name": self.name,
            "filename": self.filename,
            "description": self.description,
            "category": self.category,
            "thumbnailUrl": self.thumbnail_url,
        }


@dataclass(slots=True)
class EnumerationResult:
    """Outcome of an enriched listing."""

    success: bool
    models: List[AssetRecord] = field(default_factory=list)
    message: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "models": [record.as_dict() for record in self.models],
            "message": self.message,
        }


class AssetService:
    """Coordinate the asset store with the classification taxonomy."""

    def __init__(self, store: AssetStore, *, taxonomy: Optional[Taxonomy] = None) -> None:
        self.store = store
        self.taxonomy = taxonomy or StaticTaxonomy()

    def ingest_asset(self, original_name: str, content: bytes) -> str:
        """Store uploaded content unchanged and return the generated filename."""

        return self.store.ingest(original_name, content)

    def list_filenames(self) -> List[str]:
        """Bare listing used by the viewer grid; empty on read failure."""

        return self.store.list_filenames()

    def build_record(self, filename: str) -> AssetRecord:
        display_name = derive_display_name(filename, self.store.extension)
        classification = self.taxonomy.lookup(display_name)
        return AssetRecord(
            filename=filename,
            name=present_name(display_name),
            category=classification.category.value,
            description=classification.description,
        )

    def enumerate_assets(self) -> EnumerationResult:
        """List every visible asset with its category and description."""

        try:
            filenames = self.store.scan()
        except StorageError as error:
            LOGGER.warning("Enumerating assets failed: %s", error)
            return EnumerationResult(success=False, models=[], message=LIST_FAILURE_MESSAGE)
        records = [self.build_record(filename) for filename in filenames]
        LOGGER.debug("Enumerated %s assets", len(records))
        return EnumerationResult(success=True, models=records, message=None)

    def remove_asset(self, filename: str) -> RemovalOutcome:
        """Remove an asset; failures are reported in the outcome, never raised."""

        outcome = self.store.remove(filename)
        if outcome is not RemovalOutcome.OK:
            LOGGER.warning("Removal of %s finished with outcome %s", filename, outcome.value)
        return outcome
