"""Mini README: Asset service orchestrating storage and classification.

The ``service`` module holds the public API used by the web layer and CLI.
"""

from .service import (
    LIST_FAILURE_MESSAGE,
    AssetRecord,
    AssetService,
    EnumerationResult,
    derive_display_name,
    present_name,
)

__all__ = [
    "LIST_FAILURE_MESSAGE",
    "AssetRecord",
    "AssetService",
    "EnumerationResult",
    "derive_display_name",
    "present_name",
]
