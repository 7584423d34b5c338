"""Mini README: Durable storage for uploaded model files.

Exports the flat-directory ``AssetStore`` together with the removal outcome
enum and the storage error raised on read/write faults.
"""

from .asset_store import AssetStore, RemovalOutcome, StorageError

__all__ = ["AssetStore", "RemovalOutcome", "StorageError"]
