"""Mini README: Flat-directory storage for uploaded model assets.

Structure:
    * StorageError - raised when the store directory cannot be read or written.
    * RemovalOutcome - typed result of a delete attempt.
    * AssetStore - ingest, scan/list and remove files named
      ``<upload_timestamp_ms>-<original_filename>``.

Only files ending with the configured extension are visible. Everything
else in the directory is ignored by listing and can never be removed
through the store. Upload stamps are strictly increasing within a process
and skip past names already on disk, so two uploads never share a filename.
"""

from __future__ import annotations

import threading
import time
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(RuntimeError):
    """The asset directory could not be read or written."""


class RemovalOutcome(str, Enum):
    """Result of removing a stored asset."""

    OK = "ok"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"


def _wall_clock_millis() -> int:
    return time.time_ns() // 1_000_000


class AssetStore:
    """Persist opaque model files in one directory, addressed by filename."""

    def __init__(
        self,
        directory: Path,
        *,
        extension: str = ".glb",
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.directory = Path(directory)
        self.extension = extension
        self._clock = clock or _wall_clock_millis
        self._stamp_lock = threading.Lock()
        self._last_stamp = 0
        LOGGER.debug("Asset store directory set to %s", self.directory)

    def is_visible(self, filename: str) -> bool:
        """Return True when ``filename`` is a plain name carrying the asset extension."""

        if not filename or filename in {".", ".."}:
            return False
        if "/" in filename or "\\" in filename:
            return False
        return filename.endswith(self.extension)

    def path_for(self, filename: str) -> Path:
        return self.directory / filename

    def _next_stamp(self) -> int:
        with self._stamp_lock:
            stamp = max(self._clock(), self._last_stamp + 1)
            self._last_stamp = stamp
            return stamp

    def ingest(self, original_name: str, content: bytes) -> str:
        """Write ``content`` under a freshly generated name and return that name."""

        safe_name = Path(original_name.replace("\\", "/")).name
        if not safe_name:
            raise ValueError(f"Cannot derive a filename from {original_name!r}")

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise StorageError(f"Unable to create store directory {self.directory}") from error

        filename = f"{self._next_stamp()}-{safe_name}"
        while self.path_for(filename).exists():
            LOGGER.debug("Filename %s already taken; advancing stamp", filename)
            filename = f"{self._next_stamp()}-{safe_name}"

        try:
            self.path_for(filename).write_bytes(content)
        except OSError as error:
            raise StorageError(f"Unable to write asset {filename}") from error
        LOGGER.info("Stored asset %s (%s bytes)", filename, len(content))
        return filename

    def scan(self) -> List[str]:
        """Return visible filenames sorted ascending, raising ``StorageError`` on failure."""

        try:
            entries = [entry.name for entry in self.directory.iterdir() if entry.is_file()]
        except OSError as error:
            raise StorageError(f"Unable to read store directory {self.directory}") from error
        return sorted(name for name in entries if self.is_visible(name))

    def list_filenames(self) -> List[str]:
        """Return visible filenames, or an empty list when the directory is unreadable."""

        try:
            return self.scan()
        except StorageError as error:
            LOGGER.warning("Listing assets failed: %s", error)
            return []

    def remove(self, filename: str) -> RemovalOutcome:
        """Delete a visible asset. Never raises."""

        if not self.is_visible(filename):
            LOGGER.debug("Ignoring removal of non-asset name %r", filename)
            return RemovalOutcome.NOT_FOUND
        try:
            self.path_for(filename).unlink()
        except FileNotFoundError:
            return RemovalOutcome.NOT_FOUND
        except OSError as error:
            LOGGER.warning("Failed to remove %s: %s", filename, error)
            return RemovalOutcome.IO_ERROR
        LOGGER.info("Removed asset %s", filename)
        return RemovalOutcome.OK
