"""File-based persistence for the ledger snapshot."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError as SchemaValidationError

from ..config import settings
from ..exceptions import StorageError
from ..schemas.snapshot import StoreSnapshot

logger = logging.getLogger(__name__)


class SnapshotStorage(Protocol):
    def load(self) -> Optional[StoreSnapshot]: ...

    def save(self, snapshot: StoreSnapshot) -> None: ...


class FileStorage:
    """Reads and writes the whole store as one JSON document."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or settings.store_file).resolve()

    def load(self) -> Optional[StoreSnapshot]:
        if not self.path.exists():
            return None
        try:
            payload = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read snapshot %s: %s", self.path, exc)
            raise StorageError(f"Unable to read snapshot: {exc}", code="read_failed") from exc
        if not payload.strip():
            return None
        try:
            return StoreSnapshot.model_validate_json(payload)
        except SchemaValidationError as exc:
            logger.error("Snapshot %s is malformed: %s", self.path, exc)
            raise StorageError(
                f"Snapshot file '{self.path.name}' is malformed",
                code="corrupt_snapshot",
                details={"errors": exc.error_count()},
            ) from exc

    def save(self, snapshot: StoreSnapshot) -> None:
        temp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f"{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                handle.write(snapshot.model_dump_json(by_alias=True, indent=2))
            os.replace(temp_name, self.path)
        except OSError as exc:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            logger.error("Failed to write snapshot %s: %s", self.path, exc)
            raise StorageError(f"Unable to write snapshot: {exc}", code="write_failed") from exc
