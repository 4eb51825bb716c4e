"""JSON file storage for scenes and character records.

Each store owns one versioned document of the form
``{"version": 1, "<collection>": [...]}``. Saves go through a temporary file
in the same directory followed by a rename, so readers never see a partially
written document.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, ClassVar

from scriptlens.config import get_logger
from scriptlens.exceptions import StorageError
from scriptlens.models import CharacterAppearance, Scene
from scriptlens.storage.base import StorageResult

logger = get_logger(__name__)

STORAGE_VERSION = 1


class _JsonDocumentStore:
    """Shared read/write logic for single-collection JSON documents."""

    collection: ClassVar[str]

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON document; parent directories are
                created on first save
        """
        self.path = Path(path)

    def _write_records(self, records: list[dict[str, Any]]) -> StorageResult:
        document = {"version": STORAGE_VERSION, self.collection: records}
        temp_path: str | None = None

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.stem}_",
                suffix=".tmp",
            )
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            Path(temp_path).replace(self.path)
        except OSError as e:
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    Path(temp_path).unlink()
            raise StorageError(
                message=f"Failed to write {self.collection} to {self.path}",
                hint="Check that the storage directory is writable",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        logger.info(
            f"Saved {len(records)} {self.collection}",
            path=str(self.path),
        )
        return StorageResult(len(records), str(self.path))

    def _read_records(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            logger.debug(f"No {self.collection} stored yet", path=str(self.path))
            return []

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable {self.collection} store", path=str(self.path))
            raise StorageError(
                message=f"Could not read stored {self.collection}",
                hint="Delete the file or save the screenplay again to rebuild it",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not isinstance(document, dict):
            raise StorageError(
                message=f"Stored {self.collection} document is not an object",
                details={"path": str(self.path)},
            )

        version = document.get("version")
        if version != STORAGE_VERSION:
            raise StorageError(
                message=f"Unsupported {self.collection} store version: {version}",
                hint=f"Expected version {STORAGE_VERSION}",
                details={"path": str(self.path), "version": version},
            )

        records = document.get(self.collection)
        if not isinstance(records, list):
            raise StorageError(
                message=f"Stored document has no '{self.collection}' list",
                details={"path": str(self.path), "keys": sorted(document)},
            )
        return records

    def _invalid_record(self, error: Exception) -> StorageError:
        return StorageError(
            message=f"Invalid record in stored {self.collection}",
            hint="Delete the file or save the screenplay again to rebuild it",
            details={"path": str(self.path), "error": str(error)},
        )


class JsonSceneStore(_JsonDocumentStore):
    """Persist scenes as a JSON document."""

    collection = "scenes"

    def save(self, scenes: Iterable[Scene]) -> StorageResult:
        return self._write_records([scene.to_dict() for scene in scenes])

    def load(self) -> list[Scene]:
        try:
            return [Scene.from_dict(record) for record in self._read_records()]
        except (KeyError, TypeError, ValueError) as e:
            raise self._invalid_record(e) from e


class JsonCharacterStore(_JsonDocumentStore):
    """Persist character records as a JSON document, in first-appearance order."""

    collection = "characters"

    def save(self, characters: Mapping[str, CharacterAppearance]) -> StorageResult:
        return self._write_records([record.to_dict() for record in characters.values()])

    def load(self) -> dict[str, CharacterAppearance]:
        try:
            records = [
                CharacterAppearance.from_dict(record)
                for record in self._read_records()
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise self._invalid_record(e) from e
        return {record.name: record for record in records}
