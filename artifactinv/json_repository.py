"""Artifact storage in a JSON document."""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from os import PathLike
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .artifact import Artifact
from .repository import (
    ArtifactNotFoundError,
    DuplicateArtifactError,
    Repository,
    RepositoryError,
)

FORMAT_VERSION = "1.0"


def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def artifact_to_dict(artifact: Artifact) -> Dict[str, str]:
    """Return the JSON object that represents an artifact."""
    found = artifact.discovery_date
    return {
        "id": artifact.id,
        "name": artifact.name,
        "description": artifact.description,
        "material": artifact.material,
        "discoveryDate": "" if found is None else found.isoformat(),
        "location": artifact.location,
    }


def artifact_from_dict(data: Dict[str, Any]) -> Artifact:
    """Build an artifact from a JSON object; non-string values read as empty."""
    return Artifact(
        id=_text(data, "id"),
        name=_text(data, "name"),
        description=_text(data, "description"),
        material=_text(data, "material"),
        discovery_date=_parse_date(_text(data, "discoveryDate")),
        location=_text(data, "location"),
    )


class JsonRepository(Repository):
    """A repository persisted to a JSON file.

    The file is read once when the repository is created; every change is
    written back to it in full.
    """

    def __init__(self, path: Union[str, PathLike]) -> None:
        self._path = Path(path)
        self._artifacts: List[Artifact] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> List[Artifact]:
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise RepositoryError(
                f"Cannot open JSON file for reading: {self._path}"
            ) from exc

        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise RepositoryError(f"JSON parse error: {exc}") from exc

        if not isinstance(document, dict):
            raise RepositoryError("JSON document is not an object")

        entries = document.get("artifacts")
        if not isinstance(entries, list):
            return []
        return [artifact_from_dict(e) for e in entries if isinstance(e, dict)]

    def _save(self) -> None:
        document = {
            "artifacts": [artifact_to_dict(a) for a in self._artifacts],
            "version": FORMAT_VERSION,
            "timestamp": datetime.now().replace(microsecond=0).isoformat(),
        }
        payload = json.dumps(document, indent=4, ensure_ascii=False, sort_keys=True)
        try:
            self._path.write_bytes((payload + "\n").encode("utf-8"))
        except OSError as exc:
            raise RepositoryError(
                f"Cannot open JSON file for writing: {self._path}"
            ) from exc

    def add(self, artifact: Artifact) -> None:
        if any(a.id == artifact.id for a in self._artifacts):
            raise DuplicateArtifactError(
                f"Artifact with ID '{artifact.id}' already exists."
            )
        self._artifacts.append(dataclasses.replace(artifact))
        self._save()

    def remove(self, artifact_id: str) -> None:
        kept = [a for a in self._artifacts if a.id != artifact_id]
        if len(kept) == len(self._artifacts):
            raise ArtifactNotFoundError(
                f"Artifact with ID '{artifact_id}' not found."
            )
        self._artifacts = kept
        self._save()

    def update(self, artifact: Artifact) -> None:
        for index, existing in enumerate(self._artifacts):
            if existing.id == artifact.id:
                self._artifacts[index] = dataclasses.replace(artifact)
                self._save()
                return
        raise ArtifactNotFoundError(
            f"Artifact with ID '{artifact.id}' not found for update."
        )

    def find_by_id(self, artifact_id: str) -> Artifact:
        for artifact in self._artifacts:
            if artifact.id == artifact_id:
                return dataclasses.replace(artifact)
        raise ArtifactNotFoundError(f"Artifact with ID '{artifact_id}' not found.")

    def all(self) -> List[Artifact]:
        return [dataclasses.replace(a) for a in self._artifacts]