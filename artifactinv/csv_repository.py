"""Artifact storage in a comma-separated text file."""

from __future__ import annotations

import dataclasses
from datetime import date
from os import PathLike
from pathlib import Path
from typing import List, Optional, Union

from .artifact import Artifact
from .repository import (
    ArtifactNotFoundError,
    DuplicateArtifactError,
    Repository,
    RepositoryError,
)

HEADER = "ID,Name,Description,Material,DiscoveryDate,Location"

_SPECIAL_CHARACTERS = (",", '"', "\n", "\r")


def escape_field(field: str) -> str:
    """Quote a field if it holds a comma, quote or line break."""
    if any(ch in field for ch in _SPECIAL_CHARACTERS):
        return '"' + field.replace('"', '""') + '"'
    return field


def unescape_field(field: str) -> str:
    """Strip surrounding quotes from a field and undouble inner quotes."""
    if field.startswith('"') and field.endswith('"'):
        return field[1:-1].replace('""', '"')
    return field


def parse_line(line: str) -> List[str]:
    """Split one CSV line into its fields, honouring quoted sections."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    chars = iter(enumerate(line))
    for pos, ch in chars:
        if ch == '"':
            if in_quotes and line[pos + 1 : pos + 2] == '"':
                current.append('"')
                next(chars, None)
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def _format_date(value: Optional[date]) -> str:
    return "" if value is None else value.isoformat()


def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def format_line(artifact: Artifact) -> str:
    """Render an artifact as one CSV line, without a line ending."""
    values = (
        artifact.id,
        artifact.name,
        artifact.description,
        artifact.material,
        _format_date(artifact.discovery_date),
        artifact.location,
    )
    return ",".join(escape_field(v) for v in values)


class CsvRepository(Repository):
    """A repository persisted to a CSV file.

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
            with self._path.open("r", encoding="utf-8", newline="") as fh:
                lines = fh.read().split("\n")
        except OSError as exc:
            raise RepositoryError(
                f"Cannot open file for reading: {self._path}"
            ) from exc

        artifacts: List[Artifact] = []
        for raw in lines[1:]:
            line = raw.strip()
            if not line:
                continue
            fields = parse_line(line)
            if len(fields) < 6:
                continue
            ident, name, description, material, found, location = (
                unescape_field(f) for f in fields[:6]
            )
            artifacts.append(
                Artifact(
                    ident, name, description, material, _parse_date(found), location
                )
            )
        return artifacts

    def _save(self) -> None:
        try:
            with self._path.open("w", encoding="utf-8") as fh:
                fh.write(HEADER + "\n")
                for artifact in self._artifacts:
                    fh.write(format_line(artifact) + "\n")
        except OSError as exc:
            raise RepositoryError(
                f"Cannot open file for writing: {self._path}"
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