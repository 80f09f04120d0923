"""Storage interface for artifacts and a simple in-memory store."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import List

from .artifact import Artifact


class RepositoryError(Exception):
    """Base class for storage errors."""


class ArtifactNotFoundError(RepositoryError, LookupError):
    """No artifact has the requested ID."""


class DuplicateArtifactError(RepositoryError):
    """An artifact with the same ID is already stored."""


class Repository(ABC):
    """A store of artifacts keyed by their ID."""

    @abstractmethod
    def add(self, artifact: Artifact) -> None:
        """Store a new artifact."""

    @abstractmethod
    def remove(self, artifact_id: str) -> None:
        """Delete the artifact with the given ID."""

    @abstractmethod
    def update(self, artifact: Artifact) -> None:
        """Replace the stored artifact that has the same ID."""

    @abstractmethod
    def find_by_id(self, artifact_id: str) -> Artifact:
        """Return the artifact with the given ID or raise ArtifactNotFoundError."""

    @abstractmethod
    def all(self) -> List[Artifact]:
        """Return every stored artifact in storage order."""


class InMemoryRepository(Repository):
    """A forgiving store held in memory.

    Adding an existing ID replaces it, and removing or updating an unknown
    ID does nothing.
    """

    def __init__(self) -> None:
        self._artifacts: List[Artifact] = []

    def _index_of(self, artifact_id: str) -> int | None:
        return next(
            (i for i, a in enumerate(self._artifacts) if a.id == artifact_id), None
        )

    def add(self, artifact: Artifact) -> None:
        stored = dataclasses.replace(artifact)
        index = self._index_of(artifact.id)
        if index is None:
            self._artifacts.append(stored)
        else:
            self._artifacts[index] = stored

    def remove(self, artifact_id: str) -> None:
        self._artifacts = [a for a in self._artifacts if a.id != artifact_id]

    def update(self, artifact: Artifact) -> None:
        index = self._index_of(artifact.id)
        if index is not None:
            self._artifacts[index] = dataclasses.replace(artifact)

    def find_by_id(self, artifact_id: str) -> Artifact:
        index = self._index_of(artifact_id)
        if index is None:
            raise ArtifactNotFoundError(f"Artifact not found with ID: {artifact_id}")
        return dataclasses.replace(self._artifacts[index])

    def all(self) -> List[Artifact]:
        return [dataclasses.replace(a) for a in self._artifacts]