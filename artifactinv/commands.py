"""Reversible operations on a repository, used for undo and redo."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Optional

from .artifact import Artifact
from .repository import Repository


class Command(ABC):
    """An operation that can be carried out and reversed."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the operation."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the effect of the last execution."""


class AddArtifactCommand(Command):
    """Adds an artifact; undoing removes it again."""

    def __init__(self, repository: Repository, artifact: Artifact) -> None:
        self._repository = repository
        self._artifact = dataclasses.replace(artifact)

    def execute(self) -> None:
        self._repository.add(self._artifact)

    def undo(self) -> None:
        self._repository.remove(self._artifact.id)


class RemoveArtifactCommand(Command):
    """Removes an artifact; undoing puts back the artifact that was removed.

    The removed artifact is captured on the first execution only, so a
    redo after an undo does not overwrite the saved copy.
    """

    def __init__(self, repository: Repository, artifact_id: str) -> None:
        self._repository = repository
        self._artifact_id = artifact_id
        self._removed: Optional[Artifact] = None

    def execute(self) -> None:
        if self._removed is None:
            self._removed = self._repository.find_by_id(self._artifact_id)
        self._repository.remove(self._artifact_id)

    def undo(self) -> None:
        if self._removed is not None:
            self._repository.add(self._removed)


class UpdateArtifactCommand(Command):
    """Replaces an artifact; undoing restores the previous version.

    The previous version is captured on the first execution only.
    """

    def __init__(self, repository: Repository, new_artifact: Artifact) -> None:
        self._repository = repository
        self._new = dataclasses.replace(new_artifact)
        self._old: Optional[Artifact] = None

    def execute(self) -> None:
        if self._old is None:
            self._old = self._repository.find_by_id(self._new.id)
        self._repository.update(self._new)

    def undo(self) -> None:
        if self._old is not None:
            self._repository.update(self._old)