"""Application logic: validated edits with undo/redo, and filtering."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from .artifact import Artifact
from .commands import (
    AddArtifactCommand,
    Command,
    RemoveArtifactCommand,
    UpdateArtifactCommand,
)
from .filters import (
    ArtifactFilter,
    DateRangeFilter,
    FilterStrategy,
    LocationFilter,
    MaterialFilter,
    NameFilter,
)
from .repository import Repository


class ArtifactController:
    """Mediates between a user interface and a repository."""

    def __init__(self, repository: Repository) -> None:
        if repository is None:
            raise ValueError("A repository is required.")
        self._repository = repository
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []

    def _execute(self, command: Command) -> None:
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()

    def add_artifact(
        self,
        id: str,
        name: str,
        description: str,
        material: str,
        discovery_date: Optional[date],
        location: str,
    ) -> None:
        if not id or not name:
            raise ValueError("Artifact ID and Name cannot be empty.")
        artifact = Artifact(id, name, description, material, discovery_date, location)
        self._execute(AddArtifactCommand(self._repository, artifact))

    def remove_artifact(self, artifact_id: str) -> None:
        if not artifact_id:
            raise ValueError("Artifact ID cannot be empty for removal.")
        self._execute(RemoveArtifactCommand(self._repository, artifact_id))

    def update_artifact(
        self,
        original_id: str,
        new_id: str,
        name: str,
        description: str,
        material: str,
        discovery_date: Optional[date],
        location: str,
    ) -> None:
        """Update an artifact; a changed ID is handled as a removal and an addition."""
        if not original_id or not new_id or not name:
            raise ValueError("Artifact IDs and Name cannot be empty for update.")
        if original_id != new_id:
            self._repository.find_by_id(original_id)
            self.remove_artifact(original_id)
            self.add_artifact(
                new_id, name, description, material, discovery_date, location
            )
        else:
            updated = Artifact(
                new_id, name, description, material, discovery_date, location
            )
            self._execute(UpdateArtifactCommand(self._repository, updated))

    def get_artifact(self, artifact_id: str) -> Artifact:
        if not artifact_id:
            raise ValueError("Artifact ID cannot be empty for search.")
        return self._repository.find_by_id(artifact_id)

    def all_artifacts(self) -> List[Artifact]:
        return self._repository.all()

    def filter_artifacts(self, strategy: Optional[FilterStrategy]) -> List[Artifact]:
        return ArtifactFilter(strategy).filter(self.all_artifacts())

    def filter_by_name(self, name: str, case_sensitive: bool = False) -> List[Artifact]:
        return self.filter_artifacts(NameFilter(name, case_sensitive))

    def filter_by_material(
        self, material: str, case_sensitive: bool = False
    ) -> List[Artifact]:
        return self.filter_artifacts(MaterialFilter(material, case_sensitive))

    def filter_by_location(
        self, location: str, case_sensitive: bool = False
    ) -> List[Artifact]:
        return self.filter_artifacts(LocationFilter(location, case_sensitive))

    def filter_by_date_range(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> List[Artifact]:
        return self.filter_artifacts(DateRangeFilter(start_date, end_date))

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo(self) -> None:
        """Reverse the most recent command; does nothing when there is none."""
        if self._undo_stack:
            command = self._undo_stack.pop()
            command.undo()
            self._redo_stack.append(command)

    def redo(self) -> None:
        """Repeat the most recently undone command; does nothing when there is none."""
        if self._redo_stack:
            command = self._redo_stack.pop()
            command.execute()
            self._undo_stack.append(command)

    def clear_history(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()