from datetime import date

import pytest

from artifactinv.artifact import Artifact
from artifactinv.commands import (
    AddArtifactCommand,
    Command,
    RemoveArtifactCommand,
    UpdateArtifactCommand,
)
from artifactinv.repository import ArtifactNotFoundError, InMemoryRepository


@pytest.fixture
def pottery():
    return Artifact(
        "ID001", "Pottery Shard", "Ancient clay piece", "Clay", date(2023, 1, 15), "Site A"
    )


@pytest.fixture
def repo(pottery):
    repository = InMemoryRepository()
    repository.add(pottery)
    return repository


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_add_execute_and_undo():
    repository = InMemoryRepository()
    artifact = Artifact("ID002", "Arrowhead", "Flint arrowhead", "Flint", date(2022, 5, 20), "Site B")
    command = AddArtifactCommand(repository, artifact)
    command.execute()
    assert repository.find_by_id("ID002") == artifact
    command.undo()
    assert repository.all() == []


def test_add_keeps_own_copy_of_artifact():
    repository = InMemoryRepository()
    artifact = Artifact("ID002", "Arrowhead")
    command = AddArtifactCommand(repository, artifact)
    artifact.name = "Changed"
    command.execute()
    assert repository.find_by_id("ID002").name == "Arrowhead"


def test_remove_execute_undo_redo(repo, pottery):
    command = RemoveArtifactCommand(repo, "ID001")
    command.execute()
    with pytest.raises(ArtifactNotFoundError):
        repo.find_by_id("ID001")
    command.undo()
    assert repo.find_by_id("ID001") == pottery
    command.execute()
    assert repo.all() == []


def test_remove_missing_raises_and_leaves_store(repo, pottery):
    command = RemoveArtifactCommand(repo, "NOPE")
    with pytest.raises(ArtifactNotFoundError):
        command.execute()
    assert repo.all() == [pottery]


def test_remove_undo_before_execute_does_nothing(repo, pottery):
    RemoveArtifactCommand(repo, "ID001").undo()
    assert repo.all() == [pottery]


def test_update_execute_and_undo(repo, pottery):
    changed = Artifact("ID001", "Updated Pottery", "", "Clay", date(2023, 1, 15), "Site A")
    command = UpdateArtifactCommand(repo, changed)
    command.execute()
    assert repo.find_by_id("ID001").name == "Updated Pottery"
    command.undo()
    assert repo.find_by_id("ID001") == pottery


def test_update_redo_keeps_first_snapshot(repo, pottery):
    changed = Artifact("ID001", "Updated Pottery")
    command = UpdateArtifactCommand(repo, changed)
    command.execute()
    command.undo()
    command.execute()
    assert repo.find_by_id("ID001") == changed
    command.undo()
    assert repo.find_by_id("ID001") == pottery


def test_update_missing_raises():
    command = UpdateArtifactCommand(InMemoryRepository(), Artifact("X", "Y"))
    with pytest.raises(ArtifactNotFoundError):
        command.execute()


def test_update_undo_before_execute_does_nothing(repo, pottery):
    UpdateArtifactCommand(repo, Artifact("ID001", "Other")).undo()
    assert repo.find_by_id("ID001") == pottery