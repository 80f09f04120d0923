import json
from datetime import date

import pytest

from artifactinv.artifact import Artifact
from artifactinv.json_repository import (
    JsonRepository,
    artifact_from_dict,
    artifact_to_dict,
)
from artifactinv.repository import (
    ArtifactNotFoundError,
    DuplicateArtifactError,
    RepositoryError,
)


@pytest.fixture
def artifact1():
    return Artifact(
        "ID001", "Pottery Shard", "Ancient clay piece", "Clay", date(2023, 1, 15), "Site A"
    )


@pytest.fixture
def artifact2():
    return Artifact(
        "ID002", "Arrowhead", "Flint arrowhead", "Flint", date(2022, 5, 20), "Site B"
    )


def test_json_repository_scenario(tmp_path, artifact1, artifact2):
    path = tmp_path / "artifacts.json"
    repo = JsonRepository(path)
    repo.add(artifact1)
    repo.add(artifact2)

    assert repo.find_by_id("ID001").id == artifact1.id
    assert len(repo.all()) == 2

    repo2 = JsonRepository(path)
    assert len(repo2.all()) == 2
    assert repo2.all() == [artifact1, artifact2]


def test_document_structure(tmp_path, artifact1):
    path = tmp_path / "a.json"
    JsonRepository(path).add(artifact1)
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["version"] == "1.0"
    assert isinstance(document["timestamp"], str) and "T" in document["timestamp"]
    assert document["artifacts"] == [
        {
            "id": "ID001",
            "name": "Pottery Shard",
            "description": "Ancient clay piece",
            "material": "Clay",
            "discoveryDate": "2023-01-15",
            "location": "Site A",
        }
    ]


def test_missing_file_starts_empty(tmp_path):
    path = tmp_path / "none.json"
    assert JsonRepository(path).all() == []
    assert not path.exists()


def test_duplicate_add_raises(tmp_path, artifact1):
    repo = JsonRepository(tmp_path / "a.json")
    repo.add(artifact1)
    with pytest.raises(DuplicateArtifactError, match="already exists"):
        repo.add(artifact1)
    assert len(repo.all()) == 1


def test_update_and_remove(tmp_path, artifact1, artifact2):
    path = tmp_path / "a.json"
    repo = JsonRepository(path)
    repo.add(artifact1)
    repo.add(artifact2)
    artifact1.name = "Updated Pottery"
    repo.update(artifact1)
    repo.remove("ID002")
    reloaded = JsonRepository(path).all()
    assert [a.name for a in reloaded] == ["Updated Pottery"]


def test_unknown_ids_raise(tmp_path, artifact1):
    repo = JsonRepository(tmp_path / "a.json")
    with pytest.raises(ArtifactNotFoundError):
        repo.find_by_id("ID001")
    with pytest.raises(ArtifactNotFoundError):
        repo.remove("ID001")
    with pytest.raises(ArtifactNotFoundError, match="not found for update"):
        repo.update(artifact1)


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RepositoryError, match="JSON parse error"):
        JsonRepository(path)


def test_non_object_root_raises(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(RepositoryError, match="not an object"):
        JsonRepository(path)


def test_loading_skips_non_objects_and_missing_array(tmp_path):
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps({"artifacts": [1, "x", {"id": "A", "name": "Axe", "material": 5}]}),
        encoding="utf-8",
    )
    assert JsonRepository(path).all() == [Artifact("A", "Axe", "", "", None, "")]

    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"version": "1.0"}), encoding="utf-8")
    assert JsonRepository(empty).all() == []


def test_dict_round_trip():
    artifact = Artifact("Z9", "Ünïcode", "d", "m", date(800, 3, 10), "Sparta")
    data = artifact_to_dict(artifact)
    assert data["discoveryDate"] == "0800-03-10"
    assert artifact_from_dict(data) == artifact


def test_missing_date_serialises_as_empty_string():
    data = artifact_to_dict(Artifact("N", "n", "", "", None, ""))
    assert data["discoveryDate"] == ""
    assert artifact_from_dict(data).discovery_date is None


def test_bad_date_reads_as_none():
    artifact = artifact_from_dict({"id": "B", "discoveryDate": "15/01/2023"})
    assert artifact.discovery_date is None
    assert artifact.id == "B"