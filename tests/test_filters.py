from datetime import date

import pytest

from artifactinv.artifact import Artifact
from artifactinv.filters import (
    AndFilter,
    ArtifactFilter,
    DateRangeFilter,
    FilterStrategy,
    IdFilter,
    LocationFilter,
    MaterialFilter,
    NameFilter,
    OrFilter,
)


@pytest.fixture
def artifacts():
    return [
        Artifact("ID001", "Bronze Sword", "Ancient bronze weapon", "Bronze", date(1500, 1, 1), "Rome"),
        Artifact("ID002", "Clay Pot", "Cooking vessel", "Clay", date(1200, 6, 15), "Athens"),
        Artifact("ID003", "Iron Spear", "Hunting weapon", "Iron", date(800, 3, 10), "Sparta"),
        Artifact("ID004", "Bronze Shield", "Defensive equipment", "Bronze", date(1300, 8, 20), "Rome"),
    ]


def test_name_filter(artifacts):
    filtered = ArtifactFilter(NameFilter("Bronze", False)).filter(artifacts)
    assert len(filtered) == 2
    for a in filtered:
        assert "bronze" in a.name.lower()


def test_material_filter(artifacts):
    filtered = ArtifactFilter(MaterialFilter("Bronze", False)).filter(artifacts)
    assert len(filtered) == 2
    assert all(a.material == "Bronze" for a in filtered)


def test_location_filter(artifacts):
    filtered = ArtifactFilter(LocationFilter("Rome", False)).filter(artifacts)
    assert len(filtered) == 2
    assert all(a.location == "Rome" for a in filtered)


def test_date_range_filter(artifacts):
    start, end = date(1000, 1, 1), date(1400, 12, 31)
    filtered = ArtifactFilter(DateRangeFilter(start, end)).filter(artifacts)
    assert [a.id for a in filtered] == ["ID002", "ID004"]
    assert all(start <= a.discovery_date <= end for a in filtered)


def test_date_range_is_inclusive(artifacts):
    f = DateRangeFilter(date(1500, 1, 1), date(1500, 1, 1))
    assert [a.id for a in ArtifactFilter(f).filter(artifacts)] == ["ID001"]


def test_date_range_excludes_missing_date():
    undated = Artifact("X", "Undated")
    assert DateRangeFilter(date(1000, 1, 1), date(2000, 1, 1)).matches(undated) is False


def test_and_filter(artifacts):
    and_filter = AndFilter()
    and_filter.add_filter(MaterialFilter("Bronze", False))
    and_filter.add_filter(LocationFilter("Rome", False))
    filtered = ArtifactFilter(and_filter).filter(artifacts)
    assert len(filtered) == 2
    for a in filtered:
        assert a.material == "Bronze"
        assert a.location == "Rome"


def test_or_filter(artifacts):
    or_filter = OrFilter()
    or_filter.add_filter(MaterialFilter("Clay", False))
    or_filter.add_filter(MaterialFilter("Iron", False))
    filtered = ArtifactFilter(or_filter).filter(artifacts)
    assert len(filtered) == 2
    assert all(a.material in ("Clay", "Iron") for a in filtered)


def test_empty_and_filter_matches_nothing(artifacts):
    assert ArtifactFilter(AndFilter()).filter(artifacts) == []


def test_empty_or_filter_matches_nothing(artifacts):
    assert ArtifactFilter(OrFilter()).filter(artifacts) == []


def test_no_strategy_returns_everything(artifacts):
    assert ArtifactFilter().filter(artifacts) == artifacts


def test_strategy_can_be_replaced(artifacts):
    af = ArtifactFilter(MaterialFilter("Clay"))
    assert [a.id for a in af.filter(artifacts)] == ["ID002"]
    af.strategy = MaterialFilter("Iron")
    assert [a.id for a in af.filter(artifacts)] == ["ID003"]


def test_case_sensitivity(artifacts):
    assert len(ArtifactFilter(NameFilter("bronze", False)).filter(artifacts)) == 2
    assert ArtifactFilter(NameFilter("bronze", True)).filter(artifacts) == []
    assert len(ArtifactFilter(NameFilter("Bronze", True)).filter(artifacts)) == 2


def test_id_filter(artifacts):
    assert [a.id for a in ArtifactFilter(IdFilter("id003")).filter(artifacts)] == ["ID003"]
    assert ArtifactFilter(IdFilter("id003", True)).filter(artifacts) == []


def test_empty_text_matches_everything(artifacts):
    assert len(ArtifactFilter(LocationFilter("")).filter(artifacts)) == 4


def test_filter_strategy_is_abstract():
    with pytest.raises(TypeError):
        FilterStrategy()