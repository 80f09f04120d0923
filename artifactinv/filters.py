"""Filter strategies for selecting artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from .artifact import Artifact


def _contains(haystack: str, needle: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return needle in haystack
    return needle.casefold() in haystack.casefold()


def _date_key(value: Optional[date]) -> tuple:
    # A missing date sorts before every real date.
    return (0,) if value is None else (1, value)


class FilterStrategy(ABC):
    """Decides whether a single artifact is selected."""

    @abstractmethod
    def matches(self, artifact: Artifact) -> bool:
        """Return True if the artifact passes this filter."""


@dataclass
class NameFilter(FilterStrategy):
    """Selects artifacts whose name contains the given text."""

    name: str
    case_sensitive: bool = False

    def matches(self, artifact: Artifact) -> bool:
        return _contains(artifact.name, self.name, self.case_sensitive)


@dataclass
class MaterialFilter(FilterStrategy):
    """Selects artifacts whose material contains the given text."""

    material: str
    case_sensitive: bool = False

    def matches(self, artifact: Artifact) -> bool:
        return _contains(artifact.material, self.material, self.case_sensitive)


@dataclass
class LocationFilter(FilterStrategy):
    """Selects artifacts whose location contains the given text."""

    location: str
    case_sensitive: bool = False

    def matches(self, artifact: Artifact) -> bool:
        return _contains(artifact.location, self.location, self.case_sensitive)


@dataclass
class IdFilter(FilterStrategy):
    """Selects artifacts whose ID contains the given text."""

    id: str
    case_sensitive: bool = False

    def matches(self, artifact: Artifact) -> bool:
        return _contains(artifact.id, self.id, self.case_sensitive)


@dataclass
class DateRangeFilter(FilterStrategy):
    """Selects artifacts discovered within an inclusive date range."""

    start_date: Optional[date]
    end_date: Optional[date]

    def matches(self, artifact: Artifact) -> bool:
        found = _date_key(artifact.discovery_date)
        return _date_key(self.start_date) <= found <= _date_key(self.end_date)


@dataclass
class AndFilter(FilterStrategy):
    """Matches when every child filter matches; never matches when empty."""

    filters: List[FilterStrategy] = field(default_factory=list)

    def add_filter(self, strategy: FilterStrategy) -> None:
        self.filters.append(strategy)

    def matches(self, artifact: Artifact) -> bool:
        return bool(self.filters) and all(f.matches(artifact) for f in self.filters)


@dataclass
class OrFilter(FilterStrategy):
    """Matches when any child filter matches; never matches when empty."""

    filters: List[FilterStrategy] = field(default_factory=list)

    def add_filter(self, strategy: FilterStrategy) -> None:
        self.filters.append(strategy)

    def matches(self, artifact: Artifact) -> bool:
        return any(f.matches(artifact) for f in self.filters)


@dataclass
class ArtifactFilter:
    """Applies a strategy to a collection; with no strategy everything passes."""

    strategy: Optional[FilterStrategy] = None

    def filter(self, artifacts: Iterable[Artifact]) -> List[Artifact]:
        if self.strategy is None:
            return list(artifacts)
        return [a for a in artifacts if self.strategy.matches(a)]