"""Browsing state: the artifact listing and the stack of active filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from .artifact import Artifact
from .filters import (
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

CREATE_NEW_ITEM = "+ Create New Artifact"
SEPARATOR_ITEM = "-------------------"


class FilterField(Enum):
    """The artifact attribute a filter looks at."""

    NAME = "name"
    ID = "id"
    MATERIAL = "material"
    LOCATION = "location"
    DATE = "date"

    @property
    def label(self) -> str:
        return _FIELD_LABELS[self]


_FIELD_LABELS = {
    FilterField.NAME: "Name",
    FilterField.ID: "ID",
    FilterField.MATERIAL: "Material",
    FilterField.LOCATION: "Location",
    FilterField.DATE: "Date",
}

_TEXT_FILTERS = {
    FilterField.NAME: NameFilter,
    FilterField.ID: IdFilter,
    FilterField.MATERIAL: MaterialFilter,
    FilterField.LOCATION: LocationFilter,
}


class FilterLogic(Enum):
    """How several active filters are combined."""

    AND = "and"
    OR = "or"


def format_listing(artifacts: Iterable[Artifact]) -> List[str]:
    """Return the display lines for a list of artifacts.

    The list always starts with the "create new" entry and a separator,
    followed by one ``"ID: Name"`` line per artifact.
    """
    return [CREATE_NEW_ITEM, SEPARATOR_ITEM] + [f"{a.id}: {a.name}" for a in artifacts]


def parse_listing_id(line: str) -> Optional[str]:
    """Extract the artifact ID from a listing line.

    Returns None for the "create new" entry, the separator, or a line
    that carries no ID.
    """
    if line in (CREATE_NEW_ITEM, SEPARATOR_ITEM):
        return None
    ident = line.split(":", 1)[0].strip()
    return ident or None


@dataclass(frozen=True)
class ActiveFilter:
    """One filter the user has switched on, kept as its parameters."""

    field: FilterField
    text: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def label(self) -> str:
        if self.field is FilterField.DATE:
            return f"Date: {_iso(self.start_date)} to {_iso(self.end_date)}"
        return f"{self.field.label}: contains '{self.text}'"

    def build(self) -> FilterStrategy:
        """Create the filter strategy these parameters describe."""
        if self.field is FilterField.DATE:
            return DateRangeFilter(self.start_date, self.end_date)
        return _TEXT_FILTERS[self.field](self.text, False)


def _iso(value: Optional[date]) -> str:
    return "" if value is None else value.isoformat()


@dataclass
class FilterSession:
    """The active filters and the logic that combines them."""

    logic: FilterLogic = FilterLogic.AND
    filters: List[ActiveFilter] = field(default_factory=list)

    def add_text_filter(self, field: FilterField, text: str) -> Optional[ActiveFilter]:
        """Add a case-insensitive "contains" filter.

        Surrounding whitespace is dropped; blank text adds nothing and
        returns None.
        """
        field = FilterField(field)
        if field is FilterField.DATE:
            raise ValueError("Use add_date_filter for date ranges.")
        text = text.strip()
        if not text:
            return None
        active = ActiveFilter(field, text=text)
        self.filters.append(active)
        return active

    def add_date_filter(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> ActiveFilter:
        """Add an inclusive discovery-date range filter."""
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValueError("Start date must be before or equal to end date.")
        active = ActiveFilter(
            FilterField.DATE, start_date=start_date, end_date=end_date
        )
        self.filters.append(active)
        return active

    def remove(self, index: int) -> ActiveFilter:
        """Remove and return the filter at the given position."""
        if not 0 <= index < len(self.filters):
            raise IndexError(f"No active filter at position {index}.")
        return self.filters.pop(index)

    def set_logic(self, logic: FilterLogic) -> None:
        self.logic = FilterLogic(logic)

    def reset(self) -> None:
        """Drop every active filter."""
        self.filters.clear()

    def composite(self) -> Optional[FilterStrategy]:
        """Combine the active filters, or return None when there are none."""
        if not self.filters:
            return None
        combined = OrFilter() if self.logic is FilterLogic.OR else AndFilter()
        for active in self.filters:
            combined.add_filter(active.build())
        return combined

    def apply(self, artifacts: Iterable[Artifact]) -> List[Artifact]:
        """Return the artifacts that pass the active filters, in order."""
        return ArtifactFilter(self.composite()).filter(artifacts)