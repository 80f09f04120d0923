"""The archaeological artifact record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Artifact:
    """One catalogued artifact.

    A missing discovery date is represented by ``None``.
    """

    id: str = ""
    name: str = ""
    description: str = ""
    material: str = ""
    discovery_date: Optional[date] = None
    location: str = ""