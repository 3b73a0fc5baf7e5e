"""
Pydantic schema definitions for the catalog module.

The ``Entity`` model captures the fields required to render a catalogue
row and its detail view in the front‑end. Entities are frozen once
built: the catalogue is read-only for the lifetime of the process. The
displayed percentage and status label are derived from the stored
fields and are never stored themselves.
"""

from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Category(str, Enum):
    """The fixed set of catalogue categories, in display order.

    The value of each member is its display label.
    """

    COMPANIES = "Companies"
    COUNTRIES = "Countries"
    NON_PROFITS = "Non-Profits"
    MEDIA = "Media"
    EDUCATIONAL = "Educational"
    GOVERNMENT = "Government"

    @property
    def key(self) -> str:
        return self.name.lower()

    @classmethod
    def resolve(cls, raw: Optional[str]) -> Optional["Category"]:
        """Resolve a category from free text, case-insensitively.

        Both the display label (``"non-profits"``) and the member name
        (``"non_profits"``) are accepted. ``None`` is returned for
        anything else.
        """
        needle = (raw or "").strip().lower()
        if not needle:
            return None
        for member in cls:
            if needle in (member.value.lower(), member.name.lower()):
                return member
        return None

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.resolve(value)
        return None


class Entity(BaseModel):
    """A single catalogue entry.

    ``woke_percentage`` is the alignment strength in the direction of
    ``is_woke``. ``logo_url`` and ``evidence_url`` are opaque references
    handed to the client untouched; either may be ``None``.
    """

    model_config = ConfigDict(frozen=True)

    # Session-local identifier, regenerated every time the fixture is loaded.
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(min_length=1)
    category: Category
    is_woke: bool
    woke_percentage: int = Field(ge=0, le=100)
    logo_url: Optional[str] = None
    evidence_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("logo_url", "evidence_url")
    @classmethod
    def _empty_url_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value

    @computed_field  # type: ignore[misc]
    @property
    def displayed_percentage(self) -> int:
        # Not-woke entities show the complement of their stored score.
        return self.woke_percentage if self.is_woke else 100 - self.woke_percentage

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> str:
        return "WOKE" if self.is_woke else "NOT WOKE"


class EntityDetail(Entity):
    """Payload of the detail view for a single entity."""

    @computed_field  # type: ignore[misc]
    @property
    def has_evidence(self) -> bool:
        return self.evidence_url is not None


class CategoryInfo(BaseModel):
    """A category as listed in the category tabs."""

    key: str
    label: str


class CategorySections(BaseModel):
    """The main screen for one category: a WOKE and a NOT WOKE section."""

    category: Category
    label: str
    woke_title: str
    not_woke_title: str
    search: str = ""
    woke: List[Entity] = Field(default_factory=list)
    not_woke: List[Entity] = Field(default_factory=list)


class CatalogSummary(BaseModel):
    """Response of the debug endpoint."""

    count: int
    per_category: Dict[str, int]
    sample: List[str]
