"""
Read-only data store for the catalogue API.

The catalogue is loaded once from the packaged ``sample_entities.json``
fixture when the application is created and handed to the routes via
the application state. Each entry is converted into an ``Entity``
instance from ``schemas``. Nothing in this module mutates a catalogue
after it has been built; every query is a pure function of its
arguments.
"""

from __future__ import annotations

import json
import logging
from itertools import islice
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import DEFAULT_SECTION_LIMIT
from .schemas import Category, CategorySections, Entity

logger = logging.getLogger(__name__)

# Packaged fixture used when no other data file is configured
DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "sample_entities.json"

DEFAULT_LIMIT = DEFAULT_SECTION_LIMIT


class Catalog:
    """An immutable, ordered collection of entities.

    Entities keep the order in which they were supplied. Identifiers
    must be unique within one catalogue.
    """

    def __init__(self, entities: Iterable[Entity]) -> None:
        self._entities: Tuple[Entity, ...] = tuple(entities)
        self._by_id: Dict[str, Entity] = {}
        for entity in self._entities:
            if entity.id in self._by_id:
                raise ValueError(f"Duplicate entity id: {entity.id}")
            self._by_id[entity.id] = entity

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"Catalog({len(self._entities)} entities)"

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._entities

    def get(self, entity_id: str) -> Optional[Entity]:
        return self._by_id.get(str(entity_id))


def _parse_entry(entry: dict) -> Entity:
    """Convert one raw fixture entry into an ``Entity``.

    The category is resolved case-insensitively from either its label or
    its member name; an unknown category is rejected.
    """
    raw_category = entry.get("category")
    category = Category.resolve(raw_category)
    if category is None:
        raise ValueError(f"Unknown category {raw_category!r} for entry {entry.get('name')!r}")
    return Entity(
        name=entry.get("name") or "",
        category=category,
        is_woke=entry.get("is_woke"),
        woke_percentage=entry.get("woke_percentage"),
        logo_url=entry.get("logo_url"),
        evidence_url=entry.get("evidence_url"),
    )


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load a catalogue from a JSON fixture.

    Parameters
    ----------
    path : Optional[Union[str, Path]]
        Location of the fixture. Defaults to the packaged
        ``sample_entities.json``.

    Returns
    -------
    Catalog
        A catalogue holding one ``Entity`` per fixture entry, in file
        order.

    Raises
    ------
    OSError
        If the file cannot be read.
    ValueError
        If the file is not valid JSON, is not a list, or holds an entry
        that fails validation.
    """
    source = Path(path) if path is not None else DATA_FILE
    try:
        with source.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of entries in {source}")
        catalog = Catalog(_parse_entry(entry) for entry in raw)
    except (OSError, ValueError) as exc:
        logger.error("Could not load catalogue from %s: %s", source, exc)
        raise
    logger.info("Loaded %d entities from %s", len(catalog), source)
    return catalog


def _norm(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison.

    Unlike a display-side normaliser this does not strip whitespace: a
    search for ``" "`` only matches names that contain a space.
    """
    return (s or "").lower()


def query_entities(
    catalog: Iterable[Entity],
    category: Category,
    is_woke: bool,
    search: Optional[str] = "",
    limit: int = DEFAULT_LIMIT,
) -> List[Entity]:
    """Return the first ``limit`` entities matching a category and polarity.

    Parameters
    ----------
    catalog : Iterable[Entity]
        The catalogue to filter.
    category : Category
        Only entities of this category are returned.
    is_woke : bool
        Only entities with this polarity are returned.
    search : Optional[str]
        Case-insensitive substring that the entity name must contain. An
        empty string or ``None`` matches everything.
    limit : int
        Maximum number of entities to return. ``0`` yields an empty list.

    Returns
    -------
    List[Entity]
        The matching entities in catalogue order.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    needle = _norm(search)
    matches = (
        e
        for e in catalog
        if e.category == category
        and e.is_woke == is_woke
        and (not needle or needle in _norm(e.name))
    )
    return list(islice(matches, limit))


def find_by_name(catalog: Iterable[Entity], name: Optional[str]) -> Optional[Entity]:
    """Return the first entity whose name equals ``name``, ignoring case.

    The lookup spans every category and both polarities. ``None`` is
    returned when nothing matches.
    """
    target = _norm(name)
    if not target:
        return None
    for entity in catalog:
        if _norm(entity.name) == target:
            return entity
    logger.debug("No entity named %r", name)
    return None


def category_sections(
    catalog: Iterable[Entity],
    category: Category,
    search: Optional[str] = "",
    limit: int = DEFAULT_LIMIT,
) -> CategorySections:
    """Build the WOKE and NOT WOKE sections for one category."""
    label = category.value.upper()
    return CategorySections(
        category=category,
        label=category.value,
        woke_title=f"WOKE {label}",
        not_woke_title=f"NOT WOKE {label}",
        search=search or "",
        woke=query_entities(catalog, category, True, search, limit),
        not_woke=query_entities(catalog, category, False, search, limit),
    )


def summarize(catalog: Catalog) -> Dict[str, int]:
    """Count entities per category, keyed by category key."""
    counts = {c.key: 0 for c in Category}
    for entity in catalog:
        counts[entity.category.key] += 1
    return counts
