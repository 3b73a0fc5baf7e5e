"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /categories                       : list categories in display order
- GET  /categories/{category}/sections   : WOKE / NOT WOKE sections for a category
- GET  /entities                         : filter by category, polarity and search
- GET  /entities/{entity_id}             : detail view for one entity
- GET  /lookup                           : exact, case-insensitive name lookup
- GET  /debug/catalog                    : debug summary of the loaded catalogue
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..config import Settings
from .schemas import (
    CatalogSummary,
    Category,
    CategoryInfo,
    CategorySections,
    Entity,
    EntityDetail,
)
from .store import Catalog, category_sections, find_by_name, query_entities, summarize

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _resolve_category(raw: str) -> Category:
    category = Category.resolve(raw)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("/categories", response_model=List[CategoryInfo])
def list_categories() -> List[CategoryInfo]:
    return [CategoryInfo(key=c.key, label=c.value) for c in Category]


@router.get("/categories/{category}/sections", response_model=CategorySections)
def get_sections(
    category: str,
    q: Optional[str] = Query(default=None, description="Case-insensitive name search"),
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> CategorySections:
    """
    Returns the main screen for a category: the first entries of the
    WOKE and NOT WOKE sections, both filtered by the same search term.
    """
    return category_sections(
        catalog,
        _resolve_category(category),
        search=q or "",
        limit=settings.SECTION_LIMIT,
    )


@router.get("/entities", response_model=List[Entity])
def list_entities(
    category: str = Query(..., description="Category key or label"),
    woke: bool = Query(..., description="Polarity to return"),
    q: Optional[str] = Query(default=None, description="Case-insensitive name search"),
    limit: Optional[int] = Query(default=None, ge=0, le=100, description="Maximum results"),
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> List[Entity]:
    if limit is None:
        limit = settings.SECTION_LIMIT
    return query_entities(catalog, _resolve_category(category), woke, q or "", limit)


@router.get("/entities/{entity_id}", response_model=EntityDetail)
def get_entity(entity_id: str, catalog: Catalog = Depends(get_catalog)) -> EntityDetail:
    entity = catalog.get(entity_id)
    if entity is None:
        raise HTTPException(status_code=404, detail="Entity not found")
    return EntityDetail(**entity.model_dump(include=set(Entity.model_fields)))


@router.get("/lookup", response_model=Entity)
def lookup_entity(
    name: str = Query(..., description="Exact entity name, any case"),
    catalog: Catalog = Depends(get_catalog),
) -> Entity:
    entity = find_by_name(catalog, name)
    if entity is None:
        raise HTTPException(status_code=404, detail="Entity not found")
    return entity


@router.get("/debug/catalog", response_model=CatalogSummary)
def debug_catalog(catalog: Catalog = Depends(get_catalog)) -> CatalogSummary:
    """
    Debug endpoint to verify the catalogue fixture is loaded.
    Visit: http://127.0.0.1:8000/api/catalog/debug/catalog
    """
    return CatalogSummary(
        count=len(catalog),
        per_category=summarize(catalog),
        sample=[e.name for e in catalog.entities[:5]],
    )
