"""
Catalog package for the Woke or Not API.

This package contains the schemas, the read-only store and the route
definitions that expose the catalogue: a fixed list of entities, each
rated woke or not woke with a percentage score. The API supports
browsing by category, free-text search within a category, an exact
name lookup across the whole catalogue and a detail view per entity.
The catalogue is loaded from a packaged JSON fixture; should your
needs evolve, ``store.load_catalog`` is the single place to change.
"""

from .router import router as catalog_router  # noqa: F401
