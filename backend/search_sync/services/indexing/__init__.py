"""Reference resolution and search index assembly."""
from search_sync.services.indexing.lookups import (
    ReferenceLookups,
    build_lookup_map,
    resolve_ref,
    resolve_refs,
)
from search_sync.services.indexing.normalizer import normalize_item
from search_sync.services.indexing.orchestrator import SearchIndexBuilder

__all__ = [
    "ReferenceLookups",
    "build_lookup_map",
    "resolve_ref",
    "resolve_refs",
    "normalize_item",
    "SearchIndexBuilder",
]
