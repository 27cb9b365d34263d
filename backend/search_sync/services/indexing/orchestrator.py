"""Search index assembly."""
import asyncio
import logging
from typing import Any, Dict, List, Sequence

from search_sync.constants import (
    AUTHORS,
    CONTENT_COLLECTIONS,
    INDUSTRIES,
    RESOURCE_TYPES,
    USE_CASES,
    ContentCollection,
    ReferenceCollection,
)
from search_sync.schemas.search_index import SearchIndexDocument, SearchIndexItem
from search_sync.services.indexing.lookups import (
    LookupMap,
    ReferenceLookups,
    build_lookup_map,
)
from search_sync.services.indexing.normalizer import normalize_item

logger = logging.getLogger(__name__)


class SearchIndexBuilder:
    """Fetch every collection, resolve references and assemble the index.

    The run is all-or-nothing: any fetch error propagates out of ``build``
    before a document exists, so nothing partial can be published.
    """

    def __init__(
        self,
        client,
        content_collections: Sequence[ContentCollection] = CONTENT_COLLECTIONS,
        authors: ReferenceCollection = AUTHORS,
        resource_types: ReferenceCollection = RESOURCE_TYPES,
        use_cases: ReferenceCollection = USE_CASES,
        industries: ReferenceCollection = INDUSTRIES,
    ):
        self.client = client
        self.content_collections = tuple(content_collections)
        self.reference_collections = (authors, resource_types, use_cases, industries)
        self.stats: Dict[str, Any] = {
            "lookups": {},
            "collections": {},
            "total_items": 0,
        }

    async def _build_lookup(self, reference: ReferenceCollection) -> LookupMap:
        lookup = await asyncio.to_thread(
            build_lookup_map,
            self.client,
            reference.collection_id,
            reference.name_field,
            reference.extra_fields,
        )
        self.stats["lookups"][reference.key] = len(lookup)
        logger.info("Lookup %s: %s entries", reference.key, len(lookup))
        return lookup

    async def build_lookups(self) -> ReferenceLookups:
        """Fetch all reference collections concurrently."""
        logger.info("Building reference lookup maps...")
        authors, resource_types, use_cases, industries = await asyncio.gather(
            *(self._build_lookup(reference) for reference in self.reference_collections)
        )
        return ReferenceLookups(
            authors=authors,
            resource_types=resource_types,
            use_cases=use_cases,
            industries=industries,
        )

    async def collect_items(self, lookups: ReferenceLookups) -> List[SearchIndexItem]:
        """Fetch and normalize each content collection in configured order."""
        items: List[SearchIndexItem] = []
        for collection in self.content_collections:
            logger.info("Fetching %s...", collection.key)
            raw_items = await asyncio.to_thread(
                self.client.fetch_all_items, collection.collection_id
            )
            logger.info("%s: %s items found", collection.key, len(raw_items))
            self.stats["collections"][collection.key] = len(raw_items)
            items.extend(normalize_item(raw, collection, lookups) for raw in raw_items)
        return items

    async def build(self) -> SearchIndexDocument:
        """Run the full sync and return the assembled document."""
        lookups = await self.build_lookups()
        items = await self.collect_items(lookups)
        document = SearchIndexDocument.from_items(items)
        self.stats["total_items"] = document.total_items
        logger.info(
            "Assembled search index: %s items (last updated %s)",
            document.total_items,
            document.last_updated,
        )
        return document
