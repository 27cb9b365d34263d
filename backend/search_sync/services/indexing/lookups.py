"""Reference lookup maps and resolution."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

LookupMap = Dict[str, Dict[str, Any]]


@dataclass(frozen=True)
class ReferenceLookups:
    """The lookup maps a content item may reference."""

    authors: LookupMap = field(default_factory=dict)
    resource_types: LookupMap = field(default_factory=dict)
    use_cases: LookupMap = field(default_factory=dict)
    industries: LookupMap = field(default_factory=dict)


def build_lookup_map(
    client,
    collection_id: str,
    name_field: str = "name",
    extra_fields: Sequence[str] = (),
) -> LookupMap:
    """Build ``{item id -> {name, extra fields...}}`` from a reference collection.

    A missing or non-text name becomes an empty string; missing extra fields
    become None.
    Fetch errors propagate unchanged.
    """
    lookup: LookupMap = {}
    for item in client.fetch_all_items(collection_id):
        fields = item.field_data
        name = fields.get(name_field)
        entry: Dict[str, Any] = {"name": name if isinstance(name, str) else ""}
        for extra in extra_fields:
            entry[extra] = fields.get(extra) or None
        lookup[item.id] = entry
    return lookup


def resolve_ref(ref_id: Any, lookup: LookupMap) -> str | None:
    """Resolve one reference id to its name, or None."""
    if not isinstance(ref_id, str):
        return None
    entry = lookup.get(ref_id)
    if not entry:
        return None
    name = entry.get("name")
    return name if isinstance(name, str) and name else None


def resolve_refs(ref_ids: Any, lookup: LookupMap) -> List[str]:
    """Resolve a list of reference ids, dropping the ones that do not resolve."""
    if not isinstance(ref_ids, list):
        return []
    names = (resolve_ref(ref_id, lookup) for ref_id in ref_ids)
    return [name for name in names if name]
