"""Field-bag lookup helpers."""
from typing import Any, Iterable, Mapping


def get_path(data: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted path (e.g. ``image.url``) through nested mappings.

    Returns None as soon as a segment is missing or a non-mapping is hit.
    """
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


def first_present(
    data: Mapping[str, Any],
    candidates: Iterable[str],
    default: Any = None,
    kind: type | None = None,
) -> Any:
    """Return the first truthy value among candidate field paths.

    With ``kind`` set, candidates holding a value of another type are skipped
    so a later candidate can still supply the field.
    """
    for candidate in candidates:
        value = get_path(data, candidate)
        if not value:
            continue
        if kind is not None and not isinstance(value, kind):
            continue
        return value
    return default
