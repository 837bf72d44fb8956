"""Helpers for nested property paths and form field flattening."""

from typing import Any, Dict, List, Sequence, Tuple, Union

PROPERTY_SEPARATOR = "/"

_MISSING = object()

PathLike = Union[str, Sequence[str]]


def split_path(path: PathLike) -> List[str]:
    """Split a property path (e.g., 'address/city') into its segments."""
    if isinstance(path, str):
        return path.split(PROPERTY_SEPARATOR)
    return list(path)


def _lookup(data: Any, parts: List[str]) -> Any:
    value = data
    for part in parts:
        key = _resolve_key(value, part)
        if key is _MISSING:
            return _MISSING
        value = value[key]
    return value


def get_value(data: Dict[str, Any], path: PathLike, default: Any = None) -> Any:
    """Get a value by property path, or ``default`` when any segment is missing."""
    value = _lookup(data, split_path(path))
    return default if value is _MISSING else value


def has_value(data: Dict[str, Any], path: PathLike) -> bool:
    """Check whether a property path resolves to a value (None counts)."""
    return _lookup(data, split_path(path)) is not _MISSING


def set_value(data: Dict[str, Any], path: PathLike, value: Any) -> None:
    """Set a value by property path, creating intermediate mappings."""
    parts = split_path(path)
    target = data
    for part in parts[:-1]:
        child = target.get(part)
        if not isinstance(child, dict):
            child = {}
            target[part] = child
        target = child
    target[parts[-1]] = value


def _resolve_key(container: Any, part: str) -> Any:
    """Key or index of ``part`` inside ``container``, or _MISSING."""
    if isinstance(container, dict):
        return part if part in container else _MISSING
    if isinstance(container, list) and part.isdigit():
        idx = int(part)
        return idx if idx < len(container) else _MISSING
    return _MISSING


def unset_value(data: Dict[str, Any], path: PathLike, prune: bool = True) -> bool:
    """
    Remove the leaf key or list element at a property path.

    Only the leaf is removed. With ``prune``, parent mappings and lists left
    empty by the removal are removed as well, walking up until a non-empty
    parent is found. The top-level mapping itself is never removed.

    Returns:
        True if a value was removed
    """
    parts = split_path(path)
    parents: List[Tuple[Any, Any]] = []
    target: Any = data
    for part in parts[:-1]:
        key = _resolve_key(target, part)
        if key is _MISSING or not isinstance(target[key], (dict, list)):
            return False
        parents.append((target, key))
        target = target[key]

    key = _resolve_key(target, parts[-1])
    if key is _MISSING:
        return False
    del target[key]

    if prune:
        for parent, key in reversed(parents):
            if parent[key]:
                break
            del parent[key]
    return True


def flatten_form_fields(values: Dict[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    """
    Flatten nested values into form fields with bracketed keys.

    ``{"a": {"b": 1}, "tags": ["x", "y"]}`` becomes
    ``[("a[b]", "1"), ("tags[0]", "x"), ("tags[1]", "y")]``. Booleans are sent
    as "1"/"0" and None values are left out.
    """
    fields: List[Tuple[str, str]] = []
    for key, value in values.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, dict):
            fields.extend(flatten_form_fields(value, name))
        elif isinstance(value, (list, tuple)):
            fields.extend(flatten_form_fields(dict(enumerate(value)), name))
        elif value is None:
            continue
        elif isinstance(value, bool):
            fields.append((name, "1" if value else "0"))
        else:
            fields.append((name, str(value)))
    return fields
