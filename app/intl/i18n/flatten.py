"""Conversion between nested translation trees and flat dotted maps."""

from typing import Any, Dict, Mapping


def _children(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    if isinstance(value, (list, tuple)):
        return enumerate(value)
    return None


def flatten(data: Mapping[Any, Any]) -> Dict[str, Any]:
    """Flatten a nested mapping into dot-joined key paths.

    Lists are walked like mappings keyed by index. Keys already containing
    dots are kept as they are, so flat and nested input can be mixed.

    Args:
        data: Nested mapping (e.g. {"days": {"short": {"1": "Mon"}}}).

    Returns:
        Flat mapping (e.g. {"days.short.1": "Mon"}).

    Example:
        >>> flatten({"a": {"b": "x"}, "c.d": "y"})
        {'a.b': 'x', 'c.d': 'y'}
    """
    result: Dict[str, Any] = {}

    def walk(node, prefix):
        for key, value in _children(node):
            path = str(key) if prefix is None else f"{prefix}.{key}"
            if _children(value) is not None:
                walk(value, path)
            else:
                result[path] = value

    walk(data, None)
    return result


def unflatten(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild a nested mapping from dot-joined key paths.

    A key is only split at a dot when the path before that dot is not a
    leaf of its own; otherwise the rest of the key stays literal, so
    `{"a": "x", "a.b": "y"}` comes back as `{"a": "x", "a.b": "y"}`.

    Args:
        flat: Flat mapping of dotted keys to values.

    Returns:
        Nested mapping whose flatten() equals `flat`.
    """
    result: Dict[str, Any] = {}

    for key, value in flat.items():
        segments = str(key).split(".")
        node = result
        for index, segment in enumerate(segments[:-1]):
            path = ".".join(segments[: index + 1])
            if path in flat:
                # A leaf lives at this path, keep the remainder literal
                node[".".join(segments[index:])] = value
                break
            node = node.setdefault(segment, {})
        else:
            node[segments[-1]] = value

    return result
