"""Rebuild nested documents from dotted field paths."""

from typing import Any, Dict, Mapping, Set

from docmock.generation.constants import PATH_SEPARATOR
from docmock.generation.errors import PathConflictError

_MISSING = object()


def unflatten(flat: Mapping[str, Any], separator: str = PATH_SEPARATOR) -> Dict[str, Any]:
    """
    Fold (dotted path, value) pairs into a nested mapping.

    Each separator-delimited segment becomes a nesting level and paths sharing
    a prefix share one sub-object. Values are leaves even when they are dicts
    or lists themselves; only containers created here are descended into.

    >>> unflatten({"a.b": 1, "a.c": 2, "d": [3]})
    {'a': {'b': 1, 'c': 2}, 'd': [3]}

    Args:
        flat: Mapping of path to value, in output order
        separator: Path segment separator

    Returns:
        Nested mapping

    Raises:
        PathConflictError: If a path is both a leaf and a container
    """
    result: Dict[str, Any] = {}
    containers: Set[int] = {id(result)}

    for path, value in flat.items():
        segments = path.split(separator)
        node = result
        for index, segment in enumerate(segments[:-1]):
            child = node.get(segment, _MISSING)
            if child is _MISSING:
                child = {}
                node[segment] = child
                containers.add(id(child))
            elif id(child) not in containers:
                prefix = separator.join(segments[: index + 1])
                raise PathConflictError(path, f"'{prefix}' already holds a value")
            node = child

        leaf = segments[-1]
        if leaf in node:
            raise PathConflictError(path, "path is already a container for other fields")
        node[leaf] = value

    return result
