"""Utility mapping functions.

This module intentionally avoids shadowing the Python built-in `map` by
exposing `map_collection` and its two shape-specific entry points.

Design notes:
- The output mirrors the input's shape: a list for sequences, a dict with
  exactly the same keys for mappings.
- Transforms are called with (value, index) or (value, key), in the order
  `each` visits the input.
- Public interfaces are clearly documented and preceded by PUBLIC_INTERFACE.

No runtime side effects occur on import beyond loading .env (see startup).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List, Mapping, Sequence, TypeVar, Union

from .each import each_of_mapping, each_of_sequence
from .shapes import MappingContainer, classify, require_callable

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

_logger = logging.getLogger("collection_helpers.map")


# PUBLIC_INTERFACE
def map_sequence(items: Sequence[T], transform: Callable[[T, int], U]) -> List[U]:
    """Return a new list where slot i holds transform(items[i], i).

    Example:
        >>> map_sequence([11, 7, 4], lambda v, i: "even" if v % 2 == 0 else "odd")
        ['odd', 'odd', 'even']
    """
    acc: List[U] = []
    each_of_sequence(items, lambda value, index: acc.append(transform(value, index)))
    return acc


# PUBLIC_INTERFACE
def map_mapping(items: Mapping[K, T], transform: Callable[[T, K], U]) -> Dict[K, U]:
    """Return a new dict with the same keys, each holding transform(items[key], key).

    Example:
        >>> map_mapping({"state": "MA"}, lambda v, k: "I like " + v)
        {'state': 'I like MA'}
    """
    acc: Dict[K, U] = {}

    def _store(value: T, key: K) -> None:
        acc[key] = transform(value, key)

    each_of_mapping(items, _store)
    return acc


# PUBLIC_INTERFACE
def map_collection(container: Any, transform: Callable[[Any, Any], Any]) -> Union[List[Any], Dict[Any, Any]]:
    """Apply a transform over a sequence or mapping and return a new container of the same shape.

    Args:
        container: A sequence (result is a list of the same length) or a
            mapping (result is a dict with exactly the same keys).
        transform: A two-argument callable taking (value, index_or_key).

    Returns:
        A new list or dict. The input is not modified.

    Raises:
        InvalidArgumentError: If transform is not callable or the container is unsupported.

    Example:
        >>> map_collection({"state": "MA", "zip": "02111"}, lambda v, k: "I like " + v)
        {'state': 'I like MA', 'zip': 'I like 02111'}
    """
    require_callable(transform, "transform")
    resolved = classify(container)
    _logger.debug("Mapping over %s of %d item(s)", resolved.shape.value, len(resolved.items))
    if isinstance(resolved, MappingContainer):
        return map_mapping(resolved.items, transform)
    return map_sequence(resolved.items, transform)
