"""Iteration primitive behind the other helpers.

`each` walks a sequence by ascending index or a mapping by key enumeration
order and calls a visitor with (value, index) or (value, key). It returns
nothing; callers observe it through the visitor's side effects.

No runtime side effects occur on import beyond loading .env (see startup).
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Mapping, Sequence, TypeVar

from .shapes import MappingContainer, classify, require_callable

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


# PUBLIC_INTERFACE
def each_of_sequence(items: Sequence[T], visitor: Callable[[T, int], Any]) -> None:
    """Call visitor(value, index) for index 0..len(items)-1 in ascending order.

    Example:
        >>> seen = []
        >>> each_of_sequence(["lion", "sloth"], lambda v, i: seen.append((i, v)))
        >>> seen
        [(0, 'lion'), (1, 'sloth')]
    """
    for index, value in enumerate(items):
        visitor(value, index)


# PUBLIC_INTERFACE
def each_of_mapping(items: Mapping[K, T], visitor: Callable[[T, K], Any]) -> None:
    """Call visitor(value, key) once per key, in the mapping's enumeration order.

    Example:
        >>> seen = []
        >>> each_of_mapping({"state": "MA"}, lambda v, k: seen.append((k, v)))
        >>> seen
        [('state', 'MA')]
    """
    for key, value in items.items():
        visitor(value, key)


# PUBLIC_INTERFACE
def each(container: Any, visitor: Callable[[Any, Any], Any]) -> None:
    """Visit every element of a sequence or mapping.

    Args:
        container: A sequence (visited as value, index) or a mapping (visited
            as value, key). Already-classified containers are accepted too.
        visitor: A two-argument callable. Its return value is ignored.

    Raises:
        InvalidArgumentError: If visitor is not callable, or the container is
            unsupported under the configured policy.
    """
    require_callable(visitor, "visitor")
    resolved = classify(container)
    if isinstance(resolved, MappingContainer):
        each_of_mapping(resolved.items, visitor)
    else:
        each_of_sequence(resolved.items, visitor)
