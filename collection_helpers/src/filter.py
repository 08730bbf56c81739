"""Filtering helper built on `each`.

Like the mapping helpers, this module avoids shadowing the Python built-in
`filter`; the public function is `filter_collection`.
"""

from __future__ import annotations

from typing import Any, Callable, List

from .each import each
from .shapes import classify, require_callable


# PUBLIC_INTERFACE
def filter_collection(container: Any, predicate: Callable[[Any, Any], bool]) -> List[Any]:
    """Return a new list holding the values for which predicate(value, index) is true.

    Retained values keep their relative input order. The input is not modified.
    Mappings are accepted as well: the predicate then receives (value, key)
    and the result is still a list of values.

    Args:
        container: A sequence or mapping.
        predicate: A two-argument callable; its result is used for its truth value.

    Returns:
        A new list, never longer than the input.

    Raises:
        InvalidArgumentError: If predicate is not callable or the container is unsupported.

    Example:
        >>> filter_collection([67, 99, 125, -12, 79, 141, 100], lambda v, i: v > 99)
        [125, 141, 100]
    """
    require_callable(predicate, "predicate")
    acc: List[Any] = []

    def _keep_if_passing(value: Any, index: Any) -> None:
        if predicate(value, index):
            acc.append(value)

    each(classify(container), _keep_if_passing)
    return acc
