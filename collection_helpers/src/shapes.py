"""Container shape resolution shared by each, filter_collection and map_collection.

A container is resolved once, at the call boundary, into a tagged variant:
SequenceContainer for ordered lists and MappingContainer for key-value
containers. The helpers then dispatch on the tag instead of re-checking types.

Strings, bytes and bytearrays are Sequences to Python but are treated as
scalars here, so `each("abc", ...)` is an unsupported input rather than a
walk over characters.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .errors import ErrorCode, invalid_argument
from .settings import UnsupportedInputPolicy, get_unsupported_input_policy

_logger = logging.getLogger("collection_helpers.shapes")

_SCALAR_SEQUENCES = (str, bytes, bytearray)


# PUBLIC_INTERFACE
class Shape(str, Enum):
    """Tag naming the shape of a resolved container."""
    SEQUENCE = "sequence"
    MAPPING = "mapping"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class SequenceContainer:
    """An ordered, integer-indexed container. `items` is the caller's object, not a copy."""
    items: Sequence
    shape: Shape = Shape.SEQUENCE


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class MappingContainer:
    """A key-value container. `items` is the caller's object, not a copy."""
    items: Mapping
    shape: Shape = Shape.MAPPING


Container = Union[SequenceContainer, MappingContainer]


# PUBLIC_INTERFACE
def is_sequence(obj: Any) -> bool:
    """Return True if obj counts as an ordered list (a Sequence that is not text or bytes)."""
    return isinstance(obj, Sequence) and not isinstance(obj, _SCALAR_SEQUENCES)


# PUBLIC_INTERFACE
def classify(container: Any, policy: Optional[UnsupportedInputPolicy] = None) -> Container:
    """Resolve a raw container into its tagged variant.

    Args:
        container: The object to classify.
        policy: How to treat unsupported inputs. Defaults to the value of
            COLLECTION_HELPERS_UNSUPPORTED_INPUT (see settings).

    Returns:
        SequenceContainer or MappingContainer wrapping the input.

    Raises:
        InvalidArgumentError: If the input is neither a sequence nor a mapping
            and the policy is ERROR.
    """
    if isinstance(container, (SequenceContainer, MappingContainer)):
        return container
    if is_sequence(container):
        return SequenceContainer(container)
    if isinstance(container, Mapping):
        return MappingContainer(container)

    if policy is None:
        policy = get_unsupported_input_policy()
    type_name = type(container).__name__
    if policy is UnsupportedInputPolicy.EMPTY:
        _logger.warning("Unsupported container type '%s'; treating it as an empty mapping.", type_name)
        return MappingContainer({})
    raise invalid_argument(
        ErrorCode.INVALID_CONTAINER,
        f"Expected a sequence or a mapping, got {type_name}",
        details={"type": type_name},
    )


# PUBLIC_INTERFACE
def require_callable(func: Any, name: str) -> None:
    """Raise InvalidArgumentError if func is not callable."""
    if not callable(func):
        raise invalid_argument(
            ErrorCode.NOT_CALLABLE,
            f"{name} must be callable",
            details={"argument": name, "type": type(func).__name__},
        )
