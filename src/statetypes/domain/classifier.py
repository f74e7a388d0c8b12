"""Type classifier: canonical type tag of any runtime value."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Number
from typing import TYPE_CHECKING

from statetypes.domain.model.type_tag import TypeTag

if TYPE_CHECKING:
    from collections.abc import Iterator

# Sequences that are scalars for validation purposes
_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_sequence(value: object) -> bool:
    """Check if value is an ordered sequence (list, tuple, ...).

    Strings and byte strings are not sequences here.
    """
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def classify(value: object) -> TypeTag:
    """Classify value into a type tag.

    Order matters:
    - bool before number (bool is an int subclass)
    - array before object and function

    Args:
        value: Any value.

    Returns:
        Type tag. Total: never raises.
    """
    if value is None:
        return TypeTag.UNDEFINED
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if is_sequence(value):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def own_entries(value: object) -> Iterator[tuple[object, object]]:
    """Iterate own enumerable (key, item) pairs of value.

    - Mapping: its items
    - Sequence or string: (index, element)
    - Object with __dict__: instance attributes
    - Anything else: nothing

    Args:
        value: Any value.

    Yields:
        (key, item) pairs.
    """
    if isinstance(value, Mapping):
        yield from value.items()
    elif is_sequence(value) or isinstance(value, str):
        yield from enumerate(value)  # type: ignore[arg-type]
    elif not callable(value) and hasattr(value, "__dict__"):
        yield from vars(value).items()
