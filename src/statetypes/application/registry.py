"""Validator registry: the exposed name → validator/factory mapping.

Ready-made validators: any, array, bool, func, number, object, string.
Factories (call with configuration first): arrayOf, instanceOf,
objectOf, oneOfType, shapeOf.

Usage:
    from statetypes import validators

    point = validators.shapeOf({"x": validators.number, "y": validators.number})
    result = validators.arrayOf(point)([{"x": 1, "y": 2}], "points")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from statetypes.application.factories import (
    array_of,
    instance_of,
    object_of,
    one_of_type,
    primitive,
    shape_of,
)
from statetypes.domain.exceptions import RegistryError
from statetypes.domain.model.type_tag import TypeTag

if TYPE_CHECKING:
    from statetypes.domain.model.validator import Validator

RegistryEntry: TypeAlias = "Validator | Callable[..., Validator]"


class ValidatorRegistry(Mapping[str, RegistryEntry]):
    """Immutable mapping of type names to validators and factories.

    Entries are reachable by key (registry["arrayOf"]) and by
    attribute (registry.arrayOf). Extending returns a new registry.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, RegistryEntry]) -> None:
        """Initialize registry.

        Args:
            entries: Name → validator or factory.

        Raises:
            RegistryError: If a name is not an identifier or an entry is not callable.
        """
        # FAIL-FIRST: validate all entries before accepting any
        for name, entry in entries.items():
            if not isinstance(name, str) or not name.isidentifier():
                raise RegistryError(str(name), "name must be a valid identifier")
            if not callable(entry):
                raise RegistryError(name, f"entry must be callable, got {type(entry).__name__}")

        self._entries: Mapping[str, RegistryEntry] = MappingProxyType(dict(entries))

    def __getitem__(self, name: str) -> RegistryEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> RegistryEntry:
        # Only called when normal lookup fails; never expose slots this way
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(f"No validator registered as '{name}'") from None

    def __repr__(self) -> str:
        return f"ValidatorRegistry({', '.join(self._entries)})"

    def with_entries(self, **entries: RegistryEntry) -> ValidatorRegistry:
        """Create new registry with added or replaced entries.

        Args:
            **entries: Name → validator or factory.

        Returns:
            New registry. This registry is unchanged.
        """
        return ValidatorRegistry({**self._entries, **entries})


def default_registry() -> ValidatorRegistry:
    """Build the standard registry.

    Returns:
        Registry with primitives and combinator factories.
    """
    return ValidatorRegistry(
        {
            "any": primitive(TypeTag.ANY),
            "array": primitive(TypeTag.ARRAY),
            "bool": primitive(TypeTag.BOOLEAN),
            "func": primitive(TypeTag.FUNCTION),
            "number": primitive(TypeTag.NUMBER),
            "object": primitive(TypeTag.OBJECT),
            "string": primitive(TypeTag.STRING),
            "arrayOf": array_of,
            "instanceOf": instance_of,
            "objectOf": object_of,
            "oneOfType": one_of_type,
            "shapeOf": shape_of,
        }
    )


validators = default_registry()
