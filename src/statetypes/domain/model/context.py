"""Validation context: optional diagnostic enrichment.

Supplied by the host framework at the outermost validation call.
Used only to name the component in failure messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ValidationContext(Protocol):
    """Contract for contexts passed to validators.

    Both capabilities are optional in effect: return None when unknown.

    Example:
        class Widget:
            def component_name(self) -> str | None:
                return "Widget"

            def parent_component_name(self) -> str | None:
                return None
    """

    def component_name(self) -> str | None:
        """Name of the component receiving the state."""
        ...

    def parent_component_name(self) -> str | None:
        """Name of the component that rendered it last, if any."""
        ...


def function_name(ref: object) -> str:
    """Resolve human-readable name of a function, class or instance.

    Functions and classes use their qualified name.
    Other objects fall back to the name of their type.

    Args:
        ref: Any object.

    Returns:
        Non-empty name.
    """
    name = getattr(ref, "__qualname__", None) or getattr(ref, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(ref).__qualname__


@dataclass(frozen=True, slots=True)
class ComponentContext:
    """ValidationContext backed by component references.

    Attributes:
        component: Component (class or instance) receiving the state
        parent: Last rendered parent component. None = unknown.
    """

    component: object
    parent: object | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.component is None:
            raise TypeError("component must not be None")

    def component_name(self) -> str | None:
        """Name of the wrapped component."""
        return function_name(self.component)

    def parent_component_name(self) -> str | None:
        """Name of the parent component, None if no parent."""
        if self.parent is None:
            return None
        return function_name(self.parent)
