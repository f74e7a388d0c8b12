"""Error composer: the single place failure values are built.

Message format (one shape for every validator kind):
    Warning: Invalid state passed to '<name>'. <detail> Passed to '<component>'. <location>

Absent name or component renders as 'null'.
Location is "Check render method of '<parent>'." or empty.

Contexts are resolved leniently: a missing capability degrades to 'null' or
an empty location. An object implementing neither capability is taken as the
component itself and named with function_name().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from statetypes.domain.model.context import function_name
from statetypes.domain.model.result import Invalid

if TYPE_CHECKING:
    from statetypes.domain.model.context import ValidationContext

NULL_NAME: Final = "null"


def _capability(context: object, capability: str) -> str | None:
    resolve = getattr(context, capability, None)
    if not callable(resolve):
        return None
    name = resolve()
    return name if isinstance(name, str) else None


def _is_bare_component(context: object) -> bool:
    return not any(
        callable(getattr(context, capability, None))
        for capability in ("component_name", "parent_component_name")
    )


def _component_name(context: object) -> str | None:
    if context is None:
        return None
    if _is_bare_component(context):
        return function_name(context)
    return _capability(context, "component_name")


def _location(context: object) -> str:
    parent_name = _capability(context, "parent_component_name") if context is not None else None
    if not parent_name:
        return ""
    return f"Check render method of '{parent_name}'."


def compose_error(
    detail: str,
    name: str | None,
    context: ValidationContext | None = None,
) -> Invalid:
    """Build failure value with uniform message.

    Args:
        detail: What the validator expected
        name: State property name. None renders as 'null'.
        context: Diagnostic context, or the bare component. None = no component info.

    Returns:
        Invalid carrying formatted message and detail.
    """
    component_name = _component_name(context)
    location = _location(context)

    message = (
        f"Warning: Invalid state passed to '{name if name is not None else NULL_NAME}'. "
        f"{detail} Passed to '{component_name or NULL_NAME}'. {location}"
    )
    return Invalid(message=message, detail=detail)
