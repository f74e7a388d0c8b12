"""Human-readable type expressions for validators.

describe(array_of(shape_of({"a": number}))) == "arrayOf(shapeOf({a: number}))"
Uses registry names so the expression reads like the declaration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from statetypes.domain.model.context import function_name
from statetypes.domain.model.type_tag import TypeTag
from statetypes.domain.model.validator import (
    AnyValidator,
    ArrayOfValidator,
    CallableValidator,
    InstanceOfValidator,
    MalformedValidator,
    ObjectOfValidator,
    OneOfTypeValidator,
    PrimitiveValidator,
    ShapeOfValidator,
)

if TYPE_CHECKING:
    from statetypes.domain.model.validator import Validator

# Registry name of each primitive tag
_PRIMITIVE_NAMES = {
    TypeTag.ARRAY: "array",
    TypeTag.BOOLEAN: "bool",
    TypeTag.FUNCTION: "func",
    TypeTag.NUMBER: "number",
    TypeTag.OBJECT: "object",
    TypeTag.STRING: "string",
}


def describe(validator: Validator) -> str:  # noqa: PLR0911
    """Render validator as a type expression.

    Args:
        validator: Any validator kind.

    Returns:
        Expression string.
    """
    match validator:
        case AnyValidator():
            return "any"
        case PrimitiveValidator(tag=tag):
            return _PRIMITIVE_NAMES[tag]
        case ArrayOfValidator(element=element):
            return f"arrayOf({describe(element)})"
        case ObjectOfValidator(value_validator=value_validator):
            return f"objectOf({describe(value_validator)})"
        case OneOfTypeValidator(candidates=candidates):
            return f"oneOfType([{', '.join(describe(c) for c in candidates)}])"
        case InstanceOfValidator(expected_class=expected_class):
            if isinstance(expected_class, tuple):
                return f"instanceOf({' | '.join(function_name(c) for c in expected_class)})"
            return f"instanceOf({function_name(expected_class)})"
        case ShapeOfValidator(shape=shape):
            fields = ", ".join(f"{key}: {describe(v)}" for key, v in shape.items())
            return f"shapeOf({{{fields}}})"
        case MalformedValidator(detail=detail):
            return f"<malformed: {detail}>"
        case CallableValidator(func=func):
            return function_name(func)

    return function_name(validator)
