"""Evaluation: uniform dispatch over validator kinds.

Recursion policy:
- name: passed down by array-of and one-of-type, None for object-of and shape-of
- context: outermost call only, never passed down
- every descent into a container goes through _Guard (depth check)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from statetypes.domain.classifier import classify, is_sequence, own_entries
from statetypes.domain.errors import compose_error
from statetypes.domain.model.config import EvaluationConfig
from statetypes.domain.model.result import VALID, Invalid, Valid
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
    from statetypes.domain.model.context import ValidationContext
    from statetypes.domain.model.result import ValidationResult
    from statetypes.domain.model.validator import Validator

# Failure details (part of the public message format)
EXPECTED_ARRAY: Final = "Expected an array."
EXPECTED_ARRAY_OF: Final = "Expected an array of single type"
EXPECTED_OBJECT_OF: Final = "Expected object of one type"
EXPECTED_ONE_OF: Final = "Expected one of given types."
EXPECTED_SHAPE: Final = "Expected object with a specific shape"
DEPTH_EXCEEDED: Final = "Maximum validation depth exceeded."
UNEXPECTED_RESULT: Final = "Validator returned an unexpected result."

_DEFAULT_CONFIG: Final = EvaluationConfig()


@dataclass(frozen=True, slots=True)
class _Guard:
    """Recursion state of one evaluation path.

    Values are not tracked by identity: the validator tree is finite and
    each descent moves one level down it, so back-references in the data
    are visited at most once per validator.

    Attributes:
        config: Limits
        depth: Number of container descents so far
    """

    config: EvaluationConfig
    depth: int = 0

    def enter(self) -> _Guard | str:
        """Descend one level. Returns new guard or failure detail."""
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            return DEPTH_EXCEEDED
        return _Guard(self.config, self.depth + 1)


def evaluate(
    validator: Validator,
    value: object,
    name: str | None = None,
    context: ValidationContext | None = None,
    *,
    config: EvaluationConfig | None = None,
) -> ValidationResult:
    """Validate value against validator.

    Args:
        validator: Validator to apply
        value: Value to check
        name: State property name for failure message
        context: Diagnostic context for failure message
        config: Recursion limits. None = defaults.

    Returns:
        VALID or Invalid. Exceptions raised by user callables or property
        getters propagate.
    """
    guard = _Guard(config if config is not None else _DEFAULT_CONFIG)
    return _evaluate(validator, value, name, context, guard)


def _passes(
    validator: Validator,
    value: object,
    name: str | None,
    guard: _Guard,
) -> bool:
    """Nested check: context omitted."""
    return isinstance(_evaluate(validator, value, name, None, guard), Valid)


def _evaluate(  # noqa: C901, PLR0911
    validator: Validator,
    value: object,
    name: str | None,
    context: ValidationContext | None,
    guard: _Guard,
) -> ValidationResult:
    match validator:
        case AnyValidator():
            return VALID

        case PrimitiveValidator(tag=tag):
            if classify(value) is not tag:
                return compose_error(f"Expected type '{tag}'", name, context)
            return VALID

        case ArrayOfValidator(element=element):
            if not is_sequence(value):
                return compose_error(EXPECTED_ARRAY, name, context)
            inner = guard.enter()
            if isinstance(inner, str):
                return compose_error(inner, name, context)
            items: Iterable[object] = value  # type: ignore[assignment]
            if not all(_passes(element, item, name, inner) for item in items):
                return compose_error(EXPECTED_ARRAY_OF, name, context)
            return VALID

        case ObjectOfValidator(value_validator=value_validator):
            inner = guard.enter()
            if isinstance(inner, str):
                return compose_error(inner, name, context)
            entries = own_entries(value)
            if not all(_passes(value_validator, item, None, inner) for _, item in entries):
                return compose_error(EXPECTED_OBJECT_OF, name, context)
            return VALID

        case OneOfTypeValidator(candidates=candidates):
            if any(_passes(candidate, value, name, guard) for candidate in candidates):
                return VALID
            return compose_error(EXPECTED_ONE_OF, name, context)

        case InstanceOfValidator(expected_class=expected_class):
            if not isinstance(value, expected_class):
                return compose_error(f"Expected instance of {expected_class}", name, context)
            return VALID

        case ShapeOfValidator(shape=shape):
            inner = guard.enter()
            if isinstance(inner, str):
                return compose_error(inner, name, context)
            for key, key_validator in shape.items():
                if not _passes(key_validator, _lookup(value, key), None, inner):
                    return compose_error(EXPECTED_SHAPE, name, context)
            return VALID

        case MalformedValidator(detail=detail):
            return compose_error(detail, name, context)

        case CallableValidator(func=func):
            return _normalize(func(value, name, context), name, context)

    raise TypeError(f"Unknown validator kind: {type(validator).__name__}")


def _lookup(value: object, key: object) -> object:
    """value[key] for mappings, attribute otherwise. Missing = None.

    Only AttributeError means missing. Other errors raised by a property
    getter propagate.
    """
    if isinstance(value, Mapping):
        return value.get(key)
    if isinstance(key, str):
        return getattr(value, key, None)
    return None


def _normalize(
    result: object,
    name: str | None,
    context: ValidationContext | None,
) -> ValidationResult:
    """Map a user callable's return value onto the tagged result."""
    if result is True or isinstance(result, Valid):
        return VALID
    if isinstance(result, Invalid):
        return result
    if isinstance(result, BaseException):
        return Invalid(message=str(result) or type(result).__name__, detail=type(result).__name__)
    return compose_error(UNEXPECTED_RESULT, name, context)
