"""Validator kinds: tagged union of immutable validator descriptions.

Each kind holds only its configuration payload.
Behavior lives in one place: statetypes.domain.evaluation.evaluate().
Calling a validator is shorthand for evaluate(validator, ...).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from statetypes.domain.model.type_tag import TypeTag

if TYPE_CHECKING:
    from statetypes.domain.model.context import ValidationContext
    from statetypes.domain.model.result import ValidationResult


class BaseValidator:
    """Common call protocol for all validator kinds."""

    __slots__ = ()

    def __call__(
        self,
        value: object,
        name: str | None = None,
        context: ValidationContext | None = None,
    ) -> ValidationResult:
        """Validate value.

        Args:
            value: Value to check
            name: State property name, used in failure message
            context: Diagnostic context, outermost call only

        Returns:
            VALID or Invalid. Mismatches never raise. Exceptions from user
            callables and from property getters read by shape-of propagate.
        """
        from statetypes.domain.evaluation import evaluate

        return evaluate(self, value, name, context)


@dataclass(frozen=True, slots=True)
class AnyValidator(BaseValidator):
    """Accepts every value."""


@dataclass(frozen=True, slots=True)
class PrimitiveValidator(BaseValidator):
    """Accepts values classified exactly as tag.

    Attributes:
        tag: Expected type tag (not ANY, not UNDEFINED)
    """

    tag: TypeTag

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.tag in (TypeTag.ANY, TypeTag.UNDEFINED):
            raise ValueError(f"tag must be a concrete type, got {self.tag}")


@dataclass(frozen=True, slots=True)
class ArrayOfValidator(BaseValidator):
    """Accepts sequences whose every element passes element.

    Attributes:
        element: Validator for each element
    """

    element: Validator


@dataclass(frozen=True, slots=True)
class ObjectOfValidator(BaseValidator):
    """Accepts values whose every own entry passes value_validator.

    Attributes:
        value_validator: Validator for each entry value
    """

    value_validator: Validator


@dataclass(frozen=True, slots=True)
class OneOfTypeValidator(BaseValidator):
    """Accepts values passing at least one candidate, tried in order.

    Attributes:
        candidates: Candidate validators. Empty = always fails.
    """

    candidates: tuple[Validator, ...]


@dataclass(frozen=True, slots=True)
class InstanceOfValidator(BaseValidator):
    """Accepts instances of expected_class (nominal check).

    Attributes:
        expected_class: Class (or tuple of classes) to check against
    """

    expected_class: type | tuple[type, ...]


@dataclass(frozen=True, slots=True)
class ShapeOfValidator(BaseValidator):
    """Accepts values whose keys pass the per-key validators.

    Keys missing from the value are checked as None.

    Attributes:
        shape: Property name → validator. Read-only view.
    """

    shape: Mapping[str, Validator] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Freeze shape. Caller's dict may change after construction."""
        object.__setattr__(self, "shape", MappingProxyType(dict(self.shape)))


@dataclass(frozen=True, slots=True)
class MalformedValidator(BaseValidator):
    """Always fails with detail.

    Produced when a combinator is built from invalid configuration.
    The failure surfaces on invocation, not at construction.

    Attributes:
        detail: Failure detail (what configuration was expected)
    """

    detail: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.detail:
            raise ValueError("detail must not be empty")


@dataclass(frozen=True, slots=True)
class CallableValidator(BaseValidator):
    """Adapter for a user-written validator function.

    func(value, name, context) may return True, VALID, Invalid,
    or an exception instance (failure with its text).

    Attributes:
        func: Validator function
    """

    func: Callable[..., object]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.func):
            raise TypeError(f"func must be callable, got {type(self.func).__name__}")


Validator: TypeAlias = (
    AnyValidator
    | PrimitiveValidator
    | ArrayOfValidator
    | ObjectOfValidator
    | OneOfTypeValidator
    | InstanceOfValidator
    | ShapeOfValidator
    | MalformedValidator
    | CallableValidator
)
