"""Validator factories: primitives and combinators.

Factories never raise on misuse by value (non-list, non-dict, non-class):
they return a MalformedValidator whose failure surfaces on invocation.
Only a wrong primitive tag raises, it is a programming error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from statetypes.domain.classifier import classify, is_sequence, own_entries
from statetypes.domain.evaluation import EXPECTED_ARRAY
from statetypes.domain.exceptions import InvalidTagError
from statetypes.domain.model.type_tag import TypeTag
from statetypes.domain.model.validator import (
    AnyValidator,
    ArrayOfValidator,
    BaseValidator,
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

EXPECTED_OBJECT: Final = "Expected an object"
EXPECTED_CLASS: Final = "Expected a class."
EXPECTED_VALIDATOR: Final = "Expected a validator."


def as_validator(candidate: object) -> Validator:
    """Coerce combinator argument into a validator.

    - Validator kinds: as is
    - Plain callables: wrapped in CallableValidator
    - Anything else: MalformedValidator (fails on invocation)
    """
    if isinstance(candidate, BaseValidator):
        return candidate  # type: ignore[return-value]
    if callable(candidate):
        return CallableValidator(candidate)
    return MalformedValidator(EXPECTED_VALIDATOR)


def primitive(tag: TypeTag) -> Validator:
    """Create validator for exact primitive type match.

    Args:
        tag: Expected type. ANY gives the always-passing validator.

    Returns:
        Validator failing with "Expected type '<tag>'" on mismatch.

    Raises:
        InvalidTagError: If tag is UNDEFINED or not a TypeTag.
    """
    if not isinstance(tag, TypeTag) or tag is TypeTag.UNDEFINED:
        raise InvalidTagError(tag)
    if tag is TypeTag.ANY:
        return AnyValidator()
    return PrimitiveValidator(tag)


def array_of(element: object) -> Validator:
    """Create validator: sequence whose every element passes element.

    Args:
        element: Validator for each element.

    Returns:
        Validator. Empty sequences pass.
    """
    return ArrayOfValidator(as_validator(element))


def object_of(value_validator: object) -> Validator:
    """Create validator: every own entry value passes value_validator.

    Args:
        value_validator: Validator for each value.

    Returns:
        Validator. Empty objects pass.
    """
    return ObjectOfValidator(as_validator(value_validator))


def one_of_type(validators: object) -> Validator:
    """Create validator: value passes at least one of validators.

    Args:
        validators: Sequence of candidate validators, tried in order.

    Returns:
        Validator. Non-sequence argument gives a validator that always
        fails with "Expected an array.". Empty sequence always fails.
    """
    if not is_sequence(validators):
        return MalformedValidator(EXPECTED_ARRAY)
    candidates = tuple(as_validator(v) for v in validators)  # type: ignore[attr-defined]
    return OneOfTypeValidator(candidates)


def instance_of(expected_class: object) -> Validator:
    """Create validator: value is an instance of expected_class.

    Args:
        expected_class: Class or tuple of classes.

    Returns:
        Validator. Non-class argument gives a validator that always
        fails with "Expected a class.".
    """
    if isinstance(expected_class, type):
        return InstanceOfValidator(expected_class)
    if (
        isinstance(expected_class, tuple)
        and expected_class
        and all(isinstance(c, type) for c in expected_class)
    ):
        return InstanceOfValidator(expected_class)
    return MalformedValidator(EXPECTED_CLASS)


def shape_of(shape: object) -> Validator:
    """Create validator: value's keys pass per-key validators.

    Missing keys are checked as None, so most validators reject them.

    Args:
        shape: Property name → validator.

    Returns:
        Validator. Shape not classified as object gives a validator that
        always fails with "Expected an object".
    """
    if classify(shape) is not TypeTag.OBJECT:
        return MalformedValidator(EXPECTED_OBJECT)
    entries = {key: as_validator(v) for key, v in own_entries(shape)}
    return ShapeOfValidator(entries)  # type: ignore[arg-type]
