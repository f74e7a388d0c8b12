"""Tests for primitive factory and combinators.

Tests:
- primitive: tag matching and messages
- array_of, object_of, one_of_type, instance_of, shape_of
- deferred failure of misused combinators
- every result is exactly Valid or Invalid
"""

from __future__ import annotations

import pytest

from statetypes.application.factories import (
    array_of,
    as_validator,
    instance_of,
    object_of,
    one_of_type,
    primitive,
    shape_of,
)
from statetypes.domain.exceptions import InvalidTagError
from statetypes.domain.model.result import VALID, Invalid, Valid
from statetypes.domain.model.type_tag import TypeTag
from statetypes.domain.model.validator import (
    AnyValidator,
    CallableValidator,
    MalformedValidator,
)
from tests.factories import Animal, Dog, Widget, make_context

number = primitive(TypeTag.NUMBER)
string = primitive(TypeTag.STRING)
boolean = primitive(TypeTag.BOOLEAN)


def _detail(result: object) -> str:
    assert isinstance(result, Invalid)
    return result.detail


class TestPrimitive:
    """Tests for primitive()."""

    def test_number(self) -> None:
        """number accepts numerics only."""
        assert number(1, "n") == VALID
        assert number(1.5, "n") == VALID
        assert isinstance(number("1", "n"), Invalid)
        assert isinstance(number(True, "n"), Invalid)
        assert isinstance(number(None, "n"), Invalid)

    def test_array(self) -> None:
        """array accepts sequences including empty ones."""
        array = primitive(TypeTag.ARRAY)

        assert array([], "a") == VALID
        assert array([1, "x"], "a") == VALID
        assert isinstance(array({}, "a"), Invalid)
        assert isinstance(array("abc", "a"), Invalid)

    def test_object(self) -> None:
        """object accepts mappings and instances, not arrays."""
        obj = primitive(TypeTag.OBJECT)

        assert obj({}, "o") == VALID
        assert obj(Dog(), "o") == VALID
        assert isinstance(obj([], "o"), Invalid)

    def test_function(self) -> None:
        """func accepts callables."""
        func = primitive(TypeTag.FUNCTION)

        assert func(len, "f") == VALID
        assert func(Widget, "f") == VALID
        assert isinstance(func("len", "f"), Invalid)

    def test_failure_message(self) -> None:
        """Mismatch names the expected tag."""
        result = number("x", "count")

        assert isinstance(result, Invalid)
        assert result.detail == "Expected type 'number'"
        assert result.message == (
            "Warning: Invalid state passed to 'count'. Expected type 'number' Passed to 'null'. "
        )

    def test_any(self) -> None:
        """ANY gives the always-passing validator."""
        any_ = primitive(TypeTag.ANY)

        assert isinstance(any_, AnyValidator)
        for value in (None, 0, "", [], {}, Dog()):
            assert any_(value) == VALID

    @pytest.mark.parametrize("tag", [TypeTag.UNDEFINED, "number", None])
    def test_invalid_tag_raises(self, tag: object) -> None:
        """Unknown tags are programming errors."""
        with pytest.raises(InvalidTagError):
            primitive(tag)  # type: ignore[arg-type]


class TestArrayOf:
    """Tests for array_of()."""

    def test_all_elements_pass(self) -> None:
        """Homogeneous sequence passes."""
        assert array_of(number)([1, 2, 3]) == VALID
        assert array_of(number)((1, 2)) == VALID

    def test_one_element_fails(self) -> None:
        """A single bad element fails the whole."""
        assert _detail(array_of(number)([1, "a"])) == "Expected an array of single type"

    def test_not_an_array(self) -> None:
        """Non-sequence fails before element checks."""
        assert _detail(array_of(number)("not an array")) == "Expected an array."
        assert _detail(array_of(number)({"a": 1})) == "Expected an array."

    def test_empty_passes(self) -> None:
        """Vacuous truth."""
        assert array_of(number)([]) == VALID


class TestObjectOf:
    """Tests for object_of()."""

    def test_all_values_pass(self) -> None:
        """Every value matches."""
        assert object_of(string)({"a": "x", "b": "y"}) == VALID

    def test_one_value_fails(self) -> None:
        """Any failing value fails the whole, whatever its position."""
        assert _detail(object_of(string)({"a": "x", "b": 2})) == "Expected object of one type"
        assert _detail(object_of(string)({"a": 2, "b": "y"})) == "Expected object of one type"

    def test_empty_passes(self) -> None:
        """Empty object passes."""
        assert object_of(string)({}) == VALID

    def test_instance_attributes(self) -> None:
        """Instances are checked by their attributes."""
        dog = Dog()
        dog.name = "rex"  # type: ignore[attr-defined]

        assert object_of(string)(dog) == VALID

    def test_value_without_entries_passes(self) -> None:
        """Scalars have no own entries."""
        assert object_of(string)(5) == VALID


class TestOneOfType:
    """Tests for one_of_type()."""

    def test_first_match(self) -> None:
        """Value matching any candidate passes."""
        validator = one_of_type([number, string])

        assert validator(5) == VALID
        assert validator("5") == VALID

    def test_no_match(self) -> None:
        """Value matching no candidate fails."""
        assert _detail(one_of_type([number, string])(True)) == "Expected one of given types."

    def test_empty_always_fails(self) -> None:
        """No candidates: nothing passes."""
        for value in (None, 1, "x"):
            assert _detail(one_of_type([])(value)) == "Expected one of given types."

    def test_not_an_array_is_deferred(self) -> None:
        """Misuse builds a validator; failure surfaces on invocation."""
        validator = one_of_type("not an array")

        assert isinstance(validator, MalformedValidator)
        assert _detail(validator(1)) == "Expected an array."
        assert _detail(validator("anything")) == "Expected an array."

    def test_tuple_of_candidates(self) -> None:
        """Any ordered sequence of candidates is accepted."""
        assert one_of_type((number, boolean))(True) == VALID


class TestInstanceOf:
    """Tests for instance_of()."""

    def test_instance(self) -> None:
        """Instances and subclass instances pass."""
        assert instance_of(Animal)(Animal()) == VALID
        assert instance_of(Animal)(Dog()) == VALID

    def test_not_instance(self) -> None:
        """Structurally similar values fail."""
        result = instance_of(Dog)({})

        assert isinstance(result, Invalid)
        assert result.detail == f"Expected instance of {Dog}"

    def test_tuple_of_classes(self) -> None:
        """Tuple of classes accepts any of them."""
        assert instance_of((Dog, Widget))(Widget()) == VALID

    @pytest.mark.parametrize("expected", ["Dog", Dog(), (), (Dog, "x")])
    def test_not_a_class_is_deferred(self, expected: object) -> None:
        """Non-class argument fails on invocation, never raises."""
        validator = instance_of(expected)

        assert _detail(validator(Dog())) == "Expected a class."


class TestShapeOf:
    """Tests for shape_of()."""

    def test_matching_shape(self) -> None:
        """All keys pass."""
        assert shape_of({"a": number})({"a": 1}) == VALID

    def test_wrong_key_type(self) -> None:
        """One bad key fails the whole."""
        result = shape_of({"a": number})({"a": "x"})

        assert _detail(result) == "Expected object with a specific shape"

    def test_missing_key(self) -> None:
        """Missing key is checked as None and fails."""
        assert isinstance(shape_of({"a": number})({}), Invalid)

    def test_missing_key_with_any(self) -> None:
        """Missing key passes a validator accepting None."""
        assert shape_of({"a": primitive(TypeTag.ANY)})({}) == VALID

    def test_extra_keys_ignored(self) -> None:
        """Keys not in shape are not checked."""
        assert shape_of({"a": number})({"a": 1, "b": "x"}) == VALID

    def test_attribute_lookup(self) -> None:
        """Non-mapping values are checked by attribute."""
        dog = Dog()
        dog.age = 3  # type: ignore[attr-defined]

        assert shape_of({"age": number})(dog) == VALID

    @pytest.mark.parametrize("shape", ["not an object", 5, [number], None])
    def test_not_an_object_is_deferred(self, shape: object) -> None:
        """Misuse builds a validator; failure surfaces on invocation."""
        validator = shape_of(shape)

        assert isinstance(validator, MalformedValidator)
        assert _detail(validator({"a": 1})) == "Expected an object"

    def test_non_validator_entry_fails(self) -> None:
        """Non-callable shape entry degrades to failure."""
        validator = shape_of({"a": 42})

        assert isinstance(validator({"a": 1}), Invalid)


class TestAsValidator:
    """Tests for as_validator()."""

    def test_validator_kept(self) -> None:
        """Validator kinds pass through unchanged."""
        assert as_validator(number) is number

    def test_callable_wrapped(self) -> None:
        """Plain callables are adapted."""
        assert isinstance(as_validator(lambda v, n, c: True), CallableValidator)

    def test_non_callable_malformed(self) -> None:
        """Non-callables become deferred failures."""
        validator = as_validator("number")

        assert isinstance(validator, MalformedValidator)
        assert validator.detail == "Expected a validator."


class TestNesting:
    """Tests for nested combinators."""

    def test_array_of_shapes(self) -> None:
        """Nested combinators pass when every level passes."""
        validator = array_of(shape_of({"a": number}))

        assert validator([{"a": 1}, {"a": 2}]) == VALID
        assert _detail(validator([{"a": 1}, {"a": "2"}])) == "Expected an array of single type"

    def test_shape_of_one_of(self) -> None:
        """Shapes may hold unions and arrays."""
        validator = shape_of({"id": one_of_type([number, string]), "tags": array_of(string)})

        assert validator({"id": "x1", "tags": ["a"]}) == VALID
        assert isinstance(validator({"id": 1.5, "tags": [1]}), Invalid)


class TestResultInvariant:
    """Every validator returns exactly Valid or Invalid and never raises."""

    VALUES = (None, True, 0, 1.5, "", "x", [], [1], {}, {"a": 1}, Dog(), len, Widget, object())

    @pytest.mark.parametrize(
        "validator",
        [
            number,
            primitive(TypeTag.ANY),
            primitive(TypeTag.OBJECT),
            array_of(number),
            object_of(string),
            one_of_type([number, string]),
            one_of_type("bad"),
            instance_of(Dog),
            instance_of("bad"),
            shape_of({"a": number}),
            shape_of("bad"),
        ],
    )
    def test_results_are_tagged(self, validator: object) -> None:
        """No other return value is possible."""
        for value in self.VALUES:
            result = validator(value, "prop", make_context())  # type: ignore[operator]
            assert isinstance(result, Valid | Invalid)
