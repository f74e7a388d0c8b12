"""statetypes - runtime type validation for dynamically-typed state."""

__version__ = "0.1.0"

from statetypes.application import (
    StateCheckResult,
    StateFailure,
    ValidatorRegistry,
    array_of,
    assert_state,
    check_state,
    instance_of,
    object_of,
    one_of_type,
    primitive,
    shape_of,
    validators,
)
from statetypes.domain import (
    VALID,
    ComponentContext,
    EvaluationConfig,
    Invalid,
    StateTypesError,
    StateValidationError,
    TypeTag,
    Valid,
    ValidationContext,
    ValidationResult,
    Validator,
    classify,
    describe,
    evaluate,
)

__all__ = [
    "__version__",
    # Registry
    "validators",
    "ValidatorRegistry",
    # Factories
    "primitive",
    "array_of",
    "instance_of",
    "object_of",
    "one_of_type",
    "shape_of",
    # Results
    "VALID",
    "Valid",
    "Invalid",
    "ValidationResult",
    "Validator",
    # Evaluation
    "TypeTag",
    "classify",
    "evaluate",
    "describe",
    "EvaluationConfig",
    "ValidationContext",
    "ComponentContext",
    # State checks
    "check_state",
    "assert_state",
    "StateCheckResult",
    "StateFailure",
    # Exceptions
    "StateTypesError",
    "StateValidationError",
]
