"""statetypes domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, numbers, types, collections.abc
"""

from statetypes.domain.classifier import classify, is_sequence, own_entries
from statetypes.domain.describe import describe
from statetypes.domain.errors import compose_error
from statetypes.domain.evaluation import evaluate
from statetypes.domain.exceptions import (
    InvalidTagError,
    RegistryError,
    StateTypesError,
    StateValidationError,
)
from statetypes.domain.model import (
    VALID,
    AnyValidator,
    ArrayOfValidator,
    BaseValidator,
    CallableValidator,
    ComponentContext,
    EvaluationConfig,
    InstanceOfValidator,
    Invalid,
    MalformedValidator,
    ObjectOfValidator,
    OneOfTypeValidator,
    PrimitiveValidator,
    ShapeOfValidator,
    StateCheckResult,
    StateFailure,
    TypeTag,
    Valid,
    ValidationContext,
    ValidationResult,
    Validator,
    function_name,
)

__all__ = [
    # Exceptions
    "StateTypesError",
    "InvalidTagError",
    "RegistryError",
    "StateValidationError",
    # Enums
    "TypeTag",
    # Results
    "VALID",
    "Valid",
    "Invalid",
    "ValidationResult",
    # Context
    "ValidationContext",
    "ComponentContext",
    "function_name",
    # State checks
    "StateFailure",
    "StateCheckResult",
    # Config
    "EvaluationConfig",
    # Validator kinds
    "Validator",
    "BaseValidator",
    "AnyValidator",
    "PrimitiveValidator",
    "ArrayOfValidator",
    "ObjectOfValidator",
    "OneOfTypeValidator",
    "InstanceOfValidator",
    "ShapeOfValidator",
    "MalformedValidator",
    "CallableValidator",
    # Operations
    "classify",
    "is_sequence",
    "own_entries",
    "compose_error",
    "evaluate",
    "describe",
]
