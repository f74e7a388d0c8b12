"""Domain model: type tags, results, contexts, validator kinds."""

from statetypes.domain.model.config import DEFAULT_MAX_DEPTH, EvaluationConfig
from statetypes.domain.model.context import ComponentContext, ValidationContext, function_name
from statetypes.domain.model.result import VALID, Invalid, Valid, ValidationResult
from statetypes.domain.model.state_check import StateCheckResult, StateFailure
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
    Validator,
)

__all__ = [
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
    "DEFAULT_MAX_DEPTH",
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
]
