"""statetypes application layer.

Builds validators (factories, registry) and applies them to state
mappings (checker, reporters).
"""

from statetypes.application.checker import (
    StateCheckResult,
    StateFailure,
    assert_state,
    check_state,
)
from statetypes.application.factories import (
    array_of,
    as_validator,
    instance_of,
    object_of,
    one_of_type,
    primitive,
    shape_of,
)
from statetypes.application.registry import ValidatorRegistry, default_registry, validators

__all__ = [
    # Factories
    "primitive",
    "array_of",
    "instance_of",
    "object_of",
    "one_of_type",
    "shape_of",
    "as_validator",
    # Registry
    "ValidatorRegistry",
    "default_registry",
    "validators",
    # Checker
    "StateFailure",
    "StateCheckResult",
    "check_state",
    "assert_state",
]
