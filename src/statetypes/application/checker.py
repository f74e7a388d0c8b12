"""State checker: validate a state mapping against declared validators.

Each declared key is validated with its validator, name = key.
Keys present in state but not declared are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from statetypes.application.factories import as_validator
from statetypes.domain.describe import describe
from statetypes.domain.evaluation import evaluate
from statetypes.domain.model.result import Invalid
from statetypes.domain.model.state_check import StateCheckResult, StateFailure

if TYPE_CHECKING:
    from statetypes.domain.model.config import EvaluationConfig
    from statetypes.domain.model.context import ValidationContext
    from statetypes.domain.model.validator import Validator


def check_state(
    state: Mapping[str, object],
    declared: Mapping[str, Validator],
    context: ValidationContext | None = None,
    *,
    config: EvaluationConfig | None = None,
) -> StateCheckResult:
    """Validate every declared state key.

    Args:
        state: Current state values. Missing keys are checked as None.
        declared: State name → validator (plain callables accepted)
        context: Diagnostic context for failure messages
        config: Recursion limits. None = defaults.

    Returns:
        Result with all failures (not only the first).

    Raises:
        TypeError: If state or declared is not a mapping.
    """
    # FAIL-FIRST: wrong arguments are programming errors
    if not isinstance(state, Mapping):
        raise TypeError(f"state must be a mapping, got {type(state).__name__}")
    if not isinstance(declared, Mapping):
        raise TypeError(f"declared must be a mapping, got {type(declared).__name__}")

    failures: list[StateFailure] = []

    for name, entry in declared.items():
        validator = as_validator(entry)
        result = evaluate(validator, state.get(name), name, context, config=config)
        if isinstance(result, Invalid):
            failures.append(
                StateFailure(name=name, expected=describe(validator), message=result.message)
            )

    return StateCheckResult(checked=tuple(declared), failures=tuple(failures))


def assert_state(
    state: Mapping[str, object],
    declared: Mapping[str, Validator],
    context: ValidationContext | None = None,
    *,
    config: EvaluationConfig | None = None,
) -> None:
    """Validate every declared state key and raise on failures.

    Raises:
        StateValidationError: If any value failed
    """
    check_state(state, declared, context, config=config).raise_for_failures()
