"""Evaluation configuration.

Bounds recursion over deeply nested values.
None = use defaults (EvaluationConfig()).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_DEPTH: Final = 256


@dataclass(frozen=True, slots=True)
class EvaluationConfig:
    """Recursion guard settings.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        max_depth: Max nesting of combinator calls. None = unbounded
            (interpreter recursion limit still applies).
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
