"""Validation result: tagged success/failure.

Every validator returns exactly one of these.
Callers branch on the variant (isinstance or match), never on shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias


@dataclass(frozen=True, slots=True)
class Valid:
    """Success variant. Use the VALID instance."""

    @property
    def is_valid(self) -> bool:
        """Always True."""
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """Failure variant.

    Attributes:
        message: Full formatted message (the whole payload)
        detail: Validator-specific fragment embedded in message
    """

    message: str
    detail: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def is_valid(self) -> bool:
        """Always False."""
        return False

    def __bool__(self) -> bool:
        # Failure must never pass a truthiness check
        return False

    def __str__(self) -> str:
        """Format as message."""
        return self.message


VALID: Final = Valid()

ValidationResult: TypeAlias = Valid | Invalid
