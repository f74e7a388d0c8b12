"""State check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from statetypes.domain.exceptions import StateValidationError


@dataclass(frozen=True, slots=True)
class StateFailure:
    """One state value that failed its validator.

    Attributes:
        name: State property name
        expected: Type expression of the validator
        message: Full failure message
    """

    name: str
    expected: str
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format failure for display."""
        return f"  {self.name} ({self.expected}): {self.message}"


@dataclass(frozen=True, slots=True)
class StateCheckResult:
    """Result of checking a state mapping.

    Immutable aggregate used by reporters.

    Attributes:
        checked: Names validated, in declaration order
        failures: Failed names with messages
    """

    checked: tuple[str, ...]
    failures: tuple[StateFailure, ...]

    @property
    def passed(self) -> bool:
        """Check if every declared value passed."""
        return len(self.failures) == 0

    @property
    def failure_count(self) -> int:
        """Number of failed values."""
        return len(self.failures)

    def raise_for_failures(self) -> None:
        """Raise if any value failed.

        Raises:
            StateValidationError: If failures found
        """
        if self.failures:
            raise StateValidationError(self.failures)

    @classmethod
    def empty(cls) -> StateCheckResult:
        """Create empty result (passed, nothing checked)."""
        return cls(checked=(), failures=())
