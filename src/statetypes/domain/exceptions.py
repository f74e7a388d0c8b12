"""Domain exceptions: all public errors of statetypes.

Validation failures are NOT exceptions: validators return Invalid.
Exceptions here signal programming errors caught at construction time
(FAIL-FIRST) and the explicit assert_state() escalation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statetypes.domain.model.state_check import StateFailure


class StateTypesError(Exception):
    """Base for all statetypes error exceptions.

    Allows: except StateTypesError to catch all library errors.
    """


class InvalidTagError(StateTypesError, ValueError):
    """Primitive factory received a tag it cannot check against.

    Inherits ValueError for semantic correctness (bad argument value).

    Attributes:
        tag: The rejected tag.
    """

    def __init__(self, tag: object) -> None:
        """Initialize with rejected tag."""
        self.tag = tag
        super().__init__(f"Cannot build primitive validator for tag {tag!r}")


class RegistryError(StateTypesError, ValueError):
    """Registry entry is invalid.

    Attributes:
        name: Entry name.
        reason: Why the entry is invalid.
    """

    def __init__(self, name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.name = name
        self.reason = reason
        super().__init__(f"Invalid registry entry '{name}': {reason}")


class StateValidationError(StateTypesError):
    """State values failed their declared validators.

    Raised by assert_state() when failures found.

    Attributes:
        failures: All found failures.
    """

    def __init__(self, failures: tuple[StateFailure, ...]) -> None:
        if not failures:
            raise ValueError("StateValidationError requires at least one failure")

        self.failures = failures

        msg_parts = [f"Found {len(failures)} invalid state value(s):"]
        for f in failures:
            msg_parts.append(str(f))

        super().__init__("\n".join(msg_parts))
