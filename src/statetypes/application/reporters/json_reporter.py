"""JSON reporter: StateCheckResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statetypes.domain.model.state_check import StateCheckResult, StateFailure


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema matches domain structure 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: StateCheckResult) -> str:
        """Format state check result as JSON string.

        Args:
            result: State check result to format.

        Returns:
            JSON string with checked names, failures, and summary.
        """
        data = {
            "checked": list(result.checked),
            "failures": [_failure_to_dict(f) for f in result.failures],
            "summary": {
                "checked": len(result.checked),
                "failures": result.failure_count,
                "passed": result.passed,
            },
        }
        return json.dumps(data, indent=self._indent)


def _failure_to_dict(failure: StateFailure) -> dict[str, str]:
    return {
        "name": failure.name,
        "expected": failure.expected,
        "message": failure.message,
    }
