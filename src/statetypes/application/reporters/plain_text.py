"""Plain text reporter: StateCheckResult → text.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statetypes.domain.model.state_check import StateCheckResult

_RULE = "=" * 70


class PlainTextReporter:
    """Plain text reporter: one block per failure."""

    def report(self, result: StateCheckResult) -> str:
        """Format state check result as plain text.

        Args:
            result: State check result to format.

        Returns:
            Multi-line text ending with newline.
        """
        lines = [
            _RULE,
            "State Check Results",
            _RULE,
            "",
            "Summary:",
            f"  Checked: {len(result.checked)}",
            f"  Failures: {result.failure_count}",
            f"  Status: {'PASS' if result.passed else 'FAIL'}",
        ]

        for i, failure in enumerate(result.failures, start=1):
            lines.append("")
            lines.append(f"{i}. {failure.name}")
            lines.append(f"   Expected: {failure.expected}")
            lines.append(f"   {failure.message.rstrip()}")

        return "\n".join(lines) + "\n"
