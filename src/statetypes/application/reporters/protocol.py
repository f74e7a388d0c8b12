"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from statetypes.domain.model.state_check import StateCheckResult


class ReporterProtocol(Protocol):
    """Protocol for state check reporters.

    Output is str, not print(). Caller decides destination.
    All reporters implement same interface.
    """

    def report(self, result: StateCheckResult) -> str:
        """Format state check result as string.

        Args:
            result: State check result to format.

        Returns:
            Formatted string representation.
        """
        ...
