"""Reporters for state check results.

All reporters return str; caller decides destination.
PlainTextReporter and JsonReporter use stdlib only,
ConsoleReporter renders with rich.
"""

from statetypes.application.reporters.console import ConsoleConfig, ConsoleReporter
from statetypes.application.reporters.json_reporter import JsonReporter
from statetypes.application.reporters.plain_text import PlainTextReporter
from statetypes.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ReporterProtocol",
    "PlainTextReporter",
    "JsonReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
