"""Tests for JsonReporter."""

import json

from statetypes.application.reporters.json_reporter import JsonReporter
from tests.factories import make_failure, make_result


class TestJsonReporter:
    """Tests for JSON output."""

    def test_schema(self) -> None:
        """Output mirrors the result with a summary."""
        result = make_result(make_failure("title"), checked=("title", "count"))

        data = json.loads(JsonReporter().report(result))

        assert data["checked"] == ["title", "count"]
        assert data["failures"] == [
            {
                "name": "title",
                "expected": "string",
                "message": result.failures[0].message,
            }
        ]
        assert data["summary"] == {"checked": 2, "failures": 1, "passed": False}

    def test_compact(self) -> None:
        """indent=None gives single-line output."""
        output = JsonReporter(indent=None).report(make_result())

        assert "\n" not in output
        assert json.loads(output)["summary"]["passed"] is True
