"""
Tests for the shared handler plumbing: result envelopes, output tracking and
the track_tool_output decorator.
"""

import pytest

from backend.handlers.base import (
    BaseHandler,
    Confidence,
    ErrorType,
    ensure_list,
    error_result,
    success_result,
    track_tool_output,
)
from tests.base.assertions import assert_success_response, assert_error_response


class TestResultWrappers:
    """Tests for success_result and error_result."""

    def test_success_envelope(self):
        result = success_result(
            handler="stoichiometry",
            function="get_molar_mass",
            data={"molar_mass": 18.015},
            notes="ideal gas",
            confidence=Confidence.HIGH,
            duration_ms=1.5,
        )

        assert_success_response(result)
        assert result["notes"] == ["ideal gas"]
        assert result["metadata"]["duration_ms"] == 1.5
        assert result["metadata"]["version"] == "0.1.0"
        assert "warnings" not in result

    def test_success_extra_fields(self):
        result = success_result("stoichiometry", "f", data={}, request_id="r1")

        assert result["request_id"] == "r1"
        assert "duration_ms" not in result["metadata"]

    def test_error_envelope(self):
        result = error_result(
            handler="stoichiometry",
            function="calculate_stoichiometry",
            error=ValueError("bad formula"),
            error_type=ErrorType.INVALID_INPUT,
            suggestions="Try 'H2O'",
        )

        assert_error_response(result, expected_error_type=ErrorType.INVALID_INPUT)
        assert result["error"] == "bad formula"
        assert result["suggestions"] == ["Try 'H2O'"]

    def test_error_type_default(self):
        result = error_result("stoichiometry", "f", "boom")

        assert result["error_type"] == ErrorType.COMPUTATION_ERROR

    @pytest.mark.parametrize(
        "value,expected",
        [(None, []), ("a", ["a"]), (["a", "b"], ["a", "b"]), (("a",), ["a"])],
    )
    def test_ensure_list(self, value, expected):
        assert ensure_list(value) == expected


class _Recorder(BaseHandler):
    @track_tool_output
    def sync_tool(self, x):
        return {"x": x}

    @track_tool_output(tool_name="renamed")
    async def async_tool(self, x):
        return {"x": x}


class _Untracked:
    @track_tool_output
    def tool(self):
        return 1


class TestToolTracking:
    """Tests for BaseHandler output tracking and the decorator."""

    def test_sync_function_is_tracked(self):
        h = _Recorder()

        assert h.sync_tool(1) == {"x": 1}
        assert h.recent_tool_outputs == [{"tool_name": "sync_tool", "result": {"x": 1}}]

    @pytest.mark.asyncio
    async def test_async_function_uses_custom_name(self):
        h = _Recorder()

        assert await h.async_tool(2) == {"x": 2}
        assert h.recent_tool_outputs[0]["tool_name"] == "renamed"

    def test_cap_drops_oldest(self):
        h = _Recorder()
        h.max_tracked_outputs = 3
        for i in range(5):
            h.sync_tool(i)

        assert [entry["result"]["x"] for entry in h.recent_tool_outputs] == [2, 3, 4]

    def test_clear(self):
        h = _Recorder()
        h.sync_tool(1)
        h.clear_tool_outputs()

        assert h.recent_tool_outputs == []

    def test_objects_without_tracking_pass_through(self):
        assert _Untracked().tool() == 1

    def test_tracking_failure_does_not_break_call(self, caplog):
        h = _Recorder()
        h.recent_tool_outputs = None

        with caplog.at_level("WARNING"):
            assert h.sync_tool(3) == {"x": 3}
        assert "Failed to track" in caplog.text
