"""Tests for the calculate_times.py command-line script."""

import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

import calculate_times


def run_script(monkeypatch, capsys, *args: str) -> tuple[int, dict]:
    """Run main() with the given argv, returning (exit code, parsed stdout)."""
    monkeypatch.setattr(sys, "argv", ["calculate_times.py", *args])
    exit_code = 0
    try:
        calculate_times.main()
    except SystemExit as e:
        exit_code = e.code
    return exit_code, json.loads(capsys.readouterr().out)


class TestCalculateTimesScript:
    """End-to-end tests for the script."""

    def test_prints_tool_result(self, monkeypatch, capsys, request_file) -> None:
        path = request_file(
            {"tool_name": "calculate_bedtimes", "arguments": {"wake_time": "07:00"}}
        )

        exit_code, output = run_script(monkeypatch, capsys, path)

        assert exit_code == 0
        assert [o["time"] for o in output["options"]] == ["21:45", "23:15", "00:45", "02:15"]

    def test_usage_error(self, monkeypatch, capsys) -> None:
        exit_code, output = run_script(monkeypatch, capsys)

        assert exit_code == 1
        assert output["error"].startswith("Usage:")

    def test_missing_file(self, monkeypatch, capsys, tmp_path) -> None:
        exit_code, output = run_script(monkeypatch, capsys, str(tmp_path / "nope.json"))

        assert exit_code == 1
        assert "Request file not found" in output["error"]

    def test_invalid_json(self, monkeypatch, capsys, request_file) -> None:
        exit_code, output = run_script(monkeypatch, capsys, request_file("{not json"))

        assert exit_code == 1
        assert output["error"].startswith("Invalid JSON in request file")

    def test_missing_tool_name(self, monkeypatch, capsys, request_file) -> None:
        exit_code, output = run_script(monkeypatch, capsys, request_file({"arguments": {}}))

        assert exit_code == 1
        assert output["error"] == "Missing required field: 'tool_name'"

    @pytest.mark.parametrize(
        "request_data, message",
        [
            ({"tool_name": "calculate_bedtimes", "arguments": {"wake_time": "25:99"}}, "Time out of range"),
            ({"tool_name": "calculate_bedtimes", "arguments": {"wake_time": "soon"}}, "Invalid time format"),
            ({"tool_name": "nap_forever", "arguments": {}}, "Unknown tool"),
        ],
    )
    def test_value_errors(self, monkeypatch, capsys, request_file, request_data, message) -> None:
        exit_code, output = run_script(monkeypatch, capsys, request_file(request_data))

        assert exit_code == 1
        assert message in output["error"]
