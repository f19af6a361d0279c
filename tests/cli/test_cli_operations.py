"""Tests for ``mcpcurl operations``."""

from __future__ import annotations

import json
from typing import Any

from click.testing import CliRunner

from mcpcurl.cli import main
from mcpcurl.cli_commands._state import CliState

LIST_ISSUES_CATALOGUE: dict[str, Any] = {
    "tools": [
        {
            "name": "list_issues",
            "description": "List issues",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "owner": {"type": "string"},
                    "state": {"type": "string", "enum": ["open", "closed"]},
                    "direction": {"type": "string", "enum": ["asc", "desc"]},
                    "page": {"type": "number"},
                    "force": {"type": "boolean"},
                },
                "required": ["owner"],
            },
        }
    ]
}


def _run(transport: Any, *args: str) -> Any:
    return CliRunner().invoke(
        main,
        ["--server-command", "srv", *args],
        obj=CliState(transport=transport),
    )


class TestOperations:
    def test_get_issue_request(self, recording_transport) -> None:
        transport = recording_transport()
        result = _run(transport, "operations", "get_issue", "--owner=golang", "--issue_number=1")
        assert result.exit_code == 0, result.output
        (request,) = transport.calls
        assert request["jsonrpc"] == "2.0"
        assert isinstance(request["id"], int)
        assert request["method"] == "tools/call"
        assert request["params"] == {
            "name": "get_issue",
            "arguments": {"owner": "golang", "issue_number": 1},
        }

    def test_pretty_output(self, recording_transport) -> None:
        transport = recording_transport()
        result = _run(transport, "operations", "get_issue", "--owner=a", "--issue_number=2")
        assert result.stdout == '{\n  "ok": true\n}\n'

    def test_pretty_disabled_prints_raw(self, recording_transport) -> None:
        transport = recording_transport(call_response="raw server output\n")
        result = _run(
            transport, "--pretty=false", "operations", "get_issue", "--owner=a", "--issue_number=2"
        )
        assert result.exit_code == 0
        assert result.stdout == "raw server output\n"

    def test_catalogue_fetched_once(self, recording_transport) -> None:
        transport = recording_transport()
        _run(transport, "operations", "get_issue", "--owner=a", "--issue_number=2")
        methods = [r["method"] for r in transport.requests]
        assert methods == ["tools/list", "tools/call"]

    def test_missing_required_never_calls_server(self, recording_transport) -> None:
        transport = recording_transport(allow_calls=False)
        result = _run(transport, "operations", "get_issue", "--owner=golang")
        assert result.exit_code == 1
        assert "Missing required parameter: issue_number" in result.stderr
        assert result.stdout == ""
        assert transport.calls == []

    def test_enum_violation_never_calls_server(self, recording_transport) -> None:
        transport = recording_transport(LIST_ISSUES_CATALOGUE, allow_calls=False)
        result = _run(
            transport, "operations", "list_issues", "--owner=a", "--state=merged", "--direction=asc"
        )
        assert result.exit_code == 1
        assert "state must be one of: open, closed" in result.stderr
        assert transport.calls == []

    def test_boolean_inclusion(self, recording_transport) -> None:
        transport = recording_transport(LIST_ISSUES_CATALOGUE)
        _run(transport, "operations", "list_issues", "--owner=a")
        _run(transport, "operations", "list_issues", "--owner=a", "--force=false")
        first, second = (call["params"]["arguments"] for call in transport.calls)
        assert first == {"owner": "a"}
        assert second == {"owner": "a", "force": False}

    def test_explicit_zero_is_sent(self, recording_transport) -> None:
        transport = recording_transport(LIST_ISSUES_CATALOGUE)
        _run(transport, "operations", "list_issues", "--owner=a", "--page=0")
        assert transport.calls[0]["params"]["arguments"] == {"owner": "a", "page": 0}

    def test_render_error_exits_nonzero(self, recording_transport) -> None:
        response = json.dumps({"result": {"content": [{"type": "text", "text": "plain words"}]}})
        transport = recording_transport(call_response=response)
        result = _run(transport, "operations", "get_issue", "--owner=a", "--issue_number=1")
        assert result.exit_code == 1
        assert "Failed to render response" in result.stderr
        assert result.stdout == ""

    def test_remote_error_exits_nonzero(self, recording_transport) -> None:
        response = json.dumps({"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "bad"}})
        transport = recording_transport(call_response=response)
        result = _run(transport, "operations", "get_issue", "--owner=a", "--issue_number=1")
        assert result.exit_code == 1
        assert "Server error -32602: bad" in result.stderr

    def test_help_lists_operations(self, recording_transport) -> None:
        transport = recording_transport(LIST_ISSUES_CATALOGUE)
        result = _run(transport, "operations", "--help")
        assert result.exit_code == 0
        assert "list_issues" in result.stdout

    def test_help_without_server_command(self) -> None:
        result = CliRunner().invoke(
            main, ["operations", "--help"], env={"MCPCURL_SERVER_COMMAND": None}
        )
        assert result.exit_code == 0
        assert "Invoke an operation" in result.stdout

    def test_unknown_operation(self, recording_transport) -> None:
        transport = recording_transport()
        result = _run(transport, "operations", "delete_everything")
        assert result.exit_code == 2
        assert "delete_everything" in result.output

    def test_catalogue_failure_skips_synthesis(self, server_command: str) -> None:
        result = CliRunner().invoke(
            main, ["--server-command", f"{server_command} garbage", "operations", "get_issue"]
        )
        assert result.exit_code == 2
        assert "Skipping operation commands" in result.stderr


class TestEndToEnd:
    def test_call_through_real_subprocess(self, server_command: str) -> None:
        result = CliRunner().invoke(
            main,
            [
                "--server-command",
                server_command,
                "operations",
                "list_issues",
                "--owner",
                "golang",
                "--labels",
                "bug,go1.22",
                "--page",
                "3",
            ],
        )
        assert result.exit_code == 0, result.output
        echoed = json.loads(result.stdout)
        assert echoed == {
            "tool": "list_issues",
            "arguments": {"owner": "golang", "labels": ["bug", "go1.22"], "page": 3},
        }

    def test_timeout_option(self, server_command: str) -> None:
        result = CliRunner().invoke(
            main, ["--server-command", f"{server_command} hang", "--timeout", "0.5", "catalogue"]
        )
        assert result.exit_code == 1
        assert "timed out after 0.5s" in result.stderr
