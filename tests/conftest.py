"""Shared fixtures: a fake stdio server and a recording transport stub."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

FAKE_SERVER = Path(__file__).parent / "fixtures" / "fake_server.py"

GET_ISSUE_CATALOGUE: dict[str, Any] = {
    "operations": [
        {
            "name": "get_issue",
            "description": "Get details of a specific issue",
            "schema": {
                "properties": {
                    "owner": {"type": "string"},
                    "issue_number": {"type": "number"},
                },
                "required": ["owner", "issue_number"],
            },
        }
    ]
}


class RecordingTransport:
    """Transport stub that records requests and replays canned responses.

    ``tools/list`` is answered with *catalogue*; ``tools/call`` with
    *call_response*, or fails the test when *allow_calls* is off.
    """

    def __init__(
        self,
        catalogue: dict[str, Any] | None = None,
        call_response: str | None = None,
        *,
        allow_calls: bool = True,
    ) -> None:
        self.catalogue = catalogue if catalogue is not None else GET_ISSUE_CATALOGUE
        self.call_response = call_response or json.dumps(
            {"jsonrpc": "2.0", "id": 1, "result": {"content": [{"type": "text", "text": '{"ok": true}'}]}}
        )
        self.allow_calls = allow_calls
        self.requests: list[dict[str, Any]] = []
        self.commands: list[str] = []

    def execute(self, command: str, request_body: str) -> str:
        request = json.loads(request_body)
        self.commands.append(command)
        self.requests.append(request)
        if request["method"] == "tools/list":
            return json.dumps({"jsonrpc": "2.0", "id": request["id"], "result": self.catalogue})
        if not self.allow_calls:
            pytest.fail(f"transport contacted for {request['method']}")
        return self.call_response

    @property
    def calls(self) -> list[dict[str, Any]]:
        return [r for r in self.requests if r["method"] == "tools/call"]


@pytest.fixture
def recording_transport() -> type[RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def get_issue_catalogue() -> dict[str, Any]:
    return json.loads(json.dumps(GET_ISSUE_CATALOGUE))


@pytest.fixture
def server_command() -> str:
    return f"{sys.executable} {FAKE_SERVER}"


@pytest.fixture
def script_command(tmp_path: Path):
    """Write a python script and return the command that runs it."""

    def _make(source: str) -> str:
        script = tmp_path / "server.py"
        script.write_text(source)
        return f"{sys.executable} {script}"

    return _make
