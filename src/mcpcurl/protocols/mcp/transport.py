"""MCP stdio transport — one request per freshly spawned server process.

The server command is split on whitespace only; quoted arguments are not
supported.  The response is whatever the process wrote to stdout before
exiting, so this framing only works for one-shot servers.
"""

from __future__ import annotations

import logging
import subprocess
import threading
from typing import IO, Protocol, runtime_checkable

from mcpcurl.protocols.errors import (
    ExitError,
    SpawnError,
    TransportTimeoutError,
    WriteError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class Transport(Protocol):
    """Executes one JSON-RPC exchange against a server command."""

    def execute(self, command: str, request_body: str) -> str: ...


class StdioTransport:
    """Spawns the server, writes one request line, waits for it to exit.

    A child that outlives ``timeout`` seconds is killed and reaped before
    :class:`TransportTimeoutError` is raised.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def execute(self, command: str, request_body: str) -> str:
        """Run *command*, feed it *request_body* and return its stdout."""
        parts = command.split()
        if not parts:
            raise SpawnError(command, "empty command")

        logger.debug("Spawning server: %s", parts)
        try:
            proc = subprocess.Popen(  # noqa: S603
                parts,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise SpawnError(command, str(exc)) from exc

        # stdin is fed from a thread so the deadline also covers a child that
        # never reads it; communicate() only drains stdout and stderr.
        stdin, proc.stdin = proc.stdin, None
        write_errors: list[OSError] = []
        writer = threading.Thread(
            target=_write_request,
            args=(stdin, (request_body + "\n").encode(), write_errors),
            daemon=True,
        )
        writer.start()

        try:
            stdout, stderr = proc.communicate(timeout=self._timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            writer.join(self._timeout)
            raise TransportTimeoutError(self._timeout) from None
        writer.join(self._timeout)
        write_error = write_errors[0] if write_errors else None

        stderr_text = stderr.decode(errors="replace")
        logger.debug("Server exited with status %s", proc.returncode)

        # A child that exits early also breaks the pipe; its status wins.
        if proc.returncode != 0:
            raise ExitError(stderr_text, proc.returncode)
        if write_error is not None:
            raise WriteError(str(write_error)) from write_error

        return stdout.decode(errors="replace")


def _write_request(stream: IO[bytes], payload: bytes, errors: list[OSError]) -> None:
    try:
        stream.write(payload)
        stream.flush()
    except OSError as exc:
        errors.append(exc)
    finally:
        try:
            stream.close()
        except OSError as exc:
            if not errors:
                errors.append(exc)
