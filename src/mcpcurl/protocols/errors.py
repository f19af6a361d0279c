"""Shared error types for the protocol layer."""


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class TransportError(ProtocolError):
    """Base error for subprocess transport failures."""


class SpawnError(TransportError):
    """The server process could not be started."""

    def __init__(self, command: str, detail: str = "") -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"Failed to start command: {command}" + (f": {detail}" if detail else ""))


class WriteError(TransportError):
    """Writing the request to the server's stdin failed."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to write to stdin" + (f": {detail}" if detail else ""))


class ExitError(TransportError):
    """The server process exited with a non-zero status."""

    def __init__(self, stderr: str, returncode: int) -> None:
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Command failed with exit status {returncode}, stderr: {stderr}")


class TransportTimeoutError(TransportError):
    """The server process did not exit before the deadline and was killed."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Server command timed out after {timeout}s")


class SchemaDecodeError(ProtocolError):
    """The ``tools/list`` response could not be decoded into a catalogue."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to decode tool catalogue" + (f": {detail}" if detail else ""))


class RenderError(ProtocolError):
    """A response could not be pretty-printed."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to render response" + (f": {detail}" if detail else ""))


class RemoteError(ProtocolError):
    """The server answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"Server error {code}: {message}")
