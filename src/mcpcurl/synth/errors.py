"""Error types raised while validating and marshaling an invocation."""

from __future__ import annotations

from collections.abc import Sequence


class InvocationError(Exception):
    """Base error for a synthesized command that cannot be invoked."""


class MissingRequiredError(InvocationError):
    """A required parameter was not supplied."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}")


class EnumValidationError(InvocationError):
    """A parameter value is not one of its declared enum values."""

    def __init__(self, parameter: str, allowed: Sequence[str]) -> None:
        self.parameter = parameter
        self.allowed = tuple(allowed)
        super().__init__(f"{parameter} must be one of: {', '.join(self.allowed)}")


class ArgumentDecodeError(InvocationError):
    """A raw-JSON parameter value could not be decoded."""

    def __init__(self, parameter: str, detail: str = "") -> None:
        self.parameter = parameter
        self.detail = detail
        super().__init__(f"Error parsing JSON for {parameter}" + (f": {detail}" if detail else ""))
