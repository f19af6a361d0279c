"""Runtime synthesis of click commands from MCP tool schemas."""

from mcpcurl.synth.errors import (
    ArgumentDecodeError,
    EnumValidationError,
    InvocationError,
    MissingRequiredError,
)
from mcpcurl.synth.kinds import ParamKind, classify
from mcpcurl.synth.marshal import build_arguments
from mcpcurl.synth.synthesizer import (
    EnumValidator,
    ParamBinding,
    bind_parameters,
    build_operation_command,
    check_required,
)

__all__ = [
    "ArgumentDecodeError",
    "EnumValidationError",
    "EnumValidator",
    "InvocationError",
    "MissingRequiredError",
    "ParamBinding",
    "ParamKind",
    "bind_parameters",
    "build_arguments",
    "build_operation_command",
    "check_required",
    "classify",
]
