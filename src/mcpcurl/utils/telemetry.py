"""OpenTelemetry tracing helpers for mcpcurl.

Every protocol exchange runs inside a span obtained from :func:`get_tracer`.
Without a configured SDK the API hands out no-op tracers, so nothing is
recorded unless the host process installs a tracer provider.

Usage::

    from mcpcurl.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcpcurl.request") as span:
        span.set_attribute(ATTR_METHOD, "tools/list")
"""

from __future__ import annotations

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout mcpcurl instrumentation
# ---------------------------------------------------------------------------

ATTR_METHOD = "mcpcurl.rpc.method"
ATTR_REQUEST_ID = "mcpcurl.rpc.id"
ATTR_TOOL_NAME = "mcpcurl.tool.name"
ATTR_ARGUMENT_COUNT = "mcpcurl.tool.argument_count"
ATTR_RESPONSE_BYTES = "mcpcurl.response.bytes"

_INSTRUMENTATION_NAME = "mcpcurl"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)
