"""Envelope Rules — validate `{success, message, <result>}` and unwrap the result.

Invariants:
    - success falsy (or missing, or body not a JSON object) → ApplicationError
    - Failure message: non-empty envelope `message`, else the endpoint fallback
    - Result key absent or null → fresh endpoint empty_default
    - Any other result value (including [] / "" / 0) returned unchanged
"""

from typing import Any

from exam_client.core.endpoints import EndpointSpec
from exam_client.core.errors import ApplicationError, ErrorContext


def failure_message(envelope: Any, endpoint: EndpointSpec) -> str:
    """Backend-supplied diagnostic, or the endpoint's fixed fallback."""
    if isinstance(envelope, dict):
        message = envelope.get("message")
        if message:
            return str(message)
    return endpoint.fallback_message


def unwrap_envelope(
    envelope: Any,
    endpoint: EndpointSpec,
    context: ErrorContext | None = None,
) -> Any:
    """Return the endpoint's result field or raise ApplicationError."""
    if not isinstance(envelope, dict) or not envelope.get("success"):
        raise ApplicationError(failure_message(envelope, endpoint), context=context)

    value = envelope.get(endpoint.result_key)
    if value is None:
        return endpoint.empty_default()
    return value
