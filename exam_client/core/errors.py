"""Error Hierarchy — typed Client Errors for every way a backend call can fail.

Invariants:
    - Every error has a code (str), kind (ErrorKind), severity (ErrorSeverity)
    - str(error) == error.message — the UI shows it verbatim
    - ApplicationError.message is exactly the backend's `message` (or the operation fallback)
    - to_dict() produces a JSON-safe envelope for display/logging

Design Decisions:
    - Single hierarchy with ExamClientError base: callers can catch one error channel
      and still branch on `kind` (or the subclass) without parsing messages
    - ErrorContext as dataclass: request details travel with the error, not the log line
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from exam_client.core.domain_types import ErrorKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and UI handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Request details attached to a failed call."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    method: str | None = None
    path: str | None = None
    status_code: int | None = None


class ExamClientError(Exception):
    """Base exception for all client failures."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "kind": self.kind.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "method": self.context.method,
                    "path": self.context.path,
                    "status_code": self.context.status_code,
                },
            }
        }


# ─── Transport (below HTTP) ─────────────────────────────────────

class TransportError(ExamClientError):
    """Connection refused, DNS failure, protocol error, or an unparseable body."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "TRANSPORT_ERROR", ErrorKind.TRANSPORT,
            ErrorSeverity.CRITICAL, context,
        )


# ─── HTTP status line ───────────────────────────────────────────

class HTTPStatusError(ExamClientError):
    """Backend answered with a status outside 2xx."""
    def __init__(
        self,
        status_code: int,
        reason_phrase: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.status_code = status_code
        super().__init__(
            f"HTTP request failed: {status_code} {reason_phrase}".rstrip(),
            "HTTP_STATUS_ERROR", ErrorKind.HTTP_STATUS,
            ErrorSeverity.ERROR, ctx,
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase


# ─── Envelope (success == false) ────────────────────────────────

class ApplicationError(ExamClientError):
    """Backend answered 2xx but declared failure in the envelope."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "APPLICATION_ERROR", ErrorKind.APPLICATION,
            ErrorSeverity.WARNING, context,
        )
