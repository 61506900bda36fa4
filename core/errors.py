# =============================================================================
# core/errors.py  —  Fault Taxonomy (everything that can go wrong in a call)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the closed set of faults a tool call can end in, plus the two
#   errors that live outside a call:
#
#     Per-call faults (always become an error ToolResult, never a crash):
#       - NotFound            the document does not exist
#       - ValidationError     caller input is malformed
#       - SerializationError  the response could not be JSON-encoded
#       - ServiceError        anything the store (or the code) reported
#
#     Outside a call:
#       - StoreError          raised by store adapters; classified later
#       - ConfigError         startup configuration is incomplete (fatal)
#
# THE ONE CLASSIFICATION FUNCTION:
#   classify_fault() is the only place that looks at exception types.  The
#   dispatcher hands it whatever was raised and gets back one of the four
#   fault variants.  Call sites never inspect exception types themselves.
# =============================================================================

import logging

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"


class ToolFault(Exception):
    """Base class for per-call faults.  ``message`` is safe to show callers."""

    kind = "fault"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> str:
        return f"Error: {self.message}"


class NotFound(ToolFault):
    kind = "not_found"

    def __init__(self, message: str = ITEM_NOT_FOUND):
        super().__init__(message)


class ValidationError(ToolFault):
    kind = "validation"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class SerializationError(ToolFault):
    kind = "serialization"

    def __init__(self, message: str = "Failed to serialize item", cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ServiceError(ToolFault):
    kind = "service"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StoreError(Exception):
    """A fault reported by the document store.

    Store adapters translate their SDK exceptions into this so the rest of
    the code only deals with a status code and a message.
    """

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"({self.status_code}) {self.message}"


class ConfigError(Exception):
    """Startup configuration is missing or invalid.  Fatal for the process."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.missing)
        )


def classify_fault(exc: BaseException) -> ToolFault:
    """Map any exception raised during a tool call to a fault variant."""
    if isinstance(exc, ToolFault):
        return exc
    if isinstance(exc, StoreError):
        if exc.status_code == 404:
            return NotFound()
        return ServiceError(str(exc), status_code=exc.status_code)
    # Unexpected: keep the type and message, drop the traceback.
    logger.warning("Unexpected %s during tool call: %s", type(exc).__name__, exc)
    return ServiceError(f"{type(exc).__name__}: {exc}")
