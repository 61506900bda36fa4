# =============================================================================
# core/results.py  —  Result Normalizer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns whatever an operation produced (a value, or an exception) into a
#   ToolResult.  Two pieces:
#
#     encode_payload()  JSON-encodes a success value, raising
#                       SerializationError instead of TypeError/ValueError.
#
#     run_tool()        the failure boundary.  Calls the operation, encodes
#                       its return value, and classifies any exception.
#                       Nothing raised inside gets out.
# =============================================================================

import json
import logging
from typing import Any, Callable

from core.errors import SerializationError, classify_fault
from core.models import ToolResult

logger = logging.getLogger(__name__)


def encode_payload(value: Any, failure_message: str = "Failed to serialize item") -> str:
    """Encode ``value`` as compact JSON text.

    NaN/Infinity are rejected: they are not valid JSON and the caller could
    not parse them back.
    """
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(failure_message, cause=exc) from exc


def run_tool(
    operation: str,
    call: Callable[[], Any],
    serialization_message: str = "Failed to serialize item",
) -> ToolResult:
    """Run ``call`` inside the failure boundary and normalize its outcome.

    Args:
        operation: Tool name, for log lines.
        call: Zero-argument callable performing the operation.  Its return
            value is the success payload.
        serialization_message: Message used if the payload cannot be encoded.

    Returns:
        A ToolResult.  Never raises (except for KeyboardInterrupt/SystemExit,
        which are not call failures).
    """
    try:
        return ToolResult.ok(encode_payload(call(), serialization_message))
    except Exception as exc:  # noqa: BLE001 - the boundary catches everything
        fault = classify_fault(exc)

        if isinstance(fault, SerializationError):
            logger.warning(
                "Serialization error in %s: %s", operation, fault.cause or fault.message
            )
        else:
            logger.warning("%s fault in %s: %s", fault.kind, operation, fault.message)

        return ToolResult.error(fault.payload())
