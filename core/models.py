# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of what flows in and out of a tool call.
# Documents themselves stay plain dicts: they are arbitrary JSON and the
# store owns their shape.  Only the envelope around them is modelled here.
# =============================================================================

from dataclasses import dataclass
from typing import Any

# A stored document: field name -> JSON value.  Always carries a string "id".
Document = dict[str, Any]


# -----------------------------------------------------------------------------
# ToolResult — the uniform outcome of every tool call
# -----------------------------------------------------------------------------
# Invariant: is_error is True  <=>  text is a human-readable error message.
# Successful results always carry JSON-encoded data.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """Text payload plus error flag, as returned to the calling agent."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)


# -----------------------------------------------------------------------------
# QueryParameter — one named value bound into a query string
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QueryParameter:
    name: str                          # "@status", as referenced in the query text
    value: Any                         # JSON value bound to the name

    def to_store(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}
