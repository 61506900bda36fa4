# =============================================================================
# core/validation.py  —  Argument Validator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads typed arguments out of a tool call's argument mapping, raising
#   ValidationError (with the offending field name) on anything malformed.
#
#   Every operation validates ALL of its arguments before the first store
#   call, so a bad request never causes a partial side effect.
# =============================================================================

from typing import Any, Mapping

from core.errors import ValidationError
from core.models import QueryParameter


def require_string(args: Mapping[str, Any], field: str) -> str:
    """Return a required, non-blank string argument."""
    value = args.get(field)
    if value is None:
        raise ValidationError(field, f"{field} is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    if not value.strip():
        raise ValidationError(field, f"{field} cannot be blank")
    return value


def require_object(args: Mapping[str, Any], field: str) -> dict[str, Any]:
    """Return a required object argument (a non-null mapping)."""
    value = args.get(field)
    if value is None:
        raise ValidationError(field, f"{field} is required")
    if not isinstance(value, Mapping):
        raise ValidationError(field, f"{field} must be an object")
    return dict(value)


def optional_string(args: Mapping[str, Any], field: str, default: str) -> str:
    """Return an optional string argument, or ``default`` when it is omitted.

    Null and blank values count as omitted.  A value of the wrong type is
    still an error.
    """
    value = args.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    if not value.strip():
        return default
    return value


def optional_parameters(args: Mapping[str, Any], field: str = "parameters") -> list[QueryParameter]:
    """Return the query parameters of a query_container call.

    Accepts a missing/null value (no parameters) or a list of
    ``{"name": str, "value": any}`` objects.
    """
    raw = args.get(field)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError(field, f"{field} must be an array")

    params = []
    for index, entry in enumerate(raw):
        label = f"{field}[{index}]"
        if not isinstance(entry, Mapping):
            raise ValidationError(label, f"{label} must be an object")
        try:
            name = require_string(entry, "name")
        except ValidationError as exc:
            raise ValidationError(label, f"{label}.{exc.message}") from None
        if "value" not in entry:
            raise ValidationError(label, f"{label}.value is required")
        params.append(QueryParameter(name=name, value=entry["value"]))
    return params
