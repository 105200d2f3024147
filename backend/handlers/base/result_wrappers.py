"""
Standardized Result Wrappers for AI Functions

AI functions never return bare values. A call either succeeds, and the
payload sits under "data", or fails with a message and an error category.
Both shapes share:

    success, error, error_type     outcome
    metadata                       handler, function, UTC timestamp, schema version, duration_ms
    citations                      sources for constants used (present even on error)

and may add guidance lists (notes, warnings, suggestions) and a confidence
level. Callers should build envelopes only through success_result and
error_result.

Schema Version: 0.1.0
"""

from typing import Any, Dict, List, Optional, Union
from datetime import datetime, timezone
import logging

_log = logging.getLogger(__name__)

SCHEMA_VERSION = "0.1.0"

TextList = Optional[Union[str, List[str]]]


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _envelope(
    ok: bool,
    handler: str,
    function: str,
    error: Optional[str],
    error_type: Optional[str],
    citations: Optional[List[str]],
    duration_ms: Optional[float],
) -> Dict[str, Any]:
    metadata = {
        "handler": handler,
        "function": function,
        "timestamp": _timestamp(),
        "version": SCHEMA_VERSION,
    }
    if duration_ms is not None:
        metadata["duration_ms"] = duration_ms
    return {
        "success": ok,
        "error": error,
        "error_type": error_type,
        "metadata": metadata,
        "citations": list(citations or []),
    }


def _attach_guidance(result: Dict[str, Any], **guidance: TextList) -> None:
    """Add each non-None guidance entry as a list of strings."""
    for key, value in guidance.items():
        if value is not None:
            result[key] = ensure_list(value)


def success_result(
    handler: str,
    function: str,
    data: Dict[str, Any],
    citations: Optional[List[str]] = None,
    notes: TextList = None,
    warnings: TextList = None,
    confidence: Optional[str] = None,
    duration_ms: Optional[float] = None,
    **extra_fields
) -> Dict[str, Any]:
    """
    Wrap a computed payload.

    Args:
        handler: Handler name, e.g. "stoichiometry"
        function: AI function that produced the payload
        data: Domain results (for calculations, StoichiometryResult.to_dict())
        citations: Sources for the constants involved
        notes: Context for reading the numbers (a string or list)
        warnings: Caveats about validity, e.g. unmapped element symbols
        confidence: One of the Confidence constants
        duration_ms: Wall time of the call
        **extra_fields: Copied to the top level unchanged
    """
    result = _envelope(True, handler, function, None, None, citations, duration_ms)
    result["data"] = data
    _attach_guidance(result, notes=notes, warnings=warnings)
    if confidence is not None:
        result["confidence"] = confidence
    result.update(extra_fields)
    return result


def error_result(
    handler: str,
    function: str,
    error: Union[str, Exception],
    error_type: str = "computation_error",
    citations: Optional[List[str]] = None,
    suggestions: TextList = None,
    duration_ms: Optional[float] = None,
    **extra_fields
) -> Dict[str, Any]:
    """
    Wrap a failure. There is no "data" key on error envelopes.

    Args:
        handler: Handler name
        function: AI function that failed
        error: Message, or the exception whose str() becomes the message
        error_type: One of the ErrorType constants
        citations: Sources, kept even on failure
        suggestions: What the caller could try instead
        duration_ms: Wall time of the call
        **extra_fields: Copied to the top level unchanged
    """
    message = str(error) if isinstance(error, Exception) else error
    result = _envelope(False, handler, function, message, error_type, citations, duration_ms)
    _attach_guidance(result, suggestions=suggestions)
    result.update(extra_fields)
    return result


class ErrorType:
    """Error categories used in error_type"""
    INVALID_INPUT = "invalid_input"          # the request itself is malformed (e.g. formula syntax)
    COMPUTATION_ERROR = "computation_error"  # anything unexpected during the calculation


class Confidence:
    """Confidence levels for success results"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def ensure_list(value: TextList) -> List[str]:
    """None -> [], "a" -> ["a"], any other iterable -> list(value)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)
