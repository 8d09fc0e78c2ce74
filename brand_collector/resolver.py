"""
Unwrapping of JSON values that arrive as strings.

Agents often return JSON encoded once, twice or wrapped in a markdown code fence.
"""
import json
import re
from typing import Any

MAX_RESOLVE_DEPTH = 5

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def _loads(text: str):
    try:
        return True, json.loads(text)
    except (ValueError, RecursionError):
        return False, None


def _parse_json_text(text: str):
    """Return (ok, parsed) for the first strategy that yields JSON."""
    # Try direct JSON parse
    ok, parsed = _loads(text.strip())
    if ok:
        return ok, parsed

    # Try the first markdown code block
    match = _FENCED_BLOCK.search(text)
    if match:
        ok, parsed = _loads(match.group(1).strip())
        if ok:
            return ok, parsed

    # Try from the first object or array bracket to the end
    starts = [i for i in (text.find("{"), text.find("[")) if i != -1]
    if starts:
        ok, parsed = _loads(text[min(starts):])
        if ok:
            return ok, parsed

    return False, None


def resolve_value(value: Any, depth: int = 0) -> Any:
    """
    Parse ``value`` if it is a JSON-bearing string, repeating for nested encodings.

    Non-strings are returned as-is, as is any string that holds no JSON or sits
    deeper than MAX_RESOLVE_DEPTH levels of encoding.
    """
    if not isinstance(value, str):
        return value
    if depth > MAX_RESOLVE_DEPTH:
        return value
    ok, parsed = _parse_json_text(value)
    if not ok:
        return value
    return resolve_value(parsed, depth + 1)
