"""
Brand and metadata extraction from research agent responses.

The agent answers with an envelope whose payload can sit in several places and
arrive in several encodings. Every function here is total: when nothing
brand-shaped is found the result is None, an empty list or zeroed metadata.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from brand_collector.models import Brand, ResponseMeta
from brand_collector.resolver import resolve_value
from brand_collector.schema_mapper import detect_variant, to_canonical

logger = logging.getLogger(__name__)

MAX_SEARCH_DEPTH = 4
BRAND_LIST_KEYS = ("brands", "results")
CONTAINER_KEYS = ("text", "result", "response", "data")


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _is_named_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and isinstance(value[0], dict)
        and "brand_name" in value[0]
    )


def _canonicalize(records: List[Any]) -> List[Dict[str, Any]]:
    return [to_canonical(record) for record in records if isinstance(record, dict)]


def find_brands(obj: Any, depth: int = 0) -> Optional[List[Dict[str, Any]]]:
    """
    Search ``obj`` for a list of brand records.

    Returns the records in canonical layout, or None when nothing brand-like is
    reachable within MAX_SEARCH_DEPTH levels of containers.
    """
    if depth > MAX_SEARCH_DEPTH:
        return None

    if isinstance(obj, list):
        return _canonicalize(obj) if _is_named_list(obj) else None

    if not isinstance(obj, dict):
        return None

    for key in BRAND_LIST_KEYS:
        if key not in obj:
            continue
        value = resolve_value(obj[key])
        if not isinstance(value, list) or not value or detect_variant(value[0]) is None:
            continue
        return _canonicalize(value)

    for key in CONTAINER_KEYS:
        if obj.get(key) is None:
            continue
        found = find_brands(resolve_value(obj[key]), depth + 1)
        if found is not None:
            return found

    return None


def _to_brands(records: List[Any]) -> List[Brand]:
    return [Brand.from_record(record) for record in records]


def extract_brands(agent_response: Any) -> List[Brand]:
    """
    Recover the brand list from a full agent response.

    Candidate roots are tried in a fixed order and the first non-empty hit wins:
    the resolved ``response.result``, the raw ``response``, the whole envelope,
    the resolved ``raw_response`` and finally ``response.result`` taken directly
    as a brand list.
    """
    response = _get(agent_response, "response")
    result = resolve_value(_get(response, "result"))

    strategies = [
        ("response.result", lambda: find_brands(result)),
        ("response", lambda: find_brands(response)),
        ("envelope", lambda: find_brands(agent_response)),
    ]
    raw = _get(agent_response, "raw_response")
    if raw is not None:
        strategies.append(("raw_response", lambda: find_brands(resolve_value(raw))))
    strategies.append(
        ("response.result list", lambda: _canonicalize(result) if _is_named_list(result) else None)
    )

    for name, strategy in strategies:
        records = strategy()
        if records:
            logger.debug("Extracted %d brands via %s", len(records), name)
            return _to_brands(records)

    logger.debug("No brands found in agent response")
    return []


def _as_count(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return max(int(value), 0)


def _meta_source(candidate: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    text = candidate.get("text")
    if isinstance(text, str):
        parsed = resolve_value(text)
        if isinstance(parsed, dict) and _as_count(parsed.get("total_brands")) is not None:
            return parsed
    if _as_count(candidate.get("total_brands")) is not None:
        return candidate
    nested = resolve_value(candidate.get("result"))
    if isinstance(nested, dict) and _as_count(nested.get("total_brands")) is not None:
        return nested
    return None


def extract_meta(agent_response: Any) -> ResponseMeta:
    """Recover the total/complete/partial brand counts, zeroed when absent."""
    response = _get(agent_response, "response")
    candidates = [resolve_value(_get(response, "result")), response, agent_response]
    raw = _get(agent_response, "raw_response")
    if raw is not None:
        candidates.append(resolve_value(raw))

    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        source = _meta_source(candidate)
        if source is None:
            continue
        return ResponseMeta(
            total=_as_count(source.get("total_brands")),
            complete=_as_count(source.get("complete_count")) or 0,
            partial=_as_count(source.get("partial_count")) or 0,
        )

    return ResponseMeta()
