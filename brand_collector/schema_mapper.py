"""
Record shape detection and mapping into the canonical brand layout.

Agents answer in one of two record shapes:

* ``CANONICAL`` - a flat record keyed by ``brand_name``, used as-is.
* ``ALTERNATE`` - a "verified site" record whose details sit under
  ``website_details`` and whose URL candidates are ``selected_official_website``
  and ``official_website_turkey``.
"""
from enum import Enum
from typing import Any, Callable, Dict, Optional

SOCIAL_CHANNELS = ("twitter", "linkedin", "instagram", "facebook", "youtube", "tiktok", "pinterest")
CONTACT_FIELDS = ("email", "phone", "hq_address")
DETAIL_FIELDS = (
    "website_scope", "verification_notes", "logo_url", "founded_year",
    "about_summary", "about_page_link",
)


class RecordVariant(str, Enum):
    CANONICAL = "canonical"
    ALTERNATE = "alternate"


def detect_variant(record: Any) -> Optional[RecordVariant]:
    """
    Classify a record by its marker fields, or None when it is not brand-like.

    Alternate markers win over ``brand_name`` since verified-site records carry
    a brand name as well.
    """
    if not isinstance(record, dict):
        return None
    if isinstance(record.get("website_details"), dict) or "selected_official_website" in record:
        return RecordVariant.ALTERNATE
    if "brand_name" in record:
        return RecordVariant.CANONICAL
    return None


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return ""


def _category(value: Any) -> Any:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value if v is not None)
    if value is None or isinstance(value, dict):
        return ""
    return value


def _sub_object(details: Dict[str, Any], record: Dict[str, Any], key: str) -> Dict[str, Any]:
    block = details.get(key)
    if not isinstance(block, dict):
        block = record.get(key)
    return block if isinstance(block, dict) else {}


def _status(confidence: Any, own_status: Any) -> str:
    if str(confidence).strip() == "" and isinstance(own_status, str) and own_status.strip():
        return own_status
    return "Complete" if str(confidence).strip().lower() == "verified" else "Partial"


def map_alternate_schema(record: Dict[str, Any]) -> Dict[str, Any]:
    """Map an ``ALTERNATE`` record into the canonical brand layout."""
    details = record.get("website_details")
    if not isinstance(details, dict):
        details = {}

    website_url = _first_present(
        record.get("selected_official_website"),
        details.get("selected_official_website"),
        record.get("official_website_turkey"),
        details.get("official_website_turkey"),
        record.get("website_url"),
        details.get("website_url"),
    )
    confidence = _first_present(record.get("confidence"), details.get("confidence"))
    social = _sub_object(details, record, "social_media")
    contact = _sub_object(details, record, "contact_info")

    mapped = {
        "brand_name": _first_present(record.get("brand_name"), details.get("brand_name")),
        "website_url": website_url,
        "confidence": confidence,
        "product_category": _category(
            _first_present(details.get("product_category"), record.get("product_category"))
        ),
        "social_media": {channel: _first_present(social.get(channel)) for channel in SOCIAL_CHANNELS},
        "contact_info": {field: _first_present(contact.get(field)) for field in CONTACT_FIELDS},
        "status": _status(confidence, record.get("status")),
    }
    for field in DETAIL_FIELDS:
        mapped[field] = _first_present(details.get(field), record.get(field))
    return mapped


_VARIANT_MAPPERS: Dict[RecordVariant, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    RecordVariant.CANONICAL: lambda record: record,
    RecordVariant.ALTERNATE: map_alternate_schema,
}


def mapper_for(variant: RecordVariant) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    return _VARIANT_MAPPERS[variant]


def to_canonical(record: Dict[str, Any]) -> Dict[str, Any]:
    """Map a single record by its own variant; unrecognised records pass through."""
    variant = detect_variant(record)
    if variant is None:
        return record
    return mapper_for(variant)(record)
