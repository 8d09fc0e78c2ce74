"""
Table view state for collected brands.

The state is a plain serializable record; every reducer returns a new state
and leaves its input untouched.
"""
from typing import Any, List, Literal

from pydantic import BaseModel

from brand_collector.models import NOT_FOUND, Brand, ResponseMeta

SortField = Literal[
    "brand_name", "product_category", "website_url", "founded_year",
    "status", "confidence", "website_scope",
]
SortDirection = Literal["asc", "desc"]
ViewName = Literal["upload", "results"]

SEARCH_FIELDS = ("brand_name", "product_category", "website_url")


def is_not_found(value: Any) -> bool:
    if value is None:
        return True
    text = str(value).strip()
    return text == "" or text.lower() == NOT_FOUND.lower()


def display_value(value: Any) -> str:
    return "" if is_not_found(value) else str(value)


def is_complete(brand: Brand) -> bool:
    return brand.status.strip().lower() == "complete"


def fill_counts(meta: ResponseMeta, brands: List[Brand]) -> ResponseMeta:
    """Replace any zero count with the figure derived from the brand list."""
    complete = sum(1 for b in brands if is_complete(b))
    return ResponseMeta(
        total=meta.total or len(brands),
        complete=meta.complete or complete,
        partial=meta.partial or len(brands) - complete,
    )


class TableState(BaseModel):
    view: ViewName = "upload"
    search_query: str = ""
    sort_field: SortField = "brand_name"
    sort_direction: SortDirection = "asc"
    expanded_rows: List[int] = []


def set_search(state: TableState, query: str) -> TableState:
    return state.model_copy(update={"search_query": query})


def toggle_sort(state: TableState, field: SortField) -> TableState:
    """Flip the direction on the active field, or sort a new field ascending."""
    if state.sort_field == field:
        direction = "desc" if state.sort_direction == "asc" else "asc"
        return state.model_copy(update={"sort_direction": direction})
    return state.model_copy(update={"sort_field": field, "sort_direction": "asc"})


def toggle_row(state: TableState, index: int) -> TableState:
    expanded = set(state.expanded_rows)
    if index in expanded:
        expanded.remove(index)
    else:
        expanded.add(index)
    return state.model_copy(update={"expanded_rows": sorted(expanded)})


def show_results(state: TableState) -> TableState:
    return state.model_copy(update={"view": "results", "expanded_rows": []})


def reset(state: TableState) -> TableState:
    """Start a new search: back to the upload view with a clean table."""
    return TableState(sort_field=state.sort_field, sort_direction=state.sort_direction)


def visible_brands(brands: List[Brand], state: TableState) -> List[Brand]:
    query = state.search_query.strip().lower()
    if query:
        brands = [
            b for b in brands
            if any(query in getattr(b, field).lower() for field in SEARCH_FIELDS)
        ]
    return sorted(
        brands,
        key=lambda b: str(getattr(b, state.sort_field)).lower(),
        reverse=state.sort_direction == "desc",
    )


SAMPLE_BRANDS = [
    Brand(
        brand_name="Nike",
        website_url="https://www.nike.com",
        website_scope="Global",
        confidence="Verified",
        logo_url="https://logo.clearbit.com/nike.com",
        founded_year="1964",
        about_summary="Nike, Inc. is an American multinational corporation engaged in the design, development, manufacturing, and marketing of footwear, apparel, equipment, accessories, and services worldwide.",
        product_category="Sportswear",
        social_media={"twitter": "https://twitter.com/Nike", "linkedin": "https://linkedin.com/company/nike", "instagram": "https://instagram.com/nike", "facebook": "https://facebook.com/nike"},
        contact_info={"email": "consumer.services@nike.com", "phone": "1-800-344-6453", "hq_address": "One Bowerman Drive, Beaverton, OR 97005, USA"},
        status="Complete",
    ),
    Brand(
        brand_name="Apple",
        website_url="https://www.apple.com",
        website_scope="Global",
        confidence="Partially Verified",
        logo_url="https://logo.clearbit.com/apple.com",
        founded_year="1976",
        about_summary="Apple Inc. is an American multinational technology company that designs, develops, and sells consumer electronics, computer software, and online services.",
        product_category="Consumer Tech",
        social_media={"twitter": "https://twitter.com/Apple", "linkedin": "https://linkedin.com/company/apple", "instagram": "https://instagram.com/apple", "facebook": NOT_FOUND},
        contact_info={"email": NOT_FOUND, "phone": "1-800-275-2273", "hq_address": "One Apple Park Way, Cupertino, CA 95014, USA"},
        status="Partial",
    ),
    Brand(
        brand_name="Tesla",
        website_url="https://www.tesla.com",
        website_scope="Global",
        confidence="Verified",
        logo_url="https://logo.clearbit.com/tesla.com",
        founded_year="2003",
        about_summary="Tesla, Inc. is an American electric vehicle and clean energy company. Tesla designs and manufactures electric cars, battery energy storage, and solar panels.",
        product_category="Automotive / Clean Energy",
        social_media={"twitter": "https://twitter.com/Tesla", "linkedin": "https://linkedin.com/company/tesla-motors", "instagram": "https://instagram.com/teslamotors", "facebook": "https://facebook.com/tesla"},
        contact_info={"email": "press@tesla.com", "phone": "1-888-518-3752", "hq_address": "1 Tesla Road, Austin, TX 78725, USA"},
        status="Complete",
    ),
    Brand(
        brand_name="Spotify",
        website_url="https://www.spotify.com",
        website_scope="Global",
        confidence="Partially Verified",
        logo_url="https://logo.clearbit.com/spotify.com",
        founded_year="2006",
        about_summary="Spotify is a Swedish audio streaming and media services provider offering digital copyright restricted recorded audio content including songs, podcasts, and videos.",
        product_category="Music Streaming",
        social_media={"twitter": "https://twitter.com/Spotify", "linkedin": "https://linkedin.com/company/spotify", "instagram": "https://instagram.com/spotify", "facebook": "https://facebook.com/spotify"},
        contact_info={"email": "support@spotify.com", "phone": NOT_FOUND, "hq_address": "Regeringsgatan 19, 111 53 Stockholm, Sweden"},
        status="Partial",
    ),
]
