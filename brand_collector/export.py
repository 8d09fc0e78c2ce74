"""
CSV export of collected brands.
"""
import csv
import io
from typing import List

from brand_collector.models import Brand
from brand_collector.presentation import display_value

EXPORT_FILENAME = "brand_intelligence.csv"

EXPORT_HEADERS = [
    "Brand Name", "Category", "Website", "Website Scope", "Confidence", "Verification Notes",
    "Logo URL", "Founded Year", "About Summary", "About Page",
    "Twitter", "LinkedIn", "Instagram", "Facebook", "YouTube", "TikTok", "Pinterest",
    "Email", "Phone", "HQ Address", "Status",
]


def brand_row(brand: Brand) -> List[str]:
    social = brand.social_media
    contact = brand.contact_info
    values = [
        brand.brand_name, brand.product_category, brand.website_url, brand.website_scope,
        brand.confidence, brand.verification_notes, brand.logo_url, brand.founded_year,
        brand.about_summary, brand.about_page_link,
        social.twitter, social.linkedin, social.instagram, social.facebook,
        social.youtube, social.tiktok, social.pinterest,
        contact.email, contact.phone, contact.hq_address, brand.status,
    ]
    return [display_value(v) for v in values]


def export_csv(brands: List[Brand]) -> str:
    """Render brands as CSV: a plain header line, then fully quoted rows."""
    buffer = io.StringIO()
    buffer.write(",".join(EXPORT_HEADERS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(brand_row(brand) for brand in brands)
    # rows are joined by newlines, with no trailing terminator
    return buffer.getvalue()[:-1]
