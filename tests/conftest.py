"""
Pytest configuration and fixtures.

This module provides shared agent payloads and transport doubles for all tests.
"""

import copy
import pytest
from unittest.mock import Mock

from brand_collector.config import CollectorSettings
from brand_collector.models import UploadResult
from brand_collector.service import BrandCollector


NIKE = {
    "brand_name": "Nike",
    "website_url": "https://www.nike.com",
    "website_scope": "Global",
    "confidence": "Verified",
    "verification_notes": "Official domain confirmed",
    "logo_url": "https://logo.clearbit.com/nike.com",
    "founded_year": "1964",
    "about_summary": "Nike designs and sells sportswear.",
    "about_page_link": "https://about.nike.com",
    "product_category": "Sportswear",
    "social_media": {
        "twitter": "https://twitter.com/Nike",
        "linkedin": "https://linkedin.com/company/nike",
        "instagram": "https://instagram.com/nike",
        "facebook": "https://facebook.com/nike",
        "youtube": "https://youtube.com/nike",
        "tiktok": "Not Found",
        "pinterest": "",
    },
    "contact_info": {
        "email": "consumer.services@nike.com",
        "phone": "1-800-344-6453",
        "hq_address": "One Bowerman Drive, Beaverton, OR 97005, USA",
    },
    "status": "Complete",
}


@pytest.fixture
def nike_record():
    """A fully populated canonical brand record."""
    return copy.deepcopy(NIKE)


@pytest.fixture
def alternate_record():
    """A verified-site record in the alternate layout."""
    return {
        "brand_name": "Koton",
        "selected_official_website": "https://www.koton.com",
        "official_website_turkey": "https://www.koton.com.tr",
        "confidence": "Partially Verified",
        "website_details": {
            "website_scope": "Turkey",
            "verification_notes": "Two candidate domains",
            "logo_url": "https://www.koton.com/logo.png",
            "founded_year": "1988",
            "about_summary": "Turkish fashion retailer.",
            "about_page_link": "https://www.koton.com/about",
            "product_category": ["Apparel", "Accessories"],
            "social_media": {"instagram": "https://instagram.com/koton"},
            "contact_info": {"email": "info@koton.com"},
        },
    }


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return CollectorSettings(
        agent_provider="http",
        agent_base_url="http://agent.test/api",
        agent_id="agent-123",
    )


@pytest.fixture
def mock_client(nike_record):
    """Transport double answering with one canonical brand."""
    client = Mock()
    client.supports_uploads = True
    client.upload_files.return_value = UploadResult(success=True, asset_ids=["asset-1"])
    client.call_ai_agent.return_value = {
        "success": True,
        "response": {
            "result": {
                "brands": [nike_record],
                "total_brands": 1,
                "complete_count": 1,
                "partial_count": 0,
            }
        },
        "module_outputs": {
            "artifact_files": [{"file_url": "https://files.test/brands.csv", "name": "brands.csv"}]
        },
    }
    return client


@pytest.fixture
def collector(mock_client, settings):
    return BrandCollector(mock_client, settings)
