"""
Brand collection workflow: validate input, upload, call the agent, normalize.
"""
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from brand_collector.config import CollectorSettings
from brand_collector.errors import (
    GENERIC_AGENT_ERROR,
    AgentCallError,
    ExtractionError,
    InputError,
    UploadError,
)
from brand_collector.extractor import extract_brands, extract_meta
from brand_collector.input_parser import decode_upload, has_allowed_extension, parse_brand_names
from brand_collector.models import ArtifactFile, CollectionResult
from brand_collector.presentation import fill_counts

logger = logging.getLogger(__name__)


def build_research_message(brand_names: List[str]) -> str:
    return (
        "Research the following brands and collect comprehensive brand intelligence for each: "
        f"{', '.join(brand_names)}. For each brand, find: official website URL and whether it is "
        "Turkey-specific or global, your confidence in the website (Verified, Partially Verified or "
        "Not Found) with short verification notes, logo URL, founded year, about us summary "
        "(2-3 sentences) and about page link, product category, social media links (Twitter/X, "
        "LinkedIn, Instagram, Facebook, YouTube, TikTok, Pinterest), and contact info (email, phone, "
        "HQ address). Mark any unavailable fields as 'Not Found'."
    )


def _keys(value: Any) -> str:
    if isinstance(value, dict):
        return "[" + ", ".join(str(k) for k in value.keys()) + "]"
    return "[]"


def describe_response_shape(agent_response: Any) -> str:
    """Summarize type and top-level keys of the envelope and its result."""
    response = agent_response.get("response") if isinstance(agent_response, dict) else None
    result = response.get("result") if isinstance(response, dict) else None
    return (
        f"response type: {type(agent_response).__name__}, keys: {_keys(agent_response)}; "
        f"result type: {type(result).__name__}, keys: {_keys(result)}"
    )


def _artifact_files(agent_response: Any) -> List[ArtifactFile]:
    outputs = agent_response.get("module_outputs") if isinstance(agent_response, dict) else None
    files = outputs.get("artifact_files") if isinstance(outputs, dict) else None
    if not isinstance(files, list):
        return []
    artifacts = []
    for entry in files:
        try:
            artifacts.append(ArtifactFile.model_validate(entry))
        except ValidationError:
            logger.debug("Skipping malformed artifact entry: %r", entry)
    return artifacts


class BrandCollector:
    def __init__(self, client, settings: CollectorSettings):
        self.client = client
        self.settings = settings

    def collect_from_file(self, filename: str, content: bytes) -> CollectionResult:
        if not has_allowed_extension(filename, self.settings.allowed_extensions):
            raise InputError(f"Please upload a {' or '.join(self.settings.allowed_extensions)} file")
        if len(content) > self.settings.max_upload_bytes:
            raise InputError("Uploaded file is too large")
        brand_names = parse_brand_names(decode_upload(content))
        return self.collect(brand_names, filename=filename, content=content)

    def collect(self, brand_names: List[str], filename: Optional[str] = None,
                content: Optional[bytes] = None) -> CollectionResult:
        if not brand_names:
            raise InputError("No brand names found. Add at least one brand to research.")

        assets: List[str] = []
        if content is not None and self.client.supports_uploads:
            upload = self.client.upload_files(filename or "brands.csv", content)
            if not upload.success or not upload.asset_ids:
                logger.warning("Upload rejected for %s", filename)
                raise UploadError()
            assets = upload.asset_ids

        message = build_research_message(brand_names)
        try:
            agent_response = self.client.call_ai_agent(message, self.settings.agent_id, assets)
        except Exception as e:
            logger.warning("Agent call raised: %s", e)
            raise AgentCallError(str(e) or GENERIC_AGENT_ERROR) from e

        if not isinstance(agent_response, dict) or not agent_response.get("success"):
            raise AgentCallError(_agent_error_message(agent_response))

        brands = extract_brands(agent_response)
        if not brands:
            shape = describe_response_shape(agent_response)
            logger.warning("No brands extracted (%s)", shape)
            raise ExtractionError(
                f"The agent responded but no brand data could be extracted ({shape}).", shape
            )

        return CollectionResult(
            brand_names=brand_names,
            brands=brands,
            meta=fill_counts(extract_meta(agent_response), brands),
            artifact_files=_artifact_files(agent_response),
        )


def _agent_error_message(agent_response: Any) -> str:
    if not isinstance(agent_response, dict):
        return GENERIC_AGENT_ERROR
    response = agent_response.get("response")
    message = response.get("message") if isinstance(response, dict) else None
    return agent_response.get("error") or message or GENERIC_AGENT_ERROR
