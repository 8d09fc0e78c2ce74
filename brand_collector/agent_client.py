import requests
import openai
import logging
from typing import Any, Dict, List, Optional

from brand_collector.config import CollectorSettings
from brand_collector.models import UploadResult

logger = logging.getLogger(__name__)


class AgentClient:
    """HTTP client for the hosted brand research agent."""

    supports_uploads = True

    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: int = 300, upload_timeout: int = 60):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.upload_timeout = upload_timeout
        self.headers = {"x-api-key": api_key} if api_key else {}

    def upload_files(self, filename: str, content: bytes) -> UploadResult:
        url = f"{self.base_url}/upload"
        try:
            resp = requests.post(
                url,
                files={"files": (filename, content, "text/csv")},
                headers=self.headers,
                timeout=self.upload_timeout,
            )
            if resp.status_code >= 300:
                logger.warning("Upload of %s failed with status %s", filename, resp.status_code)
                return UploadResult(success=False)
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Upload of %s failed: %s", filename, e)
            return UploadResult(success=False)
        if not isinstance(data, dict):
            return UploadResult(success=False)
        asset_ids = data.get('asset_ids')
        return UploadResult(
            success=bool(data.get('success')),
            asset_ids=[str(a) for a in asset_ids] if isinstance(asset_ids, list) else [],
        )

    def call_ai_agent(self, message: str, agent_id: str, assets: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Send a research request. Network errors propagate; HTTP errors come back
        as a ``success=False`` envelope.
        """
        url = f"{self.base_url}/agent"
        payload = {"message": message, "agent_id": agent_id, "assets": assets or []}
        resp = requests.post(url, json=payload, headers=self.headers, timeout=self.timeout)
        if resp.status_code >= 400:
            return {"success": False, "error": f"Agent request failed with status {resp.status_code}"}
        try:
            data = resp.json()
        except ValueError:
            return {"success": True, "response": {}, "raw_response": resp.text}
        if not isinstance(data, dict):
            return {"success": True, "response": {"result": data}}
        return data


class OpenAIResearchAgent:
    """Research agent backed directly by an OpenAI chat model."""

    supports_uploads = False

    def __init__(self, api_key: Optional[str], model: str = "gpt-3.5-turbo", max_tokens: int = 4096, timeout: int = 300):
        self.client = openai.OpenAI(api_key=api_key, timeout=timeout)
        self.model = model
        self.max_tokens = max_tokens

    def upload_files(self, filename: str, content: bytes) -> UploadResult:
        return UploadResult(success=False)

    def call_ai_agent(self, message: str, agent_id: str, assets: Optional[List[str]] = None) -> Dict[str, Any]:
        prompt = (
            message
            + " Return only JSON shaped as {\"brands\": [...], \"total_brands\": n,"
            " \"complete_count\": n, \"partial_count\": n}."
        )
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=0
            )
        except openai.OpenAIError as e:
            return {"success": False, "error": str(e)}
        content = response.choices[0].message.content or ""
        return {"success": True, "response": {"result": content}, "raw_response": content}


def build_agent_client(settings: CollectorSettings):
    if not settings.validate_agent_config():
        raise ValueError(f"Invalid agent configuration for provider: {settings.agent_provider}")
    if settings.agent_provider == "openai":
        return OpenAIResearchAgent(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
            timeout=settings.agent_timeout,
        )
    return AgentClient(
        base_url=settings.agent_base_url,
        api_key=settings.agent_api_key,
        timeout=settings.agent_timeout,
        upload_timeout=settings.upload_timeout,
    )
