"""
Configuration for the brand collector service.

Values come from the environment (prefix ``BRAND_COLLECTOR_``) or a ``.env`` file.
"""

import os
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
load_dotenv()


class CollectorSettings(BaseSettings):
    """Settings for the research agent, uploads and logging."""

    model_config = SettingsConfigDict(env_prefix="BRAND_COLLECTOR_", case_sensitive=False)

    # Agent settings
    agent_provider: str = Field(default="http", description="Agent transport (http, openai)")
    agent_base_url: str = Field(default="http://localhost:8080/api", description="Research agent base URL")
    agent_api_key: Optional[str] = Field(default=None, description="Research agent API key")
    agent_id: str = Field(default="6998555cdad6f4a9e9c2e146", description="Research agent id")
    agent_name: str = Field(default="Brand Research Agent", description="Research agent display name")
    agent_timeout: int = Field(default=300, description="Agent call timeout in seconds")
    upload_timeout: int = Field(default=60, description="File upload timeout in seconds")

    # OpenAI settings
    openai_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    openai_model: str = Field(default="gpt-3.5-turbo", description="OpenAI model name")
    openai_max_tokens: int = Field(default=4096, description="Max tokens for an OpenAI research answer")

    # Upload settings
    allowed_extensions: List[str] = Field(default=[".csv"], description="Accepted brand list file extensions")
    max_upload_bytes: int = Field(default=2 * 1024 * 1024, description="Max brand list file size in bytes")

    log_level: str = Field(default="INFO", description="Root log level")

    def validate_agent_config(self) -> bool:
        """Check the provider is known and has the credentials it needs."""
        if self.agent_provider == "openai" and not self.openai_api_key:
            return False
        if self.agent_provider not in ("http", "openai"):
            return False
        return True


settings = CollectorSettings()
