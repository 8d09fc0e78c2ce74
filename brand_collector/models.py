from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional, Dict

NOT_FOUND = "Not Found"


def coerce_text(value: Any) -> str:
    """Turn any agent-supplied scalar or list into a display string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ", ".join(coerce_text(v) for v in value if v is not None)
    return ""


class SocialMedia(BaseModel):
    twitter: str = ""
    linkedin: str = ""
    instagram: str = ""
    facebook: str = ""
    youtube: str = ""
    tiktok: str = ""
    pinterest: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _text(cls, v):
        return coerce_text(v)


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    hq_address: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _text(cls, v):
        return coerce_text(v)


class Brand(BaseModel):
    brand_name: str = ""
    website_url: str = ""
    website_scope: str = ""
    confidence: str = ""
    verification_notes: str = ""
    logo_url: str = ""
    founded_year: str = ""
    about_summary: str = ""
    about_page_link: str = ""
    product_category: str = ""
    social_media: SocialMedia = Field(default_factory=SocialMedia)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    status: str = "Partial"

    @field_validator(
        "brand_name", "website_url", "website_scope", "confidence", "verification_notes",
        "logo_url", "founded_year", "about_summary", "about_page_link", "product_category",
        mode="before",
    )
    @classmethod
    def _text(cls, v):
        return coerce_text(v)

    @field_validator("social_media", "contact_info", mode="before")
    @classmethod
    def _block(cls, v):
        if isinstance(v, BaseModel):
            return v
        return v if isinstance(v, dict) else {}

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        text = coerce_text(v).strip()
        return text or "Partial"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Brand":
        return cls.model_validate(record)


class ResponseMeta(BaseModel):
    total: int = Field(default=0, ge=0)
    complete: int = Field(default=0, ge=0)
    partial: int = Field(default=0, ge=0)


class ArtifactFile(BaseModel):
    file_url: str
    name: Optional[str] = None
    format_type: Optional[str] = None


class UploadResult(BaseModel):
    success: bool = False
    asset_ids: List[str] = []


class CollectionResult(BaseModel):
    brand_names: List[str] = []
    brands: List[Brand] = []
    meta: ResponseMeta = Field(default_factory=ResponseMeta)
    artifact_files: List[ArtifactFile] = []
