from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class SiteIdentity(BaseModel):
    """Row-level facts about a site that are not part of its locale content."""

    model_config = ConfigDict(frozen=True)

    slug: str
    business_type: Optional[str] = None
    country: Optional[str] = None


class PublishedMeta(BaseModel):
    """Title/description/og-image stored beside a published artifact."""

    title: str
    description: Optional[str] = None
    og_image: Optional[str] = None


class PublishedPage(BaseModel):
    html: str
    meta: PublishedMeta


class PublicSiteResponse(BaseModel):
    id: str
    slug: str
    business_type: Optional[str] = None
    template_id: Optional[str] = None
    languages: List[str] = []
    content: Optional[Dict[str, Dict[str, Any]]] = None
