from typing import Optional

from pydantic import BaseModel

from localed.models.site import PublishedMeta


class PublishResponse(BaseModel):
    id: str
    slug: str
    published_at: str
    published_artifact_path: Optional[str] = None
    published_meta: Optional[PublishedMeta] = None
    mode: str
    """``"artifact"`` when the HTML went to the blob store, ``"content"`` otherwise."""
