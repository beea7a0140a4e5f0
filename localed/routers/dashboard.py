import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from localed.dependencies import (
    get_cdn_base_url,
    get_current_user_id,
    get_published_storage,
    get_site_base_url,
    get_site_store,
)
from localed.models.publish_response import PublishResponse
from localed.services.published_html import build_published_html_from_site
from localed.services.published_storage import PublishedStorage
from localed.services.site_store import SiteStore, SiteStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard")

PREVIEW_ROBOTS = "noindex, nofollow"


def _load_owned_site(store: SiteStore, site_id: str, user_id: str) -> Dict[str, Any]:
    """Site row *site_id*, provided *user_id* owns it.

    Raises:
        HTTPException 404 / 403 / 500: unknown site, another owner's site, store failure.
    """
    try:
        site = store.get_site_by_id(site_id)
    except SiteStoreError as exc:
        logger.error("Site lookup failed", extra={"site_id": site_id, "error": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to load site.") from exc
    if site is None:
        raise HTTPException(status_code=404, detail="Not found")
    if site.get("owner_id") != user_id:
        raise HTTPException(status_code=403, detail="Forbidden")
    return site


@router.post("/sites/{site_id}/publish", response_model=PublishResponse, summary="Publish a site")
def publish_site(
    site_id: str,
    user_id: str = Depends(get_current_user_id),
    store: SiteStore = Depends(get_site_store),
    storage: PublishedStorage = Depends(get_published_storage),
    site_base_url: str = Depends(get_site_base_url),
    cdn_base_url: str = Depends(get_cdn_base_url),
) -> PublishResponse:
    """Build the static page from ``draft_content`` and publish it.

    With a CDN configured the HTML goes to the blob store and the row keeps
    only the artifact path and meta; the page can always be rebuilt from
    ``draft_content``.  Without one, the draft is copied to
    ``published_content`` and served by live rendering.
    """
    site = _load_owned_site(store, site_id, user_id)
    page = build_published_html_from_site(site, site_base_url, source="draft_content")
    published_at = datetime.now(timezone.utc).isoformat()

    artifact_path = None
    if cdn_base_url:
        try:
            artifact_path = storage.upload(site_id, page.html)
        except OSError as exc:
            logger.error("Artifact upload failed", extra={"site_id": site_id, "error": str(exc)})

    if artifact_path:
        changes: Dict[str, Any] = {
            "published_at": published_at,
            "updated_at": published_at,
            "published_content": None,
            "published_artifact_path": artifact_path,
            "published_meta": page.meta.model_dump(),
        }
        mode = "artifact"
    else:
        changes = {
            "published_content": site.get("draft_content"),
            "published_at": published_at,
            "updated_at": published_at,
            "published_artifact_path": None,
            "published_meta": page.meta.model_dump(),
        }
        mode = "content"

    try:
        updated = store.update_site(site_id, changes)
    except SiteStoreError as exc:
        logger.error("Publish update failed", extra={"site_id": site_id, "error": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to publish site.") from exc

    logger.info("Site published", extra={"site_id": site_id, "mode": mode})
    return PublishResponse(
        id=str(updated["id"]),
        slug=updated["slug"],
        published_at=published_at,
        published_artifact_path=updated.get("published_artifact_path"),
        published_meta=page.meta,
        mode=mode,
    )


@router.get("/sites/{site_id}/preview", response_class=HTMLResponse, summary="Preview draft content")
def preview_site(
    site_id: str,
    user_id: str = Depends(get_current_user_id),
    store: SiteStore = Depends(get_site_store),
    site_base_url: str = Depends(get_site_base_url),
) -> HTMLResponse:
    site = _load_owned_site(store, site_id, user_id)
    page = build_published_html_from_site(site, site_base_url, source="draft_content", robots=PREVIEW_ROBOTS)
    return HTMLResponse(content=page.html)
