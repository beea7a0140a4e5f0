import logging
from typing import Any, Dict

import httpx
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from localed.dependencies import get_cdn_base_url, get_published_storage, get_site_base_url, get_site_store
from localed.models.site import PublicSiteResponse
from localed.services.published_html import build_published_html_from_site
from localed.services.published_storage import PublishedStorage, fetch_published_html, get_published_site_url
from localed.services.site_store import SiteStore, SiteStoreError

logger = logging.getLogger(__name__)

router = APIRouter()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "Pragma": "no-cache",
}


def load_published_site(store: SiteStore, slug: str) -> Dict[str, Any]:
    """Published, non-archived site row for *slug*.

    Raises:
        HTTPException 404: unknown, unpublished or archived site.
        HTTPException 500: the row store failed.
    """
    try:
        site = store.get_published_site_by_slug(slug)
    except SiteStoreError as exc:
        logger.error("Site lookup failed", extra={"slug": slug, "error": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to load site.") from exc
    if site is None:
        raise HTTPException(status_code=404, detail="Not found")
    return site


@router.get("/api/health", summary="Health check")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/api/sites/{slug}", response_model=PublicSiteResponse, summary="Published site content")
def get_public_site(slug: str, store: SiteStore = Depends(get_site_store)) -> PublicSiteResponse:
    site = load_published_site(store, slug)
    return PublicSiteResponse(
        id=str(site["id"]),
        slug=site["slug"],
        business_type=site.get("business_type"),
        template_id=site.get("template_id"),
        languages=site.get("languages") or [],
        content=site.get("published_content"),
    )


@router.get("/api/sites/{slug}/published", response_class=HTMLResponse, summary="Stored published HTML")
async def get_published_artifact(
    slug: str,
    store: SiteStore = Depends(get_site_store),
    storage: PublishedStorage = Depends(get_published_storage),
    cdn_base_url: str = Depends(get_cdn_base_url),
) -> HTMLResponse:
    """Proxy the stored artifact with ``text/html`` so browsers render it.

    The CDN copy is used when a CDN base URL is configured; otherwise the
    local blob store.
    """
    site = await run_in_threadpool(load_published_site, store, slug)
    artifact_path = site.get("published_artifact_path")
    if not artifact_path:
        raise HTTPException(status_code=404, detail="Not found")

    cdn_url = get_published_site_url(artifact_path, cdn_base_url)
    if cdn_url:
        try:
            html = await fetch_published_html(cdn_url)
        except httpx.HTTPError as exc:
            logger.error("Published artifact fetch failed", extra={"url": cdn_url, "error": str(exc)})
            raise HTTPException(status_code=502, detail="Failed to load published site") from exc
    else:
        html = await run_in_threadpool(storage.read, artifact_path)
        if html is None:
            raise HTTPException(status_code=404, detail="Not found")

    return HTMLResponse(content=html, headers=NO_CACHE_HEADERS)


@router.get("/{slug}", response_class=HTMLResponse, summary="Published site page")
async def get_site_page(
    slug: str,
    store: SiteStore = Depends(get_site_store),
    storage: PublishedStorage = Depends(get_published_storage),
    site_base_url: str = Depends(get_site_base_url),
    cdn_base_url: str = Depends(get_cdn_base_url),
) -> HTMLResponse:
    """Serve the stored artifact when there is one, else render the row live.

    A row whose artifact cannot be read is rebuilt from its draft content,
    which is what the artifact was built from.
    """
    site = await run_in_threadpool(load_published_site, store, slug)
    artifact_path = site.get("published_artifact_path")

    if artifact_path:
        html = await run_in_threadpool(storage.read, artifact_path)
        cdn_url = get_published_site_url(artifact_path, cdn_base_url)
        if html is None and cdn_url:
            try:
                html = await fetch_published_html(cdn_url)
            except httpx.HTTPError as exc:
                logger.warning(
                    "Artifact unavailable for %s (%s) – rendering from row", slug, exc
                )
        if html is not None:
            return HTMLResponse(content=html)

    page = build_published_html_from_site(site, site_base_url)
    return HTMLResponse(content=page.html)
