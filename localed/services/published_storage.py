"""Blob storage for published site artifacts (``sites/{site_id}/index.html``)."""

import logging
from pathlib import Path
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

ARTIFACT_PREFIX = "sites/"
INDEX_KEY = "index.html"
TIMEOUT = 10  # seconds


def get_artifact_path_prefix(site_id: str) -> str:
    """``"abc-123"`` -> ``"sites/abc-123/"``."""
    return f"{ARTIFACT_PREFIX}{site_id}/"


def get_artifact_path(site_id: str) -> str:
    """Artifact path as stored on the site row (no trailing slash)."""
    return get_artifact_path_prefix(site_id).rstrip("/")


def get_published_site_url(artifact_path: str, cdn_base_url: str) -> str:
    """Public URL of an artifact's index page, or ``""`` without a CDN base."""
    base = cdn_base_url.strip().rstrip("/")
    if not base:
        return ""
    path = artifact_path if artifact_path.startswith(ARTIFACT_PREFIX) else f"{ARTIFACT_PREFIX}{artifact_path}"
    return f"{base}/{path.rstrip('/')}/{INDEX_KEY}"


class PublishedStorage:
    """Local-directory blob store, laid out exactly like the CDN bucket."""

    def __init__(self, root: str) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, artifact_path: str) -> Path:
        target = (self.root / artifact_path.strip("/") / INDEX_KEY).resolve()
        if self.root not in target.parents:
            raise ValueError(f"Artifact path escapes the storage root: {artifact_path!r}")
        return target

    def upload(self, site_id: str, html: str) -> str:
        """Write *html* for *site_id* and return its artifact path.

        Raises:
            OSError: if the file cannot be written.
        """
        artifact_path = get_artifact_path(site_id)
        target = self._resolve(artifact_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.info("Stored published artifact", extra={"site_id": site_id, "path": str(target)})
        return artifact_path

    def read(self, artifact_path: str) -> Optional[str]:
        try:
            target = self._resolve(artifact_path)
        except ValueError:
            logger.warning("Rejected artifact path %r", artifact_path)
            return None
        if not target.is_file():
            return None
        return target.read_text(encoding="utf-8")


async def fetch_published_html(url: str) -> str:
    """Fetch an artifact from the CDN, bypassing caches.

    Raises:
        httpx.HTTPError: on network errors or a non-2xx response.
    """
    async with httpx.AsyncClient(timeout=TIMEOUT, headers={"Cache-Control": "no-cache"}) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.text
