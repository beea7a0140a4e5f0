"""FastAPI dependencies shared by the routers.

Tests swap these out through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from fastapi import HTTPException, Request

from localed.config import site_settings, supabase_settings
from localed.services.published_storage import PublishedStorage
from localed.services.site_store import InMemorySiteStore, SiteStore, SupabaseSiteStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_site_store() -> SiteStore:
    if supabase_settings.url and supabase_settings.key:
        return SupabaseSiteStore()
    logger.warning("Supabase is not configured – using an empty in-memory site store")
    return InMemorySiteStore()


@lru_cache(maxsize=1)
def get_published_storage() -> PublishedStorage:
    return PublishedStorage(site_settings.local_dir)


def get_site_base_url() -> str:
    return site_settings.base_url


def get_cdn_base_url() -> str:
    return site_settings.cdn_url


def get_current_user_id(request: Request) -> str:
    """Signed-in user id set by the upstream auth layer, or the dev owner.

    Raises:
        HTTPException 401: when neither is available.
    """
    user_id = getattr(request.state, "user_id", None) or site_settings.dev_owner_id
    if not user_id:
        raise HTTPException(
            status_code=401,
            detail="Unauthorized; sign in or in development set LOCALED_DEV_OWNER_ID",
        )
    return user_id
