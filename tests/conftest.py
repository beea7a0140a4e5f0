"""Shared fixtures for the HTTP route tests.

Routes run against an in-memory site store and a temporary artifact
directory; collaborators are swapped in through ``app.dependency_overrides``.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from localed.dependencies import (
    get_cdn_base_url,
    get_current_user_id,
    get_published_storage,
    get_site_base_url,
    get_site_store,
)
from localed.main import app
from localed.services.published_storage import PublishedStorage
from localed.services.site_store import InMemorySiteStore

OWNER_ID = "owner-1"


def make_site(**overrides) -> dict:
    site = {
        "id": "site-1",
        "slug": "joes-salon",
        "owner_id": OWNER_ID,
        "business_type": "salon",
        "template_id": "default",
        "languages": ["en"],
        "country": "IN",
        "draft_content": {
            "en": {
                "businessName": "Joe's Salon",
                "tagline": "Best in town",
                "email": "joe@example.com",
                "contactFormSubject": "New enquiry",
                "contactFormSuccessMessage": "Thanks! Joe will be in touch.",
            }
        },
        "published_content": None,
        "published_artifact_path": None,
        "published_meta": None,
        "published_at": "2025-02-01T00:00:00+00:00",
        "archived_at": None,
    }
    site.update(overrides)
    return site


def loop_running() -> bool:
    """True when called on a thread that is running an event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


@pytest.fixture
def store() -> InMemorySiteStore:
    return InMemorySiteStore()


@pytest.fixture
def storage(tmp_path) -> PublishedStorage:
    return PublishedStorage(str(tmp_path / "published-sites"))


@pytest.fixture
def cdn_base_url() -> str:
    return ""


@pytest.fixture
def client(store, storage, cdn_base_url):
    app.dependency_overrides[get_site_store] = lambda: store
    app.dependency_overrides[get_published_storage] = lambda: storage
    app.dependency_overrides[get_site_base_url] = lambda: "https://localed.info"
    app.dependency_overrides[get_cdn_base_url] = lambda: cdn_base_url
    app.dependency_overrides[get_current_user_id] = lambda: OWNER_ID
    app.state.limiter._storage.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
