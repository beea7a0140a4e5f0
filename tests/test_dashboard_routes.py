"""Tests for the dashboard publish and preview routes."""

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup

from conftest import loop_running, make_site
from localed.config import SiteSettings
from localed.dependencies import get_current_user_id
from localed.main import app
from localed.services.site_store import SiteStoreError

PUBLISH_URL = "/api/dashboard/sites/site-1/publish"
PREVIEW_URL = "/api/dashboard/sites/site-1/preview"


class TestPublishContentMode:
    def test_copies_draft_to_published_content(self, client, store):
        store.add_site(make_site(published_at=None))
        response = client.post(PUBLISH_URL)
        assert response.status_code == 200

        body = response.json()
        assert body["mode"] == "content"
        assert body["slug"] == "joes-salon"
        assert body["published_artifact_path"] is None
        assert body["published_meta"]["title"] == "Joe's Salon — Best in town"

        row = store.sites["site-1"]
        assert row["published_content"] == row["draft_content"]
        assert row["published_at"] == body["published_at"]

    def test_site_becomes_public(self, client, store):
        store.add_site(make_site(published_at=None))
        assert client.get("/joes-salon").status_code == 404
        client.post(PUBLISH_URL)
        assert client.get("/joes-salon").status_code == 200

    def test_republish_picks_up_draft_edits(self, client, store):
        store.add_site(
            make_site(
                published_content={"en": {"businessName": "Old Name"}},
                draft_content={"en": {"businessName": "New Name"}},
            )
        )
        body = client.post(PUBLISH_URL).json()
        assert body["published_meta"]["title"] == "New Name"

        row = store.sites["site-1"]
        assert row["published_content"] == {"en": {"businessName": "New Name"}}
        assert row["published_meta"]["title"] == "New Name"
        assert "New Name" in client.get("/joes-salon").text


class TestPublishArtifactMode:
    @pytest.fixture
    def cdn_base_url(self):
        return "https://cdn.example.com"

    def test_uploads_artifact_and_clears_content(self, client, store, storage):
        store.add_site(make_site(published_content={"en": {"businessName": "Stale"}}))
        response = client.post(PUBLISH_URL)
        assert response.status_code == 200

        body = response.json()
        assert body["mode"] == "artifact"
        assert body["published_artifact_path"] == "sites/site-1"
        assert body["published_meta"]["title"] == "Joe's Salon — Best in town"

        row = store.sites["site-1"]
        assert row["published_content"] is None
        assert row["published_artifact_path"] == "sites/site-1"
        assert row["published_meta"]["title"] == "Joe's Salon — Best in town"
        assert "Stale" not in storage.read("sites/site-1")

    def test_upload_failure_falls_back_to_content(self, client, store, storage):
        store.add_site(make_site())
        with patch.object(storage, "upload", side_effect=OSError("disk full")):
            body = client.post(PUBLISH_URL).json()
        assert body["mode"] == "content"
        assert store.sites["site-1"]["published_content"] == store.sites["site-1"]["draft_content"]


class TestPublishErrors:
    def test_unknown_site(self, client):
        assert client.post(PUBLISH_URL).status_code == 404

    def test_other_owner(self, client, store):
        store.add_site(make_site(owner_id="someone-else"))
        response = client.post(PUBLISH_URL)
        assert response.status_code == 403
        assert store.sites["site-1"]["published_content"] is None

    def test_not_signed_in(self, client, store):
        store.add_site(make_site())
        del app.dependency_overrides[get_current_user_id]
        with patch("localed.dependencies.site_settings", SiteSettings(dev_owner_id=None)):
            response = client.post(PUBLISH_URL)
        assert response.status_code == 401

    def test_dev_owner(self, client, store):
        store.add_site(make_site(owner_id="dev-owner"))
        del app.dependency_overrides[get_current_user_id]
        with patch("localed.dependencies.site_settings", SiteSettings(dev_owner_id="dev-owner")):
            assert client.post(PUBLISH_URL).status_code == 200

    def test_store_failure_on_update(self, client, store):
        store.add_site(make_site())
        with patch.object(store, "update_site", side_effect=SiteStoreError("down")):
            assert client.post(PUBLISH_URL).status_code == 500


class TestPreview:
    def test_renders_draft_with_noindex(self, client, store):
        store.add_site(
            make_site(
                published_at=None,
                published_content={"en": {"businessName": "Old"}},
                draft_content={"en": {"businessName": "New draft", "robotsMeta": "index"}},
            )
        )
        response = client.get(PREVIEW_URL)
        assert response.status_code == 200
        soup = BeautifulSoup(response.text, "lxml")
        assert soup.find("title").get_text() == "New draft"
        assert soup.find("meta", attrs={"name": "robots"})["content"] == "noindex, nofollow"

    def test_other_owner(self, client, store):
        store.add_site(make_site(owner_id="someone-else"))
        assert client.get(PREVIEW_URL).status_code == 403


class TestStoreCallsOffEventLoop:
    def test_publish_runs_in_threadpool(self, client, store):
        store.add_site(make_site())
        flags = []
        update = store.update_site

        def recording_update(site_id, changes):
            flags.append(loop_running())
            return update(site_id, changes)

        with patch.object(store, "update_site", side_effect=recording_update):
            assert client.post(PUBLISH_URL).status_code == 200
        assert flags == [False]
