"""Row store for sites and contact submissions.

Rows are plain dicts shaped like the ``localed_sites`` table: ``id``, ``slug``,
``owner_id``, ``business_type``, ``template_id``, ``languages``, ``country``,
``draft_content``, ``published_content``, ``published_artifact_path``,
``published_meta``, ``published_at``, ``archived_at``, ``updated_at``.
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from postgrest.exceptions import APIError
from supabase import Client, create_client

from localed.config import supabase_settings

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class SiteStoreError(RuntimeError):
    """The backing store rejected or failed a request."""


class SiteStore(Protocol):
    def get_published_site_by_slug(self, slug: str) -> Optional[Row]: ...

    def get_site_by_id(self, site_id: str) -> Optional[Row]: ...

    def update_site(self, site_id: str, changes: Row) -> Row: ...

    def insert_contact_submission(self, submission: Row) -> Row: ...


class SupabaseSiteStore:
    """Thin wrapper around Supabase for site rows and contact submissions."""

    def __init__(self, client: Optional[Client] = None) -> None:
        if client is None:
            client = create_client(supabase_settings.url, supabase_settings.key)
        self._client = client
        self._sites = supabase_settings.sites_table
        self._submissions = supabase_settings.submissions_table

    def get_published_site_by_slug(self, slug: str) -> Optional[Row]:
        """Published, non-archived site for *slug*, or ``None``."""
        try:
            result = (
                self._client.table(self._sites)
                .select("*")
                .eq("slug", slug)
                .not_.is_("published_at", "null")
                .is_("archived_at", "null")
                .limit(1)
                .execute()
            )
        except APIError as exc:
            raise SiteStoreError(f"Failed to load site {slug!r}") from exc
        return result.data[0] if result.data else None

    def get_site_by_id(self, site_id: str) -> Optional[Row]:
        try:
            result = self._client.table(self._sites).select("*").eq("id", site_id).limit(1).execute()
        except APIError as exc:
            raise SiteStoreError(f"Failed to load site {site_id!r}") from exc
        return result.data[0] if result.data else None

    def update_site(self, site_id: str, changes: Row) -> Row:
        try:
            result = self._client.table(self._sites).update(changes).eq("id", site_id).execute()
        except APIError as exc:
            raise SiteStoreError(f"Failed to update site {site_id!r}") from exc
        if not result.data:
            raise SiteStoreError(f"Site {site_id!r} disappeared during update")
        return result.data[0]

    def insert_contact_submission(self, submission: Row) -> Row:
        try:
            result = self._client.table(self._submissions).insert(submission).execute()
        except APIError as exc:
            raise SiteStoreError("Failed to store contact submission") from exc
        return result.data[0] if result.data else submission


class InMemorySiteStore:
    """Process-local store used when Supabase is not configured, and in tests."""

    def __init__(self, sites: Optional[List[Row]] = None) -> None:
        self.sites: Dict[str, Row] = {}
        self.submissions: List[Row] = []
        for site in sites or []:
            self.add_site(site)

    def add_site(self, site: Row) -> Row:
        row = copy.deepcopy(site)
        row.setdefault("id", str(uuid.uuid4()))
        self.sites[row["id"]] = row
        return copy.deepcopy(row)

    def get_published_site_by_slug(self, slug: str) -> Optional[Row]:
        for row in self.sites.values():
            if row.get("slug") == slug and row.get("published_at") and not row.get("archived_at"):
                return copy.deepcopy(row)
        return None

    def get_site_by_id(self, site_id: str) -> Optional[Row]:
        row = self.sites.get(site_id)
        return copy.deepcopy(row) if row is not None else None

    def update_site(self, site_id: str, changes: Row) -> Row:
        if site_id not in self.sites:
            raise SiteStoreError(f"Unknown site {site_id!r}")
        self.sites[site_id].update(copy.deepcopy(changes))
        return copy.deepcopy(self.sites[site_id])

    def insert_contact_submission(self, submission: Row) -> Row:
        row = dict(submission)
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self.submissions.append(row)
        return dict(row)
