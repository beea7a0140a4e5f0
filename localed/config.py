"""Environment-driven settings for the Localed service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class SiteSettings:
    """Public base URL and published artifact locations."""

    base_url: str = os.getenv("SITE_BASE_URL", "https://localed.info").strip().rstrip("/")
    cdn_url: str = os.getenv("PUBLISHED_SITES_CDN_URL", "").strip().rstrip("/")
    local_dir: str = os.getenv("PUBLISHED_SITES_LOCAL_DIR", "published-sites").strip() or "published-sites"
    dev_owner_id: Optional[str] = os.getenv("LOCALED_DEV_OWNER_ID") or None


@dataclass(frozen=True)
class SupabaseSettings:
    """Supabase connection details."""

    url: Optional[str] = os.getenv("SUPABASE_URL")
    key: Optional[str] = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    sites_table: str = os.getenv("SUPABASE_SITES_TABLE", "localed_sites")
    submissions_table: str = os.getenv("SUPABASE_SUBMISSIONS_TABLE", "localed_contact_submissions")


@dataclass(frozen=True)
class EmailSettings:
    """Resend credentials for contact-form notifications."""

    api_key: str = os.getenv("RESEND_API_KEY", "")
    sender: str = os.getenv("RESEND_FROM", "Localed <onboarding@resend.dev>")
    timeout: float = float(os.getenv("RESEND_TIMEOUT", "10"))


site_settings = SiteSettings()
supabase_settings = SupabaseSettings()
email_settings = EmailSettings()
