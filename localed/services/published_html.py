"""Assemble the complete single-page HTML document for a published site.

The same document is produced for the dashboard preview, the live route and
the stored artifact, so the output depends only on the arguments: content,
identity, base URL and ``now`` (for the copyright year and open badge).
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from markupsafe import Markup

from localed.models.parsed_view import ParsedView
from localed.models.site import PublishedMeta, PublishedPage, SiteIdentity
from localed.services.local_business_schema import LocalBusinessSchemaInput, to_json_ld_script
from localed.services.markup import EMPTY, LINK_CLASS, join, safe_url
from localed.services.normalizer import parse_site_content
from localed.services.section_titles import DEFAULT_SUCCESS_MESSAGE
from localed.services.sections import (
    MAIN_SECTIONS,
    render_announcement,
    render_footer,
    render_header,
    render_hero,
    render_skip_link,
)

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 160
DEFAULT_LOCALE = "en"
TAILWIND_CSS_URL = "https://cdn.jsdelivr.net/npm/tailwindcss@2.2.19/dist/tailwind.min.css"


def build_published_meta(view: ParsedView) -> PublishedMeta:
    """Title, description and share image for ``<head>`` and the site row."""
    if view.meta_title:
        title = view.meta_title
    elif view.tagline:
        title = f"{view.business_name} — {view.tagline}"
    else:
        title = view.business_name
    description = (view.meta_description or view.short_desc.strip())[:DESCRIPTION_MAX_LENGTH]
    og_image = view.hero_image_raw.strip() or view.logo.strip()
    return PublishedMeta(title=title, description=description or None, og_image=og_image or None)


def _schema_input(view: ParsedView, meta: PublishedMeta) -> LocalBusinessSchemaInput:
    images: List[str] = []
    for url in [view.hero_image_raw] + [image.url for image in view.gallery]:
        url = url.strip()
        if url and url not in images:
            images.append(url)
    return LocalBusinessSchemaInput(
        name=view.business_name,
        url=view.canonical_url,
        description=meta.description or "",
        image=images,
        address=view.address,
        address_locality=view.address_locality,
        address_region=view.address_region,
        postal_code=view.postal_code,
        address_country=view.country_code,
        telephone=view.phone,
        email=view.email,
        opening_hours=view.business_hours,
        same_as=[link.url for link in view.social_links],
        price_range=view.price_range,
        ratings=[t.rating for t in view.testimonials],
    )


def _meta(attr: str, key: str, value: Optional[str]) -> Markup:
    if not value:
        return EMPTY
    return Markup('<meta {}="{}" content="{}">').format(attr, key, value)


def _link(rel: str, href: str) -> Markup:
    if not href:
        return EMPTY
    return Markup('<link rel="{}" href="{}">').format(rel, safe_url(href))


def render_head(view: ParsedView, meta: PublishedMeta, robots: Optional[str] = None) -> Markup:
    json_ld = Markup(to_json_ld_script(_schema_input(view, meta)))
    favicon = view.favicon or view.logo.strip()
    return Markup("<head>\n{}\n</head>").format(
        join(
            [
                Markup('<meta charset="utf-8">'),
                Markup('<meta name="viewport" content="width=device-width, initial-scale=1">'),
                Markup("<title>{}</title>").format(meta.title),
                _meta("name", "robots", robots or view.robots_meta),
                _meta("name", "description", meta.description),
                _meta("name", "keywords", view.keywords),
                _link("canonical", view.canonical_url),
                _link("stylesheet", TAILWIND_CSS_URL),
                _link("stylesheet", view.custom_css_url),
                _meta("property", "og:title", meta.title),
                _meta("property", "og:description", meta.description),
                _meta("property", "og:url", view.canonical_url),
                _meta("property", "og:type", "website"),
                _meta("property", "og:image", meta.og_image),
                _meta("name", "twitter:card", "summary_large_image"),
                _meta("name", "twitter:title", meta.title),
                _meta("name", "twitter:description", meta.description),
                _meta("name", "twitter:image", meta.og_image),
                _link("icon", favicon),
                Markup('<script type="application/ld+json">{}</script>').format(json_ld),
                _meta("name", "theme-color", view.theme_color),
            ]
        )
    )


def render_document(
    view: ParsedView,
    meta: PublishedMeta,
    locale: str = DEFAULT_LOCALE,
    robots: Optional[str] = None,
) -> str:
    main = join(renderer(view) for renderer in MAIN_SECTIONS)
    body = join(
        [
            render_skip_link(view),
            render_announcement(view),
            render_header(view),
            render_hero(view),
            Markup('<div id="main-content" class="mx-auto max-w-4xl px-4 py-10 sm:px-6">\n{}\n</div>').format(main),
            render_footer(view),
        ]
    )
    document = Markup(
        '<!DOCTYPE html>\n<html lang="{}">\n{}\n'
        '<body class="min-h-screen bg-white text-gray-900 antialiased">\n{}\n</body>\n</html>\n'
    ).format(locale or DEFAULT_LOCALE, render_head(view, meta, robots), body)
    return str(document)


def build_published_html(
    content: Optional[Mapping[str, Any]],
    identity: SiteIdentity,
    site_base_url: str,
    now: Optional[datetime] = None,
    locale: str = DEFAULT_LOCALE,
    robots: Optional[str] = None,
) -> PublishedPage:
    """Render one locale's *content* to a full HTML document plus its meta.

    Args:
        content:       Raw locale content.
        identity:      Slug, business type and country of the site row.
        site_base_url: Public base URL (``https://localed.info``) for canonical,
                       form action and share links.
        now:           Reference time; defaults to the current UTC time.
        locale:        ``<html lang>`` value.
        robots:        Overrides the content's robots meta (preview uses
                       ``noindex``).
    """
    view = parse_site_content(content, identity, site_base_url, now)
    meta = build_published_meta(view)
    return PublishedPage(html=render_document(view, meta, locale, robots), meta=meta)


def get_locale_content(site: Mapping[str, Any], source: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
    """Pick the primary locale's content from a site row.

    *source* names the column (``"draft_content"``/``"published_content"``);
    by default ``published_content`` is used when set, else ``draft_content``.
    The primary locale is ``languages[0]``, falling back to ``en``.
    """
    languages = site.get("languages") or []
    locale = languages[0] if languages and isinstance(languages[0], str) else DEFAULT_LOCALE
    if source is None:
        source = "published_content" if site.get("published_content") else "draft_content"
    by_locale = site.get(source)
    if not isinstance(by_locale, Mapping):
        by_locale = {}
    content = by_locale.get(locale) or by_locale.get(DEFAULT_LOCALE) or {}
    return locale, content if isinstance(content, dict) else {}


def identity_from_site(site: Mapping[str, Any]) -> SiteIdentity:
    return SiteIdentity(
        slug=site.get("slug") or "",
        business_type=site.get("business_type"),
        country=site.get("country"),
    )


def build_published_html_from_site(
    site: Mapping[str, Any],
    site_base_url: str,
    now: Optional[datetime] = None,
    source: Optional[str] = None,
    robots: Optional[str] = None,
) -> PublishedPage:
    """Rebuild a site's document from its row, as stored by the dashboard."""
    locale, content = get_locale_content(site, source)
    logger.debug("Building published HTML", extra={"slug": site.get("slug"), "locale": locale})
    return build_published_html(content, identity_from_site(site), site_base_url, now, locale, robots)


def build_contact_thank_you_html(
    site: Mapping[str, Any],
    site_base_url: str,
    now: Optional[datetime] = None,
) -> str:
    """Small page answering a contact form post from the published site."""
    locale, content = get_locale_content(site)
    view = parse_site_content(content, identity_from_site(site), site_base_url, now)
    message = view.contact_form_success_message or DEFAULT_SUCCESS_MESSAGE
    back_url = view.canonical_url or f"/{quote(view.slug)}"
    document = Markup(
        '<!DOCTYPE html>\n<html lang="{}">\n<head>\n<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        '<meta name="robots" content="noindex">\n<title>{}</title>\n{}\n</head>\n'
        '<body class="min-h-screen bg-white text-gray-900 antialiased">\n'
        '<main class="mx-auto max-w-md px-4 py-16 text-center">\n'
        '<p class="text-lg text-gray-700">{}</p>\n'
        '<p class="mt-6"><a href="{}" class="{}">Back to {}</a></p>\n'
        "</main>\n</body>\n</html>\n"
    ).format(
        locale,
        view.business_name,
        _link("stylesheet", TAILWIND_CSS_URL),
        message,
        safe_url(back_url),
        LINK_CLASS,
        view.business_name,
    )
    return str(document)
