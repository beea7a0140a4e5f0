"""Content normalisation: raw locale content -> :class:`ParsedView`.

Site content is edited through a wizard and stored as a loose JSON object, so
any key may be missing, blank, or of the wrong type.  This module is the one
place that coerces it: every scalar becomes a string (empty when absent or
not a string), every list is filtered to well-formed, meaningful entries, and
each section's visibility flag is computed here.  Renderers trust the result.

Trim policy follows the editor's storage conventions: free-text bodies
(description, about, address, hours, phone, email, WhatsApp) keep their
whitespace as typed; labels, URLs and short fields are trimmed.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

from localed.models.parsed_view import (
    CallToAction,
    GalleryImage,
    OtherVideo,
    ParsedCertification,
    ParsedFaq,
    ParsedService,
    ParsedTeamMember,
    ParsedTestimonial,
    ParsedView,
    SectionTitles,
    SocialLink,
)
from localed.models.site import SiteIdentity
from localed.services.countries import get_country_label
from localed.services.open_now import get_open_now_status
from localed.services.section_titles import (
    DEFAULT_DIRECTIONS_LABEL,
    DEFAULT_OTHER_LINK_LABEL,
    DEFAULT_SECTION_TITLES,
    OVERRIDE_KEYS,
    PLACEHOLDER_HERO_IMAGE,
)

logger = logging.getLogger(__name__)

_YOUTUBE_ID_RE = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([A-Za-z0-9_-]{11})")
_VIMEO_ID_RE = re.compile(r"vimeo\.com/(?:video/)?(\d+)")
_WORD_START_RE = re.compile(r"\b\w")
_NON_DIGIT_RE = re.compile(r"\D")

# (content key, kind, label) in display order.
_SOCIAL_PLATFORMS = (
    ("facebookUrl", "facebook", "Facebook"),
    ("instagramUrl", "instagram", "Instagram"),
    ("youtubeChannelUrl", "youtube", "YouTube"),
    ("twitterUrl", "x", "X"),
    ("linkedinUrl", "linkedin", "LinkedIn"),
    ("tiktokUrl", "tiktok", "TikTok"),
)

_CTA_KEYS = (
    ("ctaLabel", "ctaUrl", "primary"),
    ("cta2Label", "cta2Url", "secondary"),
    ("cta3Label", "cta3Url", "tertiary"),
)


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def _text(content: Mapping[str, Any], key: str, trim: bool = True) -> str:
    value = content.get(key)
    if not isinstance(value, str):
        return ""
    return value.strip() if trim else value


def _flag(content: Mapping[str, Any], key: str, default: bool = False) -> bool:
    """Read a wizard checkbox, which may be stored as a bool or as ``"true"``/``"false"``."""
    value = content.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return default


def _strings(content: Mapping[str, Any], key: str) -> List[str]:
    value = content.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _records(content: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    value = content.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

def business_type_label(business_type: Optional[str]) -> str:
    """``"local_service"`` -> ``"Local Service"``."""
    if not business_type:
        return ""
    spaced = str(business_type).replace("_", " ")
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)


def whatsapp_href(value: str) -> str:
    """Link for a WhatsApp number or URL; numbers go through ``wa.me``."""
    if not value:
        return ""
    if value.startswith("http"):
        return value
    return f"https://wa.me/{_NON_DIGIT_RE.sub('', value)}"


def youtube_embed_url(url: str) -> Optional[str]:
    match = _YOUTUBE_ID_RE.search(url)
    if not match:
        return None
    return f"https://www.youtube.com/embed/{match.group(1)}"


def vimeo_embed_url(url: str) -> Optional[str]:
    match = _VIMEO_ID_RE.search(url)
    if not match:
        return None
    return f"https://player.vimeo.com/video/{match.group(1)}"


def _gallery(content: Mapping[str, Any]) -> List[GalleryImage]:
    urls = _strings(content, "galleryUrls")
    raw_captions = content.get("galleryCaptions")
    captions = raw_captions[: len(urls)] if isinstance(raw_captions, list) else []
    images = []
    for index, url in enumerate(urls):
        if not url.strip():
            continue
        caption = captions[index] if index < len(captions) else ""
        images.append(GalleryImage(url=url, caption=caption if isinstance(caption, str) else ""))
    return images


def _youtube_embeds(urls: List[str]) -> List[str]:
    embeds = []
    for url in urls:
        embed = youtube_embed_url(url)
        if embed is None:
            logger.debug("Dropping YouTube URL without a video id: %r", url)
            continue
        embeds.append(embed)
    return embeds


def _other_videos(content: Mapping[str, Any]) -> List[OtherVideo]:
    videos = []
    for url in _strings(content, "otherVideoUrls"):
        url = url.strip()
        if url:
            videos.append(OtherVideo(url=url, embed_src=vimeo_embed_url(url) or ""))
    return videos


def _social_links(content: Mapping[str, Any]) -> List[SocialLink]:
    links = []
    for key, kind, label in _SOCIAL_PLATFORMS:
        url = _text(content, key)
        if url:
            links.append(SocialLink(kind=kind, label=label, url=url))
    other_url = _text(content, "otherLinkUrl")
    if other_url:
        label = _text(content, "otherLinkLabel") or DEFAULT_OTHER_LINK_LABEL
        links.append(SocialLink(kind="other", label=label, url=other_url))
    return links


def _ctas(content: Mapping[str, Any]) -> List[CallToAction]:
    ctas = []
    for label_key, url_key, tier in _CTA_KEYS:
        label = _text(content, label_key)
        url = _text(content, url_key)
        if label and url:
            ctas.append(CallToAction(label=label, url=url, tier=tier))
    return ctas


def _section_titles(content: Mapping[str, Any]) -> SectionTitles:
    titles: Dict[str, str] = {
        name: _text(content, OVERRIDE_KEYS[name]) or default
        for name, default in DEFAULT_SECTION_TITLES.items()
    }
    return SectionTitles(**titles)


def _services(content: Mapping[str, Any]) -> List[ParsedService]:
    services = [
        ParsedService(
            name=_text(s, "name", trim=False),
            description=_text(s, "description", trim=False),
            image=_text(s, "image", trim=False),
            duration=_text(s, "duration", trim=False),
            price=_text(s, "price", trim=False),
            category=_text(s, "category"),
        )
        for s in _records(content, "services")
    ]
    return [s for s in services if s.name.strip()]


def _faq(content: Mapping[str, Any]) -> List[ParsedFaq]:
    items = [
        ParsedFaq(question=_text(f, "question", trim=False), answer=_text(f, "answer", trim=False))
        for f in _records(content, "faq")
    ]
    return [f for f in items if f.question.strip()]


def _testimonials(content: Mapping[str, Any]) -> List[ParsedTestimonial]:
    items = [
        ParsedTestimonial(
            quote=_text(t, "quote", trim=False),
            author=_text(t, "author", trim=False),
            photo=_text(t, "photo", trim=False),
            rating=_text(t, "rating", trim=False),
        )
        for t in _records(content, "testimonials")
    ]
    return [t for t in items if t.quote.strip()]


def _team(content: Mapping[str, Any]) -> List[ParsedTeamMember]:
    members = [
        ParsedTeamMember(
            name=_text(m, "name", trim=False),
            role=_text(m, "role", trim=False),
            photo=_text(m, "photo", trim=False),
            bio=_text(m, "bio", trim=False),
        )
        for m in _records(content, "team")
    ]
    return [m for m in members if m.name.strip()]


def _certifications(content: Mapping[str, Any]) -> List[ParsedCertification]:
    items = [
        ParsedCertification(title=_text(c, "title", trim=False), image=_text(c, "image", trim=False))
        for c in _records(content, "certifications")
    ]
    return [c for c in items if c.title.strip() or c.image.strip()]


def _has_contact(fields: Dict[str, Any]) -> bool:
    """True when the contact section would list at least one bullet."""
    if fields["service_area_only"]:
        location = (fields["service_area_regions"],)
    else:
        location = tuple(
            fields[key] for key in ("address", "address_locality", "address_region", "postal_code", "country")
        )
    map_link = fields["map_query"] if fields["show_map_link"] else ""
    others = tuple(
        fields[key]
        for key in (
            "location_name", "address_description", "area_served", "map_embed_url", "contact_preference",
            "phone", "phone2", "email", "email2", "whats_app_href", "payment_methods", "parking",
            "accessibility_wheelchair", "service_options", "languages_spoken", "other_amenities",
        )
    )
    return any(location + (map_link,) + others)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_site_content(
    content: Optional[Mapping[str, Any]],
    identity: SiteIdentity,
    site_base_url: str = "",
    now: Optional[datetime] = None,
) -> ParsedView:
    """Normalise one locale's *content* for rendering.

    Args:
        content:       Raw locale content (``draft_content["en"]`` or similar).
        identity:      Slug, business type and row-level country of the site.
        site_base_url: Public base URL used for canonical, form and share links.
        now:           Reference time for the open/closed badge and copyright
                       year; defaults to the current UTC time.
    """
    if not isinstance(content, Mapping):
        content = {}
    now = now or datetime.now(timezone.utc)
    slug = identity.slug
    base = site_base_url.rstrip("/")

    business_name = _text(content, "businessName") or slug or "Site"

    address = _text(content, "address", trim=False)
    address_locality = _text(content, "addressLocality")
    address_region = _text(content, "addressRegion")
    postal_code = _text(content, "postalCode")
    raw_country = content.get("country")
    country_code = raw_country if isinstance(raw_country, str) else (identity.country or "")
    country = get_country_label(country_code)
    map_query = ", ".join(
        part for part in (address, address_locality, address_region, postal_code, country) if part
    )

    gallery = _gallery(content)
    hero_image_raw = _text(content, "heroImage", trim=False)
    hero_image = hero_image_raw or ("" if gallery else PLACEHOLDER_HERO_IMAGE)

    youtube_urls = [u for u in _strings(content, "youtubeUrls") if u.strip()]
    youtube_embeds = _youtube_embeds(youtube_urls)
    other_videos = _other_videos(content)

    business_hours = _text(content, "businessHours", trim=False)
    special_hours = _text(content, "specialHours", trim=False)
    tz_name = _text(content, "timezone", trim=False)
    open_status = (
        get_open_now_status(tz_name, business_hours, now) if tz_name and business_hours else None
    )

    fields: Dict[str, Any] = dict(
        slug=slug,
        business_name=business_name,
        legal_name=_text(content, "legalName"),
        tagline=_text(content, "tagline"),
        logo=_text(content, "logo", trim=False),
        favicon=_text(content, "favicon"),
        business_type_label=business_type_label(identity.business_type),
        short_desc=_text(content, "shortDescription", trim=False),
        about=_text(content, "about", trim=False),
        year_established=_text(content, "yearEstablished", trim=False),
        price_range=_text(content, "priceRange"),
        meta_title=_text(content, "metaTitle"),
        meta_description=_text(content, "metaDescription"),
        keywords=_text(content, "keywords"),
        robots_meta=_text(content, "robotsMeta"),
        custom_css_url=_text(content, "customCssUrl"),
        theme_color=_text(content, "themeColor"),
        address=address,
        address_locality=address_locality,
        address_region=address_region,
        postal_code=postal_code,
        country_code=country_code,
        country=country,
        area_served=_text(content, "areaServed", trim=False),
        address_description=_text(content, "addressDescription"),
        location_name=_text(content, "locationName"),
        service_area_only=_flag(content, "serviceAreaOnly"),
        service_area_regions=_text(content, "serviceAreaRegions"),
        map_query=map_query,
        map_embed_url=_text(content, "mapEmbedUrl"),
        show_map_link=_flag(content, "showMapLink", default=True),
        directions_label=_text(content, "directionsLabel") or DEFAULT_DIRECTIONS_LABEL,
        phone=_text(content, "phone", trim=False),
        phone2=_text(content, "phone2"),
        email=_text(content, "email", trim=False),
        email2=_text(content, "email2"),
        whats_app=_text(content, "whatsApp", trim=False),
        whats_app_href=whatsapp_href(_text(content, "whatsApp", trim=False)),
        contact_preference=_text(content, "contactPreference"),
        payment_methods=_text(content, "paymentMethods"),
        parking=_text(content, "parking"),
        accessibility_wheelchair=_text(content, "accessibilityWheelchair"),
        service_options=_text(content, "serviceOptions"),
        languages_spoken=_text(content, "languagesSpoken"),
        other_amenities=_text(content, "otherAmenities"),
        contact_form_success_message=_text(content, "contactFormSuccessMessage"),
        contact_form_subject=_text(content, "contactFormSubject"),
        business_hours=business_hours,
        special_hours=special_hours,
        timezone=tz_name,
        timezone_label=tz_name.replace("_", " "),
        open_status=open_status,
        hero_image_raw=hero_image_raw,
        hero_image=hero_image,
        gallery=gallery,
        youtube_urls=youtube_urls,
        youtube_embeds=youtube_embeds,
        other_videos=other_videos,
        services_intro=_text(content, "servicesIntro"),
        services=_services(content),
        faq=_faq(content),
        testimonials=_testimonials(content),
        team=_team(content),
        certifications=_certifications(content),
        social_links=_social_links(content),
        ctas=_ctas(content),
        booking_enabled=_flag(content, "bookingEnabled"),
        booking_slot_duration=_text(content, "bookingSlotDuration"),
        booking_lead_time=_text(content, "bookingLeadTime"),
        booking_url=_text(content, "bookingUrl"),
        titles=_section_titles(content),
        announcement_bar=_text(content, "announcementBar"),
        footer_text=_text(content, "footerText"),
        custom_domain_display=_text(content, "customDomainDisplay"),
        show_back_to_top=_flag(content, "showBackToTop"),
        newsletter_label=_text(content, "newsletterLabel"),
        newsletter_url=_text(content, "newsletterUrl"),
        share_section_title=_text(content, "shareSectionTitle"),
        faq_as_accordion=_flag(content, "faqAsAccordion"),
        canonical_url=f"{base}/{quote(slug)}" if base else "",
        contact_form_action=f"{base}/api/sites/{quote(slug)}/contact",
        copyright_year=now.year,
    )

    fields.update(
        has_about=bool(fields["about"] or fields["year_established"] or fields["price_range"]),
        has_services=bool(fields["services"]),
        has_contact=_has_contact(fields),
        has_social=bool(fields["social_links"]),
        has_hours=bool(business_hours or special_hours or tz_name),
        has_gallery=bool(gallery),
        has_videos=bool(youtube_embeds),
        has_other_videos=bool(other_videos),
        has_booking=fields["booking_enabled"],
        has_faq=bool(fields["faq"]),
        has_testimonials=bool(fields["testimonials"]),
        has_team=bool(fields["team"]),
        has_certifications=bool(fields["certifications"]),
        has_share=bool(fields["share_section_title"]),
        has_newsletter=_flag(content, "hasNewsletter")
        and bool(fields["newsletter_label"] or fields["newsletter_url"]),
    )
    return ParsedView(**fields)
