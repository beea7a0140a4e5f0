"""Tests for the published-site document assembler."""

import json
from datetime import datetime, timezone

import pytest
from bs4 import BeautifulSoup

from localed.models.site import SiteIdentity
from localed.services.published_html import (
    build_contact_thank_you_html,
    build_published_html,
    build_published_html_from_site,
    get_locale_content,
)

NOW = datetime(2025, 2, 17, 5, 0, tzinfo=timezone.utc)
BASE_URL = "https://localed.info"
IDENTITY = SiteIdentity(slug="joes-salon", business_type="salon")
XSS = "<script>alert(1)</script>"

# Heading text -> minimal content that makes the section render.
OPTIONAL_SECTIONS = {
    "About": {"about": "Since 1999"},
    "What we offer": {"services": [{"name": "Cut"}]},
    "Contact": {"phone": "555 0100"},
    "Follow us": {"facebookUrl": "https://facebook.com/joes"},
    "Hours": {"businessHours": "Mon-Fri 9-17"},
    "Gallery": {"galleryUrls": ["https://img/1.jpg"]},
    "Videos": {"youtubeUrls": ["https://youtu.be/dQw4w9WgXcQ"]},
    "Other videos": {"otherVideoUrls": ["https://vimeo.com/42"]},
    "Book online": {"bookingEnabled": True},
    "FAQ": {"faq": [{"question": "Parking?", "answer": "Yes"}]},
    "Testimonials": {"testimonials": [{"quote": "Great cut"}]},
    "Meet the team": {"team": [{"name": "Ann"}]},
    "Certifications & awards": {"certifications": [{"title": "Certified stylist"}]},
    "Share this site": {"shareSectionTitle": "Share this site"},
    "Newsletter": {"hasNewsletter": True, "newsletterUrl": "https://news.example.com"},
}

FULL_CONTENT = {
    "businessName": "Joe's Salon",
    "tagline": "Best in town",
    "shortDescription": "Cuts and colour in central Pune.",
    "about": "Family run.",
    "heroImage": "https://img/hero.jpg",
    "logo": "https://img/logo.png",
    "phone": "555 0100",
    "email": "joe@example.com",
    "address": "1 Main St",
    "addressLocality": "Pune",
    "country": "IN",
    "businessHours": "Mon-Fri 9-6",
    "timezone": "Asia/Kolkata",
    "galleryUrls": ["https://img/1.jpg", "https://img/hero.jpg", "https://img/2.jpg"],
    "testimonials": [
        {"quote": "Great", "rating": "5"},
        {"quote": "Good", "rating": "4"},
        {"quote": "Lovely", "rating": "5 stars"},
    ],
    "facebookUrl": "https://facebook.com/joes",
    "priceRange": "$$",
}


def _build(content, identity=IDENTITY, **kwargs):
    return build_published_html(content, identity, BASE_URL, now=NOW, **kwargs)


def _headings(html: str):
    return {h2.get_text() for h2 in BeautifulSoup(html, "lxml").find_all("h2")}


def _json_ld(html: str) -> dict:
    script = BeautifulSoup(html, "lxml").find("script", attrs={"type": "application/ld+json"})
    return json.loads(script.string)


class TestPublishedMeta:
    def test_title_with_tagline(self):
        meta = _build({"businessName": "Joe's Salon", "tagline": "Best in town"}).meta
        assert meta.title == "Joe's Salon — Best in town"

    def test_title_without_tagline(self):
        assert _build({"businessName": "Joe's Salon"}).meta.title == "Joe's Salon"

    def test_title_falls_back_to_slug(self):
        assert _build({}).meta.title == "joes-salon"

    def test_meta_title_override(self):
        meta = _build({"businessName": "Joe's Salon", "tagline": "x", "metaTitle": "Haircuts in Pune"}).meta
        assert meta.title == "Haircuts in Pune"

    def test_description_truncated(self):
        meta = _build({"shortDescription": "  " + "a" * 200}).meta
        assert meta.description == "a" * 160

    def test_meta_description_override(self):
        meta = _build({"shortDescription": "Short", "metaDescription": "For search engines"}).meta
        assert meta.description == "For search engines"

    def test_og_image_fallbacks(self):
        assert _build({"heroImage": "https://img/hero.jpg", "logo": "https://img/logo.png"}).meta.og_image == (
            "https://img/hero.jpg"
        )
        assert _build({"logo": "https://img/logo.png"}).meta.og_image == "https://img/logo.png"
        assert _build({}).meta.og_image is None
        assert _build({}).meta.description is None


class TestDocument:
    def test_is_deterministic(self):
        assert _build(FULL_CONTENT).html == _build(FULL_CONTENT).html

    def test_escapes_every_text_field(self):
        content = {
            key: XSS
            for key in (
                "businessName", "tagline", "shortDescription", "about", "address", "phone", "email",
                "businessHours", "specialHours", "footerText", "announcementBar", "legalName",
                "metaTitle", "metaDescription", "keywords", "shareSectionTitle",
            )
        }
        content["faq"] = [{"question": XSS, "answer": XSS}]
        content["services"] = [{"name": XSS, "description": XSS}]
        html = _build(content).html
        assert XSS not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    @pytest.mark.parametrize("heading", sorted(OPTIONAL_SECTIONS))
    def test_section_absent_without_data(self, heading):
        assert heading not in _headings(_build({}).html)

    @pytest.mark.parametrize("heading,content", sorted(OPTIONAL_SECTIONS.items()))
    def test_section_present_with_data(self, heading, content):
        assert heading in _headings(_build(content).html)

    def test_empty_content_renders_only_contact_form(self):
        assert _headings(_build({}).html) == {"Contact us"}

    def test_no_empty_contact_section_for_hidden_fields(self):
        soup = BeautifulSoup(_build({"serviceAreaRegions": "Pune"}).html, "lxml")
        assert soup.find("section", id="contact") is None
        assert soup.find("a", href="#contact") is None

    def test_body_order(self):
        content = {}
        for section_content in OPTIONAL_SECTIONS.values():
            content.update(section_content)
        content.update(shortDescription="Intro", ctaLabel="Call", ctaUrl="tel:555", showBackToTop=True)
        html = _build(content).html
        markers = [
            'href="#main-content"',
            "Welcome to joes-salon",
            "<header",
            'id="main-content"',
            "Intro</p>",
            'id="about"',
            'id="services"',
            'id="contact"',
            'id="social"',
            'id="hours"',
            'id="gallery"',
            'id="videos"',
            'id="other-videos"',
            'id="booking"',
            'id="faq"',
            'id="testimonials"',
            'id="team"',
            'id="certifications"',
            'id="share"',
            'id="contact-form"',
            'id="newsletter"',
            "Back to top",
            "<footer",
        ]
        positions = [html.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_head(self):
        content = dict(
            FULL_CONTENT,
            keywords="salon, pune",
            robotsMeta="index, follow",
            customCssUrl="https://cdn.example.com/site.css",
            themeColor="#112233",
            favicon="https://img/favicon.ico",
        )
        soup = BeautifulSoup(_build(content).html, "lxml")
        assert soup.find("title").get_text() == "Joe's Salon — Best in town"
        assert soup.find("meta", attrs={"name": "robots"})["content"] == "index, follow"
        assert soup.find("meta", attrs={"name": "keywords"})["content"] == "salon, pune"
        assert soup.find("link", attrs={"rel": "canonical"})["href"] == "https://localed.info/joes-salon"
        assert soup.find("meta", attrs={"property": "og:image"})["content"] == "https://img/hero.jpg"
        assert soup.find("meta", attrs={"name": "twitter:card"})["content"] == "summary_large_image"
        assert soup.find("link", attrs={"rel": "icon"})["href"] == "https://img/favicon.ico"
        assert soup.find("meta", attrs={"name": "theme-color"})["content"] == "#112233"
        stylesheets = [link["href"] for link in soup.find_all("link", attrs={"rel": "stylesheet"})]
        assert "https://cdn.example.com/site.css" in stylesheets

    def test_optional_head_tags_omitted(self):
        soup = BeautifulSoup(_build({}).html, "lxml")
        for name in ("robots", "description", "keywords", "theme-color"):
            assert soup.find("meta", attrs={"name": name}) is None
        assert soup.find("meta", attrs={"property": "og:image"}) is None
        assert soup.find("link", attrs={"rel": "icon"}) is None

    def test_favicon_falls_back_to_logo(self):
        soup = BeautifulSoup(_build({"logo": "https://img/logo.png"}).html, "lxml")
        assert soup.find("link", attrs={"rel": "icon"})["href"] == "https://img/logo.png"

    def test_robots_override(self):
        soup = BeautifulSoup(_build({"robotsMeta": "index"}, robots="noindex, nofollow").html, "lxml")
        assert soup.find("meta", attrs={"name": "robots"})["content"] == "noindex, nofollow"

    def test_json_ld(self):
        data = _json_ld(_build(FULL_CONTENT).html)
        assert data["@type"] == "LocalBusiness"
        assert data["name"] == "Joe's Salon"
        assert data["url"] == "https://localed.info/joes-salon"
        assert data["image"] == ["https://img/hero.jpg", "https://img/1.jpg", "https://img/2.jpg"]
        assert data["address"]["addressCountry"] == "IN"
        assert data["sameAs"] == ["https://facebook.com/joes"]
        assert data["aggregateRating"] == {
            "@type": "AggregateRating",
            "ratingValue": 4.7,
            "bestRating": 5,
            "reviewCount": 3,
        }

    def test_json_ld_cannot_break_out_of_script(self):
        html = _build({"businessName": "</script><script>alert(1)</script>"}).html
        assert "</script><script>alert(1)" not in html
        assert _json_ld(html)["name"] == "</script><script>alert(1)</script>"

    def test_copyright_year_follows_now(self):
        html = build_published_html({}, IDENTITY, BASE_URL, now=datetime(2031, 1, 1, tzinfo=timezone.utc)).html
        assert "© 2031 joes-salon" in html

    def test_contact_form_action(self):
        soup = BeautifulSoup(_build({}).html, "lxml")
        assert soup.find("form")["action"] == "https://localed.info/api/sites/joes-salon/contact"

    def test_html_lang(self):
        soup = BeautifulSoup(_build({}, locale="fr").html, "lxml")
        assert soup.find("html")["lang"] == "fr"


class TestFromSite:
    def _site(self, **overrides):
        site = {
            "id": "site-1",
            "slug": "joes-salon",
            "business_type": "salon",
            "country": "IN",
            "languages": ["fr", "en"],
            "draft_content": {"fr": {"businessName": "Salon Joe"}, "en": {"businessName": "Joe's Salon"}},
            "published_content": None,
        }
        site.update(overrides)
        return site

    def test_primary_locale_from_draft(self):
        page = build_published_html_from_site(self._site(), BASE_URL, now=NOW)
        assert page.meta.title == "Salon Joe"
        assert '<html lang="fr">' in page.html

    def test_published_content_preferred(self):
        site = self._site(published_content={"fr": {"businessName": "Salon Joe (live)"}})
        assert build_published_html_from_site(site, BASE_URL, now=NOW).meta.title == "Salon Joe (live)"

    def test_explicit_source(self):
        site = self._site(published_content={"fr": {"businessName": "Old"}})
        page = build_published_html_from_site(site, BASE_URL, now=NOW, source="draft_content")
        assert page.meta.title == "Salon Joe"

    def test_falls_back_to_english(self):
        site = self._site(languages=["de"])
        assert get_locale_content(site) == ("de", {"businessName": "Joe's Salon"})

    def test_defaults_to_english_locale(self):
        site = self._site(languages=None)
        assert get_locale_content(site)[0] == "en"

    def test_row_country_reaches_contact(self):
        html = build_published_html_from_site(self._site(), BASE_URL, now=NOW).html
        assert "India" in html


class TestThankYouPage:
    def test_success_message(self):
        site = {
            "slug": "joes-salon",
            "languages": ["en"],
            "draft_content": {"en": {"businessName": "Joe's Salon", "contactFormSuccessMessage": "Thanks, Joe will call."}},
        }
        soup = BeautifulSoup(build_contact_thank_you_html(site, BASE_URL), "lxml")
        assert "Thanks, Joe will call." in soup.get_text()
        assert soup.find("a")["href"] == "https://localed.info/joes-salon"

    def test_default_message(self):
        html = build_contact_thank_you_html({"slug": "joes-salon"}, BASE_URL)
        assert "Message sent. We&#39;ll get back to you soon." in html
