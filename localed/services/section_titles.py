"""Default English section headings.

Content keys ``<name>SectionTitle`` override these; a blank override falls
back to the default.  Shared by the normalizer (headings) and the assembler
(navigation labels).
"""

from typing import Dict

DEFAULT_SECTION_TITLES: Dict[str, str] = {
    "about": "About",
    "services": "What we offer",
    "contact": "Contact",
    "social": "Follow us",
    "hours": "Hours",
    "gallery": "Gallery",
    "videos": "Videos",
    "other_videos": "Other videos",
    "booking": "Book online",
    "faq": "FAQ",
    "testimonials": "Testimonials",
    "team": "Meet the team",
    "certifications": "Certifications & awards",
    "contact_form": "Contact us",
    "newsletter": "Newsletter",
}

# Content key carrying the override for each section.
OVERRIDE_KEYS: Dict[str, str] = {
    "about": "aboutSectionTitle",
    "services": "servicesSectionTitle",
    "contact": "contactSectionTitle",
    "social": "socialSectionTitle",
    "hours": "hoursSectionTitle",
    "gallery": "gallerySectionTitle",
    "videos": "videosSectionTitle",
    "other_videos": "otherVideosSectionTitle",
    "booking": "bookingSectionTitle",
    "faq": "faqSectionTitle",
    "testimonials": "testimonialsSectionTitle",
    "team": "teamSectionTitle",
    "certifications": "certificationsSectionTitle",
    "contact_form": "contactFormSectionTitle",
    "newsletter": "newsletterSectionTitle",
}

BOOKING_NAV_LABEL = "Book"
DEFAULT_DIRECTIONS_LABEL = "View on map"
DEFAULT_OTHER_LINK_LABEL = "Link"
DEFAULT_SUCCESS_MESSAGE = "Message sent. We'll get back to you soon."
PLACEHOLDER_HERO_IMAGE = "https://placehold.co/1200x400/e2e8f0/64748b?text=No+image"
