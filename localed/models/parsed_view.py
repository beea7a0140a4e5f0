"""Fully-defaulted projection of one locale's site content, used for rendering.

Every field holds a concrete value: strings may be empty, lists may be empty,
but nothing is missing or of the wrong type.  Built only by
:func:`localed.services.normalizer.parse_site_content`.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

SocialKind = Literal["facebook", "instagram", "youtube", "x", "linkedin", "tiktok", "other"]
CtaTier = Literal["primary", "secondary", "tertiary"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class OpenStatus(_Frozen):
    open: bool


class ParsedService(_Frozen):
    name: str
    description: str = ""
    image: str = ""
    duration: str = ""
    price: str = ""
    category: str = ""


class ParsedFaq(_Frozen):
    question: str
    answer: str = ""


class ParsedTestimonial(_Frozen):
    quote: str
    author: str = ""
    photo: str = ""
    rating: str = ""


class ParsedTeamMember(_Frozen):
    name: str
    role: str = ""
    photo: str = ""
    bio: str = ""


class ParsedCertification(_Frozen):
    title: str = ""
    image: str = ""


class GalleryImage(_Frozen):
    url: str
    caption: str = ""


class OtherVideo(_Frozen):
    url: str
    embed_src: str = ""  # set when the URL is a recognised Vimeo link


class SocialLink(_Frozen):
    kind: SocialKind
    label: str
    url: str


class CallToAction(_Frozen):
    label: str
    url: str
    tier: CtaTier


class SectionTitles(_Frozen):
    about: str
    services: str
    contact: str
    social: str
    hours: str
    gallery: str
    videos: str
    other_videos: str
    booking: str
    faq: str
    testimonials: str
    team: str
    certifications: str
    contact_form: str
    newsletter: str


class ParsedView(_Frozen):
    # Identity
    slug: str
    business_name: str
    legal_name: str
    tagline: str
    logo: str
    favicon: str
    business_type_label: str
    short_desc: str
    about: str
    year_established: str
    price_range: str

    # SEO / head
    meta_title: str
    meta_description: str
    keywords: str
    robots_meta: str
    custom_css_url: str
    theme_color: str

    # Location
    address: str
    address_locality: str
    address_region: str
    postal_code: str
    country_code: str
    country: str
    area_served: str
    address_description: str
    location_name: str
    service_area_only: bool
    service_area_regions: str
    map_query: str
    map_embed_url: str
    show_map_link: bool
    directions_label: str

    # Contact
    phone: str
    phone2: str
    email: str
    email2: str
    whats_app: str
    whats_app_href: str
    contact_preference: str
    payment_methods: str
    parking: str
    accessibility_wheelchair: str
    service_options: str
    languages_spoken: str
    other_amenities: str
    contact_form_success_message: str
    contact_form_subject: str

    # Hours
    business_hours: str
    special_hours: str
    timezone: str
    timezone_label: str
    open_status: Optional[OpenStatus] = None

    # Media
    hero_image_raw: str
    hero_image: str
    gallery: List[GalleryImage]
    youtube_urls: List[str]
    youtube_embeds: List[str]
    other_videos: List[OtherVideo]

    # Collections
    services_intro: str
    services: List[ParsedService]
    faq: List[ParsedFaq]
    testimonials: List[ParsedTestimonial]
    team: List[ParsedTeamMember]
    certifications: List[ParsedCertification]
    social_links: List[SocialLink]
    ctas: List[CallToAction]

    # Booking
    booking_enabled: bool
    booking_slot_duration: str
    booking_lead_time: str
    booking_url: str

    # Presentation
    titles: SectionTitles
    announcement_bar: str
    footer_text: str
    custom_domain_display: str
    show_back_to_top: bool
    newsletter_label: str
    newsletter_url: str
    share_section_title: str
    faq_as_accordion: bool

    # Rendering context
    canonical_url: str
    contact_form_action: str
    copyright_year: int

    # Section visibility
    has_about: bool
    has_services: bool
    has_contact: bool
    has_social: bool
    has_hours: bool
    has_gallery: bool
    has_videos: bool
    has_other_videos: bool
    has_booking: bool
    has_faq: bool
    has_testimonials: bool
    has_team: bool
    has_certifications: bool
    has_share: bool
    has_newsletter: bool
