"""Section renderers for the published single-page site.

Each ``render_*`` function takes the normalised :class:`ParsedView` and
returns :class:`~markupsafe.Markup`.  An empty result means the section is
omitted entirely: no heading, no container.  Renderers never inspect raw
content; visibility comes from the view's ``has_*`` flags.
"""

from typing import Callable, List, Tuple

from markupsafe import Markup

from localed.models.parsed_view import ParsedView, SocialLink
from localed.services.markup import (
    EMPTY,
    LINK_CLASS,
    encode_component,
    external_link,
    img,
    join,
    safe_url,
)
from localed.services.section_titles import BOOKING_NAV_LABEL

SectionRenderer = Callable[[ParsedView], Markup]

SECTION_CLASS = "mt-12 border-t border-gray-100 pt-10"
HEADING_CLASS = "text-xl font-semibold text-gray-900 tracking-tight"
BODY_CLASS = "text-base text-gray-700 leading-relaxed"
CARD_CLASS = "rounded-xl border border-gray-200 bg-white p-5 shadow-sm"
MUTED_CLASS = "text-gray-600"

_BUTTON_CLASSES = {
    "primary": (
        "inline-flex items-center justify-center rounded-lg bg-gray-900 px-6 py-3 text-base "
        "font-medium text-white shadow-sm transition hover:bg-gray-800"
    ),
    "secondary": (
        "inline-flex items-center justify-center rounded-lg border border-gray-300 bg-white px-6 "
        "py-3 text-base font-medium text-gray-700 shadow-sm transition hover:bg-gray-50"
    ),
    "tertiary": (
        "inline-flex items-center justify-center rounded-lg border border-gray-200 bg-white px-6 "
        "py-3 text-sm font-medium text-gray-600 transition hover:bg-gray-50"
    ),
}

_SOCIAL_GLYPHS = {
    "facebook": "f",
    "instagram": "◎",
    "youtube": "▶",
    "x": "𝕏",
    "linkedin": "in",
    "tiktok": "♪",
    "other": "↗",
}

_VIDEO_IFRAME_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
)


def _section(title: str, body: Markup, section_id: str = "") -> Markup:
    id_attr = Markup(' id="{}"').format(section_id) if section_id else EMPTY
    return Markup('<section{} class="{}">\n<h2 class="{}">{}</h2>\n{}\n</section>').format(
        id_attr, SECTION_CLASS, HEADING_CLASS, title, body
    )


def _li(text: str, css_class: str = "") -> Markup:
    if not text:
        return EMPTY
    if css_class:
        return Markup('<li class="{}">{}</li>').format(css_class, text)
    return Markup("<li>{}</li>").format(text)


def _labelled_li(label: str, text: str, css_class: str = MUTED_CLASS) -> Markup:
    if not text:
        return EMPTY
    return _li(f"{label}: {text}", css_class)


def _contact_link(label: str, value: str, scheme: str) -> Markup:
    if not value:
        return EMPTY
    return Markup('<li>{}: <a href="{}" class="{}">{}</a></li>').format(
        label, f"{scheme}:{encode_component(value)}", LINK_CLASS, value
    )


# ---------------------------------------------------------------------------
# Page chrome
# ---------------------------------------------------------------------------

def navigation_links(view: ParsedView) -> List[Tuple[str, str]]:
    """``(href, label)`` pairs for every navigable section that will render."""
    titles = view.titles
    candidates = (
        (view.has_about, "#about", titles.about),
        (view.has_services, "#services", titles.services),
        (view.has_contact, "#contact", titles.contact),
        (view.has_hours, "#hours", titles.hours),
        (view.has_gallery, "#gallery", titles.gallery),
        (view.has_booking, "#booking", BOOKING_NAV_LABEL),
        (view.has_faq, "#faq", titles.faq),
        (view.has_testimonials, "#testimonials", titles.testimonials),
        (view.has_team, "#team", titles.team),
        (view.has_certifications, "#certifications", titles.certifications),
        (True, "#contact-form", titles.contact_form),
    )
    return [(href, label) for visible, href, label in candidates if visible]


def render_skip_link(view: ParsedView) -> Markup:
    return Markup(
        '<a href="#main-content" class="sr-only focus:not-sr-only focus:absolute focus:top-4 '
        'focus:left-4 z-50 rounded bg-gray-900 px-3 py-2 text-white text-sm">Skip to content</a>'
    )


def render_announcement(view: ParsedView) -> Markup:
    text = view.announcement_bar or f"Welcome to {view.business_name}"
    return Markup('<div class="bg-gray-900 text-white text-center py-2 px-4 text-sm">{}</div>').format(text)


def render_header(view: ParsedView) -> Markup:
    logo = img(view.logo, "logo", "h-10 max-h-10 w-auto flex-shrink-0 object-contain") if view.logo else EMPTY
    tagline = (
        Markup('<p class="mt-0.5 text-xs text-gray-600 sm:text-sm">{}</p>').format(view.tagline)
        if view.tagline
        else EMPTY
    )
    badge = (
        Markup(
            '<span class="hidden sm:inline-flex flex-shrink-0 items-center rounded-full bg-gray-100 '
            'px-2.5 py-0.5 text-xs font-medium text-gray-700">{}</span>'
        ).format(view.business_type_label)
        if view.business_type_label
        else EMPTY
    )
    nav_items = join(
        (
            Markup('<a href="{}" class="text-gray-700 hover:text-gray-900 hover:underline whitespace-nowrap">{}</a>').format(
                href, label
            )
            for href, label in navigation_links(view)
        ),
        separator="",
    )
    return Markup(
        '<header class="sticky top-0 z-10 border-b border-gray-200 bg-white/95 shadow-sm backdrop-blur">\n'
        '<div class="mx-auto max-w-4xl px-4 py-3 sm:px-6">\n'
        '<div class="flex flex-wrap items-center justify-between gap-3">\n'
        '<div class="flex items-center gap-4 min-w-0">{}'
        '<div class="min-w-0"><h1 class="text-xl font-bold tracking-tight text-gray-900 sm:text-2xl">{}</h1>{}</div>'
        "{}</div>\n"
        '<nav class="flex flex-wrap items-center gap-x-4 gap-y-1 text-sm" aria-label="Main navigation">{}</nav>\n'
        "</div>\n</div>\n</header>"
    ).format(logo, view.business_name, tagline, badge, nav_items)


def render_hero(view: ParsedView) -> Markup:
    if not view.hero_image:
        return EMPTY
    return Markup('<div class="w-full overflow-hidden bg-gray-100 aspect-[21/9] min-h-[14rem]">{}</div>').format(
        img(view.hero_image, "hero", "h-full w-full object-cover")
    )


# ---------------------------------------------------------------------------
# Body sections, in page order
# ---------------------------------------------------------------------------

def render_short_description(view: ParsedView) -> Markup:
    if not view.short_desc:
        return EMPTY
    return Markup('<p class="text-lg text-gray-700 leading-relaxed sm:text-xl">{}</p>').format(view.short_desc)


def render_ctas(view: ParsedView) -> Markup:
    if not view.ctas:
        return EMPTY
    buttons = join(
        (external_link(cta.url, cta.label, _BUTTON_CLASSES[cta.tier]) for cta in view.ctas),
    )
    return Markup('<div class="mt-6 flex flex-wrap gap-3">\n{}\n</div>').format(buttons)


def render_about(view: ParsedView) -> Markup:
    if not view.has_about:
        return EMPTY
    body = join(
        [
            Markup('<p class="mt-2 {}">{}</p>').format(BODY_CLASS, view.year_established)
            if view.year_established
            else EMPTY,
            Markup('<p class="mt-2 {}">Price range: {}</p>').format(BODY_CLASS, view.price_range)
            if view.price_range
            else EMPTY,
            Markup('<p class="mt-3 {}">{}</p>').format(BODY_CLASS, view.about) if view.about else EMPTY,
        ]
    )
    return _section(view.titles.about, body, "about")


def render_services(view: ParsedView) -> Markup:
    if not view.has_services:
        return EMPTY
    items = []
    for service in view.services:
        details = " · ".join(part for part in (service.duration, service.price) if part)
        items.append(
            Markup('<li class="{}">{}</li>').format(
                CARD_CLASS,
                join(
                    [
                        Markup(
                            '<div class="mb-2 aspect-[4/3] w-full max-w-[240px] overflow-hidden rounded-lg bg-gray-100">{}</div>'
                        ).format(img(service.image, "service", "h-full w-full object-cover", lazy=True))
                        if service.image
                        else EMPTY,
                        Markup('<span class="text-xs font-medium uppercase text-gray-500">{}</span>').format(service.category)
                        if service.category
                        else EMPTY,
                        Markup('<span class="font-medium">{}</span>').format(service.name),
                        Markup('<p class="mt-1 text-sm text-gray-600">{}</p>').format(service.description)
                        if service.description
                        else EMPTY,
                        Markup('<p class="mt-1 text-sm text-gray-500">{}</p>').format(details) if details else EMPTY,
                    ],
                    separator="",
                ),
            )
        )
    intro = (
        Markup('<p class="mt-2 {}">{}</p>').format(BODY_CLASS, view.services_intro) if view.services_intro else EMPTY
    )
    body = join([intro, Markup('<ul class="mt-6 grid gap-4 sm:grid-cols-2">\n{}\n</ul>').format(join(items))])
    return _section(view.titles.services, body, "services")


def render_contact(view: ParsedView) -> Markup:
    """Contact bullets in fixed order; each appears only when its value is set."""
    if not view.has_contact:
        return EMPTY

    bullets: List[Markup] = [_li(view.location_name, "font-medium text-gray-900")]
    if not view.service_area_only:
        locality_line = ", ".join(p for p in (view.address_locality, view.address_region, view.postal_code) if p)
        bullets += [_li(view.address), _li(locality_line), _li(view.country)]
    elif view.service_area_regions:
        bullets.append(_li(f"Serves: {view.service_area_regions}", MUTED_CLASS))
    bullets += [_li(view.address_description, MUTED_CLASS), _li(view.area_served, MUTED_CLASS)]

    if view.show_map_link and view.map_query:
        map_href = f"https://www.google.com/maps/search/?api=1&query={encode_component(view.map_query)}"
        bullets.append(Markup("<li>{}</li>").format(external_link(map_href, view.directions_label)))
    if view.map_embed_url:
        bullets.append(
            Markup(
                '<li class="mt-2"><iframe src="{}" width="100%" height="200" style="max-width:560px;border:0" '
                'allowfullscreen loading="lazy" referrerpolicy="no-referrer-when-downgrade" title="Map"></iframe></li>'
            ).format(safe_url(view.map_embed_url))
        )

    bullets += [
        _labelled_li("Preferred", view.contact_preference),
        _contact_link("Phone", view.phone, "tel"),
        _contact_link("Phone 2", view.phone2, "tel"),
        _contact_link("Email", view.email, "mailto"),
        _contact_link("Email 2", view.email2, "mailto"),
        Markup("<li>{}</li>").format(external_link(view.whats_app_href, "Chat on WhatsApp"))
        if view.whats_app_href
        else EMPTY,
        _li(view.payment_methods, MUTED_CLASS),
        _labelled_li("Parking", view.parking),
        _labelled_li("Accessibility", view.accessibility_wheelchair),
        _labelled_li("Service options", view.service_options),
        _labelled_li("Languages", view.languages_spoken),
        _li(view.other_amenities, MUTED_CLASS),
    ]
    body = Markup('<ul class="mt-4 space-y-2 {}">\n{}\n</ul>').format(BODY_CLASS, join(bullets))
    return _section(view.titles.contact, body, "contact")


def _social_list(links: List[SocialLink]) -> Markup:
    items = (
        Markup(
            '<li><a href="{}" target="_blank" rel="noopener noreferrer" class="inline-flex items-center gap-2 '
            'text-gray-700 hover:text-gray-900"><span class="social-icon social-icon-{}" aria-hidden="true">{}</span>'
            "<span>{}</span></a></li>"
        ).format(safe_url(link.url), link.kind, _SOCIAL_GLYPHS[link.kind], link.label)
        for link in links
    )
    return Markup('<ul class="mt-2 flex flex-wrap gap-4">{}</ul>').format(join(items, separator=""))


def render_social(view: ParsedView) -> Markup:
    if not view.has_social:
        return EMPTY
    return _section(view.titles.social, _social_list(view.social_links), "social")


def render_hours(view: ParsedView) -> Markup:
    if not view.has_hours:
        return EMPTY
    badge = EMPTY
    if view.open_status is not None:
        if view.open_status.open:
            badge_class, badge_text = "bg-green-100 text-green-800", "Open now"
        else:
            badge_class, badge_text = "bg-gray-100 text-gray-700", "Closed"
        badge = Markup(
            '<p class="mt-1"><span class="inline-flex items-center rounded-full {} px-2.5 py-0.5 text-sm font-medium">{}</span></p>'
        ).format(badge_class, badge_text)
    timezone_note = (
        Markup('<p class="mt-1 text-sm text-gray-500">All times in {}</p>').format(view.timezone_label)
        if view.timezone
        else EMPTY
    )
    hours = join([_li(view.business_hours), _li(view.special_hours, MUTED_CLASS)])
    hours_list = Markup('<ul class="mt-2 space-y-1 text-gray-700">\n{}\n</ul>').format(hours) if hours else EMPTY
    return _section(view.titles.hours, join([badge, timezone_note, hours_list]), "hours")


def render_gallery(view: ParsedView) -> Markup:
    if not view.has_gallery:
        return EMPTY
    figures = []
    for image in view.gallery:
        caption = (
            Markup('<figcaption class="mt-1 truncate text-xs text-gray-500">{}</figcaption>').format(image.caption)
            if image.caption
            else EMPTY
        )
        figures.append(
            Markup(
                '<figure class="overflow-hidden rounded-lg"><div class="aspect-square w-full overflow-hidden '
                'rounded-lg bg-gray-100">{}</div>{}</figure>'
            ).format(img(image.url, "gallery", "h-full w-full object-cover", alt=image.caption, lazy=True), caption)
        )
    body = Markup('<div class="mt-6 grid grid-cols-2 gap-4 sm:grid-cols-3">\n{}\n</div>').format(join(figures))
    return _section(view.titles.gallery, body, "gallery")


def _video_frame(src: str, title: str, allow: str) -> Markup:
    return Markup(
        '<div class="aspect-video w-full max-w-2xl overflow-hidden rounded-lg"><iframe src="{}" title="{}" '
        'allow="{}" allowfullscreen class="h-full w-full"></iframe></div>'
    ).format(safe_url(src), title, allow)


def render_videos(view: ParsedView) -> Markup:
    if not view.has_videos:
        return EMPTY
    frames = join(_video_frame(src, "YouTube video", _VIDEO_IFRAME_ALLOW) for src in view.youtube_embeds)
    return _section(view.titles.videos, Markup('<div class="mt-2 space-y-4">\n{}\n</div>').format(frames), "videos")


def render_other_videos(view: ParsedView) -> Markup:
    if not view.has_other_videos:
        return EMPTY
    items = (
        _video_frame(video.embed_src, "Video", "fullscreen")
        if video.embed_src
        else Markup("<p>{}</p>").format(external_link(video.url, video.url))
        for video in view.other_videos
    )
    body = Markup('<div class="mt-2 space-y-4">\n{}\n</div>').format(join(items))
    return _section(view.titles.other_videos, body, "other-videos")


def render_booking(view: ParsedView) -> Markup:
    if not view.has_booking:
        return EMPTY
    details = " ".join(
        part
        for part in (
            f"Slot duration: {view.booking_slot_duration}." if view.booking_slot_duration else "",
            view.booking_lead_time,
        )
        if part
    )
    body = join(
        [
            Markup('<p class="mt-2 {}">{}</p>').format(BODY_CLASS, details) if details else EMPTY,
            Markup('<p class="mt-4">{}</p>').format(
                external_link(view.booking_url, "Book now", _BUTTON_CLASSES["primary"])
            )
            if view.booking_url
            else EMPTY,
        ]
    )
    return _section(view.titles.booking, body, "booking")


def render_faq(view: ParsedView) -> Markup:
    """Render FAQ as ``<details>`` disclosures or as a definition list."""
    if not view.has_faq:
        return EMPTY
    if view.faq_as_accordion:
        entries = join(
            Markup(
                '<details class="{}"><summary class="cursor-pointer px-4 py-3 font-medium text-gray-900">{}</summary>'
                '<div class="border-t border-gray-200 px-4 py-3 text-gray-600">{}</div></details>'
            ).format(CARD_CLASS, item.question, item.answer)
            for item in view.faq
        )
        body = Markup('<div class="mt-2 space-y-2">\n{}\n</div>').format(entries)
    else:
        entries = join(
            Markup(
                '<div><dt class="font-medium text-gray-900">{}</dt><dd class="mt-1 text-gray-600">{}</dd></div>'
            ).format(item.question, item.answer)
            for item in view.faq
        )
        body = Markup('<dl class="mt-2 space-y-4">\n{}\n</dl>').format(entries)
    return _section(view.titles.faq, body, "faq")


def render_testimonials(view: ParsedView) -> Markup:
    if not view.has_testimonials:
        return EMPTY
    quotes = []
    for item in view.testimonials:
        quotes.append(
            Markup('<blockquote class="{}">{}</blockquote>').format(
                CARD_CLASS,
                join(
                    [
                        Markup('<div class="mb-2 h-12 w-12 shrink-0 overflow-hidden rounded-full bg-gray-100">{}</div>').format(
                            img(item.photo, "testimonial", "h-full w-full object-cover", lazy=True)
                        )
                        if item.photo
                        else EMPTY,
                        Markup('<p class="text-gray-700">{}</p>').format(item.quote),
                        Markup('<footer class="mt-2 text-sm text-gray-500">— {}</footer>').format(item.author)
                        if item.author
                        else EMPTY,
                        Markup('<p class="mt-1 text-sm text-amber-600">{}</p>').format(item.rating)
                        if item.rating
                        else EMPTY,
                    ],
                    separator="",
                ),
            )
        )
    body = Markup('<div class="mt-2 space-y-4">\n{}\n</div>').format(join(quotes))
    return _section(view.titles.testimonials, body, "testimonials")


def render_team(view: ParsedView) -> Markup:
    if not view.has_team:
        return EMPTY
    cards = []
    for member in view.team:
        cards.append(
            Markup('<div class="rounded-lg border border-gray-200 p-4">{}</div>').format(
                join(
                    [
                        Markup('<div class="mb-2 h-24 w-24 shrink-0 overflow-hidden rounded-full bg-gray-100">{}</div>').format(
                            img(member.photo, "team", "h-full w-full object-cover", lazy=True)
                        )
                        if member.photo
                        else EMPTY,
                        Markup('<p class="font-medium text-gray-900">{}</p>').format(member.name),
                        Markup('<p class="text-sm text-gray-600">{}</p>').format(member.role) if member.role else EMPTY,
                        Markup('<p class="mt-1 text-sm text-gray-700">{}</p>').format(member.bio) if member.bio else EMPTY,
                    ],
                    separator="",
                )
            )
        )
    body = Markup('<div class="mt-2 grid gap-4 sm:grid-cols-2">\n{}\n</div>').format(join(cards))
    return _section(view.titles.team, body, "team")


def render_certifications(view: ParsedView) -> Markup:
    if not view.has_certifications:
        return EMPTY
    badges = join(
        Markup('<div class="flex flex-col items-start rounded-lg border border-gray-200 p-4">{}</div>').format(
            join(
                [
                    img(cert.image, "certification", "h-16 max-h-16 w-auto object-contain", alt=cert.title, lazy=True)
                    if cert.image
                    else EMPTY,
                    Markup('<p class="mt-2 text-sm font-medium text-gray-900">{}</p>').format(cert.title)
                    if cert.title
                    else EMPTY,
                ],
                separator="",
            )
        )
        for cert in view.certifications
    )
    body = Markup('<div class="mt-2 flex flex-wrap gap-4">\n{}\n</div>').format(badges)
    return _section(view.titles.certifications, body, "certifications")


def share_links(view: ParsedView) -> List[Tuple[str, str]]:
    """``(label, href)`` share intents for the canonical page URL."""
    url = encode_component(view.canonical_url)
    text = encode_component(view.business_name)
    return [
        ("Twitter", f"https://twitter.com/intent/tweet?url={url}&text={text}"),
        ("Facebook", f"https://www.facebook.com/sharer/sharer.php?u={url}"),
        ("LinkedIn", f"https://www.linkedin.com/sharing/share-offsite/?url={url}"),
    ]


def render_share(view: ParsedView) -> Markup:
    if not view.has_share:
        return EMPTY
    items = join(Markup("<li>{}</li>").format(external_link(href, label)) for label, href in share_links(view))
    body = Markup(
        '<p class="mt-1 text-sm text-gray-600">Share this page</p>\n<ul class="mt-2 flex flex-wrap gap-3">\n{}\n</ul>'
    ).format(items)
    return _section(view.share_section_title, body, "share")


_FIELD_CLASS = "mt-1 w-full rounded border border-gray-300 px-3 py-2 text-gray-900"
_LABEL_CLASS = "block text-sm text-gray-600"


def _form_field(field: str, label: str, input_type: str, required: bool) -> Markup:
    required_attr = Markup(" required") if required else EMPTY
    if input_type == "textarea":
        control = Markup('<textarea id="contact-{0}" name="{0}" rows="4" class="{1}"{2}></textarea>').format(
            field, _FIELD_CLASS, required_attr
        )
    else:
        control = Markup('<input id="contact-{0}" name="{0}" type="{1}" class="{2}"{3} />').format(
            field, input_type, _FIELD_CLASS, required_attr
        )
    return Markup('<div><label for="contact-{}" class="{}">{}</label>{}</div>').format(
        field, _LABEL_CLASS, label, control
    )


def render_contact_form(view: ParsedView) -> Markup:
    """Always rendered.  Posts to the site's contact endpoint.

    The ``website`` input is a honeypot: moved off-screen and skipped by
    keyboard focus, it is left empty by people and filled in by form bots.
    """
    fields = join(
        [
            _form_field("name", "Name", "text", required=True),
            _form_field("email", "Email", "email", required=True),
            _form_field("phone", "Phone", "tel", required=False),
            _form_field("company", "Company", "text", required=False),
            _form_field("message", "Message", "textarea", required=True),
            Markup(
                '<div aria-hidden="true" style="position:absolute;left:-10000px;top:auto;width:1px;height:1px;overflow:hidden">'
                '<label for="contact-website">Website</label>'
                '<input id="contact-website" name="website" type="text" value="" tabindex="-1" autocomplete="off" /></div>'
            ),
            Markup('<button type="submit" class="rounded bg-gray-900 px-4 py-2 text-white">Send</button>'),
        ]
    )
    body = Markup('<form method="post" action="{}" class="mt-4 space-y-3 max-w-md">\n{}\n</form>').format(
        view.contact_form_action, fields
    )
    return _section(view.titles.contact_form, body, "contact-form")


def render_newsletter(view: ParsedView) -> Markup:
    if not view.has_newsletter:
        return EMPTY
    body = join(
        [
            Markup('<p class="mt-1 text-sm text-gray-600">{}</p>').format(view.newsletter_label)
            if view.newsletter_label
            else EMPTY,
            Markup('<p class="mt-2">{}</p>').format(external_link(view.newsletter_url, "Sign up"))
            if view.newsletter_url
            else EMPTY,
        ]
    )
    return _section(view.titles.newsletter, body, "newsletter")


def render_back_to_top(view: ParsedView) -> Markup:
    if not view.show_back_to_top:
        return EMPTY
    return Markup('<p class="mt-6 text-center"><a href="#" class="text-sm text-gray-500 hover:text-gray-700">Back to top</a></p>')


def render_footer(view: ParsedView) -> Markup:
    lines = join(
        [
            Markup('<div class="mb-4">{}</div>').format(_social_list(view.social_links)) if view.has_social else EMPTY,
            Markup('<p class="mb-2">{}</p>').format(view.footer_text) if view.footer_text else EMPTY,
            Markup('<p class="mb-2">{}</p>').format(view.custom_domain_display) if view.custom_domain_display else EMPTY,
            Markup('<p class="mb-2">Legal name: {}</p>').format(view.legal_name) if view.legal_name else EMPTY,
            Markup('<p class="mt-4 pt-4 border-t border-gray-200 text-gray-500">© {} {}. All rights reserved.</p>').format(
                view.copyright_year, view.business_name
            ),
        ]
    )
    return Markup(
        '<footer class="mt-12 border-t border-gray-200 bg-gray-50 px-4 py-6 sm:px-6">\n'
        '<div class="mx-auto max-w-4xl text-sm text-gray-600">\n{}\n</div>\n</footer>'
    ).format(lines)


# Order of everything inside ``#main-content``; the footer follows it.
MAIN_SECTIONS: Tuple[SectionRenderer, ...] = (
    render_short_description,
    render_ctas,
    render_about,
    render_services,
    render_contact,
    render_social,
    render_hours,
    render_gallery,
    render_videos,
    render_other_videos,
    render_booking,
    render_faq,
    render_testimonials,
    render_team,
    render_certifications,
    render_share,
    render_contact_form,
    render_newsletter,
    render_back_to_top,
)
