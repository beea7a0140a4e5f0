"""HTML building blocks for the published-site renderers.

All markup is composed as :class:`markupsafe.Markup`.  ``Markup.format`` and
``Markup.join`` escape every plain ``str`` argument, so user content can only
reach the document escaped; only other ``Markup`` values pass through as-is.
"""

import re
from typing import Iterable
from urllib.parse import quote, urlparse

from markupsafe import Markup

from localed.services.image_dimensions import ImageRole, get_recommended_image_dimension

EMPTY = Markup("")

LINK_CLASS = "text-blue-600 underline hover:text-blue-800"

_ALLOWED_SCHEMES = {"http", "https", "mailto", "tel"}

# Browsers ignore ASCII control characters and spaces inside a scheme.
_SCHEME_NOISE_RE = re.compile(r"[\x00-\x20]")


def join(parts: Iterable[Markup], separator: str = "\n") -> Markup:
    """Join the non-empty *parts*."""
    return Markup(separator).join(part for part in parts if part)


def encode_component(value: str) -> str:
    """Percent-encode *value* for a query string, like JavaScript's ``encodeURIComponent``."""
    return quote(value, safe="!~*'()")


def safe_url(url: str) -> str:
    """Return *url* unless it uses a scheme other than http(s)/mailto/tel.

    Relative URLs pass through.  Anything else (``javascript:``, ``data:``)
    becomes ``#``.
    """
    scheme = urlparse(_SCHEME_NOISE_RE.sub("", url)).scheme.lower()
    if scheme and scheme not in _ALLOWED_SCHEMES:
        return "#"
    return url


def img(src: str, role: ImageRole, css_class: str, alt: str = "", lazy: bool = False) -> Markup:
    dim = get_recommended_image_dimension(role)
    loading = Markup(' loading="lazy"') if lazy else EMPTY
    return Markup('<img src="{}" alt="{}" class="{}" width="{}" height="{}"{} />').format(
        safe_url(src), alt, css_class, dim.width, dim.height, loading
    )


def external_link(href: str, text: str, css_class: str = LINK_CLASS) -> Markup:
    return Markup('<a href="{}" target="_blank" rel="noopener noreferrer" class="{}">{}</a>').format(
        safe_url(href), css_class, text
    )
