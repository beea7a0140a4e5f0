"""Recommended pixel sizes per image role.

Renderers stamp these onto ``<img width height>`` to avoid layout shift; the
editor shows :func:`get_recommended_dimension_hint` next to upload fields.
"""

from typing import Dict, Literal, NamedTuple

ImageRole = Literal[
    "hero",
    "gallery",
    "logo",
    "favicon",
    "service",
    "team",
    "testimonial",
    "certification",
]


class ImageDimension(NamedTuple):
    width: int
    height: int
    label: str
    note: str = ""


_DIMENSIONS: Dict[str, ImageDimension] = {
    "hero": ImageDimension(1200, 600, "1200 × 600 px", "Wide banner (2:1); displayed with 21:9 aspect on site."),
    "gallery": ImageDimension(800, 800, "800 × 800 px", "Square; displayed as square thumbnails."),
    "logo": ImageDimension(200, 200, "200 × 200 px", "Square or landscape; max height 40px on site."),
    "favicon": ImageDimension(32, 32, "32 × 32 px", "Small icon for browser tab; 64×64 also works."),
    "service": ImageDimension(400, 300, "400 × 300 px", "4:3 aspect; displayed as a compact thumbnail."),
    "team": ImageDimension(400, 400, "400 × 400 px", "Square; displayed as a circle."),
    "testimonial": ImageDimension(200, 200, "200 × 200 px", "Square; displayed as a small circle."),
    "certification": ImageDimension(128, 128, "128 × 128 px", "Badge or logo; max height 64px on site."),
}

IMAGE_ROLES = tuple(_DIMENSIONS)


def get_recommended_image_dimension(role: ImageRole) -> ImageDimension:
    """Return the recommended dimension for *role*.

    Raises:
        KeyError: if *role* is not one of :data:`IMAGE_ROLES`.
    """
    return _DIMENSIONS[role]


def get_recommended_dimension_hint(role: ImageRole) -> str:
    return f"Recommended: {_DIMENSIONS[role].label}"
