"""schema.org ``LocalBusiness`` JSON-LD for published sites.

Only properties with a value are emitted; blank strings and empty lists are
left out rather than serialised as empty or null.

See https://schema.org/LocalBusiness
"""

import json
import math
import re
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

_STARS_SUFFIX_RE = re.compile(r"\s*stars?$", re.IGNORECASE)
# Leading decimal number, the same prefix JavaScript's parseFloat accepts.
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

BEST_RATING = 5

# Characters that could close the surrounding <script> or open an HTML comment.
_SCRIPT_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


class LocalBusinessSchemaInput(BaseModel):
    name: str
    url: str
    description: str = ""
    image: Union[str, List[str]] = ""
    address: str = ""
    address_locality: str = ""
    address_region: str = ""
    postal_code: str = ""
    address_country: str = ""
    telephone: str = ""
    email: str = ""
    opening_hours: str = ""
    same_as: List[str] = Field(default_factory=list)
    price_range: str = ""
    ratings: List[str] = Field(default_factory=list)


def parse_rating(value: str) -> Optional[float]:
    """``"4.5"`` or ``"4 stars"`` -> number; ``None`` unless it lies in [0, 5]."""
    match = _LEADING_FLOAT_RE.match(_STARS_SUFFIX_RE.sub("", value.strip()).strip())
    if not match:
        return None
    rating = float(match.group(0))
    if math.isnan(rating) or rating < 0 or rating > BEST_RATING:
        return None
    return rating


def build_aggregate_rating(ratings: Iterable[str]) -> Optional[Dict[str, Any]]:
    """Average every parseable rating, or ``None`` when there is none.

    ``reviewCount`` counts only the accepted ratings.
    """
    values = [v for v in (parse_rating(r) for r in ratings if r) if v is not None]
    if not values:
        return None
    average = sum(values) / len(values)
    return {
        "@type": "AggregateRating",
        "ratingValue": math.floor(average * 10 + 0.5) / 10,
        "bestRating": BEST_RATING,
        "reviewCount": len(values),
    }


def _image(value: Union[str, List[str]]) -> Union[str, List[str], None]:
    if isinstance(value, list):
        urls = [u.strip() for u in value if u.strip()]
        if not urls:
            return None
        return urls[0] if len(urls) == 1 else urls
    return value.strip() or None


def build_local_business_schema(data: LocalBusinessSchemaInput) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "LocalBusiness",
        "name": data.name,
        "url": data.url,
    }

    if data.description.strip():
        schema["description"] = data.description.strip()

    image = _image(data.image)
    if image:
        schema["image"] = image

    if data.telephone.strip():
        schema["telephone"] = data.telephone.strip()
    if data.email.strip():
        schema["email"] = data.email.strip()

    address_parts = (
        ("streetAddress", data.address),
        ("addressLocality", data.address_locality),
        ("addressRegion", data.address_region),
        ("postalCode", data.postal_code),
        ("addressCountry", data.address_country),
    )
    address = {key: value.strip() for key, value in address_parts if value.strip()}
    if address:
        schema["address"] = {"@type": "PostalAddress", **address}

    if data.opening_hours.strip():
        schema["openingHours"] = data.opening_hours.strip()

    same_as = [u.strip() for u in data.same_as if u.strip()]
    if same_as:
        schema["sameAs"] = same_as

    if data.price_range.strip():
        schema["priceRange"] = data.price_range.strip()

    aggregate = build_aggregate_rating(data.ratings)
    if aggregate:
        schema["aggregateRating"] = aggregate

    return schema


def to_json_ld_script(data: LocalBusinessSchemaInput) -> str:
    """Serialised schema, safe to place verbatim inside ``<script type="application/ld+json">``."""
    body = json.dumps(build_local_business_schema(data), ensure_ascii=False, separators=(",", ":"))
    return "".join(_SCRIPT_ESCAPES.get(ch, ch) for ch in body)
