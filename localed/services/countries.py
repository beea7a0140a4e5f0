"""ISO 3166-1 alpha-2 country codes supported in the business location form."""

from typing import Dict

COUNTRY_LABELS: Dict[str, str] = {
    "IN": "India",
    "US": "United States",
    "GB": "United Kingdom",
    "AE": "United Arab Emirates",
    "AU": "Australia",
    "CA": "Canada",
    "DE": "Germany",
    "FR": "France",
    "SG": "Singapore",
    "MY": "Malaysia",
    "SA": "Saudi Arabia",
    "ZA": "South Africa",
    "KE": "Kenya",
    "NG": "Nigeria",
    "EG": "Egypt",
    "PK": "Pakistan",
    "BD": "Bangladesh",
    "LK": "Sri Lanka",
    "NP": "Nepal",
    "ID": "Indonesia",
    "PH": "Philippines",
    "TH": "Thailand",
    "VN": "Vietnam",
    "JP": "Japan",
    "KR": "South Korea",
    "CN": "China",
    "HK": "Hong Kong",
    "NZ": "New Zealand",
    "IE": "Ireland",
    "NL": "Netherlands",
    "ES": "Spain",
    "IT": "Italy",
    "BR": "Brazil",
    "MX": "Mexico",
    "AR": "Argentina",
    "PL": "Poland",
    "TR": "Turkey",
    "RU": "Russia",
}


def get_country_label(code: str) -> str:
    """Return the display name for *code* (``"IN"`` -> ``"India"``).

    Unknown codes are returned unchanged so free-text countries still display.
    """
    if not code:
        return ""
    return COUNTRY_LABELS.get(code, code)
