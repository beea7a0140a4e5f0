from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class ContactSubmissionRequest(BaseModel):
    """Fields posted by the published site's contact form."""

    name: str = Field(max_length=200)
    email: str = Field(max_length=320)
    message: str = Field(max_length=5000)
    phone: Optional[str] = Field(default=None, max_length=50)
    company: Optional[str] = Field(default=None, max_length=200)
    subject: Optional[str] = Field(default=None, max_length=200)
    website: Optional[str] = None

    @field_validator("name", "email", "message")
    @classmethod
    def _required_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("phone", "company", "subject", "website")
    @classmethod
    def _optional_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


def is_honeypot_filled(payload: Mapping[str, Any]) -> bool:
    """True when the hidden ``website`` field carries a value.

    Read from the raw payload, before the required fields are validated.
    """
    value = payload.get("website")
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


class ContactSubmissionResponse(BaseModel):
    ok: bool = True
