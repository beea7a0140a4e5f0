"""Owner notification email for contact-form submissions, sent through Resend."""

import logging
from typing import Optional

import httpx

from localed.config import email_settings
from localed.models.contact import ContactSubmissionRequest

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_EMAIL_SUBJECT = "New message from your site"


def build_subject(submission: ContactSubmissionRequest, site_name: str, email_subject: Optional[str] = None) -> str:
    """Configured subject, else the visitor's subject, else a default naming the site."""
    if email_subject and email_subject.strip():
        return email_subject.strip()
    if submission.subject:
        return submission.subject
    return f"{DEFAULT_EMAIL_SUBJECT} ({site_name})" if site_name else DEFAULT_EMAIL_SUBJECT


def build_body(submission: ContactSubmissionRequest) -> str:
    lines = [f"Name: {submission.name}", f"Email: {submission.email}"]
    if submission.phone:
        lines.append(f"Phone: {submission.phone}")
    if submission.company:
        lines.append(f"Company: {submission.company}")
    lines += ["", "Message:", submission.message]
    return "\n".join(lines)


async def send_contact_notification(
    to: str,
    submission: ContactSubmissionRequest,
    site_name: str,
    email_subject: Optional[str] = None,
) -> bool:
    """Email *submission* to the site owner at *to*.

    Returns True when Resend accepted the message, False when skipped (no
    recipient or API key) or when delivery failed.  Never raises: the
    submission is already stored, so a failed email must not fail the request.
    """
    to = (to or "").strip()
    if not to or not email_settings.api_key:
        return False

    payload = {
        "from": email_settings.sender,
        "to": [to],
        "subject": build_subject(submission, site_name, email_subject),
        "text": build_body(submission),
    }
    try:
        async with httpx.AsyncClient(timeout=email_settings.timeout) as client:
            response = await client.post(
                RESEND_API_URL,
                json=payload,
                headers={"Authorization": f"Bearer {email_settings.api_key}"},
            )
    except httpx.HTTPError as exc:
        logger.warning("Contact notification failed", extra={"error": str(exc)})
        return False

    if response.is_error:
        logger.warning("Resend rejected contact notification", extra={"status_code": response.status_code})
        return False
    return True
