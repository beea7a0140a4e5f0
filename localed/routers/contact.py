import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from localed.dependencies import get_site_base_url, get_site_store
from localed.models.contact import ContactSubmissionRequest, ContactSubmissionResponse, is_honeypot_filled
from localed.routers.public import load_published_site
from localed.services.contact_notification import send_contact_notification
from localed.services.published_html import build_contact_thank_you_html, get_locale_content
from localed.services.site_store import SiteStore, SiteStoreError

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Raw JSON object or form fields of the request body.

    Raises:
        HTTPException 422: the JSON body does not parse or is not an object.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            data: Any = await request.json()
        except ValueError as exc:
            raise HTTPException(status_code=422, detail="Invalid JSON body") from exc
        if not isinstance(data, dict):
            raise HTTPException(status_code=422, detail="Invalid JSON body")
        return data

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _validate_submission(payload: Dict[str, Any]) -> ContactSubmissionRequest:
    try:
        return ContactSubmissionRequest.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail="Missing name, email, or message") from exc


def _submission_row(site: Dict[str, Any], submission: ContactSubmissionRequest) -> Dict[str, Any]:
    return {
        "site_id": site["id"],
        "name": submission.name,
        "email": submission.email,
        "message": submission.message,
        "phone": submission.phone,
        "company": submission.company,
        "subject": submission.subject,
    }


def _content_text(content: Dict[str, Any], key: str, default: Any) -> Any:
    value = content.get(key)
    return value if isinstance(value, str) else default


@router.post("/api/sites/{slug}/contact", summary="Submit the published site's contact form")
@limiter.limit("5/minute")
async def submit_contact(
    request: Request,
    slug: str,
    store: SiteStore = Depends(get_site_store),
    site_base_url: str = Depends(get_site_base_url),
):
    """Store a contact-form submission and notify the site owner.

    Form posts (the published page's own ``<form>``) get a thank-you page;
    JSON posts get ``{"ok": true}`` with status 201.  A filled-in ``website``
    honeypot is answered the same way, whatever else is missing, and nothing
    is stored or sent.
    """
    site = await run_in_threadpool(load_published_site, store, slug)
    is_form = not request.headers.get("content-type", "").startswith("application/json")
    payload = await _read_payload(request)

    if is_honeypot_filled(payload):
        logger.info("Discarded honeypot submission", extra={"slug": slug})
    else:
        submission = _validate_submission(payload)
        try:
            await run_in_threadpool(store.insert_contact_submission, _submission_row(site, submission))
        except SiteStoreError as exc:
            logger.error("Contact submission insert failed", extra={"slug": slug, "error": str(exc)})
            raise HTTPException(status_code=500, detail="Failed to store submission.") from exc

        logger.info("Contact submission stored", extra={"slug": slug})
        _, content = get_locale_content(site)
        await send_contact_notification(
            _content_text(content, "email", ""),
            submission,
            _content_text(content, "businessName", slug),
            _content_text(content, "contactFormSubject", None),
        )

    if is_form:
        return HTMLResponse(content=build_contact_thank_you_html(site, site_base_url))
    return JSONResponse(status_code=201, content=ContactSubmissionResponse().model_dump())
