"""Public site information endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from src.agent.config import ServiceInfo, get_site_config
from src.models.schemas import ServiceCategory

router = APIRouter(prefix="/site", tags=["site"])


class SiteInfo(BaseModel):
    """Company details safe to expose to the browser.

    Attributes:
        company_name: Brand name.
        assistant_name: Chat assistant name.
        greeting: First message shown in the chat widget.
        services: Services offered.
        service_categories: Choices for the contact form.
        contact_phone: Sales phone number.
        contact_email: Sales email.
    """

    company_name: str
    assistant_name: str
    greeting: str
    services: list[ServiceInfo]
    service_categories: list[ServiceCategory]
    contact_phone: str
    contact_email: str


@router.get("", response_model=SiteInfo)
async def site_info() -> SiteInfo:
    """Return public site configuration (no credentials, no endpoints)."""
    site = get_site_config()
    return SiteInfo(
        company_name=site.company_name,
        assistant_name=site.assistant_name,
        greeting=site.greeting,
        services=site.services,
        service_categories=list(ServiceCategory),
        contact_phone=site.contact_phone,
        contact_email=site.contact_email,
    )
