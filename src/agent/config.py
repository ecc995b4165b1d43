"""Agent and site configuration with environment variable loading.

Pydantic-based configuration for the chat assistant and the marketing site.
The LLM side supports OpenAI and OpenAI-compatible APIs via custom base URL.
Company details, contact constants and the assistant's fallback replies
live in SiteConfig so they are consumed at startup rather than embedded
in logic.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_FORM_ENDPOINT = "https://formspree.io/f/mvgerrkk"


class AgentConfig(BaseModel):
    """Configuration for the completion agent.

    An empty API key is allowed: the assistant then runs in demo mode and
    answers every message with a fixed notice instead of calling out.

    Attributes:
        api_key: API key for model access.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=256,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; a blank key becomes empty."""
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


class ServiceInfo(BaseModel):
    """A service the agency offers, as the assistant describes it."""

    title: str
    summary: str


def _default_services() -> list[ServiceInfo]:
    return [
        ServiceInfo(
            title="Website Creation",
            summary="Modern, responsive, high-performance websites.",
        ),
        ServiceInfo(
            title="Web App Design",
            summary="Custom applications tailored to business needs.",
        ),
        ServiceInfo(
            title="Customer Support Agents",
            summary="AI that handles queries 24/7.",
        ),
        ServiceInfo(
            title="Booking Agents",
            summary="AI that manages calendars and appointments.",
        ),
        ServiceInfo(title="Voice Agents", summary="Realistic voice AI for calls."),
        ServiceInfo(
            title="Lead Generation Agents",
            summary="AI that qualifies prospects automatically.",
        ),
        ServiceInfo(
            title="Automation Workflows",
            summary="Streamlining business processes to save time.",
        ),
    ]


class SiteConfig(BaseModel):
    """Company, contact and assistant settings for the marketing site.

    Attributes:
        company_name: Brand shown on the page and in the system instruction.
        assistant_name: Name the chat assistant introduces itself with.
        services: Services the assistant may talk about.
        contact_phone: Sales phone number.
        contact_email: Sales email, also the fallback on form errors.
        tone: Tone constraint for replies.
        max_sentences: Response-length constraint for replies.
        greeting: First model message seeded into every transcript.
        demo_mode_reply: Reply used when no API key is configured.
        error_reply: Reply used when the completion call fails.
        empty_reply: Reply used when the model returns no text.
        form_endpoint: Form-intake URL that receives contact submissions.
    """

    company_name: str = "Metamorphosis"
    assistant_name: str = "Morph"
    services: list[ServiceInfo] = Field(default_factory=_default_services)
    contact_phone: str = Field(
        default_factory=lambda: os.getenv("CONTACT_PHONE", "+264813879841")
    )
    contact_email: str = Field(
        default_factory=lambda: os.getenv("CONTACT_EMAIL", "egabrella321@gmail.com")
    )
    tone: str = "Professional, innovative, enthusiastic, and helpful."
    max_sentences: int = Field(default=3, ge=1)
    greeting: str = (
        "Hello! I'm Morph, the Metamorphosis AI agent. "
        "Ask me how we can transform your business!"
    )
    demo_mode_reply: str = (
        "I'm currently in demo mode without a brain connection (API Key missing). "
        "Please contact the admin."
    )
    error_reply: str = "I encountered a glitch in the matrix. Please try again later."
    empty_reply: str = "I'm transforming right now, please try again."
    form_endpoint: str = Field(
        default_factory=lambda: os.getenv("FORM_ENDPOINT", DEFAULT_FORM_ENDPOINT)
    )

    @property
    def display_phone(self) -> str:
        """Phone number grouped for display, e.g. ``+264 81 387 9841``."""
        digits = self.contact_phone.removeprefix("+")
        if len(digits) != 12 or not digits.isdigit():
            return self.contact_phone
        return f"+{digits[:3]} {digits[3:5]} {digits[5:8]} {digits[8:]}"


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.
    """
    return AgentConfig()


_site_config: SiteConfig | None = None


def get_site_config() -> SiteConfig:
    """Get or create the site configuration loaded at startup."""
    global _site_config
    if _site_config is None:
        _site_config = SiteConfig()
    return _site_config
