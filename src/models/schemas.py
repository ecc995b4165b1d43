from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    MODEL = "model"


class SessionStatus(str, Enum):
    """Status of a chat session."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting-reply"


class FormStatus(str, Enum):
    """Status values for the contact form."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class ServiceCategory(str, Enum):
    """Services a visitor can pick on the contact form."""

    WEBSITE_DEVELOPMENT = "Website Development"
    WEB_APP_DESIGN = "Web App Design"
    AUTOMATION_WORKFLOWS = "Automation Workflows"
    CUSTOMER_SUPPORT_AGENT = "AI Customer Support Agent"
    VOICE_BOOKING_AGENT = "Voice/Booking Agent"
    LEAD_GEN_AGENT = "Lead Gen Agent"
    OTHER = "Other"


class Message(BaseModel):
    """A single message in a chat transcript.

    Attributes:
        role: Who said it (user or model).
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str


class ChatRequest(BaseModel):
    """Request payload for the chat completion endpoint.

    Attributes:
        message: The visitor's new message.
        history: Transcript so far, not including ``message``.
    """

    message: str = Field(..., min_length=1)
    history: list[Message] = Field(default_factory=list)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Reply from the completion service."""

    reply: str


class ContactSubmission(BaseModel):
    """Contact form payload forwarded to the form-intake endpoint.

    Attributes:
        name: Visitor name.
        email: Visitor email address.
        service: Service the visitor is interested in.
        message: Free-text project description.
    """

    name: str = Field(..., min_length=1)
    email: EmailStr
    service: ServiceCategory = ServiceCategory.WEBSITE_DEVELOPMENT
    message: str = Field(..., min_length=1)

    @field_validator("name", "message", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    def to_form_data(self) -> dict[str, str]:
        """Flatten into form fields as the intake endpoint expects them."""
        return {
            "name": self.name,
            "email": str(self.email),
            "service": self.service.value,
            "message": self.message,
        }
