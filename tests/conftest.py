"""Pytest fixtures and shared test configuration.

Fixtures:
    - site_config: SiteConfig with test contact details and endpoint
    - fake_completion: Stand-in completion service recording its calls
    - async_client: HTTPX client for API testing, completion service overridden
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.chat_agent import get_completion_service
from src.agent.config import SiteConfig
from src.api.app import create_app
from src.models.schemas import Message

GREETING = "Hello! I'm Morph, the Metamorphosis AI agent."


class FakeCompletionService:
    """Completion service double returning a canned reply."""

    def __init__(self, reply: str = "We build websites, web apps and AI agents.") -> None:
        self.reply = reply
        self.calls: list[tuple[list[Message], str]] = []

    async def get_reply(self, history: list[Message], message: str) -> str:
        self.calls.append((history, message))
        return self.reply


@pytest.fixture
def site_config() -> SiteConfig:
    """Return site configuration with predictable values.

    Returns:
        SiteConfig independent of the environment.
    """
    return SiteConfig(
        greeting=GREETING,
        contact_phone="+264813879841",
        contact_email="sales@example.com",
        form_endpoint="https://forms.example.com/f/test",
    )


@pytest.fixture
def fake_completion() -> FakeCompletionService:
    return FakeCompletionService()


@pytest.fixture
async def async_client(
    fake_completion: FakeCompletionService,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app()
    app.dependency_overrides[get_completion_service] = lambda: fake_completion
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
