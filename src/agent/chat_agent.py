"""Completion service for the site's chat assistant, built on Agno.

The widget owns its transcript, so every call is stateless on this side:
the prior transcript is passed in as context alongside the new message.
No storage, no retries and no timeouts are configured on the agent.

Failure handling lives at this boundary. Whatever goes wrong (missing
credential, network error, provider error, empty output) the caller gets
a displayable string back, taken from SiteConfig.
"""

import logging

from agno.agent import Agent
from agno.models.message import Message as AgnoMessage
from agno.models.openai import OpenAIChat

from src.agent.config import AgentConfig, SiteConfig, get_agent_config, get_site_config
from src.agent.prompts import build_system_instruction
from src.models.schemas import Message, Role

logger = logging.getLogger(__name__)

# Transcript roles mapped onto OpenAI chat roles
_ROLE_MAP = {Role.USER: "user", Role.MODEL: "assistant"}


class CompletionService:
    """Service that turns a transcript plus a new message into a reply.

    Wraps Agno's Agent with:
    - The site's fixed system instruction
    - Transcript-to-context conversion
    - Fallback replies in place of errors
    """

    def __init__(
        self,
        config: AgentConfig | None = None,
        site: SiteConfig | None = None,
    ) -> None:
        """Initialize the completion service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
            site: Optional site configuration for prompt and fallbacks.
        """
        self._config = config or get_agent_config()
        self._site = site or get_site_config()
        self._system_instruction = build_system_instruction(self._site)
        self._model = self._create_model() if self._config.has_api_key else None

    def _create_model(self) -> OpenAIChat:
        return OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

    def _create_agent(self, history: list[Message]) -> Agent:
        """Create an agent seeded with the prior transcript.

        Args:
            history: Transcript entries preceding the new message.

        Returns:
            Agent with the system instruction and history as context.
        """
        context = [
            AgnoMessage(role=_ROLE_MAP[entry.role], content=entry.text)
            for entry in history
        ]
        return Agent(
            model=self._model,
            system_message=self._system_instruction,
            additional_input=context or None,
            markdown=False,
        )

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    async def get_reply(self, history: list[Message], message: str) -> str:
        """Get a reply for a new message given the conversation so far.

        Never raises: failures are logged and replaced by a fallback reply.

        Args:
            history: Ordered prior transcript (role/text pairs).
            message: The user's new message.

        Returns:
            Reply text, or a fallback string.
        """
        if self._model is None:
            logger.warning("No LLM API key configured, answering in demo mode")
            return self._site.demo_mode_reply

        try:
            agent = self._create_agent(history)
            response = await agent.arun(message)
        except Exception as e:
            logger.error(f"Completion request failed: {e}")
            return self._site.error_reply

        content = response.content if response is not None else None
        if not isinstance(content, str) or not content.strip():
            logger.warning("Completion returned no text")
            return self._site.empty_reply

        logger.debug(f"Completion reply received ({len(content)} chars)")
        return content


# Module-level singleton instance
_completion_service: CompletionService | None = None


def get_completion_service() -> CompletionService:
    """Get or create the global completion service.

    Returns:
        The CompletionService instance.
    """
    global _completion_service
    if _completion_service is None:
        _completion_service = CompletionService()
    return _completion_service
