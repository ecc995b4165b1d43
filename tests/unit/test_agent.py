"""Unit tests for CompletionService, AgentConfig and SiteConfig.

Tests configuration validation, the system instruction and the
fallback replies at the completion boundary.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_check as check
from pydantic import ValidationError

from src.agent.config import AgentConfig, SiteConfig
from src.agent.prompts import build_system_instruction
from src.models.schemas import Message, Role


class TestAgentConfig:
    """Tests for AgentConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = AgentConfig(
            api_key="sk-test-key-12345",
            base_url="https://llm.example.com/v1",
            model_name="gpt-4o",
            temperature=0.5,
            max_tokens=2048,
        )

        check.equal(config.api_key, "sk-test-key-12345")
        check.equal(config.base_url, "https://llm.example.com/v1")
        check.equal(config.model_name, "gpt-4o")
        check.equal(config.temperature, 0.5)
        check.equal(config.max_tokens, 2048)
        check.is_true(config.has_api_key)

    def test_config_with_default_values(self) -> None:
        """Config uses defaults when only API key provided."""
        config = AgentConfig(api_key="sk-test-key", model_name="gpt-4o-mini")

        check.equal(config.temperature, 0.7)
        check.equal(config.max_tokens, 256)

    def test_empty_api_key_means_demo_mode(self) -> None:
        """A missing key is accepted and reported as absent."""
        config = AgentConfig(api_key="")

        assert config.has_api_key is False

    def test_whitespace_api_key_is_stripped_to_empty(self) -> None:
        """Whitespace-only key counts as missing."""
        config = AgentConfig(api_key="   ")

        check.equal(config.api_key, "")
        check.is_false(config.has_api_key)

    def test_config_strips_api_key_whitespace(self) -> None:
        """Config strips leading/trailing whitespace from API key."""
        config = AgentConfig(api_key="  sk-test-key  ")

        assert config.api_key == "sk-test-key"

    @pytest.mark.parametrize("temperature", [-0.1, 2.5])
    def test_config_rejects_out_of_range_temperature(self, temperature: float) -> None:
        """Config rejects temperature outside 0.0-2.0."""
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(api_key="sk-test", temperature=temperature)

        assert "temperature" in str(exc_info.value).lower()

    @pytest.mark.parametrize("max_tokens", [0, 200000])
    def test_config_rejects_out_of_range_max_tokens(self, max_tokens: int) -> None:
        """Config rejects max_tokens outside 1-128000."""
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(api_key="sk-test", max_tokens=max_tokens)

        assert "max_tokens" in str(exc_info.value).lower()

    def test_api_key_read_from_environment(self) -> None:
        """LLM_API_KEY is picked up when no key is passed."""
        with patch.dict("os.environ", {"LLM_API_KEY": "sk-env-key"}):
            config = AgentConfig()

        assert config.api_key == "sk-env-key"


class TestSiteConfig:
    """Tests for SiteConfig defaults and helpers."""

    def test_default_services(self) -> None:
        """Seven services are offered by default."""
        site = SiteConfig()

        check.equal(len(site.services), 7)
        check.equal(site.services[0].title, "Website Creation")
        check.equal(site.services[-1].title, "Automation Workflows")

    def test_display_phone_groups_digits(self) -> None:
        site = SiteConfig(contact_phone="+264813879841")

        assert site.display_phone == "+264 81 387 9841"

    def test_display_phone_leaves_other_formats(self) -> None:
        site = SiteConfig(contact_phone="555-0100")

        assert site.display_phone == "555-0100"


class TestSystemInstruction:
    """Tests for build_system_instruction."""

    def test_instruction_covers_identity_services_and_contacts(
        self, site_config: SiteConfig
    ) -> None:
        """Identity, numbered services, contacts, tone and length rule are present."""
        instruction = build_system_instruction(site_config)

        check.is_in('"Morph,"', instruction)
        check.is_in('"Metamorphosis."', instruction)
        check.is_in("1. Website Creation", instruction)
        check.is_in("7. Automation Workflows", instruction)
        check.is_in("- Phone: +264813879841", instruction)
        check.is_in("- Email: sales@example.com", instruction)
        check.is_in("Tone: Professional", instruction)
        check.is_in("under 3 sentences", instruction)
        check.is_in("pricing", instruction)

    def test_instruction_follows_config(self) -> None:
        """Changing the config changes the instruction."""
        site = SiteConfig(assistant_name="Nova", company_name="Acme", max_sentences=2)

        instruction = build_system_instruction(site)

        check.is_in('"Nova,"', instruction)
        check.is_in('"Acme."', instruction)
        check.is_in("under 2 sentences", instruction)


class TestCompletionService:
    """Tests for CompletionService replies and fallbacks."""

    @pytest.fixture
    def config(self) -> AgentConfig:
        return AgentConfig(
            api_key="sk-test-key",
            model_name="gpt-4o-mini",
            temperature=0.7,
            max_tokens=256,
        )

    @patch("src.agent.chat_agent.OpenAIChat")
    @patch("src.agent.chat_agent.Agent")
    async def test_reply_returned_from_agent(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
        site_config: SiteConfig,
    ) -> None:
        """Agent output is returned as the reply."""
        from src.agent.chat_agent import CompletionService

        mock_agent_class.return_value.arun = AsyncMock(
            return_value=MagicMock(content="We build websites.")
        )
        service = CompletionService(config=config, site=site_config)

        reply = await service.get_reply([], "What do you do?")

        check.equal(reply, "We build websites.")
        mock_agent_class.return_value.arun.assert_awaited_once_with("What do you do?")
        mock_openai_chat.assert_called_once_with(
            id="gpt-4o-mini",
            api_key="sk-test-key",
            base_url=None,
            temperature=0.7,
            max_tokens=256,
        )

    @patch("src.agent.chat_agent.OpenAIChat")
    @patch("src.agent.chat_agent.Agent")
    async def test_history_passed_as_context(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
        site_config: SiteConfig,
    ) -> None:
        """Prior transcript becomes agent context with OpenAI roles."""
        from src.agent.chat_agent import CompletionService

        mock_agent_class.return_value.arun = AsyncMock(return_value=MagicMock(content="Yes"))
        service = CompletionService(config=config, site=site_config)
        history = [
            Message(role=Role.MODEL, text="Hello!"),
            Message(role=Role.USER, text="Do you build apps?"),
            Message(role=Role.MODEL, text="We do."),
        ]

        await service.get_reply(history, "How fast?")

        kwargs = mock_agent_class.call_args.kwargs
        context = kwargs["additional_input"]
        check.equal([m.role for m in context], ["assistant", "user", "assistant"])
        check.equal([m.content for m in context], ["Hello!", "Do you build apps?", "We do."])
        check.equal(kwargs["system_message"], service.system_instruction)
        check.is_in("Morph", kwargs["system_message"])

    @patch("src.agent.chat_agent.OpenAIChat")
    @patch("src.agent.chat_agent.Agent")
    async def test_missing_api_key_returns_demo_reply(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        site_config: SiteConfig,
    ) -> None:
        """Without a key the service answers in demo mode and never calls out."""
        from src.agent.chat_agent import CompletionService

        service = CompletionService(config=AgentConfig(api_key=""), site=site_config)

        reply = await service.get_reply([], "Hello")

        check.equal(reply, site_config.demo_mode_reply)
        check.is_in("API Key missing", reply)
        mock_agent_class.assert_not_called()
        mock_openai_chat.assert_not_called()

    @patch("src.agent.chat_agent.OpenAIChat")
    @patch("src.agent.chat_agent.Agent")
    async def test_agent_error_returns_fallback(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
        site_config: SiteConfig,
    ) -> None:
        """Exceptions from the provider become the error reply."""
        from src.agent.chat_agent import CompletionService

        mock_agent_class.return_value.arun = AsyncMock(side_effect=ConnectionError("down"))
        service = CompletionService(config=config, site=site_config)

        reply = await service.get_reply([], "Hello")

        assert reply == site_config.error_reply

    @pytest.mark.parametrize("content", [None, "", "   "])
    @patch("src.agent.chat_agent.OpenAIChat")
    @patch("src.agent.chat_agent.Agent")
    async def test_empty_output_returns_fallback(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        content: str | None,
        config: AgentConfig,
        site_config: SiteConfig,
    ) -> None:
        """No text from the model becomes the empty reply."""
        from src.agent.chat_agent import CompletionService

        mock_agent_class.return_value.arun = AsyncMock(return_value=MagicMock(content=content))
        service = CompletionService(config=config, site=site_config)

        reply = await service.get_reply([], "Hello")

        assert reply == site_config.empty_reply


class TestGetCompletionService:
    """Tests for get_completion_service singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        """get_completion_service returns the same instance on multiple calls."""
        import src.agent.chat_agent as chat_agent_module

        # Reset singleton
        chat_agent_module._completion_service = None

        with patch.object(chat_agent_module, "CompletionService") as mock_service:
            mock_service.return_value = MagicMock()

            first = chat_agent_module.get_completion_service()
            second = chat_agent_module.get_completion_service()

            assert first is second
            mock_service.assert_called_once()

        chat_agent_module._completion_service = None
