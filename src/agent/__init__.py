"""Agno agent logic for the site's chat assistant.

Responsibilities:
    - Agent and site configuration from environment
    - Fixed system instruction built from site configuration
    - Stateless completion calls with the widget's transcript as context
    - Fallback replies in place of errors

Maintains clean separation from the HTTP and UI layers.
"""

from src.agent.chat_agent import CompletionService, get_completion_service
from src.agent.config import AgentConfig, SiteConfig, get_agent_config, get_site_config
from src.agent.prompts import build_system_instruction

__all__ = [
    "AgentConfig",
    "CompletionService",
    "SiteConfig",
    "build_system_instruction",
    "get_agent_config",
    "get_completion_service",
    "get_site_config",
]
