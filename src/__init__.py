"""Metamorphosis - marketing site with an AI chat assistant.

Combines FastAPI for the HTTP API, Agno for the completion agent,
NiceGUI for the page, and Pydantic for data validation.

Components:
    - api: HTTP endpoints (chat proxy, site info, health)
    - agent: Configuration, system instruction and completion service
    - chat: Chat session controller behind the floating widget
    - forms: Contact form delivery to the form-intake endpoint
    - ui: Page sections, contact form and chat widget
    - models: Request/response and transcript schemas
"""

__version__ = "0.1.0"
