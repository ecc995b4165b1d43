"""FastAPI endpoints for the Metamorphosis site.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Chat completion proxy for the chat widget
    - GET /site: Public company details
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
