"""Main application entry point.

Runs FastAPI with the NiceGUI site mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles /chat, /site and /health; NiceGUI serves the page at /.
    """
    import uvicorn
    from nicegui import ui

    from src.agent.config import get_site_config
    from src.api.app import create_app
    from src.ui.site_page import site_page  # noqa: F401 - Registers the page

    app = create_app()
    site = get_site_config()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=site.company_name,
        favicon="🦋",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "metamorphosis-site-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting {site.company_name} site on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
