"""FastAPI app for the site: chat proxy, public site info and health.

The NiceGUI page is mounted onto this app by src.main.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.agent.config import get_agent_config
from src.api.chat import router as chat_router
from src.api.site import router as site_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown, warning when the assistant has no API key.

    Nothing is opened or closed here: the completion service is created
    lazily on the first chat request.
    """
    logger.info("Starting Metamorphosis site API...")
    if not get_agent_config().has_api_key:
        logger.warning("LLM_API_KEY not set - chat assistant will answer in demo mode")
    yield
    logger.info("Shutting down Metamorphosis site API...")


def create_app() -> FastAPI:
    """Build the app with CORS open to all origins and the site routers."""
    application = FastAPI(
        title="Metamorphosis Site API",
        description=(
            "Backend for the Metamorphosis marketing site. Proxies chat widget "
            "messages to an LLM completion service with a fixed system "
            "instruction and exposes public company details."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)
    application.include_router(site_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "metamorphosis-site"}

    return application


app = create_app()
