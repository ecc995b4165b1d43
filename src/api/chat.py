"""Chat completion endpoint.

Proxies a visitor's message plus transcript to the completion service so
the LLM credential never leaves the server.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from src.agent.chat_agent import CompletionService, get_completion_service
from src.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    service: Annotated[CompletionService, Depends(get_completion_service)],
) -> ChatResponse:
    """Generate a reply for a chat message.

    Always answers 200 with a displayable reply. Completion failures are
    turned into fallback text by the service.

    Args:
        request: New message and the transcript preceding it.
        service: Completion service (injected).

    Returns:
        ChatResponse with the reply text.

    Raises:
        422: Empty or whitespace-only message.
    """
    logger.info(f"Chat request with {len(request.history)} prior messages")
    reply = await service.get_reply(request.history, request.message)
    return ChatResponse(reply=reply)
