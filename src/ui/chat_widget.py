"""Floating chat widget backed by a ChatSession."""

import logging
import os

import httpx
from nicegui import ui
from pydantic import ValidationError

from src.agent.config import SiteConfig
from src.chat.session import ChatSession
from src.models.schemas import ChatResponse, Message, Role
from src.ui.state import ChatWidgetState

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


async def request_reply(
    history: list[Message],
    message: str,
    fallback: str,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Ask the /chat endpoint for a reply.

    Transport errors, HTTP errors and malformed bodies are converted
    into ``fallback`` so the widget always has something to display. No timeout is applied.
    """
    payload = {
        "message": message,
        "history": [entry.model_dump(mode="json") for entry in history],
    }
    try:
        if client is None:
            async with httpx.AsyncClient(base_url=API_BASE_URL, timeout=None) as owned_client:
                response = await owned_client.post("/chat", json=payload)
        else:
            response = await client.post("/chat", json=payload)
        response.raise_for_status()
        return ChatResponse.model_validate(response.json()).reply
    except httpx.HTTPStatusError as e:
        logger.warning(f"Chat endpoint returned HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.warning(f"Chat endpoint unreachable: {e}")
    except (ValueError, ValidationError) as e:
        logger.warning(f"Chat endpoint sent an unreadable reply: {e}")
    return fallback


def render_chat_widget(site: SiteConfig) -> ChatSession:
    """Render the floating chat button and panel.

    Returns:
        The session backing this widget instance.
    """
    state = ChatWidgetState()

    panel: ui.column
    scroll: ui.scroll_area
    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button
    toggle_btn: ui.button

    async def get_reply(history: list[Message], message: str) -> str:
        return await request_reply(history, message, site.error_reply)

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "chat-user" if is_user else "chat-model"
        with ui.row().classes(f"w-full {align}"):
            ui.label(msg.text).classes(f"max-w-[80%] p-3 rounded-lg text-sm {bubble}")

    def render_typing_indicator() -> None:
        with (
            ui.row().classes("w-full justify-start"),
            ui.row().classes("chat-model p-3 rounded-lg gap-1"),
        ):
            for _ in range(3):
                ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.transcript:
                render_message(msg)
            if session.is_awaiting_reply:
                render_typing_indicator()
        send_btn.set_enabled(not session.is_awaiting_reply)
        scroll.scroll_to(percent=1.0)

    session = ChatSession(get_reply, site.greeting, on_change=refresh_messages)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.is_awaiting_reply:
            return
        input_field.value = ""
        await session.send_user_message(text)

    def toggle() -> None:
        state.toggle()
        panel.set_visibility(state.is_open)
        toggle_btn.props(f"icon={'close' if state.is_open else 'chat'}")
        if state.is_open:
            scroll.scroll_to(percent=1.0)

    def close() -> None:
        state.close()
        panel.set_visibility(False)
        toggle_btn.props("icon=chat")

    # === Widget Layout ===
    with ui.column().classes("fixed bottom-6 right-6 z-50 items-end gap-4"):
        with ui.column().classes("chat-panel gap-0") as panel:
            with ui.row().classes("w-full bg-meta-green p-4 items-center justify-between"):
                with ui.row().classes("items-center gap-2"):
                    ui.icon("smart_toy").classes("text-white text-xl")
                    ui.label("Lead Gen Agent Demo").classes("font-bold text-white")
                ui.button(icon="close", on_click=close).props("flat round dense color=white")

            with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll:
                messages_container = ui.column().classes("w-full p-4 gap-4")

            with ui.row().classes("w-full p-4 gap-2 bg-white border-t items-center no-wrap"):
                input_field = (
                    ui.input(placeholder="Ask about our services...")
                    .props("rounded outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button(icon="arrow_forward", on_click=send_message).props(
                    "round unelevated color=green-10"
                )
        panel.set_visibility(False)

        toggle_btn = ui.button(icon="chat", on_click=toggle).props(
            "round size=lg color=orange-8"
        ).tooltip("Chat with AI")

    refresh_messages()
    return session
