"""Unit tests for the chat widget's reply client."""

import json

import httpx
import pytest_check as check

from src.chat.session import ChatSession
from src.models.schemas import Message, Role, SessionStatus
from src.ui.chat_widget import request_reply

FALLBACK = "I encountered a glitch in the matrix. Please try again later."


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://api.test"
    )


class TestRequestReply:
    async def test_posts_history_and_returns_reply(self) -> None:
        """Transcript goes out as role/text pairs; reply text comes back."""
        sent: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"reply": "We build AI agents."})

        history = [Message(role=Role.MODEL, text="Hello!")]
        async with client_for(handler) as client:
            reply = await request_reply(history, "What do you do?", FALLBACK, client=client)

        check.equal(reply, "We build AI agents.")
        check.equal(
            sent[0],
            {
                "message": "What do you do?",
                "history": [{"role": "model", "text": "Hello!"}],
            },
        )

    async def test_http_error_returns_fallback(self) -> None:
        async with client_for(lambda request: httpx.Response(502)) as client:
            reply = await request_reply([], "Hi", FALLBACK, client=client)

        assert reply == FALLBACK

    async def test_unreachable_api_returns_fallback(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with client_for(handler) as client:
            reply = await request_reply([], "Hi", FALLBACK, client=client)

        assert reply == FALLBACK

    async def test_non_json_body_returns_fallback(self) -> None:
        """A 200 with an HTML body from a gateway still yields the fallback."""
        async with client_for(
            lambda request: httpx.Response(200, text="<html>gateway</html>")
        ) as client:
            reply = await request_reply([], "Hi", FALLBACK, client=client)

        assert reply == FALLBACK

    async def test_body_without_reply_returns_fallback(self) -> None:
        async with client_for(lambda request: httpx.Response(200, json={})) as client:
            reply = await request_reply([], "Hi", FALLBACK, client=client)

        assert reply == FALLBACK

    async def test_session_gets_fallback_for_malformed_body(self) -> None:
        """The session ends idle with the fallback as the model's reply."""
        async with client_for(
            lambda request: httpx.Response(200, text="<html>gateway</html>")
        ) as client:

            async def get_reply(history: list[Message], message: str) -> str:
                return await request_reply(history, message, FALLBACK, client=client)

            session = ChatSession(get_reply, "Hello!")
            await session.send_user_message("Hi")

        check.equal([m.text for m in session.transcript], ["Hello!", "Hi", FALLBACK])
        check.equal(session.transcript[-1].role, Role.MODEL)
        check.equal(session.status, SessionStatus.IDLE)
