"""Chat session controller for the floating chat widget.

Holds the in-memory transcript of one conversation, forwards new user
messages to a completion callable and exposes status to the UI.
One instance per widget; nothing is persisted.
"""

import logging
from collections.abc import Awaitable, Callable

from src.models.schemas import Message, Role, SessionStatus

logger = logging.getLogger(__name__)

ReplyFn = Callable[[list[Message], str], Awaitable[str]]


class ChatSession:
    """Transcript and status for a single chat widget.

    The transcript is seeded with one greeting from the model and only
    ever grows. At most one completion request is in flight; sends made
    while awaiting a reply are dropped, not queued.
    """

    def __init__(
        self,
        get_reply: ReplyFn,
        greeting: str,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            get_reply: Completion callable taking (prior transcript, new text).
                It must return a displayable string in all cases.
            greeting: Text of the seeded model message.
            on_change: Called after every transcript or status change,
                e.g. to refresh the view and scroll to the latest message.
        """
        self._get_reply = get_reply
        self._on_change = on_change
        self._transcript: list[Message] = [Message(role=Role.MODEL, text=greeting)]
        self.status = SessionStatus.IDLE

    @property
    def transcript(self) -> list[Message]:
        return list(self._transcript)

    @property
    def is_awaiting_reply(self) -> bool:
        return self.status is SessionStatus.AWAITING_REPLY

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _append(self, message: Message) -> None:
        self._transcript.append(message)
        self._notify()

    async def send_user_message(self, text: str) -> None:
        """Send a user message and append the reply.

        No-op when the text is blank or a reply is already pending.
        The reply callable gets the transcript as it was before this
        message was added, plus the new text.

        Args:
            text: What the user typed.
        """
        if not text or not text.strip():
            return
        if self.is_awaiting_reply:
            logger.debug("Dropping message sent while awaiting reply")
            return

        history = list(self._transcript)
        self._append(Message(role=Role.USER, text=text))
        self.status = SessionStatus.AWAITING_REPLY
        self._notify()

        try:
            reply = await self._get_reply(history, text)
            self._append(Message(role=Role.MODEL, text=reply))
        finally:
            self.status = SessionStatus.IDLE
            self._notify()
