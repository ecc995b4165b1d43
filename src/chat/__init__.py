"""Chat session handling for the floating chat widget."""

from src.chat.session import ChatSession, ReplyFn

__all__ = ["ChatSession", "ReplyFn"]
