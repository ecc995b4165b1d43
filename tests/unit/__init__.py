"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation
    - agent/: Configuration, system instruction and completion fallbacks
    - chat/: Chat session controller
    - forms/: Contact form delivery and status
    - ui/: Explicit UI state objects

Uses mocks for external services when needed.
"""
