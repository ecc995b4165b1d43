"""Integration tests for the FastAPI app working as a system.

Covers the chat proxy, site info and health endpoints with real HTTP
requests over ASGITransport. The completion service is swapped through
FastAPI dependency overrides so no LLM credential is needed.
"""
