"""Test package for the Metamorphosis site.

Structure:
    - unit/: Individual function and class tests
    - integration/: API workflow tests over ASGI

No live LLM or form-intake calls: the agno classes are patched and the
form endpoint is served by httpx.MockTransport.
Leverages pytest with pytest-check for soft assertions.
"""
