"""
Shared fixtures for unit tests.
"""

import pytest


class MockResponse:
    """Minimal stand-in for aiohttp's response context manager"""

    def __init__(self, status, body=b""):
        self.status = status
        self._body = body.encode() if isinstance(body, str) else body

    async def read(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


@pytest.fixture
def make_response():
    """Factory for fake aiohttp responses: make_response(status, body)"""
    return MockResponse
