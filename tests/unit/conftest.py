"""
Shared fixtures for unit tests
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest


class FakeTransport:
    """Records every call and answers from a queue of scripted replies"""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Optional[Dict[str, Any]]]] = []
        self._replies: List[Any] = []
        self.closed = False

    def reply(self, response: Any) -> "FakeTransport":
        self._replies.append(response)
        return self

    def fail(self, error: Exception) -> "FakeTransport":
        self._replies.append(error)
        return self

    def send(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append((method, params))
        if not self._replies:
            raise AssertionError(f"Unexpected RPC call: {method}")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def config_block() -> dict:
    return {
        "debug_level": 4,
        "debug_file": "/tmp/fiskaly.log",
        "client_timeout": 5000,
        "smaers_timeout": 2000,
    }
