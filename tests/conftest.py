import pytest
import requests

from tests.fakes import FakeSession


@pytest.fixture
def echo_session():
    return FakeSession()


@pytest.fixture
def refused_session():
    return FakeSession(error=requests.ConnectionError("[Errno 111] Connection refused"))


@pytest.fixture
def patched_sessions(monkeypatch):
    """Replace requests.Session so code that opens its own session gets a fake."""
    made = []

    def factory():
        s = FakeSession()
        made.append(s)
        return s

    monkeypatch.setattr(requests, "Session", factory)
    return made
