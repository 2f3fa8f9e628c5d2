import json

import pytest
import requests

from shell_ai import timing


def make_response(status_code: int = 200, body=None, reason: str = "OK") -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r.reason = reason
    r.encoding = "utf-8"
    if body is None:
        body = ""
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    r._content = body.encode("utf-8") if isinstance(body, str) else body
    return r


class FakePost:
    """Stands in for requests.post; records calls and replays a response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def reset_timing():
    timing.DEBUG_TIMING = False
    yield
    timing.DEBUG_TIMING = False


@pytest.fixture
def fake_post(monkeypatch):
    def install(response=None, error=None):
        fake = FakePost(response=response, error=error)
        monkeypatch.setattr("shell_ai.client.requests.post", fake)
        return fake
    return install
