import json

import pytest


class DummyResponse:
    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self):
        # requests raises a ValueError subclass on undecodable bodies
        return json.loads(self.text)


class DummySession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.calls = []
        self._response = response
        self._exc = exc

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self._exc is not None:
            raise self._exc
        return self._response


@pytest.fixture
def make_session():
    def _make(status_code=200, body="", exc=None):
        return DummySession(DummyResponse(status_code, body), exc=exc)

    return _make
