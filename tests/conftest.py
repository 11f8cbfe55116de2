import logging

import pytest
import requests

from regressionapitest.common import http
from regressionapitest.common.config import APP_NAME


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code


class FakeSession:
    """Answers GETs from a url -> body (or exception) mapping."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        answer = self.routes.get(url)
        if answer is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, FakeResponse):
            return answer
        return FakeResponse(answer)

    def close(self):
        pass


@pytest.fixture
def fake_http(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(http, "HTTP", session)
    monkeypatch.setattr(http, "TIMEOUT", http.TIMEOUT)
    monkeypatch.setattr(http, "RETRIES", http.RETRIES)
    return session


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    logger = logging.getLogger(APP_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
