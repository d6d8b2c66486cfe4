import json

import httpx
import pytest

from openai_lib.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class Recorder:
    """Mock transport that answers every request with a fixed response."""

    def __init__(self, status_code=200, content=b'{"id":"abc","choices":[]}', exc=None):
        self.status_code = status_code
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.content)

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def body(self, i=0):
        return json.loads(self.requests[i].content)


@pytest.fixture()
def recorder():
    return Recorder()
