from pathlib import Path
import json
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep values from a developer's .env out of the tests."""

    monkeypatch.delenv(settings.WEBHOOK_URL_KEY, raising=False)
    monkeypatch.delenv(settings.WEBHOOK_TIMEOUT_KEY, raising=False)
    yield


class StubResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int = 200, body: str = "") -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8")
        self._body = body

    def json(self):
        return json.loads(self._body)


class RecordingPost:
    """Replacement for ``requests.post`` that records every call."""

    def __init__(self, response: StubResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or StubResponse(200, "{}")
        self.error = error
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture
def recording_post():
    return RecordingPost
