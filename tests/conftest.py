"""
Shared pytest fixtures for the roster tests.

Why: most tests need a fresh store, a deterministic clock for
notifications, or a small roster file on disk. Keeping them here avoids
every module rebuilding the same scaffolding.
"""
import pytest
import requests

from deanery import RosterStore

SAMPLE_ROSTER = (
    "[GROUPS]\n"
    "CS-101|Petrov,Ivanov\n"
    "CS-102|\n"
    "[DISCIPLINES]\n"
    "Math|экзамен\n"
    "History|зачет\n"
)


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSession:
    """Stands in for requests.Session: returns a canned response or raises."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def make_response(status: int, body: bytes, url: str = "http://roster.test/data.txt",
                  reason: str = "OK") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.url = url
    response.reason = reason
    return response


@pytest.fixture
def store() -> RosterStore:
    return RosterStore()


@pytest.fixture
def selected_group(store):
    group = store.create_group("CS-101")
    store.select_group(group.id)
    return group


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE_ROSTER, encoding="utf-8")
    return path
