"""Shared test fixtures."""

import json

import pytest
import requests


# ── Sample Records ───────────────────────────────────────────────────────

SAMPLE_RECORDS = [
    {
        'id': 1,
        'title': 'Ever17 The Out of Infinity',
        'image': 'https://example.com/img/1.jpg',
        'description': 'Seven people trapped in an underwater theme park',
        'aliases': ['E17'],
        'developers': [{'id': 10, 'name': 'KID'}],
    },
    {
        'id': 2,
        'title': 'Remember11 The Age of Infinity',
        'image': 'https://example.com/img/2.jpg',
        'description': 'A plane crash in the mountains',
        'aliases': [],
        'developers': [{'id': 10, 'name': 'KID Corp'}, {'id': 11, 'name': 'SDR Project'}],
    },
    {
        'id': 3,
        'title': 'Steins;Gate',
        'image': None,
        'description': 'A self-proclaimed mad scientist sends messages to the past',
        'aliases': ['SG'],
        'developers': [{'id': 12, 'name': '5pb.'}],
    },
    {
        'id': 4,
        'title': 'Untitled Doujin',
        'description': None,
        'developers': 'unknown',
    },
]


class FakeResponse:
    """Stand-in for requests.Response with a canned status and body."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Records GET calls and replays a single response or exception."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def sample_records():
    """A small dataset with shared, distinct, and malformed developer fields."""
    return json.loads(json.dumps(SAMPLE_RECORDS))


@pytest.fixture
def fake_session():
    """Build a FakeSession returning the given payload or raising an exception."""
    def _make(payload=None, status_code=200, text=None, exc=None):
        return FakeSession(FakeResponse(status_code, payload, text), exc=exc)
    return _make


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture
def dataset_file(tmp_path):
    """Write records to a JSON file and return its path."""
    def _write(records, filename="merged.json"):
        path = tmp_path / filename
        path.write_text(json.dumps(records), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def read_json():
    """Read a JSON file relative to an output directory."""
    def _read(output_dir, rel_path):
        path = output_dir.joinpath(*rel_path.split('/'))
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    return _read
