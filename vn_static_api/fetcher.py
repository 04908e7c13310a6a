"""
Data sources for the generator.

Provides a uniform interface for loading the source dataset, a JSON array
of record objects, from either a remote URL or a local file.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import requests

from vn_static_api.domain.constants import FETCH_TIMEOUT_SECONDS, USER_AGENT
from vn_static_api.domain.models import Record


class FetchError(Exception):
    """Error retrieving or decoding the source dataset."""
    pass


def _validate_records(data: Any, origin: str) -> list[Record]:
    if not isinstance(data, list):
        raise FetchError(f"Fetched data from {origin} is not an array.")
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise FetchError(f"Record {position} from {origin} is not an object.")
    return data


class DataSource(ABC):
    """Abstract interface for loading the source records."""

    @abstractmethod
    def fetch(self) -> list[Record]:
        """Return all records in source order. Raises FetchError on failure."""


class RemoteDataSource(DataSource):
    """Fetches the dataset with a single blocking HTTP GET."""

    def __init__(self, url: str, timeout: float = FETCH_TIMEOUT_SECONDS,
                 session: requests.Session | None = None):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> list[Record]:
        try:
            resp = self._session.get(
                self._url,
                headers={'User-Agent': USER_AGENT, 'Accept': 'application/json'},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {self._url}: {e}") from e

        if resp.status_code != 200:
            raise FetchError(f"Failed to fetch data. Status code: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {self._url}: {e}") from e

        return _validate_records(data, self._url)


class LocalDataSource(DataSource):
    """Reads the dataset from a local JSON file."""

    def __init__(self, path: str):
        self._path = Path(path)

    def fetch(self) -> list[Record]:
        try:
            with open(self._path, encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise FetchError(f"Failed to read {self._path}: {e}") from e
        except ValueError as e:
            raise FetchError(f"Invalid JSON in {self._path}: {e}") from e

        return _validate_records(data, str(self._path))
