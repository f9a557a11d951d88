"""Pytest fixtures shared across the test suite.

HTTP is faked with the ``requests_mock`` fixture; no test touches the network.
"""
from __future__ import annotations
from typing import Dict, List
from urllib.parse import parse_qs, urlsplit

import pytest

from spotcat.client import Client, API_BASE


@pytest.fixture
def client() -> Client:
    """Client with a dummy bearer token against the default base URL."""
    return Client(token="test-token")


@pytest.fixture
def api_base() -> str:
    return API_BASE


def query_of(request) -> Dict[str, List[str]]:
    """Parse the query string of a recorded request, preserving case."""
    return parse_qs(urlsplit(request.url).query, keep_blank_values=True)


@pytest.fixture
def last_query(requests_mock):
    """Callable returning the parsed query of the last request."""
    return lambda: query_of(requests_mock.last_request)
