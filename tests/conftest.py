import json
import os
import sys
from typing import Any, Dict, List, Optional

import pytest
import requests

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from apicall.config import Settings


def make_response(status: int = 200, body: Any = None, raw: Optional[bytes] = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.encoding = "utf-8"
    r._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return r


class StubSession:
    """Stands in for requests.Session: returns queued responses and records calls."""

    def __init__(self, response: Any = None) -> None:
        self.headers: Dict[str, str] = {}
        self.response = response
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params: Any = None, timeout: Any = None) -> requests.Response:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        diesel_url="https://example.test/Diesel",
        gas_url="https://example.test/Miles95",
        trivia_url="https://example.test/api.php",
        timeout_seconds=5.0,
        user_agent="apicall-tests",
        trivia_amount=3,
        log_level="DEBUG",
    )
