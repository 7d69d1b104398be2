from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

import requests

from .config import Settings, load_settings
from .models import FuelPrice, PresentationQuestion, TriviaResponse
from .quiz import transform_questions

logger = logging.getLogger(__name__)


class _FetchFailed(Exception):
    pass


class ApiService:
    """
    Client for the diesel/Miles95 price feeds and Open Trivia DB.

    Every public call returns an empty list instead of raising when the upstream
    answers with an error status, the transport fails or the body is not the
    expected JSON.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or load_settings()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ApiService":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Fetch and decode JSON. Failures are logged and raised as _FetchFailed."""
        try:
            r = self.session.get(url, params=params, timeout=self.settings.timeout_seconds)
        except requests.RequestException as e:
            logger.warning("Network error for %s: %s", url, e)
            raise _FetchFailed() from e
        if not r.ok:
            logger.warning("Error from %s: HTTP %s", url, r.status_code)
            raise _FetchFailed()
        try:
            return r.json()
        except ValueError as e:
            logger.warning("JSON error for %s: %s", url, e)
            raise _FetchFailed() from e

    def _get_fuel(self, fuel: str, url: str) -> List[FuelPrice]:
        try:
            doc = self._get_json(url)
        except _FetchFailed:
            return []
        if doc is None:
            return []
        if not isinstance(doc, list):
            logger.warning("Unexpected %s payload from %s: %s", fuel, url, type(doc).__name__)
            return []
        out = [FuelPrice.from_dict(fuel, it) for it in doc if isinstance(it, dict)]
        logger.info("Fetched %d %s prices", len(out), fuel)
        return out

    def get_diesel_data(self) -> List[FuelPrice]:
        return self._get_fuel("diesel", self.settings.diesel_url)

    def get_gas_data(self) -> List[FuelPrice]:
        return self._get_fuel("miles95", self.settings.gas_url)

    def get_trivia(self, amount: Optional[int] = None, rng: Optional[random.Random] = None) -> List[PresentationQuestion]:
        amount = self.settings.trivia_amount if amount is None else amount
        if amount < 1:
            raise ValueError(f"amount must be positive, got {amount}")

        try:
            doc = self._get_json(self.settings.trivia_url, params={"amount": amount})
        except _FetchFailed:
            return []
        if doc is not None and not isinstance(doc, dict):
            logger.warning("Unexpected trivia payload: %s", type(doc).__name__)
            return []
        try:
            resp = TriviaResponse.from_dict(doc)
        except (TypeError, ValueError) as e:
            logger.warning("JSON error for trivia payload: %s", e)
            return []

        if not resp.ok:
            # 0 = success (Open Trivia DB)
            logger.info("OpenTDB response_code: %s (%d results)", resp.response_code, len(resp.results))
            return []
        return transform_questions(resp.results, rng)
