import html
import logging
import os
import random
from typing import Any, Dict, List, Optional

import requests

from models import Board, Category, Clue

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://jservice.io/api"
DEFAULT_ID_LIMIT = 15000
DEFAULT_CLUES_PER_CATEGORY = 5


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class NetworkError(Exception):
    """A category could not be fetched or its payload was unusable."""

    def __init__(self, category_id: int, message: str):
        super().__init__(f"category {category_id}: {message}")
        self.category_id = category_id


class BoardLoader:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        id_limit: Optional[int] = None,
        clues_per_category: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        # Explicit arguments win, then env vars, then defaults
        if base_url is None:
            base_url = os.getenv("JEOPARDY_API_URL", DEFAULT_API_URL)
        if timeout is None:
            timeout = _env_int("JEOPARDY_TIMEOUT_SECONDS", 5)
        if id_limit is None:
            id_limit = _env_int("JEOPARDY_CATEGORY_ID_LIMIT", DEFAULT_ID_LIMIT)
        if clues_per_category is None:
            clues_per_category = _env_int("JEOPARDY_CLUES_PER_CATEGORY", DEFAULT_CLUES_PER_CATEGORY)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.id_limit = max(1, id_limit)
        self.clues_per_category = max(1, clues_per_category)
        self._rng = rng or random.Random()

    def select_category_ids(self, count: int) -> List[int]:
        """Draw `count` ids uniformly from [0, id_limit).

        Each draw is independent, so the same id can come up twice; such
        boards simply show that category twice.
        """
        return [self._rng.randrange(self.id_limit) for _ in range(count)]

    def fetch_category(self, category_id: int) -> Category:
        """Fetch one category and map it to a Category of hidden clues."""
        url = f"{self.base_url}/category"
        params: Dict[str, Any] = {"id": category_id}
        logger.debug("fetching category id=%s", category_id)
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            logger.warning("category fetch failed id=%s: %s", category_id, exc)
            raise NetworkError(category_id, f"request failed: {exc}") from exc
        except ValueError as exc:
            logger.warning("category payload not JSON id=%s", category_id)
            raise NetworkError(category_id, "response is not valid JSON") from exc

        return self._parse_category(category_id, data)

    def _parse_category(self, category_id: int, data: Any) -> Category:
        if not isinstance(data, dict):
            raise NetworkError(category_id, "unexpected payload")
        title = data.get("title")
        raw_clues = data.get("clues")
        if not isinstance(title, str) or not isinstance(raw_clues, list):
            raise NetworkError(category_id, "payload lacks title or clues")

        clues = []
        for raw in raw_clues[: self.clues_per_category]:
            if not isinstance(raw, dict) or raw.get("question") is None or raw.get("answer") is None:
                raise NetworkError(category_id, "clue lacks question or answer")
            clues.append(
                Clue(
                    question=html.unescape(str(raw["question"])),
                    answer=html.unescape(str(raw["answer"])),
                )
            )
        if len(clues) < self.clues_per_category:
            raise NetworkError(
                category_id,
                f"expected {self.clues_per_category} clues, got {len(clues)}",
            )
        return Category(title=html.unescape(title), clues=clues)

    def build_board(self, count: int) -> Board:
        """Build a fresh Board of `count` categories.

        Categories are fetched one at a time in the order their ids were
        drawn; that order is the column order. A NetworkError from any fetch
        propagates and nothing is returned.
        """
        ids = self.select_category_ids(count)
        logger.info("building board category_ids=%s", ids)
        board = Board()
        for category_id in ids:
            board.categories.append(self.fetch_category(category_id))
        return board
