"""HTTP client for the project-cost statistics endpoint.

Expects a JSON GET endpoint that responds with either a list of
``{"period" | "month", "projectName", "totalCost"}`` objects or an object with
those rows under ``"records"``.
"""
from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import List

from .config import Settings
from .data_model import CostRecord, parse_cost_records
from .errors import SourceError
from .logging_setup import get_logger

logger = get_logger(__name__)


class StatisticsClient:
    def __init__(self, url: str, api_key: str | None = None, timeout: float = 5.0) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "StatisticsClient":
        return cls(settings.source_url, api_key=settings.source_token, timeout=settings.source_timeout)

    def _request(self) -> urllib.request.Request:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return urllib.request.Request(self.url, headers=headers, method="GET")

    def get_project_costs(self) -> List[CostRecord]:
        try:
            with urllib.request.urlopen(self._request(), timeout=self.timeout) as resp:
                body = resp.read().decode("utf-8")
            parsed = json.loads(body)
        except (urllib.error.URLError, OSError, ValueError) as exc:
            logger.error("Error fetching project costs from %s: %s", self.url, exc)
            raise SourceError(f"Failed to fetch project costs from {self.url}") from exc

        rows = parsed.get("records") if isinstance(parsed, dict) else parsed
        if not isinstance(rows, list):
            raise SourceError("Project cost response must be a list of records.")
        records = parse_cost_records(rows)
        logger.info("Fetched %d project cost records", len(records))
        return records
