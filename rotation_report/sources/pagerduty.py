"""PagerDuty REST API source."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, cast

import requests

from .base import OnCallSource

LOGGER = logging.getLogger(__name__)

_API_URL = "https://api.pagerduty.com"


class PagerDuty(OnCallSource):
    """Read on-call data from PagerDuty's v2 REST API.

    Only the first page of every listing is read.
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        escalation_policy_id: str | None = None,
        incident_limit: int = 100,
        timeout: float = 30.0,
        time_zone: str | None = None,
        base_url: str = _API_URL,
    ) -> None:
        self.api_token = api_token or os.getenv("PAGERDUTY_API_TOKEN")
        if not self.api_token:
            raise RuntimeError("PAGERDUTY_API_TOKEN is not set")
        self.escalation_policy_id = escalation_policy_id
        self.incident_limit = incident_limit
        self.timeout = timeout
        self.time_zone = time_zone
        self.base_url = base_url.rstrip("/")

    def _get(self, path: str, params: dict[str, Any], key: str) -> list[dict[str, Any]]:
        headers = {
            "Authorization": f"Token token={self.api_token}",
            "Accept": "application/vnd.pagerduty+json;version=2",
            "Content-Type": "application/json",
        }
        if self.time_zone:
            params["time_zone"] = self.time_zone
        LOGGER.debug("GET %s params=%s", path, params)
        resp = requests.get(
            f"{self.base_url}{path}",
            headers=headers,
            params=params,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = cast(dict[str, Any], resp.json())
        items = data.get(key)
        if not isinstance(items, list):
            raise RuntimeError(f"No {key} in response from {path}")
        if data.get("more"):
            LOGGER.warning(
                "%s has more than %d %s; only the first page is reported",
                path,
                len(items),
                key,
            )
        LOGGER.debug("fetched %d %s", len(items), key)
        return items

    def fetch_oncalls(self) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"limit": 100}
        if self.escalation_policy_id:
            params["escalation_policy_ids[]"] = [self.escalation_policy_id]
        return self._get("/oncalls", params, "oncalls")

    def fetch_incidents(self, since: datetime, until: datetime) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "since": since.isoformat(),
            "until": until.isoformat(),
            "offset": 0,
            "limit": self.incident_limit,
            "sort_by": "created_at:desc",
        }
        return self._get("/incidents", params, "incidents")

    def fetch_notifications(
        self, since: datetime, until: datetime
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "since": since.isoformat(),
            "until": until.isoformat(),
            "include[]": ["users"],
        }
        return self._get("/notifications", params, "notifications")


__all__ = ["PagerDuty"]
