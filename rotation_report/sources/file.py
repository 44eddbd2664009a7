"""On-call data read from a JSON export, for offline runs and tests."""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from .base import OnCallSource


class FileSource(OnCallSource):
    """Source backed by a JSON file.

    The file holds an object with ``oncalls``, ``incidents`` and
    ``notifications`` lists shaped like the PagerDuty API responses. Time
    filtering is left to the summaries.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        location = path or os.getenv("ROTATION_REPORT_DATA")
        if not location:
            raise RuntimeError("ROTATION_REPORT_DATA is not set")
        self.path = Path(location)
        self._data: dict[str, Any] | None = None

    def _load(self, key: str) -> list[dict[str, Any]]:
        if self._data is None:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise RuntimeError(f"{self.path} must contain a JSON object")
            self._data = data
        items = self._data.get(key, [])
        if not isinstance(items, list):
            raise RuntimeError(f"{key} in {self.path} is not a list")
        return items

    def fetch_oncalls(self) -> list[dict[str, Any]]:
        return self._load("oncalls")

    def fetch_incidents(self, since: datetime, until: datetime) -> list[dict[str, Any]]:
        return self._load("incidents")

    def fetch_notifications(
        self, since: datetime, until: datetime
    ) -> list[dict[str, Any]]:
        return self._load("notifications")


__all__ = ["FileSource"]
