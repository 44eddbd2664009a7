"""Report configuration model and loading utilities."""

from __future__ import annotations

from datetime import timedelta, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator
from yaml import safe_load


class ReportConfig(BaseModel):
    """Settings for one rotation report run."""

    escalation_policy_id: str | None = Field(
        None, description="Only consider on-call entries of this policy"
    )
    target_level: int = Field(1, ge=1, description="Escalation level to report on")
    important_levels: list[int] = Field(
        default_factory=lambda: [1, 2],
        description="Resolvers on these levels are annotated with their label",
    )
    level_labels: dict[int, str] = Field(
        default_factory=dict, description="Display labels overriding schedule names"
    )
    shift_offset_days: int = Field(
        7, ge=1, description="Distance between the current and previous period"
    )
    graveyard_end_hour: int = Field(
        6, ge=0, le=24, description="Alerts before this local hour are graveyard"
    )
    top_triggers: int = Field(5, ge=0, description="Number of triggers to list")
    incident_limit: int = Field(
        100, ge=1, le=100, description="Incidents requested in the single page"
    )
    timezone: str | None = Field(
        None, description="IANA zone for report times; None keeps source offsets"
    )
    request_timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone: {value}") from exc
        return value

    @property
    def shift_offset(self) -> timedelta:
        return timedelta(days=self.shift_offset_days)

    @property
    def zone(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


def load_config(path: Path | str | None = None) -> ReportConfig:
    """Load a :class:`ReportConfig` from the YAML file at ``path``.

    A missing path or file yields the defaults.
    """

    if path is None:
        return ReportConfig()
    if isinstance(path, str):
        path = Path(path)
    try:
        raw = safe_load(path.read_text()) or {}
    except FileNotFoundError:
        return ReportConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a mapping of settings")
    return ReportConfig.model_validate(raw)


__all__ = ["ReportConfig", "load_config"]
