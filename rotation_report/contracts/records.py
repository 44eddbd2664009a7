"""Raw on-call service records as returned by the PagerDuty REST API."""

from __future__ import annotations

from pydantic import AwareDatetime, BaseModel, Field


class Reference(BaseModel):
    """Reference to another PagerDuty object."""

    id: str | None = Field(None, description="Object identifier")
    type: str | None = Field(None, description="Reference type, e.g. user_reference")
    summary: str = Field(..., description="Human-readable name of the object")


class OnCallRecord(BaseModel):
    """A person on call at an escalation level."""

    escalation_level: int = Field(..., ge=1, description="Rank in the policy")
    start: AwareDatetime | None = Field(None, description="Start of the current shift")
    end: AwareDatetime | None = Field(None, description="End of the current shift")
    user: Reference
    schedule: Reference | None = Field(
        None, description="Schedule providing the shift, absent for direct rules"
    )
    escalation_policy: Reference | None = None


class IncidentRecord(BaseModel):
    """An incident listed by ``/incidents``."""

    created_at: AwareDatetime
    status: str = Field(..., description="triggered, acknowledged or resolved")
    title: str = Field(..., description="Name of the condition that fired")
    last_status_change_by: Reference | None = Field(
        None, description="Who made the latest status change"
    )


class NotificationRecord(BaseModel):
    """A notification listed by ``/notifications``."""

    type: str = Field(..., description="e.g. sms_notification")
    started_at: AwareDatetime
    user: Reference
    address: str | None = None


__all__ = ["IncidentRecord", "NotificationRecord", "OnCallRecord", "Reference"]
