"""Pydantic contracts for on-call service records."""

from .records import IncidentRecord, NotificationRecord, OnCallRecord, Reference

__all__ = ["IncidentRecord", "NotificationRecord", "OnCallRecord", "Reference"]
