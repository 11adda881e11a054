from __future__ import annotations

from enum import Enum


class EmployeeRole(str, Enum):
    """Role of an employee inside the company."""

    OWNER = "owner"
    MANAGER = "manager"
    DRIVER = "driver"
    LEAD = "lead"
    HELPER = "helper"


class ChecklistRole(str, Enum):
    """Role a checklist is filled in for on a job."""

    DRIVER = "driver"
    LEAD = "lead"
    HELPER = "helper"


class PerformanceEventType(str, Enum):
    """Kinds of recognition that count toward the performance pool."""

    FIVE_STAR_REVIEW = "five_star_review"
    CUSTOMER_CALLOUT = "customer_callout"
    CREW_CALLOUT = "crew_callout"
