from __future__ import annotations

from enum import Enum


class ApplicationStatus(str, Enum):
    PENDING_REVIEW = "Pending Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ON_HOLD = "On Hold"
    WITHDRAWN = "Withdrawn"
    CONTACTED = "Contacted"
    ARCHIVED = "Archived"
