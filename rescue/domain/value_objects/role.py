from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "Admin"
    STAFF = "Staff"
    VOLUNTEER = "Volunteer"
    GUEST = "Guest"
