from __future__ import annotations

from enum import Enum


class ApplicationKind(str, Enum):
    ADOPTION = "adoption"
    FOSTER = "foster"
    VOLUNTEER = "volunteer"
    PARTNERSHIP_SPONSORSHIP = "partnership_sponsorship"
