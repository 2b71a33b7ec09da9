from __future__ import annotations

from enum import Enum


class AnimalStatus(str, Enum):
    NOT_YET_AVAILABLE = "Not Yet Available"
    AVAILABLE = "Available"
    AVAILABLE_IN_FOSTER = "Available - In Foster"
    ADOPTION_PENDING = "Adoption Pending"
    ADOPTED = "Adopted"
    BEHAVIORAL_HOLD = "Behavioral Hold"
    BEHAVIORAL_HOLD_WITH_TRAINER = "Behavioral Hold - With Trainer"
    MEDICAL_HOLD = "Medical Hold"
    MEDICAL_HOLD_IN_FOSTER = "Medical Hold - In Foster"
    STRAY_HOLD = "Stray Hold"
    RETURNED_TO_OWNER = "Returned to Owner"
    TRANSFERRED = "Transferred"
    LOST_IN_CARE = "Lost in Care"
    DIED_IN_CARE = "Died in Care"
    EUTHANIZED = "Euthanized"


HOLD_STATUSES: frozenset[AnimalStatus] = frozenset(
    {
        AnimalStatus.BEHAVIORAL_HOLD,
        AnimalStatus.BEHAVIORAL_HOLD_WITH_TRAINER,
        AnimalStatus.MEDICAL_HOLD,
        AnimalStatus.MEDICAL_HOLD_IN_FOSTER,
        AnimalStatus.STRAY_HOLD,
    }
)

# Outcome statuses: the animal has left the rescue's care.
TERMINAL_STATUSES: frozenset[AnimalStatus] = frozenset(
    {
        AnimalStatus.ADOPTED,
        AnimalStatus.RETURNED_TO_OWNER,
        AnimalStatus.TRANSFERRED,
        AnimalStatus.LOST_IN_CARE,
        AnimalStatus.DIED_IN_CARE,
        AnimalStatus.EUTHANIZED,
    }
)

# Shown on the public Available Animals page.
PUBLIC_STATUSES: frozenset[AnimalStatus] = frozenset(
    {
        AnimalStatus.AVAILABLE,
        AnimalStatus.AVAILABLE_IN_FOSTER,
        AnimalStatus.ADOPTION_PENDING,
    }
)
