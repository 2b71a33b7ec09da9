"""Allowed adoption-status transitions for animals.

    Not Yet Available ──> Available, Available - In Foster, any hold,
                          Transferred, Died in Care
    Available          <─> Available - In Foster
    Available / Available - In Foster ──> Adoption Pending
    Adoption Pending   ──> Available, Available - In Foster
    any hold           ──> Available, Available - In Foster, Not Yet Available,
                          any outcome except Adopted
    outcomes           ──> (none)

Two edges are reserved to dedicated operations and never granted to a plain
status change:
    Available / Available - In Foster / Adoption Pending / any hold
                       ──> Adopted                                  (finalize adoption)
    Adopted ──> Available or any hold                                   (record return)
"""

from __future__ import annotations

from rescue.domain.value_objects.animal_status import (
    HOLD_STATUSES,
    TERMINAL_STATUSES,
    AnimalStatus,
)

_HOLD_EXITS: frozenset[AnimalStatus] = frozenset(
    {
        AnimalStatus.AVAILABLE,
        AnimalStatus.AVAILABLE_IN_FOSTER,
        AnimalStatus.NOT_YET_AVAILABLE,
    }
) | (TERMINAL_STATUSES - {AnimalStatus.ADOPTED})

ALLOWED_TRANSITIONS: dict[AnimalStatus, frozenset[AnimalStatus]] = {
    AnimalStatus.NOT_YET_AVAILABLE: frozenset(
        {
            AnimalStatus.AVAILABLE,
            AnimalStatus.AVAILABLE_IN_FOSTER,
            AnimalStatus.TRANSFERRED,
            AnimalStatus.DIED_IN_CARE,
        }
    )
    | HOLD_STATUSES,
    AnimalStatus.AVAILABLE: frozenset(
        {AnimalStatus.AVAILABLE_IN_FOSTER, AnimalStatus.ADOPTION_PENDING}
    ),
    AnimalStatus.AVAILABLE_IN_FOSTER: frozenset(
        {AnimalStatus.AVAILABLE, AnimalStatus.ADOPTION_PENDING}
    ),
    AnimalStatus.ADOPTION_PENDING: frozenset(
        {AnimalStatus.AVAILABLE, AnimalStatus.AVAILABLE_IN_FOSTER}
    ),
    **{hold: _HOLD_EXITS for hold in HOLD_STATUSES},
    **{outcome: frozenset() for outcome in TERMINAL_STATUSES},
}

# Statuses from which an adoption may be finalized; Not Yet Available must be released first.
ADOPTABLE_STATUSES: frozenset[AnimalStatus] = frozenset(
    {
        AnimalStatus.AVAILABLE,
        AnimalStatus.AVAILABLE_IN_FOSTER,
        AnimalStatus.ADOPTION_PENDING,
    }
) | HOLD_STATUSES

# Where a returned animal may land.
RETURN_DESTINATIONS: frozenset[AnimalStatus] = frozenset({AnimalStatus.AVAILABLE}) | HOLD_STATUSES

# Statuses during which an animal may stay placed with a foster.
FOSTER_COMPATIBLE_STATUSES: frozenset[AnimalStatus] = frozenset(
    {AnimalStatus.AVAILABLE_IN_FOSTER, AnimalStatus.ADOPTION_PENDING}
) | HOLD_STATUSES

# Assigning a foster moves these to Available - In Foster; other statuses are kept.
FOSTER_PROMOTABLE_STATUSES: frozenset[AnimalStatus] = frozenset(
    {AnimalStatus.AVAILABLE, AnimalStatus.NOT_YET_AVAILABLE}
)


def is_allowed(current: AnimalStatus, new: AnimalStatus) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def is_terminal(status: AnimalStatus) -> bool:
    return status in TERMINAL_STATUSES


def keeps_foster(status: AnimalStatus) -> bool:
    return status in FOSTER_COMPATIBLE_STATUSES
