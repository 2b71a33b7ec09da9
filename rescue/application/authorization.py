from __future__ import annotations

from enum import Enum

from rescue.application.errors import AuthorizationError
from rescue.domain.value_objects.role import Role


class Capability(str, Enum):
    READ_PUBLIC_ANIMALS = "read_public_animals"
    EDIT_ANIMAL_DETAILS = "edit_animal_details"
    TRANSITION_ANIMAL_STATUS = "transition_animal_status"
    REVIEW_APPLICATIONS = "review_applications"
    MANAGE_FOSTERS = "manage_fosters"
    FINALIZE_ADOPTIONS = "finalize_adoptions"
    CREATE_ANIMALS = "create_animals"
    DELETE_ANIMALS = "delete_animals"
    READ_STAFF_RECORDS = "read_staff_records"


_STAFF = frozenset({Role.STAFF, Role.ADMIN})

CAPABILITY_MATRIX: dict[Capability, frozenset[Role]] = {
    Capability.READ_PUBLIC_ANIMALS: frozenset(Role),
    Capability.EDIT_ANIMAL_DETAILS: frozenset({Role.VOLUNTEER, Role.STAFF, Role.ADMIN}),
    Capability.TRANSITION_ANIMAL_STATUS: _STAFF,
    Capability.REVIEW_APPLICATIONS: _STAFF,
    Capability.MANAGE_FOSTERS: _STAFF,
    Capability.FINALIZE_ADOPTIONS: _STAFF,
    Capability.CREATE_ANIMALS: _STAFF,
    Capability.DELETE_ANIMALS: frozenset({Role.ADMIN}),
    Capability.READ_STAFF_RECORDS: _STAFF,
}


def can(role: Role, capability: Capability) -> bool:
    return role in CAPABILITY_MATRIX.get(capability, frozenset())


def ensure_capability(role: Role, capability: Capability, action: str | None = None) -> None:
    if not can(role, capability):
        raise AuthorizationError(
            f"Role not allowed to {action or capability.value.replace('_', ' ')}",
            details={"role": role.value, "capability": capability.value},
        )
