"""Membership checks for the animal and application status vocabularies.

Values are compared verbatim: no trimming, no case folding.
"""

from __future__ import annotations

from rescue.application.errors import ValidationError
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.application_status import ApplicationStatus

ANIMAL_STATUS_VALUES: frozenset[str] = frozenset(s.value for s in AnimalStatus)
APPLICATION_STATUS_VALUES: frozenset[str] = frozenset(s.value for s in ApplicationStatus)


def is_animal_status(value: object) -> bool:
    return isinstance(value, str) and value in ANIMAL_STATUS_VALUES


def is_application_status(value: object) -> bool:
    return isinstance(value, str) and value in APPLICATION_STATUS_VALUES


def parse_animal_status(value: AnimalStatus | str) -> AnimalStatus:
    if isinstance(value, AnimalStatus):
        return value
    if not is_animal_status(value):
        raise ValidationError(
            f"Unknown animal status '{value}'",
            details={
                "reason": "unknown_status",
                "field": "adoption_status",
                "allowed": sorted(ANIMAL_STATUS_VALUES),
            },
        )
    return AnimalStatus(value)


def parse_application_status(value: ApplicationStatus | str) -> ApplicationStatus:
    if isinstance(value, ApplicationStatus):
        return value
    if not is_application_status(value):
        raise ValidationError(
            f"Unknown application status '{value}'",
            details={
                "reason": "unknown_status",
                "field": "status",
                "allowed": sorted(APPLICATION_STATUS_VALUES),
            },
        )
    return ApplicationStatus(value)
