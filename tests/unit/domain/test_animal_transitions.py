from __future__ import annotations

import pytest

from rescue.domain.policies.animal_transitions import (
    ALLOWED_TRANSITIONS,
    ADOPTABLE_STATUSES,
    RETURN_DESTINATIONS,
    is_allowed,
    is_terminal,
    keeps_foster,
)
from rescue.domain.value_objects.animal_status import (
    HOLD_STATUSES,
    TERMINAL_STATUSES,
    AnimalStatus,
)


def test_every_status_has_a_row():
    assert set(ALLOWED_TRANSITIONS) == set(AnimalStatus)


@pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES, key=lambda s: s.value))
def test_terminal_statuses_have_no_exits(terminal):
    assert is_terminal(terminal)
    assert all(not is_allowed(terminal, target) for target in AnimalStatus)


def test_adopted_is_never_a_plain_transition_target():
    for source in AnimalStatus:
        assert not is_allowed(source, AnimalStatus.ADOPTED)


def test_not_yet_available_exits():
    allowed = ALLOWED_TRANSITIONS[AnimalStatus.NOT_YET_AVAILABLE]
    assert AnimalStatus.AVAILABLE in allowed
    assert AnimalStatus.TRANSFERRED in allowed
    assert HOLD_STATUSES <= allowed
    assert AnimalStatus.EUTHANIZED not in allowed
    assert AnimalStatus.ADOPTION_PENDING not in allowed


def test_holds_can_reach_outcomes_except_adopted():
    for hold in HOLD_STATUSES:
        assert is_allowed(hold, AnimalStatus.EUTHANIZED)
        assert is_allowed(hold, AnimalStatus.NOT_YET_AVAILABLE)
        assert not is_allowed(hold, AnimalStatus.ADOPTION_PENDING)


def test_same_status_is_not_a_transition():
    assert not is_allowed(AnimalStatus.AVAILABLE, AnimalStatus.AVAILABLE)


def test_reserved_edges():
    assert ADOPTABLE_STATUSES == {
        AnimalStatus.AVAILABLE,
        AnimalStatus.AVAILABLE_IN_FOSTER,
        AnimalStatus.ADOPTION_PENDING,
    } | HOLD_STATUSES
    assert AnimalStatus.NOT_YET_AVAILABLE not in ADOPTABLE_STATUSES
    assert AnimalStatus.AVAILABLE in RETURN_DESTINATIONS
    assert AnimalStatus.AVAILABLE_IN_FOSTER not in RETURN_DESTINATIONS


def test_foster_is_kept_only_by_compatible_statuses():
    assert keeps_foster(AnimalStatus.AVAILABLE_IN_FOSTER)
    assert keeps_foster(AnimalStatus.MEDICAL_HOLD)
    assert not keeps_foster(AnimalStatus.AVAILABLE)
    assert not keeps_foster(AnimalStatus.NOT_YET_AVAILABLE)
    assert not keeps_foster(AnimalStatus.TRANSFERRED)
