from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus


@dataclass(slots=True)
class Graduate:
    animal: Animal
    adoption_date: date


async def execute(uow: UnitOfWork) -> list[Graduate]:
    """Animals currently in an open adoption. Adopter details are never exposed here."""
    histories = await uow.adoption_history.list_open()
    if not histories:
        return []
    adopted = await uow.animals.list(statuses=[AnimalStatus.ADOPTED])
    animal_by_id = {animal.id: animal for animal in adopted}
    graduates = [
        Graduate(animal=animal_by_id[h.animal_id], adoption_date=h.adoption_date)
        for h in histories
        if h.animal_id in animal_by_id
    ]
    graduates.sort(key=lambda g: g.adoption_date, reverse=True)
    return graduates
