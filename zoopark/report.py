"""Text and table views of a zoo, as shown in the game's panels."""

from __future__ import annotations

from typing import NamedTuple, Optional

from zoopark.animals import AnimalState
from zoopark.workers import WorkerRole
from zoopark.zoo import Zoo

NO_ZOO_MESSAGE = "Зоопарк пока не создан"
QUOTE_REFERENCE_AGE = 20

# Prices quoted in the shop: base price and price per year below the reference
# age, for cat, penguin, dog, polar bear, giraffe, elephant and fish.
_ANIMAL_QUOTES: tuple[tuple[int, int], ...] = (
    (200, 30),
    (800, 20),
    (250, 25),
    (1500, 50),
    (1200, 40),
    (2000, 60),
    (2000, 60),
)

# Tropical, temperate, polar and aquatic enclosures.
_ENCLOSURE_QUOTES: tuple[int, ...] = (1000, 1200, 1500, 2000)
_ENCLOSURE_PLACE_PRICE = 100
_DAILY_COST_PER_PLACE = 10


class AnimalRow(NamedTuple):
    name: str
    kind: str
    sex: str
    age: int
    state: str
    happiness: float


class EnclosureRow(NamedTuple):
    name: str
    climate: str
    capacity: int
    occupancy: str
    cleanliness: float


class WorkerRow(NamedTuple):
    name: str
    role: str
    salary: int
    status: str
    can_dismiss: bool


def statistics_lines(zoo: Optional[Zoo]) -> list[str]:
    """The figures of the data panel, one per line."""
    if zoo is None:
        return [NO_ZOO_MESSAGE]
    return [
        f"Дни: {zoo.day}",
        f"Деньги: {zoo.money}",
        f"Еда: {zoo.food}",
        f"Популярность: {zoo.popularity}",
        f"Животные: {len(zoo.animals)}",
        f"Посетители: {zoo.visitors()}",
        f"Вольеры: {len(zoo.enclosures)}",
        f"Работники: {len(zoo.workers)}",
    ]


def overview_lines(zoo: Zoo) -> list[str]:
    """The summary of the main tab: status, name, sick animals and staff."""
    lines: list[str] = []
    if zoo.status_message:
        lines.append(zoo.status_message)
    lines.append(f"Зоопарк: {zoo.name}")

    sick = sum(1 for animal in zoo.animals if animal.state is AnimalState.SICK)
    lines.append(f"Больных животных: {sick}")

    roles = [worker.role for worker in zoo.workers]
    lines.append(f"Ветеринары: {roles.count(WorkerRole.VETERINARIAN)}")
    lines.append(f"Уборщики: {roles.count(WorkerRole.CLEANER)}")
    lines.append(f"Кормильцы: {roles.count(WorkerRole.FOODMEN)}")
    return lines


def animal_rows(zoo: Zoo) -> list[AnimalRow]:
    """One row per animal; happiness is a fraction between 0 and 1."""
    return [
        AnimalRow(
            name=animal.name,
            kind=f"{animal.diet_label()}/{animal.climate_label()}",
            sex="Мужик" if animal.male else "Баба",
            age=animal.age,
            state=animal.state_label(),
            happiness=max(0.0, min(animal.happiness / 100.0, 1.0)),
        )
        for animal in zoo.animals
    ]


def enclosure_rows(zoo: Zoo) -> list[EnclosureRow]:
    """One row per enclosure; cleanliness is 1 for a spotless enclosure."""
    return [
        EnclosureRow(
            name=enclosure.name,
            climate=enclosure.climate_label(),
            capacity=enclosure.capacity,
            occupancy=f"{len(enclosure.animals)}/{enclosure.capacity}",
            cleanliness=1.0 - enclosure.dirty / 100.0,
        )
        for enclosure in zoo.enclosures
    ]


def worker_rows(zoo: Zoo) -> list[WorkerRow]:
    """One row per worker; the director cannot be dismissed."""
    return [
        WorkerRow(
            name=worker.name,
            role=worker.role_label(),
            salary=worker.price,
            status="Работает" if worker.is_working else "Отдыхает",
            can_dismiss=worker.role is not WorkerRole.DIRECTOR,
        )
        for worker in zoo.workers
    ]


def quoted_animal_price(animal_type: int, age: int) -> int:
    """The price the shop shows for an animal type and age."""
    if not 0 <= animal_type < len(_ANIMAL_QUOTES):
        raise ValueError(f"unknown animal type: {animal_type}")
    base, per_year = _ANIMAL_QUOTES[animal_type]
    return base + (QUOTE_REFERENCE_AGE - age) * per_year


def quoted_enclosure_price(climate_type: int, capacity: int) -> int:
    """The building cost the shop shows for an enclosure."""
    if not 0 <= climate_type < len(_ENCLOSURE_QUOTES):
        raise ValueError(f"unknown climate type: {climate_type}")
    return _ENCLOSURE_QUOTES[climate_type] + capacity * _ENCLOSURE_PLACE_PRICE


def quoted_daily_cost(climate_type: int, capacity: int) -> int:
    """The daily upkeep the shop shows for an enclosure."""
    if climate_type == 0:
        base = 50
    elif climate_type == 1:
        base = 60
    else:
        base = 70
    return base + capacity * _DAILY_COST_PER_PLACE