"""Enclosures that house animals of one climate and one diet."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from zoopark.animals import Animal, AnimalState, Climate
from zoopark.console import ConsoleLog

_CLIMATE_LABELS = {
    Climate.TROPIC: "Тропики",
    Climate.CONTINENT: "Умеренный",
    Climate.ARCTIC: "Полярный",
    Climate.AQUATIC: "Водный",
}

DIRTY_LIMIT = 10
CLEANING_AMOUNT = 50
DAILY_DIRT = 2


@dataclass(eq=False)
class Enclosure:
    """An enclosure with a capacity, a climate and a daily upkeep cost."""

    name: str
    capacity: int
    climate: Climate
    daily_cost: int
    dirty: int = 0
    selected: bool = False
    animals: list[Animal] = field(default_factory=list)

    def add_animal(self, animal: Animal) -> bool:
        """Place the animal here if it fits; return whether it was accepted."""
        if self.living_count() >= self.capacity:
            return False
        if self.animals and animal.diet != self.animals[0].diet:
            return False
        if animal.climate != self.climate:
            return False
        self.animals.append(animal)
        return True

    def remove_animal(self, animal: Animal) -> None:
        """Take the animal out, if it is here."""
        for position, resident in enumerate(self.animals):
            if resident is animal:
                del self.animals[position]
                return

    def needs_cleaning(self) -> bool:
        return self.dirty > DIRTY_LIMIT

    def clean(self) -> None:
        self.dirty -= min(self.dirty, CLEANING_AMOUNT)

    def living_count(self) -> int:
        """Number of animals that are neither dead nor sold."""
        return sum(1 for animal in self.animals if animal.is_present())

    def climate_label(self) -> str:
        return _CLIMATE_LABELS.get(self.climate, "Неизвестно")

    def update(self, rng: random.Random, console: ConsoleLog) -> None:
        """Advance one day: dirt, infection, spread of disease and deaths."""
        self.dirty += DAILY_DIRT

        if self.animals and rng.randrange(10) == 0:
            victim = self.animals[rng.randrange(len(self.animals))]
            if victim.state is AnimalState.HEALTHY:
                victim.state = AnimalState.SICK

        healthy = sum(1 for a in self.animals if a.state is AnimalState.HEALTHY)
        sick = sum(1 for a in self.animals if a.state is AnimalState.SICK)

        if sick:
            for _ in range(2):
                victim = next(
                    (a for a in self.animals if a.state is AnimalState.HEALTHY),
                    None,
                )
                if victim is not None:
                    victim.state = AnimalState.SICK

        if healthy < sick:
            for animal in self.animals:
                if animal.state is AnimalState.SICK and rng.randrange(2) == 0:
                    console.write(f"ID: {animal.id} | Имя: {animal.name} умерло.")
                    animal.state = AnimalState.DEAD