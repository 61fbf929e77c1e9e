"""Animals living in the zoo."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Diet(Enum):
    HERBIVORES = "herbivores"
    PREDATORS = "predators"


class Climate(Enum):
    TROPIC = "tropic"
    CONTINENT = "continent"
    ARCTIC = "arctic"
    AQUATIC = "aquatic"


class AnimalState(Enum):
    HEALTHY = "healthy"
    SICK = "sick"
    DEAD = "dead"
    SELL = "sell"


_CLIMATE_LABELS = {
    Climate.TROPIC: "Тропики",
    Climate.CONTINENT: "Умереный",
    Climate.ARCTIC: "Арктика",
    Climate.AQUATIC: "Водный",
}

_DIET_LABELS = {
    Diet.HERBIVORES: "Травоядный",
    Diet.PREDATORS: "Хищник",
}

_STATE_LABELS = {
    AnimalState.HEALTHY: "Здоров",
    AnimalState.SICK: "Болен",
    AnimalState.DEAD: "Мертв",
    AnimalState.SELL: "Продано",
}


def _random_sex() -> bool:
    return random.randrange(2) == 0


@dataclass(eq=False)
class Animal:
    """One animal; compared by identity, since names may repeat."""

    name: str = ""
    age: int = 1
    weight: int = 0
    price: int = 0
    diet: Diet = Diet.HERBIVORES
    climate: Climate = Climate.AQUATIC
    state: AnimalState = AnimalState.DEAD
    id: int = -1
    male: bool = field(default_factory=_random_sex)
    happiness: float = 100.0
    eating_food: int = 1
    days_without_food: int = 0
    breed_cooldown: int = 2
    parents: tuple[Optional["Animal"], Optional["Animal"]] = (None, None)

    def climate_label(self) -> str:
        return _CLIMATE_LABELS.get(self.climate, "Неизвестно")

    def diet_label(self) -> str:
        return _DIET_LABELS.get(self.diet, "Неизвестно")

    def state_label(self) -> str:
        return _STATE_LABELS.get(self.state, "Неизвестно")

    def ready_to_breed(self) -> bool:
        """True once the breeding cooldown has run out."""
        return self.breed_cooldown == 0

    def is_present(self) -> bool:
        """True while the animal is neither dead nor sold."""
        return self.state not in (AnimalState.DEAD, AnimalState.SELL)

    def update(self, rng: random.Random) -> None:
        """Advance the animal by one day: age, cooldown, illness, old age."""
        self.age += 1
        self.breed_cooldown = max(self.breed_cooldown - 1, 0)
        if rng.randrange(10) == 0:
            self.state = AnimalState.SICK
        if self.age > 30 and rng.randrange(20) == 0:
            self.state = AnimalState.DEAD