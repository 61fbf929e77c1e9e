"""The zoo: money, food, popularity, animals, staff and enclosures."""

from __future__ import annotations

import random
from typing import NamedTuple, Optional

from zoopark.animals import Animal, AnimalState, Climate, Diet
from zoopark.console import ConsoleLog
from zoopark.enclosure import Enclosure
from zoopark.workers import Worker, WorkerRole

START_FOOD = 100
START_POPULARITY = 50
MIN_POPULARITY = 10
MAX_POPULARITY = 100
FOOD_PRICE = 10
ADVERTISING_STEP = 100
NEWBORN_PRICE = 3000
BREEDING_AGE = 10
LAST_DAY = 30
FOODMAN_SAVING = 0.95

DIRECTOR_NAME = "Дядя Саша"
DIRECTOR_SALARY = 100


class AnimalType(NamedTuple):
    diet: Diet
    climate: Climate
    weight: int
    base_price: int
    price_per_year: int


class EnclosureType(NamedTuple):
    climate: Climate
    base_cost: int
    base_daily_cost: int


class WorkerType(NamedTuple):
    role: WorkerRole
    salary: int
    served: int


# Cat, penguin, dog, polar bear, giraffe, elephant.
ANIMAL_TYPES: tuple[AnimalType, ...] = (
    AnimalType(Diet.PREDATORS, Climate.CONTINENT, 5, 200, 30),
    AnimalType(Diet.PREDATORS, Climate.ARCTIC, 30, 800, 20),
    AnimalType(Diet.PREDATORS, Climate.CONTINENT, 20, 250, 25),
    AnimalType(Diet.PREDATORS, Climate.ARCTIC, 600, 1500, 50),
    AnimalType(Diet.HERBIVORES, Climate.TROPIC, 800, 1200, 40),
    AnimalType(Diet.HERBIVORES, Climate.CONTINENT, 5000, 2000, 60),
)

ENCLOSURE_TYPES: tuple[EnclosureType, ...] = (
    EnclosureType(Climate.TROPIC, 1000, 50),
    EnclosureType(Climate.CONTINENT, 1200, 60),
    EnclosureType(Climate.ARCTIC, 1500, 70),
)
ENCLOSURE_COST_PER_PLACE = 100
ENCLOSURE_DAILY_COST_PER_PLACE = 10

WORKER_TYPES: tuple[WorkerType, ...] = (
    WorkerType(WorkerRole.VETERINARIAN, 500, 2),
    WorkerType(WorkerRole.CLEANER, 300, 1),
    WorkerType(WorkerRole.FOODMEN, 200, 50),
)

WORKER_NAMES: tuple[str, ...] = (
    "Виктор Цой", "Егор Летов", "Юрий Клинских", "Михаил Горшенёв", "Набиулина",
    "Мизулина", "Шаман", "Марат", "Джек Салли", "Греф", "Дверь Киркорова", "Лепс",
)


class ZooError(Exception):
    """An action on the zoo could not be carried out."""


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Zoo:
    """The whole state of one game together with the actions on it."""

    def __init__(
        self,
        name: str = "",
        start_money: int = 10000,
        *,
        rng: Optional[random.Random] = None,
        console: Optional[ConsoleLog] = None,
    ) -> None:
        self.name = name
        self.day = 1
        self.food = START_FOOD
        self.money = start_money
        self.popularity = START_POPULARITY
        self.animals: list[Animal] = []
        self.workers: list[Worker] = []
        self.enclosures: list[Enclosure] = []
        self.rng = rng if rng is not None else random.Random()
        self.console = console if console is not None else ConsoleLog()

        self.selected_animal_index = -1
        self.selected_enclosure_index = -1
        self.selected_worker_index = -1
        self.status_message = ""

        self.workers.append(
            Worker(DIRECTOR_NAME, DIRECTOR_SALARY, WorkerRole.DIRECTOR, 0, len(self.workers) + 1)
        )

        self.money_history: list[float] = [float(self.money)]
        self.popularity_history: list[float] = [float(self.popularity)]
        self.visitors_history: list[float] = [float(self.visitors())]
        self.animal_count_history: list[float] = [0.0]

    def visitors(self) -> int:
        return 2 * self.popularity

    def _fail(self, message: str) -> ZooError:
        self.console.write(message)
        return ZooError(message)

    @staticmethod
    def _has_room(enclosure: Enclosure, climate: Climate, diet: Diet) -> bool:
        if enclosure.climate != climate or len(enclosure.animals) >= enclosure.capacity:
            return False
        return not enclosure.animals or enclosure.animals[0].diet == diet

    def buy_animal(self, name: str, animal_type: int, age: int) -> Animal:
        """Buy an animal of the given type and place it in a fitting enclosure."""
        if age < 0:
            raise self._fail("Возраст животного не может быть отрицательным!")
        if not 0 <= animal_type < len(ANIMAL_TYPES):
            raise ZooError(f"unknown animal type: {animal_type}")
        kind = ANIMAL_TYPES[animal_type]
        price = kind.base_price + age * kind.price_per_year

        if self.money < price:
            raise self._fail("Недостаточно денег для покупки животного!")

        if not any(self._has_room(e, kind.climate, kind.diet) for e in self.enclosures):
            raise self._fail("Невозможно купить животное: нет подходящего вольера!")

        animal = Animal(
            name,
            age,
            kind.weight,
            price,
            kind.diet,
            kind.climate,
            AnimalState.HEALTHY,
            len(self.animals) + 1,
            male=self.rng.randrange(2) == 0,
        )
        self.animals.append(animal)
        self.money -= price

        for enclosure in self.enclosures:
            if enclosure.climate == kind.climate and enclosure.living_count() < enclosure.capacity:
                if not enclosure.animals or enclosure.animals[0].diet == kind.diet:
                    enclosure.add_animal(animal)
                    self.console.write("Животное куплено и помещено в вольер!")
                    break
        return animal

    def birth_animal(self, first: Animal, second: Animal) -> Optional[Animal]:
        """Return a newborn of the two animals, or None if they cannot breed."""
        if (
            first.age > BREEDING_AGE
            and second.age > BREEDING_AGE
            and first.male != second.male
            and first.diet == second.diet
            and first.climate == second.climate
            and first.state is AnimalState.HEALTHY
            and second.state is AnimalState.HEALTHY
        ):
            return Animal(
                f"Рожденный_{first.name}_{second.name}",
                1,
                first.weight,
                NEWBORN_PRICE,
                first.diet,
                first.climate,
                AnimalState.HEALTHY,
                len(self.animals) + 1,
                male=self.rng.randrange(2) == 0,
                parents=(first, second),
            )
        return None

    def breed(self, first_index: int, second_index: int) -> list[Animal]:
        """Breed two animals given by position; return the newborns.

        Between one and four young are born. Newborns placed before a failure
        stay in the zoo.
        """
        count = len(self.animals)
        if not (0 <= first_index < count and 0 <= second_index < count):
            raise self._fail("Ошибка: одно из животных не найдено!")
        first = self.animals[first_index]
        second = self.animals[second_index]

        newborns: list[Animal] = []
        for _ in range(self.rng.randrange(4) + 1):
            baby = self.birth_animal(first, second)
            if baby is None:
                raise self._fail("Условия для рождения животного не выполнены!")

            home = next(
                (e for e in self.enclosures if self._has_room(e, baby.climate, baby.diet)),
                None,
            )
            if home is None:
                raise self._fail(
                    "Невозможно разместить новорожденное животное: нет подходящего вольера!"
                )
            home.add_animal(baby)
            self.animals.append(baby)
            newborns.append(baby)
        return newborns

    def build_enclosure(self, name: str, climate_type: int, capacity: int) -> Enclosure:
        """Build an enclosure of the given climate type."""
        if not 0 <= climate_type < len(ENCLOSURE_TYPES):
            raise ZooError(f"unknown climate type: {climate_type}")
        kind = ENCLOSURE_TYPES[climate_type]
        cost = kind.base_cost + capacity * ENCLOSURE_COST_PER_PLACE
        daily_cost = kind.base_daily_cost + capacity * ENCLOSURE_DAILY_COST_PER_PLACE

        if self.money < cost:
            raise self._fail("Недостаточно денег для строительства вольера!")

        enclosure = Enclosure(name, capacity, kind.climate, daily_cost)
        self.enclosures.append(enclosure)
        self.money -= cost
        self.console.write("Вольер построен!")
        return enclosure

    def hire_worker(self, worker_type: int) -> Worker:
        """Hire a worker with a random name for the given role type."""
        name = WORKER_NAMES[self.rng.randrange(len(WORKER_NAMES))]
        if not 0 <= worker_type < len(WORKER_TYPES):
            raise ZooError(f"unknown worker type: {worker_type}")
        kind = WORKER_TYPES[worker_type]

        if self.money < kind.salary:
            raise self._fail("Недостаточно денег для найма работника!")

        worker_id = len(self.workers) + 1
        worker = Worker(name, kind.salary, kind.role, kind.served, worker_id)
        self.workers.append(worker)
        self.money -= kind.salary
        self.console.write(f"id: {worker_id} - {name} нанят!")
        return worker

    def buy_food(self, amount: int) -> None:
        cost = amount * FOOD_PRICE
        if self.money < cost:
            raise self._fail("Недостаточно денег для покупки еды!")
        self.food += amount
        self.money -= cost
        self.console.write("Еда куплена!")

    def order_advertising(self, budget: int) -> int:
        """Spend the budget on advertising; return the popularity gained."""
        if self.money < budget:
            raise self._fail("Недостаточно денег для рекламы!")
        gain = _div_trunc(budget, ADVERTISING_STEP)
        self.popularity = min(self.popularity + gain, MAX_POPULARITY)
        self.money -= budget
        self.console.write(f"Рекламная кампания проведена успешно! Популярность +{gain}")
        return gain

    def sell_animal(self, index: int) -> int:
        """Sell the animal at the given position for half its price."""
        if not 0 <= index < len(self.animals):
            raise self._fail("Неверный индекс животного!")
        animal = self.animals[index]

        for enclosure in self.enclosures:
            if any(resident is animal for resident in enclosure.animals):
                enclosure.remove_animal(animal)
                break

        income = animal.price // 2
        self.money += income
        del self.animals[index]
        for number, remaining in enumerate(self.animals, start=1):
            remaining.id = number
        self.console.write("Животное продано!")
        return income

    def dismiss_worker(self, index: int) -> Worker:
        """Dismiss the worker at the given position; the director stays."""
        if not 0 <= index < len(self.workers) or self.workers[index].role is WorkerRole.DIRECTOR:
            raise self._fail("Нельзя уволить директора или неверный индекс!")
        worker = self.workers.pop(index)
        self.console.write("Работник уволен!")
        return worker

    def count_animals(self) -> int:
        """Animals not dead, counted once for every enclosure."""
        alive = sum(1 for a in self.animals if a.state is not AnimalState.DEAD)
        return alive * len(self.enclosures)

    def count_sick_animals(self) -> int:
        """Healthy and sick animals, counted once for every enclosure."""
        living = sum(
            1 for a in self.animals if a.state in (AnimalState.HEALTHY, AnimalState.SICK)
        )
        return living * len(self.enclosures)

    def heal_animal(self, index: int) -> bool:
        """Heal a sick animal with a free veterinarian.

        Returns False when the animal is not sick. Raises ZooError for a bad
        index or when no veterinarian is free today.
        """
        if not 0 <= index < len(self.animals):
            raise ZooError("Неверный индекс животного!")
        animal = self.animals[index]
        if animal.state is not AnimalState.SICK:
            return False
        for worker in self.workers:
            if worker.role is WorkerRole.VETERINARIAN and worker.is_working:
                animal.state = AnimalState.HEALTHY
                worker.is_working = False
                return True
        raise self._fail("Нет свободных ветеринаров!")

    def next_day(self) -> None:
        """Advance the whole zoo by one day."""
        self.day += 1

        for worker in self.workers:
            worker.start_day()
        for animal in self.animals:
            animal.update(self.rng)

        self.console.write(f"Расходы зоопарка {self.name}")
        salaries = sum(worker.price for worker in self.workers)
        self.console.write(f"Зарплаты: {salaries}")
        self.money -= salaries
        upkeep = sum(enclosure.daily_cost for enclosure in self.enclosures)
        self.console.write(f"Расходы на содержание вольеров: {upkeep}")
        self.money -= upkeep

        eaters = sum(
            a.eating_food
            for a in self.animals
            if a.state in (AnimalState.HEALTHY, AnimalState.SICK)
        )
        food_needed = eaters * len(self.enclosures)

        for worker in self.workers:
            if worker.role is WorkerRole.FOODMEN and worker.is_working:
                food_needed = int(food_needed * FOODMAN_SAVING)
                worker.is_working = False
        self.console.write(f"Кормление животных: {food_needed}")

        if self.food >= food_needed:
            self.food -= food_needed
            for animal in self.animals:
                animal.days_without_food = 0
                animal.happiness = max(100.0, animal.happiness + 10)
        else:
            fed_count = self.food
            self.food = 0
            for position, animal in enumerate(self.animals):
                if position < fed_count:
                    animal.days_without_food = 0
                    continue
                animal.days_without_food += 1
                animal.happiness -= 10.0
                if animal.days_without_food >= 3 and self.rng.randrange(10) == 0:
                    animal.state = AnimalState.DEAD

        dead_count = sum(1 for a in self.animals if a.state is AnimalState.DEAD)
        sick_count = sum(1 for a in self.animals if a.state is AnimalState.SICK)

        cleaners = sum(1 for w in self.workers if w.role is WorkerRole.CLEANER)
        total_dirt = 0
        for enclosure in self.enclosures:
            enclosure.update(self.rng, self.console)
            if enclosure.needs_cleaning() and cleaners > 0:
                enclosure.clean()
                cleaners -= 1
            total_dirt += enclosure.dirty
        self.console.write(f"Общее загрязнение зоопарка: {total_dirt}")

        visitors = self.visitors()
        self.money += visitors * (len(self.animals) - dead_count)
        self.money -= sum(worker.price for worker in self.workers)
        self.money -= sum(enclosure.daily_cost for enclosure in self.enclosures)

        self.popularity -= sick_count
        self.popularity -= dead_count * 3
        self.popularity += self.rng.randrange(21) - 10
        self.popularity = max(MIN_POPULARITY, min(self.popularity, MAX_POPULARITY))

        for enclosure in self.enclosures:
            enclosure.animals = [a for a in enclosure.animals if a.state is not AnimalState.DEAD]
        self.animals = [a for a in self.animals if a.state is not AnimalState.DEAD]

        self.money_history.append(float(self.money))
        self.popularity_history.append(float(self.popularity))
        self.visitors_history.append(float(visitors))
        self.animal_count_history.append(float(len(self.animals)))

        if self.money < 0:
            self.console.write("Вы банкрот! Игра окончена.")
        elif self.day >= LAST_DAY:
            self.console.write("Поздравляем! Вы успешно управляли зоопарком 30 дней!")
        else:
            self.console.write(f"День {self.day} завершен!")