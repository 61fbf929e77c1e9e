import pytest

from zoopark.animals import Animal, AnimalState, Climate, Diet
from zoopark.console import ConsoleLog
from zoopark.enclosure import Enclosure


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value

    @property
    def remaining(self):
        return len(self._values)


def make_animal(name="a", diet=Diet.PREDATORS, climate=Climate.ARCTIC,
                state=AnimalState.HEALTHY, animal_id=1):
    return Animal(name=name, diet=diet, climate=climate, state=state, id=animal_id)


def make_enclosure(capacity=3):
    return Enclosure("Cage", capacity, Climate.ARCTIC, 100)


def test_add_animal_accepts_matching():
    enclosure = make_enclosure()
    animal = make_animal()
    assert enclosure.add_animal(animal)
    assert enclosure.animals == [animal]


def test_add_animal_rejects_when_full():
    enclosure = make_enclosure(capacity=1)
    assert enclosure.add_animal(make_animal("one"))
    assert not enclosure.add_animal(make_animal("two"))
    assert enclosure.living_count() == 1


def test_dead_animals_do_not_take_space():
    enclosure = make_enclosure(capacity=1)
    enclosure.add_animal(make_animal("one"))
    enclosure.animals[0].state = AnimalState.DEAD
    assert enclosure.add_animal(make_animal("two"))


def test_add_animal_rejects_other_diet():
    enclosure = make_enclosure()
    enclosure.add_animal(make_animal(diet=Diet.PREDATORS))
    assert not enclosure.add_animal(make_animal(diet=Diet.HERBIVORES))


def test_add_animal_rejects_other_climate():
    enclosure = make_enclosure()
    assert not enclosure.add_animal(make_animal(climate=Climate.TROPIC))
    assert enclosure.animals == []


def test_remove_animal_by_identity():
    enclosure = make_enclosure()
    first, second = make_animal("twin"), make_animal("twin")
    enclosure.add_animal(first)
    enclosure.add_animal(second)
    enclosure.remove_animal(second)
    assert enclosure.animals == [first]
    assert enclosure.animals[0] is first


def test_remove_missing_animal_is_ignored():
    enclosure = make_enclosure()
    resident = make_animal()
    enclosure.add_animal(resident)
    enclosure.remove_animal(make_animal())
    assert enclosure.animals == [resident]


def test_needs_cleaning_threshold():
    enclosure = make_enclosure()
    enclosure.dirty = 10
    assert not enclosure.needs_cleaning()
    enclosure.dirty = 11
    assert enclosure.needs_cleaning()


def test_clean_never_goes_negative():
    enclosure = make_enclosure()
    enclosure.dirty = 30
    enclosure.clean()
    assert enclosure.dirty == 0


def test_clean_removes_fifty():
    enclosure = make_enclosure()
    enclosure.dirty = 80
    enclosure.clean()
    assert enclosure.dirty == 80 - 50


@pytest.mark.parametrize(
    "climate, label",
    [
        (Climate.TROPIC, "Тропики"),
        (Climate.CONTINENT, "Умеренный"),
        (Climate.ARCTIC, "Полярный"),
        (Climate.AQUATIC, "Водный"),
    ],
)
def test_climate_label(climate, label):
    assert Enclosure("x", 1, climate, 0).climate_label() == label


def test_update_empty_enclosure_only_gets_dirty():
    enclosure = make_enclosure()
    before = enclosure.dirty
    rng = ScriptedRng([])
    enclosure.update(rng, ConsoleLog())
    assert enclosure.dirty == before + 2


def test_infection_spreads_to_two_more():
    enclosure = make_enclosure()
    animals = [make_animal(str(n), animal_id=n) for n in range(3)]
    for animal in animals:
        enclosure.add_animal(animal)
    rng = ScriptedRng([0, 0])
    enclosure.update(rng, ConsoleLog())
    assert all(a.state is AnimalState.SICK for a in animals)
    assert rng.remaining == 0


def test_sick_majority_starts_dying():
    enclosure = make_enclosure()
    animals = [
        make_animal("sick1", state=AnimalState.SICK, animal_id=1),
        make_animal("well", state=AnimalState.HEALTHY, animal_id=2),
        make_animal("sick2", state=AnimalState.SICK, animal_id=3),
    ]
    for animal in animals:
        enclosure.add_animal(animal)
    console = ConsoleLog()
    enclosure.update(ScriptedRng([5, 0, 1, 0]), console)
    assert [a.state for a in animals] == [
        AnimalState.DEAD,
        AnimalState.SICK,
        AnimalState.DEAD,
    ]
    lines = console.lines()
    assert len(lines) == 2
    assert "sick1" in lines[0]
    assert "sick2" in lines[1]


def test_no_deaths_without_sick_majority():
    enclosure = make_enclosure(capacity=4)
    animals = [make_animal(str(n), animal_id=n) for n in range(4)]
    for animal in animals:
        enclosure.add_animal(animal)
    console = ConsoleLog()
    rng = ScriptedRng([0, 1])
    enclosure.update(rng, console)
    assert console.lines() == []
    assert all(a.state is not AnimalState.DEAD for a in animals)
    assert rng.remaining == 0