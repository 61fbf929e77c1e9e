"""Interactive text front end for running a zoo."""

from __future__ import annotations

import cmd
import random
from typing import Callable, Optional

from zoopark.console import ConsoleLog
from zoopark.report import (
    NO_ZOO_MESSAGE,
    animal_rows,
    enclosure_rows,
    overview_lines,
    statistics_lines,
    worker_rows,
)
from zoopark.story import Storyline
from zoopark.zoo import Zoo, ZooError

START_MONEY = 10000
DEFAULT_ANIMAL_NAME = "Животное"
DEFAULT_ENCLOSURE_NAME = "Вольер"
CHEAT_NAME_LIMIT = 127
FAREWELL = "Выход из игры."

LORE = (
    "Лор игры:\n"
    "Неожиданно вас подхватил пространственно-временной вихрь, бац, \n"
    "и вы директор инопланетного зоопарка на искусственной планете, "
    "вращающейся вокруг Тау Кита.\n"
    "Инопланетные технологии позволяют вам очень гибко изменять самих животных, \n"
    "и вообще жить в кайф, но вот с системой учёта там совсем беда."
)

SUNBOY_GREETING = (
    "Санбой: и так, д06р0 п0жал0вать, дирэкт0р, в ваш н0выи э00парк на искусствэнн0и "
    "планэтэ тау кита! я ваш вэрныи п0м0щник, и вмэстэ мы с0эдадим нэчт0 удивитэльн0э!\n"
    "Санбой: для начала, даваитэ придумаэм наэваниэ для нашэx0 э00парка. как насчэт "
    "\"э00сфэра тау\"? эдэсь мы 6удэм с06ирать самыэ экэ0тичэскиэ сущэства иэ всэх "
    "уx0лк0в всэлэнн0и и с0эдавать уникальныэ усл0вия для их жиэни."
)

CHEAT_WARNING = (
    "Санбой: Фу какой дурной поступок. Я запомнил твой какашечный поступок."
)

ANIMAL_TYPE_NAMES = ("Кошка", "Пингвин", "Собака", "Белый медведь", "Жираф", "Слон", "Рыба")
CLIMATE_TYPE_NAMES = ("Тропический", "Умеренный", "Полярный", "Водный")
WORKER_TYPE_NAMES = ("Ветеринар", "Уборщик", "Кормилец")

_FAILED = object()


def _numbered(names: tuple[str, ...]) -> str:
    return ", ".join(f"{number} - {name}" for number, name in enumerate(names, start=1))


class _EchoLog(ConsoleLog):
    """A console log that also shows each new message to the player."""

    def __init__(self, echo: Callable[[str], None]) -> None:
        super().__init__()
        self._echo = echo
        self.recent: list[str] = []

    def write(self, text: str) -> None:
        super().write(text)
        self.recent.append(str(text))
        self._echo(str(text))


class ZooShell(cmd.Cmd):
    """Command loop offering every action of the game's windows and menus."""

    prompt = "зоопарк> "
    intro = LORE + "\n\nВведите start, чтобы начать игру, или help для списка команд."

    def __init__(
        self,
        *,
        stdin=None,
        stdout=None,
        rng: Optional[random.Random] = None,
        start_money: int = START_MONEY,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.rng = rng if rng is not None else random.Random()
        self.start_money = start_money
        self.console = _EchoLog(self._say)
        self.story = Storyline()
        self.zoo: Optional[Zoo] = None
        self.cheat_active = False
        self.pending_name = ""
        self.finished = False

    # -- helpers ---------------------------------------------------------

    def _say(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def _require_zoo(self) -> Optional[Zoo]:
        if self.zoo is None:
            self._say(NO_ZOO_MESSAGE)
        return self.zoo

    def _attempt(self, action: Callable[[], object]) -> object:
        """Run a zoo action, reporting a failure that was not already logged."""
        self.console.recent.clear()
        try:
            return action()
        except ZooError as exc:
            if str(exc) not in self.console.recent:
                self._say(str(exc))
            return _FAILED

    def _numbers(self, arg: str, count: int, usage: str) -> Optional[tuple[list[int], str]]:
        tokens = arg.split(maxsplit=count)
        try:
            numbers = [int(token) for token in tokens[:count]]
        except ValueError:
            numbers = []
        if len(numbers) < count:
            self._say(usage)
            return None
        rest = tokens[count] if len(tokens) > count else ""
        return numbers, rest

    def _advance_story(self) -> None:
        while self.story.is_open:
            scene = self.story.current()
            if scene is None:
                self.story.is_open = False
                break
            self._say(scene.text)
            if scene.requires_input:
                self._say(f"{scene.input_label}: введите name <название>")
                return
            self.story.next()
        self._finish_story()

    def _finish_story(self) -> None:
        if self.zoo is None:
            return
        self.zoo.name = self.pending_name
        self.console.write(f"Зоопарк {self.pending_name} создан!")
        self.console.write("Санбой: Название так себе на самом деле.")

    # -- cmd hooks -------------------------------------------------------

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        if line.strip() == "EOF":
            return True
        self._say(f"Неизвестная команда: {line}")
        return False

    # -- game start ------------------------------------------------------

    def do_start(self, arg: str) -> None:
        """start: начать новую игру."""
        if self.zoo is not None:
            self._say("Игра уже начата.")
            return
        self.console.write(SUNBOY_GREETING)
        self.story.open()
        self.zoo = Zoo(self.pending_name, self.start_money, rng=self.rng, console=self.console)
        self._advance_story()

    def do_name(self, arg: str) -> None:
        """name <название>: дать зоопарку название, когда Санбой спросит."""
        scene = self.story.current() if self.story.is_open else None
        if scene is None or not scene.requires_input:
            self._say("Название сейчас не спрашивают. Сменить его можно через cheat name.")
            return
        try:
            self.pending_name = self.story.confirm_input(arg.strip())
        except ValueError as exc:
            self._say(str(exc))
            return
        self._advance_story()

    # -- views -----------------------------------------------------------

    def do_stats(self, arg: str) -> None:
        """stats: показать данные зоопарка."""
        for line in statistics_lines(self.zoo):
            self._say(line)
        if self.zoo is not None:
            for line in overview_lines(self.zoo):
                self._say(line)

    def do_animals(self, arg: str) -> None:
        """animals: список животных."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        rows = animal_rows(zoo)
        if not rows:
            self._say("Животных нет")
            return
        for number, row in enumerate(rows, start=1):
            self._say(
                f"{number}. {row.name} | {row.kind} | {row.sex} | {row.age} | "
                f"{row.state} | {round(row.happiness * 100)}%"
            )

    def do_enclosures(self, arg: str) -> None:
        """enclosures [номер]: список вольеров или сведения об одном из них."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        if arg.strip():
            parsed = self._numbers(arg, 1, "Использование: enclosures [номер]")
            if parsed is None:
                return
            index = parsed[0][0] - 1
            if not 0 <= index < len(zoo.enclosures):
                self._say("Неверный номер вольера!")
                return
            zoo.selected_enclosure_index = index
            enclosure = zoo.enclosures[index]
            self._say(f"Информация о вольере \"{enclosure.name}\":")
            self._say(f"Климат: {enclosure.climate_label()}")
            self._say("Животные в вольере:")
            if not enclosure.animals:
                self._say("Вольер пуст")
            for number, animal in enumerate(enclosure.animals, start=1):
                if animal.is_present():
                    self._say(f"{number}. {animal.name} ({animal.state_label()})")
            return
        rows = enclosure_rows(zoo)
        if not rows:
            self._say("Вольеров нет")
            return
        for number, row in enumerate(rows, start=1):
            self._say(
                f"{number}. {row.name} | {row.climate} | {row.capacity} | "
                f"{row.occupancy} | чистота {round(row.cleanliness * 100)}%"
            )

    def do_workers(self, arg: str) -> None:
        """workers: список работников."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        for number, row in enumerate(worker_rows(zoo), start=1):
            action = "" if row.can_dismiss else " | Нельзя уволить"
            self._say(f"{number}. {row.name} | {row.role} | {row.salary} | {row.status}{action}")

    # -- animals ---------------------------------------------------------

    def do_buy(self, arg: str) -> None:
        """buy <тип> <возраст> [имя]: купить животное."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(
            arg, 2, f"Использование: buy <тип> <возраст> [имя]; типы: {_numbered(ANIMAL_TYPE_NAMES)}"
        )
        if parsed is None:
            return
        (kind, age), name = parsed
        name = name.strip() or DEFAULT_ANIMAL_NAME
        animal = self._attempt(lambda: zoo.buy_animal(name, kind - 1, age))
        if animal is not _FAILED:
            self._say(f"Куплено: {animal.name} за {animal.price}")

    def do_heal(self, arg: str) -> None:
        """heal <номер>: вылечить животное."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 1, "Использование: heal <номер животного>")
        if parsed is None:
            return
        result = self._attempt(lambda: zoo.heal_animal(parsed[0][0] - 1))
        if result is True:
            self._say("Животное вылечено")
        elif result is False:
            self._say("Животное не болеет")

    def do_sell(self, arg: str) -> None:
        """sell <номер>: продать животное за половину цены."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 1, "Использование: sell <номер животного>")
        if parsed is None:
            return
        self._attempt(lambda: zoo.sell_animal(parsed[0][0] - 1))

    def do_breed(self, arg: str) -> None:
        """breed <номер> <номер>: спарить двух животных."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 2, "Использование: breed <номер> <номер>")
        if parsed is None:
            return
        first, second = parsed[0]
        newborns = self._attempt(lambda: zoo.breed(first - 1, second - 1))
        if newborns is not _FAILED:
            for baby in newborns:
                self._say(f"Родилось: {baby.name}")

    # -- enclosures, staff, shop -----------------------------------------

    def do_build(self, arg: str) -> None:
        """build <климат> <вместимость> [название]: построить вольер."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(
            arg,
            2,
            f"Использование: build <климат> <вместимость> [название]; "
            f"климат: {_numbered(CLIMATE_TYPE_NAMES)}",
        )
        if parsed is None:
            return
        (climate, capacity), name = parsed
        name = name.strip() or DEFAULT_ENCLOSURE_NAME
        self._attempt(lambda: zoo.build_enclosure(name, climate - 1, capacity))

    def do_hire(self, arg: str) -> None:
        """hire <должность>: нанять работника."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(
            arg, 1, f"Использование: hire <должность>; должности: {_numbered(WORKER_TYPE_NAMES)}"
        )
        if parsed is None:
            return
        self._attempt(lambda: zoo.hire_worker(parsed[0][0] - 1))

    def do_fire(self, arg: str) -> None:
        """fire <номер>: уволить работника."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 1, "Использование: fire <номер работника>")
        if parsed is None:
            return
        self._attempt(lambda: zoo.dismiss_worker(parsed[0][0] - 1))

    def do_food(self, arg: str) -> None:
        """food <количество>: купить еду."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 1, "Использование: food <количество>")
        if parsed is None:
            return
        self._attempt(lambda: zoo.buy_food(parsed[0][0]))

    def do_advertise(self, arg: str) -> None:
        """advertise <бюджет>: заказать рекламу."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        parsed = self._numbers(arg, 1, "Использование: advertise <бюджет>")
        if parsed is None:
            return
        self._attempt(lambda: zoo.order_advertising(parsed[0][0]))

    def do_next(self, arg: str) -> None:
        """next: следующий день."""
        zoo = self._require_zoo()
        if zoo is None:
            return
        zoo.next_day()

    # -- console, cheats, exit -------------------------------------------

    def do_log(self, arg: str) -> None:
        """log: показать консоль."""
        lines = self.console.lines()
        if not lines:
            self._say("Консоль пуста")
        for line in lines:
            self._say(line)

    def do_clear(self, arg: str) -> None:
        """clear: очистить консоль."""
        self.console.clear()

    def do_cheat(self, arg: str) -> None:
        """cheat [name <название> | money <сумма>]: читменю."""
        if not self.cheat_active:
            self.cheat_active = True
            self.console.write(CHEAT_WARNING)
        zoo = self._require_zoo()
        if zoo is None:
            return
        command, _, value = arg.strip().partition(" ")
        value = value.strip()
        if not command:
            self._say(f"Название зоопарка: {zoo.name}")
            self._say(f"Деньги: {zoo.money}")
        elif command == "name":
            zoo.name = value[:CHEAT_NAME_LIMIT]
            self._say(f"Название зоопарка: {zoo.name}")
        elif command == "money":
            try:
                zoo.money = int(value)
            except ValueError:
                self._say("Использование: cheat money <сумма>")
                return
            self._say(f"Деньги: {zoo.money}")
        else:
            self._say("Использование: cheat [name <название> | money <сумма>]")

    def do_quit(self, arg: str) -> bool:
        """quit: выйти из игры."""
        self.finished = True
        self._say(FAREWELL)
        return self.finished