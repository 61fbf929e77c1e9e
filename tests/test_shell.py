import io
import random

import pytest

from zoopark.report import NO_ZOO_MESSAGE
from zoopark.shell import CHEAT_NAME_LIMIT, CHEAT_WARNING, ZooShell
from zoopark.story import default_scenes


def make_shell(seed=7):
    out = io.StringIO()
    shell = ZooShell(stdout=out, rng=random.Random(seed))
    return shell, out


def started(seed=7, name="Тау"):
    shell, out = make_shell(seed)
    shell.onecmd("start")
    shell.onecmd(f"name {name}")
    return shell, out


def test_start_shows_scenes_until_name_is_asked():
    shell, out = make_shell()
    shell.onecmd("start")
    scenes = default_scenes()
    text = out.getvalue()
    assert scenes[0].text in text
    assert scenes[2].text in text
    assert scenes[3].text not in text
    assert shell.story.is_open
    assert shell.zoo is not None


def test_name_finishes_story_and_names_zoo():
    shell, out = started(name="Тау")
    assert shell.zoo.name == "Тау"
    assert not shell.story.is_open
    assert "Зоопарк Тау создан!" in shell.console.lines()
    assert default_scenes()[3].text in out.getvalue()


def test_empty_name_is_refused():
    shell, out = make_shell()
    shell.onecmd("start")
    shell.onecmd("name   ")
    assert "Введи название" in out.getvalue()
    assert shell.story.is_open


def test_name_without_story_is_refused():
    shell, _ = make_shell()
    shell.onecmd("name Тау")
    assert shell.zoo is None
    assert shell.pending_name == ""


def test_second_start_keeps_zoo():
    shell, _ = started()
    zoo = shell.zoo
    shell.onecmd("start")
    assert shell.zoo is zoo


@pytest.mark.parametrize("command", ["animals", "buy 1 3", "next", "food 10", "hire 1"])
def test_commands_need_a_zoo(command):
    shell, out = make_shell()
    shell.onecmd(command)
    assert NO_ZOO_MESSAGE in out.getvalue()
    assert shell.zoo is None


def test_stats_without_zoo():
    shell, out = make_shell()
    shell.onecmd("stats")
    assert out.getvalue().strip() == NO_ZOO_MESSAGE


def test_stats_with_zoo_shows_day():
    shell, out = started()
    shell.onecmd("stats")
    assert f"Дни: {shell.zoo.day}" in out.getvalue()
    assert "Зоопарк: Тау" in out.getvalue()


def test_build_and_buy_animal():
    shell, out = started()
    shell.onecmd("build 2 5 Клетка")
    assert [e.name for e in shell.zoo.enclosures] == ["Клетка"]
    money_before = shell.zoo.money
    shell.onecmd("buy 1 3 Мурка")
    assert len(shell.zoo.animals) == 1
    animal = shell.zoo.animals[0]
    assert animal.name == "Мурка"
    assert shell.zoo.money == money_before - animal.price
    assert animal in shell.zoo.enclosures[0].animals


def test_buy_default_name():
    shell, _ = started()
    shell.onecmd("build 2 5")
    shell.onecmd("buy 1 3")
    assert shell.zoo.animals[0].name == "Животное"
    assert shell.zoo.enclosures[0].name == "Вольер"


def test_buy_without_enclosure_reports_once():
    shell, out = started()
    shell.onecmd("buy 1 3 Мурка")
    message = "Невозможно купить животное: нет подходящего вольера!"
    assert out.getvalue().count(message) == 1
    assert shell.zoo.animals == []


def test_buy_fish_is_not_sold():
    shell, _ = started()
    shell.onecmd("build 1 5")
    money_before = shell.zoo.money
    shell.onecmd("buy 7 3 Рыбка")
    assert shell.zoo.animals == []
    assert shell.zoo.money == money_before


def test_bad_arguments_print_usage():
    shell, out = started()
    shell.onecmd("buy кот")
    assert "Использование: buy" in out.getvalue()
    assert shell.zoo.animals == []


def test_hire_and_fire():
    shell, out = started()
    shell.onecmd("hire 1")
    assert len(shell.zoo.workers) == 2
    shell.onecmd("fire 1")
    assert len(shell.zoo.workers) == 2
    assert "Нельзя уволить директора или неверный индекс!" in out.getvalue()
    shell.onecmd("fire 2")
    assert len(shell.zoo.workers) == 1


def test_heal_healthy_animal():
    shell, out = started()
    shell.onecmd("build 2 5")
    shell.onecmd("buy 1 3 Мурка")
    shell.onecmd("heal 1")
    assert "Животное не болеет" in out.getvalue()


def test_heal_bad_index_reports():
    shell, out = started()
    shell.onecmd("heal 5")
    assert "Неверный индекс животного!" in out.getvalue()


def test_sell_gives_half_price():
    shell, _ = started()
    shell.onecmd("build 2 5")
    shell.onecmd("buy 1 3 Мурка")
    price = shell.zoo.animals[0].price
    money_before = shell.zoo.money
    shell.onecmd("sell 1")
    assert shell.zoo.animals == []
    assert shell.zoo.money == money_before + price // 2


def test_food_and_advertising():
    shell, _ = started()
    food_before = shell.zoo.food
    shell.onecmd("food 10")
    assert shell.zoo.food == food_before + 10
    popularity_before = shell.zoo.popularity
    shell.onecmd("advertise 500")
    assert shell.zoo.popularity == popularity_before + 5


def test_next_day_advances_and_empty_line_does_not_repeat():
    shell, _ = started()
    shell.onecmd("next")
    assert shell.zoo.day == 2
    assert len(shell.zoo.money_history) == 2
    shell.onecmd("")
    assert shell.zoo.day == 2


def test_enclosure_details():
    shell, out = started()
    shell.onecmd("build 2 5 Клетка")
    shell.onecmd("enclosures 1")
    assert "Информация о вольере \"Клетка\":" in out.getvalue()
    assert "Вольер пуст" in out.getvalue()
    assert shell.zoo.selected_enclosure_index == 0


def test_cheat_money_and_warning_once():
    shell, _ = started()
    shell.onecmd("cheat money 123")
    shell.onecmd("cheat")
    assert shell.zoo.money == 123
    assert shell.console.lines().count(CHEAT_WARNING) == 1


def test_cheat_name_is_truncated():
    shell, _ = started()
    shell.onecmd("cheat name " + "я" * 200)
    assert len(shell.zoo.name) == CHEAT_NAME_LIMIT


def test_log_and_clear():
    shell, out = started()
    shell.onecmd("log")
    assert "Зоопарк Тау создан!" in out.getvalue()
    shell.onecmd("clear")
    assert shell.console.lines() == []


def test_quit_and_eof_stop_loop():
    shell, _ = make_shell()
    assert shell.onecmd("quit") is True
    assert shell.onecmd("EOF") is True


def test_cmdloop_reads_script():
    out = io.StringIO()
    script = io.StringIO("start\nname Тау\nfood 10\nquit\n")
    shell = ZooShell(stdin=script, stdout=out, rng=random.Random(1))
    shell.cmdloop(intro="")
    assert shell.zoo.name == "Тау"
    assert "Еда куплена!" in shell.console.lines()