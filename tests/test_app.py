import io
import sys

import pytest

from zoopark.app import STARTUP_LINES, main


def _run(monkeypatch, capsys, script, argv=None):
    monkeypatch.setattr(sys, "stdin", io.StringIO(script))
    code = main(argv if argv is not None else [])
    return code, capsys.readouterr().out


def test_startup_song_is_printed(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "quit\n")
    assert code == 0
    assert "Чтож всё отлично!" in out
    assert out.index(STARTUP_LINES[0]) < out.index("Чтож всё отлично!")


def test_full_start_creates_named_zoo(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "start\nname Тест\nstats\nquit\n", ["--seed", "1"])
    assert code == 0
    assert "Зоопарк Тест создан!" in out
    assert "Дни: 1" in out


def test_money_option_sets_start_money(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "start\nstats\nquit\n", ["--money", "500"])
    assert "Деньги: 500" in out


def test_end_of_input_stops_the_loop(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "stats\n")
    assert code == 0
    assert "Зоопарк пока не создан" in out


def test_same_seed_gives_same_game(monkeypatch, capsys):
    script = "start\nname Тау\nbuild 2 3\nbuy 1 2 Мурка\nnext\nnext\nstats\nquit\n"
    _, first = _run(monkeypatch, capsys, script, ["--seed", "42"])
    _, second = _run(monkeypatch, capsys, script, ["--seed", "42"])
    assert first == second
    assert "Вольер построен!" in first


def test_invalid_option_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["--money", "много"])