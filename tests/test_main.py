import io

from minimopoly.actions import GameState
from minimopoly.console import Console
from minimopoly.constants import P1_ICON, P2_ICON, STARTING_MONEY, TAX_AMOUNT
from minimopoly.gameio import SaveStore
from minimopoly.main import main, run_game
from minimopoly.player import Player


class _ScriptedRng:
    def __init__(self, rolls=(), effects=()):
        self._rolls = list(rolls)
        self._effects = list(effects)

    def randint(self, low, high):
        return self._rolls.pop(0)

    def randrange(self, stop):
        return self._effects.pop(0)


def _no_sleep(seconds):
    pass


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_exit_immediately(tmp_path):
    console, out = _console("Ann\nBob\n4\n")
    store = SaveStore(tmp_path, console)
    state = run_game(console, store, _ScriptedRng(), _no_sleep)
    assert state.is_game_over is True
    assert state.current_player_index == 0
    assert not store.save_exists()
    assert "The winner is" in out.getvalue()


def test_one_turn_then_save(tmp_path):
    console, _ = _console("Ann\nBob\n1\n\n3\n")
    store = SaveStore(tmp_path, console)
    state = run_game(console, store, _ScriptedRng(rolls=[2], effects=[1]), _no_sleep)
    assert state.current_player_index == 1
    assert state.players[0].position == 2
    assert state.players[0].money == STARTING_MONEY - 50
    assert store.saved_player_names() == ("Ann", "Bob")
    reloaded = store.load_player("Ann")
    assert reloaded.money == state.players[0].money
    assert reloaded.position == state.players[0].position


def test_bankruptcy_ends_loaded_game(tmp_path):
    setup_console, _ = _console("")
    store = SaveStore(tmp_path, setup_console)
    ann = Player(name="Ann", icon=P1_ICON, money=-190, position=3)
    bob = Player(name="Bob", icon=P2_ICON)
    store.save_game(GameState(players=[ann, bob]))

    console, out = _console("1\n1\n")
    state = run_game(console, SaveStore(tmp_path, console), _ScriptedRng(rolls=[1]), _no_sleep)
    assert state.players[0].is_bankrupt is True
    assert state.players[0].money == -190 - TAX_AMOUNT
    assert "The winner is Bob" in out.getvalue()


def test_main_runs_and_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ann\nBob\n4\n"))
    monkeypatch.setattr("time.sleep", _no_sleep)
    status = main(["--directory", str(tmp_path), "--seed", "7"])
    assert status == 0
    assert "The winner is" in capsys.readouterr().out


def test_main_saves_into_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ann\nBob\n3\n"))
    monkeypatch.setattr("time.sleep", _no_sleep)
    assert main(["--directory", str(tmp_path)]) == 0
    assert (tmp_path / "savegame.txt").read_text(encoding="utf-8") == "Ann\nBob\n"


def test_main_reports_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("time.sleep", _no_sleep)
    assert main(["--directory", str(tmp_path)]) == 1