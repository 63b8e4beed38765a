import io
from unittest import mock

import pytest

from termjack.cli import Session, main
from termjack.colors import color_index
from termjack.config import Settings
from termjack.game import STARTING_CASH
from termjack.render import help_text


class ScriptedRng:
    """Chooses the given positions in turn, then always the first unused card."""

    def __init__(self, picks=()):
        self._picks = list(picks)

    def randrange(self, n):
        return self._picks.pop(0) if self._picks else 0


class Console:
    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def make_session(tmp_path, lines, settings=None, picks=()):
    console = Console(lines)
    output = io.StringIO()
    pauses = []
    session = Session(
        settings=settings if settings is not None else Settings(),
        input_fn=console,
        output=output,
        rng=ScriptedRng(picks),
        config_path=tmp_path / "blackjack.cfg",
        pause=lambda: pauses.append(1),
    )
    return session, console, output, pauses


def test_stand_and_lose_then_quit(tmp_path):
    session, console, output, pauses = make_session(tmp_path, ["s", "n"])
    session.run()
    text = output.getvalue()
    assert "You lost. " in text
    assert text.startswith("Welcome to Blackjack!\n")
    assert text.endswith("Thank you for playing Blackjack!\nGoodbye!\n")
    assert len(pauses) == text.count("Dealer draws...")
    assert any("Play again?" in prompt for prompt in console.prompts)


def test_push_returns_stake(tmp_path):
    # player 10 and K, dealer 9 then A: both on 20
    session, _, output, _ = make_session(
        tmp_path, ["25", "s", "n"], settings=Settings(cash=True), picks=[9, 11, 8]
    )
    assert session.run() == STARTING_CASH
    text = output.getvalue()
    assert "Push. " in text
    assert f"Your final cash balance: {STARTING_CASH}\n" in text


def test_win_pays_double(tmp_path):
    # player 10 and K, dealer 9, 2, A, 3, 4
    session, _, output, _ = make_session(
        tmp_path, ["40", "s", "n"], settings=Settings(cash=True), picks=[9, 11, 8, 1]
    )
    assert session.run() == STARTING_CASH + 40
    assert "You won! " in output.getvalue()


def test_blackjack_on_deal_wins_immediately(tmp_path):
    session, console, output, _ = make_session(tmp_path, ["n"], picks=[0, 11])
    session.run()
    text = output.getvalue()
    assert "Blackjack!" in text
    assert text.index("Blackjack!") < text.index("You won! ")
    assert not any(">>" in prompt for prompt in console.prompts)


def test_bet_rejects_bad_and_excessive_amounts(tmp_path):
    session, _, output, _ = make_session(
        tmp_path, ["abc", "500", "10", "q"], settings=Settings(cash=True)
    )
    assert session.run() == STARTING_CASH - 10
    text = output.getvalue()
    assert "Invalid input.\n" in text
    assert "Not enough cash\n" in text


def test_dealer_ace_offers_insurance(tmp_path):
    session, console, output, _ = make_session(
        tmp_path, ["10", "y", "500", "5", "q"], settings=Settings(cash=True), picks=[1, 1, 0]
    )
    session.run()
    text = output.getvalue()
    assert "Not enough cash.\n" in text
    assert session.state.insurance == 5
    assert "Your insurance: " in console.prompts


def test_autoplay_skips_replay_question(tmp_path):
    session, console, output, _ = make_session(
        tmp_path, ["s", "q"], settings=Settings(autoplay=True)
    )
    session.run()
    assert "You lost. " in output.getvalue()
    assert not any("Play again?" in prompt for prompt in console.prompts)
    assert len(session.state.player) == 2


def test_invalid_command_and_help(tmp_path):
    session, _, output, _ = make_session(tmp_path, ["xyz", "HELP", "quit"])
    session.run()
    text = output.getvalue()
    assert "Invalid input\n" in text
    assert help_text() in text


def test_end_of_input_says_goodbye(tmp_path):
    session, _, output, _ = make_session(tmp_path, [])
    session.run()
    assert output.getvalue().endswith("Goodbye!\n")


def test_quit_saves_settings(tmp_path):
    settings = Settings(values=True, hearts_color=3)
    session, _, _, _ = make_session(tmp_path, ["q"], settings=settings)
    session.run()
    assert Settings.load(tmp_path / "blackjack.cfg") == settings


def test_settings_menu_toggles_and_colours(tmp_path):
    session, _, output, _ = make_session(
        tmp_path, ["abc", "1", "3", "4", "RED", "9", "0"]
    )
    session.settings_menu()
    assert session.settings.values is True
    assert session.settings.autoplay is True
    assert session.settings.spades_color == color_index("red")
    text = output.getvalue()
    assert "Hand value display is now ON\n" in text
    assert "Invalid input.\n" in text


def test_settings_menu_unknown_colour(tmp_path):
    session, _, output, _ = make_session(tmp_path, ["7", "pink", "0"])
    session.settings_menu()
    assert "Unknown color.\n" in output.getvalue()
    assert session.settings.clubs_color == Settings().clubs_color


def test_settings_command_in_game(tmp_path):
    session, _, output, _ = make_session(tmp_path, ["cfg", "2", "0", "q"])
    session.run()
    assert session.settings.cash is True
    assert "Betting is now ON\n" in output.getvalue()


def test_main_runs_a_session(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with mock.patch("builtins.input", side_effect=["q"]):
        assert main([]) == 0
    assert "Goodbye!" in capsys.readouterr().out
    assert (tmp_path / "blackjack.cfg").exists()


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--nope"])