"""The interactive blackjack session played in a terminal."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from collections import deque
from typing import Callable, Optional, TextIO

from .cards import Deck, Suit
from .colors import BOLD, GREEN, RED, RESET, YELLOW
from .config import CONFIG_FILE, Settings
from .game import GameState, Outcome
from .render import help_text, render_table

_OUTCOME_MESSAGES = {
    Outcome.WIN: f"{BOLD}{GREEN}You won! \n{RESET}",
    Outcome.PUSH: f"{BOLD}{YELLOW}Push. \n{RESET}",
    Outcome.LOSE: f"{BOLD}{RED}You lost. \n{RESET}",
}

_COLOR_CHOICES = {
    4: ("Spades", Suit.SPADES),
    5: ("Hearts", Suit.HEARTS),
    6: ("Diamonds", Suit.DIAMONDS),
    7: ("Clubs", Suit.CLUBS),
}


class _Quit(Exception):
    """The player asked to leave."""


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


def _sleep_a_second() -> None:
    time.sleep(1)


class Session:
    """A game of blackjack driven by typed commands."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        config_path: str | os.PathLike = CONFIG_FILE,
        pause: Optional[Callable[[], None]] = None,
    ) -> None:
        self.config_path = config_path
        self.settings = settings if settings is not None else Settings.load(config_path)
        self._input = input_fn if input_fn is not None else input
        self._out = output if output is not None else sys.stdout
        self._pause = pause if pause is not None else _sleep_a_second
        self.deck = Deck(rng)
        self.state = GameState()
        self._tokens: deque[str] = deque()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read(self, prompt: str) -> str:
        while not self._tokens:
            self._tokens.extend(self._input(prompt).split())
        return self._tokens.popleft()

    def _read_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self._read(prompt))
        except ValueError:
            return None

    def _read_choice(self, prompt: str) -> str:
        return self._read(prompt)[0].lower()

    def _table(self) -> str:
        return render_table(self.state.player, self.state.dealer, self.settings)

    def run(self) -> int:
        """Play until the player quits; return the final cash balance."""
        self._write("Welcome to Blackjack!\nFor usage/rules type (help).\n\n")
        try:
            self._play()
        except (_Quit, EOFError):
            pass
        self._goodbye()
        return self.state.cash

    def _goodbye(self) -> None:
        try:
            self.settings.save(self.config_path)
        except OSError:
            pass
        self._write("Thank you for playing Blackjack!\n")
        if self.settings.cash:
            self._write(f"Your final cash balance: {self.state.cash}\n")
        self._write("Goodbye!\n")

    def _play(self) -> None:
        state = self.state
        self._start_round()
        while True:
            self._write(self._table())
            while not state.stand and not state.end:
                command = self._read("\n>> ").lower()
                if command in ("h", "hit"):
                    state.hit(self.deck)
                    break
                if command in ("s", "stand"):
                    state.stand = True
                    break
                if command in ("q", "quit"):
                    raise _Quit
                if command == "help":
                    self._write(help_text())
                elif command in ("settings", "cfg"):
                    self.settings_menu()
                    self._write("\n")
                    self._write(self._table())
                else:
                    self._write("Invalid input\n")

            if state.dealer_draw(self.deck) is not None:
                self._write("Dealer draws...\n\n")
                self._pause()

            outcome = state.outcome()
            if outcome is not None:
                self._finish(outcome)
            if state.end:
                self._close_round()
                self._start_round()

    def _start_round(self) -> None:
        while True:
            if self.settings.cash:
                self._ask_bet()
            if not self.state.deal(self.deck):
                break
            self._write(f"{BOLD}{GREEN}Blackjack!\n{RESET}")
            self._finish(Outcome.WIN)
            self._close_round()
        if self.state.dealer.soft_aces == 1 and self.settings.cash:
            self._ask_insurance()

    def _restart(self) -> None:
        self.state.reset()
        self.deck.reset()

    def _close_round(self) -> None:
        self.state.collect()
        if not self.settings.autoplay:
            while True:
                answer = self._read_choice(f"{BOLD}Play again? (y/n): {RESET}")
                self._write("\n")
                if answer == "y":
                    break
                if answer == "n":
                    raise _Quit
                self._write("Invalid input\n")
        self._restart()

    def _finish(self, outcome: Outcome) -> None:
        self._write(self._table())
        self._write("\n")
        self._write(_OUTCOME_MESSAGES[outcome])
        if self.state.settle(outcome):
            self._write("You got your insurance.\n")
        self._write("\n")

    def _ask_bet(self) -> None:
        while True:
            self._write(f"Your cash: {self.state.cash}\n")
            bet = self._read_int("Your bet: ")
            if bet is None:
                self._write("Invalid input.\n")
                continue
            try:
                self.state.place_bet(bet)
            except ValueError:
                self._write("Not enough cash\n")
            else:
                return

    def _ask_insurance(self) -> None:
        while True:
            answer = self._read_choice("Dealer has ace, do you want to insure? (y/n): ")
            if answer == "y":
                break
            if answer == "n":
                return
            self._write("Invalid input.\n")
        self._write(f"Your cash: {self.state.cash}\n")
        while True:
            amount = self._read_int("Your insurance: ")
            if amount is None:
                self._write("Invalid input.\n")
                continue
            try:
                self.state.take_insurance(amount)
            except ValueError:
                self._write("Not enough cash.\n")
            else:
                return

    def settings_menu(self) -> None:
        """Let the player toggle options and pick suit colours until they exit."""
        settings = self.settings
        while True:
            self._write(
                "\nSettings Menu:\n"
                f"1. Toggle hand value display (currently: {_on_off(settings.values)})\n"
                f"2. Toggle betting (currently: {_on_off(settings.cash)})\n"
                f"3. Toggle auto-continue (currently: {_on_off(settings.autoplay)})\n"
                "4. Change Spades color\n"
                "5. Change Hearts color\n"
                "6. Change Diamonds color\n"
                "7. Change Clubs color\n"
                "0. Exit settings\n"
            )
            choice = self._read_int("Settings: ")
            if choice is None:
                continue
            if choice == 0:
                return
            if choice == 1:
                settings.values = not settings.values
                self._write(f"Hand value display is now {_on_off(settings.values)}\n")
            elif choice == 2:
                settings.cash = not settings.cash
                self._write(f"Betting is now {_on_off(settings.cash)}\n")
            elif choice == 3:
                settings.autoplay = not settings.autoplay
                self._write(f"Auto-continue is now {_on_off(settings.autoplay)}\n")
            elif choice in _COLOR_CHOICES:
                label, suit = _COLOR_CHOICES[choice]
                name = self._read(f"{label} color: ")
                try:
                    settings.set_color(suit, name)
                except ValueError:
                    self._write("Unknown color.\n")
            else:
                self._write("Invalid input.\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Start a blackjack session in the terminal."""
    parser = argparse.ArgumentParser(
        prog="termjack", description="Play blackjack in the terminal."
    )
    parser.parse_args(argv)
    Session().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())