"""Text drawings of cards and hands, and the help text."""

from __future__ import annotations

from typing import Iterable

from .cards import Card, Hand, Suit
from .colors import BOLD, RESET
from .config import Settings

_EDGE = "+-------+"
_SUIT_ART = {
    Suit.SPADES: ("|   ^   |", "|  /|\\  |", "|   |   |"),
    Suit.HEARTS: ("| /\\ /\\ |", "| \\   / |", "|  \\ /  |"),
    Suit.DIAMONDS: ("|   /\\  |", "|  <  > |", "|   \\/  |"),
    Suit.CLUBS: ("|   o   |", "|  ooo  |", "|   |   |"),
}

HELP_TEXT = (
    "\nRules: Try to get as close to 21 as possible without going over.\n"
    "Aces can count as 1 or 11, face cards are worth 10.\n"
    "You can hit (draw a card) or stand (keep your current hand).\n"
    "You can no longer hit after standing.\n\n"
    "Inputs:\n"
    "  (h)/(hit): Hit\n"
    "  (s)/(stand): Stand\n"
    "  (q)/(quit): Quit game\n"
    "  (cfg) / (settings): Open settings\n"
    "  (help): Display help\n"
)


def _card_rows(card: Card) -> tuple[str, ...]:
    return (
        _EDGE,
        f"|{card.rank:<2}     |",
        *_SUIT_ART[card.suit],
        f"|     {card.rank:<2}|",
        _EDGE,
    )


_CARD_HEIGHT = 7


def render_hand(cards: Iterable[Card], settings: Settings) -> str:
    """Draw the cards side by side, each in its suit's colour."""
    drawn = [(settings.suit_color(card.suit), _card_rows(card)) for card in cards]
    lines = (
        "".join(f"{color}{rows[row]} {RESET}" for color, rows in drawn)
        for row in range(_CARD_HEIGHT)
    )
    return "".join(f"{line}\n" for line in lines)


def render_table(player: Hand, dealer: Hand, settings: Settings) -> str:
    """Draw the player's hand above the dealer's, with totals when enabled."""
    if settings.values:
        player_title = f"{BOLD}Your hand ({player.total}):\n{RESET}"
        dealer_title = f"{BOLD}Dealer hand ({dealer.total}):\n{RESET}"
    else:
        player_title = f"{BOLD}Your hand:\n{RESET}"
        dealer_title = f"{BOLD}Dealer hand:\n{RESET}"
    return (
        player_title
        + render_hand(player, settings)
        + dealer_title
        + render_hand(dealer, settings)
    )


def help_text() -> str:
    """Return the rules and the list of commands."""
    return HELP_TEXT