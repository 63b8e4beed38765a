"""Cards, the deck they are drawn from, and a blackjack hand."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
BLACKJACK = 21


class Suit(IntEnum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


@dataclass(frozen=True)
class Card:
    """A playing card; aces are worth 1 here and promoted by the hand."""

    rank: str
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"unknown rank: {self.rank!r}")
        object.__setattr__(self, "suit", Suit(self.suit))

    @property
    def value(self) -> int:
        if self.rank == "A":
            return 1
        if self.rank in ("J", "Q", "K"):
            return 10
        return int(self.rank)

    @property
    def is_ace(self) -> bool:
        return self.rank == "A"


def build_deck() -> list[Card]:
    """Return the 52 cards, suit by suit, each suit from ace to king."""
    return [Card(rank, suit) for suit in Suit for rank in RANKS]


class Deck:
    """A full deck drawn at random without replacement."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = build_deck()
        self._unused = list(range(len(self._cards)))

    def __len__(self) -> int:
        return len(self._unused)

    def draw(self) -> Card:
        """Take a random card not drawn since the last reset."""
        if not self._unused:
            raise IndexError("the deck is empty")
        position = self._rng.randrange(len(self._unused))
        return self._cards[self._unused.pop(position)]

    def reset(self) -> None:
        """Put every card back."""
        self._unused = list(range(len(self._cards)))


@dataclass
class Hand:
    """Cards held with a running total and the number of aces counted as 11."""

    cards: list[Card] = field(default_factory=list)
    total: int = 0
    soft_aces: int = 0

    def __init__(self) -> None:
        self.cards = []
        self.total = 0
        self.soft_aces = 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def add(self, card: Card) -> None:
        """Add a card; an ace counts 11 when that does not go over 21."""
        self.cards.append(card)
        if card.is_ace:
            if self.total + 11 <= BLACKJACK:
                self.total += 11
                self.soft_aces += 1
            else:
                self.total += 1
        else:
            self.total += card.value

    def convert_ace(self) -> bool:
        """Count one ace as 1 instead of 11 when the hand is over 21."""
        if self.total > BLACKJACK and self.soft_aces > 0:
            self.total -= 10
            self.soft_aces -= 1
            return True
        return False

    def clear(self) -> None:
        self.cards.clear()
        self.total = 0
        self.soft_aces = 0