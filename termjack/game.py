"""State of one blackjack round and the rules that move it forward."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Protocol

from .cards import BLACKJACK, Card, Hand

DEALER_STANDS_AT = 17
STARTING_CASH = 100


class CardSource(Protocol):
    def draw(self) -> Card: ...


class Outcome(IntEnum):
    """How a round ended for the player."""

    PUSH = 0
    WIN = 1
    LOSE = 2


@dataclass
class GameState:
    """Both hands, the player's money and the flags of the current round."""

    player: Hand = field(default_factory=Hand)
    dealer: Hand = field(default_factory=Hand)
    cash: int = STARTING_CASH
    bet: int = 0
    insurance: int = 0
    stand: bool = False
    end: bool = False
    insured: bool = False

    def reset(self) -> None:
        """Clear both hands and the round's flags; cash and bet are kept."""
        self.player.clear()
        self.dealer.clear()
        self.insurance = 0
        self.stand = False
        self.insured = False

    def place_bet(self, amount: int) -> None:
        """Stake ``amount`` from the player's cash."""
        if amount > self.cash:
            raise ValueError("Not enough cash")
        self.bet = amount
        self.cash -= amount

    def take_insurance(self, amount: int) -> None:
        """Put ``amount`` aside as insurance against the dealer's ace."""
        if amount > self.cash:
            raise ValueError("Not enough cash")
        self.insurance = amount
        self.cash -= amount

    def deal(self, deck: CardSource) -> bool:
        """Deal two cards to the player and one to the dealer.

        Returns True when the player holds blackjack.
        """
        self.end = False
        for _ in range(2):
            self.player.add(deck.draw())
        self.dealer.add(deck.draw())
        return self.player.total == BLACKJACK

    def hit(self, deck: CardSource) -> Card:
        """Give the player one more card, counting aces low if the hand busts."""
        card = deck.draw()
        self.player.add(card)
        while self.player.convert_ace():
            pass
        return card

    def dealer_draw(self, deck: CardSource) -> Optional[Card]:
        """Draw one dealer card once the player stands and the dealer is below 17."""
        if not self.stand or self.dealer.total >= DEALER_STANDS_AT:
            return None
        card = deck.draw()
        self.dealer.add(card)
        while self.dealer.convert_ace():
            pass
        return card

    def outcome(self) -> Optional[Outcome]:
        """Return the result of the round, or None while it is still open."""
        if self.player.total > BLACKJACK:
            return Outcome.LOSE
        if self.dealer.total >= DEALER_STANDS_AT:
            if self.dealer.total > BLACKJACK or self.player.total > self.dealer.total:
                return Outcome.WIN
            if self.player.total < self.dealer.total:
                return Outcome.LOSE
            return Outcome.PUSH
        return None

    def settle(self, outcome: Outcome) -> bool:
        """Apply ``outcome`` to the bet and end the round.

        Returns True when an insurance payout was made.
        """
        paid = False
        if outcome is Outcome.WIN:
            self.bet *= 2
        elif outcome is Outcome.LOSE:
            self.bet = 0
            if self.insured:
                self.cash += self.insurance * 2
                self.insurance = 0
                paid = True
        self.end = True
        return paid

    def collect(self) -> None:
        """Return what is left of the bet to the player's cash."""
        self.cash += self.bet

    def debug_text(self) -> str:
        """Describe the state in the plain form used for debugging."""
        return (
            f"phs: {len(self.player)}, dhs: {len(self.dealer)}\n"
            f"pSum: {self.player.total}, dSum: {self.dealer.total}\n"
            f"pAces: {self.player.soft_aces}, dAces: {self.dealer.soft_aces}\n"
            f"stand: {int(self.stand)}, end: {int(self.end)}, "
            f"insured: {int(self.insured)}\n"
            f"cash: {self.cash}, betCash: {self.bet}, "
            f"insuranceCash: {self.insurance}\n"
        )