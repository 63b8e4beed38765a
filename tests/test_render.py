from termjack.cards import Card, Hand, Suit
from termjack.colors import BOLD, RED, RESET
from termjack.config import Settings
from termjack.render import help_text, render_hand, render_table


def hand_of(*cards):
    hand = Hand()
    for card in cards:
        hand.add(card)
    return hand


def test_empty_hand_is_seven_blank_lines():
    assert render_hand([], Settings()) == "\n" * 7


def test_single_card_layout():
    lines = render_hand([Card("A", Suit.SPADES)], Settings()).splitlines()
    assert len(lines) == 7
    assert lines[0] == "+-------+ " + RESET
    assert lines[1].startswith("|A      |")
    assert lines[5].startswith("|     A |")
    assert lines[2].startswith("|   ^   |")


def test_two_character_rank_fills_corner():
    lines = render_hand([Card("10", Suit.CLUBS)], Settings()).splitlines()
    assert lines[1].startswith("|10     |")
    assert lines[5].startswith("|     10|")
    assert lines[3].startswith("|  ooo  |")


def test_every_line_has_one_cell_per_card():
    cards = [Card("2", Suit.HEARTS), Card("K", Suit.DIAMONDS), Card("7", Suit.CLUBS)]
    lines = render_hand(cards, Settings()).splitlines()
    assert len(lines) == 7
    assert all(line.count(RESET) == len(cards) for line in lines)
    assert lines[0].count("+-------+") == len(cards)


def test_hearts_and_diamonds_art():
    text = render_hand([Card("Q", Suit.HEARTS), Card("J", Suit.DIAMONDS)], Settings())
    assert "| /\\ /\\ |" in text
    assert "|  <  > |" in text


def test_suit_colour_is_applied():
    settings = Settings()
    settings.set_color(Suit.SPADES, "red")
    lines = render_hand([Card("5", Suit.SPADES)], settings).splitlines()
    assert all(line.startswith(RED) for line in lines)
    plain = render_hand([Card("5", Suit.HEARTS)], settings)
    assert RED not in plain


def test_table_without_values_hides_totals():
    player = hand_of(Card("9", Suit.SPADES), Card("8", Suit.HEARTS))
    dealer = hand_of(Card("K", Suit.CLUBS))
    text = render_table(player, dealer, Settings())
    assert text.startswith(f"{BOLD}Your hand:\n{RESET}")
    assert f"{BOLD}Dealer hand:\n{RESET}" in text
    assert f"({player.total})" not in text


def test_table_with_values_shows_totals():
    player = hand_of(Card("9", Suit.SPADES), Card("8", Suit.HEARTS))
    dealer = hand_of(Card("K", Suit.CLUBS))
    text = render_table(player, dealer, Settings(values=True))
    assert text.startswith(f"{BOLD}Your hand ({player.total}):\n{RESET}")
    assert f"Dealer hand ({dealer.total}):" in text
    assert text.index("Your hand") < text.index("Dealer hand")


def test_help_lists_commands():
    text = help_text()
    assert "  (h)/(hit): Hit\n" in text
    assert "  (s)/(stand): Stand\n" in text
    assert "  (q)/(quit): Quit game\n" in text
    assert "  (cfg) / (settings): Open settings\n" in text