# termjack

Blackjack in your terminal. Cards are drawn as ASCII art, and each suit can have its own colour.

## Installing

```
pip install .
```

## Playing

```
termjack
```

You start with 100 cash. At the `>>` prompt you can type:

| Input              | Action                           |
|--------------------|----------------------------------|
| `h` / `hit`        | Draw a card                      |
| `s` / `stand`      | Keep your hand; the dealer plays |
| `q` / `quit`       | Quit the game                    |
| `cfg` / `settings` | Open the settings menu           |
| `help`             | Show the rules and inputs        |

The aim is to get as close to 21 as you can without going over. Aces count as 11 unless that would take the hand over 21, and drop back to 1 when a hand busts. Face cards count as 10. Once you stand, the dealer draws until reaching 17 or more. A 21 on the opening deal wins straight away.

After each round you are asked `Play again? (y/n)`. Each round is dealt from a freshly shuffled 52-card deck. When you quit, the game says goodbye and, with betting on, shows your final cash balance.

## Settings

The settings menu lets you:

- show the value of each hand above the cards;
- turn betting on or off. With betting on, you place a bet before each round; a win pays back double the bet, a push returns it, and a loss forfeits it. When the dealer's first card is an ace you are also asked whether to take insurance, and the amount you choose is taken from your cash;
- turn on auto-continue, which starts the next round without asking;
- set a colour for each suit by name: `white`, `red`, `green`, `yellow`, `blue`, `magenta`, `cyan` or `orange` (case does not matter). `white` leaves the suit in the terminal's own colour.

Settings are saved to `blackjack.cfg` in the current directory when you quit, and loaded from there when the game starts. Each line of the file has the form `key=number`:

```
values=1
cash=1
autoplay=0
spades_color=0
hearts_color=1
diamonds_color=1
clubs_color=0
```

## Using it as a library

The game logic can be used without the interactive front end:

```python
import random
from termjack.cards import Deck
from termjack.config import Settings
from termjack.game import GameState
from termjack.render import render_table

deck = Deck(random.Random(7))
state = GameState()
state.deal(deck)
state.hit(deck)
print(render_table(state.player, state.dealer, Settings()))
```

- `termjack.cards` has `Card`, `Suit`, `Hand` and `Deck` (random draws without replacement, `reset()` puts every card back).
- `termjack.game.GameState` holds both hands and the money: `place_bet`, `take_insurance`, `deal`, `hit`, `dealer_draw`, `outcome`, `settle` and `collect`. Over-spending raises `ValueError`.
- `termjack.config.Settings` loads and saves the settings file.
- `termjack.render` draws hands and tables as text and gives the help text.
- `termjack.cli.Session` runs the interactive game; its input function, output stream, random generator, settings file path and the pause after each dealer draw can all be supplied.

## Limitations

The interactive game never marks a round as insured, so an insurance stake is set aside but not paid back. A `GameState` whose `insured` flag is set by the caller pays double the insurance when the player loses.