"""ANSI colour codes and the colour names a player may pick for a suit."""

RESET = "\033[0m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
ORANGE = "\033[38;5;208m"

BRIGHT_BLACK = "\033[90m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_MAGENTA = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"
BRIGHT_ORANGE = "\033[38;5;214m"

BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"

COLOR_TABLE = ("", RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE, ORANGE)

COLOR_NAMES = {
    "white": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "orange": 7,
}


def color_index(name: str) -> int:
    """Return the colour table index for a colour name, ignoring case.

    Raises ValueError for a name that is not known.
    """
    try:
        return COLOR_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown color: {name!r}") from None


def color_code(index: int) -> str:
    """Return the escape sequence stored at ``index``; empty when out of range."""
    if 0 <= index < len(COLOR_TABLE):
        return COLOR_TABLE[index]
    return ""