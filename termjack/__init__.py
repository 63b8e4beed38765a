"""Terminal blackjack with coloured ASCII cards, betting and insurance."""

__version__ = "0.1.0"
__all__ = ["__version__"]