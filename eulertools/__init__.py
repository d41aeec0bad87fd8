"""Prime, digit, combinatorics and number-theory tools, poker hand ranking, and problem solutions."""

__version__ = "1.0.0"