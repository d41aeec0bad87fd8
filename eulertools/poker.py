"""Poker hands: parsing, ranking and comparing five-card hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

_RANK_SYMBOLS = "0123456789TJQKA"
_RANK_VALUES = {symbol: value for value, symbol in enumerate(_RANK_SYMBOLS) if value >= 2}
_SUITS = frozenset("CDHS")
HAND_SIZE = 5


@dataclass(frozen=True)
class Card:
    """A playing card: rank 2..14 (ace high) and a suit letter."""

    num: int
    suit: str

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse a two-character card such as ``"TS"`` or ``"2H"``."""
        if len(text) != 2:
            raise ValueError(f"invalid card {text!r}")
        rank, suit = text[0], text[1]
        if rank not in _RANK_VALUES:
            raise ValueError(f"invalid rank in card {text!r}")
        if suit not in _SUITS:
            raise ValueError(f"invalid suit in card {text!r}")
        return cls(_RANK_VALUES[rank], suit)

    def __str__(self) -> str:
        return f"{_RANK_SYMBOLS[self.num]}{self.suit}"


class Hand:
    """Five cards, sorted by rank, with a packed ranking key."""

    def __init__(self, cards: Iterable[Card]) -> None:
        cards = sorted(cards, key=lambda c: c.num)
        if len(cards) != HAND_SIZE:
            raise ValueError(f"a hand needs {HAND_SIZE} cards, not {len(cards)}")
        self.cards: tuple[Card, ...] = tuple(cards)
        low = cards[0].num
        self.is_flush = all(c.suit == cards[0].suit for c in cards)
        self.is_straight = all(
            c.num == low + i or (i == HAND_SIZE - 1 and low == 2 and c.num == 14)
            for i, c in enumerate(cards)
        )
        self.four_num = self.three_num = self.higher_pair = self.lower_pair = 0
        for num, amount in sorted(Counter(c.num for c in cards).items()):
            if amount == 4:
                self.four_num = num
            elif amount == 3:
                self.three_num = num
            elif amount == 2 and self.lower_pair:
                self.higher_pair = num
            elif amount == 2:
                self.lower_pair = num
        self.mask = self._pack()

    def _pack(self) -> int:
        mask = int(self.is_flush and self.is_straight)
        mask = (mask << 4) + self.four_num
        if self.three_num and self.lower_pair:
            mask = (mask << 4) + self.three_num
            mask = (mask << 4) + self.lower_pair
        else:
            mask <<= 8
        mask = (mask << 1) + int(self.is_flush)
        mask = (mask << 1) + int(self.is_straight)
        mask = (mask << 4) + self.three_num
        mask = (mask << 4) + self.higher_pair
        mask = (mask << 4) + self.lower_pair
        return mask

    @classmethod
    def parse(cls, text: str) -> Hand:
        """Parse five space-separated cards."""
        return cls(Card.parse(token) for token in text.split())

    def _beats_on_ranks(self, other: Hand) -> bool:
        for mine, theirs in zip(reversed(self.cards), reversed(other.cards)):
            if mine.num != theirs.num:
                return mine.num > theirs.num
        return False

    def __gt__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        if self.mask != other.mask:
            return self.mask > other.mask
        return self._beats_on_ranks(other)

    def __lt__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return other.__gt__(self)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand.parse({str(self)!r})"


def player_one_wins(line: str) -> bool:
    """Return whether the first five cards of ``line`` beat the last five."""
    tokens = line.split()
    if len(tokens) != 2 * HAND_SIZE:
        raise ValueError(f"a deal needs {2 * HAND_SIZE} cards, not {len(tokens)}")
    first = Hand(Card.parse(t) for t in tokens[:HAND_SIZE])
    second = Hand(Card.parse(t) for t in tokens[HAND_SIZE:])
    return first > second


def count_player_one_wins(lines: Iterable[str]) -> int:
    """Return how many deals the first player wins."""
    return sum(1 for line in lines if player_one_wins(line))