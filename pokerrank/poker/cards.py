from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .errors import InvalidCardToken

SUITS = ("S", "H", "D", "C")  # Spades, Hearts, Diamonds, Clubs

RANK_CHARS = "23456789TJQKA"
_RANK_VALUES = {ch: value for value, ch in enumerate(RANK_CHARS, start=2)}
_RANK_NAMES = {value: ch for ch, value in _RANK_VALUES.items()}


@dataclass(frozen=True, slots=True)
class Card:
    rank: int  # 2..14
    suit: str  # one of SUITS

    def __str__(self) -> str:
        return f"{_RANK_NAMES[self.rank]}{self.suit}"

    @classmethod
    def parse(cls, token: str) -> "Card":
        return parse_card(token)


def parse_card(tok: str) -> Card:
    """
    Token format like: AS, KD, TH, JC, 2S
    Suits: S,H,D,C
    Ranks: 2-9,T,J,Q,K,A (ace is always high)
    """
    if len(tok) != 2:
        raise InvalidCardToken(tok)

    r, suit = tok[0], tok[1]
    if r not in _RANK_VALUES or suit not in SUITS:
        raise InvalidCardToken(tok)
    return Card(rank=_RANK_VALUES[r], suit=suit)


def parse_cards(s: str) -> List[Card]:
    return [parse_card(p) for p in s.split()]


def cards_str(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)
