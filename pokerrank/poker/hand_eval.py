from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Callable, Dict, List, Sequence, Tuple

from .cards import Card, cards_str, parse_cards
from .errors import InvalidHandSize, UnclassifiableHand

HAND_COUNT = 5
# One past the highest rank, so positional terms never collide.
BASE = 15


class Category(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def title(self) -> str:
        return "".join(w.capitalize() for w in self.name.split("_"))


def rank_groups(cards: Sequence[Card]) -> Dict[int, int]:
    """Rank -> number of cards with that rank, in ascending rank order."""
    return dict(sorted(Counter(c.rank for c in cards).items()))


def _suit_count(cards: Sequence[Card]) -> int:
    return len({c.suit for c in cards})


def _span(cards: Sequence[Card]) -> int:
    ranks = [c.rank for c in cards]
    return max(ranks) - min(ranks)


# --- category predicates (order of evaluation lives in _CHECKS) ---

def _is_royal_flush(cards: Sequence[Card]) -> bool:
    return _is_straight_flush(cards) and max(c.rank for c in cards) == 14


def _is_straight_flush(cards: Sequence[Card]) -> bool:
    return (
        len(rank_groups(cards)) == HAND_COUNT
        and _suit_count(cards) == 1
        and _span(cards) == HAND_COUNT - 1
    )


def _is_flush(cards: Sequence[Card]) -> bool:
    return _suit_count(cards) == 1 and _span(cards) > HAND_COUNT - 1


def _is_straight(cards: Sequence[Card]) -> bool:
    # Single-suit runs were already taken by the straight flush checks.
    return (
        len(rank_groups(cards)) == HAND_COUNT
        and _span(cards) == HAND_COUNT - 1
        and _suit_count(cards) > 1
    )


def _is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return 4 in rank_groups(cards).values()


def _is_full_house(cards: Sequence[Card]) -> bool:
    groups = rank_groups(cards)
    return len(groups) == 2 and 2 in groups.values()


def _is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    groups = rank_groups(cards)
    return len(groups) == 3 and 3 in groups.values()


def _is_two_pair(cards: Sequence[Card]) -> bool:
    groups = rank_groups(cards)
    return len(groups) == 3 and 2 in groups.values()


def _is_pair(cards: Sequence[Card]) -> bool:
    return len(rank_groups(cards)) == 4


def _is_high_card(cards: Sequence[Card]) -> bool:
    return len(rank_groups(cards)) == HAND_COUNT


_CHECKS: List[Tuple[Category, Callable[[Sequence[Card]], bool]]] = [
    (Category.ROYAL_FLUSH, _is_royal_flush),
    (Category.STRAIGHT_FLUSH, _is_straight_flush),
    (Category.FLUSH, _is_flush),
    (Category.STRAIGHT, _is_straight),
    (Category.FOUR_OF_A_KIND, _is_four_of_a_kind),
    (Category.FULL_HOUSE, _is_full_house),
    (Category.THREE_OF_A_KIND, _is_three_of_a_kind),
    (Category.TWO_PAIR, _is_two_pair),
    (Category.PAIR, _is_pair),
    (Category.HIGH_CARD, _is_high_card),
]


def classify_category(cards: Sequence[Card]) -> Category:
    if len(cards) != HAND_COUNT:
        raise InvalidHandSize(len(cards))
    for category, check in _CHECKS:
        if check(cards):
            return category
    raise UnclassifiableHand(cards_str(cards))


# --- tie-break weights, only meaningful within one category ---

def _top_card(cards: Sequence[Card]) -> int:
    return max(c.rank for c in cards)


def _positional(cards: Sequence[Card]) -> int:
    ranks = sorted(c.rank for c in cards)
    return sum(r * BASE ** i for i, r in enumerate(ranks))


def _dominant_group(size: int) -> Callable[[Sequence[Card]], int]:
    def weight(cards: Sequence[Card]) -> int:
        return sum(
            rank * 100 if count == size else rank
            for rank, count in rank_groups(cards).items()
        )
    return weight


def _three_of_a_kind(cards: Sequence[Card]) -> int:
    return sum(
        rank * 10000 if count == 3 else rank * BASE ** i
        for i, (rank, count) in enumerate(rank_groups(cards).items())
    )


def _two_pair(cards: Sequence[Card]) -> int:
    return sum(
        rank * BASE ** i * 100 if count == 2 else rank
        for i, (rank, count) in enumerate(rank_groups(cards).items())
    )


def _pair(cards: Sequence[Card]) -> int:
    return sum(
        rank * BASE ** 5 * 100 if count == 2 else rank * BASE ** i
        for i, (rank, count) in enumerate(rank_groups(cards).items())
    )


_WEIGHTS: Dict[Category, Callable[[Sequence[Card]], int]] = {
    Category.ROYAL_FLUSH: lambda _cards: 0,
    Category.STRAIGHT_FLUSH: _top_card,
    Category.FOUR_OF_A_KIND: _dominant_group(4),
    Category.FULL_HOUSE: _dominant_group(3),
    Category.FLUSH: _positional,
    Category.STRAIGHT: _top_card,
    Category.THREE_OF_A_KIND: _three_of_a_kind,
    Category.TWO_PAIR: _two_pair,
    Category.PAIR: _pair,
    Category.HIGH_CARD: _positional,
}


def compute_weight(category: Category, cards: Sequence[Card]) -> int:
    return _WEIGHTS[category](cards)


@total_ordering
@dataclass(frozen=True, eq=False)
class ClassifiedHand:
    """
    Five cards with their category and tie-break weight.

    Ordering and equality look only at (category, weight), so two different
    straights to the king compare equal.
    """

    cards: Tuple[Card, ...]
    category: Category
    weight: int

    @property
    def key(self) -> Tuple[int, int]:
        return (int(self.category), self.weight)

    def compare(self, other: "ClassifiedHand") -> int:
        """-1, 0 or 1 as this hand loses to, ties or beats `other`."""
        return (self.key > other.key) - (self.key < other.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedHand):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "ClassifiedHand") -> bool:
        if not isinstance(other, ClassifiedHand):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def describe(self) -> str:
        ordered = sorted(self.cards, key=lambda c: c.rank)
        return (
            f"Hand: [{', '.join(str(c) for c in ordered)}] "
            f"Type: {self.category.title} Weight: {self.weight}"
        )

    def __str__(self) -> str:
        return self.describe()


def classify(cards: Sequence[Card]) -> ClassifiedHand:
    category = classify_category(cards)
    return ClassifiedHand(
        cards=tuple(cards),
        category=category,
        weight=compute_weight(category, cards),
    )


def determine(hand: str) -> ClassifiedHand:
    """Classify a hand written as space-separated tokens, e.g. "AH KH QH JH TH"."""
    return classify(parse_cards(hand))
