from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .cards import Card, parse_cards
from .errors import HandError
from .hand_eval import HAND_COUNT, ClassifiedHand, classify

logger = logging.getLogger(__name__)


class Outcome(Enum):
    A = "a"
    B = "b"
    TIE = "tie"


@dataclass(frozen=True)
class RoundResult:
    hand_a: ClassifiedHand
    hand_b: ClassifiedHand
    outcome: Outcome


@dataclass
class Tally:
    player_a: int = 0
    player_b: int = 0
    ties: int = 0
    skipped: int = 0

    @property
    def rounds(self) -> int:
        return self.player_a + self.player_b + self.ties

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.A:
            self.player_a += 1
        elif outcome is Outcome.B:
            self.player_b += 1
        else:
            self.ties += 1


def split_round(line: str) -> Tuple[List[Card], List[Card]]:
    """First five tokens are player A's hand, the rest player B's."""
    cards = parse_cards(line)
    return cards[:HAND_COUNT], cards[HAND_COUNT:]


def play_round(line: str) -> RoundResult:
    cards_a, cards_b = split_round(line)
    hand_a = classify(cards_a)
    hand_b = classify(cards_b)

    cmp = hand_a.compare(hand_b)
    if cmp > 0:
        outcome = Outcome.A
    elif cmp < 0:
        outcome = Outcome.B
    else:
        outcome = Outcome.TIE
    return RoundResult(hand_a=hand_a, hand_b=hand_b, outcome=outcome)


def tally_rounds(
    lines: Iterable[str],
    on_error: str = "abort",
    trace_n: int = 0,
) -> Tally:
    """
    Play every non-blank line as one round and count the wins.

    on_error="abort" lets the first HandError propagate; "skip" logs it,
    counts the line in `skipped` and moves on.
    """
    if on_error not in ("abort", "skip"):
        raise ValueError(f"Unknown on_error policy: {on_error!r}")

    tally = Tally()
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            result = play_round(line)
        except HandError as e:
            if on_error == "abort":
                raise
            logger.warning("line %d skipped: %s", lineno, e)
            tally.skipped += 1
            continue

        tally.record(result.outcome)

        if tally.rounds <= trace_n:
            logger.info(
                "round %d: A %s | B %s -> %s",
                lineno, result.hand_a, result.hand_b, result.outcome.name,
            )
    return tally


def tally_file(path: str, on_error: str = "abort", trace_n: int = 0) -> Tally:
    with open(path, "r", encoding="utf-8") as f:
        return tally_rounds(f, on_error=on_error, trace_n=trace_n)
