from __future__ import annotations


class HandError(ValueError):
    """Base class for everything the evaluator can reject."""


class InvalidCardToken(HandError):
    def __init__(self, token: str):
        super().__init__(f"Bad card token: {token!r}")
        self.token = token


class InvalidHandSize(HandError):
    def __init__(self, size: int):
        super().__init__(f"Hand must have exactly 5 cards, got {size}")
        self.size = size


class UnclassifiableHand(HandError):
    # Only impossible hands get here (e.g. five cards of one rank).
    def __init__(self, cards: str):
        super().__init__(f"Invalid cards: {cards}")
        self.cards = cards
