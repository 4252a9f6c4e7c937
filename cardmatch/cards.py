"""Card model: faces, suits, positions and the cards that cover a card."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True)
class Vec2:
    """A point or offset on the table."""

    x: float = 0.0
    y: float = 0.0


class CardSuit(IntEnum):
    NONE = -1
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3
    NUM_TYPES = 4


class CardFace(IntEnum):
    NONE = -1
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    NUM_TYPES = 9


@dataclass(eq=False)
class CardModel:
    """A single card. Cards compare by identity."""

    face: CardFace
    suit: CardSuit
    face_up: bool = True
    initial_position: Vec2 = field(default_factory=Vec2)
    _covering: list[weakref.ref[CardModel]] = field(
        default_factory=list, init=False, repr=False
    )

    def value(self) -> int:
        """Rank used for matching: adjacent values match."""
        return int(self.face) + 1

    def add_covering_card(self, card: CardModel) -> None:
        """Record that ``card`` lies on top of this one (held weakly)."""
        self._covering.append(weakref.ref(card))

    def remove_covering_card(self, card: CardModel) -> None:
        """Forget every record of ``card`` covering this one."""
        self._covering = [ref for ref in self._covering if ref() is not card]

    def is_covered(self) -> bool:
        """True while any covering card is still alive."""
        return any(ref() is not None for ref in self._covering)