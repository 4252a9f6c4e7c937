"""Game state: play field, draw stack, bottom card and saved snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardmatch.cards import CardModel

_Snapshot = tuple[list[CardModel], list[CardModel], "CardModel | None"]


@dataclass
class GameModel:
    """Holds the cards of one game."""

    play_field_cards: list[CardModel] = field(default_factory=list)
    stack_cards: list[CardModel] = field(default_factory=list)
    bottom_card: CardModel | None = None
    _undo_stack: list[_Snapshot] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.play_field_cards = list(self.play_field_cards)
        self.stack_cards = list(self.stack_cards)

    def push_undo_state(self) -> None:
        """Save a snapshot of the card lists and the bottom card."""
        self._undo_stack.append(
            (list(self.play_field_cards), list(self.stack_cards), self.bottom_card)
        )

    def pop_undo_state(self) -> None:
        """Restore the latest snapshot; does nothing when none is saved."""
        if not self._undo_stack:
            return
        play_field, stack, bottom = self._undo_stack.pop()
        self.play_field_cards = play_field
        self.stack_cards = stack
        self.bottom_card = bottom

    def pop_stack_card(self) -> CardModel | None:
        """Take the front card of the stack, or None when it is empty."""
        if not self.stack_cards:
            return None
        return self.stack_cards.pop(0)

    def is_stack_empty(self) -> bool:
        return not self.stack_cards