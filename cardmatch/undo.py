"""Record of card moves that can be undone."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardmatch.cards import CardModel, Vec2


@dataclass(frozen=True)
class UndoAction:
    """A card moved from one place onto another card."""

    from_card: CardModel
    to_card: CardModel | None
    from_pos: Vec2
    to_pos: Vec2


@dataclass
class UndoManager:
    """A last-in, first-out history of moves."""

    _actions: list[UndoAction] = field(default_factory=list, init=False, repr=False)

    def record_action(self, action: UndoAction) -> None:
        self._actions.append(action)

    def has_undo(self) -> bool:
        return bool(self._actions)

    def pop_undo(self) -> UndoAction:
        """Remove and return the latest move; raises IndexError when empty."""
        if not self._actions:
            raise IndexError("no action to undo")
        return self._actions.pop()

    def __len__(self) -> int:
        return len(self._actions)