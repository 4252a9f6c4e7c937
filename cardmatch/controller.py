"""Game rules: matching play field cards, drawing from the stack, undo."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Callable, Optional

from cardmatch.cards import CardModel, Vec2
from cardmatch.game_model import GameModel
from cardmatch.generator import generate
from cardmatch.level import load_level
from cardmatch.undo import UndoAction, UndoManager
from cardmatch.view import CardView, GameView

log = logging.getLogger(__name__)

MOVE_DURATION = 0.3
DEFAULT_LEVEL = "level_1.json"


def can_match(a: Optional[CardModel], b: Optional[CardModel]) -> bool:
    """Two cards match when their values differ by exactly one."""
    if a is None or b is None:
        return False
    return abs(a.value() - b.value()) == 1


class GameController:
    """Connects the game model to the table view and applies moves."""

    def __init__(self) -> None:
        self.game_model: Optional[GameModel] = None
        self.game_view: Optional[GameView] = None
        self.undo_manager = UndoManager()
        self._views: dict[CardModel, CardView] = {}

    def _rebuild_view_map(self) -> None:
        self._views = {}
        if self.game_view is None:
            return
        for view in self.game_view.card_views():
            self._views[view.model] = view

    @staticmethod
    def _move(view: CardView, target: Vec2, then: Callable[[], None]) -> None:
        view.position = target
        then()

    def start_game(
        self, game_view: GameView, level_path: str | PathLike[str] = DEFAULT_LEVEL
    ) -> None:
        """Load a level, lay it out on ``game_view`` and wire up clicks."""
        self.game_view = game_view
        self.game_model = generate(load_level(level_path))
        game_view.on_card_click = self.handle_card_click
        game_view.on_stack_card_click = self.handle_stack_card_click
        game_view.show_game(self.game_model)
        self._rebuild_view_map()

    def handle_card_click(self, card_view: CardView) -> bool:
        """Move a free, face-up card onto the bottom card if they match."""
        model = card_view.model
        if self.game_model is None or model.is_covered() or not model.face_up:
            return False

        bottom = self.game_model.bottom_card
        if bottom is None or not can_match(model, bottom):
            return False

        to_view = self._views.get(bottom)
        if to_view is None:
            log.error("no view for the bottom card")
            return False

        from_pos = card_view.position
        to_pos = to_view.position
        log.debug("clicked card moves to (%f, %f)", to_pos.x, to_pos.y)
        game_model = self.game_model

        def finish() -> None:
            game_model.bottom_card = model
            model.face_up = True
            card_view.update_texture()
            for card in game_model.play_field_cards:
                card.remove_covering_card(model)
            self.undo_manager.record_action(UndoAction(model, bottom, from_pos, to_pos))
            current = self._views.get(model)
            if current is not None:
                current.update_texture()
            card_view.remove_from_parent()
            self._views.pop(model, None)

        self._move(card_view, to_pos, finish)
        return True

    def handle_stack_card_click(self, card_view: CardView) -> bool:
        """Draw the front stack card and make it the bottom card."""
        game_model = self.game_model
        game_view = self.game_view
        if game_model is None or game_view is None or game_model.is_stack_empty():
            return False

        current_bottom = game_model.bottom_card
        new_bottom = game_model.pop_stack_card()
        if new_bottom is None:
            return False

        new_bottom.face_up = True
        game_model.bottom_card = new_bottom

        new_view = CardView(new_bottom, self.handle_card_click)
        game_view.add_child(new_view)
        new_view.position = new_bottom.initial_position
        self._views[new_bottom] = new_view

        from_view = self._views.get(new_bottom)
        to_view = self._views.get(current_bottom) if current_bottom is not None else None
        if from_view is None or to_view is None:
            log.error("no view for the drawn card or the bottom card")
            return False

        from_pos = from_view.position
        to_pos = to_view.position

        def finish() -> None:
            from_view.update_texture()
            to_view.update_texture()
            self.undo_manager.record_action(
                UndoAction(new_bottom, current_bottom, from_pos, to_pos)
            )
            game_view.show_game(game_model)
            self._rebuild_view_map()

        self._move(from_view, to_pos, finish)
        return True

    def undo_last_action(self) -> bool:
        """Reverse the latest move; False when there is nothing to undo."""
        game_model = self.game_model
        game_view = self.game_view
        if game_model is None or game_view is None or not self.undo_manager.has_undo():
            return False

        action = self.undo_manager.pop_undo()
        game_model.bottom_card = action.to_card

        from_view = self._views.get(action.from_card)
        to_view = self._views.get(action.to_card) if action.to_card is not None else None
        if from_view is None or to_view is None:
            log.error("no view for the undone move")
            return False

        def finish() -> None:
            from_view.update_texture()
            to_view.update_texture()
            game_view.show_game(game_model)
            self._rebuild_view_map()

        self._move(from_view, action.from_pos, finish)
        return True