"""Card and table views: textures, hit testing and click dispatch."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from cardmatch.cards import CardModel, CardSuit, Vec2
from cardmatch.game_model import GameModel

log = logging.getLogger(__name__)

CARD_SIZE: tuple[float, float] = (120.0, 160.0)
CARD_SCALE = 0.5
CARD_ANCHOR = Vec2(0.5, 0.5)
FACE_DOWN_FILL: tuple[float, float, float, float] = (0.4, 0.4, 0.4, 1.0)
STACK_TOP_POSITION = Vec2(300, 300)
PLAY_FIELD_X_RANGE: tuple[int, int] = (200, 900)
PLAY_FIELD_Y_RANGE: tuple[int, int] = (1000, 1400)

ClickCallback = Callable[["CardView"], None]

_RED_SUITS = frozenset({CardSuit.HEARTS, CardSuit.DIAMONDS})


class CardView:
    """The on-table representation of one card."""

    def __init__(
        self, model: CardModel, click_callback: Optional[ClickCallback] = None
    ) -> None:
        self.model = model
        self.click_callback = click_callback
        self.parent: Optional[GameView] = None
        self.anchor = CARD_ANCHOR
        self.scale = CARD_SCALE
        self.content_size = CARD_SIZE
        self.texture = ""
        self.face_down_fill: Optional[tuple[float, float, float, float]] = None
        self.position = model.initial_position
        self.update_texture()

    def __repr__(self) -> str:
        return f"CardView(model={self.model!r}, position={self.position!r})"

    def update_texture(self) -> None:
        """Show the card face when face up, a grey back otherwise."""
        self.texture = ""
        self.face_down_fill = None
        if self.model.face_up:
            color = "red" if self.model.suit in _RED_SUITS else "black"
            self.texture = f"res/number/big_{color}_{self.model.value()}.png"
        else:
            self.face_down_fill = FACE_DOWN_FILL
            self.content_size = CARD_SIZE
        self.scale = CARD_SCALE

    def hit_test(self, point: Vec2) -> bool:
        """True when ``point`` (in parent coordinates) lies on the card."""
        width, height = self.content_size
        local_x = (point.x - self.position.x) / self.scale + self.anchor.x * width
        local_y = (point.y - self.position.y) / self.scale + self.anchor.y * height
        return 0 <= local_x <= width and 0 <= local_y <= height

    def touch(self, point: Vec2) -> bool:
        """Deliver a touch; calls the click callback when the card is hit."""
        if not self.hit_test(point):
            return False
        if self.click_callback is not None:
            self.click_callback(self)
        return True

    def remove_from_parent(self) -> None:
        if self.parent is not None:
            self.parent.remove_child(self)


class GameView:
    """The table: holds card views and lays out a game model."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.children: list[CardView] = []
        self.on_card_click: Optional[ClickCallback] = None
        self.on_stack_card_click: Optional[ClickCallback] = None
        self._rng = rng if rng is not None else random.Random()

    def add_child(self, child: CardView) -> None:
        if child.parent is not None:
            raise ValueError("view already has a parent")
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: CardView) -> None:
        if child in self.children:
            self.children.remove(child)
            child.parent = None

    def clear(self) -> None:
        for child in self.children:
            child.parent = None
        self.children = []

    def card_views(self) -> list[CardView]:
        return [child for child in self.children if isinstance(child, CardView)]

    def show_game(self, game_model: GameModel) -> None:
        """Rebuild all views from ``game_model``."""
        log.debug("show game")
        self.clear()

        for card in game_model.play_field_cards:
            log.debug("card face=%d, suit=%d", int(card.face), int(card.suit))
            view = CardView(card, self.on_card_click)
            self.add_child(view)
            view.position = Vec2(
                self._rng.randint(*PLAY_FIELD_X_RANGE),
                self._rng.randint(*PLAY_FIELD_Y_RANGE),
            )

        bottom = game_model.bottom_card
        if bottom is not None:
            view = CardView(bottom, self.on_card_click)
            view.position = bottom.initial_position
            self.add_child(view)

        if not game_model.is_stack_empty():
            top = game_model.stack_cards[0]
            view = CardView(top, self.on_stack_card_click)
            view.position = STACK_TOP_POSITION
            self.add_child(view)