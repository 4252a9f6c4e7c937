"""Build a game model from a level description."""

from __future__ import annotations

from cardmatch.cards import CardModel, Vec2
from cardmatch.game_model import GameModel
from cardmatch.level import CardConfig, LevelConfig

BOTTOM_CARD_POSITION = Vec2(600, 400)


def _make_card(cfg: CardConfig, face_up: bool) -> CardModel:
    return CardModel(cfg.face, cfg.suit, face_up=face_up, initial_position=cfg.position)


def generate(config: LevelConfig) -> GameModel:
    """Create face-up play field cards and face-down stack cards.

    The first stack card becomes the face-up bottom card; it also stays
    at the front of the stack.
    """
    play_field = [_make_card(cfg, face_up=True) for cfg in config.play_field_configs]
    stack = [_make_card(cfg, face_up=False) for cfg in config.stack_configs]

    model = GameModel(play_field_cards=play_field, stack_cards=stack)

    if stack:
        bottom = stack[0]
        bottom.face_up = True
        bottom.initial_position = BOTTOM_CARD_POSITION
        model.bottom_card = bottom

    return model