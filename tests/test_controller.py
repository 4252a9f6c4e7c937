import json
import random

import pytest

from cardmatch.cards import CardFace, CardModel, CardSuit
from cardmatch.controller import GameController, can_match
from cardmatch.level import LevelFormatError
from cardmatch.view import STACK_TOP_POSITION, GameView


def _entry(face, suit, x, y):
    return {"CardFace": int(face), "CardSuit": int(suit), "Position": {"x": x, "y": y}}


@pytest.fixture
def level_file(tmp_path):
    doc = {
        "Playfield": [
            _entry(CardFace.FIVE, CardSuit.HEARTS, 100, 1200),
            _entry(CardFace.NINE, CardSuit.CLUBS, 300, 1200),
        ],
        "Stack": [
            _entry(CardFace.FOUR, CardSuit.CLUBS, 0, 0),
            _entry(CardFace.SIX, CardSuit.SPADES, 0, 0),
        ],
    }
    path = tmp_path / "level.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


@pytest.fixture
def started(level_file):
    controller = GameController()
    table = GameView(rng=random.Random(0))
    controller.start_game(table, level_file)
    return controller, table


def _view_of(table, card):
    return next(v for v in table.card_views() if v.model is card)


def test_can_match_adjacent_values():
    a = CardModel(CardFace.FIVE, CardSuit.HEARTS)
    b = CardModel(CardFace.SIX, CardSuit.CLUBS)
    c = CardModel(CardFace.EIGHT, CardSuit.CLUBS)
    assert can_match(a, b)
    assert can_match(b, a)
    assert not can_match(a, c)
    assert not can_match(a, a)
    assert not can_match(a, None)
    assert not can_match(None, b)


def test_start_game_builds_views(started):
    controller, table = started
    model = controller.game_model
    assert model.bottom_card is model.stack_cards[0]
    models = [v.model for v in table.card_views()]
    assert models[:2] == model.play_field_cards
    assert table.on_card_click == controller.handle_card_click
    assert table.on_stack_card_click == controller.handle_stack_card_click


def test_start_game_bad_level(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(LevelFormatError):
        GameController().start_game(GameView(), path)


def test_matching_click_moves_card_to_bottom(started):
    controller, table = started
    model = controller.game_model
    old_bottom = model.bottom_card
    five = model.play_field_cards[0]
    view = _view_of(table, five)
    start = view.position

    assert controller.handle_card_click(view)
    assert model.bottom_card is five
    assert view.parent is None
    assert view.position == STACK_TOP_POSITION
    assert controller.undo_manager.has_undo()
    action = controller.undo_manager.pop_undo()
    assert action.from_card is five
    assert action.to_card is old_bottom
    assert action.from_pos == start


def test_non_matching_click_is_ignored(started):
    controller, table = started
    nine = controller.game_model.play_field_cards[1]
    bottom = controller.game_model.bottom_card
    assert not controller.handle_card_click(_view_of(table, nine))
    assert controller.game_model.bottom_card is bottom
    assert not controller.undo_manager.has_undo()


def test_covered_card_is_ignored(started):
    controller, table = started
    five, nine = controller.game_model.play_field_cards
    five.add_covering_card(nine)
    assert not controller.handle_card_click(_view_of(table, five))
    assert not controller.undo_manager.has_undo()


def test_face_down_card_is_ignored(started):
    controller, table = started
    five = controller.game_model.play_field_cards[0]
    five.face_up = False
    assert not controller.handle_card_click(_view_of(table, five))
    assert controller.game_model.bottom_card is not five


def test_stack_click_draws_front_card(started):
    controller, table = started
    model = controller.game_model
    first, second = model.stack_cards
    view = _view_of(table, first)

    assert controller.handle_stack_card_click(view)
    assert model.bottom_card is first
    assert model.stack_cards == [second]

    assert controller.handle_stack_card_click(view)
    assert model.bottom_card is second
    assert second.face_up
    assert model.is_stack_empty()
    assert len(controller.undo_manager) == 2


def test_stack_click_on_empty_stack(started):
    controller, table = started
    model = controller.game_model
    view = table.card_views()[0]
    while not model.is_stack_empty():
        controller.handle_stack_card_click(view)
    bottom = model.bottom_card
    assert not controller.handle_stack_card_click(view)
    assert model.bottom_card is bottom


def test_undo_with_empty_history(started):
    controller, _ = started
    bottom = controller.game_model.bottom_card
    assert not controller.undo_last_action()
    assert controller.game_model.bottom_card is bottom


def test_undo_before_start_does_nothing():
    assert GameController().undo_last_action() is False