import io
import json
import random

import pytest

from cardmatch.app import (
    App,
    LARGE_RESOLUTION,
    MEDIUM_RESOLUTION,
    SMALL_RESOLUTION,
    DESIGN_RESOLUTION,
    content_scale_factor,
    main,
)
from cardmatch.cards import CardFace


def _card(face, suit, x, y):
    return {"CardFace": face, "CardSuit": suit, "Position": {"x": x, "y": y}}


@pytest.fixture
def level_file(tmp_path):
    doc = {
        "Playfield": [_card(1, 0, 250, 1200)],
        "Stack": [_card(0, 2, 100, 100), _card(5, 3, 120, 100)],
    }
    path = tmp_path / "level.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


@pytest.fixture
def app(level_file):
    return App(level_file, rng=random.Random(3))


def test_scale_factor_large_frame():
    expected = min(
        LARGE_RESOLUTION[1] / DESIGN_RESOLUTION[1],
        LARGE_RESOLUTION[0] / DESIGN_RESOLUTION[0],
    )
    assert content_scale_factor(2080) == expected


def test_scale_factor_boundaries():
    medium = min(
        MEDIUM_RESOLUTION[1] / DESIGN_RESOLUTION[1],
        MEDIUM_RESOLUTION[0] / DESIGN_RESOLUTION[0],
    )
    small = min(
        SMALL_RESOLUTION[1] / DESIGN_RESOLUTION[1],
        SMALL_RESOLUTION[0] / DESIGN_RESOLUTION[0],
    )
    assert content_scale_factor(768) == medium
    assert content_scale_factor(321) == medium
    assert content_scale_factor(320) == small
    assert content_scale_factor(769) > content_scale_factor(768)


def test_app_scale_factor_follows_frame(level_file):
    app = App(level_file, frame_height=500, rng=random.Random(0))
    assert app.scale_factor == content_scale_factor(500)


def test_render_lists_every_view(app):
    lines = app.render().splitlines()
    assert len(lines) == len(app.game_view.card_views()) + 1
    assert lines[-1].startswith("[Undo]")
    assert any(line.endswith("stack") for line in lines)


def test_click_matching_card_moves_it_to_bottom(app):
    model = app.game_view.card_views()[0].model
    assert model.face == CardFace.THREE
    before = len(app.game_view.card_views())
    assert app.run_command("click 0") is True
    assert app.controller.game_model.bottom_card is model
    assert len(app.game_view.card_views()) == before - 1


def test_undo_without_history_does_nothing(app):
    assert app.run_command("undo") is False


def test_stack_draws_front_card(app):
    before = len(app.controller.game_model.stack_cards)
    assert app.run_command("stack") is True
    assert len(app.controller.game_model.stack_cards) == before - 1
    assert app.controller.undo_manager.has_undo()


def test_tap_on_empty_table_misses(app):
    assert app.run_command("tap 5 5") is False


def test_quit_stops_running(app):
    assert app.run_command("quit") is False
    assert app.running is False


def test_pause_and_resume(app):
    app.run_command("pause")
    assert app.animating is False
    app.run_command("resume")
    assert app.animating is True


@pytest.mark.parametrize("command", ["fly", "click", "click x", "click 99", "tap 1"])
def test_bad_commands_raise(app, command):
    with pytest.raises(ValueError):
        app.run_command(command)


def test_main_runs_commands(level_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("bogus\nclick 0\nquit\n"))
    code = main([str(level_file), "--seed", "1"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.count("[Undo]") == 2
    assert "unknown command" in captured.err


def test_main_missing_level_fails(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code = main([str(tmp_path / "missing.json")])
    assert code == 1
    assert "cardmatch:" in capsys.readouterr().err