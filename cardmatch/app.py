"""Application shell: screen setup, the table scene and a text front end."""

from __future__ import annotations

import argparse
import random
import shlex
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import PurePosixPath
from typing import Optional, Sequence

from cardmatch.cards import Vec2
from cardmatch.controller import DEFAULT_LEVEL, GameController
from cardmatch.level import LevelFormatError
from cardmatch.view import CardView, GameView

APP_TITLE = "CardGame"
DESIGN_RESOLUTION: tuple[float, float] = (1080.0, 2080.0)
SMALL_RESOLUTION: tuple[float, float] = (480.0, 320.0)
MEDIUM_RESOLUTION: tuple[float, float] = (1024.0, 768.0)
LARGE_RESOLUTION: tuple[float, float] = (2048.0, 1536.0)

ANIMATION_INTERVAL = 1.0 / 60
BACKGROUND_COLOR: tuple[int, int, int, int] = (34, 139, 34, 255)
UNDO_LABEL = "Undo"
UNDO_FONT = ("Arial", 64)
UNDO_POSITION = Vec2(1000, 150)
DECOR_SPRITE = "res/card_general.png"
DECOR_POSITION = Vec2(540, 1000)


@dataclass(frozen=True)
class GLContextAttrs:
    """Rendering context settings requested at start-up."""

    red: int = 8
    green: int = 8
    blue: int = 8
    alpha: int = 8
    depth: int = 24
    stencil: int = 8
    multisamples: int = 0


def _scale_for(resolution: tuple[float, float]) -> float:
    width, height = resolution
    design_width, design_height = DESIGN_RESOLUTION
    return min(height / design_height, width / design_width)


def content_scale_factor(frame_height: float) -> float:
    """Pick the content scale factor for a window of the given height."""
    if frame_height > MEDIUM_RESOLUTION[1]:
        return _scale_for(LARGE_RESOLUTION)
    if frame_height > SMALL_RESOLUTION[1]:
        return _scale_for(MEDIUM_RESOLUTION)
    return _scale_for(SMALL_RESOLUTION)


class App:
    """One running game: a table view driven by a controller."""

    def __init__(
        self,
        level_path: str | PathLike[str] = DEFAULT_LEVEL,
        frame_height: float = DESIGN_RESOLUTION[1],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.title = APP_TITLE
        self.gl_context = GLContextAttrs()
        self.display_stats = True
        self.animation_interval = ANIMATION_INTERVAL
        self.frame_height = frame_height
        self.scale_factor = content_scale_factor(frame_height)
        self.background_color = BACKGROUND_COLOR
        self.animating = True
        self.running = True

        self.game_view = GameView(rng)
        self.controller = GameController()
        self.controller.start_game(self.game_view, level_path)

    def _view_at(self, index: int) -> CardView:
        views = self.game_view.card_views()
        if not 0 <= index < len(views):
            raise ValueError(f"no card at index {index}")
        return views[index]

    def _click(self, view: CardView) -> bool:
        callback = view.click_callback
        if callback is None:
            return False
        return bool(callback(view))

    def _stack_view(self) -> Optional[CardView]:
        for view in self.game_view.card_views():
            if view.click_callback == self.controller.handle_stack_card_click:
                return view
        return None

    def _tap(self, point: Vec2) -> bool:
        for view in reversed(self.game_view.card_views()):
            if view.hit_test(point):
                return self._click(view)
        return False

    def run_command(self, command: str) -> bool:
        """Apply one text command; True when it changed the game."""
        words = shlex.split(command)
        if not words:
            return False
        name, args = words[0].lower(), words[1:]

        def expect(count: int) -> None:
            if len(args) != count:
                raise ValueError(f"{name!r} takes {count} argument(s)")

        if name in ("quit", "exit"):
            expect(0)
            self.running = False
            return False
        if name == "undo":
            expect(0)
            return self.controller.undo_last_action()
        if name == "stack":
            expect(0)
            view = self._stack_view()
            return view is not None and self._click(view)
        if name == "click":
            expect(1)
            try:
                index = int(args[0])
            except ValueError as exc:
                raise ValueError(f"bad card index {args[0]!r}") from exc
            return self._click(self._view_at(index))
        if name == "tap":
            expect(2)
            try:
                point = Vec2(float(args[0]), float(args[1]))
            except ValueError as exc:
                raise ValueError(f"bad point {' '.join(args)!r}") from exc
            return self._tap(point)
        if name == "pause":
            expect(0)
            self.animating = False
            return False
        if name == "resume":
            expect(0)
            self.animating = True
            return False
        raise ValueError(f"unknown command {name!r}")

    def render(self) -> str:
        """Describe the table as text, one card view per line."""
        lines = []
        for index, view in enumerate(self.game_view.card_views()):
            if view.texture:
                label = PurePosixPath(view.texture).stem
            else:
                label = "face-down"
            role = (
                "stack"
                if view.click_callback == self.controller.handle_stack_card_click
                else "card"
            )
            lines.append(
                f"{index:2d} {label:<16} ({view.position.x:.0f}, "
                f"{view.position.y:.0f}) {role}"
            )
        lines.append(
            f"[{UNDO_LABEL}] at ({UNDO_POSITION.x:.0f}, {UNDO_POSITION.y:.0f})"
        )
        return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a level from the terminal, one command per line of standard input."""
    parser = argparse.ArgumentParser(prog="cardmatch", description="Play a card matching level.")
    parser.add_argument("level", nargs="?", default=DEFAULT_LEVEL, help="level JSON file")
    parser.add_argument("--seed", type=int, default=None, help="seed for card layout")
    parser.add_argument(
        "--frame-height", type=float, default=DESIGN_RESOLUTION[1], help="window height"
    )
    options = parser.parse_args(argv)

    try:
        app = App(options.level, options.frame_height, random.Random(options.seed))
    except (OSError, LevelFormatError) as exc:
        print(f"cardmatch: {exc}", file=sys.stderr)
        return 1

    print(app.render())
    for line in sys.stdin:
        try:
            app.run_command(line)
        except ValueError as exc:
            print(f"cardmatch: {exc}", file=sys.stderr)
            continue
        if not app.running:
            break
        print(app.render())
    return 0