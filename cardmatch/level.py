"""Level descriptions and their JSON format."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

from cardmatch.cards import CardFace, CardSuit, Vec2


class LevelFormatError(ValueError):
    """The level document is not valid JSON or lacks required fields."""


@dataclass(frozen=True)
class CardConfig:
    face: CardFace
    suit: CardSuit
    position: Vec2


@dataclass
class LevelConfig:
    play_field_configs: list[CardConfig] = field(default_factory=list)
    stack_configs: list[CardConfig] = field(default_factory=list)
    position: Vec2 = field(default_factory=Vec2)


def _require_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelFormatError(f"{where}: expected an integer, got {value!r}")
    return value


def _require_number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LevelFormatError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _card_config(obj: Any, where: str) -> CardConfig:
    try:
        face_raw = obj["CardFace"]
        suit_raw = obj["CardSuit"]
        position = obj["Position"]
        x_raw = position["x"]
        y_raw = position["y"]
    except (KeyError, TypeError) as exc:
        raise LevelFormatError(f"{where}: missing or malformed field {exc}") from exc

    face_value = _require_int(face_raw, f"{where}.CardFace")
    suit_value = _require_int(suit_raw, f"{where}.CardSuit")
    try:
        face = CardFace(face_value)
        suit = CardSuit(suit_value)
    except ValueError as exc:
        raise LevelFormatError(f"{where}: {exc}") from exc

    return CardConfig(
        face=face,
        suit=suit,
        position=Vec2(
            _require_number(x_raw, f"{where}.Position.x"),
            _require_number(y_raw, f"{where}.Position.y"),
        ),
    )


def _section(doc: dict[str, Any], name: str) -> list[CardConfig]:
    if name not in doc:
        raise LevelFormatError(f"missing section {name!r}")
    entries = doc[name]
    if not isinstance(entries, list):
        raise LevelFormatError(f"section {name!r} must be an array")
    return [_card_config(obj, f"{name}[{i}]") for i, obj in enumerate(entries)]


def parse_level(text: str) -> LevelConfig:
    """Parse a level document with "Playfield" and "Stack" arrays."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LevelFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise LevelFormatError("level document must be a JSON object")
    return LevelConfig(
        play_field_configs=_section(doc, "Playfield"),
        stack_configs=_section(doc, "Stack"),
    )


def load_level(path: str | PathLike[str]) -> LevelConfig:
    """Read and parse a level file."""
    with open(path, encoding="utf-8") as handle:
        return parse_level(handle.read())