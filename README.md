# cardmatch

cardmatch is a small card matching game played from the terminal.

A level describes a play field of face-up cards and a stack of face-down cards.
The first stack card is turned face up and becomes the pile card. It also stays at
the front of the stack. A field card can be played onto the pile when its value
differs from the pile card's value by exactly one. Clicking the stack draws its
front card and makes it the new pile card. Undo takes back the last recorded move
by making the previous pile card the pile card again.

## Installation

```
pip install .
```

Python 3.10 or later is needed. There are no other runtime dependencies.

## Playing

```
cardmatch [level] [--seed N] [--frame-height H]
```

- `level` is a level JSON file. The default is `level_1.json` in the current
  directory.
- `--seed` seeds the random placement of the field cards. Field cards are laid out
  at random positions with x from 200 to 900 and y from 1000 to 1400.
- `--frame-height` is the window height used to pick the content scale factor. The
  default is 2080.

The command prints the table and then reads one command per line from standard
input. After each command it prints the table again. Each line of the table shows:

- the card's index,
- its label, such as `big_red_4` for a face-up card or `face-down` for a face-down one,
- its position,
- whether it is a field or pile `card` or the `stack`.

If the level file cannot be read or is malformed, the command prints an error and
exits with status 1.

Commands:

| Command | Effect |
|---|---|
| `click N` | click the card with index `N` |
| `tap X Y` | click the topmost card under the point `(X, Y)` |
| `stack` | draw from the stack |
| `undo` | take back the last move |
| `pause`, `resume` | set the app's `animating` flag |
| `quit`, `exit` | stop |

An unknown command or one with bad arguments prints an error, and the game goes on.

## Level files

A level is a JSON object with two arrays, `Playfield` and `Stack`:

```json
{
  "Playfield": [
    {"CardFace": 3, "CardSuit": 2, "Position": {"x": 250, "y": 1000}},
    {"CardFace": 4, "CardSuit": 0, "Position": {"x": 300, "y": 800}}
  ],
  "Stack": [
    {"CardFace": 2, "CardSuit": 1, "Position": {"x": 0, "y": 0}},
    {"CardFace": 5, "CardSuit": 3, "Position": {"x": 0, "y": 0}}
  ]
}
```

- `CardFace` is an integer from `CardFace`: `0` (`TWO`) through `8` (`TEN`). A
  card's `value()` is its face plus one.
- `CardSuit` is `0` clubs, `1` diamonds, `2` hearts or `3` spades. Hearts and
  diamonds get red textures, and the other suits get black ones.
- `Position` gives the card's initial position. The pile card is always placed at
  `(600, 400)`.

## Using the library

```python
from cardmatch.level import load_level
from cardmatch.generator import generate
from cardmatch.controller import can_match

model = generate(load_level("level_1.json"))
playable = [
    card for card in model.play_field_cards
    if not card.is_covered() and can_match(card, model.bottom_card)
]
```

- `cardmatch.cards` defines `Vec2`, `CardFace`, `CardSuit` and `CardModel`. A
  `CardModel` holds weak references to the cards covering it, through
  `add_covering_card`, `remove_covering_card` and `is_covered`. Cards compare by
  identity.
- `cardmatch.level` provides `parse_level(text)` and `load_level(path)`. They return
  a `LevelConfig` of `CardConfig` entries and raise `LevelFormatError` for bad JSON,
  missing fields, or out-of-range faces and suits.
- `cardmatch.generator.generate(config)` builds a `GameModel`.
- `cardmatch.game_model.GameModel` has `pop_stack_card`, `is_stack_empty`,
  `push_undo_state` and `pop_undo_state`. The undo methods save and restore
  snapshots of the card lists and the pile card.
- `cardmatch.undo` provides `UndoAction` and `UndoManager`. `UndoManager` has
  `record_action`, `has_undo` and `pop_undo`. `pop_undo` raises `IndexError` when
  the history is empty.
- `cardmatch.view` provides `CardView` and `GameView`. They handle textures, hit
  testing and click dispatch, and `GameView.show_game` lays out a model.
- `cardmatch.controller.GameController` applies the rules. Its methods are
  `start_game`, `handle_card_click`, `handle_stack_card_click` and
  `undo_last_action`.
- `cardmatch.app.App` provides `run_command` and `render`, and
  `content_scale_factor(frame_height)` picks the content scale factor.

## What it does not do

- There is no graphical window, sound or animation. Views only record texture
  paths, positions and scales. Moves take effect at once. `pause` and `resume`
  only toggle a flag.
- Level files cannot declare which cards cover others, so a generated game has no
  covered cards unless you call `add_covering_card` yourself.
- Undo does not put a drawn card back on the stack.
- A played field card stays in the model's field list.
- There is no win or loss detection and no saved progress.