# gravdash

The game logic behind a small gravity-flipping arcade game. This package
holds its menus, settings, keyboard controls, animation timing and player
statistics. Each object keeps the positions, sizes and state that a
renderer can read.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `gravdash.events`: `Event`, `EventType` and an `EventQueue` that UI elements push onto and the game loop polls (`push`, `poll`, `clear`).
- `gravdash.clock`: a `Clock` that measures a frame delta in milliseconds from any time source, scaled by `set_speed`.
- `gravdash.bezier`: a `Bezier` curve evaluated by repeated linear interpolation (`point`, `value`).
- `gravdash.attachment`: an `Attachment` position that passes every change to an attached callback.
- `gravdash.geometry`: `sign` and `squared_distance_to_segment`.
- `gravdash.stats`: lifetime `Stats` with a top-three table for each `HighScoreMode` (`from_json`, `to_json`, `insert_high_score`), and `LocalStats` for the last game.
- `gravdash.animation`: an `AnimationHandler` that steps sprite-sheet frames through a queue of `Animation`s.
- `gravdash.keyboard`: `Key` codes, held-key state (`Keyboard`, `KeyPress`, `KeyState`), and `key_name` and `key_code` to convert between keys and their display names.
- `gravdash.controls`: `Action` and `KeyboardControls`, which bind game actions to keys.
- `gravdash.settings`: `Settings` with defaults, JSON-shaped `load` and `save`, colour rules (`Colour`) and per-player controls.
- `gravdash.rounded_rect`: `RoundedRect`, a rectangle described by its centre, size and colour.
- `gravdash.static_button`: `StaticButton`, `ButtonConfig` and `ButtonSize`.
- `gravdash.list_item`: `ListItem` rows and the interactables that edit their values (`StaticInteractable`, `ToggleInteractable`, `RangeInteractable`, `SelectionInteractable`, `KeybindInteractable`).
- `gravdash.menu_interface`: the `GridInterface`, `VerticalInterface`, `GameEndInterface` and scrolling `ListInterface` layouts.
- `gravdash.menu`: `Menu`, a stack of menus (`push`, `back`, `clear`, `reload_stack`), with `MenuType`, `GamePreset` and `load_menu`.

## Example

```python
from gravdash.events import EventQueue
from gravdash.keyboard import Keyboard
from gravdash.settings import Settings
from gravdash.menu import Menu, MenuType

keyboard = Keyboard()
events = EventQueue()
settings = Settings(keyboard, events)

menu = Menu(settings, events, MenuType.MAIN)

# Once per frame: feed the keys held this frame, update the menu, then drain the events.
keyboard.update(pressed=set(), delta=16)
menu.update(16)
while (event := events.poll()) is not None:
    print(event)
```

## What this package does not do

- It draws nothing and opens no window. It loads no textures, fonts or shaders, and it plays no sound.
- It does not read the keyboard itself. The caller reports key presses with `Keyboard.add_key_press` and passes the keys held each frame to `Keyboard.update`.
- It holds no gameplay: no players, levels or particles. The events it pushes (`GAME_NEW`, `PAUSE`, `PROGRAM_CLOSE` and the rest) are left for the caller to act on.
- It writes nothing to disk. `Settings.save` and `Stats.to_json` return plain objects for the caller to store.
- The tutorial menu (`MenuType.TUTOR`) has no layout, and pushing it raises `ValueError`.
- It provides no command to run.