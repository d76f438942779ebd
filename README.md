# fighterlite

A small side-scrolling brawler built on pygame. A fighter walks and jumps
around the arena, can stand on a rock and pick it up, and shares the arena
with bandits that walk towards a point on the field.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Playing

```
fighterlite
```

The command opens a 1000x800 window titled "Little Fighter 2" and takes no
options. The game starts on a welcome screen. Click the button in the middle
of each screen to move on: welcome, menu, loading, character selection, and
then the fight. Releasing Escape or closing the window quits.

Images are loaded from `resources/` relative to the working directory, so
start the game from the directory that holds them:

- screen backgrounds: `resources/state_backgrounds/bg_welcome_state.png`,
  `bg_win_state.png`, `bg_loading_1.png` and `bg_cc.png`;
- the fight's background and sprite sheets: `resources/<name>.png`, for
  example `resources/lvl1bg.png`, `resources/davis_ani.png` and
  `resources/bandit.png`.

A screen whose background image cannot be loaded raises `RuntimeError`.

### Controls

| Key             | Command                                         |
|-----------------|-------------------------------------------------|
| Left / Right    | walk left / right (the fighter turns to face it) |
| Up / Down       | walk up / down the arena                        |
| Right Shift     | jump                                            |
| Left Shift (on release) | pick up the object the fighter stands on |

Enter is read as an attack command, but no state acts on it yet.

## Using it as a library

The game logic does not need a window and can be driven directly:

```python
from fighterlite.animation import load_animations
from fighterlite.level import Level
from fighterlite.player import Player
from fighterlite.player_states import KeyEvent
from fighterlite.sprite import Vec2

load_animations()                 # fill the named animation table first

player = Player(Vec2(0, 0), "davis_ani", 300.0)
level = Level("lvl1bg", Vec2(1000, 800))
level.add_squad("b2")             # a squad of two bandits
level.add_pickable_objects("r")   # one rock

player.handle_input(KeyEvent(pressed=True, key="right"))
level.update(1 / 60)
level.handle_collisions_with_player(player)
player.update(1 / 60)
```

Main pieces:

- `fighterlite.sprite` - `Vec2`, `FloatRect`, `Texture` and `Sprite`.
- `fighterlite.animation` - sprite-sheet `Animation`s and the named table
  (`load_animations`, `get_animation`, which raises `AnimationNotFoundError`
  for unknown names).
- `fighterlite.factory` - a name-to-constructor `Factory`.
- `fighterlite.objects` - `Rock`, `Bandit`, `Hunter`, `Ally`, `Squad` and the
  factories `ENEMY_FACTORY` (`"b"` bandit, `"H"` hunter) and
  `PICKABLE_FACTORY` (`"r"` rock).
- `fighterlite.player_states` - `KeyEvent`, `input_for_event`, the player
  states (`StandingState`, `WalkingState`, `JumpingState`,
  `CollideWithObjectState`) and the jump phases.
- `fighterlite.player` - the `Player`.
- `fighterlite.collision` - `process_collision`, raising
  `UnknownCollisionError` for pairs other than player and rock.
- `fighterlite.level` and `fighterlite.controller` - a `Level`'s squads and
  objects, and the `Controller` that runs a match.
- `fighterlite.ui`, `fighterlite.screens`, `fighterlite.app` - drawing, the
  screen sequence and the `GameManager` main loop.

## What it does not do

- There is no fighting: no attack is carried out, nobody has health that
  goes down, and enemies do not strike back.
- A level never ends. `Level.are_all_enemies_defeated` always returns
  `False` and players stay alive, so the `Controller` never reports a win or
  a loss.
- Bandits walk towards the fixed point (125, 125), not towards the player.
  Hunters stand still.
- Level lines are lower-cased before lookup while hunters are registered as
  `"H"`, so an `h` token in `Level.add_squad` adds no enemy.
- The character select screen offers no choice; its button starts the fight.
- During the fight the rock lives in a separate level from the fighter you
  control, so it is not drawn and cannot be picked up there.
- There is no sound, scoring or saved progress.