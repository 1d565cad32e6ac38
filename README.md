# monofighter

The frame-by-frame logic of a one-on-one fighting game. Nothing is drawn and
nothing is played. Each frame you pass in the controller state as a
`PadState`, and you read back the state the game now holds.

## Modules

- `monofighter.attack` holds the attack data:
  - `AttackParameter` describes one attack: its frame windows, damage, guard and finisher gauge gains, hit stop, and hit boxes for each facing.
  - `save_attack_file` and `load_attack_file` write attacks to JSON and read them back. The JSON keys are `attackStartTime`, `rightCollisionMin` and so on.
  - `AttackEditor` keeps separate player and enemy tables. It provides `add_attack`, `rename_attack`, `set_value` (values are clamped to the editor's ranges), `save` and `load`. `attack_values` returns an `AttackValues` whose `AABB` is the hit box for the `Direction` given.
- `monofighter.timing`:
  - `GameTimer` gives a fixed 1/60 s delta multiplied by its time scale.
  - `HitStop` sets the time scale to zero for a given number of seconds, then restores it.
- `monofighter.camera`: `CameraController` follows the midpoint of two fighters. It pulls back as they separate and moves in as they close. It also runs the finisher swing, `start_finisher_camera`, and the return from it, `end_finisher_camera`.
- `monofighter.inputlog`:
  - `PadState` is one frame of a gamepad: connected, left stick, and held and pressed `PadButton`s.
  - `InputLog` keeps the last 8 `(StickDirection, Button or None, frames)` entries, newest first. The frame count stops at 99.
- `monofighter.guide`: `Guide` is the three-page controls overlay. START opens and closes it. The d-pad or the stick turns pages, with a cooldown between turns.
- `monofighter.character`: `Character` holds fighter state (`CharacterState`, `BaseData`, `AttackData`, `TimerData`). It handles behaviour requests, starting and ending attacks, getting up after a knock-down, and attack and recovery windows. `clamp_to_stage` keeps the fighter on the stage. `apply_attack_parameters` copies tuning from an `AttackEditor`. The module also provides `advance_animation_time`.
- `monofighter.bullet`: `Bullet` moves in a straight line and dies after 100 frames.
- `monofighter.transition`:
  - `Transition` fades a black overlay in or out between scenes and runs the fade between rounds.
  - `Scene` is the abstract base for scenes.
- `monofighter.match`: `Match` runs the 99-second round clock and the round intro countdown. It decides KO and time-over results from `FighterStatus` values and scores best of three. Once a side has two rounds it returns `"GameWinScene"` or `"GameLoseScene"`.
- `monofighter.hud`: helpers that say what the screens show:
  - `split_digits` and `number_texture_paths` give the timer digits.
  - `round_get_markers`, `round_banner` and `round_end_banner` give the round markers and banners.
  - `TitleAnimation` makes the title logo bob up and down.
- `monofighter.scenes`:
  - `TitleScene`, `PlayScene`, `WinScene` and `LoseScene` are the four scenes.
  - `SceneFactory` builds a scene by name and raises `ValueError` for an unknown name.
  - `GameManager` switches scenes when the current one asks for it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Editing attacks

```python
from monofighter.attack import AttackEditor, Direction

editor = AttackEditor("data/player.json", "data/enemy.json")
name = editor.add_attack(True)          # "攻撃1"
editor.set_value(True, name, "damage", 12)
editor.save(True)                       # creates data/ if needed

values = editor.attack_values(name, True, Direction.RIGHT)
print(values.damage)                    # 12
```

## Running the game loop

`GameManager.initialize` opens the title scene and loads both attack tables.
The files must exist, or `FileNotFoundError` is raised. By default they are
`Resource/AttackData/AttackPlayerData.json` and
`Resource/AttackData/AttackEnemyData.json`.

```python
from monofighter.attack import AttackEditor
from monofighter.inputlog import PadButton, PadState
from monofighter.scenes import GameManager

editor = AttackEditor("data/player.json", "data/enemy.json")
editor.save(True)
editor.save(False)

game = GameManager(editor)
game.initialize()

idle = PadState()
for _ in range(120):                    # let the fade-in finish
    game.update(idle)
game.update(PadState(pressed={PadButton.A}))
for _ in range(120):                    # fade out, then the fight begins
    scene = game.update(idle)
print(type(scene).__name__)             # PlayScene
```

Scenes do not play sounds. Each scene appends the sounds it would play to
its `sounds` list, as `(path, loop, volume)` tuples.

## What it does not do

- It renders no graphics, plays no audio and reads no real gamepad. Every input comes from the `PadState` you pass in.
- There is no editing window for attacks and no command-line program. Attacks are edited through `AttackEditor` methods.
- `Character` holds shared fighter state only. It contains no move set, AI, collision handling or damage exchange between fighters. In `PlayScene` the fighters change only when a new round resets them.