"""The game's scenes, the factory that builds them and the manager that runs them."""

from __future__ import annotations

from typing import Callable, ClassVar, Sequence

from monofighter.attack import AttackEditor
from monofighter.character import AttackKind, BaseData, Character
from monofighter.guide import Guide
from monofighter.hud import TitleAnimation
from monofighter.inputlog import InputLog, PadButton, PadState
from monofighter.match import FighterStatus, Match
from monofighter.timing import GameTimer, HitStop
from monofighter.transition import Scene

TITLE_SCENE = "GameTitleScene"
PLAY_SCENE = "GamePlayScene"
WIN_SCENE = "GameWinScene"
LOSE_SCENE = "GameLoseScene"

SELECT_SOUND = "Resource/Sounds/Select.mp3"
BGM_SOUND = "Resource/Sounds/BGM.mp3"
BGM_VOLUME = 0.2
SELECT_VOLUME = 1.0

WIN_SCENE_TEXTURE = "Resource/Images/WinScene.png"
LOSE_SCENE_TEXTURE = "Resource/Images/LoseScene.png"


def default_fighters() -> tuple[Character, Character]:
    """A fresh player and enemy at full health.

    The player's hit points count up from minus the maximum toward zero,
    the enemy's down from the maximum toward zero.
    """
    player = Character()
    player.base.hp = -BaseData.MAX_HP
    enemy = Character()
    enemy.base.hp = BaseData.MAX_HP
    return player, enemy


class _GameScene(Scene):
    """A scene that records the sounds it plays as (path, loop, volume)."""

    NAME: ClassVar[str | None] = None

    def __init__(self) -> None:
        super().__init__()
        self.sounds: list[tuple[str, bool, float]] = []
        self.is_play_audio = False

    def initialize(self) -> None:
        super().initialize()
        self.is_play_audio = False

    def _play(self, path: str, loop: bool = False, volume: float = SELECT_VOLUME) -> None:
        self.sounds.append((path, loop, volume))

    def _confirm(self, pad: PadState) -> None:
        """Start leaving the scene when A is pressed after the fade-in."""
        if pad.is_pressed(PadButton.A) and self.is_transition_end:
            self.is_transition_start = True
            if not self.is_play_audio:
                self._play(SELECT_SOUND)
            self.is_play_audio = True


class TitleScene(_GameScene):
    """The title screen: bobbing logo, controls guide, A to start a fight."""

    NAME = TITLE_SCENE

    def __init__(self) -> None:
        super().__init__()
        self.guide = Guide()
        self.title = TitleAnimation()

    def initialize(self) -> None:
        super().initialize()
        self.guide = Guide()
        self.title = TitleAnimation()
        self._play(BGM_SOUND, loop=True, volume=BGM_VOLUME)

    def update(self, pad: PadState) -> str | None:
        self.title.update()
        self.guide.update(pad)
        if self.guide.changed_sprite:
            self._play(SELECT_SOUND)
            self.guide.changed_sprite = False
        if pad.connected and not self.guide.is_open:
            self._confirm(pad)
        return self._step_transitions(PLAY_SCENE)


class ResultScene(_GameScene):
    """A result screen that returns to the title when A is pressed."""

    TEXTURE: ClassVar[str | None] = None

    def __init__(self) -> None:
        super().__init__()

    @property
    def texture(self) -> str | None:
        """The picture this screen shows."""
        return self.TEXTURE

    def update(self, pad: PadState) -> str | None:
        if pad.connected:
            self._confirm(pad)
        return self._step_transitions(TITLE_SCENE)


class WinScene(ResultScene):
    """Shown when the player takes the match."""

    NAME = WIN_SCENE
    TEXTURE = WIN_SCENE_TEXTURE


class LoseScene(ResultScene):
    """Shown when the enemy takes the match."""

    NAME = LOSE_SCENE
    TEXTURE = LOSE_SCENE_TEXTURE


def _status(fighter: Character) -> FighterStatus:
    return FighterStatus(
        hp=fighter.base.hp,
        position_y=fighter.position.y,
        is_finisher_second_attack=AttackKind.FINISHER_SECOND_ATTACK in fighter.attack.active,
        is_tackle=AttackKind.TACKLE in fighter.attack.active,
    )


class PlayScene(_GameScene):
    """The fight: round clock, results, hit stop, input history and the guide."""

    NAME = PLAY_SCENE

    def __init__(self, fighters: Sequence[Character]) -> None:
        super().__init__()
        self.player, self.enemy = fighters
        self._start_hp = (self.player.base.hp, self.enemy.base.hp)
        self.match: Match | None = None
        self.timer = GameTimer()
        self.hit_stop = HitStop(self.timer)
        self.guide = Guide()
        self.input_log = InputLog()

    def initialize(self) -> None:
        super().initialize()
        self.match = Match(self.transition)
        self.timer = GameTimer()
        self.hit_stop = HitStop(self.timer)
        self.guide = Guide()
        self.input_log = InputLog()

    def update(self, pad: PadState) -> str | None:
        match = self.match
        if match is None:
            raise RuntimeError("scene used before initialize()")

        if match.round_start_timer <= 0:
            self.guide.update(pad)
        if self.guide.changed_sprite:
            self._play(SELECT_SOUND)
            self.guide.changed_sprite = False
        if self.guide.is_open:
            return None

        self.timer.update()
        match.tick_clock(self.timer.delta_time, self.player.timers.finisher)
        next_scene = match.handle_game_outcome(_status(self.player), _status(self.enemy))

        if match.fighters_need_reset:
            self._reset_fighters()
            match.fighters_need_reset = False

        self.hit_stop.update()
        self.input_log.update(pad)
        return next_scene

    def _reset_fighters(self) -> None:
        for fighter, hp in zip((self.player, self.enemy), self._start_hp):
            fighter.reset()
            fighter.base.hp = hp


class SceneFactory:
    """Builds scenes by name; fight scenes get fighters from the given maker."""

    def __init__(self, fighters: Callable[[], Sequence[Character]] | None = None) -> None:
        self.fighters = fighters if fighters is not None else default_fighters

    def create_scene(self, scene_name: str) -> Scene:
        """A new, not yet initialized scene; ValueError for an unknown name."""
        if scene_name == TITLE_SCENE:
            return TitleScene()
        if scene_name == PLAY_SCENE:
            return PlayScene(self.fighters())
        if scene_name == WIN_SCENE:
            return WinScene()
        if scene_name == LOSE_SCENE:
            return LoseScene()
        raise ValueError(f"unknown scene: {scene_name}")


class GameManager:
    """Owns the current scene and switches to the next one when it asks."""

    def __init__(self, editor: AttackEditor | None = None,
                 factory: SceneFactory | None = None) -> None:
        self.editor = editor if editor is not None else AttackEditor()
        self.factory = factory if factory is not None else SceneFactory()
        self.scene: Scene | None = None

    def _enter(self, scene_name: str) -> Scene:
        scene = self.factory.create_scene(scene_name)
        scene.initialize()
        return scene

    def initialize(self) -> None:
        """Open the title scene and load the attack tables."""
        self.scene = self._enter(TITLE_SCENE)
        self.editor.initialize()

    def update(self, pad: PadState) -> Scene:
        """Run one frame of the current scene and return the scene now current."""
        if self.scene is None:
            raise RuntimeError("game used before initialize()")
        next_name = self.scene.update(pad)
        if next_name is not None:
            self.scene.finalize()
            self.scene = self._enter(next_name)
        return self.scene