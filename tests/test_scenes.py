import pytest

from monofighter.attack import AttackEditor
from monofighter.character import AttackKind, BaseData
from monofighter.inputlog import PadButton, PadState
from monofighter.match import MAX_ROUND_TIME
from monofighter.scenes import (
    BGM_SOUND,
    BGM_VOLUME,
    LOSE_SCENE_TEXTURE,
    SELECT_SOUND,
    WIN_SCENE_TEXTURE,
    GameManager,
    LoseScene,
    PlayScene,
    ResultScene,
    SceneFactory,
    TitleScene,
    WinScene,
    default_fighters,
)

IDLE = PadState()
PRESS_A = PadState(pressed={PadButton.A})
PRESS_START = PadState(pressed={PadButton.START})
SELECT = (SELECT_SOUND, False, 1.0)


def _fade_in(scene, frames=100):
    for _ in range(frames):
        assert scene.update(IDLE) is None


def test_title_plays_bgm_on_initialize():
    scene = TitleScene()
    scene.initialize()
    assert scene.sounds == [(BGM_SOUND, True, BGM_VOLUME)]


def test_title_ignores_a_during_fade_in():
    scene = TitleScene()
    scene.initialize()
    assert scene.update(PRESS_A) is None
    assert scene.is_transition_start is False


def test_title_starts_fight_after_fade_in():
    scene = TitleScene()
    scene.initialize()
    _fade_in(scene)
    assert scene.is_transition_end is True
    results = [scene.update(PRESS_A) for _ in range(200)]
    assert "GamePlayScene" in results
    assert scene.sounds.count(SELECT) == 1


def test_title_guide_blocks_start():
    scene = TitleScene()
    scene.initialize()
    _fade_in(scene)
    scene.update(PRESS_START)
    assert scene.guide.is_open is True
    assert SELECT in scene.sounds
    scene.update(PRESS_A)
    assert scene.is_transition_start is False


def test_title_update_before_initialize_raises():
    with pytest.raises(RuntimeError):
        TitleScene().update(IDLE)


@pytest.mark.parametrize("cls", [WinScene, LoseScene])
def test_result_scene_returns_to_title(cls):
    scene = cls()
    scene.initialize()
    _fade_in(scene)
    results = [scene.update(PRESS_A) for _ in range(200)]
    assert "GameTitleScene" in results
    assert scene.sounds.count(SELECT) == 1


def test_result_scene_textures():
    assert WinScene().texture == WIN_SCENE_TEXTURE
    assert LoseScene().texture == LOSE_SCENE_TEXTURE
    assert ResultScene().texture is None


def test_result_scene_ignores_disconnected_pad():
    scene = WinScene()
    scene.initialize()
    _fade_in(scene)
    scene.update(PadState(connected=False, pressed={PadButton.A}))
    assert scene.is_transition_start is False


def test_default_fighters_full_health():
    player, enemy = default_fighters()
    assert player.base.hp == -BaseData.MAX_HP
    assert enemy.base.hp == BaseData.MAX_HP


def test_play_scene_clock_runs_after_intro():
    scene = PlayScene(default_fighters())
    scene.initialize()
    for _ in range(200):
        assert scene.update(IDLE) is None
    assert 0 < scene.match.current_seconds < MAX_ROUND_TIME


def test_play_scene_guide_freezes_clock():
    scene = PlayScene(default_fighters())
    scene.initialize()
    _fade_in(scene)
    scene.update(PRESS_START)
    assert scene.guide.is_open is True
    seconds = scene.match.current_seconds
    for _ in range(120):
        scene.update(IDLE)
    assert scene.match.current_seconds == seconds
    assert SELECT in scene.sounds


def test_play_scene_knockout_moves_to_next_round():
    player, enemy = default_fighters()
    scene = PlayScene((player, enemy))
    scene.initialize()
    enemy.base.hp = 0
    enemy.attack.active.add(AttackKind.TACKLE)
    for _ in range(600):
        scene.update(IDLE)
        if scene.match.round_number == 2:
            break
    assert scene.match.round_number == 2
    assert scene.match.player_wins == 1
    assert scene.match.enemy_wins == 0
    assert enemy.base.hp == BaseData.MAX_HP
    assert AttackKind.TACKLE not in enemy.attack.active


def test_play_scene_update_before_initialize_raises():
    with pytest.raises(RuntimeError):
        PlayScene(default_fighters()).update(IDLE)


@pytest.mark.parametrize("name, cls", [
    ("GameTitleScene", TitleScene),
    ("GamePlayScene", PlayScene),
    ("GameWinScene", WinScene),
    ("GameLoseScene", LoseScene),
])
def test_factory_creates_named_scenes(name, cls):
    scene = SceneFactory().create_scene(name)
    assert type(scene) is cls
    assert scene.NAME == name


def test_factory_unknown_scene():
    with pytest.raises(ValueError):
        SceneFactory().create_scene("NoSuchScene")


def test_factory_gives_fresh_fighters():
    factory = SceneFactory()
    first = factory.create_scene("GamePlayScene")
    second = factory.create_scene("GamePlayScene")
    assert first.player is not second.player
    assert first.enemy is not second.enemy


def _editor(tmp_path):
    return AttackEditor(tmp_path / "player.json", tmp_path / "enemy.json")


def test_manager_initialize_loads_editor(tmp_path):
    writer = _editor(tmp_path)
    name = writer.add_attack(True)
    writer.save(True)
    writer.save(False)

    editor = _editor(tmp_path)
    manager = GameManager(editor, SceneFactory())
    manager.initialize()
    assert isinstance(manager.scene, TitleScene)
    assert list(editor.parameters(True)) == [name]
    assert editor.parameters(False) == {}


def test_manager_missing_attack_file(tmp_path):
    manager = GameManager(_editor(tmp_path), SceneFactory())
    with pytest.raises(FileNotFoundError):
        manager.initialize()


def test_manager_update_before_initialize(tmp_path):
    with pytest.raises(RuntimeError):
        GameManager(_editor(tmp_path), SceneFactory()).update(IDLE)


def test_manager_switches_to_fight(tmp_path):
    writer = _editor(tmp_path)
    writer.save(True)
    writer.save(False)
    manager = GameManager(_editor(tmp_path), SceneFactory())
    manager.initialize()
    title = manager.scene
    for _ in range(300):
        if isinstance(manager.update(PRESS_A), PlayScene):
            break
    assert isinstance(manager.scene, PlayScene)
    assert manager.scene.match is not None
    assert title.transition is None