from monofighter.guide import STICK_INPUT_COOLDOWN, CommandSpriteType, Guide
from monofighter.inputlog import PadButton, PadState

START = PadState(pressed={PadButton.START})
RIGHT = PadState(pressed={PadButton.DPAD_RIGHT})
LEFT = PadState(pressed={PadButton.DPAD_LEFT})
IDLE = PadState()


def _opened_and_ready():
    guide = Guide()
    guide.update(START)
    for _ in range(STICK_INPUT_COOLDOWN):
        guide.update(IDLE)
    return guide


def test_start_opens_and_closes():
    guide = Guide()
    guide.update(START)
    assert guide.is_open
    assert guide.changed_sprite
    assert guide.current_texture == "Resource/Images/PlayGeneralGuide.png"
    guide.update(START)
    assert not guide.is_open
    assert guide.current_texture is None


def test_disconnected_pad_is_ignored():
    guide = Guide()
    guide.update(PadState(connected=False, pressed={PadButton.START}))
    assert not guide.is_open
    assert not guide.changed_sprite


def test_page_change_waits_for_cooldown():
    guide = Guide()
    guide.update(START)
    guide.update(RIGHT)
    assert guide.sprite is CommandSpriteType.GENERAL


def test_pages_advance_and_stop_at_last():
    guide = _opened_and_ready()
    guide.update(RIGHT)
    assert guide.sprite is CommandSpriteType.COMBO_ATTACK
    for _ in range(STICK_INPUT_COOLDOWN):
        guide.update(IDLE)
    guide.update(PadState(left_stick_x=1.0))
    assert guide.sprite is CommandSpriteType.FINISHER_ATTACK
    for _ in range(STICK_INPUT_COOLDOWN):
        guide.update(IDLE)
    guide.update(RIGHT)
    assert guide.sprite is CommandSpriteType.FINISHER_ATTACK


def test_left_at_first_page_does_nothing():
    guide = _opened_and_ready()
    guide.changed_sprite = False
    guide.update(LEFT)
    assert guide.sprite is CommandSpriteType.GENERAL
    assert not guide.changed_sprite


def test_page_back_resets_cooldown():
    guide = _opened_and_ready()
    guide.update(RIGHT)
    for _ in range(STICK_INPUT_COOLDOWN):
        guide.update(IDLE)
    guide.update(PadState(left_stick_x=-1.0))
    assert guide.sprite is CommandSpriteType.GENERAL
    assert guide.stick_input_cooldown == STICK_INPUT_COOLDOWN - 1


def test_reopening_shows_first_page():
    guide = _opened_and_ready()
    guide.update(RIGHT)
    guide.update(START)
    guide.update(START)
    assert guide.is_open
    assert guide.sprite is CommandSpriteType.GENERAL