"""What the fight and title screens show: timer digits, round banners and markers."""

from __future__ import annotations

from monofighter.attack import lerp

DECIMAL_BASE = 10
NUMBER_TEXTURE_DIR = "resource/number"

ROUND_TEXTURES = {
    1: "Resource/Images/Round1.png",
    2: "Resource/Images/Round2.png",
    3: "Resource/Images/Round3.png",
}
ROUND_GET_TEXTURE = "Resource/Images/RoundGet.png"
FIGHT_TEXTURE = "Resource/Images/FIGHT.png"
KO_TEXTURE = "Resource/Images/KO.png"
WIN_TEXTURE = "Resource/Images/WIN.png"
LOSE_TEXTURE = "Resource/Images/LOSE.png"
TIME_OVER_TEXTURE = "Resource/Images/TIMEOVER.png"
FRAME_UI_TEXTURE = "Resource/Images/FrameUI.png"
TITLE_TEXTURE = "Resource/Images/Title.png"
TITLE_UI_TEXTURE = "Resource/Images/TitleUI.png"

NUMBER_TENS_POSITION = (590.0, 0.0)
NUMBER_ONES_POSITION = (630.0, 0.0)

# Slots for round markers: player's second and first, enemy's second and first.
ROUND_GET_POSITIONS = ((400.0, 70.0), (480.0, 70.0), (800.0, 70.0), (720.0, 70.0))
FIRST_WIN_COUNT = 1
SECOND_WIN_COUNT = 2

TITLE_START_POSITION = (0.0, -25.0)
TITLE_MOVE_SPEED = 1.5
TITLE_SPEED_FLIP = -1.0
TITLE_MOVE_TIME = 30
TITLE_LERP_SPEED = 0.4


def split_digits(value: int) -> tuple[int, int]:
    """Tens and ones of a number, truncating toward zero like integer division."""
    magnitude = abs(value)
    tens, ones = divmod(magnitude, DECIMAL_BASE)
    if value < 0:
        return -tens, -ones
    return tens, ones


def number_texture_paths(seconds: int) -> tuple[str, str]:
    """Texture paths of the tens and ones digits of the round timer."""
    tens, ones = split_digits(seconds)
    return (f"{NUMBER_TEXTURE_DIR}/{tens}.png", f"{NUMBER_TEXTURE_DIR}/{ones}.png")


def round_get_markers(player_wins: int, enemy_wins: int) -> list[tuple[float, float]]:
    """Positions of the round-won markers to draw, in drawing order."""
    markers = []
    if player_wins >= FIRST_WIN_COUNT:
        markers.append(ROUND_GET_POSITIONS[1])
    if player_wins >= SECOND_WIN_COUNT:
        markers.append(ROUND_GET_POSITIONS[0])
    if enemy_wins >= FIRST_WIN_COUNT:
        markers.append(ROUND_GET_POSITIONS[3])
    if enemy_wins >= SECOND_WIN_COUNT:
        markers.append(ROUND_GET_POSITIONS[2])
    return markers


def round_banner(round_number: int) -> str | None:
    """Texture announcing the round, or None for a round with no banner."""
    return ROUND_TEXTURES.get(round_number)


def round_end_banner(is_time_over: bool, is_player_win: bool) -> str:
    """Texture shown when a round ends: time over, or a knock-out either way."""
    if is_time_over:
        return TIME_OVER_TEXTURE
    return KO_TEXTURE


class TitleAnimation:
    """Bobs the title logo up and down, reversing every few frames."""

    def __init__(self) -> None:
        self.position = TITLE_START_POSITION
        self.move_speed = TITLE_MOVE_SPEED
        self.move_timer = TITLE_MOVE_TIME

    def update(self) -> tuple[float, float]:
        """Move the logo one frame and return its new position."""
        self.move_timer -= 1
        x, y = self.position
        y = lerp(y, y + self.move_speed, TITLE_LERP_SPEED)
        self.position = (x, y)
        if self.move_timer < 0:
            self.move_speed *= TITLE_SPEED_FLIP
            self.move_timer = TITLE_MOVE_TIME
        return self.position