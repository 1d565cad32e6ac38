"""Gamepad state and the on-screen history of recent inputs."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable

STICK_DEAD_ZONE = 0.7
MAX_HISTORY_SIZE = 8
MAX_FRAME_COUNT = 99


class PadButton(Enum):
    A = "a"
    B = "b"
    X = "x"
    Y = "y"
    LB = "left_shoulder"
    RB = "right_shoulder"
    START = "start"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"


@dataclass(frozen=True)
class PadState:
    """One frame of a gamepad: whether it is there, the left stick and buttons.

    ``pressed`` holds buttons that went down this frame; ``held`` those that
    are down, pressed ones included.
    """

    connected: bool = True
    left_stick_x: float = 0.0
    left_stick_y: float = 0.0
    held: Iterable[PadButton] = field(default_factory=frozenset)
    pressed: Iterable[PadButton] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "held", frozenset(self.held))
        object.__setattr__(self, "pressed", frozenset(self.pressed))

    def is_held(self, button: PadButton) -> bool:
        return button in self.held or button in self.pressed

    def is_pressed(self, button: PadButton) -> bool:
        return button in self.pressed


class StickDirection(IntEnum):
    DOWN_LEFT = 0
    DOWN = 1
    DOWN_RIGHT = 2
    LEFT = 3
    RIGHT = 4
    UP_LEFT = 5
    UP = 6
    UP_RIGHT = 7
    NEUTRAL = 8


class Button(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    LB = 4


_BUTTON_ORDER = (
    (PadButton.A, Button.A),
    (PadButton.B, Button.B),
    (PadButton.X, Button.X),
    (PadButton.Y, Button.Y),
    (PadButton.LB, Button.LB),
)


def _stick_direction(pad: PadState) -> StickDirection:
    left = pad.left_stick_x < -STICK_DEAD_ZONE or pad.is_held(PadButton.DPAD_LEFT)
    right = pad.left_stick_x > STICK_DEAD_ZONE or pad.is_held(PadButton.DPAD_RIGHT)
    down = pad.left_stick_y < -STICK_DEAD_ZONE or pad.is_held(PadButton.DPAD_DOWN)
    up = pad.left_stick_y > STICK_DEAD_ZONE or pad.is_held(PadButton.DPAD_UP)

    if left:
        if down:
            return StickDirection.DOWN_LEFT
        if up:
            return StickDirection.UP_LEFT
        return StickDirection.LEFT
    if right:
        if down:
            return StickDirection.DOWN_RIGHT
        if up:
            return StickDirection.UP_RIGHT
        return StickDirection.RIGHT
    if up:
        return StickDirection.UP
    if down:
        return StickDirection.DOWN
    return StickDirection.NEUTRAL


def _pressed_button(pad: PadState) -> Button | None:
    return next((button for pad_button, button in _BUTTON_ORDER
                 if pad.is_pressed(pad_button)), None)


class InputLog:
    """Newest-first history of stick and button inputs with their frame counts."""

    def __init__(self) -> None:
        self._history: deque[list] = deque()

    def update(self, pad: PadState) -> None:
        """Record this frame's input and count frames on the newest entry."""
        current = (_stick_direction(pad), _pressed_button(pad))
        last = tuple(self._history[0][:2]) if self._history else (None, None)
        if current != last:
            self._history.appendleft([current[0], current[1], 0])

        newest = self._history[0]
        newest[2] = min(max(newest[2] + 1, 0), MAX_FRAME_COUNT)

        if len(self._history) > MAX_HISTORY_SIZE:
            self._history.pop()

    def entries(self) -> list[tuple[StickDirection, Button | None, int]]:
        """(stick, button or None, frames held), newest first."""
        return [tuple(entry) for entry in self._history]