"""Frame timing: the game clock with its time scale, and hit stop."""

from __future__ import annotations

FRAME_TIME = 1.0 / 60.0


class GameTimer:
    """Fixed-step clock whose delta time is scaled by a time scale."""

    def __init__(self) -> None:
        self.delta_time = 0.0
        self.time_scale = 1.0

    def update(self) -> None:
        """Advance one frame: delta time is one frame times the time scale."""
        self.delta_time = FRAME_TIME * self.time_scale

    def set_time_scale(self, time_scale: float) -> None:
        self.time_scale = time_scale


class HitStop:
    """Freezes the game clock for a while after a hit lands."""

    def __init__(self, timer: GameTimer) -> None:
        self.timer = timer
        self.time = 0.0
        self.active = False

    def start(self, time: float) -> None:
        """Stop the clock for the given number of seconds."""
        self.timer.set_time_scale(0.0)
        self.time = time
        self.active = True

    def update(self) -> None:
        """Count down one frame and restore the clock when time runs out."""
        if not self.active:
            return
        self.time -= FRAME_TIME
        if self.time <= 0:
            self.time = 0.0
            self.timer.set_time_scale(1.0)
            self.active = False