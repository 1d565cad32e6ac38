"""Screen fades between scenes and between rounds, and the scene base class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from monofighter.attack import lerp
from monofighter.inputlog import PadState
from monofighter.timing import FRAME_TIME

TRANSITION_START_ALPHA = 1.0
TRANSITION_END_ALPHA = 0.0

ROUND_TRANSITION_TIME = 150
HALF_ROUND_TRANSITION_TIME = ROUND_TRANSITION_TIME // 2
ROUND_TRANSITION_OFFSET = 10
ROUND_LERP_SPEED = 0.1

TEXTURE_SIZE = (1280.0, 720.0)


class Transition:
    """A full-screen black overlay whose alpha fades in and out."""

    def __init__(self) -> None:
        self.alpha = TRANSITION_START_ALPHA
        self.scene_transition_timer = 0.0
        self.round_transition_timer = ROUND_TRANSITION_TIME
        self.is_round_transitioning = False

    @property
    def color(self) -> tuple[float, float, float, float]:
        """RGBA colour of the overlay."""
        return (0.0, 0.0, 0.0, self.alpha)

    def start_scene_transition(self, active: bool) -> bool:
        """Fade to black while active; True once fully black and the scene should change."""
        if not active:
            return False
        self.scene_transition_timer += FRAME_TIME
        self.alpha = lerp(self.alpha, TRANSITION_START_ALPHA, self.scene_transition_timer)
        return self.alpha >= TRANSITION_START_ALPHA

    def end_scene_transition(self, finished: bool) -> bool:
        """Fade the overlay out until clear; returns whether the fade has finished."""
        if finished:
            return True
        self.scene_transition_timer += FRAME_TIME
        self.alpha = lerp(self.alpha, TRANSITION_END_ALPHA, self.scene_transition_timer)
        if self.alpha <= TRANSITION_END_ALPHA:
            self.scene_transition_timer = 0.0
            return True
        return False

    def round_transition(self, active: bool) -> bool:
        """Run one frame of the fade between rounds; returns whether it is still running.

        Halfway through, ``is_round_transitioning`` is raised so the round can
        be reset while the screen is dark.
        """
        if not active:
            return False
        self.round_transition_timer -= 1
        timer = self.round_transition_timer
        still_active = True

        if timer > HALF_ROUND_TRANSITION_TIME:
            self.alpha = lerp(self.alpha, TRANSITION_START_ALPHA, ROUND_LERP_SPEED)
        elif HALF_ROUND_TRANSITION_TIME - ROUND_TRANSITION_OFFSET >= timer > 0:
            self.alpha = lerp(self.alpha, TRANSITION_END_ALPHA, ROUND_LERP_SPEED)
        elif timer <= 0:
            still_active = False
            self.round_transition_timer = ROUND_TRANSITION_TIME

        if self.round_transition_timer == HALF_ROUND_TRANSITION_TIME:
            self.is_round_transitioning = True
        return still_active


class Scene(ABC):
    """A game scene; ``update`` returns the name of the next scene once it is due."""

    def __init__(self) -> None:
        self.transition: Transition | None = None
        self.is_transition_start = False
        self.is_transition_end = False

    def initialize(self) -> None:
        """Prepare the scene with a fresh fade-in."""
        self.transition = Transition()
        self.is_transition_start = False
        self.is_transition_end = False

    @abstractmethod
    def update(self, pad: PadState) -> str | None:
        """Advance one frame; return the next scene's name to switch to it."""

    def finalize(self) -> None:
        """Release what the scene holds."""
        self.transition = None

    def _step_transitions(self, next_scene: str) -> str | None:
        if self.transition is None:
            raise RuntimeError("scene used before initialize()")
        self.is_transition_end = self.transition.end_scene_transition(self.is_transition_end)
        if self.transition.start_scene_transition(self.is_transition_start):
            return next_scene
        return None