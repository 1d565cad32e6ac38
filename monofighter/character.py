"""Fighter state shared by the player and the enemy: behaviours, attacks, timers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

from monofighter.attack import AABB, AttackEditor, Direction, Vector3, lerp

RIGHT_DIRECTION_ROTATION = 1.7
LEFT_DIRECTION_ROTATION = 4.6

LEFT_EDGE = -6.0
RIGHT_EDGE = 6.0
ATTACK_LEFT_EDGE = -5.5
ATTACK_RIGHT_EDGE = 5.5
LERP_SPEED = 0.1

MAX_DISTANCE = 4.3
SCALE_FACTOR = 100.0
MAX_MIGRATION_TIME = 200
IDLE_ANIMATION_INDEX = 4
TAKE_FINISHER_GAUGE_INCREASE_AMOUNT = 1.5

DEFAULT_COLLISION = AABB(Vector3(-0.3, 0.0, -0.3), Vector3(0.3, 1.0, 0.3))


class Behavior(Enum):
    ROOT = "root"
    ATTACK = "attack"
    JUMP = "jump"
    STAN = "stan"


class AttackKind(Enum):
    LIGHT_PUNCH = "light_punch"
    MIDDLE_PUNCH = "middle_punch"
    HIGH_PUNCH = "high_punch"
    TC_MIDDLE_PUNCH = "tc_middle_punch"
    TC_HIGH_PUNCH = "tc_high_punch"
    JUMP_ATTACK = "jump_attack"
    TACKLE = "tackle"
    UPPERCUT = "uppercut"
    SHOT = "shot"
    FINISHER = "finisher"
    FINISHER_FIRST_ATTACK = "finisher_first_attack"
    FINISHER_SECOND_ATTACK = "finisher_second_attack"
    BULLET = "bullet"
    AIR_BULLET = "air_bullet"


# Attacks a reset clears; a jump attack in progress is left as it is.
_RESET_ATTACKS = frozenset({
    AttackKind.LIGHT_PUNCH, AttackKind.MIDDLE_PUNCH, AttackKind.HIGH_PUNCH,
    AttackKind.TC_MIDDLE_PUNCH, AttackKind.TC_HIGH_PUNCH, AttackKind.TACKLE,
    AttackKind.UPPERCUT, AttackKind.SHOT, AttackKind.FINISHER,
    AttackKind.FINISHER_FIRST_ATTACK, AttackKind.FINISHER_SECOND_ATTACK,
})

# Hits a reset clears.
_RESET_HITS = frozenset({
    AttackKind.LIGHT_PUNCH, AttackKind.MIDDLE_PUNCH, AttackKind.HIGH_PUNCH,
    AttackKind.TC_MIDDLE_PUNCH, AttackKind.TC_HIGH_PUNCH, AttackKind.TACKLE,
    AttackKind.UPPERCUT, AttackKind.FINISHER_FIRST_ATTACK,
    AttackKind.FINISHER_SECOND_ATTACK, AttackKind.BULLET, AttackKind.AIR_BULLET,
})


@dataclass
class CharacterState:
    """Behaviour, facing and the hits a fighter is currently taking."""

    behavior: Behavior = Behavior.ROOT
    behavior_request: Behavior | None = None
    direction: Direction = Direction.RIGHT
    is_hit_character: bool = False
    is_down: bool = False
    is_guard: bool = False
    is_ground: bool = False
    is_hit_stop: bool = False
    hits: set[AttackKind] = field(default_factory=set)


@dataclass
class BaseData:
    """Hit points and the two gauges."""

    MAX_HP: ClassVar[int] = 100
    MAX_GUARD_GAUGE: ClassVar[float] = 50.0
    MAX_FINISHER_GAUGE: ClassVar[float] = 50.0

    hp: int = 0
    guard_gauge: float = 0.0
    finisher_gauge: float = 0.0


@dataclass
class AttackData:
    """Frame data of the current attack and which attacks are in progress."""

    attack_animation_frame: int = 0
    attack_start_time: int = 0
    attack_end_time: int = 0
    recovery_time: int = 0
    cancel_start_time: int = 0
    cancel_end_time: int = 0
    damage: int = 0
    hit_recovery_time: int = 0
    guard_gauge_increase_amount: float = 0.0
    finisher_gauge_increase_amount: float = 0.0
    hit_stop: float = 0.0
    is_attack: bool = False
    is_recovery: bool = False
    is_damaged: bool = False
    is_guarded: bool = False
    is_finisher_gauge_increased: bool = False
    is_hit_stop: bool = False
    active: set[AttackKind] = field(default_factory=set)


@dataclass
class TimerData:
    """Frame counters for down, guard, effect, stun, combo and finisher."""

    MAX_DOWN_ANIMATION: ClassVar[int] = 60
    MAX_GUARD_ANIMATION: ClassVar[int] = 60
    MAX_EFFECT: ClassVar[int] = 60
    MAX_STAN: ClassVar[int] = 60
    MAX_COMBO: ClassVar[int] = 60
    MAX_FINISHER: ClassVar[int] = 120

    down_animation: int = MAX_DOWN_ANIMATION
    guard_animation: int = MAX_GUARD_ANIMATION
    effect: int = MAX_EFFECT
    stan: int = MAX_STAN
    combo: int = MAX_COMBO
    finisher: int = MAX_FINISHER


def advance_animation_time(current: float, frame_rate: float, delta_time: float,
                           duration: float, loop: bool) -> float:
    """Step an animation clock, wrapping when looping and stopping at the end otherwise."""
    time = current + frame_rate * delta_time
    if loop:
        return math.fmod(time, duration)
    return min(time, duration)


class Character:
    """State common to every fighter."""

    def __init__(self) -> None:
        self.state = CharacterState()
        self.base = BaseData()
        self.attack = AttackData()
        self.timers = TimerData()
        self.position = Vector3()
        self.velocity = Vector3()
        self.front_speed = 0.0
        self.back_speed = 0.0
        self.is_shake = False
        self.is_hsv_filter = False
        self.animation_index = IDLE_ANIMATION_INDEX
        self.animation_time = 0.0
        self.combo_count = 0
        self.is_reset = False
        self.is_ko = False
        self.is_debug = False
        self.attack_type = ""
        self.first_attack = ""
        self.collision = DEFAULT_COLLISION

    def request_behavior(self, behavior: Behavior) -> None:
        """Ask for a behaviour change on the next update."""
        self.state.behavior_request = behavior

    def apply_behavior_request(self) -> Behavior | None:
        """Switch to the requested behaviour and return it, or None if none was asked."""
        request = self.state.behavior_request
        if request is None:
            return None
        self.state.behavior = request
        self.state.behavior_request = None
        return request

    def reset(self) -> None:
        """Return the fighter to its state at the start of a round."""
        self.request_behavior(Behavior.ROOT)
        self.attack.attack_animation_frame = 0
        self.animation_time = 0.0

        self.timers.down_animation = TimerData.MAX_DOWN_ANIMATION
        self.timers.guard_animation = TimerData.MAX_GUARD_ANIMATION
        self.timers.stan = TimerData.MAX_STAN
        self.timers.combo = TimerData.MAX_COMBO
        self.timers.finisher = TimerData.MAX_FINISHER

        self.combo_count = 0
        self.base.guard_gauge = 0.0
        self.state.is_guard = False

        self.attack.is_attack = False
        self.attack.active -= _RESET_ATTACKS
        self.attack.is_damaged = False
        self.attack.is_guarded = False
        self.attack.is_finisher_gauge_increased = False

        self.state.is_hit_character = False
        self.state.hits -= _RESET_HITS
        self.state.is_down = False

        self.collision = DEFAULT_COLLISION
        self.is_reset = False

    def start_attack(self, kind: AttackKind) -> None:
        """Begin an attack of the given kind."""
        self.request_behavior(Behavior.ATTACK)
        self.animation_time = 0.0
        self.attack.active.add(kind)

    def end_attack(self, kind: AttackKind) -> None:
        """Finish an attack and go back to the root behaviour."""
        self.request_behavior(Behavior.ROOT)
        self.attack.is_attack = False
        self.attack.is_recovery = False
        self.attack.active.discard(kind)
        self.attack_type = ""
        self.animation_time = 0.0
        self.attack.attack_animation_frame = 0

    def end_down(self, hit_kind: AttackKind) -> None:
        """Get up after being knocked down by the given hit."""
        self.request_behavior(Behavior.ROOT)
        self.animation_index = IDLE_ANIMATION_INDEX
        self.timers.down_animation = TimerData.MAX_DOWN_ANIMATION
        self.timers.effect = TimerData.MAX_EFFECT
        self.animation_time = 0.0
        self.state.hits.discard(hit_kind)
        self.attack.is_damaged = False
        self.attack.is_finisher_gauge_increased = False
        self.state.is_down = False

    def evaluate_attack_timing(self) -> None:
        """Set the active and recovery flags from the current attack frame."""
        frame = self.attack.attack_animation_frame
        a = self.attack
        a.is_attack = a.attack_start_time <= frame <= a.attack_end_time
        a.is_recovery = a.attack_end_time <= frame <= a.recovery_time

    def clamp_to_stage(self) -> None:
        """Keep the fighter inside the stage and off the walls while idle."""
        x = min(max(self.position.x, LEFT_EDGE), RIGHT_EDGE)
        direction = self.state.direction
        if not self.attack.is_attack:
            if x >= ATTACK_RIGHT_EDGE and direction is Direction.RIGHT:
                x = lerp(x, ATTACK_RIGHT_EDGE, LERP_SPEED)
            if x <= ATTACK_LEFT_EDGE and direction is Direction.LEFT:
                x = lerp(x, ATTACK_LEFT_EDGE, LERP_SPEED)
        y = self.position.y
        if self.state.behavior_request is Behavior.JUMP and self.state.is_hit_character:
            y = 0.0
        self.position = replace(self.position, x=x, y=y)

    def apply_attack_parameters(self, editor: AttackEditor, name: str,
                                is_player: bool) -> bool:
        """Copy the named attack's tuning from the editor; False if it is unknown."""
        values = editor.attack_values(name, is_player, self.state.direction)
        if values is None:
            return False
        a = self.attack
        a.attack_start_time = values.attack_start_time
        a.attack_end_time = values.attack_end_time
        a.recovery_time = values.recovery_time
        a.cancel_start_time = values.cancel_start_time
        a.cancel_end_time = values.cancel_end_time
        a.damage = values.damage
        a.hit_recovery_time = values.hit_recovery_time
        a.guard_gauge_increase_amount = values.guard_gauge_increase_amount
        a.finisher_gauge_increase_amount = values.finisher_gauge_increase_amount
        a.hit_stop = values.hit_stop
        self.collision = values.collision
        return True