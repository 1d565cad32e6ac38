"""Attack parameters: the tuning data for every move and its JSON storage."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Mapping

DEFAULT_PLAYER_PATH = Path("Resource/AttackData/AttackPlayerData.json")
DEFAULT_ENEMY_PATH = Path("Resource/AttackData/AttackEnemyData.json")

NEW_ATTACK_PREFIX = "攻撃"
_TAB_NAME_OFFSET = 1

INT_MIN_VALUE = 0
MAX_ATTACK_TIME = 60
MAX_RECOVERY_TIME = 100
MAX_CANCEL_TIME = 60
MAX_DAMAGE = 100
MAX_HIT_RECOVERY_TIME = 300
FLOAT_MIN_VALUE = 0.0
MAX_GUARD_GAUGE = 50.0
MAX_FINISHER_GAUGE = 50.0
MAX_HIT_STOP = 1.0
MIN_COLLISION = -3.0
MAX_COLLISION = 3.0


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from start to end by t."""
    return start + (end - start) * t


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "Vector3":
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))

    def clamped(self, low: float, high: float) -> "Vector3":
        return Vector3(*(min(max(v, low), high) for v in (self.x, self.y, self.z)))


@dataclass(frozen=True)
class AABB:
    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


class Direction(Enum):
    RIGHT = "right"
    LEFT = "left"


# attribute name -> (JSON key, kind, low, high)
_FIELD_SPEC: dict[str, tuple[str, type, float, float]] = {
    "attack_start_time": ("attackStartTime", int, INT_MIN_VALUE, MAX_ATTACK_TIME),
    "attack_end_time": ("attackEndTime", int, INT_MIN_VALUE, MAX_ATTACK_TIME),
    "recovery_time": ("recoveryTime", int, INT_MIN_VALUE, MAX_RECOVERY_TIME),
    "cancel_start_time": ("cancelStartTime", int, INT_MIN_VALUE, MAX_CANCEL_TIME),
    "cancel_end_time": ("cancelEndTime", int, INT_MIN_VALUE, MAX_CANCEL_TIME),
    "damage": ("damage", int, INT_MIN_VALUE, MAX_DAMAGE),
    "hit_recovery_time": ("hitRecoveryTime", int, INT_MIN_VALUE, MAX_HIT_RECOVERY_TIME),
    "guard_gauge_increase_amount": (
        "guardGaugeIncreaseAmount", float, FLOAT_MIN_VALUE, MAX_GUARD_GAUGE),
    "finisher_gauge_increase_amount": (
        "finisherGaugeIncreaseAmount", float, FLOAT_MIN_VALUE, MAX_FINISHER_GAUGE),
    "hit_stop": ("hitStop", float, FLOAT_MIN_VALUE, MAX_HIT_STOP),
    "right_collision_min": ("rightCollisionMin", Vector3, MIN_COLLISION, MAX_COLLISION),
    "right_collision_max": ("rightCollisionMax", Vector3, MIN_COLLISION, MAX_COLLISION),
    "left_collision_min": ("leftCollisionMin", Vector3, MIN_COLLISION, MAX_COLLISION),
    "left_collision_max": ("leftCollisionMax", Vector3, MIN_COLLISION, MAX_COLLISION),
}


@dataclass
class AttackParameter:
    """Frame data, gauge gains and hit boxes of one attack."""

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
    right_collision_min: Vector3 = field(default_factory=Vector3)
    right_collision_max: Vector3 = field(default_factory=Vector3)
    left_collision_min: Vector3 = field(default_factory=Vector3)
    left_collision_max: Vector3 = field(default_factory=Vector3)

    def to_dict(self) -> dict:
        """The JSON object for this attack."""
        result = {}
        for f in fields(self):
            key, kind, _, _ = _FIELD_SPEC[f.name]
            value = getattr(self, f.name)
            result[key] = value.to_dict() if kind is Vector3 else value
        return result

    @classmethod
    def from_dict(cls, data: Mapping) -> "AttackParameter":
        """Build an attack from its JSON object; a missing key raises KeyError."""
        values = {}
        for name, (key, kind, _, _) in _FIELD_SPEC.items():
            raw = data[key]
            values[name] = Vector3.from_dict(raw) if kind is Vector3 else kind(raw)
        return cls(**values)


@dataclass(frozen=True)
class AttackValues:
    """Parameters of an attack as handed to a character facing one way."""

    attack_start_time: int
    attack_end_time: int
    recovery_time: int
    cancel_start_time: int
    cancel_end_time: int
    damage: int
    hit_recovery_time: int
    guard_gauge_increase_amount: float
    finisher_gauge_increase_amount: float
    hit_stop: float
    collision: AABB


def save_attack_file(path: str | Path, parameters: Mapping[str, AttackParameter]) -> None:
    """Write the attacks as an indented JSON object, creating the directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    root = {name: param.to_dict() for name, param in parameters.items()}
    with path.open("w", encoding="utf-8") as stream:
        json.dump(root, stream, indent=4, ensure_ascii=False)
        stream.write("\n")


def load_attack_file(path: str | Path) -> dict[str, AttackParameter]:
    """Read attacks from a JSON file written by save_attack_file."""
    with Path(path).open(encoding="utf-8") as stream:
        root = json.load(stream)
    return {name: AttackParameter.from_dict(data) for name, data in root.items()}


class AttackEditor:
    """Holds the player's and the enemy's attack tables and edits them."""

    def __init__(self, player_path: str | Path = DEFAULT_PLAYER_PATH,
                 enemy_path: str | Path = DEFAULT_ENEMY_PATH) -> None:
        self.player_path = Path(player_path)
        self.enemy_path = Path(enemy_path)
        self._player: dict[str, AttackParameter] = {}
        self._enemy: dict[str, AttackParameter] = {}

    def initialize(self) -> None:
        """Load both tables from their files."""
        self.load(True)
        self.load(False)

    def parameters(self, is_player: bool) -> dict[str, AttackParameter]:
        """The live table of the player or the enemy."""
        return self._player if is_player else self._enemy

    def _path(self, is_player: bool) -> Path:
        return self.player_path if is_player else self.enemy_path

    def add_attack(self, is_player: bool) -> str | None:
        """Add a default attack named after the table size; None if the name is taken."""
        table = self.parameters(is_player)
        name = f"{NEW_ATTACK_PREFIX}{len(table) + _TAB_NAME_OFFSET}"
        if name in table:
            return None
        table[name] = AttackParameter()
        return name

    def rename_attack(self, is_player: bool, old_name: str, new_name: str) -> bool:
        """Rename an attack unless the new name is the same or already used."""
        table = self.parameters(is_player)
        if old_name not in table:
            raise KeyError(old_name)
        if new_name == old_name or new_name in table:
            return False
        table[new_name] = table.pop(old_name)
        return True

    def set_value(self, is_player: bool, name: str, field: str, value) -> None:
        """Set one parameter, held to the editor's range for it."""
        table = self.parameters(is_player)
        if name not in table:
            raise KeyError(name)
        try:
            _, kind, low, high = _FIELD_SPEC[field]
        except KeyError:
            raise ValueError(f"unknown attack parameter: {field}") from None
        if kind is Vector3:
            if not isinstance(value, Vector3):
                value = Vector3(*value)
            clamped = value.clamped(low, high)
        else:
            clamped = kind(min(max(kind(value), low), high))
        table[name] = replace(table[name], **{field: clamped})

    def save(self, is_player: bool) -> Path:
        """Write one table to its file and return the path."""
        path = self._path(is_player)
        save_attack_file(path, self.parameters(is_player))
        return path

    def load(self, is_player: bool) -> Path:
        """Replace one table with the contents of its file and return the path."""
        path = self._path(is_player)
        loaded = load_attack_file(path)
        table = self.parameters(is_player)
        table.clear()
        table.update(loaded)
        return path

    def attack_values(self, name: str, is_player: bool,
                      direction: Direction) -> AttackValues | None:
        """The named attack's values with the hit box for the direction, or None."""
        param = self.parameters(is_player).get(name)
        if param is None:
            return None
        if direction is Direction.RIGHT:
            collision = AABB(param.right_collision_min, param.right_collision_max)
        else:
            collision = AABB(param.left_collision_min, param.left_collision_max)
        return AttackValues(
            attack_start_time=param.attack_start_time,
            attack_end_time=param.attack_end_time,
            recovery_time=param.recovery_time,
            cancel_start_time=param.cancel_start_time,
            cancel_end_time=param.cancel_end_time,
            damage=param.damage,
            hit_recovery_time=param.hit_recovery_time,
            guard_gauge_increase_amount=param.guard_gauge_increase_amount,
            finisher_gauge_increase_amount=param.finisher_gauge_increase_amount,
            hit_stop=param.hit_stop,
            collision=collision,
        )