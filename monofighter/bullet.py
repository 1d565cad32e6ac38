"""Projectiles fired by the fighters."""

from __future__ import annotations

from monofighter.attack import Vector3

LIFE_TIME = 100


class Bullet:
    """A projectile that moves in a straight line and expires after its lifetime."""

    def __init__(self, position: Vector3, velocity: Vector3) -> None:
        self.position = position
        self.velocity = velocity
        self.death_timer = LIFE_TIME
        self.is_dead = False
        self.is_hit = False

    def update(self) -> None:
        """Move one frame and count down the lifetime."""
        p, v = self.position, self.velocity
        self.position = Vector3(p.x + v.x, p.y + v.y, p.z + v.z)
        self.death_timer -= 1
        if self.death_timer <= 0:
            self.is_dead = True