"""The fight camera: follows both fighters and stages the finisher shot."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from monofighter.attack import Direction, Vector3, lerp

CAMERA_OFFSET_Y = 1.4
START_POSITION = Vector3(0.0, CAMERA_OFFSET_Y, -5.0)
CAMERA_SPEED = Vector3(1.5, 0.5, 0.03)

ZOOM_POINT = 2.8
Z_NEAR = -5.0
Z_FAR = -7.0

FINISHER_OFFSET_X = 4.0
LERP_SPEED = 0.2
FINISHER_ROTATION_Y = 0.7
END_CORRECTION = 0.1
SMALL_LERP_SPEED = 0.1


@dataclass
class Camera:
    """Position and Euler rotation of the view."""

    translation: Vector3 = field(default_factory=lambda: START_POSITION)
    rotation: Vector3 = field(default_factory=Vector3)


def _horizontal_distance(a: Vector3, b: Vector3) -> float:
    return math.hypot(a.x - b.x, a.z - b.z)


class CameraController:
    """Keeps the camera between two fighters and zooms with their distance."""

    def __init__(self) -> None:
        self.camera = Camera()
        self.center: tuple[float, float] = (0.0, 0.0)
        self.distance = 0.0
        self.previous_distance = 0.0

    def update(self, position1: Vector3, position2: Vector3) -> None:
        """Follow the midpoint of the fighters and pull back as they part."""
        center_x = (position1.x + position2.x) / 2
        center_y = (position1.y + position2.y + CAMERA_OFFSET_Y) / 2
        self.center = (center_x, center_y)

        t = self.camera.translation
        x = t.x + (center_x - t.x) * CAMERA_SPEED.x
        y = center_y
        z = t.z

        self.distance = _horizontal_distance(position1, position2)

        if self.distance >= ZOOM_POINT and self.distance > self.previous_distance:
            z = Z_FAR if z <= Z_FAR else z - CAMERA_SPEED.z

        if self.previous_distance > self.distance:
            z = Z_NEAR if z >= Z_NEAR else z + CAMERA_SPEED.z

        self.previous_distance = self.distance
        self.camera.translation = Vector3(x, y, z)

    def start_finisher_camera(self, direction: Direction, position_x: float) -> None:
        """Swing the camera beside the attacker while a finisher plays."""
        t = self.camera.translation
        r = self.camera.rotation
        if direction is Direction.RIGHT:
            target_x = position_x + FINISHER_OFFSET_X
            target_rot = -FINISHER_ROTATION_Y
        else:
            target_x = position_x - FINISHER_OFFSET_X
            target_rot = FINISHER_ROTATION_Y
        self.camera.translation = replace(t, x=lerp(t.x, target_x, LERP_SPEED))
        self.camera.rotation = replace(r, y=lerp(r.y, target_rot, LERP_SPEED))

    def end_finisher_camera(self, direction: Direction) -> bool:
        """Ease the camera back to the centre; True while still returning."""
        t = self.camera.translation
        r = self.camera.rotation
        center_x = self.center[0]
        if direction is Direction.RIGHT:
            x = lerp(t.x, center_x - END_CORRECTION, LERP_SPEED)
            rot = lerp(r.y, END_CORRECTION, SMALL_LERP_SPEED)
            done = x <= center_x and rot >= 0.0
        else:
            x = lerp(t.x, center_x + END_CORRECTION, LERP_SPEED)
            rot = lerp(r.y, -END_CORRECTION, SMALL_LERP_SPEED)
            done = x >= center_x and rot <= 0.0
        if done:
            x = center_x
            rot = 0.0
        self.camera.translation = replace(t, x=x)
        self.camera.rotation = replace(r, y=rot)
        return not done