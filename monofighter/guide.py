"""The controls guide: a paged overlay opened with the start button."""

from __future__ import annotations

from enum import Enum

from monofighter.inputlog import PadButton, PadState

STICK_DEAD_ZONE = 0.7
STICK_INPUT_COOLDOWN = 10


class CommandSpriteType(Enum):
    GENERAL = "Resource/Images/PlayGeneralGuide.png"
    COMBO_ATTACK = "Resource/Images/PlayDefaultAttackGuide.png"
    FINISHER_ATTACK = "Resource/Images/PlayFinisherAttackGuide.png"


_ORDER = list(CommandSpriteType)


class Guide:
    """Tracks whether the guide is open, which page shows, and page changes."""

    def __init__(self) -> None:
        self.is_open = False
        self.changed_sprite = False
        self.sprite = CommandSpriteType.GENERAL
        self.stick_input_cooldown = STICK_INPUT_COOLDOWN

    @property
    def current_texture(self) -> str | None:
        """Texture of the page on screen, or None while the guide is closed."""
        return self.sprite.value if self.is_open else None

    def update(self, pad: PadState) -> None:
        """Open or close on start and turn pages with the d-pad or stick."""
        if not pad.connected:
            return

        if pad.is_pressed(PadButton.START):
            self.changed_sprite = True
            self.is_open = not self.is_open
            self.sprite = CommandSpriteType.GENERAL

        if self.is_open:
            if self.stick_input_cooldown <= 0:
                self._change_page(pad)
            if self.stick_input_cooldown > 0:
                self.stick_input_cooldown -= 1

    def _change_page(self, pad: PadState) -> None:
        forward = pad.is_pressed(PadButton.DPAD_RIGHT) or pad.left_stick_x > STICK_DEAD_ZONE
        back = pad.is_pressed(PadButton.DPAD_LEFT) or pad.left_stick_x < -STICK_DEAD_ZONE
        if forward and self.sprite is not CommandSpriteType.FINISHER_ATTACK:
            self.changed_sprite = True
            self._apply(1)
        elif back and self.sprite is not CommandSpriteType.GENERAL:
            self.changed_sprite = True
            self._apply(-1)

    def _apply(self, change: int) -> None:
        index = _ORDER.index(self.sprite)
        self.sprite = _ORDER[(index + change) % len(_ORDER)]
        self.stick_input_cooldown = STICK_INPUT_COOLDOWN