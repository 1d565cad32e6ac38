"""Frame-by-frame logic for a one-on-one fighting game, with no rendering or audio."""

__version__ = "0.1.0"
__all__ = [
    "attack",
    "timing",
    "camera",
    "inputlog",
    "guide",
    "character",
    "bullet",
    "transition",
    "match",
    "hud",
    "scenes",
]