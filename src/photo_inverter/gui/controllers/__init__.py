"""Qt controllers bridging widgets and the contrast pipeline."""

from .levels_controller import LevelsController

__all__ = ["LevelsController"]
