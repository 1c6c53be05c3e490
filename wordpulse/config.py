"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from wordpulse.types import CorrectionMode


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for the typing core.

    Attributes:
        floor_size: Size below which the shrink step never takes a shape.
        shrink_rate: Units per second removed from every shape each frame.
        growth_rate: Units per second added to every shape in a completion frame.
        initial_size: Size given to shapes spawned by the game setup.
        mode: Keystroke matching model for WordProgress.
    """

    floor_size: float = 10.0
    shrink_rate: float = 10.0
    growth_rate: float = 1600.0
    initial_size: float = 10.0
    mode: CorrectionMode = CorrectionMode.STRICT

    def __post_init__(self) -> None:
        if self.floor_size <= 0:
            raise ValueError("floor_size must be positive")
        if self.shrink_rate <= 0:
            raise ValueError("shrink_rate must be positive")
        if self.growth_rate <= 0:
            raise ValueError("growth_rate must be positive")
        if self.initial_size < self.floor_size:
            raise ValueError(
                f"initial_size {self.initial_size} is below floor_size {self.floor_size}"
            )
