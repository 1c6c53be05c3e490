"""Growable component and the two per-frame animation steps."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Growable:
    """Size of a bubble shape plus its paired position offset.

    ``offset`` moves by half of every size change, which keeps the shape
    centred on its anchor when it is drawn at ``anchor - offset``.
    """

    size: float
    offset: float = 0.0

    @classmethod
    def centred(cls, size: float) -> Growable:
        return cls(size=size, offset=size / 2)


def shrink(growable: Growable, dt: float, rate: float, floor: float) -> float:
    """Relax ``growable`` toward ``floor`` and return the size removed."""
    if growable.size <= floor:
        return 0.0
    amount = rate * dt
    if growable.size - amount < floor:
        amount = growable.size - floor
        growable.size = floor
    else:
        growable.size -= amount
    growable.offset -= amount / 2
    return amount


def grow(growable: Growable, dt: float, rate: float) -> float:
    """Apply one frame of growth pulse and return the size added."""
    amount = rate * dt
    growable.size += amount
    growable.offset += amount / 2
    return amount
