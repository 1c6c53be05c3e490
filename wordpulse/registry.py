"""ShapeRegistry - indexed storage for growable shapes."""

from __future__ import annotations

from typing import Iterator

from wordpulse.growth import Growable
from wordpulse.types import ShapeId, UnknownShapeError


class ShapeRegistry:
    def __init__(self) -> None:
        self._shapes: dict[ShapeId, Growable] = {}
        self._next_id: int = 0

    def spawn(self, growable: Growable) -> ShapeId:
        sid = self._next_id
        self._next_id += 1
        self._shapes[sid] = growable
        return sid

    def despawn(self, shape_id: ShapeId) -> None:
        self._shapes.pop(shape_id, None)

    def get(self, shape_id: ShapeId) -> Growable:
        try:
            return self._shapes[shape_id]
        except KeyError:
            raise UnknownShapeError(
                shape_id, f"Shape {shape_id} is not registered"
            ) from None

    def items(self) -> Iterator[tuple[ShapeId, Growable]]:
        # Insertion order is id order since ids are never reused.
        yield from list(self._shapes.items())

    def ids(self) -> frozenset[ShapeId]:
        return frozenset(self._shapes)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)
