"""Convert share vectors into triangle coordinates for a renderer."""
from __future__ import annotations

from typing import Iterator, Sequence

from shardline.types import Direction, Slot, SlotLayout

Point = tuple[float, float]

# Shares at or below this are treated as zero width and not drawn.
VISIBLE_EPSILON = 1e-6


def boundaries(shares: Sequence[float], width: float) -> list[float]:
    """Cumulative x positions; ``len(shares) + 1`` entries starting at 0."""
    xs = [0.0]
    for s in shares:
        xs.append(xs[-1] + s * width)
    return xs


def triangle_points(
    left: float, right: float, height: float, direction: Direction
) -> tuple[Point, Point, Point]:
    """LEFT points its apex at the left edge, RIGHT at the right edge."""
    mid = height / 2
    if direction is Direction.LEFT:
        return ((left, mid), (right, 0.0), (right, height))
    return ((right, mid), (left, 0.0), (left, height))


def visible_triangles(
    shares: Sequence[float],
    layout: SlotLayout,
    width: float,
    height: float,
    epsilon: float = VISIBLE_EPSILON,
) -> Iterator[tuple[int, Slot, tuple[Point, Point, Point]]]:
    xs = boundaries(shares, width)
    for i, slot in enumerate(layout.slots):
        if shares[i] <= epsilon:
            continue
        yield i, slot, triangle_points(xs[i], xs[i + 1], height, slot.direction)
