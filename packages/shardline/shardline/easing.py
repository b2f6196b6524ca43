"""Easing functions for share interpolation.

Every curve maps [0, 1] onto [0, 1], is non-decreasing, and pins
``f(0) == 0`` and ``f(1) == 1``.
"""
from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1 - math.cos(math.pi * t))


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    return 1 - (-2 * t + 2) ** 5 / 2


DEFAULT_EASING = "ease_in_out_cubic"

EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_out_quint": ease_in_out_quint,
}
