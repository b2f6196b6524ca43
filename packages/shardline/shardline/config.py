"""Tunable animation parameters."""
from __future__ import annotations

import math
from dataclasses import dataclass

from shardline.easing import DEFAULT_EASING, EASINGS, Easing


@dataclass(frozen=True)
class AnimatorConfig:
    phase_seconds: float = 2.0
    max_share: float = 0.40
    appear_prob: float = 0.25
    disappear_prob: float = 0.18
    easing: str = DEFAULT_EASING

    def __post_init__(self) -> None:
        if not math.isfinite(self.phase_seconds) or self.phase_seconds <= 0:
            raise ValueError("phase_seconds must be positive and finite")
        if not 0.0 < self.max_share < 1.0:
            raise ValueError("max_share must be in (0, 1)")
        if not 0.0 <= self.appear_prob <= 1.0:
            raise ValueError("appear_prob must be in [0, 1]")
        if not 0.0 <= self.disappear_prob <= 1.0:
            raise ValueError("disappear_prob must be in [0, 1]")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing {self.easing!r}")

    @property
    def easing_fn(self) -> Easing:
        return EASINGS[self.easing]
