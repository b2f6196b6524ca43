"""shardline - Animated row of triangular segments with morphing width shares."""
from __future__ import annotations

from shardline.animator import (
    Frame,
    PhaseState,
    advance_phase,
    initial_state,
    interpolate,
    phase_fraction,
    step,
)
from shardline.bus import PhaseComplete, SignalBus, SlotAppeared, SlotDisappeared
from shardline.config import AnimatorConfig
from shardline.easing import EASINGS
from shardline.engine import ShareAnimator
from shardline.model import (
    next_active,
    random_shares,
    resolve_active,
    target_distribution,
    toggle_presence,
)
from shardline.types import DEFAULT_LAYOUT, ColorClass, Direction, Slot, SlotLayout

__all__ = [
    "AnimatorConfig",
    "ColorClass",
    "DEFAULT_LAYOUT",
    "Direction",
    "EASINGS",
    "Frame",
    "PhaseComplete",
    "PhaseState",
    "ShareAnimator",
    "SignalBus",
    "Slot",
    "SlotAppeared",
    "SlotDisappeared",
    "SlotLayout",
    "advance_phase",
    "initial_state",
    "interpolate",
    "next_active",
    "phase_fraction",
    "random_shares",
    "resolve_active",
    "step",
    "target_distribution",
    "toggle_presence",
]
