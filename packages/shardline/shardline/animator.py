"""Phase animator - eased interpolation between share distributions.

``step(state, now, ...)`` is the per-frame entry point. It never mutates
its input: a completed phase yields a fresh ``PhaseState`` built by
``advance_phase``, which is the only place presence, the active slot and
the target distribution change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from shardline.config import AnimatorConfig
from shardline.easing import Easing
from shardline.model import (
    Presence,
    RandomSource,
    Shares,
    next_active,
    random_shares,
    resolve_active,
    target_distribution,
    toggle_presence,
)
from shardline.types import DEFAULT_LAYOUT, SlotLayout


@dataclass(frozen=True)
class PhaseState:
    previous: Shares
    target: Shares
    presence: Presence
    active: int
    phase_start: float


@dataclass(frozen=True)
class Frame:
    """Shares to draw for one frame.

    ``boundary`` is set on the frame that completed a phase.
    """

    shares: Shares
    fraction: float
    eased: float
    boundary: bool = False


def phase_fraction(phase_start: float, now: float, phase_seconds: float) -> float:
    return max(0.0, min(1.0, (now - phase_start) / phase_seconds))


def interpolate(previous: Sequence[float], target: Sequence[float], eased: float) -> Shares:
    if eased <= 0.0:
        return tuple(previous)
    if eased >= 1.0:
        return tuple(target)
    return tuple(p + (t - p) * eased for p, t in zip(previous, target))


def initial_state(
    now: float,
    config: AnimatorConfig,
    rng: RandomSource,
    layout: SlotLayout = DEFAULT_LAYOUT,
) -> PhaseState:
    presence = layout.initial_presence()
    active = resolve_active(0, presence)
    return PhaseState(
        previous=random_shares(presence, rng),
        target=target_distribution(active, presence, config.max_share),
        presence=presence,
        active=active,
        phase_start=now,
    )


def advance_phase(
    state: PhaseState,
    now: float,
    config: AnimatorConfig,
    rng: RandomSource,
    layout: SlotLayout = DEFAULT_LAYOUT,
) -> PhaseState:
    """Run the phase boundary transition.

    Order: commit the target as the new baseline, toggle SECONDARY presence,
    step the active slot forward, then repair it against the new presence
    before building the next target.
    """
    presence = toggle_presence(
        state.presence, rng, config.appear_prob, config.disappear_prob, layout
    )
    active = next_active(state.active, presence)
    # next_active only falls back to an absent index when nothing else is
    # present; repairing keeps presence[active] true before the target is built.
    active = resolve_active(active, presence)
    return PhaseState(
        previous=state.target,
        target=target_distribution(active, presence, config.max_share),
        presence=presence,
        active=active,
        phase_start=now,
    )


def step(
    state: PhaseState,
    now: float,
    config: AnimatorConfig,
    rng: RandomSource,
    layout: SlotLayout = DEFAULT_LAYOUT,
    easing: Easing | None = None,
) -> tuple[PhaseState, Frame]:
    """Evaluate one frame at wall-clock time ``now`` (seconds)."""
    if easing is None:
        easing = config.easing_fn

    u = phase_fraction(state.phase_start, now, config.phase_seconds)
    eased = easing(u)
    frame = Frame(
        shares=interpolate(state.previous, state.target, eased),
        fraction=u,
        eased=eased,
        boundary=u >= 1.0,
    )

    if frame.boundary:
        state = advance_phase(state, now, config, rng, layout)
    return state, frame
