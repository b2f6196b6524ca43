"""ShareAnimator - owns the phase state and drives it from a tick source."""
from __future__ import annotations

import os
import random
from typing import Callable

from shardline.animator import Frame, PhaseState, initial_state, step
from shardline.bus import PhaseComplete, SignalBus, presence_changes
from shardline.config import AnimatorConfig
from shardline.types import DEFAULT_LAYOUT, SlotLayout

FrameHook = Callable[[Frame, SlotLayout], None]


class ShareAnimator:
    def __init__(
        self,
        config: AnimatorConfig | None = None,
        layout: SlotLayout = DEFAULT_LAYOUT,
        seed: int | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else AnimatorConfig()
        self._layout = layout
        self._bus = bus if bus is not None else SignalBus()
        self._frame_hooks: list[FrameHook] = []
        self._state: PhaseState | None = None
        self._phases = 0

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def config(self) -> AnimatorConfig:
        return self._config

    @property
    def layout(self) -> SlotLayout:
        return self._layout

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def phases(self) -> int:
        """Number of completed phases since ``start``."""
        return self._phases

    @property
    def state(self) -> PhaseState:
        if self._state is None:
            raise RuntimeError("animator has not been started")
        return self._state

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def start(self, now: float) -> PhaseState:
        self._state = initial_state(now, self._config, self._rng, self._layout)
        self._phases = 0
        return self._state

    def tick(self, now: float) -> Frame:
        """Advance to ``now``, run frame hooks, then deliver queued signals.

        Boundary bookkeeping happens before any hook runs, so a failing hook
        cannot leave ``phases`` or the published signals behind the state.
        """
        old = self.state
        new, frame = step(old, now, self._config, self._rng, self._layout)
        self._state = new
        if frame.boundary:
            self._phases += 1
            for signal in presence_changes(
                old.presence, new.presence, self._layout.secondary_indices
            ):
                self._bus.publish(signal)
            self._bus.publish(PhaseComplete(self._phases, new.active, new.presence))

        try:
            for hook in self._frame_hooks:
                hook(frame, self._layout)
        finally:
            self._bus.flush()
        return frame
