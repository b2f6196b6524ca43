"""Animation signals and the per-frame bus that delivers them.

Signals are small frozen dataclasses; handlers subscribe by signal type and
receive the signal instance. Published signals queue until ``flush``, which
``ShareAnimator.tick`` calls once per frame.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar, Union

from shardline.model import Presence


@dataclass(frozen=True)
class PhaseComplete:
    phase: int
    active: int
    presence: Presence


@dataclass(frozen=True)
class SlotAppeared:
    index: int


@dataclass(frozen=True)
class SlotDisappeared:
    index: int


Signal = Union[PhaseComplete, SlotAppeared, SlotDisappeared]
S = TypeVar("S", PhaseComplete, SlotAppeared, SlotDisappeared)


class SignalBus:

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Signal], None]]] = {}
        self._queue: list[Signal] = []

    def subscribe(self, signal_type: type[S], handler: Callable[[S], None]) -> None:
        self._handlers.setdefault(signal_type, []).append(handler)

    def publish(self, signal: Signal) -> None:
        self._queue.append(signal)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Signals published by handlers wait for the next flush.
        queued, self._queue = self._queue, []
        for signal in queued:
            for handler in self._handlers.get(type(signal), ()):
                handler(signal)


def presence_changes(
    before: Presence, after: Presence, indices: tuple[int, ...]
) -> list[Signal]:
    """Appear/disappear signals for the given slots, in index order."""
    changes: list[Signal] = []
    for i in indices:
        if after[i] and not before[i]:
            changes.append(SlotAppeared(i))
        elif before[i] and not after[i]:
            changes.append(SlotDisappeared(i))
    return changes
