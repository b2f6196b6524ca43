"""Presence and target model: which slots exist and how wide they should be."""
from __future__ import annotations

from typing import Protocol, Sequence

from shardline.types import DEFAULT_LAYOUT, SlotLayout

Shares = tuple[float, ...]
Presence = tuple[bool, ...]


class RandomSource(Protocol):
    def random(self) -> float: ...


def target_distribution(
    active: int, presence: Sequence[bool], max_share: float
) -> Shares:
    """Share vector giving ``max_share`` to the active slot.

    Every other present slot splits the remainder equally and absent slots
    get 0. The result is normalized so it sums to 1.0 whenever any slot is
    present. If the active slot is absent it stays at 0 and the present
    slots all receive the "others" share.
    """
    count = sum(1 for p in presence if p)
    others_share = (1 - max_share) / max(1, count - 1)

    shares = [others_share if p else 0.0 for p in presence]
    if presence[active]:
        shares[active] = max_share

    total = sum(shares)
    if total > 0:
        shares = [s / total for s in shares]
    return tuple(shares)


def random_shares(presence: Sequence[bool], rng: RandomSource) -> Shares:
    """Random starting distribution over present slots, summing to 1."""
    weights = [0.1 + 0.9 * rng.random() if p else 0.0 for p in presence]
    total = sum(weights)
    if total == 0:
        return tuple(weights)
    return tuple(w / total for w in weights)


def toggle_presence(
    presence: Sequence[bool],
    rng: RandomSource,
    appear_prob: float,
    disappear_prob: float,
    layout: SlotLayout = DEFAULT_LAYOUT,
) -> Presence:
    """Independently flip each SECONDARY slot.

    An absent slot appears with ``appear_prob`` and a present one vanishes
    with ``disappear_prob``. One draw per SECONDARY slot, in index order.
    PRIMARY slots are never drawn for.
    """
    result = list(presence)
    for i in layout.secondary_indices:
        roll = rng.random()
        if result[i]:
            if roll < disappear_prob:
                result[i] = False
        elif roll < appear_prob:
            result[i] = True
    return tuple(result)


def next_active(current: int, presence: Sequence[bool]) -> int:
    """Next present index after ``current``, wrapping around.

    Falls back to ``current`` when no other slot is present.
    """
    n = len(presence)
    for k in range(1, n):
        j = (current + k) % n
        if presence[j]:
            return j
    return current


def resolve_active(current: int, presence: Sequence[bool]) -> int:
    """Keep ``current`` if still present, else move to the next present slot."""
    if presence[current]:
        return current
    return next_active(current, presence)
