"""Tests for the ShareAnimator driver."""

import pytest

from shardline import (
    AnimatorConfig,
    PhaseComplete,
    ShareAnimator,
    SignalBus,
    SlotAppeared,
    SlotDisappeared,
)


def _run(animator: ShareAnimator, phases: int, dt: float = 0.1) -> list:
    frames = []
    now = 0.0
    animator.start(now)
    while animator.phases < phases:
        now += dt
        frames.append(animator.tick(now))
    return frames


def test_tick_before_start_raises():
    animator = ShareAnimator(seed=1)
    with pytest.raises(RuntimeError, match="not been started"):
        animator.tick(0.0)


def test_default_config():
    animator = ShareAnimator(seed=1)
    assert animator.config == AnimatorConfig()
    assert animator.config.phase_seconds == 2.0
    assert animator.config.max_share == 0.40


def test_seed_generated_when_omitted():
    assert isinstance(ShareAnimator().seed, int)


def test_same_seed_produces_identical_frames():
    frames_a = [f.shares for f in _run(ShareAnimator(seed=42), phases=10)]
    frames_b = [f.shares for f in _run(ShareAnimator(seed=42), phases=10)]
    assert frames_a == frames_b


def test_different_seeds_diverge():
    frames_a = [f.shares for f in _run(ShareAnimator(seed=1), phases=10)]
    frames_b = [f.shares for f in _run(ShareAnimator(seed=2), phases=10)]
    assert frames_a != frames_b


def test_phase_counter_advances_once_per_boundary():
    animator = ShareAnimator(seed=3)
    frames = _run(animator, phases=4)
    assert sum(1 for f in frames if f.boundary) == 4
    assert animator.phases == 4


def test_start_resets_phase_counter():
    animator = ShareAnimator(seed=3)
    _run(animator, phases=2)
    animator.start(100.0)
    assert animator.phases == 0
    assert animator.state.phase_start == 100.0


def test_frame_hooks_receive_every_frame():
    animator = ShareAnimator(seed=5)
    received = []
    animator.on_frame(lambda frame, layout: received.append((frame, layout)))
    frames = _run(animator, phases=2)
    assert [f for f, _ in received] == frames
    assert all(layout is animator.layout for _, layout in received)


def test_state_presence_invariant_holds_every_frame():
    animator = ShareAnimator(seed=11)
    animator.start(0.0)
    now = 0.0
    for _ in range(3000):
        now += 0.05
        frame = animator.tick(now)
        state = animator.state
        assert state.presence[state.active]
        assert sum(frame.shares) == pytest.approx(1.0, abs=1e-9)


class TestSignals:
    def test_phase_complete_published_on_boundary(self):
        bus = SignalBus()
        received = []
        bus.subscribe(PhaseComplete, received.append)
        animator = ShareAnimator(seed=9, bus=bus)
        _run(animator, phases=3)

        assert [s.phase for s in received] == [1, 2, 3]
        for signal in received:
            assert signal.presence[signal.active]

    def test_presence_changes_published(self):
        config = AnimatorConfig(appear_prob=1.0, disappear_prob=1.0)
        animator = ShareAnimator(config=config, seed=9)
        appeared = []
        disappeared = []
        animator.bus.subscribe(SlotAppeared, lambda s: appeared.append(s.index))
        animator.bus.subscribe(SlotDisappeared, lambda s: disappeared.append(s.index))

        _run(animator, phases=2)

        # Every optional slot flips on at the first boundary and off at the second.
        assert appeared == [1, 2, 3, 6, 8]
        assert disappeared == [1, 2, 3, 6, 8]

    def test_bus_flushed_each_tick(self):
        animator = ShareAnimator(seed=9)
        _run(animator, phases=1)
        assert animator.bus.pending() == 0


class TestFailingFrameHook:
    """A hook raising on a boundary frame must not desync bookkeeping."""

    def _animator(self):
        animator = ShareAnimator(
            config=AnimatorConfig(appear_prob=1.0, disappear_prob=0.0), seed=21
        )
        completed = []
        appeared = []
        animator.bus.subscribe(PhaseComplete, completed.append)
        animator.bus.subscribe(SlotAppeared, appeared.append)

        def render(frame, layout):
            if frame.boundary:
                raise RuntimeError("surface lost")

        animator.on_frame(render)
        animator.start(0.0)
        return animator, completed, appeared

    def test_phase_counted_and_signals_delivered(self):
        animator, completed, appeared = self._animator()

        with pytest.raises(RuntimeError, match="surface lost"):
            animator.tick(2.0)

        assert animator.phases == 1
        assert animator.state.phase_start == 2.0
        assert [s.phase for s in completed] == [1]
        assert [s.index for s in appeared] == [1, 2, 3, 6, 8]
        assert animator.bus.pending() == 0

    def test_next_phase_stays_in_step(self):
        animator, completed, _ = self._animator()
        with pytest.raises(RuntimeError):
            animator.tick(2.0)

        frame = animator.tick(3.0)
        assert frame.boundary is False
        with pytest.raises(RuntimeError):
            animator.tick(4.0)

        assert animator.phases == 2
        assert [s.phase for s in completed] == [1, 2]
