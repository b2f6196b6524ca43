"""Triangle Row - morphing row of nine triangles.

One triangle at a time grows to the emphasized share while the optional
(red) triangles fade in and out between phases.

Controls:
  Esc     Quit
  Resize  Window follows; shares are width-independent
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from shardline import (
    EASINGS,
    AnimatorConfig,
    PhaseComplete,
    ShareAnimator,
    SlotAppeared,
    SlotDisappeared,
)
from ui.constants import FPS, SCREEN_H, SCREEN_W
from ui.renderer import make_frame_hook

logger = logging.getLogger("triangle_row")


def parse_args() -> argparse.Namespace:
    defaults = AnimatorConfig()
    p = argparse.ArgumentParser(description="Triangle Row - shardline visual demo")
    p.add_argument("--phase-seconds", type=float, default=defaults.phase_seconds,
                   help=f"Duration of each grow/shrink phase (default: {defaults.phase_seconds})")
    p.add_argument("--max-share", type=float, default=defaults.max_share,
                   help=f"Width share of the active triangle (default: {defaults.max_share})")
    p.add_argument("--appear-prob", type=float, default=defaults.appear_prob,
                   help=f"Per-phase chance an absent optional triangle appears (default: {defaults.appear_prob})")
    p.add_argument("--disappear-prob", type=float, default=defaults.disappear_prob,
                   help=f"Per-phase chance a present optional triangle vanishes (default: {defaults.disappear_prob})")
    p.add_argument("--easing", choices=sorted(EASINGS), default=defaults.easing,
                   help=f"Easing curve (default: {defaults.easing})")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log phase changes")
    return p.parse_args()


def _log_phase(signal: PhaseComplete) -> None:
    logger.debug("phase %d complete, active=%d", signal.phase, signal.active)


def _log_presence(signal: SlotAppeared | SlotDisappeared) -> None:
    verb = "appeared" if isinstance(signal, SlotAppeared) else "disappeared"
    logger.debug("slot %d %s", signal.index, verb)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = AnimatorConfig(
            phase_seconds=args.phase_seconds,
            max_share=args.max_share,
            appear_prob=args.appear_prob,
            disappear_prob=args.disappear_prob,
            easing=args.easing,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Triangle Row - shardline demo")
    clock = pygame.time.Clock()

    animator = ShareAnimator(config=config, seed=args.seed)
    logger.info("seed=%d", animator.seed)
    animator.bus.subscribe(PhaseComplete, _log_phase)
    animator.bus.subscribe(SlotAppeared, _log_presence)
    animator.bus.subscribe(SlotDisappeared, _log_presence)
    animator.on_frame(make_frame_hook(pygame.display.get_surface))

    animator.start(time.monotonic())
    running = True

    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                pygame.display.set_mode(event.size, pygame.RESIZABLE)

        # --- Tick + render ---
        animator.tick(time.monotonic())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
