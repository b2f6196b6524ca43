"""Triangle row renderer."""
from __future__ import annotations

from typing import Callable, Sequence

import pygame

from shardline import Frame, SlotLayout
from shardline.geometry import visible_triangles

from ui.constants import BG_COLOR, SLOT_COLORS


def draw_row(surface: pygame.Surface, shares: Sequence[float], layout: SlotLayout) -> None:
    """Fill the background and draw one triangle per visible slot."""
    surface.fill(BG_COLOR)
    width, height = surface.get_size()
    for _i, slot, points in visible_triangles(shares, layout, width, height):
        pygame.draw.polygon(surface, SLOT_COLORS[slot.color_class], points)


def make_frame_hook(
    surface_fn: Callable[[], pygame.Surface],
) -> Callable[[Frame, SlotLayout], None]:
    """Frame hook that draws onto whatever surface ``surface_fn`` returns.

    The display surface is replaced on resize, so it is looked up per frame.
    """

    def hook(frame: Frame, layout: SlotLayout) -> None:
        draw_row(surface_fn(), frame.shares, layout)

    return hook
