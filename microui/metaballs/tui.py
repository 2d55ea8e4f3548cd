"""Render a metaball field as half-block terminal cells."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List

from ..geometry import Color
from .field import Field

UPPER_HALF = "\u2580"
LOWER_HALF = "\u2584"
FULL_BLOCK = "\u2588"


class ColorMode(IntEnum):
    """Colour depth used when rendering."""

    COLOR_16 = 0
    COLOR_256 = 1
    TRUE_COLOR = 2


@dataclass(frozen=True)
class Cell:
    """One terminal cell: a character with foreground and background colours."""

    char: str
    fg: Color
    bg: Color


def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    """Convert hue (wrapped to 0..1), saturation and value to an RGB colour."""
    h = h - math.floor(h)
    hi = int(h * 6)
    f = h * 6 - hi
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    r, g, b = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
    }[hi % 6]
    return Color(int(r * 255), int(g * 255), int(b * 255), 255)


class TUIRenderer:
    """Maps a metaball field onto a grid of cells, two pixels per cell."""

    def __init__(self, field: Field, screen_w: int, screen_h: int) -> None:
        self.field = field
        self.screen_w = screen_w
        self.screen_h = screen_h * 2
        self.color_mode = ColorMode.TRUE_COLOR
        self.blob_color = Color(0, 255, 255)
        self.glow_color = Color(0, 170, 170)
        self.bg_color = Color(0, 0, 128)
        self.hue_offset = 0.0
        self.saturation = 0.8
        self.color_cycle = 0.5

    def set_colors(self, blob: Color, glow: Color, bg: Color) -> None:
        """Set the colours used in 16-colour mode."""
        self.blob_color = blob
        self.glow_color = glow
        self.bg_color = bg

    def set_hsv_params(
        self, hue_offset: float, saturation: float, color_cycle: float
    ) -> None:
        """Set the hue parameters used in 256 and true-colour modes."""
        self.hue_offset = hue_offset
        self.saturation = saturation
        self.color_cycle = color_cycle

    def set_screen_size(self, width: int, height: int) -> None:
        """Set the screen size in cells used to map cells to field coordinates."""
        self.screen_w = width
        self.screen_h = height * 2

    def _color_for_field(self, value: float, x: int, y: int, threshold: float) -> Color:
        if self.color_mode == ColorMode.COLOR_16:
            if value >= threshold:
                return self.blob_color
            if value >= threshold * 0.5:
                return self.glow_color
            return self.bg_color

        hue = (
            self.hue_offset
            + self.field.time * 0.3
            + (x + y) / (self.screen_w + self.screen_h) * self.color_cycle
        )
        if value >= threshold:
            intensity = min((value - threshold) / threshold, 1.0)
            return hsv_to_rgb(hue, self.saturation, 0.5 + 0.5 * intensity)
        if value >= threshold * 0.3:
            glow = (value - threshold * 0.3) / (threshold * 0.7)
            return hsv_to_rgb(hue, self.saturation * glow, 0.2 + 0.3 * glow)
        return hsv_to_rgb(0.7, 0.5, 0.1)

    def render_cell(self, screen_x: int, screen_y: int) -> Cell:
        """Render the cell at a screen position given in cells."""
        top_x = screen_x / self.screen_w
        top_y = screen_y * 2 / self.screen_h
        bot_y = (screen_y * 2 + 1) / self.screen_h

        top_value = self.field.sample(top_x, top_y)
        bot_value = self.field.sample(top_x, bot_y)
        threshold = self.field.threshold
        top_inside = top_value >= threshold
        bot_inside = bot_value >= threshold

        top_color = self._color_for_field(top_value, screen_x, screen_y * 2, threshold)
        bot_color = self._color_for_field(bot_value, screen_x, screen_y * 2 + 1, threshold)

        if top_inside and bot_inside:
            return Cell(FULL_BLOCK, top_color, top_color)
        if top_inside:
            return Cell(UPPER_HALF, top_color, bot_color)
        if bot_inside:
            return Cell(LOWER_HALF, bot_color, top_color)

        top_glow = top_value >= threshold * 0.3
        bot_glow = bot_value >= threshold * 0.3
        if top_glow and bot_glow:
            return Cell(FULL_BLOCK, top_color, top_color)
        if top_glow:
            return Cell(UPPER_HALF, top_color, bot_color)
        if bot_glow:
            return Cell(LOWER_HALF, bot_color, top_color)
        bg = self._color_for_field(0.0, screen_x, screen_y, threshold)
        return Cell(" ", bg, bg)

    def render_window(
        self, window_x: int, window_y: int, width: int, height: int
    ) -> List[List[Cell]]:
        """Render a width x height block of cells, returned as rows."""
        return [
            [self.render_cell(window_x + x, window_y + y) for x in range(width)]
            for y in range(height)
        ]