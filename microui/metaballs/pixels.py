"""A pixel-grid metaball background with a mouse-following ball."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

_MIN_DIST_SQ = 0.0001


@dataclass
class PixelMetaballsConfig:
    """Settings for the pixel metaball background."""

    grid_resolution: int = 6
    ball_count: int = 6
    threshold: float = 1.0
    color_cycle: float = 0.5
    speed: float = 1.0


@dataclass
class _Ball:
    x: float
    y: float
    vx: float
    vy: float
    radius: float


def fast_hsv(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert a hue in sixths (wrapped to 0..6), saturation and value to RGB bytes."""
    while h >= 6:
        h -= 6
    while h < 0:
        h += 6
    hi = int(h)
    f = h - hi
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    if hi == 0:
        rf, gf, bf = v, t, p
    elif hi == 1:
        rf, gf, bf = q, v, p
    elif hi == 2:
        rf, gf, bf = p, v, t
    elif hi == 3:
        rf, gf, bf = p, q, v
    elif hi == 4:
        rf, gf, bf = t, p, v
    else:
        rf, gf, bf = v, p, q
    return int(rf * 255), int(gf * 255), int(bf * 255)


class PixelMetaballs:
    """Animated metaballs computed on a reduced-resolution RGBA grid."""

    def __init__(self, config: Optional[PixelMetaballsConfig] = None) -> None:
        self.config = replace(config) if config is not None else PixelMetaballsConfig()
        self.time = 0.0
        self.mouse_x = 0.5
        self.mouse_y = 0.5
        self.mouse_radius = 0.1
        self.grid_w = 0
        self.grid_h = 0
        self.screen_w = 0
        self.screen_h = 0
        self._pixels: Optional[bytearray] = None
        self._balls: List[_Ball] = []

        count = self.config.ball_count
        for i in range(count):
            t = i / count
            speed = 0.15 + 0.1 * (i % 3)
            self._balls.append(
                _Ball(
                    x=0.5 + 0.3 * (2 * t - 1),
                    y=0.5 + 0.3 * (1 - 2 * ((t * 2) - int(t * 2))),
                    vx=speed * (0.7 - t),
                    vy=speed * (t - 0.3),
                    radius=0.08 + 0.04 * (i % 3),
                )
            )

    @property
    def ball_positions(self) -> List[Tuple[float, float]]:
        """Current normalised (x, y) centre of every ball."""
        return [(ball.x, ball.y) for ball in self._balls]

    @property
    def grid_size(self) -> Tuple[int, int]:
        """The (width, height) of the computation grid; (0, 0) before update."""
        return self.grid_w, self.grid_h

    def update(self, dt: float, screen_w: int, screen_h: int) -> None:
        """Advance by dt seconds and size the grid for the given screen."""
        dt *= self.config.speed
        self.time += dt

        for ball in self._balls:
            ball.x += ball.vx * dt
            ball.y += ball.vy * dt
            if ball.x < 0:
                ball.x = 0.0
                ball.vx = -ball.vx
            elif ball.x > 1.0:
                ball.x = 1.0
                ball.vx = -ball.vx
            if ball.y < 0:
                ball.y = 0.0
                ball.vy = -ball.vy
            elif ball.y > 1.0:
                ball.y = 1.0
                ball.vy = -ball.vy

        res = self.config.grid_resolution
        grid_w = max(screen_w // res, 1)
        grid_h = max(screen_h // res, 1)
        if self._pixels is None or (grid_w, grid_h) != (self.grid_w, self.grid_h):
            self.grid_w = grid_w
            self.grid_h = grid_h
            self._pixels = bytearray(grid_w * grid_h * 4)

        self.screen_w = screen_w
        self.screen_h = screen_h

    def set_mouse_position(self, mx: int, my: int) -> None:
        """Move the mouse ball to a screen position once the screen size is known."""
        if self.screen_w > 0 and self.screen_h > 0:
            self.mouse_x = mx / self.screen_w
            self.mouse_y = my / self.screen_h

    def render(self) -> Optional[bytes]:
        """Compute the RGBA grid, row by row; None before the first update."""
        if self._pixels is None:
            return None

        grid_w, grid_h = self.grid_w, self.grid_h
        threshold = self.config.threshold
        inv_threshold = 1.0 / threshold

        balls = []
        for ball in self._balls:
            r = ball.radius * grid_w
            balls.append((ball.x * grid_w, ball.y * grid_h, r * r))

        mouse_gx = self.mouse_x * grid_w
        mouse_gy = self.mouse_y * grid_h
        mouse_r = self.mouse_radius * grid_w
        mouse_r2 = mouse_r * mouse_r

        hue_base = self.time * self.config.color_cycle
        hue_base = (hue_base - int(hue_base)) * 6.0
        inv_grid_sum = 0.5 / (grid_w + grid_h)

        pixels = self._pixels
        idx = 0
        for y in range(grid_h):
            fy = y + 0.5
            for x in range(grid_w):
                fx = x + 0.5
                value = 0.0
                for gx, gy, r2 in balls:
                    dx = fx - gx
                    dy = fy - gy
                    value += r2 / max(dx * dx + dy * dy, _MIN_DIST_SQ)
                dx = fx - mouse_gx
                dy = fy - mouse_gy
                value += mouse_r2 / max(dx * dx + dy * dy, _MIN_DIST_SQ)

                hue = hue_base + (x + y) * inv_grid_sum * 3.0
                if value >= threshold:
                    intensity = min((value - threshold) * inv_threshold, 1.0)
                    r, g, b = fast_hsv(hue, 0.7, 0.4 + 0.5 * intensity)
                    pixels[idx : idx + 4] = bytes((r, g, b, 128 + int(intensity * 127)))
                else:
                    norm = value * inv_threshold
                    glow = norm * norm
                    if glow > 0.05:
                        r, g, b = fast_hsv(hue, 0.6 * glow, 0.3 * glow)
                        pixels[idx : idx + 4] = bytes((r, g, b, int(glow * 153)))
                    else:
                        pixels[idx : idx + 4] = b"\x00\x00\x00\x00"
                idx += 4
        return bytes(pixels)