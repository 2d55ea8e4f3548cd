"""A metaball field simulation in normalised coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

_MIN_DIST_SQ = 0.0001


@dataclass
class MetaballConfig:
    """Settings for a metaball field."""

    ball_count: int = 5
    threshold: float = 1.0
    speed: float = 1.0


@dataclass
class _Ball:
    x: float
    y: float
    vx: float
    vy: float
    radius: float


class Field:
    """Bouncing metaballs whose summed influence forms blobs."""

    def __init__(self, config: Optional[MetaballConfig] = None) -> None:
        self.config = replace(config) if config is not None else MetaballConfig()
        self.time = 0.0
        self.width = 1.0
        self.height = 1.0
        self._balls: List[_Ball] = []

        count = self.config.ball_count
        for i in range(count):
            angle = i * 2.0 * math.pi / count
            speed = 0.12 + 0.08 * (i % 3)
            vel_angle = angle + math.pi / 4
            self._balls.append(
                _Ball(
                    x=0.5 + 0.3 * math.cos(angle),
                    y=0.5 + 0.3 * math.sin(angle),
                    vx=speed * math.cos(vel_angle),
                    vy=speed * math.sin(vel_angle),
                    radius=0.06 + 0.03 * (i % 3),
                )
            )

    @property
    def threshold(self) -> float:
        """The field value at and above which a point is inside a blob."""
        return self.config.threshold

    @threshold.setter
    def threshold(self, value: float) -> None:
        self.config.threshold = value

    @property
    def speed(self) -> float:
        """The multiplier applied to elapsed time."""
        return self.config.speed

    @speed.setter
    def speed(self, value: float) -> None:
        self.config.speed = value

    @property
    def ball_positions(self) -> List[Tuple[float, float]]:
        """Current (x, y) centre of every ball."""
        return [(ball.x, ball.y) for ball in self._balls]

    def update(self, dt: float) -> None:
        """Advance the animation by dt seconds, bouncing balls off the bounds."""
        dt *= self.config.speed
        self.time += dt
        for ball in self._balls:
            ball.x += ball.vx * dt
            ball.y += ball.vy * dt
            if ball.x < 0:
                ball.x = 0.0
                ball.vx = -ball.vx
            if ball.x > self.width:
                ball.x = self.width
                ball.vx = -ball.vx
            if ball.y < 0:
                ball.y = 0.0
                ball.vy = -ball.vy
            if ball.y > self.height:
                ball.y = self.height
                ball.vy = -ball.vy

    def set_bounds(self, width: float, height: float) -> None:
        """Set the area the balls bounce within."""
        self.width = width
        self.height = height

    def sample(self, x: float, y: float) -> float:
        """Return the summed field value r^2/d^2 at a normalised point."""
        total = 0.0
        for ball in self._balls:
            dx = x - ball.x
            dy = y - ball.y
            dist_sq = max(dx * dx + dy * dy, _MIN_DIST_SQ)
            total += ball.radius * ball.radius / dist_sq
        return total

    def is_inside(self, x: float, y: float) -> bool:
        """Return True when the point lies inside the blob surface."""
        return self.sample(x, y) >= self.config.threshold