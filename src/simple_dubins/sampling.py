# simple_dubins/sampling.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List
import math
import numpy as np

from .types import (EPSILON, TWO_PI, Circle, Point2D, Pose2D, TurnSide,
                    direction_sign, wrap_to_two_pi)

def _sample_count(span: float, step: float) -> int:
    """
    Number of samples k = 0, 1, ... for which the remaining span after sample k
    is still larger than one step. The last sample therefore sits within two
    steps of the end and the final partial step is dropped.
    """
    if span <= step:
        return 0
    return max(0, math.ceil(span / step - 1.0))

@dataclass(frozen=True)
class ArcSegment:
    """
    Evenly spaced samples on the turning circle from the start bearing towards
    the stop bearing.

    Attributes:
        circle (Circle): Turning circle.
        start_angle (float): Bearing of the first sample from the center, radians.
        stop_angle (float): Bearing of the tangent point, already unwrapped so the
            turn direction approaches it monotonically.
        side (TurnSide): Turn direction.
        resolution (float): Arc length between samples in meters.
    """
    circle: Circle
    start_angle: float
    stop_angle: float
    side: TurnSide
    resolution: float

    @classmethod
    def between(cls, circle: Circle, start, stop, side: TurnSide, resolution: float) -> "ArcSegment":
        """
        Builds the arc from ``start`` to ``stop`` (both on the circle) swept in
        the direction of ``side``.
        """
        cx, cy = circle.center.x, circle.center.y
        start_angle = wrap_to_two_pi(math.atan2(start.y - cy, start.x - cx))
        stop_angle  = wrap_to_two_pi(math.atan2(stop.y - cy, stop.x - cx))
        if side is TurnSide.LEFT and stop_angle < start_angle:
            stop_angle += TWO_PI
        elif side is TurnSide.RIGHT and stop_angle > start_angle:
            stop_angle -= TWO_PI
        return cls(circle, start_angle, stop_angle, side, resolution)

    @property
    def increment(self) -> float:
        """Signed angular step in radians."""
        return direction_sign(self.side) * self.resolution / self.circle.radius

    def angles(self) -> np.ndarray:
        return self.start_angle + self.increment * np.arange(len(self))

    def __len__(self) -> int:
        return _sample_count(abs(self.stop_angle - self.start_angle), abs(self.increment))

    def __iter__(self) -> Iterator[Point2D]:
        c, r = self.circle.center, self.circle.radius
        for i in self.angles():
            yield Point2D(c.x + math.cos(i) * r, c.y + math.sin(i) * r)

@dataclass(frozen=True)
class LineSegment:
    """
    Evenly spaced samples on the straight line from the tangent point towards
    the goal. Empty when the two coincide.
    """
    start: Point2D
    end: Point2D
    resolution: float

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> np.ndarray:
        """Unit vector from start to end, or zeros for a degenerate segment."""
        length = self.length
        if length < EPSILON:
            return np.zeros(2)
        return np.array([self.end.x - self.start.x, self.end.y - self.start.y]) / length

    def __len__(self) -> int:
        length = self.length
        if length < EPSILON:
            return 0
        return _sample_count(length, self.resolution)

    def __iter__(self) -> Iterator[Point2D]:
        u = self.direction()
        for d in self.resolution * np.arange(len(self)):
            yield Point2D(self.start.x + d * u[0], self.start.y + d * u[1])

def generate_path(pose: Pose2D, circle: Circle, tangent: Point2D, side: TurnSide,
                  goal, resolution: float) -> List[Point2D]:
    """
    Samples the arc from the start position to the tangent point, then the line
    from the tangent point to the goal, and appends the goal itself.

    Args:
        pose (Pose2D): Start pose.
        circle (Circle): Turning circle.
        tangent (Point2D): Tangent point returned by the tangent solver.
        side (TurnSide): Turn direction.
        goal: Anything with ``x`` and ``y`` attributes.
        resolution (float): Spacing between samples in meters.

    Returns:
        List[Point2D]: Ordered samples ending exactly at the goal.
    """
    end = Point2D(goal.x, goal.y)
    points: List[Point2D] = []
    points.extend(ArcSegment.between(circle, pose, tangent, side, resolution))
    points.extend(LineSegment(tangent, end, resolution))
    points.append(end)
    return points
