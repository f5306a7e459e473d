# simple_dubins/types.py
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple
import math, sys

# Guard for near-zero denominators in the tangent solver and the line sampler.
EPSILON = sys.float_info.epsilon

TWO_PI = 2.0 * math.pi

def wrap_to_two_pi(rad: float) -> float:
    """
    Wraps an angle produced by atan2 (range [-π, π]) into [0, 2π).

    Args:
        rad (float): Angle in radians.

    Returns:
        float: Angle in radians within [0, 2π).
    """
    if rad < 0: rad += TWO_PI
    return rad

@dataclass
class Pose2D:
    """
    Represents a 2D pose with position and orientation.

    Attributes:
        x (float): X-coordinate in meters.
        y (float): Y-coordinate in meters.
        yaw (float): Orientation in radians.
    """
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0  # radians

@dataclass(frozen=True)
class Point2D:
    """
    Represents a position in the local map frame.

    Attributes:
        x (float): X-coordinate in meters.
        y (float): Y-coordinate in meters.
    """
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

@dataclass(frozen=True)
class Circle:
    """
    Turning circle of the vehicle.

    Attributes:
        center (Point2D): Center of the circle.
        radius (float): Radius in meters.
    """
    center: Point2D
    radius: float

class TangentPair(NamedTuple):
    """Orientations in [0, π) of the two lines through the target tangent to a circle."""
    beta1: float
    beta2: float

class TurnSide(Enum):
    LEFT = "left"    # counter-clockwise
    RIGHT = "right"  # clockwise

def direction_sign(side: TurnSide) -> int:
    """
    Maps a turn side to the sign of the angular increment.

    Args:
        side (TurnSide): Side the vehicle turns towards.

    Returns:
        int: +1 for LEFT (counter-clockwise), -1 for RIGHT (clockwise).
    """
    if side is TurnSide.LEFT:
        return 1
    if side is TurnSide.RIGHT:
        return -1
    raise ValueError(f"unknown turn side: {side!r}")
