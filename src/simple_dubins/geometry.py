# simple_dubins/geometry.py
"""
Turning-circle geometry for a single arc followed by a straight tangent line.

Frame convention is North-West-Up: headings are measured counter-clockwise from
the x-axis, so a positive sweep is a left (counter-clockwise) turn.
"""
from __future__ import annotations
import math

from .types import (EPSILON, Circle, Point2D, Pose2D, TangentPair, TurnSide,
                    wrap_to_two_pi)

def turning_direction(pose: Pose2D, target) -> TurnSide:
    """
    Decides which way the vehicle banks by rotating the frame by the start
    heading and checking which side of the new x-axis the target falls on.

    Args:
        pose (Pose2D): Start pose.
        target: Anything with ``x`` and ``y`` attributes.

    Returns:
        TurnSide: LEFT when the target is strictly left of the heading line, RIGHT otherwise.
    """
    dx, dy = target.x - pose.x, target.y - pose.y
    if -dx * math.sin(pose.yaw) + dy * math.cos(pose.yaw) > 0:
        return TurnSide.LEFT
    return TurnSide.RIGHT

def turning_center(pose: Pose2D, target, radius: float) -> Circle:
    """
    Picks the turning circle closest to the target.

    The two candidate circles are tangent to the heading line at the start
    position, one on each side. The choice does not consult
    :func:`turning_direction`.

    Args:
        pose (Pose2D): Start pose.
        target: Anything with ``x`` and ``y`` attributes.
        radius (float): Turning radius in meters.

    Returns:
        Circle: The right-hand circle if it is strictly closer, else the left-hand one.
    """
    s, c = math.sin(pose.yaw), math.cos(pose.yaw)
    right = Point2D(pose.x + s * radius, pose.y - c * radius)
    left  = Point2D(pose.x - s * radius, pose.y + c * radius)

    d_right = (target.x - right.x) ** 2 + (target.y - right.y) ** 2
    d_left  = (target.x - left.x) ** 2 + (target.y - left.y) ** 2
    return Circle(right if d_right < d_left else left, radius)

def is_reachable(target, circle: Circle) -> bool:
    """A tangent line exists only when the target is not strictly inside the circle."""
    return circle.center.distance_to(target) >= circle.radius

def tangent_line(target, circle: Circle) -> TangentPair:
    """
    Finds the orientations of the lines through ``target`` tangent to ``circle``.

    Solves ``((cx - tx) sin b + (ty - cy) cos b)^2 = r^2`` for ``b`` with the
    tangent half-angle substitution. The root form dividing by ``b + r`` is
    swapped for the one dividing by ``b - r`` when the former is near zero.

    Args:
        target: Anything with ``x`` and ``y`` attributes; must be reachable.
        circle (Circle): Turning circle.

    Returns:
        TangentPair: Both orientations in [0, π).
    """
    r = circle.radius
    a = circle.center.x - target.x
    b = target.y - circle.center.y
    # a target exactly on the circle gives a double root
    root = math.sqrt(max(0.0, a * a + b * b - r * r))

    if abs(b + r) < EPSILON:
        beta1 = 2.0 * math.atan((a - root) / (b - r))
        beta2 = 2.0 * math.atan((a + root) / (b - r))
    else:
        beta1 = 2.0 * math.atan((a + root) / (b + r))
        beta2 = 2.0 * math.atan((a - root) / (b + r))

    if beta1 < 0: beta1 += math.pi
    if beta2 < 0: beta2 += math.pi
    return TangentPair(beta1, beta2)

def _touch_point(target, circle: Circle, beta: float) -> Point2D:
    # Circle-line intersection with the circle at the origin, for the line
    # through the target with direction (cos beta, sin beta).
    x2, y2 = target.x - circle.center.x, target.y - circle.center.y
    x1, y1 = x2 + math.cos(beta), y2 + math.sin(beta)
    dx, dy = x2 - x1, y2 - y1
    dr2 = dx * dx + dy * dy
    D = x1 * y2 - x2 * y1
    return Point2D(D * dy / dr2 + circle.center.x, -D * dx / dr2 + circle.center.y)

def sweep_angle(circle: Circle, start, point) -> float:
    """
    Counter-clockwise angle in [0, 2π) from the radius vector through ``start``
    to the radius vector through ``point``.
    """
    x1, y1 = start.x - circle.center.x, start.y - circle.center.y
    x2, y2 = point.x - circle.center.x, point.y - circle.center.y
    dot = x1 * x2 + y1 * y2
    det = x1 * y2 - y1 * x2
    return wrap_to_two_pi(math.atan2(det, dot))

def tangent_point(pose: Pose2D, target, circle: Circle,
                  tangents: TangentPair, side: TurnSide) -> Point2D:
    """
    Finds the first tangent point met when sweeping around the circle from the
    start position in the direction of the turn.

    Args:
        pose (Pose2D): Start pose; its position is assumed to lie on the circle.
        target: Anything with ``x`` and ``y`` attributes.
        circle (Circle): Turning circle.
        tangents (TangentPair): Output of :func:`tangent_line`.
        side (TurnSide): Commanded turn side.

    Returns:
        Point2D: The point where the arc hands over to the straight line.
    """
    p1 = _touch_point(target, circle, tangents.beta1)
    p2 = _touch_point(target, circle, tangents.beta2)
    angle1 = sweep_angle(circle, pose, p1)
    angle2 = sweep_angle(circle, pose, p2)

    if side is TurnSide.LEFT:
        return p1 if angle1 < angle2 else p2
    return p1 if angle1 > angle2 else p2
