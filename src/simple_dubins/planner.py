# simple_dubins/planner.py
from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional
import json, logging, math

from .geometry import (is_reachable, tangent_line, tangent_point,
                       turning_center, turning_direction)
from .path import PlannedPath
from .sampling import generate_path
from .types import Pose2D

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PlannerConfig:
    """
    Configuration parameters for the SimpleDubinsPlanner.

    Attributes:
        turning_radius (float): Minimum turning radius of the vehicle in meters.
        path_resolution (float): Maximum spacing between path samples in meters.
        frame_id (str): Frame stamped on produced paths.
    """
    turning_radius: float = 1.5
    path_resolution: float = 0.05
    frame_id: str = "map"

    def __post_init__(self):
        for name in ("turning_radius", "path_resolution"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "PlannerConfig":
        """
        Creates a PlannerConfig from a parameter mapping.

        Args:
            params (Mapping[str, Any]): Any subset of ``turning_radius``,
                ``path_resolution`` and ``frame_id``.

        Returns:
            PlannerConfig: Configuration with defaults for missing keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise ValueError(f"unknown planner parameters: {sorted(unknown)}")
        kwargs = dict(params)
        for name in ("turning_radius", "path_resolution"):
            if name in kwargs: kwargs[name] = float(kwargs[name])
        return cls(**kwargs)

    @classmethod
    def from_json(cls, filepath: str) -> "PlannerConfig":
        """
        Creates a PlannerConfig from a JSON file holding a single object.

        Args:
            filepath (str): Path to the JSON file.

        Returns:
            PlannerConfig: Parsed configuration.
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

class PlanningStatus(Enum):
    """Outcome of a planning request."""
    SUCCEEDED = 0
    UNREACHABLE = 1

@dataclass
class PathResult:
    """Result of :meth:`SimpleDubinsPlanner.make_path`."""
    status: PlanningStatus
    path: Optional[PlannedPath] = None
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is PlanningStatus.SUCCEEDED

@dataclass
class HeadingResult:
    """Result of :meth:`SimpleDubinsPlanner.get_target_heading`."""
    status: PlanningStatus
    heading: Optional[float] = None  # radians
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is PlanningStatus.SUCCEEDED

UNREACHABLE_MESSAGE = "Target not reachable with simple Dubins path."

class SimpleDubinsPlanner:
    """
    Plans a single turning arc followed by a straight tangent line from a start
    pose to a goal point.

    The planner only reads its configuration, so one instance can serve
    concurrent callers.

    Attributes:
        cfg (PlannerConfig): Configuration parameters for planning.
    """
    def __init__(self, cfg: PlannerConfig = PlannerConfig()):
        """
        Initializes the planner.

        Args:
            cfg (PlannerConfig, optional): Configuration parameters. Defaults to PlannerConfig().
        """
        self.cfg = cfg

    @property
    def turning_radius(self) -> float:
        return self.cfg.turning_radius

    @property
    def path_resolution(self) -> float:
        return self.cfg.path_resolution

    def _solve(self, start: Pose2D, goal):
        """Direction, circle and tangent point, or None if the goal is inside the circle."""
        side = turning_direction(start, goal)
        circle = turning_center(start, goal, self.cfg.turning_radius)
        if not is_reachable(goal, circle):
            return None
        tangents = tangent_line(goal, circle)
        point = tangent_point(start, goal, circle, tangents, side)
        logger.debug("turn %s around (%.3f, %.3f), tangent point (%.3f, %.3f)",
                     side.value, circle.center.x, circle.center.y, point.x, point.y)
        return side, circle, point

    def make_path(self, start: Pose2D, goal) -> PathResult:
        """
        Computes the sampled arc-plus-line path from ``start`` to ``goal``.

        Args:
            start (Pose2D): Start pose of the vehicle.
            goal: Target position; anything with ``x`` and ``y`` attributes.

        Returns:
            PathResult: SUCCEEDED with the path, or UNREACHABLE with no path.
        """
        if self.cfg.turning_radius > math.hypot(start.x - goal.x, start.y - goal.y) / 2:
            logger.warning("The desired turning radius is larger than half the length "
                           "between the waypoints.")

        solution = self._solve(start, goal)
        if solution is None:
            logger.error(UNREACHABLE_MESSAGE)
            return PathResult(PlanningStatus.UNREACHABLE, error_message=UNREACHABLE_MESSAGE)

        side, circle, point = solution
        points = generate_path(start, circle, point, side, goal, self.cfg.path_resolution)
        return PathResult(PlanningStatus.SUCCEEDED,
                          path=PlannedPath(points=points, frame_id=self.cfg.frame_id))

    def get_target_heading(self, start: Pose2D, goal) -> HeadingResult:
        """
        Computes the heading of the straight segment, from the tangent point to the goal.

        Args:
            start (Pose2D): Start pose of the vehicle.
            goal: Target position; anything with ``x`` and ``y`` attributes.

        Returns:
            HeadingResult: SUCCEEDED with the heading in radians, or UNREACHABLE.
        """
        solution = self._solve(start, goal)
        if solution is None:
            return HeadingResult(PlanningStatus.UNREACHABLE, error_message=UNREACHABLE_MESSAGE)
        _, _, point = solution
        return HeadingResult(PlanningStatus.SUCCEEDED,
                             heading=math.atan2(goal.y - point.y, goal.x - point.x))
