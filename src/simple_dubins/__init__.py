from .types import Pose2D, Point2D, Circle, TangentPair, TurnSide, direction_sign, wrap_to_two_pi, EPSILON
from .geometry import turning_direction, turning_center, tangent_line, tangent_point
from .sampling import ArcSegment, LineSegment, generate_path
from .path import PlannedPath
from .planner import PlannerConfig, SimpleDubinsPlanner, PlanningStatus, PathResult, HeadingResult
__all__ = [
    "Pose2D","Point2D","Circle","TangentPair","TurnSide","direction_sign","wrap_to_two_pi","EPSILON",
    "turning_direction","turning_center","tangent_line","tangent_point",
    "ArcSegment","LineSegment","generate_path",
    "PlannedPath",
    "PlannerConfig","SimpleDubinsPlanner","PlanningStatus","PathResult","HeadingResult",
]
