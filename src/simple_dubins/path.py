# simple_dubins/path.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import time
import numpy as np

from .types import Point2D

@dataclass
class PlannedPath:
    """
    Ordered path samples handed to a consumer for publishing or rendering.

    Attributes:
        points (List[Point2D]): Samples from the arc start to the goal (inclusive).
        frame_id (str): Frame the coordinates are expressed in.
        stamp (float): Creation time in seconds since the epoch.
    """
    points: List[Point2D] = field(default_factory=list)
    frame_id: str = "map"
    stamp: float = field(default_factory=lambda: time.time())

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def to_array(self) -> np.ndarray:
        """
        Stacks the samples into an array.

        Returns:
            np.ndarray: Array of shape (N, 2) holding x and y in meters.
        """
        if not self.points:
            return np.empty((0, 2))
        return np.array([(p.x, p.y) for p in self.points], dtype=float)

    def length(self) -> float:
        """Polyline length through all samples, in meters."""
        xy = self.to_array()
        if len(xy) < 2:
            return 0.0
        return float(np.sum(np.hypot(*np.diff(xy, axis=0).T)))

    def to_dict(self):
        """
        Converts the path to a plain dictionary.

        Returns:
            dict: ``frame_id``, ``stamp`` and ``points`` as ``[x, y]`` pairs.
        """
        return {
            "frame_id": self.frame_id,
            "stamp": self.stamp,
            "points": [[p.x, p.y] for p in self.points],
        }
