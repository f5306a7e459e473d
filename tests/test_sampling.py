"""
Pytest unit tests for arc and line sampling
Run with: pytest tests/test_sampling.py -v
"""

import numpy as np
import pytest

from simple_dubins import ArcSegment, Circle, LineSegment, Point2D, Pose2D, TurnSide, generate_path


@pytest.fixture
def unit_circle():
    return Circle(Point2D(0.0, 0.0), 1.0)


def as_array(points):
    return np.array([(p.x, p.y) for p in points])


class TestArcSegment:
    def test_left_quarter_turn(self, unit_circle):
        arc = ArcSegment.between(unit_circle, Point2D(1, 0), Point2D(0, 1), TurnSide.LEFT, 0.1)
        assert arc.start_angle == pytest.approx(0.0)
        assert arc.stop_angle == pytest.approx(np.pi / 2)
        assert len(arc) == 15

        angles = arc.angles()
        assert np.all(np.diff(angles) > 0)
        remaining = arc.stop_angle - angles[-1]
        assert 0.1 < remaining <= 0.2

    def test_right_turn_unwraps_stop_angle(self, unit_circle):
        arc = ArcSegment.between(unit_circle, Point2D(1, 0), Point2D(0, 1), TurnSide.RIGHT, 0.1)
        assert arc.stop_angle == pytest.approx(-3 * np.pi / 2)
        assert arc.increment == pytest.approx(-0.1)
        assert np.all(np.diff(arc.angles()) < 0)

    def test_samples_lie_on_circle(self):
        circle = Circle(Point2D(2.0, -1.0), 1.5)
        arc = ArcSegment.between(circle, Point2D(3.5, -1.0), Point2D(2.0, 0.5), TurnSide.LEFT, 0.05)
        xy = as_array(arc)
        assert len(xy) == len(arc)
        np.testing.assert_allclose(np.hypot(xy[:, 0] - 2.0, xy[:, 1] + 1.0), 1.5)
        np.testing.assert_allclose(xy[0], [3.5, -1.0], atol=1e-12)

    def test_iteration_is_restartable(self, unit_circle):
        arc = ArcSegment.between(unit_circle, Point2D(1, 0), Point2D(-1, 0), TurnSide.LEFT, 0.1)
        assert list(arc) == list(arc)

    def test_no_samples_when_already_at_stop(self, unit_circle):
        arc = ArcSegment.between(unit_circle, Point2D(1, 0), Point2D(1, 0), TurnSide.LEFT, 0.1)
        assert len(arc) == 0
        assert list(arc) == []


class TestLineSegment:
    def test_spacing_and_final_gap(self):
        line = LineSegment(Point2D(0, 0), Point2D(3.078, 4.104), 0.05)
        xy = as_array(line)
        assert len(xy) == len(line)
        np.testing.assert_allclose(xy[0], [0, 0])
        np.testing.assert_allclose(np.hypot(*np.diff(xy, axis=0).T), 0.05)
        gap = np.hypot(3.078 - xy[-1, 0], 4.104 - xy[-1, 1])
        assert 0.05 < gap <= 0.1 + 1e-12

    def test_samples_follow_direction(self):
        line = LineSegment(Point2D(1, 1), Point2D(1, 3.03), 0.1)
        np.testing.assert_allclose(line.direction(), [0, 1])
        xy = as_array(line)
        np.testing.assert_allclose(xy[:, 0], 1.0)
        assert len(line) == 20

    def test_degenerate_segment_is_empty(self):
        p = Point2D(2.0, 2.0)
        line = LineSegment(p, p, 0.05)
        assert len(line) == 0
        assert list(line) == []
        np.testing.assert_array_equal(line.direction(), [0.0, 0.0])


class TestGeneratePath:
    def test_goal_appended_verbatim(self):
        circle = Circle(Point2D(0.0, 1.0), 1.0)
        goal = Point2D(0.1 + 0.2, 7.0)
        points = generate_path(Pose2D(0, 0, 0), circle, Point2D(1.0, 1.0), TurnSide.LEFT, goal, 0.05)
        assert points[-1] == goal
        assert points[-1].x == 0.1 + 0.2

    def test_arc_then_line(self):
        circle = Circle(Point2D(0.0, 1.0), 1.0)
        tangent = Point2D(1.0, 1.0)
        goal = Point2D(1.0, 4.0)
        points = generate_path(Pose2D(0, 0, 0), circle, tangent, TurnSide.LEFT, goal, 0.05)

        arc = ArcSegment.between(circle, Point2D(0, 0), tangent, TurnSide.LEFT, 0.05)
        line = LineSegment(tangent, goal, 0.05)
        assert len(points) == len(arc) + len(line) + 1
        assert points[len(arc)] == tangent
        np.testing.assert_allclose(as_array(points[len(arc):-1])[:, 0], 1.0)

    def test_goal_at_tangent_point(self):
        circle = Circle(Point2D(0.0, 1.0), 1.0)
        tangent = Point2D(1.0, 1.0)
        points = generate_path(Pose2D(0, 0, 0), circle, tangent, TurnSide.LEFT, tangent, 0.05)
        assert points[-1] == tangent
        assert np.isfinite(as_array(points)).all()
