import math
import unittest

import numpy

from attractors import GumowskiParams, Point
from compute import generate_trajectory
from viz.bounds import EmptyTrajectoryError, NonRenderableError, Viewport, calculate_bounds, create_scale
from viz.render import RenderOptions, render_points, visualize_gumowski_mira
from viz.surface import MatplotlibSurface


class RecordingSurface:
    """records canvas calls instead of drawing"""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def set_fill_style(self, color):
        self._record('set_fill_style', color)

    def fill_rect(self, x, y, width, height):
        self._record('fill_rect', x, y, width, height)

    def begin_path(self):
        self._record('begin_path')

    def move_to(self, x, y):
        self._record('move_to', x, y)

    def arc(self, x, y, radius, start, end):
        self._record('arc', x, y, radius, start, end)

    def fill(self):
        self._record('fill')

    def names(self):
        return [name for name, _ in self.calls]


class TestRenderPoints(unittest.TestCase):

    def setUp(self):
        self.viewport = Viewport(400, 300, 20)
        self.options = RenderOptions(color='red', radius=1.5, background='white')
        self.points = numpy.array([[0.0, 0.0], [1.0, 2.0], [0.5, 1.0]])

    def test_single_batched_fill(self):
        surface = RecordingSurface()
        visualize_gumowski_mira(surface, self.points, self.viewport, self.options)
        names = surface.names()

        assert names[:3] == ['set_fill_style', 'fill_rect', 'begin_path']
        assert names[-2:] == ['set_fill_style', 'fill']
        assert names.count('fill') == 1
        assert names.count('begin_path') == 1
        assert names.count('arc') == len(self.points)
        assert names.count('move_to') == len(self.points)

    def test_clears_then_colours(self):
        surface = RecordingSurface()
        visualize_gumowski_mira(surface, self.points, self.viewport, self.options)
        assert surface.calls[0] == ('set_fill_style', ('white',))
        assert surface.calls[1] == ('fill_rect', (0, 0, 400, 300))
        assert surface.calls[-2] == ('set_fill_style', ('red',))

    def test_discs_at_device_coordinates(self):
        surface = RecordingSurface()
        visualize_gumowski_mira(surface, self.points, self.viewport, self.options)
        arcs = [args for name, args in surface.calls if name == 'arc']

        assert arcs[0] == (20.0, 20.0, 1.5, 0, 2 * math.pi)
        assert arcs[1] == (380.0, 280.0, 1.5, 0, 2 * math.pi)
        assert arcs[2] == (200.0, 150.0, 1.5, 0, 2 * math.pi)

    def test_returns_bounds(self):
        bounds = visualize_gumowski_mira(RecordingSurface(), self.points, self.viewport)
        assert bounds.min == Point(0.0, 0.0)
        assert bounds.max == Point(1.0, 2.0)

    def test_empty_leaves_surface_untouched(self):
        surface = RecordingSurface()
        with self.assertRaises(EmptyTrajectoryError):
            visualize_gumowski_mira(surface, [], self.viewport)
        assert surface.calls == []

    def test_divergent_leaves_surface_untouched(self):
        surface = RecordingSurface()
        points = generate_trajectory('standard', GumowskiParams(1.0, 0.0, 1.0), Point(1, 1), 2000)
        with self.assertRaises(NonRenderableError):
            visualize_gumowski_mira(surface, points, self.viewport)
        assert surface.calls == []

    def test_invalid_radius(self):
        with self.assertRaises(ValueError):
            RenderOptions(radius=0)

    def test_yaml_colour_lists(self):
        options = RenderOptions(color=[0.0, 0.0, 1.0, 0.5], background=[1, 1, 1])
        assert options.color == (0.0, 0.0, 1.0, 0.5)
        assert options.background == (1, 1, 1)


class TestMatplotlibSurface(unittest.TestCase):

    def setUp(self):
        self.viewport = Viewport(200, 150, 10)

    def test_draws_points(self):
        surface = MatplotlibSurface(200, 150)
        points = generate_trajectory('standard', GumowskiParams(0.009, 0.05, -0.801), Point(1, 1), 3000)
        visualize_gumowski_mira(surface, points, self.viewport, RenderOptions(color='black', radius=0.75))

        assert surface.fill_calls == 1
        image = surface.to_array()
        assert image.shape == (150, 200, 4)

        dark = image[:, :, :3].sum(axis=2) < 3 * 200
        assert dark.any()
        # padding stays background
        assert not dark[:, :8].any()
        assert not dark[:8, :].any()

    def test_clear_replaces_previous_frame(self):
        surface = MatplotlibSurface(200, 150)
        scale = create_scale(calculate_bounds([Point(0, 0), Point(1, 1)]), self.viewport)
        render_points(surface, [Point(0, 0), Point(1, 1)], scale, self.viewport, RenderOptions())
        render_points(surface, [Point(0, 0), Point(1, 1)], scale, self.viewport, RenderOptions())
        # one background rect and one compound path from the latest frame
        assert len(surface.ax.patches) == 2
        assert surface.fill_calls == 2

    def test_y_axis_points_down(self):
        surface = MatplotlibSurface(100, 100)
        surface.set_fill_style('white')
        surface.fill_rect(0, 0, 100, 100)
        surface.begin_path()
        surface.move_to(50, 10)
        surface.arc(50, 10, 4, 0, 2 * math.pi)
        surface.set_fill_style('black')
        surface.fill()
        image = surface.to_array()

        top = image[:30, :, :3].sum(axis=2) < 300
        bottom = image[70:, :, :3].sum(axis=2) < 300
        assert top.any()
        assert not bottom.any()

    def test_fill_without_path_is_noop(self):
        surface = MatplotlibSurface(50, 50)
        surface.begin_path()
        surface.fill()
        assert surface.fill_calls == 0
