import unittest
from itertools import islice

import numpy

from attractors import GumowskiParams, InvalidParameterError, Point
from compute import CPUBackend, generate_points, generate_trajectory

STABLE_PARAMS = GumowskiParams(alpha=0.009, sigma=0.05, mu=-0.801)

# first five iterates of the standard map from (1, 1) with STABLE_PARAMS
REFERENCE_TRAJECTORY = [
    (2.0085500000000001, 0.27765590046152533),
    (1.5578010716554602, -0.70549219640237371),
    (0.59137418909529116, -1.0981866688708715),
    (-0.64785995330227109, 0.99244613976122176),
    (2.5847586047487852, 1.710517553855442),
]


class TestGeneratePoints(unittest.TestCase):

    def test_length(self):
        points = list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 100))
        assert len(points) == 100
        points = list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 100, skip=30))
        assert len(points) == 70

    def test_initial_point_not_yielded(self):
        first = next(generate_points('simple', STABLE_PARAMS, Point(1, 1), 5))
        assert first != Point(1, 1)

    def test_reference_trajectory(self):
        points = list(generate_points('standard', STABLE_PARAMS, Point(1.0, 1.0), 5))
        for (x, y), expected in zip(points, REFERENCE_TRAJECTORY):
            self.assertAlmostEqual(x, expected[0], places=12)
            self.assertAlmostEqual(y, expected[1], places=12)

    def test_prefix_consistency(self):
        short = list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 500))
        long = list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 800))
        assert long[:500] == short

    def test_window_consistency(self):
        k, t = 250, 100
        windowed = list(islice(generate_points('simple', STABLE_PARAMS, Point(0.5, 0.1), 1000, skip=k), t))
        full = list(islice(generate_points('simple', STABLE_PARAMS, Point(0.5, 0.1), 1000), k + t))
        assert windowed == full[k:]

    def test_skip_equal_to_iterations_is_empty(self):
        assert list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 10, skip=10)) == []
        assert list(generate_points('standard', STABLE_PARAMS, Point(1, 1), 0)) == []

    def test_invalid_window_raises_immediately(self):
        with self.assertRaises(ValueError):
            generate_points('standard', STABLE_PARAMS, Point(1, 1), 10, skip=11)
        with self.assertRaises(ValueError):
            generate_points('standard', STABLE_PARAMS, Point(1, 1), -1)
        with self.assertRaises(ValueError):
            generate_points('standard', STABLE_PARAMS, Point(1, 1), 10.5)

    def test_non_finite_inputs_rejected(self):
        with self.assertRaises(InvalidParameterError):
            generate_points('standard', GumowskiParams(float('nan'), 0.1, 0.2), Point(1, 1), 10)
        with self.assertRaises(InvalidParameterError):
            generate_points('standard', STABLE_PARAMS, Point(float('inf'), 1), 10)


class TestGenerateTrajectory(unittest.TestCase):

    def setUp(self):
        self.backend = CPUBackend()

    def test_shape_and_dtype(self):
        points = generate_trajectory('standard', STABLE_PARAMS, Point(1, 1), 1000, skip=200,
                                     backend=self.backend)
        assert points.shape == (800, 2)
        assert points.dtype == numpy.float64

    def test_empty_window(self):
        points = generate_trajectory('simple', STABLE_PARAMS, Point(1, 1), 50, skip=50,
                                     backend=self.backend)
        assert points.shape == (0, 2)

    def test_matches_lazy_generator(self):
        for variant in ('simple', 'standard'):
            lazy = numpy.array(list(generate_points(variant, STABLE_PARAMS, Point(1, 1), 50)))
            eager = generate_trajectory(variant, STABLE_PARAMS, Point(1, 1), 50, backend=self.backend)
            assert numpy.allclose(lazy, eager, rtol=1e-12, atol=1e-12)

    def test_reference_trajectory(self):
        points = generate_trajectory('standard', STABLE_PARAMS, Point(1.0, 1.0), 5, backend=self.backend)
        assert numpy.allclose(points, numpy.array(REFERENCE_TRAJECTORY), rtol=1e-12, atol=0)

    def test_prefix_and_window_consistency(self):
        full = generate_trajectory('standard', STABLE_PARAMS, Point(1, 1), 3000, backend=self.backend)
        short = generate_trajectory('standard', STABLE_PARAMS, Point(1, 1), 2000, backend=self.backend)
        window = generate_trajectory('standard', STABLE_PARAMS, Point(1, 1), 3000, skip=1200,
                                     backend=self.backend)
        assert numpy.array_equal(full[:2000], short)
        assert numpy.array_equal(full[1200:], window)

    def test_stable_preset_end_to_end(self):
        points = generate_trajectory('standard', STABLE_PARAMS, Point(1.0, 1.0), 20000,
                                     backend=self.backend)
        assert points.shape == (20000, 2)
        assert numpy.all(numpy.isfinite(points))
        # the attractor stays inside a box of a few tens of units
        assert numpy.abs(points).max() < 50

    def test_divergent_orbit_is_returned(self):
        points = generate_trajectory('standard', GumowskiParams(1.0, 0.0, 1.0), Point(1, 1), 2000,
                                     backend=self.backend)
        assert points.shape == (2000, 2)
        assert not numpy.all(numpy.isfinite(points))

    def test_invalid_window(self):
        with self.assertRaises(ValueError):
            generate_trajectory('standard', STABLE_PARAMS, Point(1, 1), 5, skip=6)

    def test_output_buffer_shape_checked(self):
        from attractors import get_attractor
        with self.assertRaises(ValueError):
            self.backend.trajectory(get_attractor('standard'), STABLE_PARAMS, Point(1, 1), 10,
                                    out=numpy.empty((5, 2)))
