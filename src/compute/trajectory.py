"""
Orbit generation: lazy point sequences and eager numpy trajectories
"""

import math
import numpy as np
from typing import Iterator, Optional

from attractors import get_attractor
from attractors.base import GumowskiParams, InvalidParameterError, Point
from compute.cpu_backend import CPUBackend


def validate_window(iterations: int, skip: int = 0) -> None:
    """check an iteration count and warm-up prefix"""
    for name, value in (('iterations', iterations), ('skip', skip)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")
    if skip > iterations:
        raise ValueError(f"skip ({skip}) cannot exceed iterations ({iterations})")


def validate_inputs(params: GumowskiParams, initial: Point) -> None:
    if not params.is_finite():
        raise InvalidParameterError(f"parameters must be finite: {params!r}")
    if not (math.isfinite(initial.x) and math.isfinite(initial.y)):
        raise InvalidParameterError(f"initial point must be finite: {initial!r}")


def generate_points(variant: str, params: GumowskiParams, initial: Point,
                    iterations: int, skip: int = 0) -> Iterator[Point]:
    """
    Lazily iterate the map from `initial`.

    The initial point itself is not yielded. The first `skip` iterates are
    computed and discarded, so `iterations - skip` points come out in
    recurrence order. Arguments are checked eagerly, before the first
    `next()`.
    """
    attractor = get_attractor(variant)
    initial = Point(*initial)
    validate_window(iterations, skip)
    validate_inputs(params, initial)
    return _iterate(attractor, params, initial, iterations, skip)


def _iterate(attractor, params, point, iterations, skip):
    x, y = point
    for step in range(iterations):
        x, y = attractor.evolve_point(x, y, params)
        if step >= skip:
            yield Point(x, y)


def generate_trajectory(variant: str, params: GumowskiParams, initial: Point,
                        iterations: int, skip: int = 0,
                        backend: Optional[CPUBackend] = None) -> np.ndarray:
    """Eager counterpart of generate_points returning an (n, 2) float64 array."""
    attractor = get_attractor(variant)
    initial = Point(*initial)
    validate_window(iterations, skip)
    validate_inputs(params, initial)
    if backend is None:
        backend = CPUBackend()
    return backend.trajectory(attractor, params, initial, int(iterations), int(skip))
