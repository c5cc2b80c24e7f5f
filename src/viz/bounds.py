"""
Bounds and data-to-device scaling for point clouds
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from attractors.base import Point


class NonRenderableError(ValueError):
    """raised when a point set cannot be mapped onto a viewport"""


class EmptyTrajectoryError(NonRenderableError):
    """raised when bounds are requested for an empty point set"""


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    padding: float = 50.0

    def __post_init__(self):
        if self.width - 2 * self.padding <= 0 or self.height - 2 * self.padding <= 0:
            raise ValueError(
                f"viewport {self.width}x{self.height} leaves no room inside padding {self.padding}"
            )

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.padding


@dataclass(frozen=True)
class Bounds:
    min: Point
    max: Point

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (*self.min, *self.max))

    @property
    def x_range(self) -> float:
        return self.max.x - self.min.x

    @property
    def y_range(self) -> float:
        return self.max.y - self.min.y

    def as_dict(self) -> dict:
        return {'x': (self.min.x, self.max.x), 'y': (self.min.y, self.max.y)}


PointsLike = Union[np.ndarray, Iterable[Point], Iterable[Tuple[float, float]]]


def as_point_array(points: PointsLike) -> np.ndarray:
    """coerce points into an (n, 2) float64 array"""
    if isinstance(points, np.ndarray):
        arr = points
    else:
        arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (n, 2) point array, got shape {arr.shape}")
    return arr


def calculate_bounds(points: PointsLike) -> Bounds:
    """
    Axis-aligned min/max over a point set.

    Empty input raises EmptyTrajectoryError. Non-finite coordinates are
    carried into the result (NaN wins over finite values) and are rejected
    later by create_scale.
    """
    arr = as_point_array(points)
    if len(arr) == 0:
        raise EmptyTrajectoryError("cannot compute bounds of an empty point set")

    mins = arr.min(axis=0)
    maxs = arr.max(axis=0)
    return Bounds(
        min=Point(float(mins[0]), float(mins[1])),
        max=Point(float(maxs[0]), float(maxs[1]))
    )


@dataclass(frozen=True)
class Scale:
    """
    Affine map from data space to device pixels.

    Each axis is normalised to [0, 1] over its extent before being stretched
    across the inner area, so both ends of the bounds land exactly on the
    padding edges.
    """
    origin: Point
    x_extent: float
    y_extent: float
    x_inner: float
    y_inner: float
    x_offset: float
    y_offset: float

    @property
    def x_factor(self) -> float:
        return self.x_inner / self.x_extent

    @property
    def y_factor(self) -> float:
        return self.y_inner / self.y_extent

    def x(self, value: float) -> float:
        return (value - self.origin.x) / self.x_extent * self.x_inner + self.x_offset

    def y(self, value: float) -> float:
        return (value - self.origin.y) / self.y_extent * self.y_inner + self.y_offset

    def __call__(self, point: Point) -> Point:
        return Point(self.x(point[0]), self.y(point[1]))

    def apply(self, points: PointsLike) -> np.ndarray:
        arr = as_point_array(points)
        out = np.empty_like(arr)
        out[:, 0] = (arr[:, 0] - self.origin.x) / self.x_extent * self.x_inner + self.x_offset
        out[:, 1] = (arr[:, 1] - self.origin.y) / self.y_extent * self.y_inner + self.y_offset
        return out


def _axis_extent(lo: float, hi: float, inner: float, padding: float) -> Tuple[float, float]:
    extent = hi - lo
    if not math.isfinite(extent):
        raise NonRenderableError(f"bounds span [{lo}, {hi}] overflows")
    if extent > 0:
        return extent, padding
    # zero range: unit range, data centred in the inner area
    return 1.0, padding + inner / 2


def create_scale(bounds: Bounds, viewport: Viewport) -> Scale:
    """
    Map `bounds` into `viewport` minus padding.

    bounds.min lands on (padding, padding) and bounds.max on
    (width - padding, height - padding). Non-finite bounds (a divergent
    orbit) raise NonRenderableError.
    """
    if not bounds.is_finite:
        raise NonRenderableError(f"orbit diverged, bounds are not finite: {bounds.as_dict()}")

    x_extent, x_offset = _axis_extent(bounds.min.x, bounds.max.x, viewport.inner_width, viewport.padding)
    y_extent, y_offset = _axis_extent(bounds.min.y, bounds.max.y, viewport.inner_height, viewport.padding)
    return Scale(
        origin=bounds.min,
        x_extent=x_extent,
        y_extent=y_extent,
        x_inner=viewport.inner_width,
        y_inner=viewport.inner_height,
        x_offset=x_offset,
        y_offset=y_offset
    )
