"""
Point-cloud renderer over an immediate-mode drawing surface
"""

import math
from dataclasses import dataclass
from typing import Protocol, Tuple, Union

from viz.bounds import Bounds, PointsLike, Scale, Viewport, as_point_array, calculate_bounds, create_scale

Color = Union[str, Tuple[float, ...]]

TWO_PI = 2 * math.pi


class DrawingSurface(Protocol):
    """the subset of a 2D canvas context the renderer needs"""

    def set_fill_style(self, color: Color) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None: ...

    def fill(self) -> None: ...


@dataclass(frozen=True)
class RenderOptions:
    color: Color = (0.0, 0.0, 0.0, 0.8)
    radius: float = 0.75
    background: Color = 'white'

    def __post_init__(self):
        # yaml hands colours over as lists
        if isinstance(self.color, list):
            object.__setattr__(self, 'color', tuple(self.color))
        if isinstance(self.background, list):
            object.__setattr__(self, 'background', tuple(self.background))
        if not self.radius > 0:
            raise ValueError(f"radius must be positive, got {self.radius}")


def render_points(surface: DrawingSurface, points: PointsLike, scale: Scale,
                  viewport: Viewport, options: RenderOptions) -> None:
    """Clear the surface, then fill one disc per point with a single fill call."""
    device = scale.apply(points)

    surface.set_fill_style(options.background)
    surface.fill_rect(0, 0, viewport.width, viewport.height)

    surface.begin_path()
    for x, y in device.tolist():
        surface.move_to(x, y)
        surface.arc(x, y, options.radius, 0, TWO_PI)

    surface.set_fill_style(options.color)
    surface.fill()


def visualize_gumowski_mira(surface: DrawingSurface, points: PointsLike,
                            viewport: Viewport, options: RenderOptions = None) -> Bounds:
    """
    Bound, scale and draw a point set.

    Bounds and scale are computed before anything is drawn, so an empty or
    divergent point set raises without touching the surface and the previous
    frame stays visible.
    """
    if options is None:
        options = RenderOptions()

    arr = as_point_array(points)
    bounds = calculate_bounds(arr)
    scale = create_scale(bounds, viewport)
    render_points(surface, arr, scale, viewport, options)
    return bounds
