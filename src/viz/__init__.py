"""
Bounds, scaling, rendering and animation
"""

from .bounds import (
    Bounds, Scale, Viewport, NonRenderableError, EmptyTrajectoryError,
    calculate_bounds, create_scale
)
from .render import DrawingSurface, RenderOptions, render_points, visualize_gumowski_mira
from .surface import MatplotlibSurface
from .animation import create_window_animation

__all__ = [
    'Bounds', 'Scale', 'Viewport', 'NonRenderableError', 'EmptyTrajectoryError',
    'calculate_bounds', 'create_scale',
    'DrawingSurface', 'RenderOptions', 'render_points', 'visualize_gumowski_mira',
    'MatplotlibSurface', 'create_window_animation'
]
