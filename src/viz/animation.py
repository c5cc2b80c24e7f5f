"""
Animation of a skip window sliding along one orbit
"""

import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from typing import List, Optional

from attractors.base import GumowskiParams, Point
from compute.trajectory import generate_trajectory, validate_window
from viz.bounds import Viewport, calculate_bounds, create_scale
from viz.render import RenderOptions, render_points
from viz.surface import MatplotlibSurface

FPS = 10


def window_starts(iterations: int, window: int, frames: int) -> List[int]:
    """evenly spaced skip values so that every window fits inside the orbit"""
    validate_window(iterations, window)
    if window < 1:
        raise ValueError(f"window must hold at least one point, got {window}")
    if frames < 1:
        raise ValueError(f"frames must be at least 1, got {frames}")
    last = iterations - window
    if frames == 1:
        return [last]
    return [int(round(s)) for s in np.linspace(0, last, frames)]


def create_window_animation(
    variant: str,
    params: GumowskiParams,
    initial: Point,
    iterations: int,
    window: int,
    output_dir: str,
    frames: int = 20,
    viewport: Optional[Viewport] = None,
    options: Optional[RenderOptions] = None,
    fps: int = FPS
) -> str:
    """
    Render `frames` windows of `window` points each, from the start of the
    orbit to its end, and save them as a GIF.

    All frames share the bounds of the whole orbit so the shape can be
    compared from frame to frame.

    Returns:
        Path to the saved animation file
    """
    if viewport is None:
        viewport = Viewport(600, 600, 30)
    if options is None:
        options = RenderOptions()

    starts = window_starts(iterations, window, frames)
    orbit = generate_trajectory(variant, params, initial, iterations)
    scale = create_scale(calculate_bounds(orbit), viewport)

    print(f"rendering {len(starts)} windows of {window} points...")
    images = []
    for skip in starts:
        surface = MatplotlibSurface(int(viewport.width), int(viewport.height))
        render_points(surface, orbit[skip:skip + window], scale, viewport, options)
        images.append(surface.to_array())

    fig, ax = plt.subplots(figsize=(viewport.width / 100, viewport.height / 100), dpi=100)
    fig.subplots_adjust(0, 0, 1, 1)
    ax.set_axis_off()
    im = ax.imshow(images[0], interpolation='nearest')
    label = ax.text(0.02, 0.98, '', transform=ax.transAxes,
                    fontsize=10, color='gray', verticalalignment='top')

    def animate(frame):
        im.set_array(images[frame])
        skip = starts[frame]
        label.set_text(f'iterations {skip}-{skip + window}')
        return [im, label]

    anim = FuncAnimation(fig, animate, frames=len(images),
                         interval=1000 / fps, blit=True, repeat=True)

    filename = os.path.join(output_dir, f"window_{variant}.gif")
    anim.save(filename, writer=PillowWriter(fps=fps))
    plt.close(fig)
    return filename
