"""
Matplotlib-backed drawing surface
"""

import math
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch, Rectangle
from matplotlib.path import Path
from matplotlib.transforms import Affine2D

DPI = 100


class MatplotlibSurface:
    """
    Canvas-style surface on an Agg figure.

    Coordinates are device pixels with the origin at the top-left and y
    pointing down. Sub-paths collected between begin_path() and fill() are
    merged into one compound path and drawn as a single patch.
    """

    def __init__(self, width: int, height: int, dpi: int = DPI):
        self.width = width
        self.height = height
        self.dpi = dpi

        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

        self.fill_style = 'black'
        self.fill_calls = 0
        self._subpaths = []
        self._cursor = None

    def set_fill_style(self, color) -> None:
        self.fill_style = color

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        if x <= 0 and y <= 0 and x + width >= self.width and y + height >= self.height:
            # full-surface fill wipes the previous frame
            for artist in list(self.ax.patches):
                artist.remove()
        self.ax.add_patch(Rectangle((x, y), width, height,
                                    facecolor=self.fill_style, edgecolor='none', linewidth=0))

    def begin_path(self) -> None:
        self._subpaths = []
        self._cursor = None

    def move_to(self, x: float, y: float) -> None:
        self._cursor = (x, y)

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        if end - start >= 2 * math.pi:
            unit = Path.unit_circle()
        else:
            unit = Path.arc(math.degrees(start), math.degrees(end))
        self._subpaths.append(unit.transformed(Affine2D().scale(radius).translate(x, y)))
        self._cursor = (x + radius * math.cos(end), y + radius * math.sin(end))

    def fill(self) -> None:
        if not self._subpaths:
            return
        compound = Path.make_compound_path(*self._subpaths)
        self.ax.add_patch(PathPatch(compound, facecolor=self.fill_style,
                                    edgecolor='none', linewidth=0))
        self.fill_calls += 1

    def to_array(self) -> np.ndarray:
        """render and return the (height, width, 4) RGBA buffer"""
        self.canvas.draw()
        return np.asarray(self.canvas.buffer_rgba()).copy()

    def save(self, filename: str) -> str:
        self.figure.savefig(filename, dpi=self.dpi)
        return filename
