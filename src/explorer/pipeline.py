"""
One visualization request: generate -> bound -> scale -> draw
"""

import time
from dataclasses import dataclass
from typing import Optional

from attractors.base import GumowskiParams, Point
from compute.cpu_backend import CPUBackend
from compute.trajectory import generate_trajectory
from explorer.config import ExplorerConfig
from viz.bounds import Bounds
from viz.render import DrawingSurface, visualize_gumowski_mira


@dataclass
class RenderReport:
    variant: str
    params: GumowskiParams
    initial: Point
    iterations: int
    skip: int
    num_points: int
    bounds: Bounds
    compute_time: float

    def summary(self) -> str:
        b = self.bounds
        return (f"{self.num_points} points ({self.variant}, iterations {self.skip}-{self.iterations}) "
                f"x ∈ [{b.min.x:.4f}, {b.max.x:.4f}] y ∈ [{b.min.y:.4f}, {b.max.y:.4f}] "
                f"in {self.compute_time:.2f}s")


def render_request(surface: DrawingSurface, params: GumowskiParams, config: ExplorerConfig,
                   iterations: Optional[int] = None, skip: Optional[int] = None,
                   backend: Optional[CPUBackend] = None) -> RenderReport:
    """
    Run a full render of `params` onto `surface`.

    `iterations` and `skip` default to the config values. Invalid input
    raises ValueError (InvalidParameterError), an empty or divergent orbit
    raises NonRenderableError; in both cases the surface is left untouched.
    """
    iterations = config.iterations if iterations is None else iterations
    skip = config.skip if skip is None else skip

    start = time.time()
    points = generate_trajectory(config.variant, params, config.initial,
                                 iterations, skip, backend=backend)
    bounds = visualize_gumowski_mira(surface, points, config.viewport, config.render)

    return RenderReport(
        variant=config.variant,
        params=params,
        initial=config.initial,
        iterations=iterations,
        skip=skip,
        num_points=len(points),
        bounds=bounds,
        compute_time=time.time() - start
    )
