"""
Numba CPU backend for Gumowski-Mira trajectory computation
"""

import numpy as np
from numba import njit
from typing import Optional

from attractors.base import Attractor, GumowskiParams, Point


@njit
def _g(x, mu):
    x2 = x * x
    return mu * x + (2.0 * (1.0 - mu) * x2) / (1.0 + x2)


class CPUKernels:
    """compiled single-orbit kernels, one per variant"""

    @staticmethod
    @njit
    def simple_kernel(out, x0, y0, iterations, skip, mu):
        x, y = x0, y0
        for step in range(iterations):
            x_new = y + _g(x, mu)
            y_new = -x + _g(x_new, mu)
            x, y = x_new, y_new
            if step >= skip:
                out[step - skip, 0] = x
                out[step - skip, 1] = y

    @staticmethod
    @njit
    def standard_kernel(out, x0, y0, iterations, skip, alpha, sigma, mu):
        x, y = x0, y0
        for step in range(iterations):
            x_new = y + alpha * y * (1.0 - sigma * y * y) + _g(x, mu)
            y_new = -x + _g(x_new, mu)
            x, y = x_new, y_new
            if step >= skip:
                out[step - skip, 0] = x
                out[step - skip, 1] = y


class CPUBackend:
    """serial orbit evaluation; the recurrence cannot be parallelised"""

    def __init__(self, verbose: bool = False):
        if verbose:
            print("numba CPU backend ready")

    def trajectory(self, attractor: Attractor, params: GumowskiParams,
                   initial: Point, iterations: int, skip: int = 0,
                   out: Optional[np.ndarray] = None) -> np.ndarray:
        """return the (iterations - skip, 2) window of the orbit"""
        count = iterations - skip
        if out is None:
            out = np.empty((count, 2), dtype=np.float64)
        elif out.shape != (count, 2):
            raise ValueError(f"output buffer shape {out.shape} != {(count, 2)}")

        if attractor.name == "simple":
            CPUKernels.simple_kernel(
                out, float(initial.x), float(initial.y),
                iterations, skip, float(params.mu)
            )
        elif attractor.name == "standard":
            CPUKernels.standard_kernel(
                out, float(initial.x), float(initial.y),
                iterations, skip,
                float(params.alpha), float(params.sigma), float(params.mu)
            )
        else:
            raise ValueError(f"No CPU kernel for: {attractor.name}")

        return out
