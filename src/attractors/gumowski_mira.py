"""
Gumowski-Mira map implementations
"""

from .base import Attractor, AttractorConfig, GumowskiParams, Point
from typing import Tuple

DEFAULT_PARAMS = GumowskiParams(alpha=0.009, sigma=0.05, mu=-0.801)
DEFAULT_INIT_POINT = Point(1.0, 1.0)


def g(x: float, mu: float) -> float:
    """nonlinear term g(x) = mu*x + 2(1-mu)x^2 / (1+x^2)"""
    x2 = x * x
    return mu * x + (2.0 * (1.0 - mu) * x2) / (1.0 + x2)


class GumowskiMiraSimple(Attractor):
    """map without the alpha/sigma damping term"""

    def __init__(self):
        config = AttractorConfig(
            name="simple",
            params=DEFAULT_PARAMS,
            init_point=DEFAULT_INIT_POINT
        )
        super().__init__(config)

    def evolve_point(self, x: float, y: float, params: GumowskiParams) -> Tuple[float, float]:
        mu = params.mu
        x_new = y + g(x, mu)
        y_new = -x + g(x_new, mu)
        return x_new, y_new


class GumowskiMira(Attractor):
    """full recurrence with the alpha*y*(1 - sigma*y^2) term"""

    def __init__(self):
        config = AttractorConfig(
            name="standard",
            params=DEFAULT_PARAMS,
            init_point=DEFAULT_INIT_POINT
        )
        super().__init__(config)

    def evolve_point(self, x: float, y: float, params: GumowskiParams) -> Tuple[float, float]:
        alpha, sigma, mu = params.alpha, params.sigma, params.mu
        x_new = y + alpha * y * (1.0 - sigma * y * y) + g(x, mu)
        y_new = -x + g(x_new, mu)
        return x_new, y_new
