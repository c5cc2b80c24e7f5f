"""
Base types for the Gumowski-Mira attractor variants
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Dict, NamedTuple, Tuple


class InvalidParameterError(ValueError):
    """raised when parameters or a starting point are not usable numbers"""


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class GumowskiParams:
    alpha: float
    sigma: float
    mu: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.alpha, self.sigma, self.mu))

    def __str__(self) -> str:
        return f"α={self.alpha:.10g} σ={self.sigma:.10g} μ={self.mu:.10g}"


@dataclass
class AttractorConfig:
    name: str
    params: GumowskiParams
    init_point: Point


class Attractor(ABC):
    def __init__(self, config: AttractorConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def params(self) -> GumowskiParams:
        return self.config.params

    @property
    def init_point(self) -> Point:
        return self.config.init_point

    @abstractmethod
    def evolve_point(self, x: float, y: float, params: GumowskiParams) -> Tuple[float, float]:
        """Evolve a single point (x,y) one step forward"""

    def next_point(self, point: Point, params: GumowskiParams) -> Point:
        return Point(*self.evolve_point(point.x, point.y, params))
