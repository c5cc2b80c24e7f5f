"""
Attractor implementations and registry
"""

from .base import Attractor, AttractorConfig, GumowskiParams, InvalidParameterError, Point
from .gumowski_mira import GumowskiMira, GumowskiMiraSimple, DEFAULT_PARAMS, DEFAULT_INIT_POINT, g

# available attractors registry
AVAILABLE_ATTRACTORS = {
    'simple': GumowskiMiraSimple,
    'standard': GumowskiMira
}


def get_attractor(variant: str) -> Attractor:
    """instantiate a registered variant by name"""
    try:
        return AVAILABLE_ATTRACTORS[variant]()
    except KeyError:
        raise ValueError(
            f"unknown variant '{variant}', must be one of {sorted(AVAILABLE_ATTRACTORS)}"
        ) from None


def next_point(point: Point, params: GumowskiParams, variant: str = 'standard') -> Point:
    """advance one step of the given variant"""
    return get_attractor(variant).next_point(point, params)


__all__ = [
    'Attractor', 'AttractorConfig', 'GumowskiParams', 'InvalidParameterError', 'Point',
    'GumowskiMira', 'GumowskiMiraSimple', 'DEFAULT_PARAMS', 'DEFAULT_INIT_POINT', 'g',
    'AVAILABLE_ATTRACTORS', 'get_attractor', 'next_point'
]
