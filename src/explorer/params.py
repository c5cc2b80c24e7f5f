"""
Parameter sources: preset table, uniform sampling and manual entry
"""

import math
import numpy as np
from typing import Any, Dict, List, Mapping, Optional

from attractors.base import GumowskiParams, InvalidParameterError
from attractors.gumowski_mira import DEFAULT_PARAMS

PARAM_NAMES = ('alpha', 'sigma', 'mu')

# sampling ranges for random exploration
PARAM_RANGES = {
    'alpha': (0.0, 1.0),
    'sigma': (0.0, 1.0),
    'mu': (-1.0, 1.0)
}

# parameter triples that produced good-looking attractors
KNOWN_PARAMS: List[GumowskiParams] = [
    GumowskiParams(0.8244391555, 0.1774071817, -0.5116492043),
    GumowskiParams(0.2773133875, 0.606448743, -0.867253365),
    GumowskiParams(0.4828030715, 0.0229754889, 0.547388765),
    GumowskiParams(0.0458912996, 0.4976365791, -0.3432564696),
    GumowskiParams(0.494631299, 0.1436555705, -0.4371344738),
    GumowskiParams(0.6278730919, 0.1061967449, 0.4625240818),
    GumowskiParams(0.2285134534, 0.8234970213, -0.1421593999),
    GumowskiParams(0.8059471909, 0.6146615464, 0.6989158747),
    GumowskiParams(0.014188807, 0.5116789189, -0.709636987),
    GumowskiParams(0.510675207, 0.6179087377, -0.5320875884),
    GumowskiParams(0.480478471, 0.6285355241, 0.1456679021),
    GumowskiParams(0.0667867267, 0.0156868822, -0.4986787562),
    GumowskiParams(0.0609237318, 0.4147179456, 0.3022867769),
    GumowskiParams(0.0377529142, 0.7564536638, -0.3309395722),
    GumowskiParams(0.0127874863, 0.2534660034, 0.0620849106),
    GumowskiParams(0.4901955992, 0.6464701979, 0.7065678246),
    GumowskiParams(0.9082379408, 0.8003195728, 0.6174691406),
    GumowskiParams(0.5578971949, 0.2023314395, -0.0058459365),
    GumowskiParams(0.1613274063, 0.9675522216, 0.0177000695),
    GumowskiParams(0.0312776923, 0.1274765691, 0.1076720964),
    GumowskiParams(0.9065307782, 0.2113498598, 0.3449995466),
    GumowskiParams(0.3745206832, 0.628306031, 0.0837386053),
    GumowskiParams(0.8213463426, 0.0293553252, 0.4230726506),
    GumowskiParams(0.4126543676, 0.5885845043, -0.2138337336),
    GumowskiParams(0.0350114025, 0.1551110644, 0.8588986349),
    GumowskiParams(0.0021805721, 0.0876592845, -0.8838931438),
    GumowskiParams(0.9300093068, 0.2984211352, 0.5246134282),
    GumowskiParams(0.0404903983, 0.5136701621, -0.2481335823)
]


def make_rng(seed: Optional[int] = None) -> np.random.RandomState:
    return np.random.RandomState(seed)


def random_params(rng: np.random.RandomState) -> GumowskiParams:
    """alpha, sigma ~ U(0,1), mu ~ U(-1,1)"""
    values = {name: float(rng.uniform(*PARAM_RANGES[name])) for name in PARAM_NAMES}
    return GumowskiParams(**values)


def get_preset(index: int) -> GumowskiParams:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise InvalidParameterError(f"preset index must be an integer, got {index!r}")
    if not 0 <= index < len(KNOWN_PARAMS):
        raise InvalidParameterError(
            f"preset index {index} out of range, must be 0-{len(KNOWN_PARAMS) - 1}"
        )
    return KNOWN_PARAMS[index]


def random_preset(rng: np.random.RandomState) -> GumowskiParams:
    return KNOWN_PARAMS[rng.randint(len(KNOWN_PARAMS))]


def parse_value(name: str, value: Any) -> float:
    """convert one manually entered field, rejecting blanks and non-finite input"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidParameterError(f"missing value for '{name}'")
    if isinstance(value, bool):
        raise InvalidParameterError(f"'{name}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"'{name}' must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidParameterError(f"'{name}' must be finite, got {value!r}")
    return number


def parse_manual_params(alpha: Any, sigma: Any, mu: Any) -> GumowskiParams:
    return GumowskiParams(
        alpha=parse_value('alpha', alpha),
        sigma=parse_value('sigma', sigma),
        mu=parse_value('mu', mu)
    )


def parse_params(values: Mapping[str, Any], defaults: Optional[GumowskiParams] = None) -> GumowskiParams:
    """
    Build parameters from a mapping such as decoded JSON or YAML.

    Fields absent from `values` are taken from `defaults` when given,
    otherwise they are reported as missing. Unknown keys are rejected.
    """
    if not isinstance(values, Mapping):
        raise InvalidParameterError(f"parameters must be a mapping of name to value, got {values!r}")
    unknown = set(values) - set(PARAM_NAMES)
    if unknown:
        raise InvalidParameterError(f"unknown parameters: {sorted(unknown)}")

    base: Dict[str, Any] = defaults.as_dict() if defaults is not None else {}
    base.update(values)
    return parse_manual_params(*(base.get(name) for name in PARAM_NAMES))


def params_from_cli(current: Optional[GumowskiParams] = None) -> GumowskiParams:
    """
    prompt for each parameter; an empty answer keeps the current value

    EOFError from input() is left to the caller, which treats it as a
    cancelled entry
    """
    if current is None:
        current = DEFAULT_PARAMS

    values = {}
    for name in PARAM_NAMES:
        low, high = PARAM_RANGES[name]
        while True:
            answer = input(f"{name} [{low:g}..{high:g}] ({getattr(current, name)}): ")
            if not answer.strip():
                values[name] = getattr(current, name)
                break
            try:
                values[name] = parse_value(name, answer)
                break
            except InvalidParameterError as e:
                print(e)
    return GumowskiParams(**values)
