"""
Interactive exploration: parameter sources, session state, export
"""

from .params import (
    KNOWN_PARAMS, PARAM_NAMES, get_preset, make_rng, parse_manual_params,
    parse_params, random_params, random_preset
)
from .session import ExplorerSession, SavedResult, RATINGS
from .export import results_to_csv, export_results
from .config import ExplorerConfig
from .pipeline import RenderReport, render_request

__all__ = [
    'KNOWN_PARAMS', 'PARAM_NAMES', 'get_preset', 'make_rng', 'parse_manual_params',
    'parse_params', 'random_params', 'random_preset',
    'ExplorerSession', 'SavedResult', 'RATINGS',
    'results_to_csv', 'export_results', 'ExplorerConfig',
    'RenderReport', 'render_request'
]
