"""
Explorer configuration, loadable from yaml
"""

import yaml
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Mapping, Optional

from attractors import AVAILABLE_ATTRACTORS
from attractors.base import GumowskiParams, Point
from attractors.gumowski_mira import DEFAULT_INIT_POINT
from compute.trajectory import validate_window
from explorer.params import parse_params, parse_value
from viz.bounds import Viewport
from viz.render import RenderOptions


def _build_section(name: str, section_cls, values: Any):
    """build a nested config object, reporting bad keys or types as ValueError"""
    if not isinstance(values, Mapping):
        raise ValueError(f"'{name}' section must be a mapping, got {values!r}")
    try:
        return section_cls(**values)
    except TypeError as e:
        raise ValueError(f"invalid '{name}' section: {e}") from None


@dataclass
class ExplorerConfig:
    variant: str = 'standard'
    iterations: int = 20000
    skip: int = 0
    initial: Point = DEFAULT_INIT_POINT
    params: Optional[GumowskiParams] = None
    viewport: Viewport = field(default_factory=lambda: Viewport(800, 800, 50))
    render: RenderOptions = field(default_factory=RenderOptions)
    seed: Optional[int] = None
    output_dir: str = "gumowski_results"

    def __post_init__(self):
        if self.variant not in AVAILABLE_ATTRACTORS:
            raise ValueError(
                f"invalid variant '{self.variant}', must be one of {sorted(AVAILABLE_ATTRACTORS)}"
            )
        validate_window(self.iterations, self.skip)
        self.initial = Point(parse_value('initial.x', self.initial[0]),
                             parse_value('initial.y', self.initial[1]))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExplorerConfig':
        """build from plain data; unknown sections raise ValueError"""
        data = dict(data or {})
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config sections: {sorted(unknown)}")

        if data.get('params') is not None:
            data['params'] = parse_params(data['params'])
        if 'initial' in data:
            initial = data['initial']
            if isinstance(initial, dict):
                initial = (initial.get('x'), initial.get('y'))
            if isinstance(initial, (str, bytes)) or not hasattr(initial, '__len__') or len(initial) != 2:
                raise ValueError(f"initial must be {{x, y}} or a pair, got {data['initial']!r}")
            data['initial'] = Point(*initial)
        if 'viewport' in data:
            data['viewport'] = _build_section('viewport', Viewport, data['viewport'])
        if 'render' in data:
            data['render'] = _build_section('render', RenderOptions, data['render'])
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['initial'] = {'x': self.initial.x, 'y': self.initial.y}
        if isinstance(self.render.color, tuple):
            data['render']['color'] = list(self.render.color)
        if isinstance(self.render.background, tuple):
            data['render']['background'] = list(self.render.background)
        return data

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'ExplorerConfig':
        """load explorer config from yaml file"""
        with open(yaml_path, 'r') as f:
            config = yaml.safe_load(f)
        return cls.from_dict(config)

    def to_yaml(self, yaml_path: str):
        """save explorer config to yaml file"""
        with open(yaml_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
