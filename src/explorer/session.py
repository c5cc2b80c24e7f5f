"""
In-memory exploration session: current parameters, window and ratings
"""

import numpy as np
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from attractors.base import GumowskiParams, InvalidParameterError
from compute.trajectory import validate_window
from explorer.params import get_preset, random_params

RATINGS = ('good', 'bad')

DEFAULT_ITERATIONS = 20000


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class SavedResult:
    params: GumowskiParams
    rating: str
    timestamp: str


@dataclass
class ExplorerSession:
    """state owned by the calling shell and passed to each request"""
    current_params: Optional[GumowskiParams] = None
    iterations: int = DEFAULT_ITERATIONS
    skip: int = 0
    saved_results: List[SavedResult] = field(default_factory=list)

    def __post_init__(self):
        validate_window(self.iterations, self.skip)

    def use_params(self, params: GumowskiParams) -> GumowskiParams:
        if not params.is_finite():
            raise InvalidParameterError(f"parameters must be finite: {params!r}")
        self.current_params = params
        return params

    def reroll(self, rng: np.random.RandomState) -> GumowskiParams:
        return self.use_params(random_params(rng))

    def use_preset(self, index: int) -> GumowskiParams:
        return self.use_params(get_preset(index))

    def set_window(self, iterations: int, skip: int = 0) -> None:
        validate_window(iterations, skip)
        self.iterations = iterations
        self.skip = skip

    def save_rating(self, rating: str, timestamp: Optional[str] = None) -> SavedResult:
        if rating not in RATINGS:
            raise ValueError(f"rating must be one of {RATINGS}, got {rating!r}")
        if self.current_params is None:
            raise ValueError("nothing to rate: no parameters have been rendered yet")

        result = SavedResult(
            params=self.current_params,
            rating=rating,
            timestamp=timestamp if timestamp is not None else utc_timestamp()
        )
        self.saved_results.append(result)
        return result

    def counts(self) -> dict:
        return {r: sum(1 for s in self.saved_results if s.rating == r) for r in RATINGS}
