"""
CSV export of rated parameter sets
"""

import os
from typing import Iterable

from explorer.session import SavedResult

CSV_HEADERS = ('timestamp', 'rating', 'alpha', 'sigma', 'mu')
DEFAULT_FILENAME = "gumowski-results.csv"


def results_to_csv(results: Iterable[SavedResult]) -> str:
    """header plus one row per result, newline separated, no trailing newline"""
    lines = [','.join(CSV_HEADERS)]
    for result in results:
        p = result.params
        lines.append(','.join([
            result.timestamp,
            result.rating,
            repr(float(p.alpha)),
            repr(float(p.sigma)),
            repr(float(p.mu))
        ]))
    return '\n'.join(lines)


def export_results(results: Iterable[SavedResult], output_dir: str,
                   filename: str = DEFAULT_FILENAME) -> str:
    """write the csv text to output_dir/filename and return the path"""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(results_to_csv(results))
    return path
