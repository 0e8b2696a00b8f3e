"""
Selects the samples that fall inside a viewport.

The result always starts exactly at the viewport start and ends exactly at its end,
so the plotted curve meets both plot edges.
"""

from datetime import datetime
from typing import List

from weathergraph.core.weather_data import DataSource, Sample


def window_samples(data_source: DataSource, min_x: datetime, max_x: datetime) -> List[Sample]:
    """
    Returns the samples strictly inside (min_x, max_x) framed by two boundary samples.

    Samples lying exactly on a boundary are dropped and re-synthesized through
    `data_source.sample_at`, which also holds the edge value when the window
    reaches past the recorded series.
    """
    inside = [sample for sample in data_source.samples if min_x < sample.time < max_x]
    return [data_source.sample_at(min_x), *inside, data_source.sample_at(max_x)]
