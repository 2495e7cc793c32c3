from ..constants import BREAKPOINT_STRATEGY
from ..util import WeakNamespace


DEFAULTS = WeakNamespace()
"""
- breakpoint_summary_strategy: the strategy used to summarize the start and end positions of the records in a cluster
- processes: the number of worker processes used to collapse independent clusters
"""
DEFAULTS.add('breakpoint_summary_strategy', BREAKPOINT_STRATEGY.MEDIAN_START_MEDIAN_END, cast_type=BREAKPOINT_STRATEGY)
DEFAULTS.add('processes', 1)
