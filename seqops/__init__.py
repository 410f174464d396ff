"""
Sequence processing primitives: mapping, filtering, partitioning, grouping, zipping,
generation and scalar reductions over ordered sequences. Imports the fluent entrypoint
at streams.seq

Several names shadow builtins (map, filter, zip, sum, min, max, any, all), import the
module rather than the names:

    import seqops as fn
    fn.map([1, 2, 3], lambda x: x * 2 if x > 1 else None)
"""

from seqops.generation import generate, generate_2d
from seqops.queries import (
    all,
    any,
    contains,
    count,
    find_best,
    find_match,
    find_max,
    find_min,
    find_nearest,
    max,
    mean,
    min,
    minmax,
    none,
    sum,
)
from seqops.streams import Sequence, seq
from seqops.traversal import (
    filter,
    filter_inplace,
    foreach,
    group_by,
    map,
    map_inplace,
    partition,
    reduce,
    remap,
    remove_if,
    zip,
)
from seqops.util import identity
from seqops.logger import get_logger

__license__ = "MIT"
__version__ = "0.1.0"
__status__ = "Development"
