"""Combinators for composing Ok/Err results.

Flat imports:
    from result_extra import Ok, Err, Result, combine, or_else, to_task
"""

from result_extra.alternative import or_, or_else, or_else_lazy, or_lazy
from result_extra.combine import (
    and_map,
    combine,
    combine_both,
    combine_first,
    combine_map,
    combine_map_both,
    combine_map_first,
    combine_map_second,
    combine_second,
    filter,
    partition,
    singleton,
)
from result_extra.result import (
    Err,
    Ok,
    Result,
    and_then,
    map,
    map2,
    map_error,
    to_optional,
    with_default,
)
from result_extra.task import TaskRejected, to_task
from result_extra.unpack import (
    error,
    extract,
    is_err,
    is_ok,
    join,
    map_both,
    merge,
    unpack,
    unwrap,
)

__all__ = [
    "Err",
    "Ok",
    "Result",
    "TaskRejected",
    "and_map",
    "and_then",
    "combine",
    "combine_both",
    "combine_first",
    "combine_map",
    "combine_map_both",
    "combine_map_first",
    "combine_map_second",
    "combine_second",
    "error",
    "extract",
    "filter",
    "is_err",
    "is_ok",
    "join",
    "map",
    "map2",
    "map_both",
    "map_error",
    "merge",
    "or_",
    "or_else",
    "or_else_lazy",
    "or_lazy",
    "partition",
    "singleton",
    "to_optional",
    "to_task",
    "unpack",
    "unwrap",
    "with_default",
]
