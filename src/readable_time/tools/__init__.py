"""Tool surface for readable_time.

`get_current_readable_time` is the main entrypoint; the name lookups live in
`src.readable_time.core`.
"""

from .kernel import decompose_local_time, get_current_readable_time, get_current_time, time_since_epoch

__all__ = [
    "decompose_local_time",
    "get_current_readable_time",
    "get_current_time",
    "time_since_epoch",
]
