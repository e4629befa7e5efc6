"""Kernel-level clock and local-time access."""

from .clock import time_since_epoch
from .localtime import decompose_local_time
from .time import get_current_readable_time, get_current_time

__all__ = [
    "decompose_local_time",
    "get_current_readable_time",
    "get_current_time",
    "time_since_epoch",
]
