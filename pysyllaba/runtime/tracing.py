from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(
    trace: Trace, stage: str, name: str, **details: Any
) -> Iterator[dict[str, Any]]:
    """Record how long the wrapped block takes as a :class:`TraceEvent`.

    The yielded dict is stored as the event details, so the block can add
    to it before the event is written.
    """
    start = time.perf_counter()
    try:
        yield details
    finally:
        ms = (time.perf_counter() - start) * 1000.0
        trace.events.append(TraceEvent(stage=stage, name=name, ms=ms, details=details))
