from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class PipelineConfig:
    """User-facing configuration for the syllable pipeline.

    Keep this frozen+hashable so it can be used as part of cache keys.
    """

    lang: str = "en-us"

    # Stage selection
    g2p: Literal["auto", "kokorog2p", "none"] = "auto"

    # Behavior toggles
    return_trace: bool = False

    # Caching
    cache_dir: str | None = None
