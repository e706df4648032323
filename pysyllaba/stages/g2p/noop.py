from __future__ import annotations

from typing import TYPE_CHECKING

from ...types import Trace

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig

__all__ = ["NoopG2PAdapter"]


class NoopG2PAdapter:
    """Never produces a transcription; words keep an empty phonetic line."""

    def transcribe(self, word: str, cfg: PipelineConfig, trace: Trace) -> None:
        _ = (word, cfg, trace)
        return None
