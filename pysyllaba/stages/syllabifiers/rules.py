from __future__ import annotations

from typing import TYPE_CHECKING

from ...orthography import syllabify
from ...types import Trace, WordEntry

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig

__all__ = ["RuleSyllabifier"]


class RuleSyllabifier:
    def syllabify(
        self, entry: WordEntry, cfg: PipelineConfig, trace: Trace
    ) -> list[str]:
        _ = (cfg, trace)
        return syllabify(entry.word)
