from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..types import AlignmentTier, Trace, WordEntry

if TYPE_CHECKING:
    from ..pipeline_config import PipelineConfig


class Syllabifier(Protocol):
    def syllabify(
        self, entry: WordEntry, cfg: PipelineConfig, trace: Trace
    ) -> list[str]: ...


class G2PAdapter(Protocol):
    def transcribe(
        self, word: str, cfg: PipelineConfig, trace: Trace
    ) -> str | None: ...


class PhoneticAligner(Protocol):
    def align(
        self, phonetic: str, target_count: int, cfg: PipelineConfig, trace: Trace
    ) -> tuple[list[str], AlignmentTier]: ...
