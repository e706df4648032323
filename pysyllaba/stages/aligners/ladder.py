from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...alignment import align_phonetic_detailed
from ...types import AlignmentTier, Trace
from ..protocols import PhoneticAligner

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)

__all__ = ["LadderAligner"]


class LadderAligner(PhoneticAligner):
    """Strict token alignment, then the vowel-scan and equal-split tiers."""

    def align(
        self, phonetic: str, target_count: int, cfg: PipelineConfig, trace: Trace
    ) -> tuple[list[str], AlignmentTier]:
        _ = cfg
        syllables, tier = align_phonetic_detailed(phonetic, target_count)
        if tier != "strict":
            trace.warnings.append(
                f"Aligned {phonetic!r} into {target_count} syllables "
                f"with the {tier} fallback"
            )
        return syllables, tier
