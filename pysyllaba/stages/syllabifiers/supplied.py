from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...types import Trace, WordEntry
from ..protocols import Syllabifier
from .rules import RuleSyllabifier

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)

__all__ = ["SuppliedSyllabifier", "parse_syllable_list"]


def parse_syllable_list(text: str | Sequence[str] | None) -> tuple[str, ...]:
    """Parse a syllable cell from a bulk-import sheet.

    A string is split on commas when it contains one, otherwise on spaces.
    Pieces are stripped and empty pieces dropped.

    Examples:
        >>> parse_syllable_list("hap, py")
        ('hap', 'py')
        >>> parse_syllable_list("ra di o")
        ('ra', 'di', 'o')
    """
    if text is None:
        return ()
    if isinstance(text, str):
        if "," in text:
            pieces = text.split(",")
        elif " " in text.strip():
            pieces = text.split(" ")
        else:
            pieces = [text]
    else:
        pieces = list(text)
    return tuple(p.strip() for p in pieces if p and p.strip())


def recase_syllables(word: str, syllables: Sequence[str]) -> list[str] | None:
    """Re-cut ``word`` along the lengths of ``syllables``.

    Returns ``None`` when the syllables do not spell ``word`` (ignoring case).
    """
    if "".join(syllables).lower() != word.lower():
        return None
    out: list[str] = []
    pos = 0
    for syllable in syllables:
        out.append(word[pos : pos + len(syllable)])
        pos += len(syllable)
    return out


class SuppliedSyllabifier(Syllabifier):
    """Use caller-supplied syllables, deriving them only when absent.

    Supplied syllables that do not spell the headword are kept as given, so
    the transcription is still aligned to the supplied count.
    """

    def __init__(self, fallback: Syllabifier | None = None) -> None:
        self._fallback = fallback or RuleSyllabifier()

    def syllabify(
        self, entry: WordEntry, cfg: PipelineConfig, trace: Trace
    ) -> list[str]:
        if entry.syllables:
            syllables = recase_syllables(entry.word, entry.syllables)
            if syllables is not None:
                return syllables
            message = (
                f"Supplied syllables {list(entry.syllables)!r} do not spell "
                f"{entry.word!r}; keeping them as supplied"
            )
            logger.warning(message)
            trace.warnings.append(message)
            return list(entry.syllables)
        return self._fallback.syllabify(entry, cfg, trace)
