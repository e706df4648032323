from __future__ import annotations

import importlib.util
import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any

from .constants import SUPPORTED_LANGUAGES
from .phonemes import clean_phonetic, tokenize
from .pipeline_config import PipelineConfig
from .runtime.tracing import trace_timing
from .stages.aligners.ladder import LadderAligner
from .stages.g2p.kokorog2p import KokoroG2PAdapter
from .stages.g2p.noop import NoopG2PAdapter
from .stages.protocols import G2PAdapter, PhoneticAligner, Syllabifier
from .stages.syllabifiers.supplied import SuppliedSyllabifier, parse_syllable_list
from .types import AlignmentTier, SyllableResult, Trace, WordEntry

logger = logging.getLogger(__name__)

_G2P_MODES = ("auto", "kokorog2p", "none")


def validate_config(cfg: PipelineConfig) -> None:
    """Raise ``ValueError`` for settings the pipeline cannot honour."""
    if cfg.g2p not in _G2P_MODES:
        raise ValueError(f"Unknown g2p mode {cfg.g2p!r}. Options: {list(_G2P_MODES)}")
    if cfg.lang not in SUPPORTED_LANGUAGES:
        supported = sorted(SUPPORTED_LANGUAGES)
        raise ValueError(
            f"Language '{cfg.lang}' is not supported. Supported languages: {supported}"
        )


class SyllablePipeline:
    """Syllabify headwords and align their transcriptions.

    Stages can be swapped out; by default supplied syllables are honoured,
    missing syllables are derived by rule, missing transcriptions are looked
    up according to ``config.g2p`` and transcriptions are aligned through the
    strict pass and its fallback tiers.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        syllabifier: Syllabifier | None = None,
        g2p: G2PAdapter | None = None,
        aligner: PhoneticAligner | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        validate_config(self.config)
        self.syllabifier = syllabifier or SuppliedSyllabifier()
        self.g2p = g2p
        self.aligner = aligner or LadderAligner()
        self._g2p_by_mode: dict[str, G2PAdapter] = {}

    def _resolve_g2p(self, cfg: PipelineConfig) -> G2PAdapter:
        if self.g2p is not None:
            return self.g2p
        mode = cfg.g2p
        if mode == "auto":
            available = importlib.util.find_spec("kokorog2p") is not None
            mode = "kokorog2p" if available else "none"
        adapter = self._g2p_by_mode.get(mode)
        if adapter is None:
            adapter = KokoroG2PAdapter() if mode == "kokorog2p" else NoopG2PAdapter()
            self._g2p_by_mode[mode] = adapter
        return adapter

    def run(
        self,
        word: str,
        phonetic: str | None = None,
        syllables: str | Sequence[str] | None = None,
        **overrides: Any,
    ) -> SyllableResult:
        """Process one headword.

        Args:
            word: Headword; must be non-empty.
            phonetic: Transcription, ``/.../`` optional. Looked up through the
                G2P stage when empty.
            syllables: Pre-split syllables, as a list or as a comma/space
                separated bulk-import cell.
            **overrides: ``PipelineConfig`` fields to override for this call.

        Returns:
            The orthographic and phonetic syllables; the phonetic list has one
            entry per orthographic syllable, or is empty when no transcription
            is available.
        """
        if not word or not word.strip():
            raise ValueError("word must be a non-empty string")

        entry = WordEntry(
            word=word.strip(),
            phonetic=phonetic,
            syllables=parse_syllable_list(syllables) or None,
        )
        return self.run_entry(entry, **overrides)

    def _config_for(self, overrides: dict[str, Any]) -> PipelineConfig:
        if not overrides:
            return self.config
        cfg = replace(self.config, **overrides)
        validate_config(cfg)
        return cfg

    def run_entry(self, entry: WordEntry, **overrides: Any) -> SyllableResult:
        """Process a :class:`WordEntry`, e.g. a row from a bulk import."""
        cfg = self._config_for(overrides)
        trace = Trace()

        with trace_timing(trace, "syllabify", "syllabify") as details:
            logger.debug("Syllabifying %r", entry.word)
            syllables = self.syllabifier.syllabify(entry, cfg, trace)
            details["count"] = len(syllables)

        phonetic = entry.phonetic
        if not clean_phonetic(phonetic) and cfg.g2p != "none":
            with trace_timing(trace, "g2p", "transcribe"):
                logger.debug("Looking up transcription for %r", entry.word)
                phonetic = self._resolve_g2p(cfg).transcribe(entry.word, cfg, trace)

        text = clean_phonetic(phonetic)
        phonetic_syllables: list[str] = []
        tier: AlignmentTier = "none"
        if text:
            with trace_timing(trace, "align", "align") as details:
                logger.debug("Aligning %r into %d syllables", text, len(syllables))
                phonetic_syllables, tier = self.aligner.align(
                    text, len(syllables), cfg, trace
                )
                details["tier"] = tier
            if cfg.return_trace:
                trace.tokens = tokenize(text)

        return SyllableResult(
            word=entry.word,
            syllables=syllables,
            phonetic=text,
            phonetic_syllables=phonetic_syllables,
            tier=tier,
            trace=trace if cfg.return_trace else None,
        )

    def run_many(
        self, entries: Iterable[WordEntry | str], **overrides: Any
    ) -> list[SyllableResult]:
        """Process a batch of words; each is independent of the others."""
        results = []
        for entry in entries:
            if isinstance(entry, str):
                results.append(self.run(entry, **overrides))
            else:
                results.append(
                    self.run(entry.word, entry.phonetic, entry.syllables, **overrides)
                )
        return results

    def __call__(
        self,
        word: str,
        phonetic: str | None = None,
        syllables: str | Sequence[str] | None = None,
        **overrides: Any,
    ) -> SyllableResult:
        return self.run(word, phonetic, syllables, **overrides)
