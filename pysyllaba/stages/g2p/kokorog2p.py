from __future__ import annotations

import logging

from ...constants import SUPPORTED_LANGUAGES
from ...phonemes import format_phonetic, normalize_kokoro_phonemes
from ...pipeline_config import PipelineConfig
from ...runtime.cache import Cache, cache_from_dir, make_g2p_key
from ...runtime.tracing import trace_timing
from ...types import Trace
from ..protocols import G2PAdapter

logger = logging.getLogger(__name__)


class KokoroG2PAdapter(G2PAdapter):
    """Derive a transcription for words imported without one."""

    def __init__(self) -> None:
        self._g2p = None
        self._cache: Cache | None = None
        self._cache_dir: str | None = None

    def _load(self):
        if self._g2p is not None:
            return self._g2p
        try:
            import kokorog2p  # type: ignore
        except Exception as exc:
            raise RuntimeError("kokorog2p is not installed") from exc
        self._g2p = kokorog2p
        return self._g2p

    def _cache_for(self, cfg: PipelineConfig) -> Cache:
        if self._cache is None or self._cache_dir != cfg.cache_dir:
            self._cache = cache_from_dir(cfg.cache_dir)
            self._cache_dir = cfg.cache_dir
        return self._cache

    def transcribe(self, word: str, cfg: PipelineConfig, trace: Trace) -> str | None:
        g2p = self._load()
        lang = SUPPORTED_LANGUAGES.get(cfg.lang, cfg.lang)
        cache = self._cache_for(cfg)
        cache_key = make_g2p_key(
            word=word,
            lang=lang,
            backend="kokorog2p",
            backend_version=getattr(g2p, "__version__", None),
        )
        with trace_timing(trace, "cache", "g2p_lookup") as details:
            cached = cache.get(cache_key)
            details["hit"] = cached is not None
        if cached is not None:
            logger.debug("G2P cache hit for %r", word)
            return cached.get("phonetic") or None

        result = g2p.phonemize_to_result(word, lang=lang, return_phonemes=True)
        phonemes = getattr(result, "phonemes", None) or getattr(result, "phoneme", "")
        warnings = getattr(result, "warnings", None)
        if warnings:
            trace.warnings.extend(list(warnings))

        phonetic = format_phonetic(normalize_kokoro_phonemes(str(phonemes or "")))
        cache.set(cache_key, {"phonetic": phonetic})
        return phonetic or None
