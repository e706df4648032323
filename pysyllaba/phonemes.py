"""Phonetic transcription tokenizer.

This module turns an IPA-style transcription such as ``/ˈhæpi/`` into an
ordered stream of :class:`~pysyllaba.types.Stress` and
:class:`~pysyllaba.types.Phoneme` tokens.
"""

from __future__ import annotations

import logging
import re

from .symbols import (
    DOUBLE_VOWELS,
    KOKORO_SHORTHAND,
    PHONEME_CLUSTERS,
    SHORT_VOWELS,
    STRESS_MARKERS,
)
from .types import Phoneme, PhonemeToken, Stress

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_EDGE_SLASH_RE = re.compile(r"^/|/$")


def clean_phonetic(phonetic: str | None) -> str:
    """Strip one leading/trailing ``/`` and all whitespace.

    Examples:
        >>> clean_phonetic("/ˈhæp i/")
        'ˈhæpi'
    """
    if not phonetic:
        return ""
    return _WHITESPACE_RE.sub("", _EDGE_SLASH_RE.sub("", phonetic.strip()))


def format_phonetic(phonetic: str | None) -> str:
    """Wrap a transcription in slashes the way bulk imports store it.

    Empty input stays empty.

    Examples:
        >>> format_phonetic("ˈhæpi")
        '/ˈhæpi/'
        >>> format_phonetic("/ˈhæpi/")
        '/ˈhæpi/'
    """
    text = (phonetic or "").strip()
    if not text:
        return ""
    if not text.startswith("/"):
        text = f"/{text}"
    if not text.endswith("/") or len(text) == 1:
        text = f"{text}/"
    return text


def normalize_kokoro_phonemes(phonemes: str) -> str:
    """Replace Kokoro shorthand symbols (``A``, ``I``, ``ʤ``...) with IPA."""
    return "".join(KOKORO_SHORTHAND.get(ch, ch) for ch in phonemes)


def tokenize(phonetic: str | None) -> list[PhonemeToken]:
    """Tokenize a transcription, longest match first.

    At each position the checks run in a fixed order: stress marker,
    two-symbol consonant cluster, two-symbol vowel, then a single symbol.
    Several clusters and vowels share a leading symbol, so the order must
    not change.

    Args:
        phonetic: Transcription, optionally wrapped in ``/``.

    Returns:
        Tokens in transcription order. Empty input gives an empty list.
    """
    text = clean_phonetic(phonetic)
    tokens: list[PhonemeToken] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in STRESS_MARKERS:
            tokens.append(Stress(ch))
            i += 1
            continue

        pair = text[i : i + 2]
        if len(pair) == 2 and pair in PHONEME_CLUSTERS:
            tokens.append(Phoneme(pair, is_vowel=False))
            i += 2
            continue
        if len(pair) == 2 and pair in DOUBLE_VOWELS:
            tokens.append(Phoneme(pair, is_vowel=True))
            i += 2
            continue

        tokens.append(Phoneme(ch, is_vowel=ch in SHORT_VOWELS))
        i += 1
    return tokens


def render_tokens(tokens: list[PhonemeToken]) -> str:
    """Join token text back into a transcription without decoration."""
    return "".join(token.text for token in tokens)


def count_vowels(tokens: list[PhonemeToken]) -> int:
    return sum(1 for token in tokens if isinstance(token, Phoneme) and token.is_vowel)
