"""Align a phonetic transcription to a target number of syllables.

:func:`align_strict` is the strict pass over the token stream.
:func:`align_phonetic` chains tokenization, the strict pass and the fallback
ladder, and always returns exactly ``target_count`` strings.
"""

from __future__ import annotations

import logging

from .distribution import PHONETIC_POLICY
from .fallback import check_target_count, fallback_detailed
from .phonemes import clean_phonetic, count_vowels, render_tokens, tokenize
from .types import AlignmentTier, Phoneme, PhonemeToken, Stress

logger = logging.getLogger(__name__)


def _is_vowel(token: PhonemeToken) -> bool:
    if isinstance(token, Stress):
        return False
    if isinstance(token, Phoneme):
        return token.is_vowel
    raise TypeError(f"Unexpected token {token!r}")


def _next_vowel(tokens: list[PhonemeToken], after: int) -> int | None:
    for j in range(after + 1, len(tokens)):
        if _is_vowel(tokens[j]):
            return j
    return None


def _resolve_boundary(tokens: list[PhonemeToken], vowel: int, next_vowel: int) -> int:
    # A stress marker between the nuclei fixes the boundary right after it.
    for j in range(vowel + 1, next_vowel):
        if isinstance(tokens[j], Stress):
            return j + 1
    texts = [token.text for token in tokens]
    return PHONETIC_POLICY.resolve_boundary(texts, vowel + 1, next_vowel)


def syllable_boundaries(tokens: list[PhonemeToken], target_count: int) -> list[int]:
    """Token indices at which each of ``target_count`` syllables starts.

    The list always has ``target_count + 1`` entries, starting at ``0`` and
    ending at ``len(tokens)``. When the stream has too few vowels the missing
    starts are padded with ``len(tokens)``.
    """
    boundaries = [0]
    vowels_seen = 0
    for i, token in enumerate(tokens):
        if not _is_vowel(token):
            continue
        vowels_seen += 1
        if vowels_seen >= target_count:
            break
        next_vowel = _next_vowel(tokens, i)
        if next_vowel is None:
            break
        boundaries.append(_resolve_boundary(tokens, i, next_vowel))

    while len(boundaries) < target_count:
        boundaries.append(len(tokens))
    boundaries.append(len(tokens))
    return boundaries


def align_strict(tokens: list[PhonemeToken], target_count: int) -> list[str] | None:
    """Strictly split a token stream into ``target_count`` syllables.

    Returns:
        The syllable strings, stress markers included, or ``None`` when the
        stream cannot yield ``target_count`` non-empty syllables.
    """
    check_target_count(target_count)
    boundaries = syllable_boundaries(tokens, target_count)
    syllables = [
        render_tokens(tokens[start:end])
        for start, end in zip(boundaries, boundaries[1:])
    ]
    if len(syllables) != target_count or not all(syllables):
        return None
    return syllables


def align_phonetic_detailed(
    phonetic: str | None, target_count: int
) -> tuple[list[str], AlignmentTier]:
    """Align ``phonetic`` and report which tier produced the syllables."""
    check_target_count(target_count)
    tokens = tokenize(phonetic)
    syllables = align_strict(tokens, target_count)
    if syllables is not None:
        return syllables, "strict"

    text = clean_phonetic(phonetic)
    logger.debug(
        "Strict alignment of %r (%d vowels) into %d syllables failed; falling back",
        text,
        count_vowels(tokens),
        target_count,
    )
    return fallback_detailed(text, target_count)


def align_phonetic(phonetic: str | None, target_count: int) -> list[str]:
    """Split a transcription into exactly ``target_count`` syllable strings.

    Examples:
        >>> align_phonetic("/ˈhæpi/", 2)
        ['ˈhæ', 'pi']
    """
    syllables, _ = align_phonetic_detailed(phonetic, target_count)
    return syllables


def align(phonetic: str | list[PhonemeToken] | None, target_count: int) -> list[str]:
    """Split a transcription or token stream into ``target_count`` syllables.

    Token streams that the strict pass cannot split go through the fallback
    ladder on their rendered text.
    """
    if phonetic is None or isinstance(phonetic, str):
        return align_phonetic(phonetic, target_count)
    syllables = align_strict(phonetic, target_count)
    if syllables is not None:
        return syllables
    pieces, _ = fallback_detailed(render_tokens(phonetic), target_count)
    return pieces
