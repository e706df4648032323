"""Orthographic syllabification of English headwords.

The syllabifier works on letters only: it finds vowel nuclei, hands the
consonant run between each pair of nuclei to the orthographic
:class:`~pysyllaba.distribution.ConsonantDistributionPolicy`, then applies two
refinements (syllabic consonant endings and protected letter sequences).

It never raises: any result that does not reassemble into the input word is
replaced by the whole word as a single syllable.
"""

from __future__ import annotations

import logging

from .distribution import ORTHOGRAPHIC_POLICY
from .symbols import (
    DIPHTHONG_LETTERS,
    PROTECTED_SEQUENCES,
    R_COLORED_LETTERS,
    SPECIAL_SUFFIXES,
    SYLLABIC_SUFFIXES,
    is_vowel_letter,
)
from .types import Nucleus

logger = logging.getLogger(__name__)


def split_special_suffix(word: str) -> tuple[str, str]:
    """Split a whole-syllable suffix such as ``-tion`` off ``word``.

    Returns:
        ``(base_word, suffix)`` where ``suffix`` keeps the casing of ``word``
        and is ``""`` when no suffix applies. A suffix spanning the whole
        word is not split off.

    Examples:
        >>> split_special_suffix("Station")
        ('Sta', 'tion')
        >>> split_special_suffix("cat")
        ('cat', '')
    """
    lowered = word.lower()
    for suffix in SPECIAL_SUFFIXES:
        if lowered.endswith(suffix) and len(word) > len(suffix):
            cut = len(word) - len(suffix)
            return word[:cut], word[cut:]
    return word, ""


def find_nuclei(word: str) -> list[Nucleus]:
    """Locate vowel nuclei, preferring two-letter nuclei over single vowels."""
    lowered = word.lower()
    nuclei: list[Nucleus] = []
    i = 0
    while i < len(lowered):
        pair = lowered[i : i + 2]
        if pair in DIPHTHONG_LETTERS or pair in R_COLORED_LETTERS:
            nuclei.append(Nucleus(i, 2))
            i += 2
            continue
        if is_vowel_letter(lowered[i], i):
            nuclei.append(Nucleus(i, 1))
        i += 1
    return nuclei


def _split_at(word: str, boundaries: list[int]) -> list[str]:
    edges = [0, *boundaries, len(word)]
    return [word[a:b] for a, b in zip(edges, edges[1:]) if b > a]


def _split_syllabic_consonant(base_word: str, syllables: list[str]) -> list[str]:
    # -ble, -tle, ...: the final two letters become their own syllable
    lowered = base_word.lower()
    for pattern in SYLLABIC_SUFFIXES:
        if lowered.endswith(pattern):
            last = syllables[-1]
            if len(last) > 2:
                return [*syllables[:-1], last[:-2], last[-2:]]
            return syllables
    return syllables


def _protect_sequences(base_word: str, syllables: list[str]) -> list[str]:
    lowered = base_word.lower()
    spans: list[tuple[int, int]] = []
    for sequence in PROTECTED_SEQUENCES:
        pos = lowered.find(sequence)
        while pos >= 0:
            spans.append((pos, pos + len(sequence)))
            pos = lowered.find(sequence, pos + 1)
    if not spans:
        return syllables

    boundaries: list[int] = []
    offset = 0
    for syllable in syllables[:-1]:
        offset += len(syllable)
        boundaries.append(offset)

    moved: list[int] = []
    for boundary in boundaries:
        inside = [end for start, end in spans if start < boundary < end]
        while inside:
            boundary = max(inside)
            inside = [end for start, end in spans if start < boundary < end]
        moved.append(boundary)

    if moved != boundaries:
        logger.debug("Moved boundaries %s -> %s in %r", boundaries, moved, base_word)
    return _split_at(base_word, sorted(set(moved)))


def syllabify(word: str) -> list[str]:
    """Split ``word`` into orthographic syllables.

    The concatenation of the result always equals ``word``; words with at
    most one vowel nucleus come back as ``[word]``.

    Args:
        word: Headword; case is preserved in the output.

    Returns:
        Non-empty list of syllables.

    Examples:
        >>> syllabify("happy")
        ['hap', 'py']
        >>> syllabify("radio")
        ['rad', 'i', 'o']
    """
    if not word:
        return [word]

    base_word, suffix = split_special_suffix(word)
    nuclei = find_nuclei(base_word)
    if suffix and not nuclei:
        # the suffix carries the only vowel: bring, fly
        return [word]

    if len(nuclei) <= 1:
        syllables = [base_word]
    else:
        letters = list(base_word)
        boundaries = [
            ORTHOGRAPHIC_POLICY.resolve_boundary(
                letters, current.end, following.index
            )
            for current, following in zip(nuclei, nuclei[1:])
        ]
        syllables = _split_at(base_word, boundaries)
        syllables = _split_syllabic_consonant(base_word, syllables)
        syllables = _protect_sequences(base_word, syllables)

    if suffix:
        syllables.append(suffix)

    if "".join(syllables) != word or not all(syllables):
        logger.debug("Inconsistent syllabification %r for %r", syllables, word)
        return [word]
    return syllables
