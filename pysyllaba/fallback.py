"""Fallback splitters for transcriptions the strict aligner cannot handle.

Each tier is a plain function. :func:`vowel_scan_split` returns ``None`` when
it cannot produce the requested number of pieces; :func:`equal_split` always
succeeds and closes the ladder.
"""

from __future__ import annotations

import logging
import math

from .phonemes import clean_phonetic
from .symbols import FALLBACK_VOWEL_SOUNDS
from .types import AlignmentTier

logger = logging.getLogger(__name__)


def check_target_count(target_count: int) -> None:
    if target_count < 1:
        raise ValueError(f"target_count must be >= 1, got {target_count}")


def vowel_scan_split(phonetic: str, target_count: int) -> list[str] | None:
    """Cut a raw transcription in front of each new vowel sound.

    Two-character vowel sounds are consumed before single characters. A
    piece is closed once it holds a vowel and the next character starts a
    vowel (or the string ends), until ``target_count - 1`` pieces exist.

    Returns:
        Exactly ``target_count`` non-empty pieces, or ``None``.
    """
    check_target_count(target_count)
    pieces: list[str] = []
    current = ""
    vowel_found = False
    size = len(phonetic)
    i = 0
    while i < size:
        pair = phonetic[i : i + 2]
        if len(pair) == 2 and pair in FALLBACK_VOWEL_SOUNDS:
            current += pair
            i += 1
            vowel_found = True
        else:
            current += phonetic[i]
            if phonetic[i] in FALLBACK_VOWEL_SOUNDS:
                vowel_found = True

        at_end = i == size - 1
        if (
            vowel_found
            and len(pieces) < target_count - 1
            and (at_end or phonetic[i + 1] in FALLBACK_VOWEL_SOUNDS)
        ):
            pieces.append(current)
            current = ""
            vowel_found = False
        i += 1

    if current:
        pieces.append(current)

    if len(pieces) != target_count or not all(pieces):
        return None
    return pieces


def equal_split(phonetic: str, target_count: int) -> list[str]:
    """Cut ``phonetic`` into ``target_count`` pieces of ``ceil(len / n)``.

    The final piece runs to the end of the string. When the string has at
    least ``target_count`` characters, piece starts are pulled back so every
    piece keeps at least one character. Only a shorter string yields empty
    trailing pieces.

    Examples:
        >>> equal_split("abcdefg", 3)
        ['abc', 'def', 'g']
        >>> equal_split("bcdfg", 4)
        ['bc', 'd', 'f', 'g']
    """
    check_target_count(target_count)
    size = len(phonetic)
    step = math.ceil(size / target_count)
    starts = [i * step for i in range(target_count)]
    if size >= target_count:
        starts = [
            min(start, size - (target_count - i)) for i, start in enumerate(starts)
        ]
    ends = [*starts[1:], size]
    return [phonetic[start:end] for start, end in zip(starts, ends)]


def fallback_detailed(
    phonetic: str, target_count: int
) -> tuple[list[str], AlignmentTier]:
    """Run the fallback ladder and report which tier produced the result.

    ``phonetic`` may carry the usual ``/.../`` decoration; it is cleaned first.
    """
    phonetic = clean_phonetic(phonetic)
    pieces = vowel_scan_split(phonetic, target_count)
    if pieces is not None:
        return pieces, "vowel_scan"
    logger.debug(
        "Vowel scan could not split %r into %d pieces; using equal split",
        phonetic,
        target_count,
    )
    return equal_split(phonetic, target_count), "equal_split"


def fallback(phonetic: str, target_count: int) -> list[str]:
    """Split ``phonetic`` into exactly ``target_count`` strings."""
    pieces, _ = fallback_detailed(phonetic, target_count)
    return pieces
