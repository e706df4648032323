"""Consonant distribution between two vowel nuclei.

Both syllabifiers hand a run of consonants that sits between two nuclei to a
:class:`ConsonantDistributionPolicy` and get back the index at which the next
syllable starts. The stream is any sequence of strings: single letters for
words, rendered token text for transcriptions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .symbols import LETTER_CLUSTERS, PHONEME_CLUSTERS


@dataclass(frozen=True)
class ConsonantDistributionPolicy:
    """Boundary rule for one stream type.

    Attributes:
        name: Label used in logs and reprs.
        clusters: Unsplittable consonant clusters for this stream.
        one_to_following: Whether a lone consonant starts the next syllable.
        pair_to_following: Whether both consonants of a pair start the next
            syllable instead of being split one per side.
    """

    name: str
    clusters: frozenset[str]
    one_to_following: bool
    pair_to_following: bool

    def find_cluster(self, items: Sequence[str], start: int, end: int) -> int | None:
        """Return the start of the first cluster lying fully inside the run."""
        for i in range(start, end - 1):
            if i + 2 < end and "".join(items[i : i + 3]).lower() in self.clusters:
                return i
            if "".join(items[i : i + 2]).lower() in self.clusters:
                return i
        return None

    def resolve_boundary(self, items: Sequence[str], start: int, end: int) -> int:
        """Resolve where the syllable boundary falls in ``items[start:end]``.

        Args:
            items: Letters or token texts of the whole stream.
            start: Index of the first consonant after the preceding nucleus.
            end: Index of the following nucleus.

        Returns:
            Index in ``[start, end]`` at which the following syllable begins.
        """
        count = end - start
        if count <= 0:
            return start

        cluster_start = self.find_cluster(items, start, end)
        if cluster_start is not None:
            return cluster_start

        if count == 1:
            return start if self.one_to_following else end
        if count == 2:
            return start if self.pair_to_following else start + 1
        # Three or more: first consonant stays, the rest move on.
        return start + 1


ORTHOGRAPHIC_POLICY = ConsonantDistributionPolicy(
    name="orthographic",
    clusters=LETTER_CLUSTERS,
    one_to_following=False,
    pair_to_following=False,
)

PHONETIC_POLICY = ConsonantDistributionPolicy(
    name="phonetic",
    clusters=PHONEME_CLUSTERS,
    one_to_following=True,
    pair_to_following=True,
)
