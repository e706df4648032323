from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .symbols import PRIMARY_STRESS

AlignmentTier = Literal["strict", "vowel_scan", "equal_split", "none"]


@dataclass(frozen=True)
class Stress:
    """A primary or secondary stress marker in a transcription."""

    marker: str

    @property
    def primary(self) -> bool:
        return self.marker == PRIMARY_STRESS

    @property
    def text(self) -> str:
        return self.marker


@dataclass(frozen=True)
class Phoneme:
    """A single phoneme symbol (one or two characters)."""

    symbol: str
    is_vowel: bool = False

    @property
    def text(self) -> str:
        return self.symbol


PhonemeToken = Stress | Phoneme


@dataclass(frozen=True)
class Nucleus:
    """Vowel nucleus inside a letter stream."""

    index: int
    length: int

    @property
    def end(self) -> int:
        return self.index + self.length


@dataclass(frozen=True)
class WordEntry:
    """A headword with its optional transcription and pre-split syllables."""

    word: str
    phonetic: str | None = None
    syllables: tuple[str, ...] | None = None


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["syllabify", "g2p", "align", "cache"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Optional snapshots
    tokens: list[PhonemeToken] | None = None


@dataclass
class SyllableResult:
    word: str
    syllables: list[str]
    phonetic: str = ""
    phonetic_syllables: list[str] = field(default_factory=list)
    tier: AlignmentTier = "none"
    trace: Trace | None = None

    @property
    def syllable_count(self) -> int:
        return len(self.syllables)

    def pairs(self) -> list[tuple[str, str]]:
        """Orthographic and phonetic syllables in playback order.

        Words without a transcription pair every syllable with ``""``.
        """
        if not self.phonetic_syllables:
            return [(syllable, "") for syllable in self.syllables]
        return list(zip(self.syllables, self.phonetic_syllables))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "syllables": list(self.syllables),
            "phonetic": self.phonetic,
            "phonetic_syllables": list(self.phonetic_syllables),
            "tier": self.tier,
        }
