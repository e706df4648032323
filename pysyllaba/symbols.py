"""Classification tables for English letters and IPA symbols.

All tables are module-level immutable constants. Tables whose iteration order
matters (suffixes, syllabic patterns, protected sequences) are tuples and are
tested in the order listed; pure membership tables are frozensets.
"""

from __future__ import annotations

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Orthographic tables
# ---------------------------------------------------------------------------

VOWEL_LETTERS = frozenset("aeiouy")

DIPHTHONG_LETTERS = frozenset(
    {
        "ai", "au", "ay", "ea", "ee", "ei", "ey", "ia", "ie", "oa",
        "oe", "oi", "oo", "ou", "ow", "oy", "ua", "ue", "ui",
    }
)  # fmt: skip

R_COLORED_LETTERS = frozenset({"ar", "er", "ir", "or", "ur", "yr"})

LETTER_CLUSTERS = frozenset(
    {
        # l-blends
        "bl", "cl", "fl", "gl", "pl", "sl", "dl", "kl", "ml", "vl",
        # r-blends
        "br", "cr", "dr", "fr", "gr", "pr", "tr", "sr", "wr",
        # s-blends
        "sc", "sk", "sm", "sn", "sp", "st", "sw", "sh", "sch", "squ", "str",
        # digraphs and trigraphs
        "ch", "th", "wh", "ph", "gh", "ng", "nk", "tch", "dge", "qu", "ck",
        "mn", "gn", "kn", "ps", "pt", "ts", "dz", "ds", "ms", "ns", "rs", "ls",
    }
)  # fmt: skip

# Word-final consonant + "le" (and a few silent-e endings) treated as a
# separate trailing syllable.
SYLLABIC_SUFFIXES = (
    "ble", "cle", "dle", "fle", "gle", "kle", "ple", "tle", "zle",
    "me", "ne", "se",
)  # fmt: skip

# Letter sequences a syllable boundary must never fall inside.
PROTECTED_SEQUENCES = (
    "ough", "augh", "eigh", "igh", "ought", "tough", "through",
    "though", "thought", "bough", "dough", "plough",
)  # fmt: skip

SPECIAL_SUFFIXES = (
    "tion", "sion", "cian", "ture", "sure", "ough", "augh", "eigh",
    "ing", "ly", "ment", "ness", "ful", "less", "able", "ible",
    "ous", "ive", "ize", "ise", "ify",
)  # fmt: skip

# ---------------------------------------------------------------------------
# Phonetic tables
# ---------------------------------------------------------------------------

PRIMARY_STRESS = "ˈ"
SECONDARY_STRESS = "ˌ"
STRESS_MARKERS = frozenset({PRIMARY_STRESS, SECONDARY_STRESS})

LONG_VOWELS = frozenset(
    {
        # long vowels
        "ɑː", "ɔː", "ɜː", "iː", "uː",
        # diphthongs
        "eɪ", "aɪ", "ɔɪ", "aʊ", "əʊ", "oʊ", "ɪə", "eə", "ʊə",
    }
)  # fmt: skip

R_COLORED_VOWELS = frozenset({"ɑr", "ɔr", "ɜr", "ɪr", "ʊr", "ər", "ɛr"})

# Two-symbol vowel nuclei, matched before single symbols.
DOUBLE_VOWELS = LONG_VOWELS | R_COLORED_VOWELS

SHORT_VOWELS = frozenset(
    {"æ", "ʌ", "ə", "ɒ", "ɪ", "ʊ", "e", "ɑ", "ɛ", "i", "u", "o", "ɔ", "a", "ɜ", "ɐ"}
    | {"ɚ", "ɝ"}
)

# Onset clusters kept whole by the tokenizer and the phonetic boundary policy.
# The single symbols θ ð ʃ ʒ are inventory only: both lookups match windows of
# two or more symbols, so they never fire.
PHONEME_CLUSTERS = frozenset(
    {
        "tʃ", "dʒ", "θ", "ð", "ʃ", "ʒ", "ts", "dz", "tr", "dr", "kw", "gw",
        "pl", "pr", "kl", "kr", "bl", "br", "gl", "gr", "st", "sp", "sk",
        "sw", "tw", "dw", "qu",
    }
)  # fmt: skip

# Loose vowel inventory for the raw-string fallback splitter. It mixes
# Latin letters with IPA so that badly formed transcriptions still split.
FALLBACK_VOWEL_SOUNDS = frozenset(
    {
        "a", "e", "i", "o", "u", "æ", "ɑ", "ʌ", "ə", "ɚ", "ɪ", "ɛ", "ɜ",
        "ʊ", "ɔ", "eɪ", "aɪ", "ɔɪ", "aʊ", "oʊ", "ju",
    }
)  # fmt: skip

# Kokoro/misaki shorthand symbols mapped back to the inventory above.
KOKORO_SHORTHAND = MappingProxyType(
    {
        "A": "eɪ",
        "I": "aɪ",
        "O": "oʊ",
        "Q": "əʊ",
        "W": "aʊ",
        "Y": "ɔɪ",
        "ʤ": "dʒ",
        "ʧ": "tʃ",
        "ᵊ": "ə",
        "ᵻ": "ɪ",
    }
)


def is_vowel_letter(letter: str, index: int) -> bool:
    """Return True if ``letter`` is a vowel at ``index`` of its word.

    ``y`` only counts as a vowel when it is not the first letter.
    """
    letter = letter.lower()
    if letter == "y":
        return index > 0
    return letter in VOWEL_LETTERS
