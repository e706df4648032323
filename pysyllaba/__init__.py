"""pysyllaba - English syllabification and phonetic syllable alignment."""

from .alignment import align, align_phonetic, align_strict
from .fallback import fallback
from .orthography import syllabify
from .phonemes import tokenize
from .pipeline import SyllablePipeline
from .pipeline_config import PipelineConfig
from .types import Phoneme, PhonemeToken, Stress, SyllableResult, WordEntry

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "SyllablePipeline",
    "PipelineConfig",
    "SyllableResult",
    "WordEntry",
    "Phoneme",
    "PhonemeToken",
    "Stress",
    "align",
    "align_phonetic",
    "align_strict",
    "fallback",
    "syllabify",
    "tokenize",
]
