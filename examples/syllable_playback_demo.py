#!/usr/bin/env python3
"""
Syllable playback example: split headwords and their transcriptions.

Each word is split into orthographic syllables and its transcription is cut
into the same number of pieces, ready to be spoken one syllable at a time.
The last two rows mimic a bulk-import sheet with pre-split syllables.

Usage:
    python examples/syllable_playback_demo.py
"""

import logging

from pysyllaba import PipelineConfig, SyllablePipeline, WordEntry

WORDS = [
    WordEntry(word="happy", phonetic="/ˈhæpi/"),
    WordEntry(word="radio", phonetic="/ˈreɪdiəʊ/"),
    WordEntry(word="window", phonetic="/ˈwɪndəʊ/"),
    WordEntry(word="about", phonetic="/əˈbaʊt/"),
    WordEntry(word="information", phonetic="/ˌɪnfəˈmeɪʃən/"),
    WordEntry(word="here", phonetic="/hɪə/", syllables=("he", "re")),
    WordEntry(word="Doughnut", phonetic="/ˈdəʊnʌt/", syllables=("Dough", "nut")),
]


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pipeline = SyllablePipeline(PipelineConfig(g2p="none", return_trace=True))

    for result in pipeline.run_many(WORDS):
        print(f"{result.word} /{result.phonetic}/  [{result.tier}]")
        for index, (syllable, sound) in enumerate(result.pairs(), start=1):
            print(f"  {index}. {syllable:<8} {sound}")
        for warning in result.trace.warnings if result.trace else []:
            print(f"  ! {warning}")


if __name__ == "__main__":
    main()
