import sys
from types import SimpleNamespace

import pytest

from pysyllaba import PipelineConfig, SyllablePipeline, WordEntry
from pysyllaba.stages.g2p.kokorog2p import KokoroG2PAdapter
from pysyllaba.stages.g2p.noop import NoopG2PAdapter
from pysyllaba.stages.syllabifiers.supplied import (
    SuppliedSyllabifier,
    parse_syllable_list,
    recase_syllables,
)
from pysyllaba.types import Trace


class DummyG2P:
    def __init__(self, phonetic: str | None = "/ˈhæpi/") -> None:
        self.phonetic = phonetic
        self.calls: list[str] = []

    def transcribe(self, word, cfg, trace):
        _ = cfg, trace
        self.calls.append(word)
        return self.phonetic


def _fake_kokorog2p(phonemes: str, calls: list[str]):
    def phonemize_to_result(text, **kwargs):
        calls.append(text)
        return SimpleNamespace(phonemes=phonemes, warnings=["approximate"])

    return SimpleNamespace(phonemize_to_result=phonemize_to_result, __version__="1.0")


@pytest.fixture
def pipeline():
    return SyllablePipeline(PipelineConfig(g2p="none"))


def test_run_aligns_transcription(pipeline):
    result = pipeline.run("happy", "/ˈhæpi/")

    assert result.syllables == ["hap", "py"]
    assert result.phonetic == "ˈhæpi"
    assert result.phonetic_syllables == ["ˈhæ", "pi"]
    assert result.tier == "strict"
    assert result.pairs() == [("hap", "ˈhæ"), ("py", "pi")]
    assert result.trace is None


def test_supplied_syllables_set_target_count(pipeline):
    result = pipeline.run("radio", "/ˈreɪdiəʊ/", syllables="ra, dio")

    assert result.syllables == ["ra", "dio"]
    assert result.phonetic_syllables == ["ˈreɪ", "diəʊ"]


def test_supplied_syllables_take_headword_casing(pipeline):
    result = pipeline.run("Happy", syllables=["hap", "py"])
    assert result.syllables == ["Hap", "py"]


def test_mismatched_supplied_syllables_keep_their_count(pipeline):
    result = pipeline.run(
        "example", "/ɪɡˈzɑːmpl/", syllables="ex,am,pel", return_trace=True
    )

    assert result.syllables == ["ex", "am", "pel"]
    assert result.phonetic_syllables == ["ɪɡˈ", "zɑː", "mpl"]
    assert result.tier == "equal_split"
    assert any("do not spell" in warning for warning in result.trace.warnings)


def test_missing_transcription_without_g2p(pipeline):
    result = pipeline.run("happy")

    assert result.phonetic == ""
    assert result.phonetic_syllables == []
    assert result.tier == "none"
    assert result.pairs() == [("hap", ""), ("py", "")]


def test_injected_g2p_fills_missing_transcription():
    g2p = DummyG2P()
    pipeline = SyllablePipeline(PipelineConfig(g2p="kokorog2p"), g2p=g2p)

    result = pipeline.run("happy")

    assert g2p.calls == ["happy"]
    assert result.phonetic_syllables == ["ˈhæ", "pi"]


def test_g2p_not_called_when_transcription_given():
    g2p = DummyG2P()
    pipeline = SyllablePipeline(PipelineConfig(g2p="kokorog2p"), g2p=g2p)

    pipeline.run("happy", "/ˈhæpi/")

    assert g2p.calls == []


def test_fallback_is_reported_in_trace(pipeline):
    result = pipeline.run("here", "/hɪə/", syllables="he,re", return_trace=True)

    assert result.phonetic_syllables == ["hɪ", "ə"]
    assert result.tier == "vowel_scan"
    assert any("vowel_scan" in warning for warning in result.trace.warnings)


def test_trace_records_stages(pipeline):
    result = pipeline.run("happy", "/ˈhæpi/", return_trace=True)

    stages = [event.stage for event in result.trace.events]
    assert stages == ["syllabify", "align"]
    assert result.trace.events[1].details["tier"] == "strict"
    assert result.trace.tokens is not None
    assert len(result.trace.tokens) == 5


def test_run_many(pipeline):
    results = pipeline.run_many(
        ["open", WordEntry(word="happy", phonetic="/ˈhæpi/", syllables=("ha", "ppy"))]
    )

    assert [r.syllables for r in results] == [["op", "en"], ["ha", "ppy"]]
    assert results[1].phonetic_syllables == ["ˈhæ", "pi"]


def test_call_is_run(pipeline):
    assert pipeline("open").syllables == ["op", "en"]


def test_to_dict(pipeline):
    data = pipeline.run("happy", "/ˈhæpi/").to_dict()
    assert data == {
        "word": "happy",
        "syllables": ["hap", "py"],
        "phonetic": "ˈhæpi",
        "phonetic_syllables": ["ˈhæ", "pi"],
        "tier": "strict",
    }


@pytest.mark.parametrize("word", ["", "   "])
def test_empty_word_rejected(pipeline, word):
    with pytest.raises(ValueError, match="non-empty"):
        pipeline.run(word)


def test_invalid_config_rejected():
    with pytest.raises(ValueError, match="g2p"):
        SyllablePipeline(PipelineConfig(g2p="bogus"))
    with pytest.raises(ValueError, match="not supported"):
        SyllablePipeline(PipelineConfig(lang="fr"))


def test_invalid_override_rejected(pipeline):
    with pytest.raises(ValueError, match="not supported"):
        pipeline.run("happy", lang="de")


def test_auto_g2p_without_kokorog2p(monkeypatch):
    monkeypatch.setattr("importlib.util.find_spec", lambda name: None)
    pipeline = SyllablePipeline(PipelineConfig(g2p="auto"))

    assert isinstance(pipeline._resolve_g2p(pipeline.config), NoopG2PAdapter)
    assert pipeline.run("happy").phonetic_syllables == []


class TestKokoroG2PAdapter:
    def test_transcribe_normalizes_shorthand(self, monkeypatch):
        calls: list[str] = []
        monkeypatch.setitem(sys.modules, "kokorog2p", _fake_kokorog2p("ˈAbᵊl", calls))
        trace = Trace()

        phonetic = KokoroG2PAdapter().transcribe("able", PipelineConfig(), trace)

        assert phonetic == "/ˈeɪbəl/"
        assert calls == ["able"]
        assert trace.warnings == ["approximate"]

    def test_results_are_cached(self, monkeypatch, tmp_path):
        calls: list[str] = []
        monkeypatch.setitem(sys.modules, "kokorog2p", _fake_kokorog2p("hˈæpi", calls))
        cfg = PipelineConfig(cache_dir=str(tmp_path))

        first = KokoroG2PAdapter().transcribe("happy", cfg, Trace())
        trace = Trace()
        second = KokoroG2PAdapter().transcribe("happy", cfg, trace)

        assert first == second == "/hˈæpi/"
        assert calls == ["happy"]
        assert list(tmp_path.glob("*.json"))
        assert [(e.stage, e.details["hit"]) for e in trace.events] == [("cache", True)]

    def test_missing_backend(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "kokorog2p", None)
        with pytest.raises(RuntimeError, match="kokorog2p is not installed"):
            KokoroG2PAdapter().transcribe("happy", PipelineConfig(), Trace())

    def test_pipeline_uses_adapter(self, monkeypatch):
        calls: list[str] = []
        monkeypatch.setitem(sys.modules, "kokorog2p", _fake_kokorog2p("ˈhæpi", calls))
        pipeline = SyllablePipeline(PipelineConfig(g2p="kokorog2p"))

        result = pipeline.run("happy")

        assert result.phonetic == "ˈhæpi"
        assert result.phonetic_syllables == ["ˈhæ", "pi"]


class TestSuppliedSyllables:
    @pytest.mark.parametrize(
        ("cell", "expected"),
        [
            ("hap, py", ("hap", "py")),
            ("ra di o", ("ra", "di", "o")),
            ("happy", ("happy",)),
            (" hap ,, py ", ("hap", "py")),
            (["hap", " py "], ("hap", "py")),
            ("", ()),
            (None, ()),
        ],
    )
    def test_parse_syllable_list(self, cell, expected):
        assert parse_syllable_list(cell) == expected

    def test_recase_syllables(self):
        assert recase_syllables("HaPpy", ["hap", "py"]) == ["HaP", "py"]
        assert recase_syllables("happy", ["hap", "pi"]) is None

    def test_supplied_syllabifier_without_syllables(self):
        syllabifier = SuppliedSyllabifier()
        entry = WordEntry(word="open")
        assert syllabifier.syllabify(entry, PipelineConfig(), Trace()) == ["op", "en"]
