"""Tests for the entropy estimator."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import math

import pytest

from inspectdata import EntropyEstimator, shannon_entropy, metric_entropy


SAMPLES = [
    "a", "aab", "abcd", "aaaa", "My string", "bob@mail.com",
    "141a83c3-7f41-4403-9aa2-08a2208b7aa2", "aZ3$kQ9!mP1@xR5&vT8#",
    "ééé", "日本語テキスト",
]


# ── Shannon entropy ──────────────────────────────────────────────────

def test_shannon_empty_is_zero():
    assert shannon_entropy("") == 0.0


def test_shannon_single_symbol_is_zero():
    assert shannon_entropy("aaaa") == 0.0
    assert math.copysign(1.0, shannon_entropy("aaaa")) == 1.0  # not -0.0


def test_shannon_known_values():
    assert shannon_entropy("abcd") == 2.0
    assert shannon_entropy("aab") == 0.918
    assert shannon_entropy("aZ3$kQ9!mP1@xR5&vT8#") == 4.322


def test_shannon_counts_characters_not_bytes():
    # "é" is two bytes in UTF-8 but one symbol
    assert shannon_entropy("éa") == 1.0
    assert shannon_entropy("ééé") == 0.0


def test_shannon_never_negative():
    for s in SAMPLES:
        assert shannon_entropy(s) >= 0.0


# ── Metric entropy ───────────────────────────────────────────────────

def test_metric_empty_is_zero():
    assert metric_entropy("") == 0.0


def test_metric_known_values():
    assert metric_entropy("abcd") == 0.5
    assert metric_entropy("aab") == 0.306
    assert metric_entropy("éa") == 0.5
    assert metric_entropy("aZ3$kQ9!mP1@xR5&vT8#") == 0.216
    assert metric_entropy("aZ3$kQ9!mP1@xR5&vT8#nW2^") == 0.191


def test_metric_is_rounded_ratio_of_shannon():
    for s in SAMPLES:
        expected = math.floor(shannon_entropy(s) / len(s) * 1000 + 0.5) / 1000
        assert metric_entropy(s) == expected
        assert 0.0 <= metric_entropy(s) <= shannon_entropy(s)


def test_repetition_lowers_metric_entropy():
    assert metric_entropy("abcdabcdabcdabcd") < metric_entropy("abcd")


def test_deterministic():
    for s in SAMPLES:
        assert metric_entropy(s) == metric_entropy(s)


# ── Precision ────────────────────────────────────────────────────────

def test_custom_precision():
    assert EntropyEstimator(10).shannon_entropy("aab") == 0.9
    assert EntropyEstimator(100).shannon_entropy("aab") == 0.92
    assert EntropyEstimator(100).precision == 100


def test_invalid_precision():
    with pytest.raises(ValueError):
        EntropyEstimator(0)
    with pytest.raises(ValueError):
        EntropyEstimator(-1000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
