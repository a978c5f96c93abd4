"""
Teste do locate_patterns.

Testa:
1. Ordenação por posição inicial
2. Desempate pela ordem dos padrões
3. Offsets 1-based inclusivos
4. Padrões inválidos
"""

import re
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dejt.parsing import InvalidPatternError, Match, compile_pattern, locate_patterns


TEXT = "Processo A Intimado(s) x Processo B Intimado(s) y"


def test_offsets_are_one_based_inclusive():
    matches = locate_patterns("abc Processo", ["Processo"])

    assert matches == [Match(pattern="Processo", start=5, end=12)]
    assert "abc Processo"[slice(*matches[0].slice)] == "Processo"


def test_results_sorted_by_start():
    matches = locate_patterns(TEXT, [r"Intimado\(s\)", "Processo"])

    starts = [m.start for m in matches]
    assert starts == sorted(starts)
    assert [m.pattern for m in matches] == [
        "Processo", r"Intimado\(s\)", "Processo", r"Intimado\(s\)",
    ]


def test_each_pattern_keeps_its_own_occurrences():
    """O resultado combinado contém exatamente os matches de cada padrão isolado."""
    patterns = ["Processo", r"Intimado\(s\)", r"\w+"]
    combined = locate_patterns(TEXT, patterns)

    for pattern in patterns:
        alone = locate_patterns(TEXT, [pattern])
        assert [m for m in combined if m.pattern == pattern] == alone
        expected = [(m.start() + 1, m.end()) for m in re.finditer(pattern, TEXT)]
        assert [(m.start, m.end) for m in alone] == expected


def test_ties_keep_pattern_order():
    text = "Processo Nº 1"

    first = locate_patterns(text, ["Proc", "Processo"])
    assert [(m.pattern, m.start, m.end) for m in first] == [
        ("Proc", 1, 4),
        ("Processo", 1, 8),
    ]

    second = locate_patterns(text, ["Processo", "Proc"])
    assert [m.pattern for m in second] == ["Processo", "Proc"]


def test_overlaps_across_patterns_are_kept():
    matches = locate_patterns("Processo", ["Processo", "cess"])

    assert [(m.pattern, m.start, m.end) for m in matches] == [
        ("Processo", 1, 8),
        ("cess", 4, 7),
    ]


def test_zero_width_match():
    matches = locate_patterns("abc", ["^"])

    assert matches == [Match(pattern="^", start=1, end=0)]


def test_no_match_returns_empty():
    assert locate_patterns(TEXT, ["Sentença"]) == []
    assert locate_patterns("", ["Processo"]) == []


def test_accepts_compiled_patterns():
    regex = re.compile("processo", re.IGNORECASE)
    matches = locate_patterns(TEXT, [regex])

    assert len(matches) == 2
    assert all(m.pattern == "processo" for m in matches)


def test_invalid_pattern_raises():
    with pytest.raises(InvalidPatternError) as exc_info:
        locate_patterns(TEXT, ["Processo", "(sem fechar"])

    assert exc_info.value.pattern == "(sem fechar"
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value.__cause__, re.error)


def test_compile_pattern_passes_compiled_through():
    regex = re.compile("x")
    assert compile_pattern(regex) is regex
