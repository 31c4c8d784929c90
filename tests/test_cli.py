import io
import json
import logging

import pytest

from gematrix.__main__ import build_parser, main

from _hebrew import SHALOM_VOWELIZED

TEXT = "נכנס יין יצא סוד"

def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err

def test_calculate(capsys):
    assert run(capsys, "calculate", "שלום") == (0, "376\n", "")

def test_calculate_phrase_from_several_arguments(capsys):
    code, out, _ = run(capsys, "calculate", "בעזרת", "השם")
    assert out == "1024\n"

def test_calculate_with_method(capsys):
    code, out, _ = run(capsys, "-m", "gadol", "calculate", "שלום")
    assert out == "936\n"

def test_calculate_verbose(capsys):
    code, out, _ = run(capsys, "-v", "calculate", "סוד")
    assert out == "Gematria value for 'סוד': 70\n"

def test_calculate_json(capsys):
    code, out, _ = run(capsys, "-m", "katan", "calculate", "שלום", "--json")
    assert json.loads(out) == {"text": "שלום", "method": "katan", "value": 16}

def test_count_nikkud_flag(capsys):
    code, out, _ = run(capsys, "--count-nikkud", "calculate", SHALOM_VOWELIZED)
    assert out == "380\n"

def test_no_count_nikkud_overrides_environment(capsys, monkeypatch):
    monkeypatch.setenv("GEMATRIX_COUNT_NIKKUD", "1")
    assert run(capsys, "calculate", SHALOM_VOWELIZED)[1] == "380\n"
    assert run(capsys, "--no-count-nikkud", "calculate", SHALOM_VOWELIZED)[1] == "376\n"

def test_distinct_vowelizations_overrides_environment(capsys, monkeypatch):
    monkeypatch.setenv("GEMATRIX_DISTINCT_VOWELIZATIONS", "0")
    code, out, _ = run(capsys, "--distinct-vowelizations", "group-words", SHALOM_VOWELIZED + " שלום", "--counts")
    assert out == f" 376 -> {SHALOM_VOWELIZED} (1), שלום (1)\n"

def test_verbose_enables_debug_logging(capsys):
    run(capsys, "-v", "calculate", "סוד")
    assert logging.getLogger("gematrix").level == logging.DEBUG

def test_unknown_method_exits_2(capsys):
    code, out, err = run(capsys, "-m", "nope", "calculate", "שלום")
    assert code == 2
    assert out == ""
    assert "Unknown gematria method" in err

def test_method_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("GEMATRIX_METHOD", "katan")
    code, out, _ = run(capsys, "calculate", "שלום")
    assert out == "16\n"

def test_bad_environment_exits_2(capsys, monkeypatch):
    monkeypatch.setenv("GEMATRIX_COUNT_NIKKUD", "sometimes")
    code, out, err = run(capsys, "calculate", "שלום")
    assert code == 2
    assert "GEMATRIX_COUNT_NIKKUD" in err

def test_group_words(capsys):
    code, out, _ = run(capsys, "group-words", TEXT)
    assert code == 0
    assert out.splitlines() == [" 180 -> נכנס", "  70 -> יין, סוד", " 101 -> יצא"]

def test_group_words_shared_sorted_with_counts(capsys):
    code, out, _ = run(capsys, "group-words", TEXT + " יין", "--shared", "--counts")
    assert out.splitlines() == ["  70 -> יין (2), סוד (1)"]

def test_group_words_sort_by_value(capsys):
    code, out, _ = run(capsys, "group-words", TEXT, "--sort", "value")
    assert [line.split("->")[0].strip() for line in out.splitlines()] == ["70", "101", "180"]

def test_group_words_verbose(capsys):
    code, out, _ = run(capsys, "-v", "group-words", "יין סוד")
    assert out == "Gematria value   70: יין, סוד\n"

def test_group_words_json(capsys):
    code, out, _ = run(capsys, "group-words", "יין סוד יין", "--json")
    assert json.loads(out) == [
        {"value": 70, "words": [{"word": "יין", "count": 2}, {"word": "סוד", "count": 1}]},
    ]

def test_group_words_merge_vowelizations(capsys):
    code, out, _ = run(capsys, "--merge-vowelizations", "group-words", SHALOM_VOWELIZED + " שלום", "--counts")
    assert out == " 376 -> שלום (2)\n"

def test_group_words_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("יין\nסוד\n"))
    code, out, _ = run(capsys, "group-words")
    assert out == "  70 -> יין, סוד\n"

def test_group_words_from_file(capsys, tmp_path):
    p = tmp_path / "t.tsv"
    p.write_text("Book\t1\t1\tיין\nBook\t1\t2\tסוד\n", encoding="utf-8")
    code, out, _ = run(capsys, "group-words", "--input", str(p), "--format", "tsv")
    assert out == "  70 -> יין, סוד\n"

def test_missing_input_exits_1(capsys, tmp_path):
    code, out, err = run(capsys, "group-words", "--input", str(tmp_path / "missing.txt"))
    assert code == 1
    assert "Input file not found" in err

def test_search_match(capsys):
    code, out, _ = run(capsys, "search-match", "יין", TEXT)
    assert out.splitlines() == ["יין", "סוד"]

def test_search_match_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    code, out, _ = run(capsys, "search-match", "סוד")
    assert out.splitlines() == ["יין", "סוד"]

def test_methods(capsys):
    code, out, _ = run(capsys, "methods")
    keys = [line.split()[0] for line in out.splitlines()]
    assert keys == ["hechrechi", "gadol", "katan", "siduri", "boneh", "kidmi", "musafi", "milui"]

def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])

def test_serve_defaults():
    args = build_parser().parse_args(["serve"])
    assert (args.host, args.port, args.reload) == ("127.0.0.1", 8000, False)
