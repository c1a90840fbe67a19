from pathlib import Path

import pytest
from wordlcrush.datasets import load_words, pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("CRANE\r\n  slate \n\ncranes\nsl4te\ncrane\ntrace\n", encoding="utf-8")
    assert load_words(p) == ["crane", "slate", "trace"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")


def test_validate_wordlists_happy_path(tmp_path: Path):
    pos = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    _write(pos, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(str(pos), str(allw))
    assert rep["passed"] is True
    assert rep["possible_subset_allowed"] is True
    assert rep["possible"]["count"] == 3 and rep["allowed"]["count"] == 5
    assert len(rep["possible"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "possible=3" in s and "possible⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_invalid_and_duplicates(tmp_path: Path):
    pos = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    pos.write_text("crane\ncranes\n???\ncrane\n", encoding="utf-8")
    _write(allw, ["crane", "slate"])

    rep = validate_wordlists(str(pos), str(allw))
    assert rep["passed"] is False
    assert rep["possible"]["invalid_lines"] == 2
    assert rep["possible"]["duplicates"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    pos = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    _write(pos, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])

    rep = validate_wordlists(str(pos), str(allw))
    assert rep["passed"] is False
    assert rep["possible_subset_allowed"] is False
    assert any("subset" in msg and "raise" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    allw = tmp_path / "allowed.txt"
    _write(allw, ["crane"])
    rep = validate_wordlists(str(tmp_path / "missing.txt"), str(allw))
    assert rep["passed"] is False
    assert rep["possible"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
