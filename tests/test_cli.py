from pathlib import Path

import pytest
from apps.cli.run import main

POSSIBLE = ["crane", "slate", "trace", "crate", "bills", "fills", "hills"]
ALLOWED = POSSIBLE + ["fhkmb"]


@pytest.fixture
def lists(tmp_path: Path):
    pos = tmp_path / "possible.txt"
    allw = tmp_path / "allowed.txt"
    pos.write_text("\n".join(POSSIBLE) + "\n", encoding="utf-8")
    allw.write_text("\n".join(ALLOWED) + "\n", encoding="utf-8")
    return ["--possible", str(pos), "--allowed", str(allw)]


def test_cli_batch(lists, tmp_path: Path, capsys):
    out_csv = tmp_path / "run.csv"
    assert main(lists + ["--csv", str(out_csv)]) == 0
    out = capsys.readouterr().out
    assert "possible⊆allowed=True" in out
    assert f"games={len(POSSIBLE)}" in out and "failed=0" in out
    assert out_csv.exists()


def test_cli_single_secret(lists, capsys):
    assert main(lists + ["--secret", "HILLS", "--hard"]) == 0
    out = capsys.readouterr().out
    assert "hills" in out and "Solved in" in out


def test_cli_sample(lists, capsys):
    assert main(lists + ["--sample", "3", "--seed", "1"]) == 0
    assert "games=3" in capsys.readouterr().out


def test_cli_rejects_unknown_secret(lists):
    assert main(lists + ["--secret", "zzzzz"]) == 2


def test_cli_strict_validation(tmp_path: Path):
    pos = tmp_path / "possible.txt"
    allw = tmp_path / "allowed.txt"
    pos.write_text("crane\nslate\n", encoding="utf-8")
    allw.write_text("crane\n", encoding="utf-8")
    assert main(["--possible", str(pos), "--allowed", str(allw), "--strict"]) == 2


def test_cli_missing_file(tmp_path: Path):
    assert main(["--possible", str(tmp_path / "a.txt"), "--allowed", str(tmp_path / "b.txt")]) == 2
