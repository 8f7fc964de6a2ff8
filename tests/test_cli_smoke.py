from __future__ import annotations

import pytest

from hvengine.cli import build_parser, main


@pytest.fixture
def front_file(tmp_path):
    path = tmp_path / "front.csv"
    path.write_text("# f1,f2\n1.0,2.0\n2.0,1.0\n3.0,3.0\n", encoding="utf-8")
    return path


def test_compute_with_explicit_reference(front_file, capsys):
    assert main(["compute", str(front_file), "--ref", "4", "4"]) == 0
    out = capsys.readouterr().out.strip()
    # (4-1)(4-2) + (4-2)(2-1); (3, 3) is dominated
    assert float(out) == pytest.approx(8.0)


def test_compute_front_only_with_nadir_reference(front_file, capsys):
    assert main(["compute", str(front_file), "--front-only", "--epsilon", "1"]) == 0
    assert float(capsys.readouterr().out.strip()) == pytest.approx(3.0)


def test_compute_with_named_algorithm(front_file, capsys):
    assert main(["compute", str(front_file), "--ref", "4", "4", "--algorithm", "wfg"]) == 0
    assert float(capsys.readouterr().out.strip()) == pytest.approx(8.0)


def test_contributions_lists_every_point(front_file, capsys):
    assert main(["contributions", str(front_file), "--ref", "4", "4"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    values = [float(v) for v in lines[:3]]
    assert values == pytest.approx([2.0, 2.0, 0.0])
    assert lines[3] == "least: 2"
    assert lines[4] == "greatest: 0"


def test_nadir(tmp_path, capsys):
    path = tmp_path / "front.txt"
    path.write_text("1 5\n3 2\n", encoding="utf-8")
    assert main(["nadir", str(path), "--epsilon", "0.5"]) == 0
    assert capsys.readouterr().out.strip() == "3.5 5.5"


def test_invalid_reference_reports_error(front_file, capsys):
    assert main(["compute", str(front_file), "--ref", "2", "2"]) == 2
    assert "Reference point is invalid" in capsys.readouterr().err


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["compute", str(tmp_path / "missing.csv")]) == 2
    assert "does not exist" in capsys.readouterr().err


def test_parser_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["compute", "f.csv", "--algorithm", "hso"])


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
