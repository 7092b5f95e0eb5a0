# tests/test_cli.py

import ast

import pytest

from sfdrsine.cli import main

SMALL = ["--gain-steps", "32", "--phase-steps", "4", "--workers", "1"]

def test_search_prints_two_lines(capsys):
    assert main(["search", *SMALL]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    metric, gain, phase = (float(x) for x in lines[0].split(","))
    assert metric < -60.0
    assert 4096.0 <= gain <= 8192.0
    assert 0.0 <= phase
    samples = ast.literal_eval(lines[1])
    assert isinstance(samples, list) and len(samples) == 16
    assert all(isinstance(v, int) for v in samples)

def test_search_out_txt(tmp_path, capsys):
    out = tmp_path / "best.txt"
    assert main(["search", *SMALL, "--out-txt", str(out)]) == 0
    printed = capsys.readouterr().out.splitlines()
    assert out.read_text(encoding="utf-8").splitlines() == printed[:2]

def test_search_progress_on_stderr(capsys):
    assert main(["search", *SMALL, "--chunk-rows", "8", "--progress"]) == 0
    captured = capsys.readouterr()
    assert "5/5 chunks" in captured.err
    assert len(captured.out.strip().splitlines()) == 2

def test_search_rejects_bad_grid(capsys):
    assert main(["search", "--gain-steps", "0"]) == 1
    assert "Error" in capsys.readouterr().err
    assert main(["search", "--gain-min", "0", "--gain-steps", "4"]) == 1
    assert main(["search", *SMALL, "--chunk-rows", "0"]) == 1

@pytest.mark.parametrize(
    "option,value",
    [("--phase-span", "nan"), ("--gain-span", "inf"), ("--gain-min", "inf"), ("--gain-span", "nan")],
)
def test_search_rejects_non_finite_grid(capsys, option, value):
    assert main(["search", "--gain-steps", "4", "--phase-steps", "2", "--workers", "1", option, value]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert "must be finite" in captured.err
    assert captured.out == ""

def test_eval(capsys):
    assert main(["eval", "--gain", "8119"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].endswith(", 8119, 0")
    assert ast.literal_eval(lines[1])[4] == 8119

def test_eval_rejects_zero_gain(capsys):
    assert main(["eval", "--gain", "0"]) == 1
    assert "Gain must be positive" in capsys.readouterr().err

def test_eval_prints_small_phase_without_exponent(capsys):
    assert main(["eval", "--gain", "8119", "--phase", "0.00001"]) == 0
    first = capsys.readouterr().out.splitlines()[0]
    assert first.endswith(", 8119, 0.00001")
    assert "e" not in first.lower()
