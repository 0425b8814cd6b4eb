from __future__ import annotations

import json
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run(args: list[str], *, extra_env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env.pop("INTCODE_MAX_STEPS", None)
    env.pop("INTCODE_MAX_MEMORY", None)
    env.update(extra_env or {})
    return subprocess.run(
        [sys.executable, "-m", "intcode", *args],
        cwd=PROJECT_ROOT,
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )


def test_cli_run_prints_address_zero(program_file: Callable[[str], Path]) -> None:
    p = program_file("1,9,10,3,2,3,11,0,99,30,40,50\n")
    proc = _run(["run", str(p)])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines() == ["3500"]


def test_cli_run_with_patch_and_input(program_file: Callable[[str], Path]) -> None:
    p = program_file("3,0,4,0,1,0,0,0,0\n")
    proc = _run(["run", str(p), "--input", "21", "--patch", "8=99"])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines() == ["42", "21"]


def test_cli_run_json(program_file: Callable[[str], Path]) -> None:
    p = program_file("104,7,99")
    proc = _run(["run", str(p), "--json"])
    assert proc.returncode == 0, proc.stderr
    report = json.loads(proc.stdout)
    assert report["outputs"] == [7]
    assert report["result"] == 104
    assert report["halted"] is True


def test_cli_search(program_file: Callable[[str], Path], noun_verb_program: str) -> None:
    p = program_file(noun_verb_program)
    proc = _run(["search", str(p), "--target", "1202"])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "1202"

    proc = _run(["search", str(p), "--target", "1202", "--json"])
    assert proc.returncode == 0, proc.stderr
    assert json.loads(proc.stdout)["noun"] == 12


def test_cli_fault_exit_code(program_file: Callable[[str], Path]) -> None:
    p = program_file("1,0,0,0,50")
    proc = _run(["run", str(p)])
    assert proc.returncode == 1
    assert "unknown opcode 50" in proc.stderr


def test_cli_load_error(program_file: Callable[[str], Path]) -> None:
    p = program_file("1,,2")
    proc = _run(["run", str(p)])
    assert proc.returncode == 1
    assert "token 1" in proc.stderr


def test_cli_no_solution(program_file: Callable[[str], Path], noun_verb_program: str) -> None:
    p = program_file(noun_verb_program)
    proc = _run(["search", str(p), "--target", "1202", "--low", "20", "--high", "30"])
    assert proc.returncode == 1
    assert "no noun/verb" in proc.stderr


def test_cli_bad_patch_is_usage_error(program_file: Callable[[str], Path]) -> None:
    p = program_file("99")
    proc = _run(["run", str(p), "--patch", "oops"])
    assert proc.returncode == 2


def test_cli_directory_is_usage_error(tmp_path: Path) -> None:
    proc = _run(["run", str(tmp_path)])
    assert proc.returncode == 2
    assert "not a file" in proc.stderr


def test_cli_memory_ceiling_from_env(program_file: Callable[[str], Path]) -> None:
    p = program_file("1101,1,1,100,99")
    proc = _run(["run", str(p)], extra_env={"INTCODE_MAX_MEMORY": "64"})
    assert proc.returncode == 1
    assert "invalid memory address 100" in proc.stderr
