from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Result at address 0 is 100*noun + verb; cells 20 and 21 are scratch
# written past the end of the loaded program.
NOUN_VERB_PROGRAM = "1101,0,0,20,1002,1,100,21,1,21,2,0,99"


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def noun_verb_program() -> str:
    return NOUN_VERB_PROGRAM


@pytest.fixture()
def program_file(tmp_path: Path) -> Callable[[str], Path]:
    def write(text: str) -> Path:
        p = tmp_path / "program.txt"
        p.write_text(text, encoding="utf-8")
        return p

    return write
