from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from intcode.schemas import RunReport, SearchResult


def test_search_result_json_includes_answer() -> None:
    r = SearchResult(noun=12, verb=2, target=19690720, trials=1203)
    data = json.loads(r.to_json())
    assert data == {"answer": 1202, "noun": 12, "target": 19690720, "trials": 1203, "verb": 2}


def test_run_report_json_is_stable() -> None:
    r = RunReport(result=3500, outputs=[1, 2], steps=3, halted=True, memory_size=12)
    assert r.to_json() == (
        '{"halted":true,"memory_size":12,"outputs":[1,2],"result":3500,"steps":3}'
    )


def test_run_report_rejects_negative_steps() -> None:
    with pytest.raises(ValidationError):
        RunReport(result=0, steps=-1, halted=False, memory_size=1)
