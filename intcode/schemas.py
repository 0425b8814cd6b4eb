from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))


class RunReport(_Report):
    result: int
    outputs: list[int] = Field(default_factory=list)
    steps: int = Field(ge=0)
    halted: bool
    memory_size: int = Field(ge=0)


class SearchResult(_Report):
    noun: int = Field(ge=0)
    verb: int = Field(ge=0)
    target: int
    trials: int = Field(ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def answer(self) -> int:
        return 100 * self.noun + self.verb
