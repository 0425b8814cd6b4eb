from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from intcode.errors import LoadError, ProgramParseError


@dataclass(frozen=True, slots=True)
class Program:
    """Immutable load-time image of an Intcode program."""

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise LoadError("program is empty")

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Program:
        return cls(values=tuple(int(v) for v in values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def to_text(self) -> str:
        return ",".join(str(v) for v in self.values)


_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_program(text: str) -> Program:
    raw = text.strip()
    if not raw:
        raise ProgramParseError("program text is empty")

    values: list[int] = []
    for i, token in enumerate(raw.split(",")):
        tok = token.strip()
        if not tok:
            raise ProgramParseError("empty token", index=i, token=token)
        if _INT_RE.fullmatch(tok) is None:
            raise ProgramParseError(f"not an integer: {tok!r}", index=i, token=tok)
        values.append(int(tok))
    return Program.from_values(values)


def load_program(path: str | Path) -> Program:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ProgramParseError(f"program is not valid UTF-8: {e}") from e
    return parse_program(text)
