from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from intcode.errors import ExecutionError, NoSolutionError
from intcode.machine import IntcodeMachine
from intcode.schemas import SearchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NounVerb:
    noun: int
    verb: int

    @property
    def answer(self) -> int:
        return 100 * self.noun + self.verb


def _trials(
    machine: IntcodeMachine, *, target: int, low: int, high: int
) -> Iterator[tuple[int, NounVerb]]:
    if low < 0 or low > high:
        raise ValueError(f"invalid search range [{low}, {high}]")
    trials = 0
    for noun in range(low, high + 1):
        for verb in range(low, high + 1):
            trials += 1
            machine.reset()
            machine.set_noun_verb(noun, verb)
            try:
                result = machine.execute()
            except ExecutionError as e:
                # A faulting trial is not a candidate.
                logger.debug("noun=%d verb=%d faulted: %s", noun, verb, e)
                continue
            if result == target:
                yield trials, NounVerb(noun=noun, verb=verb)


def find_noun_verb(machine: IntcodeMachine, target: int, *, low: int = 0, high: int = 99) -> NounVerb:
    """Return the first (noun, verb) pair whose run leaves `target` at address 0.

    The machine is reset before every trial and left holding the state of
    the matching run.
    """
    result = search(machine, target, low=low, high=high)
    return NounVerb(noun=result.noun, verb=result.verb)


def find_all_noun_verb(
    machine: IntcodeMachine, target: int, *, low: int = 0, high: int = 99
) -> list[NounVerb]:
    return [hit for _, hit in _trials(machine, target=target, low=low, high=high)]


def search(machine: IntcodeMachine, target: int, *, low: int = 0, high: int = 99) -> SearchResult:
    for trials, hit in _trials(machine, target=target, low=low, high=high):
        logger.info("found noun=%d verb=%d after %d trials", hit.noun, hit.verb, trials)
        return SearchResult(noun=hit.noun, verb=hit.verb, target=target, trials=trials)
    raise NoSolutionError(f"no noun/verb in [{low}, {high}] produces {target}")
