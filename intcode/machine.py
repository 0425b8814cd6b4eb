from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from pathlib import Path

from intcode.errors import AddressError, InputExhausted, InvalidWriteMode, StepLimitExceeded
from intcode.memory import DEFAULT_MAX_MEMORY, Memory
from intcode.opcodes import Instruction, Opcode, ParameterMode, decode
from intcode.program import Program, load_program, parse_program
from intcode.schemas import RunReport

logger = logging.getLogger(__name__)

NOUN_ADDRESS = 1
VERB_ADDRESS = 2
RESULT_ADDRESS = 0

InputProvider = Callable[[], int]


class IntcodeMachine:
    """Intcode interpreter with snapshot/restore semantics.

    The loaded `Program` is never mutated; `reset()` rebuilds working memory
    from it, so one instance can serve any number of patch/execute trials.
    Instances are not thread-safe.
    """

    def __init__(
        self,
        program: Program,
        *,
        input_provider: InputProvider | None = None,
        max_steps: int | None = None,
        max_memory: int = DEFAULT_MAX_MEMORY,
    ) -> None:
        if max_steps is not None and max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self._program = program
        self._input_provider = input_provider
        self._max_steps = max_steps
        self._max_memory = max_memory
        self._memory = Memory(program.values, limit=max_memory)
        self._ip = 0
        self._relative_base = 0
        self._inputs: deque[int] = deque()
        self._outputs: list[int] = []
        self._steps = 0
        self._halted = False

    @classmethod
    def from_text(cls, text: str, **kw) -> IntcodeMachine:
        return cls(parse_program(text), **kw)

    @classmethod
    def from_file(cls, path: str | Path, **kw) -> IntcodeMachine:
        return cls(load_program(path), **kw)

    @property
    def program(self) -> Program:
        return self._program

    @property
    def ip(self) -> int:
        return self._ip

    @property
    def relative_base(self) -> int:
        return self._relative_base

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def outputs(self) -> list[int]:
        return list(self._outputs)

    @property
    def pending_inputs(self) -> list[int]:
        return list(self._inputs)

    def __getitem__(self, address: int) -> int:
        return self.read(address)

    def read(self, address: int) -> int:
        return self._memory.read(address)

    def memory_snapshot(self) -> list[int]:
        return self._memory.snapshot()

    def patch(self, address: int, value: int) -> None:
        self._memory.write(address, int(value))

    def set_noun_verb(self, noun: int, verb: int) -> None:
        self.patch(NOUN_ADDRESS, noun)
        self.patch(VERB_ADDRESS, verb)

    def feed(self, *values: int) -> None:
        self._inputs.extend(int(v) for v in values)

    def feed_all(self, values: Iterable[int]) -> None:
        self.feed(*values)

    def reset(self) -> None:
        self._memory = Memory(self._program.values, limit=self._max_memory)
        self._ip = 0
        self._relative_base = 0
        self._inputs.clear()
        self._outputs.clear()
        self._steps = 0
        self._halted = False
        logger.debug("machine reset (%d words)", len(self._program))

    def execute(self) -> int:
        """Run until halt and return the value at address 0."""
        while self.step():
            pass
        return self.read(RESULT_ADDRESS)

    def run(self) -> list[int]:
        """Run until halt and return everything the program printed."""
        while self.step():
            pass
        return self.outputs

    def report(self) -> RunReport:
        return RunReport(
            result=self.read(RESULT_ADDRESS),
            outputs=self.outputs,
            steps=self._steps,
            halted=self._halted,
            memory_size=len(self._memory),
        )

    def step(self) -> bool:
        """Execute one instruction. Returns False once the machine has halted."""
        if self._halted:
            return False
        if self._max_steps is not None and self._steps >= self._max_steps:
            raise StepLimitExceeded(self._max_steps, address=self._ip)
        if not self._memory.in_bounds(self._ip):
            raise AddressError(self._ip, address=self._ip)

        instr = decode(self._memory.read(self._ip), address=self._ip)
        logger.debug("ip=%d %s modes=%s rb=%d", self._ip, instr.opcode.name, instr.modes, self._relative_base)
        self._steps += 1
        next_ip = self._ip + instr.width

        match instr.opcode:
            case Opcode.ADD:
                self._store(instr, 2, self._load(instr, 0) + self._load(instr, 1))
            case Opcode.MULTIPLY:
                self._store(instr, 2, self._load(instr, 0) * self._load(instr, 1))
            case Opcode.INPUT:
                self._store(instr, 0, self._next_input(instr))
            case Opcode.OUTPUT:
                self._outputs.append(self._load(instr, 0))
            case Opcode.JUMP_IF_TRUE:
                if self._load(instr, 0) != 0:
                    next_ip = self._jump_target(instr)
            case Opcode.JUMP_IF_FALSE:
                if self._load(instr, 0) == 0:
                    next_ip = self._jump_target(instr)
            case Opcode.LESS_THAN:
                self._store(instr, 2, 1 if self._load(instr, 0) < self._load(instr, 1) else 0)
            case Opcode.EQUALS:
                self._store(instr, 2, 1 if self._load(instr, 0) == self._load(instr, 1) else 0)
            case Opcode.ADJUST_RELATIVE_BASE:
                self._relative_base += self._load(instr, 0)
            case Opcode.HALT:
                self._halted = True
                logger.debug("halt at ip=%d after %d steps", self._ip, self._steps)
                return False

        self._ip = next_ip
        return True

    def _operand(self, instr: Instruction, index: int) -> int:
        return self._memory.read(instr.address + 1 + index)

    def _resolve(self, instr: Instruction, index: int) -> int:
        mode = instr.modes[index]
        raw = self._operand(instr, index)
        if mode == ParameterMode.RELATIVE:
            target = self._relative_base + raw
        else:
            target = raw
        if not self._memory.in_bounds(target):
            raise AddressError(target, address=instr.address)
        return target

    def _load(self, instr: Instruction, index: int) -> int:
        if instr.modes[index] == ParameterMode.IMMEDIATE:
            return self._operand(instr, index)
        return self._memory.read(self._resolve(instr, index))

    def _store(self, instr: Instruction, index: int, value: int) -> None:
        if instr.modes[index] == ParameterMode.IMMEDIATE:
            raise InvalidWriteMode(address=instr.address)
        self._memory.write(self._resolve(instr, index), value)

    def _jump_target(self, instr: Instruction) -> int:
        target = self._load(instr, 1)
        if not self._memory.in_bounds(target):
            raise AddressError(target, address=instr.address)
        return target

    def _next_input(self, instr: Instruction) -> int:
        if self._inputs:
            return self._inputs.popleft()
        if self._input_provider is not None:
            return int(self._input_provider())
        raise InputExhausted(address=instr.address)
