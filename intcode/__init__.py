from __future__ import annotations

from intcode.errors import (
    AddressError,
    ExecutionError,
    InputExhausted,
    IntcodeError,
    InvalidWriteMode,
    LoadError,
    NoSolutionError,
    ProgramParseError,
    StepLimitExceeded,
    UnknownOpcode,
    UnknownParameterMode,
)
from intcode.machine import IntcodeMachine
from intcode.memory import Memory
from intcode.opcodes import Instruction, Opcode, ParameterMode, decode
from intcode.program import Program, load_program, parse_program
from intcode.schemas import RunReport, SearchResult
from intcode.search import NounVerb, find_all_noun_verb, find_noun_verb, search

__all__ = [
    "__version__",
    # Machine
    "IntcodeMachine",
    "Memory",
    # Program
    "Program",
    "parse_program",
    "load_program",
    # Decoding
    "Instruction",
    "Opcode",
    "ParameterMode",
    "decode",
    # Search
    "NounVerb",
    "find_noun_verb",
    "find_all_noun_verb",
    "search",
    # Reports
    "RunReport",
    "SearchResult",
    # Errors
    "IntcodeError",
    "LoadError",
    "ProgramParseError",
    "ExecutionError",
    "UnknownOpcode",
    "UnknownParameterMode",
    "InvalidWriteMode",
    "InputExhausted",
    "AddressError",
    "StepLimitExceeded",
    "NoSolutionError",
]

__version__ = "0.1.0"
