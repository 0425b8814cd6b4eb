from __future__ import annotations


class IntcodeError(Exception):
    pass


class LoadError(IntcodeError):
    pass


class ProgramParseError(LoadError):
    def __init__(self, message: str, *, index: int | None = None, token: str | None = None) -> None:
        self.index = index
        self.token = token
        prefix = ""
        if index is not None:
            prefix = f"token {index}: "
        super().__init__(prefix + str(message))


class ExecutionError(IntcodeError):
    def __init__(self, message: str, *, address: int | None = None) -> None:
        self.address = address
        suffix = ""
        if address is not None:
            suffix = f" (at address {address})"
        super().__init__(str(message) + suffix)


class UnknownOpcode(ExecutionError):
    def __init__(self, opcode: int, *, address: int, word: int | None = None) -> None:
        self.opcode = opcode
        self.word = opcode if word is None else word
        message = f"unknown opcode {opcode}"
        if self.word != opcode:
            message += f" in instruction {self.word}"
        super().__init__(message, address=address)


class UnknownParameterMode(ExecutionError):
    def __init__(self, mode: int, *, address: int) -> None:
        self.mode = mode
        super().__init__(f"unknown parameter mode {mode}", address=address)


class InvalidWriteMode(ExecutionError):
    def __init__(self, *, address: int) -> None:
        super().__init__("write through immediate-mode parameter", address=address)


class InputExhausted(ExecutionError):
    def __init__(self, *, address: int) -> None:
        super().__init__("input requested but no input is available", address=address)


class AddressError(ExecutionError):
    def __init__(self, target: int, *, address: int | None = None) -> None:
        self.target = target
        super().__init__(f"invalid memory address {target}", address=address)


class StepLimitExceeded(ExecutionError):
    def __init__(self, limit: int, *, address: int) -> None:
        self.limit = limit
        super().__init__(f"step limit of {limit} exceeded", address=address)


class NoSolutionError(IntcodeError):
    pass
