from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from intcode.config import IntcodeSettings, load_settings
from intcode.errors import IntcodeError
from intcode.machine import IntcodeMachine
from intcode.search import search


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"not a file: {value}")
    return p


def _patch_spec(value: str) -> tuple[int, int]:
    addr_raw, sep, val_raw = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"patch must look like ADDR=VALUE: {value}")
    try:
        address, patched = int(addr_raw), int(val_raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"patch values must be integers: {value}") from e
    if address < 0:
        raise argparse.ArgumentTypeError(f"patch address must be non-negative: {value}")
    return address, patched


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_machine(path: Path, *, settings: IntcodeSettings) -> IntcodeMachine:
    return IntcodeMachine.from_file(path, max_steps=settings.max_steps, max_memory=settings.max_memory)


def _cmd_run(args: argparse.Namespace, *, settings: IntcodeSettings) -> int:
    machine = _load_machine(args.program, settings=settings)
    for address, value in args.patch:
        machine.patch(address, value)
    machine.feed_all(args.input)
    machine.execute()

    report = machine.report()
    if args.json:
        print(report.to_json())
        return 0
    print(report.result)
    for value in report.outputs:
        print(value)
    return 0


def _cmd_search(args: argparse.Namespace, *, settings: IntcodeSettings) -> int:
    machine = _load_machine(args.program, settings=settings)
    low = settings.search_low if args.low is None else args.low
    high = settings.search_high if args.high is None else args.high
    result = search(machine, args.target, low=low, high=high)
    if args.json:
        print(result.to_json())
    else:
        print(result.answer)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="intcode")
    parser.add_argument("--log-level", default=None, help="overrides INTCODE_LOG_LEVEL")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="execute a program and print address 0 and outputs")
    run_p.add_argument("program", type=_existing_path)
    run_p.add_argument("--patch", type=_patch_spec, action="append", default=[], metavar="ADDR=VALUE")
    run_p.add_argument("--input", type=int, action="append", default=[], metavar="N")
    run_p.add_argument("--json", action="store_true")

    search_p = sub.add_parser("search", help="brute-force the noun/verb pair producing --target")
    search_p.add_argument("program", type=_existing_path)
    search_p.add_argument("--target", type=int, required=True)
    search_p.add_argument("--low", type=int, default=None)
    search_p.add_argument("--high", type=int, default=None)
    search_p.add_argument("--json", action="store_true")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"intcode: {e}") from e
    _configure_logging(args.log_level or settings.log_level)

    try:
        if args.cmd == "run":
            return _cmd_run(args, settings=settings)
        if args.cmd == "search":
            return _cmd_search(args, settings=settings)
    except (IntcodeError, ValueError) as e:
        print(f"intcode: {e}", file=sys.stderr)
        return 1

    raise AssertionError(f"unhandled cmd: {args.cmd}")
