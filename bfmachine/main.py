from __future__ import annotations

import argparse
import logging
import sys

from bfmachine.config import load_settings
from bfmachine.errors import BFError
from bfmachine.io import StreamInput, StreamOutput
from bfmachine.machine import Machine
from bfmachine.schemas import ErrorReport

HELLO_WORLD = (
    "++++++++++[>+++++++>++++++++++>+++>+<<<<-]>++.>+.+++++++..+++.>++.<<+++++++++++++++."
    ">.+++.------.--------.>+.>."
)


def configure_logging(level: str) -> None:
    # stdout carries program output, so log records go to stderr.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("bfmachine")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfmachine", description="run the built-in hello world program"
    )
    parser.add_argument(
        "--report", action="store_true", help="print a JSON run report to stderr"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="override BFMACHINE_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}") from e
    configure_logging(args.log_level or settings.log_level)

    out = StreamOutput(sys.stdout.buffer)
    machine = Machine(
        HELLO_WORLD,
        tape_size=settings.tape_size,
        input=StreamInput(sys.stdin.buffer, echo=out),
        output=out,
    )
    try:
        report = machine.run()
    except BFError as e:
        out.flush()
        print(ErrorReport.from_error(e).model_dump_json(), file=sys.stderr)
        return 1
    out.flush()

    if args.report:
        print(report.model_dump_json(), file=sys.stderr)
    return 0
