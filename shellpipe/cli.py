"""Command-line interface for shellpipe."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .exceptions import ShellpipeError
from .jobs import Job


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed job as JSON instead of the job listing.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject lines with unterminated quotes, dangling operators or pipes.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr.",
    )


def _format(job: Job, as_json: bool) -> str:
    if as_json:
        return json.dumps(job.to_dict(), indent=2)
    return job.render()


def _emit(line: str, args: argparse.Namespace) -> int:
    try:
        job = Job.from_line(line, strict=args.strict)
    except ShellpipeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    sys.stdout.write(_format(job, args.json) + "\n")
    return 0


def _run_parse(args: argparse.Namespace) -> int:
    return _emit(args.line, args)


def _run_repl(args: argparse.Namespace) -> int:
    exit_code = 0
    try:
        while True:
            line = input(args.prompt)
            if line.strip() in {":q", "exit", "quit"}:
                return exit_code
            exit_code = _emit(line, args)
    except (EOFError, KeyboardInterrupt):
        return exit_code


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="shellpipe")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse a single command line")
    _add_common_flags(parse_parser)
    parse_parser.add_argument("line", help="Shell input to parse")
    parse_parser.set_defaults(func=_run_parse)

    repl_parser = subparsers.add_parser("repl", help="Parse lines read interactively")
    _add_common_flags(repl_parser)
    repl_parser.add_argument("--prompt", default="shellpipe> ", help="Prompt shown before each line")
    repl_parser.set_defaults(func=_run_repl)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
