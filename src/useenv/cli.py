"""Command-line interface for useenv."""

import argparse
import logging
import sys

from useenv import __version__
from useenv.classify import classify
from useenv.errors import SpawnError, UsageError
from useenv.launcher import launch
from useenv.models import LaunchPolicy

USAGE = "%(prog)s [-i] [-u NAME]... [-d] [NAME=VALUE]... COMMAND [ARG]..."

EPILOG = """\
Options and NAME=VALUE assignments may appear in any order before COMMAND.
The first other argument starts the command; it and everything after it are
passed to the command unchanged.

exit status:
  the command's own status, or
  1    the command was terminated by a signal
  2    usage error
  126  the command could not be executed
  127  the command was not found"""


def build_parser() -> argparse.ArgumentParser:
    """Build the parser used to render usage and help text."""
    parser = argparse.ArgumentParser(
        prog="useenv",
        usage=USAGE,
        description="Run a program with a modified environment",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    parser.add_argument("-V", "--version", action="store_true", help="Show version and exit")
    parser.add_argument(
        "-i",
        "--ignore-environment",
        action="store_true",
        help="Clear all environment variables not explicitly set",
    )
    parser.add_argument(
        "-u",
        "--unset",
        action="append",
        metavar="NAME",
        help="Clear a specific variable from the environment (repeatable)",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "assignments",
        nargs="*",
        metavar="NAME=VALUE",
        help="Set an environment variable of the given name and value",
    )
    parser.add_argument("command", metavar="COMMAND", help="Program to run, followed by its arguments")
    return parser


def main(argv: list[str] | None = None, policy: LaunchPolicy | None = None) -> int:
    """Classify arguments, then launch the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    policy = policy or LaunchPolicy()
    parser = build_parser()

    try:
        invocation = classify(args, strict=policy.strict_options)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return policy.usage_exit_code

    if invocation.request == "help":
        parser.print_help()
        return 0
    if invocation.request == "version":
        print(f"{parser.prog} {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if invocation.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        return launch(invocation.modification, invocation.command, policy)
    except SpawnError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return e.exit_code


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
