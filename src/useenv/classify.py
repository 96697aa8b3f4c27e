"""Single-pass classification of useenv's command line.

Each raw argument is an option, a NAME=VALUE assignment, or the start of
the child's command line. Options and assignments may be interleaved in
any order; the first token that is neither begins the command, and it and
everything after it are passed through untouched.
"""

from collections.abc import Sequence

from useenv.errors import MalformedAssignment, MissingArgument, NoCommand, UnknownOption
from useenv.models import ChildCommandLine, EnvironmentModification, Invocation

IGNORE_ENVIRONMENT = frozenset({"-i", "--ignore-environment"})
UNSET = frozenset({"-u", "--unset"})
DEBUG = frozenset({"-d", "--debug"})
HELP = frozenset({"-h", "--help"})
VERSION = frozenset({"-V", "--version"})


def parse_assignment(token: str) -> tuple[str, str]:
    """Split NAME=VALUE on the first '='."""
    name, _, value = token.partition("=")
    if not name:
        raise MalformedAssignment(token)
    return name, value


def _looks_like_option(token: str) -> bool:
    return len(token) > 1 and token.startswith("-")


def classify(args: Sequence[str], strict: bool = True) -> Invocation:
    """Classify raw arguments (program name excluded) into an Invocation.

    With ``strict`` set, an option-shaped token that is not a recognized
    spelling raises UnknownOption; otherwise it starts the command line.
    """
    clear_env = False
    debug = False
    unset_vars: list[str] = []
    set_vars: list[tuple[str, str]] = []

    def _build(**kwargs) -> Invocation:
        modification = EnvironmentModification(
            clear_env=clear_env,
            unset_vars=tuple(unset_vars),
            set_vars=tuple(set_vars),
        )
        return Invocation(modification=modification, debug=debug, **kwargs)

    index = 0
    while index < len(args):
        token = args[index]
        if token in IGNORE_ENVIRONMENT:
            clear_env = True
            index += 1
        elif token in UNSET:
            if index + 1 >= len(args):
                raise MissingArgument(token)
            unset_vars.append(args[index + 1])
            index += 2
        elif token in DEBUG:
            debug = True
            index += 1
        elif token in HELP:
            return _build(request="help")
        elif token in VERSION:
            return _build(request="version")
        elif "=" in token:
            set_vars.append(parse_assignment(token))
            index += 1
        elif strict and _looks_like_option(token):
            raise UnknownOption(token)
        else:
            return _build(command=ChildCommandLine(argv=tuple(args[index:])))

    raise NoCommand()
