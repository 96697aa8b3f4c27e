"""Apply an EnvironmentModification and run the child command."""

import logging
import os
import signal
import subprocess
from collections.abc import Mapping

from useenv.errors import SpawnError
from useenv.models import ChildCommandLine, EnvironmentModification, LaunchPolicy

log = logging.getLogger(__name__)

# Terminal-generated signals reach the child through the process group; the
# parent ignores them while waiting so it outlives the child.
IGNORED_WHILE_WAITING = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGQUIT") if hasattr(signal, name)
)


def build_environment(
    modification: EnvironmentModification,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the environment block for the child.

    Unsets are applied before assignments, so ``-u A A=1`` leaves ``A=1``.
    """
    if modification.clear_env:
        log.debug("Clearing all environment variables not explicitly set")
        env: dict[str, str] = {}
    else:
        env = dict(os.environ if base is None else base)

    for name in modification.unset_vars:
        log.debug("Unsetting variable %r", name)
        env.pop(name, None)

    assignments = modification.effective_assignments()
    for name, value in assignments.items():
        log.debug("Setting variable %r to value %r", name, value)
    env.update(assignments)
    return env


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


def _wait_ignoring_terminal_signals(proc: subprocess.Popen) -> int:
    """Wait for the child with SIGINT/SIGQUIT ignored, then restore the old handlers."""
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in IGNORED_WHILE_WAITING}
    try:
        return proc.wait()
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def launch(
    modification: EnvironmentModification,
    command: ChildCommandLine,
    policy: LaunchPolicy | None = None,
) -> int:
    """Run the command with the modified environment and return its exit code."""
    policy = policy or LaunchPolicy()
    env = build_environment(modification)
    log.debug("Running %s with arguments %r", command.program, list(command.arguments))

    try:
        proc = subprocess.Popen(list(command.argv), env=env)
    except FileNotFoundError as e:
        raise SpawnError(
            command.program, e.strerror or "command not found", policy.not_found_exit_code
        ) from e
    except OSError as e:
        raise SpawnError(
            command.program, e.strerror or str(e), policy.not_executable_exit_code
        ) from e

    returncode = _wait_ignoring_terminal_signals(proc)
    if returncode < 0:
        log.warning(
            "%s terminated by %s, exiting with %d",
            command.program,
            _signal_name(-returncode),
            policy.fallback_exit_code,
        )
        return policy.fallback_exit_code
    return returncode
