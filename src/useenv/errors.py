"""Exceptions raised while classifying arguments or starting the child."""


class UsageError(Exception):
    """The command line could not be classified."""


class MissingArgument(UsageError):
    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"option requires an argument -- {option!r}")


class UnknownOption(UsageError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unrecognized option {token!r}")


class MalformedAssignment(UsageError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"NAME must be nonempty in NAME=VALUE (got {token!r})")


class NoCommand(UsageError):
    def __init__(self) -> None:
        super().__init__("no command given")


class SpawnError(Exception):
    """The child process could not be started."""

    def __init__(self, program: str, reason: str, exit_code: int) -> None:
        self.program = program
        self.reason = reason
        self.exit_code = exit_code
        super().__init__(f"{program}: {reason}")
