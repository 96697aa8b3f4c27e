"""Result of classifying the raw argument list."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from useenv.models.child_command_line import ChildCommandLine
from useenv.models.environment_modification import EnvironmentModification


class Invocation(BaseModel):
    """Everything the entry point needs to act on one run of useenv."""

    model_config = ConfigDict(frozen=True)

    modification: EnvironmentModification = EnvironmentModification()
    command: ChildCommandLine | None = None
    debug: bool = False
    request: Literal["run", "help", "version"] = "run"

    @model_validator(mode="after")
    def _run_needs_command(self) -> "Invocation":
        if self.request == "run" and self.command is None:
            raise ValueError("a run request needs a command")
        return self
