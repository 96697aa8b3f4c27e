"""Command line handed to the child process."""

from pydantic import BaseModel, ConfigDict, Field


class ChildCommandLine(BaseModel):
    """Program followed by its arguments, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    argv: tuple[str, ...] = Field(min_length=1)

    @property
    def program(self) -> str:
        return self.argv[0]

    @property
    def arguments(self) -> tuple[str, ...]:
        return self.argv[1:]
