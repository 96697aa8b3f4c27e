"""Environment changes requested on the command line."""

from pydantic import BaseModel, ConfigDict


class EnvironmentModification(BaseModel):
    """What to clear, unset, and set before launching the child."""

    model_config = ConfigDict(frozen=True)

    clear_env: bool = False
    unset_vars: tuple[str, ...] = ()
    set_vars: tuple[tuple[str, str], ...] = ()

    def effective_assignments(self) -> dict[str, str]:
        """Return the assignments with later duplicate names overriding earlier ones."""
        return dict(self.set_vars)
