"""Model package for useenv."""

from useenv.models.child_command_line import ChildCommandLine
from useenv.models.environment_modification import EnvironmentModification
from useenv.models.invocation import Invocation
from useenv.models.launch_policy import LaunchPolicy

__all__ = [
    "ChildCommandLine",
    "EnvironmentModification",
    "Invocation",
    "LaunchPolicy",
]
