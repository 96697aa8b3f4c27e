"""Runtime policy for useenv."""

from pydantic import BaseModel

USAGE_EXIT_CODE = 2
FALLBACK_EXIT_CODE = 1
NOT_FOUND_EXIT_CODE = 127
NOT_EXECUTABLE_EXIT_CODE = 126


class LaunchPolicy(BaseModel):
    """Option-parsing strictness and the exit codes useenv reports itself."""

    strict_options: bool = True
    usage_exit_code: int = USAGE_EXIT_CODE
    fallback_exit_code: int = FALLBACK_EXIT_CODE
    not_found_exit_code: int = NOT_FOUND_EXIT_CODE
    not_executable_exit_code: int = NOT_EXECUTABLE_EXIT_CODE
