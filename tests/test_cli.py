"""Unit tests for useenv.cli."""

import logging
import sys
from unittest.mock import MagicMock, patch

import pytest

from useenv.cli import build_parser, entrypoint, main
from useenv.errors import SpawnError
from useenv.models import ChildCommandLine, EnvironmentModification, LaunchPolicy


def _cli_patches(**overrides):
    """Return a patch.multiple context with standard defaults plus overrides."""
    defaults = dict(
        launch=MagicMock(return_value=0),
    )
    defaults.update(overrides)
    return patch.multiple("useenv.cli", **defaults)


# ---------------------------------------------------------------------------
# main(): launching the command
# ---------------------------------------------------------------------------


class TestMainLaunch:
    def test_returns_child_exit_code(self):
        with _cli_patches(launch=MagicMock(return_value=4)):
            assert main(["FOO=bar", "printenv", "FOO"]) == 4

    def test_passes_classified_invocation_to_launch(self):
        mock_launch = MagicMock(return_value=0)
        with _cli_patches(launch=mock_launch):
            main(["-i", "-u", "HOME", "A=1", "env", "-i"])

        modification, command, policy = mock_launch.call_args[0]
        assert modification == EnvironmentModification(
            clear_env=True, unset_vars=("HOME",), set_vars=(("A", "1"),)
        )
        assert command == ChildCommandLine(argv=("env", "-i"))
        assert isinstance(policy, LaunchPolicy)

    def test_spawn_error_reported_with_its_exit_code(self, capsys):
        error = SpawnError("nope", "No such file or directory", 127)
        with _cli_patches(launch=MagicMock(side_effect=error)):
            assert main(["nope"]) == 127

        err = capsys.readouterr().err
        assert "useenv: nope: No such file or directory" in err

    def test_debug_flag_enables_debug_logging(self):
        with _cli_patches():
            with patch("useenv.cli.logging.basicConfig") as mock_config:
                main(["-d", "true"])

        assert mock_config.call_args.kwargs["level"] == logging.DEBUG

    def test_default_logging_is_warning(self):
        with _cli_patches():
            with patch("useenv.cli.logging.basicConfig") as mock_config:
                main(["true"])

        assert mock_config.call_args.kwargs["level"] == logging.WARNING

    def test_lenient_policy_treats_unknown_option_as_command(self):
        mock_launch = MagicMock(return_value=0)
        with _cli_patches(launch=mock_launch):
            assert main(["-x", "arg"], policy=LaunchPolicy(strict_options=False)) == 0

        assert mock_launch.call_args[0][1].argv == ("-x", "arg")


# ---------------------------------------------------------------------------
# main(): usage errors never launch anything
# ---------------------------------------------------------------------------


class TestMainUsageErrors:
    @pytest.mark.parametrize(
        "argv, message",
        [
            ([], "no command given"),
            (["-i", "A=1"], "no command given"),
            (["-u"], "option requires an argument -- '-u'"),
            (["--bogus", "cmd"], "unrecognized option '--bogus'"),
            (["=x", "cmd"], "NAME must be nonempty"),
        ],
    )
    def test_usage_error_returns_two(self, capsys, argv, message):
        mock_launch = MagicMock()
        with _cli_patches(launch=mock_launch):
            assert main(argv) == 2

        err = capsys.readouterr().err
        assert "usage: useenv" in err
        assert message in err
        mock_launch.assert_not_called()

    def test_usage_exit_code_comes_from_policy(self):
        with _cli_patches():
            assert main([], policy=LaunchPolicy(usage_exit_code=64)) == 64


# ---------------------------------------------------------------------------
# main(): help and version
# ---------------------------------------------------------------------------


class TestMainInfo:
    def test_help_prints_to_stdout(self, capsys):
        mock_launch = MagicMock()
        with _cli_patches(launch=mock_launch):
            assert main(["--help"]) == 0

        out = capsys.readouterr().out
        assert "Run a program with a modified environment" in out
        assert "--ignore-environment" in out
        assert "NAME=VALUE" in out
        mock_launch.assert_not_called()

    def test_version_output_contains_version_string(self, capsys):
        with _cli_patches():
            assert main(["-V"]) == 0

        assert capsys.readouterr().out.strip() == "useenv 0.1.0"

    def test_parser_usage_names_program(self):
        assert build_parser().format_usage().startswith("usage: useenv")


# ---------------------------------------------------------------------------
# entrypoint()
# ---------------------------------------------------------------------------


class TestEntrypoint:
    def test_entrypoint_exits_with_child_code(self):
        with _cli_patches(launch=MagicMock(return_value=3)):
            with pytest.raises(SystemExit) as exc_info:
                with patch.object(sys, "argv", ["useenv", "A=1", "true"]):
                    entrypoint()

        assert exc_info.value.code == 3

    def test_entrypoint_exits_with_two_on_usage_error(self):
        with _cli_patches():
            with pytest.raises(SystemExit) as exc_info:
                with patch.object(sys, "argv", ["useenv"]):
                    entrypoint()

        assert exc_info.value.code == 2

    def test_entrypoint_runs_real_child(self):
        argv = ["useenv", "-i", "A=2", sys.executable, "-c", "import os; raise SystemExit(int(os.environ['A']))"]
        with pytest.raises(SystemExit) as exc_info:
            with patch.object(sys, "argv", argv):
                entrypoint()

        assert exc_info.value.code == 2
