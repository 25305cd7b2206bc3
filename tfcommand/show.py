"""The `show` command, for state and plan files."""

from __future__ import annotations

from tfcommand.command import Command, reattach_env
from tfcommand.options import Reattach
from tfcommand.version import V0_12_0, Version, require_version


def _reattach_env_from(options: tuple[object, ...]) -> dict[str, str]:
    info = None
    for option in options:
        match option:
            case Reattach(reattach_info):
                info = reattach_info
            case _:
                raise TypeError(f"{type(option).__name__} is not a show option")
    return reattach_env(info)


def _show(json_output: bool, env: dict[str, str], *args: str) -> Command:
    command_args = ["show"]
    if json_output:
        command_args.append("-json")
    command_args.append("-no-color")
    command_args.extend(args)
    return Command(command_args, env)


def show_command(version: Version, *args: object) -> Command:
    """Build `terraform show -json` for the default state (Terraform 0.12.0 or later)."""
    require_version(version, V0_12_0, None)
    return _show(True, _reattach_env_from(args))


def show_state_file_command(version: Version, path: str, *args: object) -> Command:
    """Build `terraform show -json` for a given state file."""
    require_version(version, V0_12_0, None)
    if not path:
        raise ValueError(
            "statePath cannot be blank: use show_command() if not passing statePath"
        )
    return _show(True, _reattach_env_from(args), path)


def show_plan_file_command(version: Version, path: str, *args: object) -> Command:
    """Build `terraform show -json` for a given plan file."""
    require_version(version, V0_12_0, None)
    if not path:
        raise ValueError(
            "planPath cannot be blank: use show_command() if not passing planPath"
        )
    return _show(True, _reattach_env_from(args), path)


def show_plan_file_raw_command(path: str, *args: object) -> Command:
    """Build `terraform show` for a plan file, with human-readable output."""
    if not path:
        raise ValueError(
            "planPath cannot be blank: use show_command() if not passing planPath"
        )
    return _show(False, _reattach_env_from(args), path)