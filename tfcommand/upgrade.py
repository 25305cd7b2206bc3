"""The `0.12upgrade` and `0.13upgrade` commands."""

from __future__ import annotations

from tfcommand.command import Command, reattach_env
from tfcommand.options import Dir, Force, Reattach
from tfcommand.version import V0_12_0, V0_13_0, V0_14_0, Version, require_version


def upgrade012_command(version: Version, *args: object) -> Command:
    """Build `terraform 0.12upgrade`, which exists only in 0.12 releases."""
    require_version(version, V0_12_0, V0_13_0)

    directory = ""
    force = False
    info = None
    for option in args:
        match option:
            case Dir(path):
                directory = path
            case Force(value):
                force = value
            case Reattach(reattach_info):
                info = reattach_info
            case _:
                raise TypeError(f"{type(option).__name__} is not a 0.12upgrade option")

    command_args = ["0.12upgrade", "-no-color", "-yes"]
    if force:
        command_args.append("-force")
    if directory:
        command_args.append(directory)
    return Command(command_args, reattach_env(info))


def upgrade013_command(version: Version, *args: object) -> Command:
    """Build `terraform 0.13upgrade`, which exists only in 0.13 releases."""
    require_version(version, V0_13_0, V0_14_0)

    directory = ""
    info = None
    for option in args:
        match option:
            case Dir(path):
                directory = path
            case Reattach(reattach_info):
                info = reattach_info
            case _:
                raise TypeError(f"{type(option).__name__} is not a 0.13upgrade option")

    command_args = ["0.13upgrade", "-no-color", "-yes"]
    if directory:
        command_args.append(directory)
    return Command(command_args, reattach_env(info))