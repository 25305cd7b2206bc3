"""The `providers lock` and `providers schema` commands."""

from __future__ import annotations

from tfcommand.command import Command
from tfcommand.options import FSMirror, NetMirror, Platform, Provider
from tfcommand.version import V0_14_0, Version, require_version


def providers_lock_command(version: Version, *args: object) -> Command:
    """Build `terraform providers lock`, which needs Terraform 0.14.0 or later."""
    require_version(version, V0_14_0, None)

    fs_mirror = ""
    net_mirror = ""
    platforms: list[str] = []
    providers: list[str] = []
    for option in args:
        match option:
            case FSMirror(path):
                fs_mirror = path
            case NetMirror(url):
                net_mirror = url
            case Platform(platform):
                platforms.append(platform)
            case Provider(provider):
                providers.append(provider)
            case _:
                raise TypeError(
                    f"{type(option).__name__} is not a providers lock option"
                )

    command_args = ["providers", "lock"]
    if fs_mirror:
        command_args.append(f"-fs-mirror={fs_mirror}")
    if net_mirror:
        command_args.append(f"-net-mirror={net_mirror}")
    command_args.extend(f"-platform={platform}" for platform in platforms)
    command_args.extend(providers)
    return Command(command_args)


def providers_schema_command(*args: str) -> Command:
    """Build `terraform providers schema -json` with any extra arguments."""
    return Command(["providers", "schema", "-json", "-no-color", *args])