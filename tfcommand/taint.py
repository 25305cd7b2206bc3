"""The `taint` and `untaint` commands."""

from __future__ import annotations

from dataclasses import dataclass

from tfcommand.command import Command
from tfcommand.options import AllowMissing, Lock, LockTimeout, State
from tfcommand.version import V0_4_1, V0_6_13, Version, require_version


@dataclass
class _TaintConfig:
    state: str = ""
    allow_missing: bool = False
    lock: bool = True
    lock_timeout: str = ""


def _build(subcommand: str, address: str, options: tuple[object, ...]) -> Command:
    config = _TaintConfig()
    for option in options:
        match option:
            case State(path):
                config.state = path
            case AllowMissing(allow_missing):
                config.allow_missing = allow_missing
            case Lock(lock):
                config.lock = lock
            case LockTimeout(timeout):
                config.lock_timeout = timeout
            case _:
                raise TypeError(
                    f"{type(option).__name__} is not a {subcommand} option"
                )

    args = [subcommand, "-no-color"]
    if config.lock_timeout:
        args.append(f"-lock-timeout={config.lock_timeout}")
    if config.state:
        args.append(f"-state={config.state}")
    args.append(f"-lock={'true' if config.lock else 'false'}")
    if config.allow_missing:
        args.append("-allow-missing")
    args.append(address)
    return Command(args)


def taint_command(version: Version, address: str, *args: object) -> Command:
    """Build `terraform taint`, which needs Terraform 0.4.1 or later."""
    require_version(version, V0_4_1, None)
    return _build("taint", address, args)


def untaint_command(version: Version, address: str, *args: object) -> Command:
    """Build `terraform untaint`, which needs Terraform 0.6.13 or later."""
    require_version(version, V0_6_13, None)
    return _build("untaint", address, args)