"""The `refresh` command."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from tfcommand.command import Command, reattach_env
from tfcommand.options import (
    Backup,
    Dir,
    Lock,
    LockTimeout,
    Reattach,
    ReattachConfig,
    State,
    StateOut,
    Target,
    Var,
    VarFile,
)


@dataclass
class _RefreshConfig:
    backup: str = ""
    dir: str = ""
    lock: bool = True
    lock_timeout: str = "0s"
    reattach_info: Mapping[str, ReattachConfig] | None = None
    state: str = ""
    state_out: str = ""
    targets: list[str] = field(default_factory=list)
    vars: list[str] = field(default_factory=list)
    var_files: list[str] = field(default_factory=list)


def _configure_refresh(options: tuple[object, ...]) -> _RefreshConfig:
    config = _RefreshConfig()
    for option in options:
        match option:
            case Backup(path):
                config.backup = path
            case Dir(path):
                config.dir = path
            case Lock(lock):
                config.lock = lock
            case LockTimeout(timeout):
                config.lock_timeout = timeout
            case Reattach(info):
                config.reattach_info = info
            case State(path):
                config.state = path
            case StateOut(path):
                config.state_out = path
            case Target(target):
                config.targets.append(target)
            case Var(assignment):
                config.vars.append(assignment)
            case VarFile(path):
                config.var_files.append(path)
            case _:
                raise TypeError(f"{type(option).__name__} is not a refresh option")
    return config


def _refresh_args(config: _RefreshConfig) -> list[str]:
    args = ["refresh", "-no-color", "-input=false"]

    if config.backup:
        args.append(f"-backup={config.backup}")
    if config.lock_timeout:
        args.append(f"-lock-timeout={config.lock_timeout}")
    if config.state:
        args.append(f"-state={config.state}")
    if config.state_out:
        args.append(f"-state-out={config.state_out}")
    args.extend(f"-var-file={path}" for path in config.var_files)

    args.append(f"-lock={'true' if config.lock else 'false'}")

    args.extend(f"-target={target}" for target in config.targets)
    for assignment in config.vars:
        args.extend(("-var", assignment))
    return args


def _finish(config: _RefreshConfig, args: list[str]) -> Command:
    if config.dir:
        args.append(config.dir)
    return Command(args, reattach_env(config.reattach_info))


def refresh_command(*args: object) -> Command:
    """Build `terraform refresh`."""
    config = _configure_refresh(args)
    return _finish(config, _refresh_args(config))


def refresh_json_command(*args: object) -> Command:
    """Build `terraform refresh -json` (Terraform 0.15.3 or later)."""
    config = _configure_refresh(args)
    refresh_args = _refresh_args(config)
    refresh_args.append("-json")
    return _finish(config, refresh_args)