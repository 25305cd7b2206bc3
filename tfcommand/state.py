"""The `state mv`, `state pull`, `state push` and `state rm` commands."""

from __future__ import annotations

from dataclasses import dataclass

from tfcommand.command import Command, reattach_env
from tfcommand.options import (
    Backup,
    BackupOut,
    DryRun,
    Force,
    Lock,
    LockTimeout,
    Reattach,
    State,
    StateOut,
)


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class _StateEditConfig:
    backup: str = ""
    backup_out: str = ""
    dry_run: bool = False
    lock: bool = True
    lock_timeout: str = "0s"
    state: str = ""
    state_out: str = ""


def _configure_edit(options: tuple[object, ...], what: str) -> _StateEditConfig:
    config = _StateEditConfig()
    for option in options:
        match option:
            case Backup(path):
                config.backup = path
            case BackupOut(path):
                config.backup_out = path
            case DryRun(dry_run):
                config.dry_run = dry_run
            case Lock(lock):
                config.lock = lock
            case LockTimeout(timeout):
                config.lock_timeout = timeout
            case State(path):
                config.state = path
            case StateOut(path):
                config.state_out = path
            case _:
                raise TypeError(f"{type(option).__name__} is not a {what} option")
    return config


def _edit_args(subcommand: str, config: _StateEditConfig) -> list[str]:
    args = ["state", subcommand, "-no-color"]
    if config.backup:
        args.append(f"-backup={config.backup}")
    if config.backup_out:
        args.append(f"-backup-out={config.backup_out}")
    if config.lock_timeout:
        args.append(f"-lock-timeout={config.lock_timeout}")
    if config.state:
        args.append(f"-state={config.state}")
    if config.state_out:
        args.append(f"-state-out={config.state_out}")
    args.append(f"-lock={_bool(config.lock)}")
    if config.dry_run:
        args.append("-dry-run")
    return args


def state_mv_command(source: str, destination: str, *args: object) -> Command:
    """Build `terraform state mv`."""
    config = _configure_edit(args, "state mv")
    command_args = _edit_args("mv", config)
    command_args.extend((source, destination))
    return Command(command_args)


def state_rm_command(address: str, *args: object) -> Command:
    """Build `terraform state rm`."""
    config = _configure_edit(args, "state rm")
    command_args = _edit_args("rm", config)
    command_args.append(address)
    return Command(command_args)


def state_pull_command(*args: object) -> Command:
    """Build `terraform state pull`; its standard output is the raw state."""
    info = None
    for option in args:
        match option:
            case Reattach(reattach_info):
                info = reattach_info
            case _:
                raise TypeError(f"{type(option).__name__} is not a state pull option")
    return Command(["state", "pull"], reattach_env(info))


def state_push_command(path: str, *args: object) -> Command:
    """Build `terraform state push`; locking is off unless asked for."""
    force = False
    lock = False
    lock_timeout = "0s"
    for option in args:
        match option:
            case Force(value):
                force = value
            case Lock(value):
                lock = value
            case LockTimeout(timeout):
                lock_timeout = timeout
            case _:
                raise TypeError(f"{type(option).__name__} is not a state push option")

    command_args = ["state", "push"]
    if force:
        command_args.append("-force")
    command_args.append(f"-lock={_bool(lock)}")
    if lock_timeout:
        command_args.append(f"-lock-timeout={lock_timeout}")
    command_args.append(path)
    return Command(command_args)