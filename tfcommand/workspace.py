"""The `workspace` subcommands."""

from __future__ import annotations

from tfcommand.command import Command
from tfcommand.options import CopyState, Force, Lock, LockTimeout
from tfcommand.version import V0_10_0, V0_12_0, Version, require_version

_DEFAULT_LOCK_TIMEOUT = "0s"
_CURRENT_WORKSPACE_PREFIX = "* "


def _lock_args(lock: bool, lock_timeout: str) -> list[str]:
    # Only pass values that differ from the defaults, so older versions work.
    args = []
    if lock_timeout and lock_timeout != _DEFAULT_LOCK_TIMEOUT:
        args.append(f"-lock-timeout={lock_timeout}")
    if not lock:
        args.append("-lock=false")
    return args


def workspace_delete_command(version: Version, workspace: str, *args: object) -> Command:
    """Build `terraform workspace delete`; locking options need 0.12.0 or later."""
    lock = True
    lock_timeout = _DEFAULT_LOCK_TIMEOUT
    force = False
    for option in args:
        match option:
            case Lock(value):
                require_version(version, V0_12_0, None)
                lock = value
            case LockTimeout(timeout):
                require_version(version, V0_12_0, None)
                lock_timeout = timeout
            case Force(value):
                force = value
            case _:
                raise TypeError(
                    f"{type(option).__name__} is not a workspace delete option"
                )

    command_args = ["workspace", "delete", "-no-color"]
    if force:
        command_args.append("-force")
    command_args.extend(_lock_args(lock, lock_timeout))
    command_args.append(workspace)
    return Command(command_args)


def workspace_new_command(version: Version, workspace: str, *args: object) -> Command:
    """Build `terraform workspace new`; locking options need 0.12.0 or later."""
    lock = True
    lock_timeout = _DEFAULT_LOCK_TIMEOUT
    copy_state = ""
    for option in args:
        match option:
            case Lock(value):
                require_version(version, V0_12_0, None)
                lock = value
            case LockTimeout(timeout):
                require_version(version, V0_12_0, None)
                lock_timeout = timeout
            case CopyState(path):
                copy_state = path
            case _:
                raise TypeError(f"{type(option).__name__} is not a workspace new option")

    command_args = ["workspace", "new", "-no-color"]
    command_args.extend(_lock_args(lock, lock_timeout))
    if copy_state:
        command_args.append(f"-state={copy_state}")
    command_args.append(workspace)
    return Command(command_args)


def workspace_select_command(workspace: str) -> Command:
    """Build `terraform workspace select`."""
    return Command(["workspace", "select", "-no-color", workspace])


def workspace_show_command(version: Version) -> Command:
    """Build `terraform workspace show`, which needs Terraform 0.10.0 or later."""
    require_version(version, V0_10_0, None)
    return Command(["workspace", "show", "-no-color"])


def workspace_list_command() -> Command:
    """Build `terraform workspace list`."""
    return Command(["workspace", "list", "-no-color"])


def parse_workspace_list(stdout: str) -> tuple[list[str], str]:
    """Return the workspaces listed and the name of the current one."""
    current = ""
    workspaces = []
    for line in stdout.split("\n"):
        line = line.strip()
        if not line:
            continue
        if line.startswith(_CURRENT_WORKSPACE_PREFIX):
            line = line[len(_CURRENT_WORKSPACE_PREFIX):]
            current = line
        workspaces.append(line)
    return workspaces, current