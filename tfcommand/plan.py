"""The `plan` and `output` commands."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tfcommand.command import Command, reattach_env
from tfcommand.options import (
    Destroy,
    Dir,
    Lock,
    LockTimeout,
    Out,
    Parallelism,
    Reattach,
    ReattachConfig,
    Refresh,
    Replace,
    State,
    Target,
    Var,
    VarFile,
)
from tfcommand.version import V0_15_2, V0_15_3, Version, require_version


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class _PlanConfig:
    destroy: bool = False
    dir: str = ""
    lock: bool = True
    lock_timeout: str = "0s"
    out: str = ""
    parallelism: int = 10
    reattach_info: Mapping[str, ReattachConfig] | None = None
    refresh: bool = True
    replace_addrs: list[str] = field(default_factory=list)
    state: str = ""
    targets: list[str] = field(default_factory=list)
    vars: list[str] = field(default_factory=list)
    var_files: list[str] = field(default_factory=list)


def _configure_plan(options: tuple[object, ...]) -> _PlanConfig:
    config = _PlanConfig()
    for option in options:
        match option:
            case Dir(path):
                config.dir = path
            case VarFile(path):
                config.var_files.append(path)
            case Var(assignment):
                config.vars.append(assignment)
            case Target(target):
                config.targets.append(target)
            case State(path):
                config.state = path
            case Reattach(info):
                config.reattach_info = info
            case Refresh(refresh):
                config.refresh = refresh
            case Replace(address):
                config.replace_addrs.append(address)
            case Parallelism(parallelism):
                config.parallelism = parallelism
            case Out(path):
                config.out = path
            case LockTimeout(timeout):
                config.lock_timeout = timeout
            case Lock(lock):
                config.lock = lock
            case Destroy(destroy):
                config.destroy = destroy
            case _:
                raise TypeError(f"{type(option).__name__} is not a plan option")
    return config


def _plan_args(version: Version, config: _PlanConfig) -> list[str]:
    args = ["plan", "-no-color", "-input=false", "-detailed-exitcode"]

    if config.lock_timeout:
        args.append(f"-lock-timeout={config.lock_timeout}")
    if config.out:
        args.append(f"-out={config.out}")
    if config.state:
        args.append(f"-state={config.state}")
    args.extend(f"-var-file={path}" for path in config.var_files)

    args.append(f"-lock={_bool(config.lock)}")
    args.append(f"-parallelism={config.parallelism}")
    args.append(f"-refresh={_bool(config.refresh)}")

    if config.replace_addrs:
        require_version(version, V0_15_2, None)
        args.extend(f"-replace={addr}" for addr in config.replace_addrs)
    if config.destroy:
        args.append("-destroy")

    args.extend(f"-target={target}" for target in config.targets)
    for assignment in config.vars:
        args.extend(("-var", assignment))
    return args


def _finish(config: _PlanConfig, args: list[str]) -> Command:
    if config.dir:
        args.append(config.dir)
    return Command(args, reattach_env(config.reattach_info))


def plan_command(version: Version, *args: object) -> Command:
    """Build `terraform plan`; exit code 2 from it means the plan has changes.

    The -replace option needs Terraform 0.15.2 or later.
    """
    config = _configure_plan(args)
    return _finish(config, _plan_args(version, config))


def plan_json_command(version: Version, *args: object) -> Command:
    """Build `terraform plan -json`, which needs Terraform 0.15.3 or later."""
    require_version(version, V0_15_3, None)
    config = _configure_plan(args)
    plan_args = _plan_args(version, config)
    plan_args.append("-json")
    return _finish(config, plan_args)


@dataclass(frozen=True)
class OutputMeta:
    """One entry of `terraform output -json`."""

    sensitive: bool
    type: Any
    value: Any


def output_command(*args: object) -> Command:
    """Build `terraform output -json`."""
    state = ""
    for option in args:
        match option:
            case State(path):
                state = path
            case _:
                raise TypeError(f"{type(option).__name__} is not an output option")
    command_args = ["output", "-no-color", "-json"]
    if state:
        command_args.append(f"-state={state}")
    return Command(command_args)


def parse_output(stdout: str | bytes) -> dict[str, OutputMeta]:
    """Parse the JSON that `terraform output -json` prints."""
    data = json.loads(stdout)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("output is not a JSON object")
    outputs = {}
    for name, meta in data.items():
        if meta is None:
            meta = {}
        if not isinstance(meta, dict):
            raise ValueError(f"output {name} is not a JSON object")
        sensitive = meta.get("sensitive", False)
        if sensitive is None:
            sensitive = False
        if not isinstance(sensitive, bool):
            raise ValueError(f"sensitive flag of output {name} is not a boolean")
        outputs[name] = OutputMeta(sensitive, meta.get("type"), meta.get("value"))
    return outputs