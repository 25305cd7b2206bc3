"""Option values accepted by the command builders."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AllowMissingConfig:
    """The -allow-missing-config flag."""

    allow_missing_config: bool


@dataclass(frozen=True)
class AllowMissing:
    """The -allow-missing flag."""

    allow_missing: bool


@dataclass(frozen=True)
class Backend:
    """The -backend flag."""

    backend: bool


@dataclass(frozen=True)
class BackendConfig:
    """The -backend-config flag."""

    path: str


@dataclass(frozen=True)
class BackupOut:
    """The -backup-out flag."""

    path: str


@dataclass(frozen=True)
class Backup:
    """The -backup flag."""

    path: str


def disable_backup() -> Backup:
    """Return a Backup option that disables state backups."""
    return Backup("-")


@dataclass(frozen=True)
class Config:
    """The -config flag."""

    path: str


@dataclass(frozen=True)
class CopyState:
    """The -state flag of `workspace new`: copy an existing state into the new workspace."""

    path: str


@dataclass(frozen=True)
class Dir:
    """An optional positional directory argument."""

    path: str


@dataclass(frozen=True)
class DirOrPlan:
    """An optional positional directory or plan file argument."""

    path: str


@dataclass(frozen=True)
class Destroy:
    """The -destroy flag."""

    destroy: bool


@dataclass(frozen=True)
class DrawCycles:
    """The -draw-cycles flag."""

    draw_cycles: bool


@dataclass(frozen=True)
class DryRun:
    """The -dry-run flag."""

    dry_run: bool


@dataclass(frozen=True)
class FSMirror:
    """The -fs-mirror flag: path to a filesystem mirror directory."""

    fs_mirror: str


@dataclass(frozen=True)
class Force:
    """The -force flag."""

    force: bool


@dataclass(frozen=True)
class ForceCopy:
    """The -force-copy flag."""

    force_copy: bool


@dataclass(frozen=True)
class FromModule:
    """The -from-module flag."""

    source: str


@dataclass(frozen=True)
class Get:
    """The -get flag."""

    get: bool


@dataclass(frozen=True)
class GetPlugins:
    """The -get-plugins flag."""

    get_plugins: bool


@dataclass(frozen=True)
class Lock:
    """The -lock flag."""

    lock: bool


@dataclass(frozen=True)
class LockTimeout:
    """The -lock-timeout flag."""

    timeout: str


@dataclass(frozen=True)
class NetMirror:
    """The -net-mirror flag: base URL of a network mirror."""

    net_mirror: str


@dataclass(frozen=True)
class Out:
    """The -out flag."""

    path: str


@dataclass(frozen=True)
class Parallelism:
    """The -parallelism flag."""

    parallelism: int


@dataclass(frozen=True)
class GraphPlan:
    """The -plan flag of `graph`: a plan file."""

    file: str


@dataclass(frozen=True)
class Platform:
    """The -platform flag: an os_arch string."""

    platform: str


@dataclass(frozen=True)
class PluginDir:
    """The -plugin-dir flag."""

    plugin_dir: str


@dataclass(frozen=True)
class Provider:
    """A positional provider source address."""

    provider: str


@dataclass(frozen=True)
class ReattachConfigAddr:
    """A network address of a provider process."""

    network: str
    string: str


@dataclass(frozen=True)
class ReattachConfig:
    """What is needed to attach to a running provider process."""

    protocol: str
    protocol_version: int
    pid: int
    test: bool
    addr: ReattachConfigAddr


@dataclass(frozen=True)
class Reattach:
    """Providers to reattach to, keyed by provider address."""

    info: Mapping[str, ReattachConfig] = field(default_factory=dict)


_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _quote(text: str) -> str:
    escaped = (
        _JSON_ESCAPES.get(ch) or (f"\\u{ord(ch):04x}" if ord(ch) < 0x20 else ch)
        for ch in text
    )
    return '"' + "".join(escaped) + '"'


def _config_json(config: ReattachConfig) -> str:
    addr = (
        f'{{"Network":{_quote(config.addr.network)},'
        f'"String":{_quote(config.addr.string)}}}'
    )
    return (
        f'{{"Protocol":{_quote(config.protocol)},'
        f'"ProtocolVersion":{int(config.protocol_version)},'
        f'"Pid":{int(config.pid)},'
        f'"Test":{"true" if config.test else "false"},'
        f'"Addr":{addr}}}'
    )


def reattach_json(info: Mapping[str, ReattachConfig]) -> str:
    """Encode reattach information as compact JSON with provider keys sorted."""
    members = ",".join(
        f"{_quote(name)}:{_config_json(config)}" for name, config in sorted(info.items())
    )
    return "{" + members + "}"


@dataclass(frozen=True)
class Reconfigure:
    """The -reconfigure flag."""

    reconfigure: bool


@dataclass(frozen=True)
class Recursive:
    """The -recursive flag."""

    recursive: bool


@dataclass(frozen=True)
class Refresh:
    """The -refresh flag."""

    refresh: bool


@dataclass(frozen=True)
class Replace:
    """The -replace flag."""

    address: str


@dataclass(frozen=True)
class State:
    """The legacy -state flag; prefer a local backend over a per-run state file."""

    path: str


@dataclass(frozen=True)
class StateOut:
    """The -state-out flag."""

    path: str


@dataclass(frozen=True)
class Target:
    """The -target flag."""

    target: str


@dataclass(frozen=True)
class GraphType:
    """The -type flag of `graph`."""

    graph_type: str


@dataclass(frozen=True)
class Update:
    """The -update flag."""

    update: bool


@dataclass(frozen=True)
class Upgrade:
    """The -upgrade flag."""

    upgrade: bool


@dataclass(frozen=True)
class Var:
    """The -var flag, holding a name=value assignment."""

    assignment: str


@dataclass(frozen=True)
class VarFile:
    """The -var-file flag."""

    path: str


@dataclass(frozen=True)
class VerifyPlugins:
    """The -verify-plugins flag."""

    verify_plugins: bool