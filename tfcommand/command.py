"""The command line and environment that a Terraform invocation is made of."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from tfcommand.options import ReattachConfig, reattach_json

REATTACH_ENV_VAR = "TF_REATTACH_PROVIDERS"


@dataclass
class Command:
    """Arguments after the executable, and environment variables to merge in."""

    args: list[str]
    env: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.args = list(self.args)
        self.env = dict(self.env)

    @classmethod
    def _of(cls, args: Iterable[str], env: Mapping[str, str] | None = None) -> Command:
        return cls(list(args), dict(env or {}))


def reattach_env(info: Mapping[str, ReattachConfig] | None) -> dict[str, str]:
    """Environment variables that tell Terraform which providers to reattach to."""
    if info is None:
        return {}
    return {REATTACH_ENV_VAR: reattach_json(info)}