"""The Terraform executable, its working directory and its run settings."""

from __future__ import annotations

import os
from typing import IO

from tfcommand.version import V0_13_0, V0_15_0, Version, require_version


class NoSuitableBinaryError(Exception):
    """No usable Terraform executable was given."""


class Terraform:
    """A Terraform executable of a known version and the directory it works in.

    Logging settings map to the TF_LOG, TF_LOG_CORE, TF_LOG_PATH and
    TF_LOG_PROVIDER environment variables of a run. The plain attributes
    append_user_agent, disable_plugin_tls, stdout and stderr may be set
    directly.
    """

    def __init__(
        self, working_dir: str, exec_path: str, version: Version | str
    ) -> None:
        if not working_dir:
            raise ValueError("Terraform cannot be initialised with empty workdir")
        try:
            os.stat(working_dir)
        except OSError as exc:
            raise ValueError(
                f"error initialising Terraform with workdir {working_dir}: {exc}"
            ) from exc
        if not exec_path:
            raise NoSuitableBinaryError(
                "please supply the path to a Terraform executable using exec_path"
            )

        self.working_dir = working_dir
        self.exec_path = exec_path
        self.version = Version.parse(version) if isinstance(version, str) else version

        self.append_user_agent = ""
        self.disable_plugin_tls = False
        self.skip_provider_verify = False
        self.stdout: IO[str] | None = None
        self.stderr: IO[str] | None = None

        self.log = ""
        self.log_core = ""
        self.log_path = ""
        self.log_provider = ""

    def set_log(self, level: str) -> None:
        """Set TF_LOG; takes effect only with a log path (Terraform 0.15.0 or later)."""
        require_version(self.version, V0_15_0, None)
        self.log = level

    def set_log_core(self, level: str) -> None:
        """Set TF_LOG_CORE; takes effect only with a log path (0.15.0 or later)."""
        require_version(self.version, V0_15_0, None)
        self.log_core = level

    def set_log_provider(self, level: str) -> None:
        """Set TF_LOG_PROVIDER; takes effect only with a log path (0.15.0 or later)."""
        require_version(self.version, V0_15_0, None)
        self.log_provider = level

    def set_log_path(self, path: str) -> None:
        """Set TF_LOG_PATH, turning on TRACE logging if no level was chosen."""
        self.log_path = path
        if not (self.log or self.log_core or self.log_provider):
            self.log = "TRACE"

    def set_skip_provider_verify(self, skip: bool) -> None:
        """Set TF_SKIP_PROVIDER_VERIFY, which only versions before 0.13.0 use."""
        require_version(self.version, None, V0_13_0)
        self.skip_provider_verify = skip