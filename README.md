# tfcommand

`tfcommand` builds the argument lists and environment variables for Terraform
CLI subcommands. It checks whether a given Terraform version supports a
command or option, and it parses what Terraform prints. It does not run
Terraform. Each builder returns a `tfcommand.command.Command`. Its `args` list
holds the arguments that follow the executable. Its `env` dict holds the
variables to merge into the environment. You decide how to run it.

## Installation

```
pip install tfcommand
```

## Building commands

Options are small frozen dataclasses from `tfcommand.options`. Pass them
positionally, in any order:

```python
from tfcommand.options import Dir, Lock, LockTimeout, Target, Var, VarFile
from tfcommand.plan import plan_command
from tfcommand.version import Version

version = Version.parse("1.4.6")
cmd = plan_command(
    version,
    Lock(False),
    LockTimeout("22s"),
    Target("aws_instance.web"),
    Var("region=eu-west-1"),
    VarFile("prod.tfvars"),
    Dir("infra"),
)
print(cmd.args)
# ['plan', '-no-color', '-input=false', '-detailed-exitcode',
#  '-lock-timeout=22s', '-var-file=prod.tfvars', '-lock=false',
#  '-parallelism=10', '-refresh=true', '-target=aws_instance.web',
#  '-var', 'region=eu-west-1', 'infra']
```

A builder raises `TypeError` when it is given an option it does not accept.

The builders, by module:

- `tfcommand.plan`: `plan_command`, `plan_json_command`, `output_command`,
  and `parse_output`, which turns `terraform output -json` into a dict of
  `OutputMeta` (`sensitive`, `type`, `value`).
- `tfcommand.refresh`: `refresh_command`, `refresh_json_command`.
- `tfcommand.providers`: `providers_lock_command`, `providers_schema_command`.
- `tfcommand.show`: `show_command`, `show_state_file_command`,
  `show_plan_file_command`, `show_plan_file_raw_command`. An empty file path
  raises `ValueError`.
- `tfcommand.state`: `state_mv_command`, `state_pull_command`,
  `state_push_command` (locking is off by default), `state_rm_command`.
- `tfcommand.taint`: `taint_command`, `untaint_command`.
- `tfcommand.upgrade`: `upgrade012_command` (0.12 releases only),
  `upgrade013_command` (0.13 releases only).
- `tfcommand.validate`: `validate_command`, and `parse_validate_output`, which
  returns the JSON document as a dict. `terraform validate -json` exits with 1
  for an invalid configuration, and its output is still the document to parse.
- `tfcommand.workspace`: `workspace_new_command`, `workspace_delete_command`,
  `workspace_select_command`, `workspace_show_command`,
  `workspace_list_command`, and `parse_workspace_list`, which returns the
  workspace names and the name of the current one.
- `tfcommand.version`: `version_command(json_output)`.

Some builders take a `Version` as their first argument. These builders raise
`tfcommand.version.VersionMismatchError` when the command, or one of the
options given, needs a Terraform version outside the supported range. Some
examples:

- `plan_json_command` needs 0.15.3 or later.
- `plan_command` needs 0.15.2 or later when a `Replace` option is given.
- `providers_lock_command` needs 0.14.0 or later.
- The `show_*_command` builders that take a version need 0.12.0 or later.
- `workspace_new_command` and `workspace_delete_command` need 0.12.0 or later
  when `Lock` or `LockTimeout` is given.

Exit code 2 from `terraform plan` means that the plan has changes. The
commands always pass `-detailed-exitcode`.

## Provider reattachment

`Reattach` holds a mapping of provider addresses to `ReattachConfig` entries.
Each entry holds `protocol`, `protocol_version`, `pid`, `test` and an `addr`
given as a `ReattachConfigAddr`. Commands that accept `Reattach` put
`TF_REATTACH_PROVIDERS` in `Command.env`. The helpers below give that value on
their own:

- `tfcommand.options.reattach_json` returns the compact JSON, with provider
  keys sorted.
- `tfcommand.command.reattach_env` returns the environment dict.

## Versions

```python
from tfcommand.version import (
    Version, parse_plaintext_version_output, version_in_range,
)

tf, providers = parse_plaintext_version_output(
    "Terraform v0.12.26\n+ provider.null v2.1.2\n"
)
version_in_range(tf, Version.parse("0.12.0"), Version.parse("0.13.0"))  # True
```

- `parse_json_version_output` reads `terraform version -json` output. It
  raises `json.JSONDecodeError` on malformed JSON, and you can then fall back
  to the plain-text parser.
- `version_in_range` ignores pre-release and metadata parts, so
  `0.13.0-beta3` counts as `0.13.0`. `Version.core()` gives that stripped
  version.
- `require_version` raises `VersionMismatchError` when the version is out of
  range.

## The Terraform object

`tfcommand.terraform.Terraform(working_dir, exec_path, version)` holds:

- the working directory, which must exist;
- the executable path;
- the Terraform version, as a `Version` or a string;
- the run settings `append_user_agent`, `disable_plugin_tls`, `stdout` and
  `stderr`.

An empty executable path raises `NoSuitableBinaryError`. The logging setters
behave as follows:

- `set_log`, `set_log_core` and `set_log_provider` need 0.15.0 or later.
- `set_log_path` turns on TRACE logging when no level has been chosen.
- `set_skip_provider_verify` works only before 0.13.0.

## What the package does not do

- It never starts Terraform or any other process, and it does not capture
  output or read exit codes. You run each `Command` and pass the output to the
  matching parser yourself.
- The `Terraform` object only records the working directory, the executable
  and the logging settings. It does not turn them into a command environment,
  and it does not attach them to the commands the builders return.
- There are no builders for `init`, `apply`, `destroy`, `import`, `graph`,
  `fmt`, `get` or `console`. Some options that belong to those commands exist
  in `tfcommand.options`, but no builder accepts them. These include
  `Backend`, `BackendConfig`, `Config`, `FromModule`, `GetPlugins`,
  `GraphType` and `Upgrade`.
- The output of `show`, `providers schema` and `validate` is not turned into
  typed objects. `parse_validate_output` returns the plain dict, and the other
  two have no parser in this package.