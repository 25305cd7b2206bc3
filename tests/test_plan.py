import json

import pytest

from tfcommand.options import (
    Destroy,
    Dir,
    Force,
    Lock,
    LockTimeout,
    Out,
    Parallelism,
    Reattach,
    ReattachConfig,
    ReattachConfigAddr,
    Refresh,
    Replace,
    State,
    Target,
    Var,
    VarFile,
)
from tfcommand.plan import (
    OutputMeta,
    output_command,
    parse_output,
    plan_command,
    plan_json_command,
)
from tfcommand.version import Version, VersionMismatchError

LATEST = Version.parse("1.4.6")


def _args(text):
    return text.split()


ALL_OPTIONS = (
    Destroy(True), Lock(False), LockTimeout("22s"), Out("whale"), Parallelism(42),
    Refresh(False), Replace("ford.prefect"), Replace("arthur.dent"), State("marvin"),
    Target("zaphod"), Target("beeblebrox"), Var("android=paranoid"),
    Var("brain_size=planet"), VarFile("trillian"), Dir("earth"),
)

ALL_ARGS_HEAD = _args(
    "plan -no-color -input=false -detailed-exitcode -lock-timeout=22s -out=whale"
    " -state=marvin -var-file=trillian -lock=false -parallelism=42 -refresh=false"
    " -replace=ford.prefect -replace=arthur.dent -destroy -target=zaphod"
    " -target=beeblebrox -var android=paranoid -var brain_size=planet"
)

DEFAULT_ARGS = _args(
    "plan -no-color -input=false -detailed-exitcode -lock-timeout=0s"
    " -lock=true -parallelism=10 -refresh=true"
)


def test_plan_defaults():
    command = plan_command(LATEST)
    assert command.args == DEFAULT_ARGS
    assert command.env == {}


def test_plan_override_all_defaults():
    command = plan_command(LATEST, *ALL_OPTIONS)
    assert command.args == ALL_ARGS_HEAD + ["earth"]
    assert command.env == {}


def test_plan_json_defaults():
    command = plan_json_command(LATEST)
    assert command.args == DEFAULT_ARGS + ["-json"]


def test_plan_json_override_all_defaults():
    command = plan_json_command(LATEST, *ALL_OPTIONS)
    assert command.args == ALL_ARGS_HEAD + ["-json", "earth"]


def test_plan_replace_requires_0_15_2():
    with pytest.raises(VersionMismatchError) as info:
        plan_command(Version.parse("0.15.1"), Replace("a.b"))
    assert info.value.min_inclusive == "0.15.2"
    assert info.value.actual == "0.15.1"


def test_plan_replace_allowed_on_0_15_2():
    command = plan_command(Version.parse("0.15.2"), Replace("a.b"))
    assert "-replace=a.b" in command.args


def test_plan_without_replace_works_on_old_versions():
    command = plan_command(Version.parse("0.12.0"))
    assert command.args == DEFAULT_ARGS


def test_plan_json_requires_0_15_3():
    with pytest.raises(VersionMismatchError):
        plan_json_command(Version.parse("0.15.2"))


def test_plan_reattach_sets_environment():
    info = {
        "registry.terraform.io/hashicorp/null": ReattachConfig(
            "grpc", 5, 1234, True, ReattachConfigAddr("unix", "/tmp/plugin")
        )
    }
    command = plan_command(LATEST, Reattach(info))
    decoded = json.loads(command.env["TF_REATTACH_PROVIDERS"])
    assert decoded == {
        "registry.terraform.io/hashicorp/null": {
            "Protocol": "grpc",
            "ProtocolVersion": 5,
            "Pid": 1234,
            "Test": True,
            "Addr": {"Network": "unix", "String": "/tmp/plugin"},
        }
    }


def test_plan_rejects_unknown_option():
    with pytest.raises(TypeError):
        plan_command(LATEST, Force(True))


def test_output_defaults():
    assert output_command().args == _args("output -no-color -json")


def test_output_override_all_defaults():
    command = output_command(State("teststate"))
    assert command.args == _args("output -no-color -json -state=teststate")
    assert command.env == {}


def test_output_rejects_unknown_option():
    with pytest.raises(TypeError):
        output_command(Lock(True))


def test_parse_output():
    stdout = (
        '{"foo": {"sensitive": false, "type": "string", "value": "bar"},'
        ' "ids": {"sensitive": true, "type": ["list", "number"], "value": [1, 2]}}'
    )
    assert parse_output(stdout) == {
        "foo": OutputMeta(False, "string", "bar"),
        "ids": OutputMeta(True, ["list", "number"], [1, 2]),
    }


def test_parse_output_empty_object():
    assert parse_output("{}") == {}


def test_parse_output_invalid_json():
    with pytest.raises(json.JSONDecodeError):
        parse_output("not json")


def test_parse_output_non_object():
    with pytest.raises(ValueError):
        parse_output("[1, 2]")