import json

import pytest

from tfcommand.options import (
    Backup,
    Dir,
    Force,
    Lock,
    LockTimeout,
    Reattach,
    ReattachConfig,
    ReattachConfigAddr,
    State,
    StateOut,
    Target,
    Var,
    VarFile,
)
from tfcommand.refresh import refresh_command, refresh_json_command


def _args(text):
    return text.split()


ALL_OPTIONS = (
    Backup("testbackup"), LockTimeout("200s"), State("teststate"),
    StateOut("teststateout"), VarFile("testvarfile"), Lock(False),
    Target("target1"), Target("target2"), Var("var1=foo"), Var("var2=bar"),
    Dir("refreshdir"),
)

ALL_ARGS_HEAD = _args(
    "refresh -no-color -input=false -backup=testbackup -lock-timeout=200s"
    " -state=teststate -state-out=teststateout -var-file=testvarfile -lock=false"
    " -target=target1 -target=target2 -var var1=foo -var var2=bar"
)

DEFAULT_ARGS = _args("refresh -no-color -input=false -lock-timeout=0s -lock=true")


def test_refresh_defaults():
    command = refresh_command()
    assert command.args == DEFAULT_ARGS
    assert command.env == {}


def test_refresh_override_all_defaults():
    command = refresh_command(*ALL_OPTIONS)
    assert command.args == ALL_ARGS_HEAD + ["refreshdir"]


def test_refresh_json_defaults():
    assert refresh_json_command().args == DEFAULT_ARGS + ["-json"]


def test_refresh_json_override_all_defaults():
    command = refresh_json_command(*ALL_OPTIONS)
    assert command.args == ALL_ARGS_HEAD + ["-json", "refreshdir"]


def test_refresh_reattach_sets_environment():
    info = {
        "example/provider": ReattachConfig(
            "grpc", 6, 42, False, ReattachConfigAddr("tcp", "127.0.0.1:1234")
        )
    }
    command = refresh_command(Reattach(info))
    decoded = json.loads(command.env["TF_REATTACH_PROVIDERS"])
    assert decoded["example/provider"]["Pid"] == 42
    assert decoded["example/provider"]["Addr"] == {
        "Network": "tcp",
        "String": "127.0.0.1:1234",
    }


def test_refresh_rejects_unknown_option():
    with pytest.raises(TypeError):
        refresh_command(Force(True))