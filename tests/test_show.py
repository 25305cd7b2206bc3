import pytest

from tfcommand.options import Lock, Reattach, ReattachConfig, ReattachConfigAddr, reattach_json
from tfcommand.show import (
    show_command,
    show_plan_file_command,
    show_plan_file_raw_command,
    show_state_file_command,
)
from tfcommand.version import Version, VersionMismatchError

LATEST = Version.parse("1.4.6")
OLD = Version.parse("0.11.14")


def _info():
    return {
        "registry.terraform.io/hashicorp/null": ReattachConfig(
            "grpc", 5, 1234, True, ReattachConfigAddr("unix", "/tmp/plugin.sock")
        )
    }


def test_show_defaults():
    command = show_command(LATEST)
    assert command.args == ["show", "-json", "-no-color"]
    assert command.env == {}


def test_show_state_file():
    command = show_state_file_command(LATEST, "statefilepath")
    assert command.args == ["show", "-json", "-no-color", "statefilepath"]
    assert command.env == {}


def test_show_plan_file():
    command = show_plan_file_command(LATEST, "planfilepath")
    assert command.args == ["show", "-json", "-no-color", "planfilepath"]


def test_show_plan_file_raw():
    command = show_plan_file_raw_command("planfilepath")
    assert command.args == ["show", "-no-color", "planfilepath"]


def test_show_reattach_sets_env():
    info = _info()
    command = show_command(LATEST, Reattach(info))
    assert command.env == {"TF_REATTACH_PROVIDERS": reattach_json(info)}


def test_show_raw_reattach_sets_env():
    info = _info()
    command = show_plan_file_raw_command("plan", Reattach(info))
    assert command.env == {"TF_REATTACH_PROVIDERS": reattach_json(info)}


@pytest.mark.parametrize(
    "build",
    [
        lambda: show_command(OLD),
        lambda: show_state_file_command(OLD, "state"),
        lambda: show_plan_file_command(OLD, "plan"),
    ],
)
def test_show_requires_0_12(build):
    with pytest.raises(VersionMismatchError) as info:
        build()
    assert info.value.min_inclusive == "0.12.0"
    assert info.value.actual == "0.11.14"


@pytest.mark.parametrize(
    "build",
    [
        lambda: show_state_file_command(LATEST, ""),
        lambda: show_plan_file_command(LATEST, ""),
        lambda: show_plan_file_raw_command(""),
    ],
)
def test_blank_path_rejected(build):
    with pytest.raises(ValueError, match="cannot be blank"):
        build()


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        show_command(LATEST, Lock(True))