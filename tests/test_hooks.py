import subprocess
from typing import List

import pytest

from provctl.core.environment import Environment
from provctl.core.errors import HookError
from provctl.core.hooks import HooksRunner, hook_command
from provctl.core.project.models import HookConfig


def _result(returncode: int, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_missing_hook_is_skipped(tmp_path) -> None:
    calls: List[list] = []

    def runner(cmd, **kwargs):
        calls.append(cmd)
        return _result(0)

    hooks = HooksRunner(tmp_path, {}, Environment("dev"), runner=runner)

    assert hooks.run("pre", "provision") is False
    assert calls == []


def test_hook_runs_with_environment_values(tmp_path) -> None:
    seen = {}

    def runner(cmd, **kwargs):
        seen["cmd"] = cmd
        seen.update(kwargs)
        return _result(0, stdout="ok")

    env = Environment("dev", values={"AZURE_LOCATION": "eastus"})
    hooks = HooksRunner(tmp_path, {"preprovision": HookConfig(run="echo $AZURE_LOCATION")}, env, runner=runner)

    assert hooks.run("pre", "provision") is True
    assert seen["cmd"] == ["sh", "-c", "echo $AZURE_LOCATION"]
    assert seen["cwd"] == str(tmp_path)
    assert seen["env"]["AZURE_LOCATION"] == "eastus"
    assert seen["capture_output"] is True


def test_failing_hook_raises(tmp_path) -> None:
    hooks = HooksRunner(
        tmp_path,
        {"predown": HookConfig(run="exit 3")},
        Environment("dev"),
        runner=lambda cmd, **kwargs: _result(3, stderr="boom"),
    )

    with pytest.raises(HookError) as exc_info:
        hooks.run("pre", "down")
    assert exc_info.value.exit_code == 3
    assert "boom" in str(exc_info.value)


def test_continue_on_error_swallows_failure(tmp_path) -> None:
    hooks = HooksRunner(
        tmp_path,
        {"postdown": HookConfig(run="exit 1", continue_on_error=True)},
        Environment("dev"),
        runner=lambda cmd, **kwargs: _result(1),
    )

    assert hooks.run("post", "down") is True


def test_pwsh_hook_command() -> None:
    assert hook_command(HookConfig(run="Write-Host hi", shell="pwsh"))[:3] == ["pwsh", "-NoProfile", "-Command"]


def test_hook_can_update_environment_file(tmp_path) -> None:
    env_root = tmp_path / ".provctl" / "dev"
    env = Environment("dev", root=env_root)
    env.save()
    hook = HookConfig(run=f"echo \"RESOURCE_ID='abc'\" >> {env_root / '.env'}")

    hooks = HooksRunner(tmp_path, {"postprovision": hook}, env)
    hooks.run("post", "provision")

    assert env.getenv("RESOURCE_ID") == "abc"
