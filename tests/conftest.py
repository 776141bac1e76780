from pathlib import Path
from typing import List, Optional

import pytest
from typer.testing import CliRunner

from provctl.core.environment import Environment
from provctl.core.infra.registry import ProviderRegistry
from provctl.providers import register_builtin_providers


class FakeConsole:
    def __init__(self, answer: bool = True, error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.confirm_calls: List[str] = []

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirm_calls.append(message)
        if self.error is not None:
            raise self.error
        return self.answer


class FakePrompter:
    def __init__(self, subscription: str = "sub-123", location: str = "eastus", error: Optional[Exception] = None):
        self.subscription = subscription
        self.location = location
        self.error = error
        self.calls: List[str] = []
        self.filters = []

    def prompt_subscription(self, message: str) -> str:
        self.calls.append("subscription")
        if self.error is not None:
            raise self.error
        return self.subscription

    def prompt_location(self, subscription_id: str, message: str, location_filter) -> str:
        self.calls.append("location")
        self.filters.append(location_filter)
        if self.error is not None:
            raise self.error
        return self.location


@pytest.fixture
def fake_console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture
def fake_prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def ready_env() -> Environment:
    return Environment("dev", values={"AZURE_SUBSCRIPTION_ID": "sub-123", "AZURE_LOCATION": "eastus"})


@pytest.fixture
def registry() -> ProviderRegistry:
    return register_builtin_providers(ProviderRegistry())


@pytest.fixture
def project_dir(tmp_path, monkeypatch) -> Path:
    (tmp_path / "provctl.yaml").write_text("name: demo\ninfra:\n  provider: custom\n", encoding="utf-8")
    monkeypatch.setenv("PROVCTL_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("AZURE_ENV_NAME", raising=False)
    return tmp_path


@pytest.fixture
def cli_runner():
    from provctl.cli.app import app

    return CliRunner(), app
