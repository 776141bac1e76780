import pytest

from conftest import FakeConsole, FakePrompter
from provctl.core.environment import Environment
from provctl.core.errors import ProviderError
from provctl.core.infra.registry import (
    ProviderRegistry,
    default_registry,
    new_provider,
    provider_kinds,
    register_provider,
)
from provctl.providers import register_builtin_providers
from provctl.providers.custom import CustomProvisionProvider


def test_builtin_registration_is_explicit_and_idempotent() -> None:
    registry = ProviderRegistry()
    assert registry.kinds() == []

    register_builtin_providers(registry)
    register_builtin_providers(registry)

    assert registry.kinds() == ["custom"]


def test_create_is_case_insensitive(registry) -> None:
    provider = registry.create("Custom", Environment("dev"), FakeConsole(), FakePrompter())

    assert isinstance(provider, CustomProvisionProvider)


def test_unknown_kind_raises(registry) -> None:
    with pytest.raises(ProviderError) as exc_info:
        registry.create("bicep", Environment("dev"), FakeConsole(), FakePrompter())
    assert "custom" in str(exc_info.value)


def test_duplicate_registration_raises(registry) -> None:
    with pytest.raises(ProviderError):
        registry.register("custom", lambda env, console, prompter: None)


def test_empty_kind_is_rejected() -> None:
    with pytest.raises(ProviderError):
        ProviderRegistry().register("  ", lambda env, console, prompter: None)


def test_default_registry_is_populated_on_demand() -> None:
    register_builtin_providers()

    assert default_registry().is_registered("custom")


def test_register_provider_and_new_provider_use_default_registry(monkeypatch) -> None:
    monkeypatch.setattr("provctl.core.infra.registry._default_registry", ProviderRegistry())
    env = Environment("dev")
    register_builtin_providers()
    register_provider("Echo", lambda env, console, prompter: CustomProvisionProvider(env, console, prompter))

    assert provider_kinds() == ["custom", "echo"]
    provider = new_provider("echo", env, FakeConsole(), FakePrompter())
    assert isinstance(provider, CustomProvisionProvider)
    assert provider.env is env
    assert isinstance(new_provider("CUSTOM", env, FakeConsole(), FakePrompter()), CustomProvisionProvider)


def test_new_provider_unknown_kind_raises(monkeypatch) -> None:
    monkeypatch.setattr("provctl.core.infra.registry._default_registry", ProviderRegistry())

    with pytest.raises(ProviderError):
        new_provider("custom", Environment("dev"), FakeConsole(), FakePrompter())


def test_register_provider_rejects_duplicates(monkeypatch) -> None:
    monkeypatch.setattr("provctl.core.infra.registry._default_registry", ProviderRegistry())
    register_provider("echo", lambda env, console, prompter: None)

    with pytest.raises(ProviderError):
        register_provider("ECHO", lambda env, console, prompter: None)
