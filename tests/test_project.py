import pydantic
import pytest

from provctl.core.errors import ConfigError, ValidationError
from provctl.core.project import HookConfig, HookShell, ProvisioningOptions, load_project
from provctl.core.runtime.resolver import project_root


def test_load_project_with_hooks(tmp_path) -> None:
    (tmp_path / "provctl.yaml").write_text(
        "name: demo\n"
        "infra:\n"
        "  provider: Custom\n"
        "hooks:\n"
        "  preprovision:\n"
        "    run: ./scripts/up.sh\n"
        "  postdown:\n"
        "    run: Remove-Item tmp\n"
        "    shell: pwsh\n"
        "    continue_on_error: true\n",
        encoding="utf-8",
    )

    project = load_project(tmp_path)

    assert project.name == "demo"
    assert project.infra.provider == "custom"
    assert project.infra.path == "infra"
    assert project.hooks["preprovision"].shell == "sh"
    assert project.hooks["postdown"].continue_on_error is True


def test_name_defaults_to_directory(tmp_path) -> None:
    (tmp_path / "provctl.yaml").write_text("infra: {}\n", encoding="utf-8")

    assert load_project(tmp_path).name == tmp_path.name


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        load_project(tmp_path)


def test_invalid_yaml_raises(tmp_path) -> None:
    (tmp_path / "provctl.yaml").write_text("name: [demo\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_project(tmp_path)


def test_invalid_schema_raises(tmp_path) -> None:
    (tmp_path / "provctl.yaml").write_text("name: demo\nhooks:\n  preprovision:\n    shell: bash\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_project(tmp_path)


def test_project_root_searches_parents(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("PROVCTL_PROJECT_ROOT", raising=False)
    (tmp_path / "provctl.yaml").write_text("name: demo\n", encoding="utf-8")
    nested = tmp_path / "src" / "app"
    nested.mkdir(parents=True)

    assert project_root(nested) == tmp_path.resolve()


def test_project_root_env_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PROVCTL_PROJECT_ROOT", str(tmp_path))

    assert project_root() == tmp_path.resolve()


def test_provisioning_options_are_frozen() -> None:
    options = ProvisioningOptions(provider="Custom")

    with pytest.raises(pydantic.ValidationError):
        options.provider = "bicep"
    assert options.provider == "custom"


def test_model_config_uses_config_dict() -> None:
    hook = HookConfig(run="echo hola", shell="pwsh")

    assert HookConfig.model_config["use_enum_values"] is True
    assert ProvisioningOptions.model_config["frozen"] is True
    assert hook.shell == "pwsh"
    assert not isinstance(hook.shell, HookShell)
