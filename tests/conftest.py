"""Shared pytest fixtures for bigmama-starter tests."""

from pathlib import Path

import pytest

from bigmama_starter.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's config file and environment out of every test."""
    config_path = tmp_path_factory.mktemp("home") / ".bigmama-starter"
    monkeypatch.setattr("bigmama_starter.config.manager.CONFIG_FILE", config_path)
    for key in Settings.get_config_keys():
        monkeypatch.delenv(key, raising=False)
    return config_path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def existing_vscode(project_dir: Path) -> Path:
    """Create a .vscode directory with user content in the project."""
    vscode = project_dir / ".vscode"
    vscode.mkdir()
    (vscode / "settings.json").write_text('{"editor.tabSize": 8}')
    (vscode / "launch.json").write_text('{"configurations": []}')
    return vscode
