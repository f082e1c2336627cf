from __future__ import annotations

from pathlib import Path

import pytest

from starter_cli.config import ProjectTarget, Settings, load_settings


def test_project_target_resolves_against_cwd(tmp_path: Path):
    target = ProjectTarget.from_name("my-app", cwd=tmp_path)
    assert target.requested_name == "my-app"
    assert target.resolved_path == (tmp_path / "my-app").resolve()
    assert target.base_name == "my-app"


def test_project_target_uses_last_segment(tmp_path: Path):
    target = ProjectTarget.from_name("nested/dir/app", cwd=tmp_path)
    assert target.base_name == "app"
    assert target.resolved_path.parent == (tmp_path / "nested" / "dir").resolve()


def test_project_target_rejects_empty_name(tmp_path: Path):
    with pytest.raises(ValueError):
        ProjectTarget.from_name("", cwd=tmp_path)


def test_load_settings_defaults():
    assert load_settings({}) == Settings()


def test_load_settings_overrides():
    settings = load_settings(
        {
            "STARTER_CLI_GIT": "/opt/git/bin/git",
            "STARTER_CLI_NPM": "pnpm",
            "STARTER_CLI_COMMIT_MESSAGE": "initial import",
            "STARTER_CLI_LOG_LEVEL": "debug",
        }
    )
    assert settings.git == "/opt/git/bin/git"
    assert settings.npm == "pnpm"
    assert settings.node == "node"
    assert settings.commit_message == "initial import"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["verbose", "", "  "])
def test_unknown_log_level_falls_back_to_default(value):
    assert load_settings({"STARTER_CLI_LOG_LEVEL": value}).log_level == "INFO"


def test_log_level_is_normalised():
    assert load_settings({"STARTER_CLI_LOG_LEVEL": " warning "}).log_level == "WARNING"
