from textwrap import dedent

import pytest

from core.settings import DEFAULT_LOOKAHEAD, Settings, get_settings, reset_settings_cache


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LINEDIFF_LOOKAHEAD", raising=False)
    monkeypatch.delenv("LINEDIFF_LOG_LEVEL", raising=False)


def write_config(root, content):
    config_dir = root / "config"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text(dedent(content), encoding="utf-8")


def test_defaults_without_config(tmp_path):
    settings = Settings(project_root=tmp_path)
    assert settings.lookahead == DEFAULT_LOOKAHEAD == 4
    assert settings.log_level == "INFO"
    assert settings.log_journal is False
    assert settings.logs_dir == tmp_path.resolve() / "logs"


def test_yaml_overrides(tmp_path):
    write_config(
        tmp_path,
        """
        diff:
          lookahead: 8
        display:
          max_lines: 10
        logging:
          level: debug
          journal: true
        """,
    )
    settings = Settings(project_root=tmp_path)
    assert settings.lookahead == 8
    assert settings.display_max_lines == 10
    assert settings.display_max_width == 160
    assert settings.log_level == "DEBUG"
    assert settings.log_journal is True


def test_invalid_values_keep_defaults(tmp_path):
    write_config(
        tmp_path,
        """
        diff:
          lookahead: -3
        display:
          max_lines: many
        """,
    )
    settings = Settings(project_root=tmp_path)
    assert settings.lookahead == 4
    assert settings.display_max_lines == 200


def test_journal_accepts_only_booleans(tmp_path):
    write_config(
        tmp_path,
        """
        logging:
          journal: "false"
        """,
    )
    assert Settings(project_root=tmp_path).log_journal is False


@pytest.mark.parametrize("value", ["1.9", "true", '"many"'])
def test_non_integer_lookahead_keeps_default(tmp_path, value):
    write_config(tmp_path, f"diff:\n  lookahead: {value}\n")
    assert Settings(project_root=tmp_path).lookahead == 4


def test_non_integer_lookahead_from_env_keeps_default(tmp_path, monkeypatch):
    monkeypatch.setenv("LINEDIFF_LOOKAHEAD", "1.9")
    assert Settings(project_root=tmp_path).lookahead == 4


def test_broken_yaml_keeps_defaults(tmp_path):
    write_config(tmp_path, "diff: [unclosed\n")
    assert Settings(project_root=tmp_path).lookahead == 4


def test_env_overrides_yaml(tmp_path, monkeypatch):
    write_config(tmp_path, "diff:\n  lookahead: 8\n")
    monkeypatch.setenv("LINEDIFF_LOOKAHEAD", "2")
    monkeypatch.setenv("LINEDIFF_LOG_LEVEL", "warning")
    settings = Settings(project_root=tmp_path)
    assert settings.lookahead == 2
    assert settings.log_level == "WARNING"


def test_get_settings_is_cached_per_workspace(tmp_path):
    reset_settings_cache()
    first = get_settings(tmp_path)
    assert get_settings(tmp_path) is first
    reset_settings_cache()
    assert get_settings(tmp_path) is not first
