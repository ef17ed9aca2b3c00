from __future__ import annotations

import os

from battlegrid.game.infra.config import load_default_env_files, load_env_file, load_settings


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "BG_A=1\nBG_B='two'\n#comment\nINVALID\nBG_C=three\n=orphan\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("BG_A", raising=False)
    monkeypatch.delenv("BG_B", raising=False)
    monkeypatch.setenv("BG_C", "already")
    load_env_file(str(env_file))
    assert os.environ.get("BG_A") == "1"
    assert os.environ.get("BG_B") == "two"
    assert os.environ.get("BG_C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("BG_C=three\n", encoding="utf-8")
    monkeypatch.setenv("BG_C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("BG_C") == "already"


def test_load_env_file_missing_is_noop(tmp_path) -> None:
    before = dict(os.environ)
    load_env_file(str(tmp_path / ".env.missing"))
    assert dict(os.environ) == before


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    base_env = tmp_path / ".env"
    local_env = tmp_path / ".env.local"
    base_env.write_text("BG_A=base\nBG_B=base\n", encoding="utf-8")
    local_env.write_text("BG_B=local\n", encoding="utf-8")
    monkeypatch.delenv("BG_A", raising=False)
    monkeypatch.delenv("BG_B", raising=False)

    load_default_env_files(paths=(str(base_env), str(local_env)))

    assert os.environ.get("BG_A") == "base"
    assert os.environ.get("BG_B") == "local"


def test_load_settings_defaults(isolated_app_data) -> None:
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.render_style == "numeric"


def test_load_settings_prefers_prefixed_log_level(isolated_app_data, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert load_settings().log_level == "WARNING"
    monkeypatch.setenv("BATTLEGRID_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("BATTLEGRID_RENDER_STYLE", "Glyph")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.render_style == "glyph"
