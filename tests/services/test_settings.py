"""Tests for loading StoreSettings from .env and the environment."""

import logging

import pytest

from rankboard.services.config import StoreSettings, load_settings
from rankboard.services.store import MemoryRecordStore, RestRecordStore, build_store


class TestLoadSettings:
    """Tests for .env parsing and environment overrides."""

    def test_defaults_without_env_file(self, tmp_path) -> None:
        settings = load_settings(tmp_path / ".env", environ={})

        assert settings == StoreSettings()
        assert settings.table == "sit-leaderboard"
        assert settings.timeout == pytest.approx(10.0)

    def test_reads_env_file(self, tmp_path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text(
            "RANKBOARD_STORE_URL='https://demo.supabase.co'\n"
            "RANKBOARD_STORE_KEY=anon\n"
            "RANKBOARD_TABLE=scores\n"
            "RANKBOARD_TIMEOUT=2.5\n"
            "RANKBOARD_TITLE='Monkey Type Leaderboard'\n"
            "UNRELATED=1\n"
        )

        settings = load_settings(env_path, environ={})

        assert settings.url == "https://demo.supabase.co"
        assert settings.api_key == "anon"
        assert settings.table == "scores"
        assert settings.timeout == pytest.approx(2.5)
        assert settings.title == "Monkey Type Leaderboard"

    def test_environment_overrides_file(self, tmp_path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("RANKBOARD_TABLE=from-file\n")

        settings = load_settings(
            env_path, environ={"RANKBOARD_TABLE": "from-env", "PATH": "/bin"}
        )

        assert settings.table == "from-env"

    def test_blank_values_fall_back_to_defaults(self, tmp_path) -> None:
        settings = load_settings(
            tmp_path / ".env", environ={"RANKBOARD_TABLE": "  ", "RANKBOARD_TITLE": ""}
        )

        assert settings.table == StoreSettings.DEFAULT_TABLE
        assert settings.title == StoreSettings.DEFAULT_TITLE

    def test_reads_process_environment_by_default(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("RANKBOARD_TITLE", "From Process")

        assert load_settings(tmp_path / ".env").title == "From Process"

    def test_default_env_file_follows_working_directory(
        self, tmp_path, monkeypatch
    ) -> None:
        """The default .env is looked up at call time, not at import."""
        project = tmp_path / "project"
        project.mkdir()
        (project / ".env").write_text("RANKBOARD_TABLE=from-cwd\n")
        monkeypatch.chdir(project)

        assert load_settings(environ={}).table == "from-cwd"

    @pytest.mark.parametrize(
        "raw",
        [pytest.param("soon", id="not_a_number"), pytest.param("-1", id="negative")],
    )
    def test_invalid_timeout_uses_default(self, tmp_path, caplog, raw: str) -> None:
        with caplog.at_level(logging.WARNING):
            settings = load_settings(
                tmp_path / ".env", environ={"RANKBOARD_TIMEOUT": raw}
            )

        assert settings.timeout == StoreSettings.DEFAULT_TIMEOUT
        assert "RANKBOARD_TIMEOUT" in caplog.text


class TestBuildStore:
    """Tests for choosing a store implementation."""

    def test_memory_store_without_url(self) -> None:
        assert isinstance(build_store(StoreSettings()), MemoryRecordStore)

    @pytest.mark.asyncio
    async def test_rest_store_with_url(self) -> None:
        store = build_store(
            StoreSettings(url="https://demo.supabase.co", table="scores")
        )

        assert isinstance(store, RestRecordStore)
        assert store.table == "scores"
        await store.aclose()
