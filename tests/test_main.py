"""Tests for the CLI entry point."""

import logging

import pytest

from skydash import main as main_module


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate main() from the developer's .env and SKYDASH_* variables."""
    monkeypatch.setattr(main_module, "load_dotenv", lambda: None)
    for name in ("SKYDASH_LANG", "SKYDASH_TIMEZONE", "SKYDASH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestMain:
    """Tests for main."""

    def test_prints_two_lines(self, clean_env, capsys):
        """Test the init message is followed by the dashboard."""
        main_module.main()

        out = capsys.readouterr().out
        first, rest = out.split("\n", 1)
        assert first == "Initializing Dashboard..."
        assert rest.startswith("\n=========================================\n          DASHBOARD OVERVIEW")
        assert "Loading..." not in rest

    def test_korean(self, clean_env, monkeypatch, capsys):
        """Test SKYDASH_LANG switches the printed labels."""
        monkeypatch.setenv("SKYDASH_LANG", "ko")

        main_module.main()

        out = capsys.readouterr().out
        assert out.startswith("대시보드 초기화 중...\n")
        assert "대시보드 개요" in out

    @pytest.mark.parametrize(
        "name, value",
        [
            ("SKYDASH_LANG", "fr"),
            ("SKYDASH_TIMEZONE", "Mars/Olympus_Mons"),
            ("SKYDASH_LOG_LEVEL", "LOUD"),
        ],
    )
    def test_invalid_setting_falls_back_to_defaults(self, clean_env, monkeypatch, capsys, caplog, name, value):
        """Test a bad setting is logged and the English dashboard still prints."""
        monkeypatch.setenv(name, value)

        with caplog.at_level(logging.WARNING, logger="skydash.main"):
            main_module.main()

        out = capsys.readouterr().out
        first, rest = out.split("\n", 1)
        assert first == "Initializing Dashboard..."
        assert rest.startswith("\n=========================================\n          DASHBOARD OVERVIEW")
        assert "Visitor Star Sign: " in rest
        assert value in caplog.text

    def test_render_time_not_formatted_below_info(self, clean_env, monkeypatch):
        """Test the human-readable time is skipped when INFO logging is off."""
        def fail(*args, **kwargs):
            raise AssertionError("format_human_readable called")

        monkeypatch.setattr(main_module, "format_human_readable", fail)
        monkeypatch.setattr(main_module.logger, "isEnabledFor", lambda level: level >= logging.WARNING)

        main_module.main()

    def test_render_time_logged_at_info(self, clean_env, caplog):
        """Test the render time is logged when INFO logging is on."""
        with caplog.at_level(logging.INFO, logger="skydash.main"):
            main_module.main()

        assert "Dashboard rendered at" in caplog.text
