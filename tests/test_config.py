"""
Tests for settings, logging setup and the command-line entry point
"""
import logging

import pytest

from logistics_records.__main__ import build_parser, main
from logistics_records.config import Settings
from logistics_records.logger import configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LOGISTICS_LOG_LEVEL", "LOGISTICS_SEED_DEMO", "LOGISTICS_APP_TITLE"):
        # setenv first so teardown also drops values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:
    """Tests for Settings.from_env"""

    def test_defaults(self, clean_env):
        settings = Settings.from_env(dotenv=False)

        assert settings == Settings()
        assert settings.log_level == "WARNING"
        assert settings.seed_demo_data is False

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("LOGISTICS_LOG_LEVEL", "debug")
        clean_env.setenv("LOGISTICS_SEED_DEMO", "yes")
        clean_env.setenv("LOGISTICS_APP_TITLE", "Depot")

        settings = Settings.from_env(dotenv=False)

        assert settings == Settings(log_level="DEBUG", seed_demo_data=True, app_title="Depot")

    @pytest.mark.parametrize("raw,expected", [("1", True), ("On", True), ("0", False), ("", False)])
    def test_seed_flag(self, clean_env, raw, expected):
        clean_env.setenv("LOGISTICS_SEED_DEMO", raw)

        assert Settings.from_env(dotenv=False).seed_demo_data is expected

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("LOGISTICS_APP_TITLE=From file\n")
        clean_env.chdir(tmp_path)

        assert Settings.from_env().app_title == "From file"


class TestLogging:
    """Tests for configure_logging"""

    def test_repeat_calls_add_one_handler(self):
        root = logging.getLogger()
        configure_logging("INFO")
        handlers = list(root.handlers)

        configure_logging("DEBUG")

        assert root.handlers == handlers
        assert root.level == logging.DEBUG
        configure_logging(logging.WARNING)


class TestEntryPoint:
    """Tests for the logistics-records command"""

    def test_parser_flags(self):
        args = build_parser().parse_args(["--log-level", "info", "--seed"])

        assert args.log_level == "info"
        assert args.seed is True

    def test_seed_defaults_to_environment(self):
        assert build_parser().parse_args([]).seed is None

    def test_main_runs_console(self, clean_env, monkeypatch, capsys):
        answers = iter(["1", "5", "0"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--seed"]) == 0

        out = capsys.readouterr().out
        assert '"city":"Sparks"' in out
        assert out.rstrip().endswith("Bye!")
