"""Tests for settings, logging setup and the CLI entry point."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from planner_api import log_config, server
from planner_api.config import Settings
from planner_api.errors import StoreError


class TestSettings:
    def test_from_env_defaults(self):
        with patch.dict("os.environ", {"DATABASE_URL": "postgresql://test"}, clear=True):
            settings = Settings.from_env()
        assert settings.database_url == "postgresql://test"
        assert settings.pool_min == 1
        assert settings.pool_max == 10
        assert settings.server_addr == "127.0.0.1:8080"

    def test_from_env_overrides(self):
        env = {
            "DATABASE_URL": "postgresql://test",
            "DB_POOL_MIN": "2",
            "DB_POOL_MAX": "20",
            "SERVER_ADDR": "0.0.0.0:9000",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = Settings.from_env()
        assert settings.pool_max == 20
        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    def test_raises_without_database_url(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="DATABASE_URL"):
                Settings.from_env()


class TestSetupLogging:
    def test_skips_when_root_configured(self, tmp_path):
        root = MagicMock()
        root.handlers = [logging.NullHandler()]
        with patch("planner_api.log_config.logging.getLogger", return_value=root):
            log_config.setup_logging(log_dir=str(tmp_path / "logs"))
        root.addHandler.assert_not_called()
        assert not (tmp_path / "logs").exists()

    def test_configures_console_and_file(self, tmp_path):
        root = logging.getLogger("planner_api.test_root")
        named = logging.getLogger("planner_api.test_named")
        try:
            with patch("planner_api.log_config.logging.getLogger",
                       side_effect=lambda name=None: root if name is None else named):
                log_config.setup_logging("debug", log_dir=str(tmp_path))
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert (tmp_path / "planner_api.log").exists()
        finally:
            for logger in (root, named):
                for handler in list(logger.handlers):
                    handler.close()
                    logger.removeHandler(handler)


class TestMain:
    @pytest.fixture(autouse=True)
    def _env(self):
        with patch.dict("os.environ", {"DATABASE_URL": "postgresql://test"}, clear=True), \
             patch("planner_api.server.setup_logging"):
            yield

    def test_serve_uses_addr_flag(self):
        with patch("planner_api.server.create_app") as mock_create:
            server.main(["serve", "--addr", "0.0.0.0:5000"])
        mock_create.return_value.run.assert_called_once_with(
            host="0.0.0.0", port=5000, debug=False)

    def test_serve_closes_pool_on_shutdown(self, mock_pool):
        with patch("planner_api.server.create_app") as mock_create:
            mock_create.return_value.extensions = {"db_pool": mock_pool}
            mock_create.return_value.run.side_effect = KeyboardInterrupt
            with pytest.raises(KeyboardInterrupt):
                server.main(["serve"])
        mock_pool.closeall.assert_called_once()

    def test_init_db_creates_schema(self, mock_pool, mock_cursor):
        with patch("planner_api.server.create_pool", return_value=mock_pool):
            server.main(["init-db"])
        assert mock_cursor.execute.call_count == 7
        mock_pool.closeall.assert_called_once()

    def test_init_db_failure_exits(self, mock_pool):
        with patch("planner_api.server.create_pool", return_value=mock_pool), \
             patch("planner_api.server.init_schema", side_effect=StoreError("permission denied")):
            with pytest.raises(SystemExit) as exc:
                server.main(["init-db"])
        assert exc.value.code == 1
        mock_pool.closeall.assert_called_once()

    def test_command_required(self):
        with pytest.raises(SystemExit):
            server.main([])
