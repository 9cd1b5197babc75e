"""Tests for the ``openfinder`` command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from openfinder import cli


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every CLI test away from any local ``.env`` or config file."""
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:

    def test_overrides_apply_on_top_of_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("server:\n  port: 7000\n  host: 127.0.0.1\n")
        parser = cli.build_parser()
        args = parser.parse_args(["--config", str(config), "--port", "7100", "--log-level", "debug"])

        settings = cli.load_settings(args, parser)

        assert settings.server.port == 7100
        assert settings.server.host == "127.0.0.1"
        assert settings.observability.log_level == "debug"

    def test_unset_flags_keep_defaults(self) -> None:
        parser = cli.build_parser()
        settings = cli.load_settings(parser.parse_args([]), parser)
        assert settings.server.port == 8080
        assert settings.server.workers == 1

    def test_missing_config_file_is_a_usage_error(self, tmp_path: Path) -> None:
        parser = cli.build_parser()
        args = parser.parse_args(["--config", str(tmp_path / "nope.yaml")])
        with pytest.raises(SystemExit) as exc_info:
            cli.load_settings(args, parser)
        assert exc_info.value.code == 2


class TestMain:

    def test_busy_port_exits(self) -> None:
        with patch.object(cli, "_port_available", return_value=False), pytest.raises(SystemExit) as exc_info:
            cli.main(["--port", "9999"])
        assert exc_info.value.code == 1

    def test_runs_app_instance(self) -> None:
        run = MagicMock()
        with patch.object(cli, "_port_available", return_value=True), patch("uvicorn.run", run):
            cli.main(["--port", "9100"])

        app = run.call_args.args[0]
        assert not isinstance(app, str)
        assert run.call_args.kwargs["port"] == 9100

    def test_reload_uses_factory_import_path(self) -> None:
        run = MagicMock()
        with patch.object(cli, "_port_available", return_value=True), patch("uvicorn.run", run):
            cli.main(["--reload"])

        assert run.call_args.args[0] == cli.APP_FACTORY
        assert run.call_args.kwargs["factory"] is True
        assert run.call_args.kwargs["reload"] is True
        assert run.call_args.kwargs["workers"] == 1
