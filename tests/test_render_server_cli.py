"""Tests for the render server command line entry point."""
import json

import pytest

from escposkit import render_server
from escposkit.errors import CommandTableNotFoundError
from escposkit.resources import load_table_data


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []

    def fake_run(app, host, port, log_level):
        calls.append({"app": app, "host": host, "port": port, "log_level": log_level})

    monkeypatch.setattr(render_server.uvicorn, "run", fake_run)
    return calls


def test_main_passes_options_to_settings(tmp_path, uvicorn_calls):
    table_path = tmp_path / "table.json"
    table_path.write_text(json.dumps(load_table_data()), encoding="utf-8")

    rc = render_server.main(
        ["--ip", "0.0.0.0", "--port", "9999", "--table", str(table_path), "--code-page", "CP850"]
    )

    assert rc == 0
    assert len(uvicorn_calls) == 1
    call = uvicorn_calls[0]
    assert call["host"] == "0.0.0.0"
    assert call["port"] == 9999
    settings = call["app"].state.settings
    assert settings.command_table_path == str(table_path)
    assert settings.default_code_page == "CP850"
    assert settings.server_port == 9999


def test_main_defaults(uvicorn_calls):
    assert render_server.main([]) == 0
    settings = uvicorn_calls[0]["app"].state.settings
    assert settings.server_ip == "127.0.0.1"
    assert settings.server_port == 10290
    assert settings.command_table_path is None
    assert settings.default_code_page == "CP437"


def test_main_missing_table_fails_before_serving(tmp_path, uvicorn_calls):
    with pytest.raises(CommandTableNotFoundError):
        render_server.main(["--table", str(tmp_path / "missing.json")])
    assert uvicorn_calls == []
