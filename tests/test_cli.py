import logging
import socket
from unittest.mock import MagicMock

import pytest

from storefront import cli
from storefront.errors import StorageInitError


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.preload is False
    assert args.port == 3000
    assert args.db == "./users.db"


def test_parser_preload_flag():
    assert cli.build_parser().parse_args(["--preload"]).preload is True


def test_storage_failure_is_fatal(monkeypatch, caplog):
    def boom(path, preload=False):
        raise StorageInitError("failed to open database")

    monkeypatch.setattr(cli, "init_db", boom)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--db", "whatever.db"])
    assert exc.value.code == 1
    assert "failed to open database" in caplog.text


def test_port_in_use_is_fatal(tmp_path, caplog):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as held:
        held.bind(("127.0.0.1", 0))
        held.listen(1)
        port = held.getsockname()[1]

        with pytest.raises(SystemExit) as exc:
            cli.main(["--db", str(tmp_path / "users.db"), "--host", "127.0.0.1", "--port", str(port)])

    assert exc.value.code == 1
    critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert critical
    assert "failed to start server" in critical[0].getMessage()
    assert not any("Listening on" in r.getMessage() for r in caplog.records)


def test_main_serves_and_closes_storage(monkeypatch, tmp_path):
    server = MagicMock()
    storage = MagicMock()
    calls = {}

    def fake_init_db(path, preload=False):
        calls["path"] = path
        calls["preload"] = preload
        return storage

    def fake_make_server(host, port, app, threaded=False):
        calls["bind"] = (host, port, threaded)
        return server

    monkeypatch.setattr(cli, "init_db", fake_init_db)
    monkeypatch.setattr(cli, "make_server", fake_make_server)

    db = str(tmp_path / "users.db")
    cli.main(["--preload", "--db", db, "--host", "127.0.0.1", "--port", "8080"])

    assert calls == {"path": db, "preload": True, "bind": ("127.0.0.1", 8080, True)}
    server.serve_forever.assert_called_once()
    server.server_close.assert_called_once()
    storage.close.assert_called_once()


def test_storage_closed_when_bind_fails(monkeypatch, tmp_path):
    storage = MagicMock()

    def refuse(host, port, app, threaded=False):
        raise OSError("Permission denied")

    monkeypatch.setattr(cli, "init_db", lambda path, preload=False: storage)
    monkeypatch.setattr(cli, "make_server", refuse)

    with pytest.raises(SystemExit) as exc:
        cli.main(["--db", str(tmp_path / "users.db"), "--port", "80"])
    assert exc.value.code == 1
    storage.close.assert_called_once()


def test_cli_logs_under_module_name(caplog):
    with pytest.raises(SystemExit):
        cli.main(["--db", "/nonexistent-dir/users.db"])
    assert any(r.name == "storefront.cli" and r.levelno == logging.CRITICAL for r in caplog.records)
