#!/bin/env python3

import pytest
import socket
from unittest.mock import Mock

from connlib import probe, get_socket_factory
from connlib.params import ConnectionParams, get_connection_timeout


def test_make_connection_returns_socket():
    factory_mock = Mock()
    params = ConnectionParams()
    sock = probe.make_connection(factory_mock, 'localhost', 80, None, 0, params)
    factory_mock.connect_socket.assert_called_once_with(None, 'localhost', 80, None, 0, params)
    assert sock is factory_mock.connect_socket.return_value


def test_make_connection_exits_on_timeout(capsys):
    factory_mock = Mock()
    factory_mock.connect_socket.side_effect = socket.timeout('timed out')
    with pytest.raises(SystemExit) as exc_info:
        probe.make_connection(factory_mock, 'localhost', 80, None, 0, ConnectionParams())
    assert exc_info.value.code == 1
    assert 'Connection timed out' in capsys.readouterr().out


def test_make_connection_exits_on_error(capsys):
    factory_mock = Mock()
    factory_mock.connect_socket.side_effect = ConnectionRefusedError(111, 'Connection refused')
    with pytest.raises(SystemExit) as exc_info:
        probe.make_connection(factory_mock, 'localhost', 80, None, 0, ConnectionParams())
    assert exc_info.value.code == 1
    assert 'Connection error' in capsys.readouterr().out


def test_timeout_overrides_config(tmp_path):
    config = tmp_path / 'params.json'
    config.write_text('{"http.connection.timeout": 1500}')
    assert get_connection_timeout(probe.create_params(str(config), None)) == 1500
    assert get_connection_timeout(probe.create_params(str(config), 200)) == 200
    assert get_connection_timeout(probe.create_params(None, None)) == 0


def test_bad_config_exits(tmp_path, capsys):
    with pytest.raises(SystemExit):
        probe.create_params(str(tmp_path / 'missing.json'), None)
    assert 'Error' in capsys.readouterr().out


def test_main_connects_and_closes(capsys):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(('127.0.0.1', 0))
    server.listen(1)
    try:
        host, port = server.getsockname()
        probe.main(host, port, timeout=5000)
    finally:
        server.close()
    assert "-> ('{}', {})".format(host, port) in capsys.readouterr().out


def test_make_connection_reports_invalid_hostname(capsys):
    with pytest.raises(SystemExit) as exc_info:
        probe.make_connection(get_socket_factory(), 'bad host..invalid', 80, None, 0, ConnectionParams())
    assert exc_info.value.code == 1
    assert 'Connection error' in capsys.readouterr().out
