from unittest.mock import patch

import pytest
import requests

import start


def test_prints_text_report(mock_get, capsys):
    assert start.main([]) == 0

    out = capsys.readouterr().out
    assert "Embarcadero:" in out
    assert "Howard St at Beale St" in out
    assert "status_rendered" not in out


def test_prints_html(mock_get, capsys):
    assert start.main(["--html"]) == 0

    assert capsys.readouterr().out.startswith("<!DOCTYPE html>")


def test_upstream_failure_exits_1(capsys):
    with patch("ebike_status.feed.requests.get", side_effect=requests.exceptions.ConnectionError("down")):
        assert start.main([]) == 1

    assert "Get Status Failed" in capsys.readouterr().err


def test_local_runs_uvicorn():
    with patch("uvicorn.run") as run:
        assert start.main(["--local", "--listen-addr", "0.0.0.0:8080"]) == 0

    run.assert_called_once_with("ebike_status.server:app", host="0.0.0.0", port=8080)


def test_listen_addr():
    assert start.listen_addr("127.0.0.1:1234") == ("127.0.0.1", 1234)
    assert start.listen_addr(":9000") == ("127.0.0.1", 9000)
    assert start.listen_addr("[::1]:80") == ("::1", 80)


@pytest.mark.parametrize("addr", ["localhost", "localhost:http", "127.0.0.1:0", "127.0.0.1:70000"])
def test_bad_listen_addr_is_usage_error(addr, capsys):
    with pytest.raises(SystemExit) as exc:
        start.main(["--local", "--listen-addr", addr])

    assert exc.value.code == 2
    assert "expected HOST:PORT" in capsys.readouterr().err
