from unittest import mock

import pytest

from microui.serve import browser_command, main


def test_browser_command_windows():
    assert browser_command("http://localhost:8080", "win32") == [
        "cmd",
        "/c",
        "start",
        "http://localhost:8080",
    ]


def test_browser_command_darwin():
    assert browser_command("http://localhost:8080", "darwin") == [
        "open",
        "http://localhost:8080",
    ]


def test_browser_command_other():
    assert browser_command("http://localhost:8080", "linux") == [
        "xdg-open",
        "http://localhost:8080",
    ]


def test_invalid_port_exits():
    with pytest.raises(SystemExit):
        main(["not-a-port"])


def test_bind_failure_exits():
    with mock.patch(
        "http.server.ThreadingHTTPServer", side_effect=OSError("in use")
    ), mock.patch("subprocess.Popen") as popen:
        with pytest.raises(SystemExit):
            main(["9999"])
    assert popen.call_count == 0


def test_main_serves_default_port_and_opens_browser(capsys):
    with mock.patch("http.server.ThreadingHTTPServer") as server_cls, mock.patch(
        "subprocess.Popen"
    ) as popen:
        server_cls.return_value.serve_forever.side_effect = KeyboardInterrupt
        assert main([]) == 0
    address = server_cls.call_args[0][0]
    assert address == ("", 8080)
    popen.assert_called_once_with(browser_command("http://localhost:8080"))
    server_cls.return_value.server_close.assert_called_once()
    assert "http://localhost:8080" in capsys.readouterr().out


def test_main_uses_given_port():
    with mock.patch("http.server.ThreadingHTTPServer") as server_cls, mock.patch(
        "subprocess.Popen", side_effect=OSError
    ):
        server_cls.return_value.serve_forever.side_effect = KeyboardInterrupt
        assert main(["9090"]) == 0
    assert server_cls.call_args[0][0] == ("", 9090)