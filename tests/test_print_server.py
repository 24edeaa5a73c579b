"""Unit tests for the printable-tab server."""

import os
import urllib.request

import pytest

from print_server import PrintServer, cleanup_temp_server, get_server_status, serve_html_temporarily


@pytest.fixture
def server():
    srv = PrintServer(host="127.0.0.1")
    yield srv
    srv.stop_server()


def _fetch(url):
    with urllib.request.urlopen(url, timeout=5) as resp:
        return resp.read().decode("utf-8")


@pytest.mark.unit
def test_serves_page(server):
    url = server.start_server("<h1>Mario Rossi</h1>")

    assert server.is_server_running()
    assert url == f"http://localhost:{server.port}/cv.html"
    assert _fetch(f"http://127.0.0.1:{server.port}/cv.html") == "<h1>Mario Rossi</h1>"


@pytest.mark.unit
def test_update_keeps_port(server):
    server.start_server("<p>v1</p>")
    port = server.port

    server.update_content("<p>v2</p>")

    assert server.port == port
    assert _fetch(f"http://127.0.0.1:{port}/cv.html") == "<p>v2</p>"


@pytest.mark.unit
def test_update_starts_when_stopped(server):
    assert not server.is_server_running()
    server.update_content("<p>hello</p>")
    assert server.is_server_running()


@pytest.mark.unit
def test_stop_cleans_up(server):
    server.start_server("<p>bye</p>")
    temp_dir = server.temp_dir

    server.stop_server()

    assert not server.is_server_running()
    assert server.port is None
    assert not os.path.exists(temp_dir)


@pytest.mark.unit
def test_module_helpers_report_status():
    url = serve_html_temporarily("<p>tab</p>")
    try:
        status = get_server_status()
        assert status["running"]
        assert url.endswith(f":{status['port']}/cv.html")
    finally:
        cleanup_temp_server()

    assert get_server_status() == {"running": False, "port": None, "temp_dir": None}
