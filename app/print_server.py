"""
Temporary file server for opening the printable CV in its own browser tab
"""
import atexit
import logging
import shutil
import socket
import tempfile
import threading
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from config import SERVER_HOST

log = logging.getLogger(__name__)


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        log.debug("%s - %s", self.address_string(), format % args)


class PrintServer:
    def __init__(self, host: str = SERVER_HOST):
        self.host = host
        self.server = None
        self.server_thread = None
        self.temp_dir = None
        self.port = None
        self.is_running = False

    def start_server(self, html_content: str, filename: str = "cv.html") -> str:
        """
        Serve `html_content` from a fresh temporary directory.
        Any running instance is stopped first. Returns the page URL.
        """
        if self.is_running:
            self.stop_server()

        self.temp_dir = tempfile.mkdtemp(prefix="cv-print-")
        (Path(self.temp_dir) / filename).write_text(html_content, encoding="utf-8")

        handler = partial(_QuietHandler, directory=self.temp_dir)
        self.server = ThreadingHTTPServer((self.host, 0), handler)
        self.port = self.server.server_address[1]

        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True
        log.info("Printable page served at %s", self.url(filename))
        return self.url(filename)

    def update_content(self, html_content: str, filename: str = "cv.html") -> str:
        """
        Rewrite the served page without changing port.
        Starts the server if it is not running yet.
        """
        if not self.is_running or not self.temp_dir:
            return self.start_server(html_content, filename)

        (Path(self.temp_dir) / filename).write_text(html_content, encoding="utf-8")
        return self.url(filename)

    def stop_server(self):
        """Stop the server and remove its temporary directory"""
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)
            self.server_thread = None

        if self.temp_dir:
            shutil.rmtree(self.temp_dir, ignore_errors=True)
            self.temp_dir = None

        self.is_running = False
        self.port = None

    def is_server_running(self) -> bool:
        return self.is_running and self.server is not None

    def url(self, filename: str = "cv.html") -> str:
        host = "localhost" if self.host in ("127.0.0.1", "0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}/{filename}"

    def network_url(self, filename: str = "cv.html") -> str:
        """URL reachable from other machines when bound to all interfaces."""
        return f"http://{_get_local_ip()}:{self.port}/{filename}"


def _get_local_ip() -> str:
    """Get the local network IP address of the machine."""
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # Doesn't have to be reachable
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


# Global instance for the streamlit app
_temp_server = PrintServer()


def serve_html_temporarily(html_content: str, filename: str = "cv.html") -> str:
    """
    Serve the printable page, reusing the running server when there is one.
    Returns URL where the content can be accessed.
    """
    return _temp_server.update_content(html_content, filename)


def cleanup_temp_server():
    _temp_server.stop_server()


def get_server_status() -> dict:
    """Get current server status"""
    return {
        "running": _temp_server.is_server_running(),
        "port": _temp_server.port,
        "temp_dir": _temp_server.temp_dir,
    }


def network_url(filename: str = "cv.html") -> str:
    return _temp_server.network_url(filename)


atexit.register(cleanup_temp_server)
