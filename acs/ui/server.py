# acs/ui/server.py

"""
Local admin server: the JSON API from ``acs.ui.routes`` plus the admin page
and its static assets.
"""

import json
import mimetypes
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from acs.core.claude import ProfileApplier
from acs.core.config_store import ConfigStore
from acs.core.console import Console, ConsoleAware
from acs.core.i18n import Translator, resolve_language
from acs.ui.routes import ApiResponse, ApiRouter, fail

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888

UI_DIR = Path(__file__).parent
TEMPLATES_DIR = UI_DIR / "templates"
STATIC_DIR = UI_DIR / "static"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_templates = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def resolve_static_path(url_path: str, root: Path = STATIC_DIR) -> Optional[Path]:
    """Map a URL path to a file under root; None when it escapes root."""
    base = root.resolve()
    candidate = (base / unquote(url_path).lstrip("/\\")).resolve()
    if candidate != base and base not in candidate.parents:
        return None
    return candidate


def render_index(language: str) -> str:
    t = Translator(language)
    return _templates.get_template("index.html").render(
        language=t.language,
        t=t,
        messages=json.dumps(t.catalog("ui.page."), ensure_ascii=False),
    )

# ==============================================================
# REQUEST HANDLER
# ==============================================================

class AdminRequestHandler(BaseHTTPRequestHandler):
    server: "AdminServer"

    def _send(self, status: int, body: bytes = b"", content_type: Optional[str] = None) -> None:
        self.send_response(status)
        for name, value in CORS_HEADERS.items():
            self.send_header(name, value)
        if content_type:
            self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body and self.command != "HEAD":
            self.wfile.write(body)

    def _send_json(self, response: ApiResponse) -> None:
        body = json.dumps(response.payload, indent=2, ensure_ascii=False).encode("utf-8")
        self._send(response.status, body, "application/json; charset=utf-8")

    def _read_body(self) -> bytes:
        """
        Raises:
            ValueError: the Content-Length header is not an integer
        """
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length) if length > 0 else b""

    def _handle_api(self) -> None:
        try:
            body = self._read_body()
        except ValueError:
            t = Translator(resolve_language(self.server.store.config_file))
            self.close_connection = True
            self._send_json(fail(400, t("ui.api.badLength")))
            return
        self._send_json(self.server.router.dispatch(self.command, self.path, body))

    def do_OPTIONS(self):
        self._send(200)

    def do_GET(self):
        path = urlsplit(self.path).path
        if path.startswith("/api/"):
            self._handle_api()
            return

        if path in ("/", "/index.html"):
            page = render_index(resolve_language(self.server.store.config_file))
            self._send(200, page.encode("utf-8"), "text/html; charset=utf-8")
            return

        file_path = resolve_static_path(path)
        if file_path is None:
            self._send(403, b"403 Forbidden", "text/plain; charset=utf-8")
            return
        if not file_path.is_file():
            self._send(404, b"404 Not Found", "text/plain; charset=utf-8")
            return

        content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        if content_type.startswith("text/") or content_type.endswith("javascript"):
            content_type += "; charset=utf-8"
        self._send(200, file_path.read_bytes(), content_type)

    def do_POST(self):
        self._handle_api()

    def do_PUT(self):
        self._handle_api()

    def do_DELETE(self):
        self._handle_api()

    def log_message(self, format, *args):
        """Route request logging to the console in verbose mode."""
        self.server.console_awr.log(f"[dim]{self.address_string()} {format % args}[/]")

# ==============================================================
# SERVER
# ==============================================================

class AdminServer(HTTPServer):
    """
    The admin HTTP server. Port 0 picks a free port; the actual one is in
    ``url`` after construction.

    Raises:
        OSError: the address is in use or cannot be bound
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        home: Optional[Path] = None,
        console: Optional[Console] = None,
        verbose: bool = False,
    ):
        self.console_awr = ConsoleAware(console, verbose)
        self.store = ConfigStore(home=home, console=console, verbose=verbose)
        self.router = ApiRouter(
            self.store,
            ProfileApplier(home=self.store.home, console=console, verbose=verbose),
            console=console,
            verbose=verbose,
        )
        super().__init__((host, port), AdminRequestHandler)

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}"
