from http.server import BaseHTTPRequestHandler
from typing import Callable, Optional
from .handler import default_service, handle_request
from ...application.service import ListingsService


class ListingsRequestHandler(BaseHTTPRequestHandler):
    """Serves the listings pipeline under the ``BaseHTTPRequestHandler`` convention."""

    service_factory: Callable[[], ListingsService] = staticmethod(default_service)

    def _read_body(self) -> Optional[bytes]:
        try:
            length = int(self.headers.get("content-length", 0) or 0)
        except ValueError:
            print(f"[server] Ignoring malformed Content-Length: {self.headers.get('content-length')!r}")
            return None
        if length <= 0:
            return None
        return self.rfile.read(length)

    def _handle(self, write_body: bool = True) -> None:
        resp = handle_request(self.command, self._read_body(), service_factory=self.service_factory)
        data = resp.to_json().encode("utf-8")
        self.send_response(resp.status)
        for k, v in resp.headers.items():
            self.send_header(k, v)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if write_body:
            self.wfile.write(data)

    def do_POST(self):
        self._handle()

    def do_GET(self):
        self._handle()

    def do_PUT(self):
        self._handle()

    def do_PATCH(self):
        self._handle()

    def do_DELETE(self):
        self._handle()

    def do_OPTIONS(self):
        self._handle()

    def do_HEAD(self):
        self._handle(write_body=False)

    def log_message(self, format, *args):
        print(f"[server] {self.address_string()} {format % args}")
