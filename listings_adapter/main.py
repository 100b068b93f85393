from http.server import ThreadingHTTPServer
from .adapters.http.server import ListingsRequestHandler
from .infrastructure.config import settings


def serve(host: str = settings.host, port: int = settings.port) -> None:
    server = ThreadingHTTPServer((host, port), ListingsRequestHandler)
    print(f"[server] Listening on http://{host}:{server.server_address[1]}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("[server] Shutting down…")
    finally:
        server.server_close()


if __name__ == "__main__":
    serve()
