class MethodNotAllowed(Exception):
    def __init__(self, method: str, allowed: str = "POST") -> None:
        super().__init__(f"{method} not allowed")
        self.method = method
        self.allowed = allowed


class UpstreamError(Exception):
    """Marketplace answered with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"marketplace returned {status}")
        self.status = status
        self.body = body
