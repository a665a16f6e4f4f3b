from __future__ import annotations

from . import Config


class ContentsConfig(Config):
    base_url: str = "http://127.0.0.1:8000"
    token: str | None = None
    headers: dict[str, str] = {}
    debug: bool = False

    def request_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers
