from typing import Any, Callable, Dict, List, Optional, Union

from httpx import Request, Response

Reply = Union[Response, Callable[[Request], Response]]


def create_content(
    content: Optional[Union[List, str, Dict]] = None,
    type: str = "file",
    size: Optional[int] = None,
    mimetype: Optional[str] = "text/plain",
    name: str = "untitled.txt",
    path: str = "untitled.txt",
    format: Optional[str] = None,
) -> Dict:
    return {
        "content": content,
        "created": "2024-01-01T00:00:00Z",
        "format": format,
        "last_modified": "2024-01-01T00:00:00Z",
        "mimetype": mimetype,
        "name": name,
        "path": path,
        "size": size,
        "type": type,
        "writable": True,
    }


def create_checkpoint(idx: str = "checkpoint") -> Dict:
    return {"id": idx, "last_modified": "2024-01-01T00:00:00Z"}


class MockServer:
    """Replies to the requests it gets with the responses it was given, in order."""

    def __init__(self) -> None:
        self.requests: List[Request] = []
        self._replies: List[Reply] = []

    def reply(self, status_code: int, json: Any = None, **kwargs) -> None:
        if json is not None:
            kwargs["json"] = json
        self._replies.append(Response(status_code, **kwargs))

    def reply_with(self, reply: Callable[[Request], Response]) -> None:
        self._replies.append(reply)

    def handle(self, request: Request) -> Response:
        self.requests.append(request)
        reply = self._replies.pop(0)
        if isinstance(reply, Response):
            return reply
        return reply(request)

    @property
    def request(self) -> Request:
        return self.requests[-1]
