from __future__ import annotations

import json
from contextlib import AsyncExitStack
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Callable

import structlog
from httpx import AsyncClient
from pydantic import BaseModel

from ..config import ContentsConfig
from ..exceptions import ContentsError, DirectoryNotFoundError, InvalidStatusError
from ..transport import AjaxSettings, ajax_request
from ..utils import json_to_query_string, url_join_encode, url_path_join
from ..validate import (
    validate_checkpoint_list,
    validate_checkpoint_model,
    validate_contents_model,
)
from .models import (
    Checkpoint,
    Content,
    ContentsOptions,
    CopyContent,
    CreateContent,
    RenameContent,
)

logger = structlog.get_logger()

SERVICE_CONTENTS_URL = "api/contents"


@dataclass(frozen=True)
class Operation:
    """What a contents operation sends, and which responses it accepts."""

    method: str
    accepted: frozenset[int]
    # turns the response body into the returned value, or None if there is no body
    result: Callable[[Any], Any] | None = None
    # status codes that have a more specific meaning than "invalid status"
    error_map: dict[int, type[InvalidStatusError]] = field(default_factory=dict)
    # whether other failures are reported with the server's status text
    status_text_errors: bool = False

    def status_error(self, status: int, status_text: str) -> InvalidStatusError:
        error_type = self.error_map.get(status)
        if error_type is not None:
            return error_type(status, status_text)
        if self.status_text_errors:
            return InvalidStatusError(status, status_text, message=status_text or None)
        return InvalidStatusError(status, status_text)


OPERATIONS: dict[str, Operation] = {
    "get": Operation("GET", frozenset({200}), validate_contents_model),
    "new_untitled": Operation("POST", frozenset({201}), validate_contents_model),
    # 200 for an existing file, 201 for a new one
    "save": Operation("PUT", frozenset({200, 201}), validate_contents_model),
    "rename": Operation("PATCH", frozenset({200}), validate_contents_model),
    "copy": Operation("POST", frozenset({201}), validate_contents_model),
    # FIXME: the server doesn't tell error causes apart, so 400 is only our best guess
    "delete": Operation(
        "DELETE",
        frozenset({204}),
        error_map={400: DirectoryNotFoundError},
        status_text_errors=True,
    ),
    "create_checkpoint": Operation("POST", frozenset({201}), validate_checkpoint_model),
    "list_checkpoints": Operation("GET", frozenset({200}), validate_checkpoint_list),
    "restore_checkpoint": Operation("POST", frozenset({204})),
    "delete_checkpoint": Operation("DELETE", frozenset({204})),
}


class Contents:
    """A client for the contents API of a Jupyter server, checkpoints included.

    Every operation issues one request and either returns a validated model, or raises
    a ContentsError. Nothing is retried, and concurrent operations are not ordered.
    """

    _client: AsyncClient | None
    _exit_stack: AsyncExitStack | None

    def __init__(
        self,
        base_url: str,
        *,
        client: AsyncClient | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._api_url = url_path_join(base_url, SERVICE_CONTENTS_URL)
        self._client = client
        self._headers = dict(headers or {})
        self._exit_stack = None

    @classmethod
    def from_config(cls, config: ContentsConfig, client: AsyncClient | None = None) -> Contents:
        return cls(config.base_url, client=client, headers=config.request_headers())

    @property
    def api_url(self) -> str:
        return self._api_url

    async def __aenter__(self) -> Contents:
        if self._client is None:
            async with AsyncExitStack() as exit_stack:
                self._client = await exit_stack.enter_async_context(AsyncClient(timeout=None))
                self._exit_stack = exit_stack.pop_all()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None:
        if self._exit_stack is None:
            return None
        self._client = None
        exit_stack, self._exit_stack = self._exit_stack, None
        return await exit_stack.__aexit__(exc_type, exc_val, exc_tb)

    async def get(self, path: str, options: ContentsOptions | None = None) -> Content:
        """Get a file or directory."""
        params: dict[str, str] = {}
        if options is not None:
            if options.type is not None:
                params["type"] = options.type
            if options.format is not None:
                params["format"] = options.format
            if options.content is False:
                params["content"] = "0"
        url = self._get_url(path)
        if params:
            url += json_to_query_string(params)
        return await self._request("get", url)

    async def list_contents(self, path: str) -> Content:
        """List notebooks and directories at a given path."""
        return await self.get(path, ContentsOptions(type="directory"))

    async def new_untitled(self, path: str, options: ContentsOptions | None = None) -> Content:
        """Create a new untitled file or directory in the given directory."""
        data = None
        if options is not None:
            data = CreateContent(ext=options.ext, type=options.type).model_dump(exclude_none=True)
        return await self._request("new_untitled", self._get_url(path), data)

    async def delete(self, path: str) -> None:
        await self._request("delete", self._get_url(path))

    async def rename(self, path: str, new_path: str) -> Content:
        data = RenameContent(path=new_path).model_dump()
        return await self._request("rename", self._get_url(path), data)

    async def save(self, path: str, model: dict[str, Any] | BaseModel) -> Content:
        if isinstance(model, BaseModel):
            model = model.model_dump(mode="json", exclude_unset=True)
        return await self._request("save", self._get_url(path), model)

    async def copy(self, from_path: str, to_dir: str) -> Content:
        """Copy a file into a directory, the server chooses the name of the copy."""
        data = CopyContent(copy_from=from_path).model_dump()
        return await self._request("copy", self._get_url(to_dir), data)

    async def create_checkpoint(self, path: str) -> Checkpoint:
        return await self._request("create_checkpoint", self._get_url(path, "checkpoints"))

    async def list_checkpoints(self, path: str) -> list[Checkpoint]:
        return await self._request("list_checkpoints", self._get_url(path, "checkpoints"))

    async def restore_checkpoint(self, path: str, checkpoint_id: str) -> None:
        """Restore a file to a known checkpoint state."""
        url = self._get_url(path, "checkpoints", checkpoint_id)
        await self._request("restore_checkpoint", url)

    async def delete_checkpoint(self, path: str, checkpoint_id: str) -> None:
        url = self._get_url(path, "checkpoints", checkpoint_id)
        await self._request("delete_checkpoint", url)

    def _get_url(self, *parts: str) -> str:
        return url_path_join(self._api_url, url_join_encode(*parts))

    async def _request(self, name: str, url: str, data: Any = None) -> Any:
        operation = OPERATIONS[name]
        settings = AjaxSettings(method=operation.method, headers=self._headers)
        if data is not None:
            settings.data = json.dumps(data)
            settings.content_type = "application/json"
        logger.debug("Contents operation", operation=name, method=operation.method, url=url)
        try:
            return await self._send(operation, url, settings)
        except ContentsError as e:
            logger.warning("Contents operation failed", operation=name, url=url, error=str(e))
            raise

    async def _send(self, operation: Operation, url: str, settings: AjaxSettings) -> Any:
        success = await ajax_request(url, settings, client=self._client)
        if success.status not in operation.accepted:
            raise operation.status_error(success.status, success.status_text)
        if operation.result is None:
            return None
        return operation.result(success.data)
