from __future__ import annotations

from contextlib import AsyncExitStack
from typing import Any, Literal

import structlog
from anyio import create_task_group
from httpx import AsyncClient, Response, TransportError
from pydantic import BaseModel

from .deferred import Deferred
from .exceptions import AjaxError

logger = structlog.get_logger()


class AjaxSettings(BaseModel):
    method: str
    data_type: Literal["json", "text"] = "json"
    content_type: str | None = None
    data: str | bytes | None = None
    headers: dict[str, str] = {}


class AjaxSuccess:
    """A request that completed, whatever its status code."""

    def __init__(self, data: Any, status_text: str, response: Response):
        self.data = data
        self.status_text = status_text
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code


async def ajax_request(
    url: str,
    settings: AjaxSettings,
    *,
    client: AsyncClient | None = None,
) -> AjaxSuccess:
    """Issue one request, and wait for it to complete.

    Raises AjaxError if the request didn't complete. A completed request is never an
    error here, whatever its status code.
    """
    deferred: Deferred[AjaxSuccess] = Deferred()
    async with AsyncExitStack() as exit_stack:
        if client is None:
            client = await exit_stack.enter_async_context(AsyncClient(timeout=None))
        # the sender always settles the deferred before the task group exits
        async with create_task_group() as tg:
            tg.start_soon(_send, client, url, settings, deferred)
    return await deferred


async def _send(
    client: AsyncClient,
    url: str,
    settings: AjaxSettings,
    deferred: Deferred[AjaxSuccess],
) -> None:
    headers = dict(settings.headers)
    if settings.content_type:
        headers["Content-Type"] = settings.content_type
    logger.debug("Sending request", method=settings.method, url=url)
    try:
        response = await client.request(
            settings.method,
            url,
            headers=headers,
            content=settings.data,
        )
    except TransportError as e:
        logger.debug("Request failed", method=settings.method, url=url, error=repr(e))
        deferred.reject(AjaxError(error=e))
        return
    except Exception as e:
        deferred.reject(e)
        return

    logger.debug(
        "Request completed", method=settings.method, url=url, status=response.status_code
    )
    status_text = response.reason_phrase
    data: Any = response.text or None
    if settings.data_type == "json" and data is not None:
        try:
            data = response.json()
        except ValueError:
            # kept as text, the status and shape checks decide what it means
            logger.debug("Response body is not JSON", url=url, status=response.status_code)
    deferred.resolve(AjaxSuccess(data=data, status_text=status_text, response=response))
