from socket import socket

import pytest
from httpx import AsyncClient, MockTransport

from jupyverse_client import Contents
from utils import MockServer


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def unused_tcp_port() -> int:
    with socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
async def contents(server):
    async with AsyncClient(transport=MockTransport(server.handle)) as client:
        yield Contents("http://127.0.0.1:8000", client=client)
