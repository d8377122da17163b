"""
Pytest fixtures for the project resource client.

Provides:
- a transport whose outgoing requests are recorded instead of sent
- a transport wired to the in-memory development backend
- the development backend served on a real local socket
"""

import json
import socket
import threading
import time
from typing import Any, List

import httpx
import pytest
import uvicorn

from projects_client.backend import create_app
from projects_client.service import Transport, reset_transport

BASE_URL = "http://backend.test/dolphinscheduler"


class RecordedRequest:
    """What reached the wire for one call"""

    def __init__(self, request: httpx.Request):
        self.method = request.method
        self.path = request.url.path
        self.query = dict(request.url.params)
        self.raw_query = request.url.query
        self.content = request.content
        self.headers = request.headers

    @property
    def body(self) -> Any:
        return json.loads(self.content) if self.content else None


class RecordingBackend:
    """Answers every request with ``self.reply`` as JSON and keeps what was sent"""

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self.status_code = 200
        self.reply: Any = {"code": 0, "msg": "success", "data": None}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(RecordedRequest(request))
        if isinstance(self.reply, (bytes, str)):
            return httpx.Response(self.status_code, content=self.reply)
        return httpx.Response(self.status_code, json=self.reply)

    def answer(self, data: Any = None, code: int = 0, msg: str = "success", status_code: int = 200) -> None:
        self.status_code = status_code
        self.reply = {"code": code, "msg": msg, "data": data}

    def transport(self, **client_kwargs) -> Transport:
        client = httpx.AsyncClient(
            base_url=client_kwargs.pop("base_url", BASE_URL),
            transport=httpx.MockTransport(self.handler),
            **client_kwargs,
        )
        return Transport(client=client)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_shared_transport():
    reset_transport()
    yield
    reset_transport()


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def recording_transport(backend) -> Transport:
    return backend.transport()


@pytest.fixture
def app():
    return create_app(known_worker_groups=["default", "gpu"])


@pytest.fixture
def live_transport(app) -> Transport:
    """Transport that talks to the development backend in-process."""
    client = httpx.AsyncClient(
        base_url="http://testserver/dolphinscheduler",
        transport=httpx.ASGITransport(app=app),
    )
    return Transport(client=client)


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def live_server():
    """Serve a fresh backend with uvicorn in a thread; yields its API base URL."""
    port = free_port()
    server = uvicorn.Server(uvicorn.Config(create_app(), host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("backend did not start")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}/dolphinscheduler"

    server.should_exit = True
    thread.join(timeout=10)
