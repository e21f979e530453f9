import asyncio

import pytest

from zmtpy.errors import BufferFullError, NoMessageError
from zmtpy.message import ZmqMessage
from zmtpy.proxy import proxy


class _FakeSocket:
    def __init__(self, *incoming, send_error=None):
        self.inbox = asyncio.Queue()
        for item in incoming:
            self.inbox.put_nowait(item)
        self.sent = []
        self.send_error = send_error

    async def recv(self):
        item = await self.inbox.get()
        if isinstance(item, BaseException):
            raise item
        return item

    async def send(self, message):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(message)


@pytest.mark.asyncio
async def test_frontend_to_backend_with_capture():
    message = ZmqMessage(["id", "", "payload"])
    frontend = _FakeSocket(message, NoMessageError())
    backend = _FakeSocket()
    capture = _FakeSocket()
    with pytest.raises(NoMessageError):
        await asyncio.wait_for(proxy(frontend, backend, capture), 1)
    assert backend.sent == [message]
    assert capture.sent == [message]
    assert frontend.sent == []


@pytest.mark.asyncio
async def test_backend_to_frontend_without_capture():
    message = ZmqMessage("reply")
    frontend = _FakeSocket()
    backend = _FakeSocket(message, NoMessageError())
    with pytest.raises(NoMessageError):
        await asyncio.wait_for(proxy(frontend, backend), 1)
    assert frontend.sent == [message]
    assert backend.sent == []


@pytest.mark.asyncio
async def test_order_is_preserved():
    messages = [ZmqMessage(f"m{n}") for n in range(5)]
    frontend = _FakeSocket(*messages, NoMessageError())
    backend = _FakeSocket()
    with pytest.raises(NoMessageError):
        await asyncio.wait_for(proxy(frontend, backend), 1)
    assert backend.sent == messages


@pytest.mark.asyncio
async def test_capture_error_stops_forwarding():
    message = ZmqMessage("data")
    frontend = _FakeSocket(message)
    backend = _FakeSocket()
    capture = _FakeSocket(send_error=BufferFullError())
    with pytest.raises(BufferFullError):
        await asyncio.wait_for(proxy(frontend, backend, capture), 1)
    assert backend.sent == []


@pytest.mark.asyncio
async def test_send_error_is_raised():
    frontend = _FakeSocket(ZmqMessage("data"))
    backend = _FakeSocket(send_error=BufferFullError("Sink is full"))
    with pytest.raises(BufferFullError, match="Sink is full"):
        await asyncio.wait_for(proxy(frontend, backend), 1)


@pytest.mark.asyncio
async def test_cancelled_proxy_stops_receiving():
    frontend = _FakeSocket()
    backend = _FakeSocket()
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(proxy(frontend, backend), 0.05)
    frontend.inbox.put_nowait(ZmqMessage("late"))
    await asyncio.sleep(0.01)
    assert frontend.inbox.qsize() == 1
    assert backend.sent == []