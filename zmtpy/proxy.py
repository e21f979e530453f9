"""Forwarding messages between two sockets in both directions."""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Protocol

from zmtpy.message import ZmqMessage


class _Sender(Protocol):
    async def send(self, message: ZmqMessage) -> Any: ...


class _Socket(_Sender, Protocol):
    async def recv(self) -> ZmqMessage: ...


async def proxy(
    frontend: _Socket,
    backend: _Socket,
    capture: Optional[_Sender] = None,
) -> None:
    """Pass messages from each socket to the other until an error occurs.

    Every forwarded message is first sent to ``capture`` when one is given.
    Errors from receiving or sending are raised; the call never returns
    otherwise.
    """
    pending: dict[asyncio.Future[ZmqMessage], tuple[_Socket, _Socket]] = {}

    def arm(source: _Socket, target: _Socket) -> None:
        pending[asyncio.ensure_future(source.recv())] = (source, target)

    arm(frontend, backend)
    arm(backend, frontend)
    try:
        while True:
            done, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in [task for task in pending if task in done]:
                source, target = pending.pop(task)
                message = task.result()
                if capture is not None:
                    await capture.send(ZmqMessage(list(message)))
                await target.send(message)
                arm(source, target)
    finally:
        for task in pending:
            task.cancel()