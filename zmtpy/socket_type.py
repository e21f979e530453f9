"""Socket types, socket options and monitor events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from zmtpy.endpoint import Endpoint
from zmtpy.errors import ZmqError

# Rows and columns follow the order PAIR, PUB, SUB, REQ, REP, DEALER,
# ROUTER, PULL, PUSH, XPUB, XSUB.
_COMPATIBILITY_MATRIX = (
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0),
    (0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0),
    (0, 0, 0, 1, 0, 1, 1, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0),
    (0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0),
)


class SocketType(Enum):
    """The kind of a socket, as announced in the READY handshake."""

    PAIR = 0
    PUB = 1
    SUB = 2
    REQ = 3
    REP = 4
    DEALER = 5
    ROUTER = 6
    PULL = 7
    PUSH = 8
    XPUB = 9
    XSUB = 10
    STREAM = 11

    @classmethod
    def parse(cls, value: Union[str, bytes, bytearray]) -> SocketType:
        """Parse an upper-case socket type name given as text or bytes."""
        if isinstance(value, (bytes, bytearray)):
            try:
                value = bytes(value).decode("ascii")
            except UnicodeDecodeError:
                raise ZmqError("Unknown socket type") from None
        member = cls.__members__.get(value)
        if member is None:
            raise ZmqError("Unknown socket type")
        return member

    def compatible(self, other: SocketType) -> bool:
        """Return True if a socket of this type may talk to one of ``other``."""
        size = len(_COMPATIBILITY_MATRIX)
        if self.value >= size or other.value >= size:
            return False
        return _COMPATIBILITY_MATRIX[self.value][other.value] != 0

    def __str__(self) -> str:
        return self.name


@dataclass
class SocketOptions:
    """Options applied to a socket when it is created."""

    peer_id: Optional[Any] = None

    def peer_identity(self, peer_id: Any) -> SocketOptions:
        """Set the identity announced to peers; returns self for chaining."""
        self.peer_id = peer_id
        return self


class SocketEventKind(Enum):
    """What happened on a monitored socket."""

    CONNECTED = auto()
    CONNECT_DELAYED = auto()
    CONNECT_RETRIED = auto()
    LISTENING = auto()
    ACCEPTED = auto()
    ACCEPT_FAILED = auto()
    CLOSED = auto()
    CLOSE_FAILED = auto()
    DISCONNECTED = auto()


@dataclass(frozen=True)
class SocketEvent:
    """An event reported to a socket monitor."""

    kind: SocketEventKind
    endpoint: Optional[Endpoint] = None
    peer_id: Optional[Any] = None
    error: Optional[ZmqError] = None