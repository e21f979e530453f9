"""Exception hierarchy for sockets, codecs, endpoints and messages."""

from __future__ import annotations

from typing import Any

_QUEUE_FULL = "Failed to send message. Send queue full/broken"


class ZmqError(Exception):
    """Base class for every error raised by this package."""


class NoSuchBindError(ZmqError):
    """Raised when unbinding an endpoint the socket is not bound to."""

    def __init__(self, endpoint: object) -> None:
        super().__init__(f"Socket bind doesn't exist: {endpoint}")
        self.endpoint = endpoint


class BufferFullError(ZmqError):
    """Raised when a send queue is full or broken."""

    def __init__(self, reason: str = _QUEUE_FULL) -> None:
        super().__init__(reason)
        self.reason = reason


class ReturnToSenderError(ZmqError):
    """Raised when a message could not be delivered; carries the message back."""

    def __init__(self, reason: str, message: Any) -> None:
        super().__init__(f"Failed to deliver message cause of {reason}")
        self.reason = reason
        self.message = message


class NoMessageError(ZmqError):
    """Raised when no message could be received."""

    def __init__(self) -> None:
        super().__init__("No message received")


class PeerIdentityError(ZmqError, ValueError):
    """Raised for a peer identity that is too long."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid peer identity: must be less than 256 bytes in length"
        )


class UnsupportedVersionError(ZmqError):
    """Raised when the peer speaks an unsupported protocol version."""

    def __init__(self, version: tuple[int, int]) -> None:
        super().__init__("Unsupported ZMTP version")
        self.version = version


class CodecError(ZmqError):
    """Raised when encoding or decoding raw frames fails."""


class CommandError(CodecError):
    """Raised for an unknown or malformed command frame."""


class GreetingError(CodecError):
    """Raised for a malformed greeting."""


class MechanismError(CodecError):
    """Raised for an unknown security mechanism."""


class DecodeError(CodecError):
    """Raised for malformed wire data."""


class EndpointError(ZmqError, ValueError):
    """Raised when an endpoint cannot be parsed."""


class ParseIpAddrError(EndpointError):
    """Raised when an IP address or port cannot be parsed."""

    def __init__(self) -> None:
        super().__init__("Failed to parse IP address or port")


class UnknownTransportError(EndpointError):
    """Raised for a transport name that is not supported."""

    def __init__(self, transport: str) -> None:
        super().__init__(f"Unknown transport type {transport}")
        self.transport = transport


class EndpointSyntaxError(EndpointError):
    """Raised for an endpoint string with invalid syntax."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid Syntax: {reason}")
        self.reason = reason


class EmptyMessageError(ZmqError, ValueError):
    """Raised when a message would be built without any frames."""

    def __init__(self) -> None:
        super().__init__("Unable to construct an empty ZmqMessage")