"""Endpoint addresses: transport, host and port, or an IPC path."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from zmtpy.errors import EndpointSyntaxError, UnknownTransportError, ZmqError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_TRANSPORT_RE = re.compile(r"([a-z]+)://(.+)")
_HOST_PORT_RE = re.compile(r"(.+):([0-9]+)")
_MAX_PORT = 0xFFFF


class Transport(Enum):
    """The transport used by an endpoint."""

    TCP = "tcp"
    IPC = "ipc"
    TLS = "tls"
    QUIC = "quic"

    @classmethod
    def parse(cls, value: str) -> Transport:
        """Parse a lower-case transport name."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownTransportError(value) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Host:
    """An IPv4 address, an IPv6 address or a domain name (no port)."""

    address: Union[ipaddress.IPv4Address, ipaddress.IPv6Address, str]

    def __post_init__(self) -> None:
        if not isinstance(
            self.address, (ipaddress.IPv4Address, ipaddress.IPv6Address, str)
        ):
            raise TypeError("host must be an IP address or a domain name")

    @classmethod
    def parse(cls, value: str) -> Host:
        """Parse a host; an IPv6 address may be enclosed in brackets."""
        if not value:
            raise EndpointSyntaxError("Host string should not be empty")
        try:
            return cls(ipaddress.IPv4Address(value))
        except ValueError:
            pass
        candidate = value
        if value.startswith("[") and len(value) >= 4 and value.endswith("]"):
            candidate = value[1:-1]
        if "%" not in candidate:
            try:
                return cls(ipaddress.IPv6Address(candidate))
            except ValueError:
                pass
        return cls(value)

    @property
    def is_ipv4(self) -> bool:
        return isinstance(self.address, ipaddress.IPv4Address)

    @property
    def is_ipv6(self) -> bool:
        return isinstance(self.address, ipaddress.IPv6Address)

    @property
    def is_domain(self) -> bool:
        return isinstance(self.address, str)

    def to_ip_address(self) -> IPAddress:
        """Return the IP address; a domain name raises ZmqError."""
        if isinstance(self.address, str):
            raise ZmqError("Host was neither Ipv4 nor Ipv6")
        return self.address

    def __str__(self) -> str:
        return str(self.address)


def _ip_host(ip: Union[str, IPAddress]) -> Host:
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return Host(ip)
    return Host(ipaddress.ip_address(ip))


def _split_host_port(address: str) -> tuple[Host, int]:
    match = _HOST_PORT_RE.fullmatch(address)
    if match is None:
        raise EndpointSyntaxError("Could not parse host and port")
    host_text, port_text = match.groups()
    port = int(port_text)
    if port > _MAX_PORT:
        raise EndpointSyntaxError("Port must be a u16 but was out of range")
    return Host.parse(host_text), port


@dataclass(frozen=True)
class Endpoint:
    """A socket endpoint such as ``tcp://127.0.0.1:5555`` or ``ipc:///tmp/s``."""

    transport: Transport
    host: Optional[Host] = None
    port: Optional[int] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.transport is Transport.IPC:
            if self.host is not None or self.port is not None:
                raise EndpointSyntaxError("IPC endpoints take a path, not host and port")
            return
        if self.path is not None:
            raise EndpointSyntaxError("Only IPC endpoints take a path")
        if not isinstance(self.host, Host):
            raise EndpointSyntaxError("Network endpoints need a host")
        if not isinstance(self.port, int) or not 0 <= self.port <= _MAX_PORT:
            raise EndpointSyntaxError("Port must be a u16 but was out of range")

    @classmethod
    def parse(cls, value: str) -> Endpoint:
        """Parse an endpoint string of the form ``transport://address``."""
        match = _TRANSPORT_RE.fullmatch(value)
        if match is None:
            raise EndpointSyntaxError("Could not parse transport")
        transport = Transport.parse(match.group(1))
        address = match.group(2)
        if transport is Transport.IPC:
            return cls(transport, path=address)
        host, port = _split_host_port(address)
        return cls(transport, host, port)

    @classmethod
    def from_tcp_addr(cls, ip: Union[str, IPAddress], port: int) -> Endpoint:
        return cls(Transport.TCP, _ip_host(ip), port)

    @classmethod
    def from_tcp_domain(cls, domain: str, port: int) -> Endpoint:
        return cls(Transport.TCP, Host(domain), port)

    @classmethod
    def from_tls_addr(cls, ip: Union[str, IPAddress], port: int) -> Endpoint:
        return cls(Transport.TLS, _ip_host(ip), port)

    @classmethod
    def from_tls_domain(cls, domain: str, port: int) -> Endpoint:
        return cls(Transport.TLS, Host(domain), port)

    @classmethod
    def from_quic_addr(cls, ip: Union[str, IPAddress], port: int) -> Endpoint:
        return cls(Transport.QUIC, _ip_host(ip), port)

    @classmethod
    def from_quic_domain(cls, domain: str, port: int) -> Endpoint:
        return cls(Transport.QUIC, Host(domain), port)

    def __str__(self) -> str:
        if self.transport is Transport.IPC:
            return f"ipc://{self.path if self.path is not None else '????'}"
        assert self.host is not None
        host = f"[{self.host}]" if self.host.is_ipv6 else str(self.host)
        return f"{self.transport}://{host}:{self.port}"


def to_endpoint(value: Union[str, Endpoint]) -> Endpoint:
    """Return ``value`` as an Endpoint, parsing it if it is a string."""
    if isinstance(value, Endpoint):
        return value
    if isinstance(value, str):
        return Endpoint.parse(value)
    raise TypeError(f"cannot make an endpoint from {type(value).__name__}")