# zmtpy

Pure-Python building blocks for ZeroMQ-style messaging on asyncio. The package
provides multipart messages, endpoint parsing, socket types and their
compatibility rules, the security mechanism names and READY command frames of
the ZMTP 3.x handshake, a fair queue that merges several asynchronous streams,
and a proxy that relays messages between two sockets.

The package has no runtime dependencies.

## Installation

```
pip install zmtpy
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "zmtpy[test]"
pytest
```

## Messages

`zmtpy.message.ZmqMessage` is an ordered, non-empty sequence of byte frames.
A single `bytes` or `str` value makes a one-frame message. Any other iterable
supplies the frames, and text frames are encoded as UTF-8.

```python
from zmtpy.message import ZmqMessage

msg = ZmqMessage([b"id1", b"", b"payload"])
body = msg.split_off(2)      # msg keeps [b"id1", b""], body holds [b"payload"]
body.prepend(msg)            # the envelope goes back in front
print(len(body), body[0])    # 3 b'id1'
```

- `push_back` and `push_front` add frames.
- `pop_front` removes and returns the first frame, or `None` when there is none.
- `get(index)` returns a frame, or `None` when the index is out of range.
- Indexing with `msg[i]` and iterating over `msg` work as for a sequence.
- `to_bytes()` and `to_str()` return the only frame. They raise `ValueError` unless the message has exactly one frame. `to_str()` also raises `ValueError` when that frame is not valid UTF-8.
- Building a message from an empty iterable raises `zmtpy.errors.EmptyMessageError`.

## Endpoints

`zmtpy.endpoint` parses and formats endpoint strings.

```python
from zmtpy.endpoint import Endpoint, Host, Transport, to_endpoint

ep = Endpoint.parse("tcp://[::1]:34567")
print(ep)                          # tcp://[::1]:34567
print(ep.host.is_ipv6, ep.port)    # True 34567

Endpoint.parse("ipc:///tmp/sock").path         # '/tmp/sock'
Endpoint.from_tcp_domain("example.com", 80)    # tcp://example.com:80
Host.parse("example.com").is_domain            # True
Transport.parse("quic")                        # Transport.QUIC
to_endpoint("tls://127.0.0.1:8080")            # parses str, passes Endpoint through
```

The supported transports are `tcp`, `ipc`, `tls` and `quic`. For network
transports the address is a host and a port from 0 to 65535. An IPv6 host is
written in brackets. For `ipc` the address is a path.

Parse errors derive from `zmtpy.errors.EndpointError`, which is also a
`ValueError`:

- An unknown scheme raises `UnknownTransportError`.
- A missing host or port, or a port out of range, raises `EndpointSyntaxError`.

`Host.to_ip_address()` raises `ZmqError` for a domain name.

## Socket types and options

```python
from zmtpy.socket_type import SocketType, SocketOptions

SocketType.PUB.compatible(SocketType.SUB)       # True
SocketType.PUB.compatible(SocketType.REP)       # False
SocketType.parse("DEALER")                      # also accepts b"DEALER"
options = SocketOptions().peer_identity(b"worker-1")
```

Parsing an unknown name raises `ZmqError`. `SocketEvent` and `SocketEventKind`
describe monitor events (connected, listening, accepted, disconnected and so
on). The `SocketEvent` values are plain data; see the limits below.

## Handshake pieces

`zmtpy.codec.mechanism.Mechanism` names the security mechanism: `NULL`, `PLAIN`
or `CURVE`. `Mechanism.parse` reads a name padded with zero bytes and raises
`MechanismError` for anything else.

`zmtpy.codec.command.Command` encodes and decodes command frames. The only
command name it knows is `CommandName.READY`.

```python
from zmtpy.codec.command import Command
from zmtpy.socket_type import SocketType

ready = Command.ready(SocketType.REQ).add_prop("Identity", b"worker-1")
frame = ready.to_bytes()           # flags byte, length, then the body
parsed = Command.parse(frame[2:])  # parse takes the body without flags/length
assert parsed.properties["Socket-Type"] == b"REQ"
```

`to_bytes()` uses the long-frame form, with an 8-byte length, when the body is
longer than 255 bytes. Parse errors are raised as follows:

- An unknown command name raises `CommandError`.
- A truncated body or an invalid property name raises `DecodeError`.

## Fair queueing

`zmtpy.fair_queue.FairQueue` merges several asynchronous iterables and yields
`(key, item)` pairs. It serves the streams in turn, so one busy stream cannot
starve the others. A stream that ends is dropped. An exception raised by a
stream is raised from the queue.

When no stream is left, iteration stops. With `block_on_no_clients=True` it
waits for a new stream instead. Insert streams from within a running event
loop.

```python
import asyncio
from zmtpy.fair_queue import FairQueue

async def letters(prefix, count):
    for i in range(1, count + 1):
        yield f"{prefix}{i}"

async def main():
    queue = FairQueue()
    queue.insert(1, letters("a", 3))
    queue.insert(2, letters("b", 1))
    async for key, item in queue:
        print(key, item)

asyncio.run(main())
```

## Proxy

`zmtpy.proxy.proxy(frontend, backend, capture=None)` relays messages between
two objects that have asynchronous `recv()` and `send(message)` methods. It
forwards in both directions. When `capture` is given, each forwarded message
is first sent to it as a copy. The coroutine runs until a receive or send
raises, and that error is raised.

## Errors

Every exception derives from `zmtpy.errors.ZmqError`. Codec problems derive
from `CodecError` (`CommandError`, `GreetingError`, `MechanismError`,
`DecodeError`). Endpoint problems derive from `EndpointError`.
`ReturnToSenderError` carries the undelivered message in its `message`
attribute.

## What the package does not do

zmtpy does not open network connections. It has no socket classes that bind
or connect. It does not encode or decode the 64-byte greeting, and it has no
decoder that splits a byte stream into frames. It does not track connected
peers or send round-robin, and nothing in it emits `SocketEvent` values. It
supplies the message, address, handshake-command, queueing and proxy pieces
that such a layer would be built on. It also does not implement the `PLAIN`
or `CURVE` mechanisms beyond recognising their names.