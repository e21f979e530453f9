import pytest

from zmtpy.errors import ZmqError
from zmtpy.socket_type import SocketOptions, SocketType

_MATRIX_NAMES = [
    "PAIR",
    "PUB",
    "SUB",
    "REQ",
    "REP",
    "DEALER",
    "ROUTER",
    "PULL",
    "PUSH",
    "XPUB",
    "XSUB",
]


def test_documented_compatibility():
    assert SocketType.PUB.compatible(SocketType.SUB)
    assert SocketType.REQ.compatible(SocketType.REP)
    assert SocketType.DEALER.compatible(SocketType.ROUTER)
    assert not SocketType.PUB.compatible(SocketType.REP)


@pytest.mark.parametrize("left_name", _MATRIX_NAMES)
@pytest.mark.parametrize("right_name", _MATRIX_NAMES)
def test_compatibility_is_symmetric(left_name, right_name):
    left = SocketType.parse(left_name)
    right = SocketType.parse(right_name)
    assert left.compatible(right) == right.compatible(left)


def test_push_pull_only_pair_with_each_other():
    partners = [t for t in SocketType if SocketType.PUSH.compatible(t)]
    assert partners == [SocketType.PULL]


@pytest.mark.parametrize("socket_type", list(SocketType))
def test_parse_round_trip_from_text(socket_type):
    assert SocketType.parse(str(socket_type)) is socket_type


@pytest.mark.parametrize("socket_type", list(SocketType))
def test_parse_round_trip_from_bytes(socket_type):
    assert SocketType.parse(str(socket_type).encode()) is socket_type


def test_str_is_name():
    assert str(SocketType.parse(b"DEALER")) == "DEALER"


@pytest.mark.parametrize("value", ["pub", "", "UNKNOWN", b"\xff\xfe"])
def test_parse_unknown_raises(value):
    with pytest.raises(ZmqError, match="Unknown socket type"):
        SocketType.parse(value)


def test_socket_options_peer_identity_chains():
    options = SocketOptions()
    assert options.peer_id is None
    result = options.peer_identity(b"SomeCustomId")
    assert result is options
    assert options.peer_id == b"SomeCustomId"