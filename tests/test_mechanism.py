import pytest

from zmtpy.codec.mechanism import Mechanism
from zmtpy.errors import CodecError, MechanismError


@pytest.mark.parametrize("mechanism", list(Mechanism))
def test_parse_padded_round_trip(mechanism):
    name = str(mechanism).encode()
    padded = name + b"\x00" * (20 - len(name))
    assert Mechanism.parse(padded) is mechanism


@pytest.mark.parametrize("mechanism", list(Mechanism))
def test_parse_unpadded(mechanism):
    assert Mechanism.parse(str(mechanism).encode()) is mechanism


def test_str():
    assert str(Mechanism.parse(b"CURVE\x00")) == "CURVE"


def test_parse_stops_at_first_nul():
    assert Mechanism.parse(b"NULL\x00PLAIN\x00\x00") is Mechanism.NULL


@pytest.mark.parametrize("data", [b"", b"null", b"\x00NULL", b"BOGUS\x00\x00"])
def test_parse_unknown_raises(data):
    with pytest.raises(MechanismError, match="Failed to parse ZmqMechanism"):
        Mechanism.parse(data)


def test_mechanism_error_is_codec_error():
    with pytest.raises(CodecError):
        Mechanism.parse(b"XYZ")