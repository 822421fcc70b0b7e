import pytest

from bcprotocol.authority import ParseError
from bcprotocol.sodium import Sodium, decode_z85, encode_z85

HELLO_BYTES = bytes([0x86, 0x4F, 0xD2, 0x6F, 0xB5, 0x59, 0xF7, 0x5B])


def test_encode_reference_vector():
    assert encode_z85(HELLO_BYTES) == "HelloWorld"


def test_decode_reference_vector():
    assert decode_z85("HelloWorld") == HELLO_BYTES


@pytest.mark.parametrize("data", [b"", bytes(range(32)), b"\xff" * 8, b"abcd"])
def test_round_trip(data):
    assert decode_z85(encode_z85(data)) == data


def test_encode_length_grows_by_five_fourths():
    assert len(encode_z85(bytes(range(32)))) == 40


def test_encode_rejects_unaligned_input():
    with pytest.raises(ValueError):
        encode_z85(b"abc")


def test_decode_rejects_unaligned_text():
    with pytest.raises(ValueError):
        decode_z85("Hell")


def test_decode_rejects_invalid_character():
    with pytest.raises(ValueError):
        decode_z85("Hell~")


def test_decode_rejects_overflowing_group():
    with pytest.raises(ValueError):
        decode_z85("#####")


def test_default_is_null_and_false():
    key = Sodium()
    assert not key
    assert bytes(key) == bytes(32)


def test_null_key_text():
    assert Sodium().to_string() == "0" * 40


def test_from_bytes_round_trip_through_text():
    raw = bytes(range(1, 33))
    key = Sodium(raw)
    assert key
    parsed = Sodium(key.to_string())
    assert parsed == key
    assert bytes(parsed) == raw
    assert str(parsed) == key.to_string()


def test_parse_uses_first_token():
    raw = bytes(range(100, 132))
    text = encode_z85(raw)
    assert bytes(Sodium(f"  {text}  trailing")) == raw


def test_parse_wrong_length_raises():
    with pytest.raises(ParseError) as info:
        Sodium("HelloWorld")
    assert info.value.value == "HelloWorld"


def test_parse_invalid_text_raises():
    with pytest.raises(ParseError):
        Sodium("not z85 text")


def test_bytes_of_wrong_size_rejected():
    with pytest.raises(ValueError):
        Sodium(b"short")


def test_equal_keys_hash_equal():
    raw = bytes(range(32))
    assert hash(Sodium(raw)) == hash(Sodium(raw))
    assert Sodium(raw) != Sodium()
    assert len({Sodium(raw), Sodium(raw), Sodium()}) == 2