"""
Test cases for the baseN codecs

The fixed vectors are the ones from RFC 4648 section 10.
"""

import base64
import logging
import random

import pytest

from pybasen import (
    BaseNTransformer, DecodeError, Encoding, decode, decode_base32hex, decode_base64,
    decode_hex, encode, encode_base32hex, encode_base64, encode_hex
)

RFC4648_VECTORS = [
    # (data, base64, base32hex, base16)
    (b"", "", "", ""),
    (b"f", "Zg==", "CO======", "66"),
    (b"fo", "Zm8=", "CPNG====", "666F"),
    (b"foo", "Zm9v", "CPNMU===", "666F6F"),
    (b"foob", "Zm9vYg==", "CPNMUOG=", "666F6F62"),
    (b"fooba", "Zm9vYmE=", "CPNMUOJ1", "666F6F6261"),
    (b"foobar", "Zm9vYmFy", "CPNMUOJ1E8======", "666F6F626172"),
]

CODECS = [
    (encode_base64, decode_base64, 4),
    (encode_base32hex, decode_base32hex, 8),
    (encode_hex, decode_hex, 2),
]

_B32_TO_B32HEX = bytes.maketrans(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
                                 b"0123456789ABCDEFGHIJKLMNOPQRSTUV")


def random_buffers(seed: int, count: int = 200, max_len: int = 64):
    rng = random.Random(seed)
    for _ in range(count):
        yield bytes(rng.randrange(256) for _ in range(rng.randrange(max_len)))


@pytest.mark.parametrize("data,b64,b32hex,b16", RFC4648_VECTORS)
def test_rfc4648_vectors(data, b64, b32hex, b16):
    assert encode_base64(data) == b64
    assert decode_base64(b64) == data
    assert encode_base32hex(data) == b32hex
    assert decode_base32hex(b32hex) == data
    assert encode_hex(data) == b16
    assert decode_hex(b16) == data


def test_hex_vectors():
    assert encode_hex(bytes([0xDE, 0xAD, 0xBE, 0xEF])) == "DEADBEEF"
    assert decode_hex("deadbeef") == bytes([0xDE, 0xAD, 0xBE, 0xEF])
    assert decode_hex("DeAdBeEf") == bytes([0xDE, 0xAD, 0xBE, 0xEF])


def test_base32hex_lowercase():
    assert decode_base32hex("cpnmuoj1e8======") == b"foobar"


def test_base64_is_case_sensitive():
    assert decode_base64("zM9V") != decode_base64("Zm9v")


@pytest.mark.parametrize("encoder,decoder,chars_per_group", CODECS)
def test_round_trip(encoder, decoder, chars_per_group):
    """decode(encode(b)) == b and the encoded length is a whole number of groups"""
    for data in random_buffers(chars_per_group):
        text = encoder(data)
        assert len(text) % chars_per_group == 0
        assert decoder(text) == data


def test_base64_length():
    for n in range(50):
        assert len(encode_base64(bytes(n))) == -(-n // 3) * 4


def test_agrees_with_stdlib():
    for data in random_buffers(1):
        assert encode_base64(data) == base64.b64encode(data).decode()
        assert encode_base32hex(data) == base64.b32encode(data).translate(_B32_TO_B32HEX).decode()
        assert encode_hex(data) == data.hex().upper()


@pytest.mark.parametrize("encoder,decoder,chars_per_group", CODECS)
def test_canonical_round_trip(encoder, decoder, chars_per_group):
    """Accepted text re-encodes to itself, minus whitespace and with canonical case"""
    for data in random_buffers(2, count=50):
        text = encoder(data)
        if decoder is not decode_base64:
            text = text.lower()
        spaced = " ".join(text[i:i + 3] for i in range(0, len(text), 3)) + "\n"
        result = decoder(spaced)
        expected = text if decoder is decode_base64 else text.upper()
        assert encoder(result) == expected


def test_whitespace_tolerance():
    assert decode_base64("Zm8=\n") == decode_base64("Zm8=") == b"fo"
    assert decode_base64(" Zm\t8 =\r\n") == b"fo"
    assert decode_base64("Zm9v\nYmFy\n") == b"foobar"
    assert decode_base32hex("CPNG ====") == b"fo"
    assert decode_hex("de ad\nbe ef") == bytes([0xDE, 0xAD, 0xBE, 0xEF])
    assert decode_base64(" \n") == b""


def test_encode_accepts_buffers():
    data = bytearray(b"foobar")
    assert encode_base64(data) == "Zm9vYmFy"
    assert data == bytearray(b"foobar")
    assert encode_base64(memoryview(b"foobar")) == "Zm9vYmFy"
    assert encode_hex([0xDE, 0xAD]) == "DEAD"


def test_decode_accepts_ascii_bytes():
    assert decode_base64(b"Zm9vYmFy") == b"foobar"
    with pytest.raises(DecodeError) as exc:
        decode_base64(b"Zm9v\xff")
    assert exc.value.error_type is DecodeError.ErrorType.INVALID_CHARACTER


def test_excess_padding():
    with pytest.raises(DecodeError) as exc:
        decode_base64("Zg===")
    assert exc.value.error_type is DecodeError.ErrorType.EXCESS_PADDING
    assert exc.value.algorithm == "base64"

    with pytest.raises(DecodeError) as exc:
        decode_base32hex("C=======")
    assert exc.value.error_type is DecodeError.ErrorType.EXCESS_PADDING

    with pytest.raises(DecodeError) as exc:
        decode_hex("66==")
    assert exc.value.error_type is DecodeError.ErrorType.EXCESS_PADDING


def test_non_canonical_padding():
    """Nonzero bits under padding are rejected rather than masked"""
    with pytest.raises(DecodeError) as exc:
        decode_base64("Zm==")
    assert exc.value.error_type is DecodeError.ErrorType.NON_CANONICAL_PADDING

    with pytest.raises(DecodeError) as exc:
        decode_base64("Zm9=")
    assert exc.value.error_type is DecodeError.ErrorType.NON_CANONICAL_PADDING

    with pytest.raises(DecodeError) as exc:
        decode_base32hex("CP======")
    assert exc.value.error_type is DecodeError.ErrorType.NON_CANONICAL_PADDING


def test_invalid_padding_length():
    for text in ("CPNMUO==", "CPN====="):
        with pytest.raises(DecodeError) as exc:
            decode_base32hex(text)
        assert exc.value.error_type is DecodeError.ErrorType.INVALID_PADDING_LENGTH


@pytest.mark.parametrize("decoder,text", [
    (decode_base64, "Zg"),
    (decode_base64, "Zg="),
    (decode_base64, "Zm9vY"),
    (decode_base32hex, "CPNMUOJ"),
    (decode_hex, "ABC"),
])
def test_incomplete_group(decoder, text):
    with pytest.raises(DecodeError) as exc:
        decoder(text)
    assert exc.value.error_type is DecodeError.ErrorType.INVALID_PADDING_LENGTH


@pytest.mark.parametrize("decoder,text", [
    (decode_base64, "Zm9v!"),
    (decode_base64, "Zg=A"),
    (decode_base64, "Zm9-"),
    (decode_base64, "Zm9é"),
    (decode_base32hex, "CPNMUOJW"),
    (decode_hex, "GG"),
    (decode_hex, "0x66"),
])
def test_invalid_character(decoder, text):
    with pytest.raises(DecodeError) as exc:
        decoder(text)
    assert exc.value.error_type is DecodeError.ErrorType.INVALID_CHARACTER


def test_decode_error_is_value_error():
    with pytest.raises(ValueError, match="excess_padding"):
        decode_base64("A===")


def test_generic_dispatch():
    assert encode(b"foobar", "base64") == "Zm9vYmFy"
    assert decode("CPNMUOJ1", Encoding.BASE32HEX) == b"fooba"
    assert encode(b"\x0f", "hex") == "0F"
    with pytest.raises(ValueError):
        encode(b"", "base85")


def test_transformer():
    transformer = BaseNTransformer("base16")
    assert transformer.encoding is Encoding.BASE16
    assert transformer.decode(transformer.encode(b"\x00\xff")) == b"\x00\xff"
    assert repr(transformer) == "BaseNTransformer('base16')"


def test_rejected_decode_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="pybasen"):
        with pytest.raises(DecodeError):
            decode_base64("Zm==")
    assert "non_canonical_padding" in caplog.text
    assert "base64" in caplog.text


@pytest.mark.parametrize("data", [[256], [-1], [0x66, 300]])
def test_encode_rejects_out_of_range_ints(data):
    """Items outside 0..255 are an error, not silently masked to a byte"""
    with pytest.raises(ValueError):
        encode_hex(data)
    with pytest.raises(ValueError):
        encode_base64(data)


def test_leading_whitespace_is_ignored():
    assert decode_base64(" Zg==") == b"f"
    assert decode_hex("\n\tdead") == bytes([0xDE, 0xAD])


def test_public_decoders_document_decode_error():
    for decoder in (decode_base64, decode_base32hex, decode_hex):
        assert "DecodeError" in decoder.__doc__
