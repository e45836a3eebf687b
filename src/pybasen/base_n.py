"""
base64, base32hex and base16 encoding and decoding

A conceptual description of how the encoding and decoding work:

Encoding:
    binary data => padding.normalize_for_encode (append zero bits up to a chunk)
                => regroup (8-bit bytes to N-bit chunks)
                => alphabet (chunk value to character)
                => padding.pad_encoded (append '=' up to a group)

Decoding:
    text => padding.count_padding (locate trailing '=', ignoring whitespace)
         => padding.normalize_for_decode (drop whitespace, '=' to zero, character to value)
         => regroup (N-bit chunks to 8-bit bytes)
         => canonical.strip_padding (check and remove the bytes under padding)
"""

import logging
from typing import Sequence, Union

from .alphabet import Encoding, get_encoding
from .canonical import check_group_length, padding_bytes, strip_padding
from .errors import DecodeError
from .padding import count_padding, normalize_for_decode, normalize_for_encode, pad_encoded
from .regroup import regroup

logger = logging.getLogger(__name__)


class BaseNTransformer:
    """Encoder and decoder for one encoding. Holds no state between calls."""

    def __init__(self, encoding: Union[str, Encoding]):
        self.encoding = get_encoding(encoding)
        self.spec = self.encoding.spec

    def __repr__(self) -> str:
        return f"BaseNTransformer({self.spec.name!r})"

    def encode(self, data: Sequence[int]) -> str:
        """
        Encode binary data

        Args:
            data: bytes, bytearray, memoryview or a sequence of ints in 0..255

        Returns:
            Encoded text, padded to a whole number of groups

        Raises:
            ValueError: If an item of `data` is outside 0..255
        """
        data = bytes(data)
        alphabet = self.spec.alphabet
        text = "".join(alphabet.symbol(value) for value in normalize_for_encode(self.spec, data))
        return pad_encoded(self.spec, text, len(data))

    def decode(self, text: Union[str, bytes]) -> bytes:
        """
        Decode text into binary data

        Whitespace anywhere in the text is ignored. Only the canonical
        encoding of the data is accepted.

        Args:
            text: Encoded text

        Returns:
            Decoded bytes

        Raises:
            DecodeError: If the text is not a canonical encoding
        """
        try:
            return self._decode(text)
        except DecodeError as e:
            logger.debug("rejected %s input: %s", self.spec.name, e.error_type.value)
            raise

    def _decode(self, text: Union[str, bytes]) -> bytes:
        spec = self.spec
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("ascii")
            except UnicodeDecodeError as e:
                raise DecodeError(DecodeError.ErrorType.INVALID_CHARACTER, spec.name,
                                  f"Invalid {spec.name} character at position {e.start}") from None

        padchars, pad_start = count_padding(spec, text)
        padbytes = padding_bytes(spec, padchars)

        values = normalize_for_decode(spec, text, pad_start)
        check_group_length(spec, len(values))

        decoded = bytes(regroup(values, spec.bits_per_chunk, 8))
        return strip_padding(spec, decoded, padbytes)


_TRANSFORMERS = {encoding: BaseNTransformer(encoding) for encoding in Encoding}


def encode(data: Sequence[int], encoding: Union[str, Encoding]) -> str:
    """Encode `data` with the named encoding"""
    return _TRANSFORMERS[get_encoding(encoding)].encode(data)


def decode(text: Union[str, bytes], encoding: Union[str, Encoding]) -> bytes:
    """Decode `text` with the named encoding"""
    return _TRANSFORMERS[get_encoding(encoding)].decode(text)


def encode_base64(data: Sequence[int]) -> str:
    """
    Encode bytes into a base64 string

    Args:
        data: Bytes to encode

    Returns:
        Base64 encoded string, padded with '='
    """
    return _TRANSFORMERS[Encoding.BASE64].encode(data)


def decode_base64(text: Union[str, bytes]) -> bytes:
    """
    Decode a base64 string into bytes

    Args:
        text: Base64 string to decode, whitespace is ignored

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If the string is not canonical base64
    """
    return _TRANSFORMERS[Encoding.BASE64].decode(text)


def encode_base32hex(data: Sequence[int]) -> str:
    """Encode bytes into an uppercase base32hex string, padded with '='"""
    return _TRANSFORMERS[Encoding.BASE32HEX].encode(data)


def decode_base32hex(text: Union[str, bytes]) -> bytes:
    """
    Decode a base32hex string into bytes, in either case

    Raises:
        DecodeError: If the string is not canonical base32hex
    """
    return _TRANSFORMERS[Encoding.BASE32HEX].decode(text)


def encode_hex(data: Sequence[int]) -> str:
    """Encode bytes into an uppercase hex string"""
    return _TRANSFORMERS[Encoding.BASE16].encode(data)


def decode_hex(text: Union[str, bytes]) -> bytes:
    """
    Decode a hex string into bytes, in either case

    Raises:
        DecodeError: If the string has an odd number of digits or a non-hex character
    """
    return _TRANSFORMERS[Encoding.BASE16].decode(text)
