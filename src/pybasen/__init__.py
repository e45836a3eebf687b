"""
pybasen

Strict baseN codecs for DNS and DHCP tooling: base64, base32hex and
base16 (hex), as defined by RFC 4648.

Decoding accepts only the canonical encoding of the data. Whitespace is
ignored, but excess padding, padding that can't end on a byte boundary,
and nonzero bits under padding are all rejected with a `DecodeError`.
"""

import logging

from .base_n import (
    BaseNTransformer,
    encode,
    decode,
    encode_base64,
    decode_base64,
    encode_base32hex,
    decode_base32hex,
    encode_hex,
    decode_hex
)

from .alphabet import (
    BASE_PADDING_CHAR,
    Alphabet,
    Encoding,
    EncodingSpec,
    get_encoding
)

from .errors import DecodeError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Codec functions
    "BaseNTransformer",
    "encode",
    "decode",
    "encode_base64",
    "decode_base64",
    "encode_base32hex",
    "decode_base32hex",
    "encode_hex",
    "decode_hex",

    # Encodings
    "BASE_PADDING_CHAR",
    "Alphabet",
    "Encoding",
    "EncodingSpec",
    "get_encoding",

    # Errors
    "DecodeError",
]
