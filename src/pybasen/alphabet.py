"""
Alphabet tables and encoding descriptors for base64, base32hex and base16

Each supported encoding is a member of the `Encoding` enum carrying its
`EncodingSpec` as data, so the codec core in `base_n` has a single
algorithm parameterized by these values.
"""

from dataclasses import dataclass
from enum import Enum
from math import gcd
from typing import List, Union


BASE_PADDING_CHAR = "="

# RFC4648 section 4
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# RFC4648 "extended hex" encoding table, section 7
BASE32HEX_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"

# RFC4648 section 8
BASE16_ALPHABET = "0123456789ABCDEF"


class Alphabet:
    """Bidirectional mapping between chunk values and printable characters"""

    def __init__(self, symbols: str, case_insensitive: bool = False):
        self.symbols = symbols
        self.case_insensitive = case_insensitive
        # Decoding table indexed by code point, -1 for invalid
        self._inv: List[int] = [-1] * 128
        for value, char in enumerate(symbols):
            self._inv[ord(char)] = value
            if case_insensitive:
                self._inv[ord(char.lower())] = value

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, char: str) -> bool:
        return self.value(char) != -1

    def symbol(self, value: int) -> str:
        """Return the character representing `value`"""
        return self.symbols[value]

    def value(self, char: str) -> int:
        """Return the value of `char`, or -1 if it isn't in the alphabet"""
        code = ord(char)
        if code >= len(self._inv):
            return -1
        return self._inv[code]


@dataclass(frozen=True)
class EncodingSpec:
    """
    Parameters of one baseN encoding

    bits_per_group is the number of bits for the smallest possible (non
    empty) bit string that can be encoded without padding: the least common
    multiple of 8 and bits_per_chunk, e.g. 24 for base64.
    """
    name: str
    bits_per_chunk: int
    alphabet: Alphabet
    zero_char: str

    def __post_init__(self):
        if len(self.alphabet) != 1 << self.bits_per_chunk:
            raise ValueError(f"{self.name} alphabet must have {1 << self.bits_per_chunk} symbols")
        if self.alphabet.value(self.zero_char) != 0:
            raise ValueError(f"{self.zero_char!r} does not encode 0 in {self.name}")

    @property
    def bits_per_group(self) -> int:
        return self.bits_per_chunk * 8 // gcd(self.bits_per_chunk, 8)

    @property
    def chars_per_group(self) -> int:
        return self.bits_per_group // self.bits_per_chunk

    @property
    def max_padding_chars(self) -> int:
        # group length minus the number of characters needed for one byte.
        # For base64 a byte needs 2 characters and a group is 4, so at most
        # 2 padding characters can appear.
        chars_for_byte = -(-8 // self.bits_per_chunk)
        return self.chars_per_group - chars_for_byte

    @property
    def zero_value(self) -> int:
        return self.alphabet.value(self.zero_char)


class Encoding(Enum):
    """The supported encodings"""
    BASE64 = EncodingSpec("base64", 6, Alphabet(BASE64_ALPHABET), "A")
    BASE32HEX = EncodingSpec("base32hex", 5, Alphabet(BASE32HEX_ALPHABET, case_insensitive=True), "0")
    BASE16 = EncodingSpec("base16", 4, Alphabet(BASE16_ALPHABET, case_insensitive=True), "0")

    @property
    def spec(self) -> EncodingSpec:
        return self.value


_ALIASES = {
    "base64": Encoding.BASE64,
    "base32hex": Encoding.BASE32HEX,
    "base16": Encoding.BASE16,
    "hex": Encoding.BASE16,
}


def get_encoding(encoding: Union[str, Encoding]) -> Encoding:
    """
    Look up an encoding by enum member or name

    Args:
        encoding: An `Encoding`, or one of "base64", "base32hex", "base16", "hex"

    Returns:
        The matching `Encoding`

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(encoding, Encoding):
        return encoding
    try:
        return _ALIASES[encoding.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unsupported encoding: {encoding!r}") from None
