"""
Handle baseN padding characters in both directions

On encode the input is virtually extended with zero bits up to the next
group boundary and literal padding characters fill out the last group. On
decode the trailing padding characters are located and replaced with the
encoding's zero value before the text is regrouped into bytes.
"""

from typing import Iterator, List, Sequence, Tuple

from .alphabet import BASE_PADDING_CHAR, EncodingSpec
from .errors import DecodeError
from .regroup import regroup

# The characters C's isspace() accepts
WHITESPACE = frozenset(" \t\n\r\x0b\x0c")


def encoded_length(spec: EncodingSpec, nbytes: int) -> int:
    """Length of the encoded text for `nbytes` of data, padding included"""
    bits = nbytes * 8
    if bits % spec.bits_per_group:
        bits += spec.bits_per_group - bits % spec.bits_per_group
    return bits // spec.bits_per_chunk


def significant_chars(spec: EncodingSpec, nbytes: int) -> int:
    """Number of encoded characters that carry data bits"""
    return -(-nbytes * 8 // spec.bits_per_chunk)


def normalize_for_encode(spec: EncodingSpec, data: Sequence[int]) -> Iterator[int]:
    """Yield the chunk values for `data`, zero-extended to a whole chunk"""
    total_bits = significant_chars(spec, len(data)) * spec.bits_per_chunk
    return regroup(data, 8, spec.bits_per_chunk, total_bits)


def pad_encoded(spec: EncodingSpec, text: str, nbytes: int) -> str:
    """Append padding characters so `text` ends on a group boundary"""
    length = encoded_length(spec, nbytes)
    assert length >= len(text)
    return text + BASE_PADDING_CHAR * (length - len(text))


def count_padding(spec: EncodingSpec, text: str) -> Tuple[int, int]:
    """
    Count the trailing padding characters of `text`, ignoring whitespace

    Args:
        spec: The encoding
        text: Encoded text

    Returns:
        (padchars, pad_start) where pad_start is the index at which the
        trailing padding region begins

    Raises:
        DecodeError: If there are more padding characters than the encoding allows
    """
    padchars = 0
    pad_start = len(text)
    while pad_start > 0:
        ch = text[pad_start - 1]
        if ch == BASE_PADDING_CHAR:
            padchars += 1
            if padchars > spec.max_padding_chars:
                raise DecodeError(DecodeError.ErrorType.EXCESS_PADDING, spec.name,
                                  f"Too many {spec.name} padding characters: {text}")
        elif ch not in WHITESPACE:
            break
        pad_start -= 1
    return padchars, pad_start


def normalize_for_decode(spec: EncodingSpec, text: str, pad_start: int) -> List[int]:
    """
    Map encoded text to chunk values

    Whitespace is dropped and padding characters at or after `pad_start`
    become the zero value.

    Raises:
        DecodeError: If a character is neither in the alphabet nor whitespace,
            or a padding character appears before the padding region
    """
    values = []
    for i, ch in enumerate(text):
        # Leading whitespace is skipped as well as interior and trailing
        if ch in WHITESPACE:
            continue
        if i >= pad_start and ch == BASE_PADDING_CHAR:
            values.append(spec.zero_value)
            continue
        value = spec.alphabet.value(ch)
        if value == -1:
            raise DecodeError(DecodeError.ErrorType.INVALID_CHARACTER, spec.name,
                              f"Invalid {spec.name} character {ch!r} at position {i}: {text}")
        values.append(value)
    return values
