"""
Confirm that decoded baseN text was the canonical encoding of its data

The bits hidden under padding characters must decode to zero and the
padding count must correspond to a byte boundary. Anything else decodes to
different data depending on how lenient a decoder is, so it is rejected.
"""

from .alphabet import EncodingSpec
from .errors import DecodeError


def padding_bytes(spec: EncodingSpec, padchars: int) -> int:
    """
    Number of decoded bytes covered by `padchars` padding characters

    Raises:
        DecodeError: If the padding count can't end on a byte boundary
    """
    padbits = (padchars * spec.bits_per_chunk + 7) & ~7
    if padbits > spec.bits_per_chunk * (padchars + 1):
        raise DecodeError(DecodeError.ErrorType.INVALID_PADDING_LENGTH, spec.name,
                          f"Invalid {spec.name} padding: {padchars} padding characters")
    return padbits // 8


def check_group_length(spec: EncodingSpec, nchars: int) -> None:
    """
    Check that `nchars` encoded characters form whole groups

    Raises:
        DecodeError: If the text stops short of a group boundary
    """
    if nchars % spec.chars_per_group:
        raise DecodeError(DecodeError.ErrorType.INVALID_PADDING_LENGTH, spec.name,
                          f"{spec.name} text of {nchars} characters is not a multiple "
                          f"of {spec.chars_per_group}")


def strip_padding(spec: EncodingSpec, decoded: bytes, padbytes: int) -> bytes:
    """
    Remove the `padbytes` zero bytes produced by padding characters

    Raises:
        DecodeError: If any of those bytes is nonzero
    """
    assert len(decoded) >= padbytes
    tail = decoded[len(decoded) - padbytes:]
    if any(tail):
        raise DecodeError(DecodeError.ErrorType.NON_CANONICAL_PADDING, spec.name,
                          f"Non 0 bits included in {spec.name} padding")
    return decoded[:len(decoded) - padbytes]
