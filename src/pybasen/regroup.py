"""
Regroup a stream of fixed-width symbols into symbols of another width

The input is treated as a virtual bitstream: the symbols concatenated
MSB-first. Reading is index based, each call takes an explicit bit position
and returns the next one, so no intermediate bit buffer is built. Bits past
the end of the input read as zero.
"""

from typing import Iterator, Optional, Sequence, Tuple


def read_bits(symbols: Sequence[int], width: int, bit_pos: int, count: int) -> Tuple[int, int]:
    """
    Read `count` bits starting at absolute bit offset `bit_pos`

    Args:
        symbols: Input symbols, each holding `width` significant bits
        width: Number of bits per input symbol
        bit_pos: Offset into the virtual bitstream
        count: Number of bits to read

    Returns:
        (value, new_bit_pos)
    """
    value = 0
    remaining = count
    pos = bit_pos
    while remaining > 0:
        index, offset = divmod(pos, width)
        take = min(width - offset, remaining)
        if index < len(symbols):
            symbol = symbols[index] & ((1 << width) - 1)
            bits = (symbol >> (width - offset - take)) & ((1 << take) - 1)
        else:
            bits = 0
        value = (value << take) | bits
        remaining -= take
        pos += take
    return value, pos


def regroup(symbols: Sequence[int], in_width: int, out_width: int,
            total_bits: Optional[int] = None) -> Iterator[int]:
    """
    Yield `out_width`-bit values sliced from the bitstream of `symbols`

    Only whole output symbols are produced. `total_bits` defaults to the
    length of the input bitstream; a larger value extends the stream with
    zero bits.
    """
    if total_bits is None:
        total_bits = len(symbols) * in_width
    pos = 0
    for _ in range(total_bits // out_width):
        value, pos = read_bits(symbols, in_width, pos, out_width)
        yield value
