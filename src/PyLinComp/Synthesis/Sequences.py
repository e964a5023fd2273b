from typing import Any
from collections.abc import Iterable

import operator

from BitVector import BitVector
import numpy as np


class InvalidInput(ValueError):
    """Raised when a sequence element is not one of the bits 0 or 1."""

    def __init__(self, index: int, value: Any):
        self.index = index
        self.value = value
        super().__init__(
            f"Sequence element {value!r} at index {index} is not a bit (expected 0 or 1)."
        )


def validate_bit(bit: Any, index: int) -> int:
    # no truthiness: bools, floats and strings are all rejected
    if isinstance(bit, (bool, np.bool_, float, np.floating)):
        raise InvalidInput(index, bit)
    try:
        value = operator.index(bit)
    except TypeError:
        raise InvalidInput(index, bit)
    if value not in (0, 1):
        raise InvalidInput(index, bit)
    return value


def validate_sequence(seq: Iterable[Any]) -> list[int]:
    """Check that every element of a sequence is a bit, and copy it to a list of ints.

    Accepts any iterable of integer-like values, including numpy integer
    arrays and BitVector objects. The whole sequence is checked before
    returning, so callers never act on a partially valid input.

    :param seq: the candidate bit sequence
    :type seq: Iterable
    :raises InvalidInput: on the first element that is not 0 or 1
    :return: the sequence as a list of python ints
    :rtype: list[int]
    """
    if isinstance(seq, str):
        # strings have to go through parse_bitstring, iterating them yields chars
        raise TypeError("Bit strings must be converted with parse_bitstring().")

    if isinstance(seq, BitVector):
        return list(seq)

    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise ValueError(f"Expected a 1-dimensional array, got shape {seq.shape}.")
        if seq.dtype.kind in 'iu':
            bad = np.flatnonzero((seq != 0) & (seq != 1))
            if len(bad):
                raise InvalidInput(int(bad[0]), seq[bad[0]].item())
            return [int(b) for b in seq]

    return [validate_bit(bit, idx) for idx, bit in enumerate(seq)]


def parse_bitstring(bits: str) -> list[int]:
    """Parse a string such as `"0110 1011"` into a list of bits.

    Whitespace and underscores are ignored. Every other character must be
    `0` or `1`.

    :raises InvalidInput: on the first character that is not a bit, with its
        position in `bits`
    """
    cleaned = []
    for idx, c in enumerate(bits):
        if c.isspace() or c == '_':
            continue
        if c not in '01':
            raise InvalidInput(idx, c)
        cleaned.append(c)

    if not cleaned:
        return []
    return list(BitVector(bitstring = "".join(cleaned)))
