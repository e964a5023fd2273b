from typing import Any, Self
from collections.abc import Iterable, Iterator

from PyLinComp.Polynomials import GF2Polynomial
from PyLinComp.Synthesis.Sequences import validate_bit, validate_sequence

import time


# small helper function to help pretty-print:
def indent(n):
    return ("|   " * n)


class BerlekampMassey:
    """Online Berlekamp-Massey synthesis over GF(2).

    Bits are consumed one at a time with `feed()`. After each bit, the
    connection polynomial and linear complexity describe the shortest LFSR
    which generates every bit seen so far. Each instance owns its state, so
    a new engine should be created for each sequence.
    """

    def __init__(self):
        # C = current connection polynomial guess
        self.C = GF2Polynomial.one()
        # B = connection polynomial at the last length change
        self.B = GF2Polynomial.one()

        # L = current linear complexity (upper bound on deg(C))
        self.L = 0
        # m = index of last length change
        self.m = -1

        # n = index of the next bit to correct
        self.n = 0
        self._seq: list[int] = []

    @classmethod
    def synthesize(cls, seq: Iterable[Any]) -> tuple[GF2Polynomial, int]:
        engine = cls()
        engine.extend(validate_sequence(seq))
        return engine.result()

    def feed(self, bit: Any) -> int:
        """Process the next bit of the sequence.

        :param bit: the next bit, 0 or 1
        :raises InvalidInput: if `bit` is not 0 or 1 (the state is left unchanged)
        :return: the discrepancy for this bit: 1 if the register before this
            call mispredicted it, else 0
        :rtype: int
        """
        self._seq.append(validate_bit(bit, self.n))
        n = self.n

        # calculate discrepancy from LFSR frame
        d = self.C.evaluate_discrepancy(self._seq, n)

        # handle discrepancy (if needed)
        if d:
            # store copy of current guess
            temp = self.C

            # C = C - x^(n-m) * B
            self.C = self.C + self.B.shift(n - self.m)

            # if 2L <= n, the polynomial is unique and
            # it's safe to update the linear complexity.
            if 2 * self.L <= n:
                self.L = n + 1 - self.L
                self.B = temp
                self.m = n

        self.n += 1
        return d

    def extend(self, bits: Iterable[Any]) -> Self:
        for bit in bits:
            self.feed(bit)
        return self

    @property
    def connection_polynomial(self) -> GF2Polynomial: return self.C

    @property
    def linear_complexity(self) -> int: return self.L

    @property
    def length(self) -> int: return self.n

    def result(self) -> tuple[GF2Polynomial, int]:
        return (self.C, self.L)


def berlekamp_massey(seq, verbose = False, print_depth = 0):
    """Find the shortest LFSR which generates a binary sequence.

    The sequence is validated completely before the pass starts, so an
    invalid element raises before any work is done.

    :param seq: the bit sequence (ints, a numpy integer array or a BitVector)
    :param bool verbose: print progress and each length change
    :param int print_depth: indentation level for progress output
    :raises InvalidInput: if any element is not 0 or 1
    :return: (connection polynomial, linear complexity)
    :rtype: tuple[GF2Polynomial, int]
    """
    seq = validate_sequence(seq)

    if verbose:
        print(f"{indent(print_depth)}Berlekamp-Massey on {len(seq)} bits:")
        start_time = time.time()

    engine = BerlekampMassey()
    for bit in seq:
        prev_L = engine.L
        engine.feed(bit)
        if verbose and engine.L != prev_L:
            print(f"{indent(print_depth+1)}n = {engine.n - 1}: L {prev_L} -> {engine.L}")

    if verbose:
        print(f"{indent(print_depth)}Finished: L = {engine.L}, C = {engine.C}")
        print(f"{indent(print_depth)}Time: {time.time()-start_time}")

    return engine.result()


def linear_complexity(seq):
    return berlekamp_massey(seq)[1]


# linear complexity profile of the sequence:
# the (index, new L) pairs at every length change.
def linear_complexity_profile(seq):
    seq = validate_sequence(seq)
    engine = BerlekampMassey()

    Ls = []
    for bit in seq:
        prev_L = engine.L
        engine.feed(bit)
        if engine.L != prev_L:
            Ls.append((engine.n - 1, engine.L))
    return Ls


def berlekamp_massey_iterator(
    seq: Iterable[Any], yield_rate: int = 1000
) -> Iterator[tuple[int, GF2Polynomial]]:
    """Run Berlekamp-Massey lazily over a (possibly very long) stream of bits.

    Yields (linear complexity, connection polynomial) before processing each
    bit whose index is a multiple of `yield_rate`, and once more when the
    stream ends. Bits are validated as they arrive.

    :param seq: any iterable of bits
    :param yield_rate: number of bits between reports
    :raises ValueError: if `yield_rate` is not positive
    :raises InvalidInput: when a non-binary bit is reached
    """
    if yield_rate < 1:
        raise ValueError(f"yield_rate must be positive, got {yield_rate}.")

    engine = BerlekampMassey()
    for n, bit in enumerate(seq):
        if n % yield_rate == 0:
            yield (engine.L, engine.C)
        engine.feed(bit)

    yield (engine.L, engine.C)
