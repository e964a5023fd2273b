import numpy as np
import time

import numba
u8 = numba.types.uint8
i64 = numba.types.int64

from PyLinComp.Polynomials import GF2Polynomial
from PyLinComp.Synthesis.Sequences import validate_sequence
from PyLinComp.Synthesis.BerlekampMassey import indent


# dense version of the pass: polynomials are coefficient arrays indexed by exponent.
@numba.njit(numba.types.Tuple((u8[:], i64))(u8[:]))
def _berlekamp_massey_kernel(seq):
    # N = total number of bits to process
    N = len(seq)
    # the answer can have degree N, e.g. 0,...,0,1 gives 1 + x^N
    size = N + 1

    # current connection polynomial guess
    curr_guess = np.zeros(size, dtype=np.uint8)
    curr_guess[0] = 1
    # prev. connection polynomial guess
    prev_guess = np.zeros(size, dtype=np.uint8)
    prev_guess[0] = 1

    # L = current linear complexity
    L = 0
    # m = index of last change
    m = -1

    # n = index of bit we are correcting.
    for n in range(N):

        # calculate discrepancy from LFSR frame
        d = 0
        for i in range(L+1):
            d ^= (curr_guess[i] & seq[n-i])

        # handle discrepancy (if needed)
        if d != 0:

            # store copy of current guess
            temp = curr_guess.copy()

            # curr_guess = curr_guess - (x**(n-m) * prev_guess)
            shift = n-m
            for i in range(shift, size):
                curr_guess[i] ^= prev_guess[i - shift]

            # if 2L <= n, then the polynomial is unique
            # it's safe to update the linear complexity.
            if 2*L <= n:
                L = n + 1 - L
                prev_guess = temp
                m = n

    return curr_guess[:L+1].copy(), L


def berlekamp_massey_dense(seq, verbose = False, print_depth = 0):
    """Compiled Berlekamp-Massey over dense coefficient arrays.

    Gives the same answer as `berlekamp_massey`, but runs the pass in a numba
    kernel, which is much faster on long keystreams. The first call pays the
    compilation cost.

    :param seq: the bit sequence
    :raises InvalidInput: if any element is not 0 or 1
    :return: (connection polynomial, linear complexity)
    """
    seq = np.array(validate_sequence(seq), dtype=np.uint8)

    if verbose:
        print(f"{indent(print_depth)}Compiled Berlekamp-Massey on {len(seq)} bits:")
        start_time = time.time()

    coefficients, L = _berlekamp_massey_kernel(seq)

    if verbose:
        print(f"{indent(print_depth)}Finished: L = {L}")
        print(f"{indent(print_depth)}Time: {time.time()-start_time}")

    return GF2Polynomial.from_coefficients(int(c) for c in coefficients), int(L)
