from itertools import product

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from PyLinComp.Synthesis.Sequences import validate_sequence


def satisfies_recurrence(seq, poly, L):
    """Check that an LFSR of length L with connection polynomial `poly` generates `seq`.

    This holds when s[n] = XOR over i in C, i >= 1 of s[n-i] for every
    L <= n < len(seq). The first L bits are the register's initial state.

    :raises ValueError: if `poly` has no constant term or has degree above L
    """
    seq = validate_sequence(seq)
    if 0 not in poly:
        raise ValueError(f"Connection polynomial {poly} has no constant term.")
    if poly.degree() > L:
        raise ValueError(f"Connection polynomial {poly} has degree above L = {L}.")

    for n in range(L, len(seq)):
        if poly.evaluate_discrepancy(seq, n):
            return False
    return True


def brute_force_linear_complexity(seq, max_length = 16):
    """Find the linear complexity of a short sequence by exhaustive search.

    Every tap vector of every length l = 0, 1, 2, ... is tried until one
    reproduces the sequence. The cost grows as 2^len(seq), so this is only
    useful as an independent check of Berlekamp-Massey on short inputs.

    :param seq: the bit sequence
    :param int max_length: refuse sequences longer than this
    :raises ValueError: if the sequence is longer than `max_length`
    :return: the length of the shortest LFSR generating `seq`
    :rtype: int
    """
    seq = np.array(validate_sequence(seq), dtype=np.int64)
    N = len(seq)
    if N > max_length:
        raise ValueError(
            f"Brute force search is limited to {max_length} bits, got {N}."
        )

    # an empty register only produces zeros
    if not seq.any():
        return 0

    for l in range(1, N + 1):
        # windows[j] = s[j..j+l-1], which predicts s[j+l]
        windows = sliding_window_view(seq, l)[:N - l]
        targets = seq[l:]

        # row k of taps: coefficients for s[n-l], ..., s[n-1] (window order)
        taps = np.array(list(product([0, 1], repeat=l)), dtype=np.int64)
        predictions = (windows @ taps.T) % 2
        if np.any(np.all(predictions == targets[:, None], axis=0)):
            return l

    # unreachable: length N always works since there is nothing to predict
    return N


def characteristic_polynomial(poly, L):
    """The characteristic polynomial x^L * C(1/x) of a length L register."""
    return poly.reciprocal(L)


def is_maximal_length(poly, L):
    """Check whether the register (C, L) generates a maximal length sequence.

    A length L LFSR has period 2^L - 1 from any non-zero seed exactly when
    its characteristic polynomial has degree L and is primitive.

    :param GF2Polynomial poly: the connection polynomial
    :param int L: the register length
    :rtype: bool
    """
    if L < 1:
        return False
    char_poly = characteristic_polynomial(poly, L)
    if char_poly.degree() != L:
        return False
    return bool(char_poly.to_galois().is_primitive())
