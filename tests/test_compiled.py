from itertools import product

import numpy as np
import pytest

from PyLinComp.Polynomials import GF2Polynomial
from PyLinComp.Synthesis import InvalidInput, berlekamp_massey, berlekamp_massey_dense
from PyLinComp.Tools import satisfies_recurrence, brute_force_linear_complexity

P = GF2Polynomial


@pytest.mark.parametrize("seq,poly,L", [
    ([], P([0]), 0),
    ([0, 0], P([0]), 0),
    ([1], P([0, 1]), 1),
    ([0, 1], P([0, 2]), 2),
    ([0, 0, 0, 0, 0, 1], P([0, 6]), 6),
    ([0, 0, 0, 1], P([0, 4]), 4),
    ([1, 1, 0, 0, 1, 1], P([0, 1, 2, 3]), 3),
])
def test_known_sequences(seq, poly, L):
    assert berlekamp_massey_dense(seq) == (poly, L)

def test_matches_sparse_engine_exhaustively():
    for N in range(9):
        for seq in product([0, 1], repeat=N):
            assert berlekamp_massey_dense(seq) == berlekamp_massey(seq)

def test_matches_sparse_engine_on_long_sequences():
    rng = np.random.default_rng(3)
    for size in [100, 257, 1000]:
        seq = rng.integers(0, 2, size=size).astype(np.uint8)
        assert berlekamp_massey_dense(seq) == berlekamp_massey(seq)

def test_invalid_input():
    with pytest.raises(InvalidInput) as excinfo:
        berlekamp_massey_dense([1, 0, 2])
    assert excinfo.value.index == 2

def test_verbose_output(capsys):
    berlekamp_massey_dense([1, 0, 1, 1], verbose=True)
    out = capsys.readouterr().out
    assert "Compiled Berlekamp-Massey on 4 bits:" in out
    assert "Finished: L = 2" in out

def test_dense_results_satisfy_recurrence():
    for N in range(9):
        for seq in product([0, 1], repeat=N):
            poly, L = berlekamp_massey_dense(seq)
            assert 0 in poly
            assert poly.degree() <= L
            assert satisfies_recurrence(seq, poly, L)
            assert L == brute_force_linear_complexity(seq)

def test_dense_results_satisfy_recurrence_on_long_sequences():
    rng = np.random.default_rng(5)
    seq = rng.integers(0, 2, size=300).tolist()
    poly, L = berlekamp_massey_dense(seq)
    assert satisfies_recurrence(seq, poly, L)
