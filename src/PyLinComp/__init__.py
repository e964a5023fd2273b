__title__ = 'PyLinComp'
__version__ = '0.1.0'

from PyLinComp.Polynomials import GF2Polynomial
from PyLinComp.Synthesis import (
    InvalidInput,
    BerlekampMassey,
    berlekamp_massey,
    berlekamp_massey_dense,
    berlekamp_massey_iterator,
    linear_complexity,
    linear_complexity_profile,
    parse_bitstring,
)
