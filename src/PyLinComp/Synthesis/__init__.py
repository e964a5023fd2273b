from PyLinComp.Synthesis.Sequences import InvalidInput, validate_sequence, parse_bitstring
from PyLinComp.Synthesis.BerlekampMassey import (
    BerlekampMassey,
    berlekamp_massey,
    berlekamp_massey_iterator,
    linear_complexity,
    linear_complexity_profile,
)
from PyLinComp.Synthesis.CompiledBerlekampMassey import berlekamp_massey_dense
