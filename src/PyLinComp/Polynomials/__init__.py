from PyLinComp.Polynomials.GF2Polynomial import GF2Polynomial
