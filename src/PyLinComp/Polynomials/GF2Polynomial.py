# TYPE ANNOTATIONS: TRUE
# DOCSTRINGS: TRUE

from typing import Self, Optional, Any
from collections.abc import Iterable, Iterator, Sequence

import operator

from BitVector import BitVector
import galois

_GF2 = galois.GF(2)

# A sparse polynomial over GF(2), stored as the set of exponents with coefficient 1.
# Note that this class is immutable and unordered, because it uses frozensets.
class GF2Polynomial:
    exponents: frozenset[int]

    @classmethod
    def _convert_exponent(cls, exponent: Any) -> int:
        """Helper function which checks that an exponent is a non-negative integer.

        `bool` is rejected even though it is an `int` subclass, so that a stray
        truth value never becomes a term silently.

        :param exponent: the candidate exponent
        :raises ValueError: if the exponent is not a non-negative integer
        :return: the exponent as a plain int
        :rtype: int
        """
        if isinstance(exponent, bool):
            raise ValueError(f"Exponent {exponent!r} is a bool, not an integer.")
        try:
            exponent = operator.index(exponent)
        except TypeError:
            raise ValueError( # throw better error.
                f"Exponent {exponent!r} (of type {type(exponent)}) is not an integer."
            )
        if exponent < 0:
            raise ValueError(f"Exponent {exponent} is negative.")
        return exponent

    def __init__(self,
        exponents: Optional[Iterable[int]] = None,
        fast_init: bool = False
    ):
        # fast init skips input handling (used internally on known-good frozensets)
        if fast_init:
            self.exponents = exponents  # type: ignore
            return

        if exponents is None:
            self.exponents = frozenset()
            return

        self.exponents = frozenset(
            GF2Polynomial._convert_exponent(e) for e in exponents
        )

    @classmethod
    def one(cls) -> Self:
        return cls(frozenset([0]), fast_init=True)

    @classmethod
    def zero(cls) -> Self:
        return cls(frozenset(), fast_init=True)

    def degree(self) -> int:
        """Compute the degree of the polynomial.

        The degree is the largest exponent present. The zero polynomial has no
        terms, and is given degree -1 so that it compares below every other
        polynomial.

        :return: the degree, or -1 for the zero polynomial
        :rtype: int
        """
        return max(self.exponents, default=-1)


    # Arithmetic:
    def add(self, other: "GF2Polynomial") -> "GF2Polynomial":
        """Compute the sum of two polynomials over GF(2).

        Coefficients are bits, so addition is the exclusive union (symmetric
        difference) of the two exponent sets: a term present in both operands
        cancels.

        :param other: the other polynomial involved in the operation
        :type other: GF2Polynomial
        :return: the sum of the two polynomials
        :rtype: GF2Polynomial
        """
        return GF2Polynomial(self.exponents ^ other.exponents, fast_init=True)

    def __add__(self, other: Any) -> "GF2Polynomial":
        if not isinstance(other, GF2Polynomial):
            return NotImplemented
        return self.add(other)

    # addition and subtraction coincide in characteristic 2
    def __xor__(self, other: Any) -> "GF2Polynomial":
        if not isinstance(other, GF2Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "GF2Polynomial":
        if not isinstance(other, GF2Polynomial):
            return NotImplemented
        return self.add(other)

    def shift(self, k: int) -> "GF2Polynomial":
        """Multiply the polynomial by the monomial x^k.

        :param k: the power of x to multiply by
        :type k: int
        :raises ValueError: if k is not a non-negative integer
        :return: the shifted polynomial
        :rtype: GF2Polynomial
        """
        k = GF2Polynomial._convert_exponent(k)
        return GF2Polynomial(frozenset(e + k for e in self.exponents), fast_init=True)

    def __lshift__(self, k: int) -> "GF2Polynomial":
        return self.shift(k)

    def reciprocal(self, degree: Optional[int] = None) -> "GF2Polynomial":
        """Compute the reciprocal polynomial x^d * p(1/x).

        Reversing the coefficients of a connection polynomial gives the
        characteristic polynomial of the register. `degree` sets the length of
        the reversal, which matters when the top coefficients are zero.

        :param degree: the degree to reflect about, defaults to `self.degree()`
        :type degree: int, optional
        :raises ValueError: if `degree` is smaller than the degree of the polynomial
        :return: the reciprocal polynomial
        :rtype: GF2Polynomial
        """
        if degree is None:
            degree = max(self.degree(), 0)
        if degree < self.degree():
            raise ValueError(
                f"Cannot reflect a degree {self.degree()} polynomial about degree {degree}."
            )
        return GF2Polynomial(frozenset(degree - e for e in self.exponents), fast_init=True)

    def evaluate_discrepancy(self, seq: Sequence[int], base: int) -> int:
        """XOR together the sequence bits selected by the polynomial's terms.

        For a connection polynomial C, this returns s[base] XOR (the bit the
        register defined by C predicts at index `base`): zero when C correctly
        predicts s[base].

        :param seq: the bit sequence
        :type seq: Sequence[int]
        :param base: the index being predicted
        :type base: int
        :raises IndexError: if any term reaches before the start of the sequence
        :return: the discrepancy bit
        :rtype: int
        """
        d = 0
        for e in self.exponents:
            if base - e < 0:
                raise IndexError(
                    f"Term x^{e} reaches index {base - e}, before the start of the sequence."
                )
            d ^= seq[base - e]
        return d


    # Container behaviour:
    def __contains__(self, exponent: Any) -> bool: return exponent in self.exponents
    def __iter__(self) -> Iterator[int]: return iter(sorted(self.exponents))
    def __len__(self) -> int: return len(self.exponents)
    def __bool__(self) -> bool: return bool(self.exponents)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GF2Polynomial):
            return NotImplemented
        return self.exponents == other.exponents

    def __hash__(self) -> int: return hash(self.exponents)


    # Strings:
    def to_display(self) -> str:
        """Render the polynomial as a string, e.g. `x^4 + x^1 + 1`.

        Terms are sorted by descending exponent; the constant term renders as
        `1` and every other term as `x^<exp>`. The zero polynomial renders as `0`.

        :return: a human readable string
        :rtype: str
        """
        if not self.exponents:
            return "0"
        return " + ".join(
            "1" if e == 0 else f"x^{e}"
            for e in sorted(self.exponents, reverse=True)
        )

    def __str__(self) -> str: return self.to_display()

    def __repr__(self) -> str:
        return f"GF2Polynomial({sorted(self.exponents)})"


    # Conversions:
    @classmethod
    def from_coefficients(cls, coefficients: Iterable[int]) -> Self:
        """Build a polynomial from a coefficient list in ascending order.

        `[1, 0, 1, 1]` is `1 + x^2 + x^3`. This is the dense format used by the
        register synthesis routines.

        :param coefficients: the coefficient of x^i at position i
        :type coefficients: Iterable[int]
        :raises ValueError: if a coefficient is not 0 or 1
        :return: the polynomial
        :rtype: GF2Polynomial
        """
        exps = set()
        for idx, c in enumerate(coefficients):
            if isinstance(c, (bool, float)) or c not in (0, 1):
                raise ValueError(f"Coefficient {c!r} at position {idx} is not 0 or 1.")
            if c:
                exps.add(idx)
        return cls(frozenset(exps), fast_init=True)

    def to_coefficients(self, length: Optional[int] = None) -> list[int]:
        if length is None:
            length = self.degree() + 1
        if length < self.degree() + 1:
            raise ValueError(
                f"{length} coefficients cannot hold a degree {self.degree()} polynomial."
            )
        return [1 if i in self.exponents else 0 for i in range(length)]

    def __int__(self) -> int:
        return sum(1 << e for e in self.exponents)

    @classmethod
    def from_int(cls, value: int) -> Self:
        if value < 0:
            raise ValueError(f"Cannot convert negative integer {value} to a polynomial.")
        return cls(
            frozenset(i for i in range(value.bit_length()) if (value >> i) & 1),
            fast_init=True
        )

    # most significant bit = highest degree, so int(p.to_bitvector()) == int(p)
    def to_bitvector(self, size: Optional[int] = None) -> BitVector:
        if size is None:
            size = max(self.degree() + 1, 1)
        return BitVector(bitlist = self.to_coefficients(size)[::-1])

    @classmethod
    def from_bitvector(cls, bv: BitVector) -> Self:
        return cls.from_coefficients(list(bv)[::-1])

    def to_galois(self) -> galois.Poly:
        """Convert to a `galois.Poly` over GF(2).

        :return: the same polynomial as a galois object
        :rtype: galois.Poly
        """
        if not self.exponents:
            return galois.Poly([0], field=_GF2)
        return galois.Poly(self.to_coefficients()[::-1], field=_GF2)

    @classmethod
    def from_galois(cls, poly: galois.Poly) -> Self:
        if poly.field.order != 2:
            raise ValueError(f"Expected a polynomial over GF(2), got one over {poly.field.name}.")
        if poly.degree == 0 and poly.coeffs[0] == 0:
            return cls.zero()
        return cls(frozenset(int(e) for e in poly.nonzero_degrees), fast_init=True)
