# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational number type kept in lowest terms."""

from __future__ import annotations

from fractions import Fraction
from math import gcd
from numbers import Integral, Rational
from typing import Any, Optional, Tuple, Union

from .rounding import Rounding, get_dflt_rounding_mode, round_quotient


__all__ = ['InvalidArgument', 'MAX_PRECISION', 'RationalNumber']


# max number of fractional digits accepted by RationalNumber.adjusted
MAX_PRECISION = 9999


class InvalidArgument(ValueError):
    """Raised when a zero denominator is given."""


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, Integral):
        return int(value)
    raise TypeError(f"{name} must be an integral number, not "
                    f"{type(value).__name__!r}")


def _reduce(num: int, den: int) -> Tuple[int, int]:
    # den != 0 is checked by the caller
    if den < 0:
        num, den = -num, -den
    # gcd(0, den) == den, so 0/den reduces to 0/1
    div = gcd(num, den)
    return num // div, den // div


class RationalNumber:

    """Rational number n/d, always presented in lowest terms.

    Args:
        numerator (numbers.Integral): numerator of the ratio (default: 0)
        denominator (numbers.Integral): denominator of the ratio
            (default: 1)

    The sign of the number is carried by the numerator, the denominator is
    always positive. Both components can be re-assigned; each assignment is
    validated before being committed. The assigned values are kept as they
    are and reduced whenever `self` is read, so assigning 2 and 4 to a
    former 1/2 gives 1/2 again.

    Raises:
        TypeError: `numerator` or `denominator` is not integral
        InvalidArgument: `denominator` is 0
    """

    __slots__ = ('_num', '_den')

    def __init__(self, numerator: Integral = 0,
                 denominator: Integral = 1) -> None:
        num = _as_int(numerator, 'numerator')
        den = _as_int(denominator, 'denominator')
        if den == 0:
            raise InvalidArgument("Denominator must not be 0.")
        self._num, self._den = num, den

    @property
    def numerator(self) -> int:
        """Numerator of `self` in lowest terms."""
        return self.as_integer_ratio()[0]

    @numerator.setter
    def numerator(self, value: Integral) -> None:
        self._num = _as_int(value, 'numerator')

    @property
    def denominator(self) -> int:
        """Denominator of `self` in lowest terms (always > 0)."""
        return self.as_integer_ratio()[1]

    @denominator.setter
    def denominator(self, value: Integral) -> None:
        den = _as_int(value, 'denominator')
        if den == 0:
            raise InvalidArgument("Denominator must not be 0.")
        self._den = den

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        # components are kept as assigned, den != 0
        return _reduce(self._num, self._den)

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(*self.as_integer_ratio())

    def to_decimal_value(self) -> float:
        """Return `self` converted to a float.

        Raises:
            OverflowError: `self` exceeds the range of float
        """
        num, den = self.as_integer_ratio()
        return num / den

    __float__ = to_decimal_value

    def plus(self, other: RationalNumber) -> RationalNumber:
        """Return the sum of `self` and `other` as a new instance.

        Neither `self` nor `other` is changed.
        """
        num, den = self.as_integer_ratio()
        return RationalNumber(num * other.denominator + other.numerator * den,
                              den * other.denominator)

    def __add__(self, other: Any) -> Union[RationalNumber, Any]:
        """self + other"""
        if isinstance(other, RationalNumber):
            return self.plus(other)
        if isinstance(other, Integral):
            return self.plus(RationalNumber(other))
        return NotImplemented

    __radd__ = __add__

    def adjusted(self, precision: int = 0,
                 rounding: Optional[Rounding] = None) -> RationalNumber:
        """Return copy of `self`, rounded to `precision` fractional digits.

        Args:
            precision (int): number of fractional decimal digits (default:
                0); negative values round to tens, hundreds, ...
            rounding (Rounding): rounding mode to be used (default: the
                current default rounding mode)

        Raises:
            TypeError: `precision` is not an int
            ValueError: `abs(precision)` exceeds `MAX_PRECISION`
        """
        if not isinstance(precision, int):
            raise TypeError("Precision must be of type 'int'.")
        if abs(precision) > MAX_PRECISION:
            raise ValueError(
                f"Precision must be in range -{MAX_PRECISION} .. "
                f"{MAX_PRECISION}.")
        if rounding is None:
            rounding = get_dflt_rounding_mode()
        num, den = self.as_integer_ratio()
        if precision >= 0:
            shift = 10 ** precision
            return RationalNumber(round_quotient(num * shift, den, rounding),
                                  shift)
        shift = 10 ** -precision
        return RationalNumber(
            round_quotient(num, den * shift, rounding) * shift)

    def __round__(self, n_digits: Optional[int] = None) \
            -> Union[int, RationalNumber]:
        """round(self [, n_digits])

        Round `self` to the nearest int or, if `n_digits` is given, to a
        `RationalNumber` with `n_digits` fractional digits, using the
        current default rounding mode.
        """
        if n_digits is None:
            return round_quotient(*self.as_integer_ratio(),
                                  get_dflt_rounding_mode())
        return self.adjusted(n_digits)

    def __int__(self) -> int:
        """int(self)"""
        num, den = self.as_integer_ratio()
        if num < 0:
            return -(-num // den)
        return num // den

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._num != 0

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, (RationalNumber, Rational)):
            return self.as_integer_ratio() == \
                (other.numerator, other.denominator)
        return NotImplemented

    def __hash__(self) -> int:
        """hash(self)"""
        # same hash as an equal int or Fraction
        return hash(self.as_fraction())

    def __copy__(self) -> RationalNumber:
        """copy(self)"""
        return RationalNumber(*self.as_integer_ratio())

    def __deepcopy__(self, memo: Any) -> RationalNumber:
        """deepcopy(self)"""
        return self.__copy__()

    def __str__(self) -> str:
        """str(self)"""
        num, den = self.as_integer_ratio()
        return f"{num}/{den}"

    def __repr__(self) -> str:
        """repr(self)"""
        num, den = self.as_integer_ratio()
        return f"{type(self).__name__}({num}, {den})"
