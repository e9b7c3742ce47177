# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes and integer rounding of quotients."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


__all__ = [
    'Rounding',
    'get_dflt_rounding_mode',
    'set_dflt_rounding_mode',
    'round_quotient',
]


# same set of modes as defined in standard lib module 'decimal'
@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, 'Round away from zero if the last digit after rounding '
                     'towards zero would be 0 or 5; otherwise round towards '
                     'zero.')
    ROUND_CEILING = (2, 'Round towards Infinity.')
    ROUND_DOWN = (3, 'Round towards zero.')
    ROUND_FLOOR = (4, 'Round towards -Infinity.')
    ROUND_HALF_DOWN = (5, 'Round to nearest, ties towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest, ties to the even neighbour.')
    ROUND_HALF_UP = (7, 'Round to nearest, ties away from zero.')
    ROUND_UP = (8, 'Round away from zero.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_EVEN)


def get_dflt_rounding_mode() -> Rounding:
    """Return the default rounding mode of the current context."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set the default rounding mode of the current context.

    Args:
        rounding (Rounding): rounding mode to be used as default

    Returns:
        Token: token which can be used to restore the previous mode

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def round_quotient(num: int, den: int, rounding: Rounding) -> int:
    """Return `num` / `den` rounded to an integer according to `rounding`.

    `den` must be positive.
    """
    floor, rem = divmod(num, den)
    if rem == 0:
        return floor
    ceil = floor + 1
    # result of rounding towards zero and away from zero
    if num >= 0:
        down, up = floor, ceil
    else:
        down, up = ceil, floor
    if rounding is Rounding.ROUND_FLOOR:
        return floor
    if rounding is Rounding.ROUND_CEILING:
        return ceil
    if rounding is Rounding.ROUND_DOWN:
        return down
    if rounding is Rounding.ROUND_UP:
        return up
    if rounding is Rounding.ROUND_05UP:
        return up if abs(down) % 5 == 0 else down
    # remaining modes round to nearest
    twice_rem = 2 * rem
    if twice_rem < den:
        return floor
    if twice_rem > den:
        return ceil
    # tie
    if rounding is Rounding.ROUND_HALF_UP:
        return up
    if rounding is Rounding.ROUND_HALF_DOWN:
        return down
    return floor if floor % 2 == 0 else ceil
