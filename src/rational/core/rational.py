"""
Rational: exact rational numbers with a decimal display precision.
=================================================================

- Value: a reduced integer ratio (numerator, denominator > 0). All arithmetic
  and every comparison are exact and done on Python ints.
- Precision: the number of fractional decimal digits used for display, or
  None when the value has no finite decimal expansion. For every instance
  ``value * 10**precision`` is an integer.
- Rounding (``adjusted``, ``quantize``, ``round``) happens in the integer
  domain through :mod:`rational.core.rounding`; omitted modes come from the
  rounding context.
- Foreign operands are classified once by :mod:`rational.core.peers`.

Instances are immutable and hash equal to equal values of int, Fraction,
Decimal and float.
"""

# NOTE: Decimal is used for I/O (text, format) only; see fmt.py.

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

from .constants import (
    HASH_INF,
    HASH_MODULUS,
    LOG2_5,
    MAX_APPROX_PREC,
    MAX_PREC,
    MIN_PREC,
)
from .context import get_dflt_rounding_mode, resolve_rounding
from .exc import DivisionByZero, InvalidOperation, PrecisionLimitError
from .fmt import (
    format_rational,
    ratio_magnitude,
    rational_repr,
    rational_to_str,
)
from .parse import parse_literal
from .peers import Peer, PeerKind, classify
from .rounding import Rounding, round_div, round_to_multiple

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


# ----------------------------
# Integer helpers
# ----------------------------

def _pow5_exponent(n: int) -> Optional[int]:
    """Return b if n == 5**b, else None (n > 0)."""
    if n == 1:
        return 0
    if n % 5:
        return None
    guess = int((n.bit_length() - 1) / LOG2_5)
    for b in (guess - 1, guess, guess + 1):
        if b > 0 and 5 ** b == n:
            return b
    return None


def _natural_prec(den: int) -> Optional[int]:
    """Fewest fractional digits needed for a value with reduced denominator `den`.

    None if the value has no finite decimal expansion.
    """
    twos = (den & -den).bit_length() - 1
    fives = _pow5_exponent(den >> twos)
    if fives is None:
        return None
    return max(twos, fives)


def _reduce(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        raise DivisionByZero("Denominator must not be zero.")
    if den < 0:
        num, den = -num, -den
    g = math.gcd(num, den)
    if g != 1:
        num //= g
        den //= g
    return num, den


def _check_precision(precision: Any) -> int:
    if not isinstance(precision, numbers.Integral):
        raise TypeError("Precision must be of type 'numbers.Integral'.")
    prec = int(precision)
    if not MIN_PREC <= prec <= MAX_PREC:
        raise PrecisionLimitError(prec)
    return prec


def _peer_precision(peer: Peer, den: int) -> Optional[int]:
    """Display precision a finite exact peer brings along (`den` reduced)."""
    if peer.kind is PeerKind.INTEGER:
        return 0
    if peer.kind is PeerKind.DECIMAL:
        return max(0, -peer.exponent)
    return _natural_prec(den)


# (numerator, denominator, precision) of an exact operand
_Triple = Tuple[int, int, Optional[int]]


# ----------------------------
# Operand coercion
# ----------------------------

def _coerce(obj: Any) -> Union[_Triple, float, None]:
    """Map an operand to an exact triple, a float (inexact peers) or None."""
    if isinstance(obj, Rational):
        return obj._triple()
    peer = classify(obj)
    if peer is None or peer.kind is PeerKind.COMPLEX:
        return None
    if peer.kind is PeerKind.FLOAT:
        return float(obj)
    if not peer.is_finite:
        raise ValueError(f"Unsupported operand: {obj!r}")
    num, den = _reduce(*peer.as_integer_ratio())
    return num, den, _peer_precision(peer, den)


def _exact_ratio(obj: Any) -> Tuple[int, int]:
    y = _coerce(obj)
    if isinstance(y, tuple):
        return y[0], y[1]
    if isinstance(y, float):
        if not math.isfinite(y):
            raise ValueError(f"Unsupported operand: {obj!r}")
        return y.as_integer_ratio()
    raise TypeError(f"Unsupported operand: {obj!r}")


def _max_prec(xp: Optional[int], yp: Optional[int]) -> Optional[int]:
    if xp is None or yp is None:
        return None
    return max(xp, yp)


def _sum_prec(xp: Optional[int], yp: Optional[int]) -> Optional[int]:
    if xp is None or yp is None:
        return None
    return xp + yp


def _floordiv(x: _Triple, y: _Triple) -> int:
    if y[0] == 0:
        raise DivisionByZero("Division by zero.")
    return (x[0] * y[1]) // (x[1] * y[0])


# ----------------------------
# Arithmetic on triples
# ----------------------------

def _add(x: _Triple, y: _Triple) -> _Triple:
    return x[0] * y[1] + y[0] * x[1], x[1] * y[1], _max_prec(x[2], y[2])


def _sub(x: _Triple, y: _Triple) -> _Triple:
    return x[0] * y[1] - y[0] * x[1], x[1] * y[1], _max_prec(x[2], y[2])


def _mul(x: _Triple, y: _Triple) -> _Triple:
    return x[0] * y[0], x[1] * y[1], _sum_prec(x[2], y[2])


def _truediv(x: _Triple, y: _Triple) -> _Triple:
    if y[0] == 0:
        raise DivisionByZero("Division by zero.")
    return x[0] * y[1], x[1] * y[0], None


def _mod(x: _Triple, y: _Triple) -> _Triple:
    if y[0] == 0:
        raise DivisionByZero("Division by zero.")
    return ((x[0] * y[1]) % (y[0] * x[1]), x[1] * y[1],
            _max_prec(x[2], y[2]))


def _operators(exact_op: Callable[[_Triple, _Triple], _Triple],
               float_op: Callable[[float, float], float]):
    """Build forward and reverse operator methods from a triple operation.

    Exact operands give a Rational, float operands a float; anything else
    is left to the other operand.
    """

    def forward(a: Rational, b: Any) -> Any:
        y = _coerce(b)
        if isinstance(y, tuple):
            return type(a)._from_result(*exact_op(a._triple(), y))
        if isinstance(y, float):
            return float_op(float(a), y)
        return NotImplemented

    forward.__name__ = f"__{float_op.__name__}__"
    forward.__doc__ = float_op.__doc__

    def reverse(b: Rational, a: Any) -> Any:
        x = _coerce(a)
        if isinstance(x, tuple):
            return type(b)._from_result(*exact_op(x, b._triple()))
        if isinstance(x, float):
            return float_op(x, float(b))
        return NotImplemented

    reverse.__name__ = f"__r{float_op.__name__}__"
    reverse.__doc__ = float_op.__doc__

    return forward, reverse


# ----------------------------
# Rational
# ----------------------------

@dataclass(frozen=True, init=False, eq=False, repr=False)
class Rational(numbers.Rational):
    """Exact rational number with a decimal display precision.

    Rational(numerator=None, denominator=None, precision=None, rounding=None)

    `numerator` may be None (zero), a Rational, a literal string, or any
    int, Fraction, Decimal or float value; if `denominator` is given both
    must be integral. If `precision` is given the value is adjusted to it,
    using `rounding` (default: the context's rounding mode). Without
    `precision` the value is exact, so `rounding` is only checked for
    validity and has no effect.
    """

    _numerator: int
    _denominator: int
    _precision: Optional[int]

    def __new__(cls, numerator: Any = None, denominator: Any = None,
                precision: Any = None,
                rounding: Optional[Rounding] = None) -> "Rational":
        if precision is not None:
            precision = _check_precision(precision)
        if rounding is not None:
            rounding = resolve_rounding(rounding)
        if denominator is None:
            rn = cls._from_obj(numerator)
        else:
            if not (isinstance(numerator, numbers.Integral)
                    and isinstance(denominator, numbers.Integral)):
                raise TypeError("Numerator and denominator must be of type "
                                "'numbers.Integral'.")
            rn = cls._from_ratio(int(numerator), int(denominator))
        if precision is None or precision == rn._precision:
            return rn
        return rn._adjusted(precision, resolve_rounding(rounding))

    # -------- internal builders --------

    @classmethod
    def _make(cls, num: int, den: int, prec: Optional[int]) -> "Rational":
        # num/den must already be reduced, den > 0
        self = object.__new__(cls)
        object.__setattr__(self, "_numerator", num)
        object.__setattr__(self, "_denominator", den)
        object.__setattr__(self, "_precision", prec)
        return self

    @classmethod
    def _from_ratio(cls, num: int, den: int) -> "Rational":
        num, den = _reduce(num, den)
        return cls._make(num, den, _natural_prec(den))

    @classmethod
    def _from_result(cls, num: int, den: int,
                     prec: Optional[int]) -> "Rational":
        """Build an arithmetic result, falling back to natural precision."""
        num, den = _reduce(num, den)
        natural = _natural_prec(den)
        if (prec is None or natural is None
                or not MIN_PREC <= prec <= MAX_PREC):
            prec = natural
        elif ((prec >= 0 and prec < natural)
              or (prec < 0 and (den != 1 or num % 10 ** -prec))):
            prec = natural
        return cls._make(num, den, prec)

    @classmethod
    def _from_peer(cls, peer: Peer, obj: Any) -> "Rational":
        if not peer.is_finite:
            raise ValueError(f"Can't convert {obj!r} to Rational.")
        num, den = _reduce(*peer.as_integer_ratio())
        prec = _peer_precision(peer, den)
        if prec is not None and prec > MAX_PREC:
            raise PrecisionLimitError(prec)
        return cls._make(num, den, prec)

    @classmethod
    def _from_str(cls, literal: str) -> "Rational":
        parsed = parse_literal(literal)
        if parsed.is_quotient:
            return cls._from_ratio(parsed.numerator, parsed.denominator)
        num, den = _reduce(parsed.numerator, parsed.denominator)
        return cls._make(num, den, parsed.precision)

    @classmethod
    def _from_obj(cls, obj: Any) -> "Rational":
        if obj is None:
            return cls._make(0, 1, 0)
        if isinstance(obj, Rational):
            if type(obj) is cls:
                return obj
            return cls._make(obj._numerator, obj._denominator, obj._precision)
        if isinstance(obj, str):
            return cls._from_str(obj)
        peer = classify(obj)
        if peer is None or peer.kind is PeerKind.COMPLEX:
            raise TypeError(f"Can't convert {obj!r} to Rational.")
        return cls._from_peer(peer, obj)

    # -------- alternate constructors --------

    @classmethod
    def from_float(cls, f: Any) -> "Rational":
        """Convert a finite float (or int) exactly to a Rational."""
        if isinstance(f, numbers.Integral):
            return cls._make(int(f), 1, 0)
        if isinstance(f, float) or (isinstance(f, numbers.Real)
                                    and not isinstance(f, numbers.Rational)
                                    and hasattr(f, "as_integer_ratio")):
            return cls._from_peer(classify(f), f)
        raise TypeError(f"{f!r} is not a float or int.")

    @classmethod
    def from_decimal(cls, d: Any) -> "Rational":
        """Convert a finite Decimal (or int) exactly to a Rational."""
        if isinstance(d, numbers.Integral):
            return cls._make(int(d), 1, 0)
        peer = classify(d)
        if peer is not None and peer.kind is PeerKind.DECIMAL:
            return cls._from_peer(peer, d)
        raise TypeError(f"{d!r} is not a Decimal or int.")

    @classmethod
    def from_real(cls, r: Any, exact: bool = True) -> "Rational":
        """Convert a finite real number to a Rational.

        With ``exact=False`` a value without finite decimal expansion is
        rounded to MAX_APPROX_PREC fractional digits (context rounding).
        """
        if not isinstance(r, (numbers.Real, Decimal)):
            raise TypeError(f"{r!r} is not a Real.")
        rn = cls._from_obj(r)
        if exact or rn._precision is not None:
            return rn
        return rn._adjusted(MAX_APPROX_PREC, get_dflt_rounding_mode())

    @classmethod
    def rounded(cls, numerator: Any, denominator: Any,
                n_digits: Optional[int] = None) -> "Rational":
        """Return numerator / denominator rounded to `n_digits` fractional digits.

        Ties go to the even digit; `n_digits` None means an integral result.
        """
        xn, xd = _exact_ratio(numerator)
        yn, yd = _exact_ratio(denominator)
        if yn == 0:
            raise DivisionByZero("Division by zero.")
        prec = 0 if n_digits is None else _check_precision(n_digits)
        rn = cls._from_ratio(xn * yd, xd * yn)
        return rn._adjusted(prec, Rounding.ROUND_HALF_EVEN)

    # -------- properties --------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def precision(self) -> Optional[int]:
        """Number of fractional digits shown, None for non-decimal values."""
        return self._precision

    @property
    def magnitude(self) -> int:
        """Exponent e with 10**e <= abs(self) < 10**(e+1).

        Raises OverflowError for zero.
        """
        if self._numerator == 0:
            raise OverflowError("Result would be '-Infinity'.")
        return ratio_magnitude(self._numerator, self._denominator)

    # -------- rounding --------

    def _adjusted(self, prec: int, rounding: Rounding) -> "Rational":
        cls = type(self)
        num, den = self._numerator, self._denominator
        if self._precision is not None and prec >= self._precision:
            if prec == self._precision:
                return self
            return cls._make(num, den, prec)
        if prec >= 0:
            shift = 10 ** prec
            quot = round_div(num * shift, den, rounding)
            num, den = _reduce(quot, shift)
        else:
            shift = 10 ** -prec
            num, den = round_div(num, den * shift, rounding) * shift, 1
        if DEBUG_RATIONAL:
            _dbg(f"_adjusted: prec={prec} ({rounding.name}) -> "
                 f"num bits={num.bit_length()}, den bits={den.bit_length()}")
        return cls._make(num, den, prec)

    def adjusted(self, precision: Optional[int] = None,
                 rounding: Optional[Rounding] = None) -> "Rational":
        """Return copy of `self`, adjusted to the given `precision`.

        Args:
            precision (numbers.Integral): number of fractional digits
                (default: None)
            rounding (Rounding): rounding mode (default: None)

        Returns:
            Rational: the value rounded to `precision` fractional digits

        If `precision` is None, the minimal precision keeping the value is
        used (a value without finite decimal expansion is returned as is).
        If `rounding` is None, the context's default mode is used.

        Raises:
            TypeError: `precision` is not integral or `rounding` is invalid
            PrecisionLimitError: `precision` exceeds the precision limit
        """
        rounding = resolve_rounding(rounding)
        if precision is None:
            natural = _natural_prec(self._denominator)
            if natural is None or natural == self._precision:
                return self
            return type(self)._make(self._numerator, self._denominator,
                                    natural)
        return self._adjusted(_check_precision(precision), rounding)

    def quantize(self, quant: Any,
                 rounding: Optional[Rounding] = None) -> "Rational":
        """Return integer multiple of `quant` closest to `self`.

        Args:
            quant (numbers.Rational, Decimal or float): quantum to get a
                multiple from
            rounding (Rounding): rounding mode (default: None)

        If `rounding` is None, the context's default mode is used.

        Raises:
            TypeError: `quant` is not a real number
            ValueError: `quant` is zero, infinite or NaN
        """
        rounding = resolve_rounding(rounding)
        if isinstance(quant, Rational):
            q_num, q_den, q_prec = (quant._numerator, quant._denominator,
                                    quant._precision)
        else:
            peer = classify(quant)
            if peer is None or peer.kind is PeerKind.COMPLEX:
                raise TypeError(f"Can't quantize to a '{type(quant).__name__}'.")
            if not peer.is_finite:
                raise ValueError(f"Can't quantize to {quant!r}.")
            q_num, q_den = _reduce(*peer.as_integer_ratio())
            q_prec = _peer_precision(peer, q_den)
        if q_num == 0:
            raise ValueError(f"Can't quantize to {quant!r}.")
        mult = round_to_multiple(self._numerator, self._denominator,
                                 q_num, q_den, rounding)
        return type(self)._from_result(mult * q_num, q_den, q_prec)

    def __round__(self, ndigits: Optional[int] = None
                  ) -> Union[int, "Rational"]:
        """Round `self` to `ndigits` fractional digits, ties to even.

        Without `ndigits` an int is returned.
        """
        if ndigits is None:
            return round_div(self._numerator, self._denominator,
                             Rounding.ROUND_HALF_EVEN)
        return self._adjusted(_check_precision(ndigits),
                              Rounding.ROUND_HALF_EVEN)

    # -------- conversion --------

    def __int__(self) -> int:
        num, den = self._numerator, self._denominator
        return num // den if num >= 0 else -(-num // den)

    __trunc__ = __int__

    def __floor__(self) -> int:
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        return -(-self._numerator // self._denominator)

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair (numerator, denominator) in lowest terms."""
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    # -------- text --------

    def __str__(self) -> str:
        return rational_to_str(self._numerator, self._denominator,
                               self._precision)

    def __repr__(self) -> str:
        return rational_repr(type(self).__name__, self._numerator,
                             self._denominator, self._precision,
                             _natural_prec(self._denominator))

    def __bytes__(self) -> bytes:
        return str(self).encode("ascii")

    def __format__(self, fmt_spec: str) -> str:
        return format_rational(self._numerator, self._denominator,
                               self._precision, fmt_spec,
                               get_dflt_rounding_mode())

    # -------- comparison / hash --------

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        num, den = self._numerator, self._denominator
        if isinstance(other, Rational):
            return op(num * other._denominator, other._numerator * den)
        peer = classify(other)
        if peer is None:
            return NotImplemented
        if peer.kind is PeerKind.COMPLEX:
            if op is operator.eq or op is operator.ne:
                if peer.imag == 0:
                    return self._compare(peer.real, op)
                return op is operator.ne
            return NotImplemented
        if peer.is_nan:
            if op is operator.eq or op is operator.ne:
                return op is operator.ne
            if peer.kind is PeerKind.DECIMAL:
                raise InvalidOperation(
                    f"Comparison of {self!r} with {other!r} not defined.")
            return False
        if peer.is_infinite:
            return op(0, peer.sign)
        o_num, o_den = peer.as_integer_ratio()
        return op(num * o_den, o_num * den)

    def __eq__(self, other: Any) -> Any:
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        try:
            dinv = pow(self._denominator, -1, HASH_MODULUS)
        except ValueError:
            # denominator divisible by the modulus
            hash_ = HASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # -------- unary operators --------

    def __pos__(self) -> "Rational":
        return self

    def __neg__(self) -> "Rational":
        if self._numerator == 0:
            return self
        return type(self)._make(-self._numerator, self._denominator,
                                self._precision)

    def __abs__(self) -> "Rational":
        if self._numerator >= 0:
            return self
        return -self

    # -------- binary operators --------

    __add__, __radd__ = _operators(_add, operator.add)
    __sub__, __rsub__ = _operators(_sub, operator.sub)
    __mul__, __rmul__ = _operators(_mul, operator.mul)
    __truediv__, __rtruediv__ = _operators(_truediv, operator.truediv)
    __mod__, __rmod__ = _operators(_mod, operator.mod)

    def __floordiv__(self, other: Any) -> Any:
        y = _coerce(other)
        if isinstance(y, tuple):
            return _floordiv(self._triple(), y)
        if isinstance(y, float):
            return float(self) // y
        return NotImplemented

    def __rfloordiv__(self, other: Any) -> Any:
        x = _coerce(other)
        if isinstance(x, tuple):
            return _floordiv(x, self._triple())
        if isinstance(x, float):
            return x // float(self)
        return NotImplemented

    def __divmod__(self, other: Any) -> Any:
        y = _coerce(other)
        if isinstance(y, tuple):
            x = self._triple()
            return _floordiv(x, y), type(self)._from_result(*_mod(x, y))
        if isinstance(y, float):
            return divmod(float(self), y)
        return NotImplemented

    def __rdivmod__(self, other: Any) -> Any:
        x = _coerce(other)
        if isinstance(x, tuple):
            y = self._triple()
            return _floordiv(x, y), type(self)._from_result(*_mod(x, y))
        if isinstance(x, float):
            return divmod(x, float(self))
        return NotImplemented

    def __pow__(self, exp: Any, mod: Any = None) -> Any:
        if mod is not None:
            raise TypeError("3rd argument not allowed unless all arguments "
                            "are integers.")
        if isinstance(exp, Rational) and exp._denominator == 1:
            exp = exp._numerator
        if isinstance(exp, numbers.Integral):
            return self._int_pow(int(exp))
        peer = classify(exp)
        if peer is None or peer.kind is PeerKind.COMPLEX:
            return NotImplemented
        return float(self) ** float(exp)

    def __rpow__(self, base: Any, mod: Any = None) -> Any:
        if mod is not None:
            raise TypeError("3rd argument not allowed unless all arguments "
                            "are integers.")
        peer = classify(base)
        if peer is None or peer.kind is PeerKind.COMPLEX:
            return NotImplemented
        if self._denominator == 1:
            if peer.kind in (PeerKind.INTEGER, PeerKind.RATIO):
                return type(self)._from_obj(base)._int_pow(self._numerator)
            return base ** self._numerator
        return float(base) ** float(self)

    def _int_pow(self, exp: int) -> "Rational":
        num, den, prec = self._triple()
        cls = type(self)
        if exp >= 0:
            return cls._from_result(num ** exp, den ** exp,
                                    None if prec is None else prec * exp)
        if num == 0:
            raise DivisionByZero("Zero cannot be raised to a negative power.")
        return cls._from_result(den ** -exp, num ** -exp, None)

    def _triple(self) -> _Triple:
        return self._numerator, self._denominator, self._precision

    # -------- copy / pickle --------

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo: Any) -> "Rational":
        return self

    def __reduce__(self) -> Tuple[Any, Tuple[int, int, Optional[int]]]:
        return type(self), self._triple()


__all__ = [
    "Rational",
]
