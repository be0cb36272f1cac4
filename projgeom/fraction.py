# coding: utf-8

import logging
import math
import numbers
import operator

from .utils import abs_int, gcd


def _as_integral(x):
    if isinstance(x, bool):
        return int(x)
    if not isinstance(x, numbers.Integral):
        raise TypeError('Fraction needs integral numerator and denominator, got {!r}'.format(x))
    return x


def _normalize(num, den):
    """Canonical pair: den >= 0, num and den coprime, num in {-1,0,1} if den == 0."""
    if den < 0:
        num = -num
        den = -den
    common = gcd(num, den)
    if common != 0 and common != 1:
        num //= common
        den //= common
    if den == 0:
        logging.debug('zero denominator, fraction collapsed to %s/0', num)
    return num, den


def _forward(fraction_op, int_op):
    """Dispatch binary method on the type of the right operand."""
    def method(self, other):
        if isinstance(other, Fraction):
            return fraction_op(self, other)
        if isinstance(other, numbers.Integral):
            return int_op(self, self._coerce(other))
        return NotImplemented
    return method


def _reverse(int_op):
    # left operand is not a Fraction: only integers are supported there
    def method(self, other):
        if isinstance(other, numbers.Integral):
            return int_op(self, self._coerce(other))
        return NotImplemented
    return method


def _negated(method):
    def negated(self, other):
        result = method(self, other)
        if result is NotImplemented:
            return result
        return not result
    return negated


class Fraction:
    """
    Exact rational number num/den over an arbitrary integral type.

    Immutable, hashable.
    The integral type Z is the type of the numerator: python int, or any
    type registered as numbers.Integral that supports + - * // %, comparison
    and construction from small ints. Integer operands are converted to Z.
    Fractions over different integral types are compared by plain
    cross-multiplication. In arithmetic between them int * Z gives Z, so
    Fraction(1, 3) + Fraction(Z(1), Z(2)) has Z numerator and denominator
    whichever side the Z fraction is on.

    The pair (num, den) is always kept in canonical form:
    - den >= 0, the sign is carried by num;
    - gcd(num, den) is 1 (or 0 for 0/0).
    Zero denominator is a legal value, the signed infinity:
    num is then collapsed to its sign, so the only such fractions are
    1/0, -1/0 and 0/0 (undefined). Nothing raises on division by zero.

    Arithmetic and comparisons factor out common divisors before
    multiplying, which keeps intermediate values small; that matters for
    fixed-width Z, overflow itself is not detected.
    """

    __slots__ = ('_num', '_den')

    def __init__(self, num=0, den=None):
        num = _as_integral(num)
        if den is None:
            self._num = num
            self._den = type(num)(1)
            return
        den = _as_integral(den)
        if type(den) is not type(num):
            den = type(num)(den)
        self._num, self._den = _normalize(num, den)

    @classmethod
    def _make(cls, num, den):
        """Create instance from a pair already in canonical form."""
        assert den >= 0, 'negative denominator: {}/{}'.format(num, den)
        obj = object.__new__(cls)
        obj._num = num
        obj._den = den
        return obj

    @classmethod
    def _reduce(cls, num, den):
        return cls._make(*_normalize(num, den))

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, numbers.Integral):
            return cls(x)
        else:
            raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))

    @property
    def num(self):
        return self._num

    @property
    def den(self):
        return self._den

    def _coerce(self, i):
        """Convert integer operand to the integral type of this fraction."""
        if isinstance(i, bool):
            i = int(i)
        z_type = type(self._num)
        return i if type(i) is z_type else z_type(i)

    #
    # comparison
    #

    def _compare(self, other, op):
        """
        Apply op (== or <) to self and other without naive cross-multiplication.

        Denominators are divided by their gcd first, so the products are
        bounded by the reduced denominators.
        """
        if type(self._num) is not type(other._num):
            # gcd of different integral types is not defined
            return op(self._num * other._den, self._den * other._num)
        if self._den == other._den:
            return op(self._num, other._num)
        common = gcd(self._den, other._den)
        if common == 0:
            return op(other._den * self._num, self._den * other._num)
        return op((other._den // common) * self._num, (self._den // common) * other._num)

    def _eq(self, other):
        return self._compare(other, operator.eq)

    def _lt(self, other):
        return self._compare(other, operator.lt)

    def _gt(self, other):
        return other._compare(self, operator.lt)

    def _eq_int(self, i):
        if self._den == 1 or i == 0:
            return self._num == i
        return self._num == self._den * i

    def _lt_int(self, i):
        return self._num < self._den * i

    def _gt_int(self, i):
        return self._den * i < self._num

    __eq__ = _forward(_eq, _eq_int)
    __lt__ = _forward(_lt, _lt_int)
    __gt__ = _forward(_gt, _gt_int)
    __ne__ = _negated(__eq__)
    __le__ = _negated(__gt__)
    __ge__ = _negated(__lt__)

    def __hash__(self):
        # must agree with hash(int) for integer values
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    #
    # arithmetic
    #

    def __neg__(self):
        return self._make(-self._num, self._den)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._make(abs_int(self._num), self._den)

    def reciprocal(self):
        """
        Inverse fraction den/num; 0 and infinity are swapped.

        Returns a new fraction, self is left unchanged: use f = f.reciprocal(),
        as with the rebinding in-place operators.
        """
        return self._reduce(self._den, self._num)

    def _add(self, other):
        if self._den == other._den:
            # covers both infinite: then both denominators are 0
            return self._reduce(self._num + other._num, self._den)
        common = gcd(self._den, other._den)
        other_den = other._den // common
        num = self._num * other_den + other._num * (self._den // common)
        return self._reduce(num, self._den * other_den)

    def _add_int(self, i):
        if i == 0:
            return self
        if self._den == 1:
            return self._make(self._num + i, self._den)
        return self._reduce(self._num + self._den * i, self._den)

    def _sub(self, other):
        return self._add(-other)

    def _sub_int(self, i):
        return self._add_int(-i)

    def _rsub_int(self, i):
        return (-self)._add_int(i)

    def _mul(self, other):
        # numerator of each factor is reduced against denominator of the other one,
        # self.num first
        n1, d1 = self._num, self._den
        n2, d2 = other._num, other._den
        g1 = gcd(n1, d2)
        if g1 > 1:
            n1 //= g1
            d2 //= g1
        g2 = gcd(n2, d1)
        if g2 > 1:
            n2 //= g2
            d1 //= g2
        return self._reduce(n1 * n2, d1 * d2)

    def _mul_int(self, i):
        common = gcd(i, self._den)
        if common <= 1:
            return self._reduce(self._num * i, self._den)
        return self._reduce(self._num * (i // common), self._den // common)

    def _truediv(self, other):
        return self._mul(other.reciprocal())

    def _truediv_int(self, i):
        common = gcd(self._num, i)
        if common <= 1:
            return self._reduce(self._num, self._den * i)
        return self._reduce(self._num // common, self._den * (i // common))

    def _rtruediv_int(self, i):
        return self.reciprocal()._mul_int(i)

    __add__ = _forward(_add, _add_int)
    __sub__ = _forward(_sub, _sub_int)
    __mul__ = _forward(_mul, _mul_int)
    __truediv__ = _forward(_truediv, _truediv_int)
    __radd__ = _reverse(_add_int)
    __rsub__ = _reverse(_rsub_int)
    __rmul__ = _reverse(_mul_int)
    __rtruediv__ = _reverse(_rtruediv_int)

    def __pow__(self, power):
        """
        Power with integral exponent: num**k / den**k, negative k via reciprocal.

        Since 0 ** 0 == 1, any fraction to the power 0 is 1, including
        the infinities and 0/0.
        """
        if not isinstance(power, numbers.Integral):
            return NotImplemented
        if power < 0:
            return self.reciprocal() ** (-power)
        return self._make(self._num ** power, self._den ** power)

    #
    # conversions
    #

    def __float__(self):
        if self._den == 0:
            if self._num == 0:
                return math.nan
            return math.inf if self._num > 0 else -math.inf
        return int(self._num) / int(self._den)

    # gives floor, as int division; fails for infinite values
    def __int__(self):
        return int(self._num // self._den)

    def __bool__(self):
        return self._num != 0

    def __str__(self):
        return '({}/{})'.format(self._num, self._den)

    def __repr__(self):
        return 'Fraction({}, {})'.format(self._num, self._den)
