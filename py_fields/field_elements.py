import functools
import logging
import operator

from .exceptions import FieldTypeMismatch, ShapeError
from .modular import legendre, mod_exp, mod_inverse, mod_sqrt
from .poly_utils import deg, poly_rounded_div, zeros

logger = logging.getLogger(__name__)


# True if `small` is the base field of `big`, or of one of its bases
def _embeds(small, big):
    while issubclass(big, FQP):
        big = big.FQ
        if small._compatible(big):
            return True
    return False


def _mismatch(a, b):
    return FieldTypeMismatch("cannot combine %s with %s" % (type(a).__name__, type(b).__name__))


# A class for field elements in FQ. Subclasses set `field_modulus`; wrap a
# number in such a subclass and it becomes a field element.
class FQ():
    field_modulus = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get('field_modulus') is None:
            return
        p = cls.field_modulus
        if not isinstance(p, int) or p < 2:
            raise ValueError("field modulus must be an integer > 1, got %r" % (p,))
        logger.debug("created prime field %s with a %d-bit modulus", cls.__name__, p.bit_length())

    def __init__(self, n):
        if self.field_modulus is None:
            raise TypeError("%s has no field modulus, create one with prime_field()" % type(self).__name__)
        if isinstance(n, FQ):
            if not self._compatible(type(n)):
                raise _mismatch(self, n)
            n = n.n
        self.n = operator.index(n) % self.field_modulus

    @classmethod
    def _compatible(cls, other):
        return issubclass(other, FQ) and other.field_modulus == cls.field_modulus

    @classmethod
    def coerce(cls, value):
        if type(value) is cls:
            return value
        return cls(value)

    # Residue of the other operand, or NotImplemented if the operation
    # belongs to a bigger field
    def _residue(self, other):
        if isinstance(other, int):
            return other
        if isinstance(other, FQ) and self._compatible(type(other)):
            return other.n
        if isinstance(other, (FQ, FQP)):
            if _embeds(type(self), type(other)):
                return NotImplemented
            raise _mismatch(self, other)
        return NotImplemented

    def __add__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(self.n + on)

    def __sub__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(self.n - on)

    def __rsub__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(on - self.n)

    def __mul__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(self.n * on)

    __radd__ = __add__
    __rmul__ = __mul__

    def __truediv__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(self.n * mod_inverse(on, self.field_modulus))

    def __rtruediv__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return type(self)(on * mod_inverse(self.n, self.field_modulus))

    def __pow__(self, other):
        if other < 0:
            return self.inv() ** -other
        return type(self)(mod_exp(self.n, other, self.field_modulus))

    def __neg__(self):
        return type(self)(self.field_modulus - self.n)

    def __eq__(self, other):
        on = self._residue(other)
        if on is NotImplemented:
            return on
        return self.n == on % self.field_modulus

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash(self.n)

    def __int__(self):
        return self.n

    def __repr__(self):
        return '%s(%d)' % (type(self).__name__, self.n)

    def inv(self):
        return type(self)(mod_inverse(self.n, self.field_modulus))

    def square(self):
        return self * self

    def sqrt(self):
        return type(self)(mod_sqrt(self.n, self.field_modulus))

    def is_square(self):
        if self.n == 0 or self.field_modulus == 2:
            return True
        return legendre(self.n, self.field_modulus) == 1

    def is_zero(self):
        return self.n == 0

    @classmethod
    def one(cls):
        return cls(1)

    @classmethod
    def zero(cls):
        return cls(0)


# A class for elements in polynomial extension fields. Subclasses set `FQ`,
# the field the coefficients live in (FQ or another FQP subclass), and
# `modulus_coeffs`, the coefficients of the modulus without the leading [1].
class FQP():
    FQ = None
    modulus_coeffs = None
    degree = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.FQ is None or cls.modulus_coeffs is None:
            return
        base = cls.FQ
        if not (isinstance(base, type) and issubclass(base, (FQ, FQP))):
            raise TypeError("base of %s must be a field type, got %r" % (cls.__name__, base))
        if len(cls.modulus_coeffs) == 0:
            raise ValueError("modulus of %s has no coefficients" % cls.__name__)
        cls.modulus_coeffs = tuple(base.coerce(c) for c in cls.modulus_coeffs)
        cls.degree = len(cls.modulus_coeffs)
        logger.debug("created degree %d extension %s over %s", cls.degree, cls.__name__, base.__name__)

    def __init__(self, coeffs):
        if self.modulus_coeffs is None:
            raise TypeError("%s has no modulus, create one with extension_field()" % type(self).__name__)
        if isinstance(coeffs, FQP) and self._compatible(type(coeffs)):
            coeffs = coeffs.coeffs
        coeffs = list(coeffs)
        if len(coeffs) != self.degree:
            raise ShapeError("%s takes %d coefficients, got %d" % (type(self).__name__, self.degree, len(coeffs)))
        self.coeffs = tuple(self.FQ.coerce(c) for c in coeffs)

    @classmethod
    def _compatible(cls, other):
        if other is cls:
            return True
        return (issubclass(other, FQP) and other.degree == cls.degree and
                cls.FQ._compatible(other.FQ) and other.modulus_coeffs == cls.modulus_coeffs)

    # Ints and elements of any field below this one embed as constants
    @classmethod
    def _is_scalar(cls, value):
        return isinstance(value, int) or (isinstance(value, (FQ, FQP)) and _embeds(type(value), cls))

    @classmethod
    def coerce(cls, value):
        if isinstance(value, FQP) and cls._compatible(type(value)):
            return value if type(value) is cls else cls(value)
        if cls._is_scalar(value):
            return cls([value] + [0] * (cls.degree - 1))
        if isinstance(value, (FQ, FQP)):
            raise FieldTypeMismatch("cannot coerce %s into %s" % (type(value).__name__, cls.__name__))
        return cls(value)

    # The other operand as an element of this field, or NotImplemented if
    # the operation belongs to a bigger field
    def _operand(self, other):
        if isinstance(other, FQP) and self._compatible(type(other)):
            return other
        if self._is_scalar(other):
            return self.coerce(other)
        if isinstance(other, (FQ, FQP)):
            if _embeds(type(self), type(other)):
                return NotImplemented
            raise _mismatch(self, other)
        return NotImplemented

    def __add__(self, other):
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return type(self)([x + y for x, y in zip(self.coeffs, o.coeffs)])

    __radd__ = __add__

    def __sub__(self, other):
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return type(self)([x - y for x, y in zip(self.coeffs, o.coeffs)])

    def __rsub__(self, other):
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return type(self)([y - x for x, y in zip(self.coeffs, o.coeffs)])

    def __mul__(self, other):
        if self._is_scalar(other):
            return self.scalar_mul(other)
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return self.mul(o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._is_scalar(other):
            return self.scalar_div(other)
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return self.div(o)

    def __rtruediv__(self, other):
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return o.div(self)

    def scalar_mul(self, other):
        return type(self)([c * other for c in self.coeffs])

    def scalar_div(self, other):
        return type(self)([c / other for c in self.coeffs])

    def mul(self, other):
        if not (isinstance(other, FQP) and self._compatible(type(other))):
            raise _mismatch(self, other)
        b = zeros(self.degree * 2 - 1, self.FQ)
        for i in range(self.degree):
            for j in range(self.degree):
                b[i + j] += self.coeffs[i] * other.coeffs[j]
        # Reduce from the top: x^d = -sum(modulus_coeffs[i] * x^i)
        while len(b) > self.degree:
            exp, top = len(b) - self.degree - 1, b.pop()
            for i in range(self.degree):
                b[exp + i] -= top * self.modulus_coeffs[i]
        return type(self)(b)

    def div(self, other):
        return self.mul(other.inv())

    def __pow__(self, other):
        if other < 0:
            return self.inv() ** -other
        o = self.one()
        t = self
        while other > 0:
            if other & 1:
                o = o.mul(t)
            other >>= 1
            if other:
                t = t.mul(t)
        return o

    # Extended euclidean algorithm used to find the modular inverse
    def inv(self):
        d = self.degree
        lm, hm = [self.FQ.one()] + zeros(d, self.FQ), zeros(d + 1, self.FQ)
        low, high = list(self.coeffs) + [self.FQ.zero()], list(self.modulus_coeffs) + [self.FQ.one()]
        while deg(low):
            r = poly_rounded_div(high, low)
            r += zeros(d + 1 - len(r), self.FQ)
            nm = [x for x in hm]
            new = [x for x in high]
            for i in range(d + 1):
                for j in range(d + 1 - i):
                    nm[i + j] -= lm[i] * r[j]
                    new[i + j] -= low[i] * r[j]
            lm, low, hm, high = nm, new, lm, low
        # low[0] is zero only if self is zero; the division then raises
        return type(self)(lm[:d]).scalar_div(low[0])

    def square(self):
        return self.mul(self)

    def is_zero(self):
        return all(c.is_zero() for c in self.coeffs)

    def __eq__(self, other):
        o = self._operand(other)
        if o is NotImplemented:
            return o
        return self.coeffs == o.coeffs

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash(self.coeffs)

    def __neg__(self):
        return type(self)([-c for c in self.coeffs])

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, list(self.coeffs))

    @classmethod
    def one(cls):
        return cls([1] + [0] * (cls.degree - 1))

    @classmethod
    def zero(cls):
        return cls([0] * cls.degree)


@functools.lru_cache(maxsize=None)
def _prime_field(modulus, name):
    return type(name, (FQ,), {'field_modulus': modulus})


def prime_field(modulus, name='FQ'):
    """
    Returns the field of integers modulo `modulus`. Primality is not
    checked. Calling this twice with the same arguments returns the same
    type.
    """
    return _prime_field(operator.index(modulus), name)


def _absolute_degree(field):
    if issubclass(field, FQP):
        return field.degree * _absolute_degree(field.FQ)
    return 1


@functools.lru_cache(maxsize=None)
def _extension_field(base, modulus_coeffs, name):
    return type(name, (FQP,), {'FQ': base, 'modulus_coeffs': modulus_coeffs})


def extension_field(base, modulus_coeffs, name=None):
    """
    Returns the field base[x] / (x^d + sum(modulus_coeffs[i] * x^i)) where
    d = len(modulus_coeffs). The modulus must be irreducible over `base`
    for inversion to work; this is not checked.

    The default name counts the degree over the prime field, so a
    quadratic extension of FQ is FQ2 and a cubic extension of that is FQ6.
    """
    if not (isinstance(base, type) and issubclass(base, (FQ, FQP))):
        raise TypeError("base must be a field type, got %r" % (base,))
    modulus_coeffs = tuple(base.coerce(c) for c in modulus_coeffs)
    if not modulus_coeffs:
        raise ValueError("modulus polynomial has no coefficients")
    if name is None:
        name = 'FQ%d' % (len(modulus_coeffs) * _absolute_degree(base))
    return _extension_field(base, modulus_coeffs, name)
