"""Arithmetic in the base field of the Pallas curve."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

MODULUS = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
"""The prime order of the Pallas base field."""

S = 32
"""The 2-adicity of ``MODULUS - 1``."""

T = (MODULUS - 1) >> S
"""The odd part of ``MODULUS - 1``."""

GENERATOR = 5
"""A multiplicative generator of the field."""

BYTE_LENGTH = 32
_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1

IntLike = Union["Fp", int]


def _limbs_to_int(limbs: Iterable[int]) -> int:
    """Combine little-endian 64-bit limbs into one integer."""
    result = 0
    for position, limb in enumerate(limbs):
        if not 0 <= limb <= _LIMB_MASK:
            raise ValueError(f"limb {limb!r} does not fit in 64 bits")
        result |= limb << (_LIMB_BITS * position)
    return result


def _exponent(value: int | Iterable[int]) -> int:
    if isinstance(value, int):
        return value
    return _limbs_to_int(value)


class Fp:
    """An element of the Pallas base field, always held reduced."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value % MODULUS

    @property
    def value(self) -> int:
        """The canonical integer representative in ``[0, MODULUS)``."""
        return self._value

    @staticmethod
    def _coerce(other: object) -> Fp | None:
        if isinstance(other, Fp):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fp(other)
        return None

    def __add__(self, other: IntLike) -> Fp:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value + rhs._value)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> Fp:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value - rhs._value)

    def __rsub__(self, other: IntLike) -> Fp:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Fp(lhs._value - self._value)

    def __mul__(self, other: IntLike) -> Fp:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value * rhs._value)

    __rmul__ = __mul__

    def __truediv__(self, other: IntLike) -> Fp:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inverse()

    def __neg__(self) -> Fp:
        return Fp(-self._value)

    def __pow__(self, exponent: int) -> Fp:
        return self.pow(exponent)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fp):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Fp, self._value))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"Fp(0x{self._value:064x})"

    def square(self) -> Fp:
        """Return this element squared."""
        return Fp(self._value * self._value)

    def pow(self, exponent: int | Iterable[int]) -> Fp:
        """Raise to ``exponent``, given as an int or as little-endian 64-bit limbs.

        A negative integer exponent inverts first; that raises
        ``ZeroDivisionError`` for zero.
        """
        power = _exponent(exponent)
        if power < 0:
            return self.inverse().pow(-power)
        return Fp(pow(self._value, power, MODULUS))

    def inverse(self) -> Fp:
        """Return the multiplicative inverse; zero has none."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse in the field")
        return Fp(pow(self._value, MODULUS - 2, MODULUS))

    def to_bytes(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self._value.to_bytes(BYTE_LENGTH, "little")

    @staticmethod
    def from_bytes(data: bytes) -> Fp:
        """Decode 32 little-endian bytes holding a canonical element."""
        raw = bytes(data)
        if len(raw) != BYTE_LENGTH:
            raise ValueError(f"expected {BYTE_LENGTH} bytes, got {len(raw)}")
        value = int.from_bytes(raw, "little")
        if value >= MODULUS:
            raise ValueError("encoding is not a canonical field element")
        return Fp(value)

    def sqrt(self) -> Fp:
        """Return a square root, raising ``ValueError`` for a non-residue."""
        root = sqrt_tonelli_shanks(self, (T - 1) // 2)
        if root is None:
            raise ValueError(f"{self!r} is not a square in the field")
        return root


ZERO = Fp(0)
ONE = Fp(1)
ROOT_OF_UNITY = Fp(GENERATOR).pow(T)
"""A primitive ``2**S``-th root of unity."""


def from_raw(limbs: Iterable[int]) -> Fp:
    """Build an element from four little-endian 64-bit limbs, reducing it."""
    parts = list(limbs)
    if len(parts) != 4:
        raise ValueError(f"expected 4 limbs, got {len(parts)}")
    return Fp(_limbs_to_int(parts))


def sqrt_tonelli_shanks(value: Fp, tm1d2: int | Iterable[int]) -> Fp | None:
    """Square root by Tonelli-Shanks, or ``None`` if ``value`` is not a square.

    ``tm1d2`` is ``(T - 1) // 2``, as an int or as little-endian 64-bit limbs.
    """
    w = value.pow(tm1d2)

    v = S
    x = w * value
    b = x * w
    z = ROOT_OF_UNITY

    for max_v in range(S, 0, -1):
        k = 1
        tmp = b.square()
        j_less_than_v = True

        for j in range(2, max_v):
            tmp_is_one = tmp == ONE
            squared = (z if tmp_is_one else tmp).square()
            if not tmp_is_one:
                tmp = squared
            new_z = squared if tmp_is_one else z
            j_less_than_v = j_less_than_v and j != v
            if not tmp_is_one:
                k = j
            if j_less_than_v:
                z = new_z

        if b != ONE:
            x = x * z
        z = z.square()
        b = b * z
        v = k

    return x if x * x == value else None