import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pallas_poseidon.field import (
    MODULUS,
    ONE,
    ROOT_OF_UNITY,
    S,
    T,
    ZERO,
    Fp,
    from_raw,
    sqrt_tonelli_shanks,
)

element_values = st.integers(min_value=0, max_value=MODULUS - 1)
nonzero_values = st.integers(min_value=1, max_value=MODULUS - 1)

MODULUS_LIMBS = [
    0x992D30ED00000001,
    0x224698FC094CF91B,
    0x0000000000000000,
    0x4000000000000000,
]

# A 32-byte encoding taken from the hash test vectors.
VECTOR_BYTES = bytes(
    [
        0x83, 0x58, 0xD7, 0x11, 0xA0, 0x32, 0x9D, 0x38, 0xBE, 0xCD, 0x54, 0xFB, 0xA7,
        0xC2, 0x83, 0xED, 0x3E, 0x08, 0x9A, 0x39, 0xC9, 0x1B, 0x6A, 0x9D, 0x10, 0xEF,
        0xB0, 0x2B, 0xC3, 0xF1, 0x2F, 0x06,
    ]
)


def test_from_raw_of_modulus_is_zero():
    assert from_raw(MODULUS_LIMBS) == ZERO


def test_from_raw_one():
    assert from_raw([1, 0, 0, 0]) == ONE


def test_from_raw_limb_order_is_little_endian():
    assert from_raw([0, 1, 0, 0]) == Fp(1 << 64)


def test_from_raw_rejects_wrong_limb_count():
    with pytest.raises(ValueError):
        from_raw([1, 2, 3])


def test_from_raw_rejects_oversized_limb():
    with pytest.raises(ValueError):
        from_raw([1 << 64, 0, 0, 0])


def test_one_encoding():
    assert ONE.to_bytes() == b"\x01" + b"\x00" * 31


def test_vector_bytes_round_trip():
    assert Fp.from_bytes(VECTOR_BYTES).to_bytes() == VECTOR_BYTES


def test_from_bytes_rejects_modulus():
    with pytest.raises(ValueError):
        Fp.from_bytes(MODULUS.to_bytes(32, "little"))


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Fp.from_bytes(b"\x00" * 31)


def test_root_of_unity_has_order_two_to_s():
    assert ROOT_OF_UNITY.pow(1 << S) == ONE
    assert ROOT_OF_UNITY.pow(1 << (S - 1)) == -ONE


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ZERO.inverse()


def test_sqrt_of_non_residue_raises():
    # The multiplicative generator is never a square.
    with pytest.raises(ValueError):
        Fp(5).sqrt()


def test_tonelli_shanks_non_residue_is_none():
    assert sqrt_tonelli_shanks(Fp(5), (T - 1) // 2) is None


def test_tonelli_shanks_accepts_limbs():
    tm1d2 = (T - 1) // 2
    limbs = [(tm1d2 >> (64 * i)) & ((1 << 64) - 1) for i in range(4)]
    root = sqrt_tonelli_shanks(Fp(4), limbs)
    assert root.square() == Fp(4)


def test_sqrt_of_zero_and_one():
    assert ZERO.sqrt() == ZERO
    assert ONE.sqrt().square() == ONE


@settings(max_examples=25, deadline=None)
@given(element_values)
def test_sqrt_of_square(n):
    a = Fp(n)
    root = a.square().sqrt()
    assert root.square() == a.square()
    assert root in (a, -a)


@given(element_values)
def test_bytes_round_trip(n):
    a = Fp(n)
    assert Fp.from_bytes(a.to_bytes()) == a


@given(nonzero_values)
def test_inverse(n):
    a = Fp(n)
    assert a * a.inverse() == ONE
    assert a / a == ONE


@given(element_values, element_values)
def test_add_sub_round_trip(m, n):
    a = Fp(m)
    b = Fp(n)
    assert (a + b) - b == a
    assert a - a == ZERO


@given(element_values)
def test_square_matches_mul_and_pow(n):
    a = Fp(n)
    assert a.square() == a * a
    assert a.pow(2) == a * a
    assert a ** 3 == a * a * a


@given(nonzero_values)
def test_fermat(n):
    assert Fp(n).pow(MODULUS - 1) == ONE


@given(nonzero_values)
def test_negative_pow_inverts(n):
    a = Fp(n)
    assert a.pow(-1) == a.inverse()


@given(st.integers())
def test_reduction(n):
    assert int(Fp(n)) == n % MODULUS
    assert Fp(n) == Fp(n + MODULUS)