import pytest

from pallas_poseidon.field import MODULUS, Fp, from_raw
from pallas_poseidon.mds import mds, mds_inv


def _product(left, right):
    size = len(left)
    return [
        [sum((left[i][k] * right[k][j] for k in range(size)), Fp(0)) for j in range(size)]
        for i in range(size)
    ]


def _identity(size):
    return [[Fp(1) if i == j else Fp(0) for j in range(size)] for i in range(size)]


def test_shape():
    for matrix in (mds(), mds_inv()):
        assert len(matrix) == 3
        assert all(len(row) == 3 for row in matrix)


def test_mds_times_inverse_is_identity():
    assert _product(mds(), mds_inv()) == _identity(3)


def test_inverse_times_mds_is_identity():
    assert _product(mds_inv(), mds()) == _identity(3)


def test_first_mds_entry_matches_limbs():
    expected = from_raw(
        [0x323F_2486_D7E1_1B63, 0x97D7_A0AB_2385_0B56, 0xB3D5_9FBD_C8C9_EAD4, 0x0AB5_E5B8_74A6_8DE7]
    )
    assert mds()[0][0] == expected


def test_last_inverse_entry_matches_limbs():
    expected = from_raw(
        [0xADC8_933C_6F3C_72EE, 0x87A7_435D_30F8_BE81, 0x3C26_FA4B_7D25_B1E4, 0x0D0C_2EFD_6472_F12A]
    )
    assert mds_inv()[2][2] == expected


@pytest.mark.parametrize("getter", [mds, mds_inv])
def test_entries_are_canonical_and_nonzero(getter):
    for row in getter():
        for entry in row:
            assert 0 < entry.value < MODULUS


@pytest.mark.parametrize("getter", [mds, mds_inv])
def test_returned_list_is_a_fresh_copy(getter):
    first = getter()
    original = list(first)
    first.clear()
    assert getter() == original