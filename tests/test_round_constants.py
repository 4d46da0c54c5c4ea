import pytest

from pallas_poseidon.field import MODULUS, Fp, from_raw
from pallas_poseidon.round_constants import ROUNDS, WIDTH, round_constants


def test_table_shape_matches_rounds_and_width():
    table = round_constants()
    assert len(table) == ROUNDS == 64
    assert all(len(row) == WIDTH == 3 for row in table)


def test_total_number_of_constants_is_192():
    assert sum(len(row) for row in round_constants()) == 192


def test_first_row_matches_source_limbs():
    first = round_constants()[0]
    assert first[0] == from_raw(
        [0x5753_8C25_9642_6303, 0x4E71_162F_3100_3B70, 0x353F_628F_76D1_10F3, 0x360D_7470_611E_473D]
    )
    assert first[1] == from_raw(
        [0xBDB7_4213_BF63_188B, 0x4908_AC2F_12EB_E06F, 0x5DC3_C6C5_FEBF_AA31, 0x2BAB_94D7_AE22_2D13]
    )
    assert first[2] == from_raw(
        [0x0939_D927_53CC_5DC8, 0xEF77_E7D7_3676_6C5D, 0x2BF0_3E1A_29AA_871F, 0x150C_93FE_F652_FB1C]
    )


def test_last_row_matches_source_limbs():
    last = round_constants()[-1]
    assert last[0] == from_raw(
        [0x961F_C818_DCBB_66B5, 0xC9F2_B325_7530_DAFE, 0xD97A_11D6_3088_F5D9, 0x2901_EC61_942D_34AA]
    )
    assert last[2] == from_raw(
        [0x1211_B9E2_190D_6852, 0xA004_ABE8_E015_28C4, 0x5C1E_3E9E_27A5_71C3, 0x3A8A_6282_9512_1D5C]
    )


def test_first_constant_bytes_are_little_endian_limbs():
    first = round_constants()[0][0]
    assert first.to_bytes()[:8] == bytes.fromhex("03634296258c5357")


def test_all_constants_are_canonical_and_roundtrip_through_bytes():
    for row in round_constants():
        for constant in row:
            assert 0 < constant.value < MODULUS
            assert Fp.from_bytes(constant.to_bytes()) == constant


def test_all_constants_are_distinct():
    flat = [constant for row in round_constants() for constant in row]
    assert len(set(flat)) == len(flat)


def test_each_call_returns_an_independent_list():
    first = round_constants()
    first.clear()
    second = round_constants()
    assert len(second) == 64
    assert second is not first


def test_repeated_calls_agree():
    first = round_constants()
    second = round_constants()
    assert len(first) == len(second) == 64
    assert first == second
    expected = from_raw(
        [0x825E_4C2B_B749_25CA, 0x2504_40A9_9D6B_8AF3, 0xBBDB_63DB_D52D_AD16, 0x0F69_F185_4D20_CA0C]
    )
    assert first[5][2] == expected
    assert second[5][2] == expected


@pytest.mark.parametrize("index", [0, 7, 8, 63])
def test_rows_are_tuples_of_field_elements(index):
    row = round_constants()[index]
    assert isinstance(row, tuple)
    assert all(isinstance(constant, Fp) for constant in row)
    assert row[0] + row[1] + row[2] - row[1] - row[2] == row[0]