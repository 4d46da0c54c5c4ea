"""MDS matrix of the P128Pow5T3 Poseidon instance over the Pallas base field.

Both the matrix and its inverse are 3x3, with each entry written as four
little-endian 64-bit limbs.
"""

from __future__ import annotations

from functools import cache

from .field import Fp, from_raw

WIDTH = 3

_Limbs = tuple[int, int, int, int]
_RawMatrix = tuple[
    tuple[_Limbs, _Limbs, _Limbs],
    tuple[_Limbs, _Limbs, _Limbs],
    tuple[_Limbs, _Limbs, _Limbs],
]

_RAW_MDS: _RawMatrix = (
    (
        (0x323F_2486_D7E1_1B63, 0x97D7_A0AB_2385_0B56, 0xB3D5_9FBD_C8C9_EAD4, 0x0AB5_E5B8_74A6_8DE7),
        (0x8ECA_5596_E996_AB5E, 0x240D_4A7C_BF73_5736, 0x293F_0F0D_886C_7954, 0x3191_6628_E58A_5ABB),
        (0x19D1_CF25_D8E8_345D, 0xA0A3_B71A_5FB1_5735, 0xD803_952B_BB36_4FDF, 0x07C0_45D5_F5E9_E5A6),
    ),
    (
        (0xD049_CDC8_D085_167C, 0x3A0A_4640_48BD_770A, 0xF8E2_4F66_822C_2D9F, 0x2331_6263_0EBF_9ED7),
        (0x4022_7011_3E04_7A2E, 0x78F8_365C_85BB_AB07, 0xB366_6454_8D60_957D, 0x25CA_E259_9892_A8B0),
        (0xF84D_806F_685F_747A, 0x9AAD_3D82_62EF_D83F, 0x7493_8717_989A_1957, 0x22F5_B5E1_E608_1C97),
    ),
    (
        (0xFEE7_A994_4F84_DBE4, 0x2168_0EAB_C56B_C15D, 0xF333_AA91_C383_3464, 0x2E29_DD59_C64B_1037),
        (0xC771_EFFA_4326_3664, 0xCBEA_F48B_3A06_24C3, 0x92D1_5E7D_CEEF_1665, 0x1D1A_AB4E_C1CD_6788),
        (0x1563_9415_F6E8_5EF1, 0x7587_2C39_B59A_31F6, 0x51E0_CBEA_D655_16B9, 0x3BF7_6308_6A18_9364),
    ),
)

_RAW_MDS_INV: _RawMatrix = (
    (
        (0xC6DE_463C_D140_4E6B, 0x4543_705F_35E9_8AB5, 0xCC59_FFD0_0DE8_6443, 0x2CC0_57F3_FA14_687A),
        (0x1718_4041_7CAB_7576, 0xFADB_F8AE_7AE2_4796, 0x5FD7_2B55_DF20_8385, 0x32E7_C439_F2F9_67E5),
        (0x9426_45BD_7D44_64E0, 0x1403_DB6F_5030_2040, 0xF461_778A_BF6C_91FA, 0x2EAE_5DF8_C311_5969),
    ),
    (
        (0xA1CA_1516_A4A1_A6A0, 0x13F0_74FD_E9A1_8B29, 0xDB18_B4AE_FE68_D26D, 0x07BF_3684_8106_7199),
        (0xE824_25BC_1B23_A059, 0xBB1D_6504_0C85_C1BF, 0x018A_918B_9DAC_5DAD, 0x2AEC_6906_C63F_3CF1),
        (0xE054_1ADF_238E_0781, 0x76B2_A713_9DB7_1B36, 0x1215_944A_64A2_46B2, 0x0952_E024_3AEC_2AF0),
    ),
    (
        (0x2A41_8D8D_73A7_C908, 0xAEF9_112E_952F_DBB5, 0x723A_63A0_C09D_AB26, 0x2FCB_BA6F_9159_A219),
        (0x76EF_AB42_D4FB_A90B, 0xC5E4_960D_7424_CD37, 0xB4DD_D4B4_D645_2256, 0x1EC7_3725_74F3_851B),
        (0xADC8_933C_6F3C_72EE, 0x87A7_435D_30F8_BE81, 0x3C26_FA4B_7D25_B1E4, 0x0D0C_2EFD_6472_F12A),
    ),
)

Matrix = tuple[tuple[Fp, Fp, Fp], ...]


def _decode(raw: _RawMatrix) -> Matrix:
    return tuple((from_raw(a), from_raw(b), from_raw(c)) for a, b, c in raw)


@cache
def _mds() -> Matrix:
    return _decode(_RAW_MDS)


@cache
def _mds_inv() -> Matrix:
    return _decode(_RAW_MDS_INV)


def mds() -> list[tuple[Fp, Fp, Fp]]:
    """Return the 3x3 MDS matrix as a list of rows.

    Each call returns a new list, so callers may change it freely.
    """
    return list(_mds())


def mds_inv() -> list[tuple[Fp, Fp, Fp]]:
    """Return the inverse of the MDS matrix as a list of rows.

    Each call returns a new list, so callers may change it freely.
    """
    return list(_mds_inv())