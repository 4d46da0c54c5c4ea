"""Round constants of the P128Pow5T3 Poseidon instance over the Pallas base field.

The table holds 64 rounds (8 full and 56 partial) of width 3, giving 192
constants. Each constant is written as four little-endian 64-bit limbs.
"""

from __future__ import annotations

from functools import cache

from .field import Fp, from_raw

WIDTH = 3
ROUNDS = 64

_Limbs = tuple[int, int, int, int]

_RAW_ROUND_CONSTANTS: tuple[tuple[_Limbs, _Limbs, _Limbs], ...] = (
    (
        (0x5753_8C25_9642_6303, 0x4E71_162F_3100_3B70, 0x353F_628F_76D1_10F3, 0x360D_7470_611E_473D),
        (0xBDB7_4213_BF63_188B, 0x4908_AC2F_12EB_E06F, 0x5DC3_C6C5_FEBF_AA31, 0x2BAB_94D7_AE22_2D13),
        (0x0939_D927_53CC_5DC8, 0xEF77_E7D7_3676_6C5D, 0x2BF0_3E1A_29AA_871F, 0x150C_93FE_F652_FB1C),
    ),
    (
        (0x1425_9DCE_5377_82B2, 0x03CC_0A60_141E_894E, 0x955D_55DB_56DC_57C1, 0x3270_661E_6892_8B3A),
        (0xCE9F_B9FF_C345_AFB3, 0xB407_C370_F2B5_A1CC, 0xA0B7_AFE4_E205_7299, 0x073F_116F_0412_2E25),
        (0x8EBA_D76F_C715_54D8, 0x55C9_CD20_61AE_93CA, 0x7AFF_D09C_1F53_F5FD, 0x2A32_EC5C_4EE5_B183),
    ),
    (
        (0x2D8C_CBE2_92EF_EEAD, 0x634D_24FC_6E25_59F2, 0x651E_2CFC_7406_28CA, 0x2703_26EE_039D_F19E),
        (0xA068_FC37_C182_E274, 0x8AF8_95BC_E012_F182, 0xDC10_0FE7_FCFA_5491, 0x27C6_642A_C633_BC66),
        (0x9CA1_8682_E26D_7FF9, 0x710E_1FB6_AB97_6A45, 0xD27F_5739_6989_129D, 0x1BDF_D8B0_1401_C70A),
    ),
    (
        (0xC832_D824_261A_35EA, 0xF4F6_FB3F_9054_D373, 0x14B9_D6A9_C84D_D678, 0x162A_14C6_2F9A_89B8),
        (0xF798_2466_7B5B_6BEC, 0xAC0A_1FC7_1E2C_F0C0, 0x2AF6_F79E_3127_FEEA, 0x2D19_3E0F_76DE_586B),
        (0x5D0B_F58D_C8A4_AA94, 0x4FEF_F829_8499_0FF8, 0x8169_6EF1_104E_674F, 0x044C_A3CC_4A85_D73B),
    ),
    (
        (0x6198_785F_0CD6_B9AF, 0xB8D9_E2D4_F314_F46F, 0x1D04_5341_6D3E_235C, 0x1CBA_F2B3_71DA_C6A8),
        (0x343E_0761_0F3F_EDE5, 0x293C_4AB0_38FD_BBDC, 0x0E6C_49D0_61B6_B5F4, 0x1D5B_2777_692C_205B),
        (0xF60E_971B_8D73_B04F, 0x06A9_ADB0_C1E6_F962, 0xAA30_535B_DD74_9A7E, 0x2E9B_DBBA_3DD3_4BFF),
    ),
    (
        (0x035A_1366_1F22_418B, 0xDE40_FBE2_6D04_7B05, 0x8BD5_BAE3_6969_299F, 0x2DE1_1886_B180_11CA),
        (0xBC99_8884_BA96_A721, 0x2AB9_395C_449B_E947, 0x0D5B_4A3F_1841_DCD8, 0x2E07_DE17_80B8_A70D),
        (0x825E_4C2B_B749_25CA, 0x2504_40A9_9D6B_8AF3, 0xBBDB_63DB_D52D_AD16, 0x0F69_F185_4D20_CA0C),
    ),
    (
        (0x816C_0594_22DC_705E, 0x6CE5_1135_07F9_6DE9, 0x0D13_5DC6_39FB_09A4, 0x2EB1_B254_17FE_1767),
        (0xB8B1_BDF4_953B_D82C, 0xFF36_C661_D26C_C42D, 0x8C24_CB44_C3FA_B48A, 0x115C_D0A0_643C_FB98),
        (0xDE80_1612_311D_04CD, 0xBB57_DDF1_4E0F_958A, 0x066D_7378_B999_868B, 0x26CA_293F_7B2C_462D),
    ),
    (
        (0xF520_9D14_B248_20CA, 0x0F16_0BF9_F71E_967F, 0x2A83_0AA1_6241_2CD9, 0x17BF_1B93_C4C7_E01A),
        (0x05C8_6F2E_7DC2_93C5, 0xE03C_0354_BD8C_FD38, 0xA24F_8456_369C_85DF, 0x35B4_1A7A_C4F3_C571),
        (0x72AC_156A_F435_D09E, 0x64E1_4D3B_EB2D_DDDE, 0x4359_2799_4849_BEA9, 0x3B14_8008_0523_C439),
    ),
    (
        (0x2716_18D8_74B1_4C6D, 0x08E2_8644_2A2D_3EB2, 0x4950_856D_C907_D575, 0x2CC6_8100_31DC_1B0D),
        (0x91F3_18C0_9F0C_B566, 0x9E51_7AA9_3B78_341D, 0x0596_18E2_AFD2_EF99, 0x25BD_BBED_A1BD_E8C1),
        (0xC631_3487_073F_7F7B, 0x2A5E_D0A2_7B61_926C, 0xB95F_33C2_5DDE_8AC0, 0x392A_4A87_58E0_6EE8),
    ),
    (
        (0xE7BB_CEF0_2EB5_866C, 0x5E6A_6FD1_5DB8_9365, 0x9AA6_111F_4DE0_0948, 0x272A_5587_8A08_442B),
        (0x9B92_5B3C_5B21_E0E2, 0xA6EB_BA01_1694_DD12, 0xEFA1_3C4E_60E2_6239, 0x2D5B_308B_0CF0_2CDF),
        (0xEF38_C57C_3116_73AC, 0x44DF_F42F_18B4_6C56, 0xDD5D_293D_72E2_E5F2, 0x1654_9FC6_AF2F_3B72),
    ),
    (
        (0x9B71_26D9_B468_60DF, 0x7639_8265_3442_0311, 0xFA69_C3A2_AD52_F76D, 0x1B10_BB7A_82AF_CE39),
        (0x90D2_7F6A_00B7_DFC8, 0xD1B3_6968_BA04_05C0, 0xC79C_2DF7_DC98_A3BE, 0x0F1E_7505_EBD9_1D2F),
        (0xFF45_7756_B819_BB20, 0x797F_D6E3_F18E_B1CA, 0x537A_7497_A3B4_3F46, 0x2F31_3FAF_0D3F_6187),
    ),
    (
        (0xF0BC_3E73_2ECB_26F6, 0x5CAD_11EB_F0F7_CEB8, 0xFA3C_A61C_0ED1_5BC5, 0x3A5C_BB6D_E450_B481),
        (0x8655_27CB_CA91_5982, 0x51BA_A6E2_0F89_2B62, 0xD920_86E2_53B4_39D6, 0x3DAB_54BC_9BEF_688D),
        (0x3680_45AC_F2B7_1AE3, 0x4C24_B33B_410F_EFD4, 0xE280_D316_7012_3F74, 0x06DB_FB42_B979_884D),
    ),
    (
        (0xA7FC_32D2_2F18_B9D3, 0xB8D2_DE72_E3D2_C9EC, 0xC6F0_39EA_1973_A63E, 0x068D_6B46_08AA_E810),
        (0x2B5D_FCC5_5725_55DF, 0xB868_A7D7_E1F1_F69A, 0x0EE2_58C9_B8FD_FCCD, 0x366E_BFAF_A3AD_381C),
        (0xE6BC_229E_95BC_76B1, 0x7EF6_6D89_D044_D022, 0x04DB_3024_F41D_3F56, 0x3967_8F65_512F_1EE4),
    ),
    (
        (0xE534_C88F_E53D_85FE, 0xCF82_C25F_99DC_01A4, 0xD58B_7750_A3BC_2FE1, 0x2166_8F01_6A80_63C0),
        (0x4BEF_429B_C533_1608, 0xE34D_EA56_439F_E195, 0x1BC7_4936_3E98_A768, 0x39D0_0994_A8A5_046A),
        (0x770C_956F_60D8_81B3, 0xB163_D416_05D3_9F99, 0x6B20_3BBE_12FB_3425, 0x1F9D_BDC3_F843_1263),
    ),
    (
        (0x9794_A9F7_C336_EAB2, 0xBE0B_C829_FE5E_66C6, 0xE5F1_7B9E_0EE0_CAB6, 0x0277_45A9_CDDF_AD95),
        (0x5202_5657_ABD8_AEE0, 0x2FA4_3FE2_0A45_C78D, 0x788D_695C_61E9_3212, 0x1CEC_0803_C504_B635),
        (0xD387_2A95_59A0_3A73, 0xED50_82C8_DBF3_1365, 0x7207_7448_EF87_CC6E, 0x1235_23D7_5E9F_ABC1),
    ),
    (
        (0x0017_79E3_A1D3_57F4, 0x27FE_BA35_975E_E7E5, 0xF419_B848_E5D6_94BF, 0x1723_D145_2C9C_F02D),
        (0x9DAB_1EE4_DCF9_6622, 0x21C3_F776_F572_836D, 0xFCC0_573D_7E61_3694, 0x1739_D180_A160_10BD),
        (0x7029_0452_042D_048D, 0xFAFA_96FB_EB0A_B893, 0xACCE_3239_1794_B627, 0x2D4E_6354_DA9C_C554),
    ),
    (
        (0x670B_CF6F_8B48_5DCD, 0x8F3B_D43F_9926_0621, 0x4A86_9553_C9D0_07F8, 0x153E_E614_2E53_5E33),
        (0xD258_D2E2_B778_2172, 0x968A_D442_4AF8_3700, 0x635E_F7E7_A430_B486, 0x0C45_BFD3_A69A_AA65),
        (0x0E56_33D2_51F7_3307, 0x6897_AC0A_8FFA_5FF1, 0xF2D5_6AEC_8314_4600, 0x0ADF_D53B_256A_6957),
    ),
    (
        (0xAC9D_36A8_B751_6D63, 0x3F87_B28F_1C1B_E4BD, 0x8CD1_726B_7CBA_B8EE, 0x315D_2AC8_EBDB_AC3C),
        (0x299C_E44E_A423_D8E1, 0xC9BB_60D1_F695_9879, 0xCFAE_C23D_2B16_883F, 0x1B84_7271_2D02_EEF4),
        (0xC4A5_4041_98AD_F70C, 0x367D_2C54_E369_28C9, 0xBD0B_70FA_2255_EB6F, 0x3C1C_D07E_FDA6_FF24),
    ),
    (
        (0xBBE5_23AE_F9AB_107A, 0x4A16_073F_738F_7E0C, 0x687F_4E51_B2E1_DCD3, 0x1360_52D2_6BB3_D373),
        (0x676C_36C2_4EF9_67DD, 0x7B3C_FBB8_7303_2681, 0xC1BD_D859_A123_2A1D, 0x16C9_6BEE_F6A0_A848),
        (0x067E_EC7F_2D63_40C4, 0x0123_87BA_B4F1_662D, 0x2AB7_FED8_F499_A9FB, 0x284B_38C5_7FF6_5C26),
    ),
    (
        (0xAF1D_FF20_4C92_2F86, 0xFC06_772C_1C04_11A6, 0x39E2_4219_8897_D17C, 0x0C59_93D1_75E8_1F66),
        (0xBBF5_3F67_B1F8_7B15, 0xF248_87AD_48E1_7759, 0xFCDA_655D_1BA9_C8F9, 0x03BF_7A3F_7BD0_43DA),
        (0x9B5C_D09E_36D8_BE62, 0x4C8F_9CBE_69F0_E827, 0xB0CF_9995_67F0_0E73, 0x3188_FE4E_E9F9_FAFB),
    ),
    (
        (0xAFEA_99A2_EC6C_595A, 0x3AF5_BF77_C1C4_2652, 0x5A39_768C_480D_61E1, 0x171F_528C_CF65_8437),
        (0x5A05_63B9_B8E9_F1D5, 0x812C_3286_EE70_0067, 0x196E_4185_9B35_EF88, 0x12F4_175C_4AB4_5AFC),
        (0x0E74_D4D3_6911_8B79, 0x7E23_E1AA_BE96_CFAB, 0x8F8F_DCF8_00A9_AC69, 0x3A50_9E15_5CB7_EBFD),
    ),
    (
        (0x9871_2C65_678C_FD30, 0x984B_C8F2_E4C1_B69E, 0x1A89_920E_2504_C3B3, 0x10F2_A685_DF4A_27C8),
        (0xE8A1_6728_CC9D_4918, 0x5457_3C93_33C5_6321, 0x1D8D_93D5_4AB9_1A0E, 0x09E5_F497_90C8_A0E2),
        (0x609A_7403_47CF_5FEA, 0x42D1_7ED6_EE0F_AB7E, 0x2BF3_5705_D9F8_4A34, 0x352D_69BE_D80E_E3E5),
    ),
    (
        (0x3A75_8AF6_FA84_E0E8, 0xC634_DEBD_281B_76A6, 0x4915_62FA_F2B1_90D3, 0x058E_E73B_A9F3_F293),
        (0x621A_1325_10A4_3904, 0x092C_B921_19BC_76BE, 0xCD0F_1FC5_5B1A_3250, 0x232F_99CC_911E_DDD9),
        (0xC3B9_7C1E_301B_C213, 0xF9EF_D52C_A6BC_2961, 0x86C2_2C6C_5D48_69F0, 0x201B_EED7_B8F3_AB81),
    ),
    (
        (0xBF6B_3431_BA94_E9BC, 0x2938_8842_744A_1210, 0xA1C9_291D_5860_2F51, 0x1376_DCE6_5800_30C6),
        (0x6454_843C_5486_D7B3, 0x072B_A8B0_2D92_E722, 0x2B33_56C3_8238_F761, 0x1793_199E_6FD6_BA34),
        (0x06A3_F1D3_B433_311B, 0x3C66_160D_C62A_ACAC, 0x9FEE_9C20_C87A_67DF, 0x22DE_7A74_88DC_C735),
    ),
    (
        (0x30D6_E3FD_516B_47A8, 0xDBE0_B77F_AE77_E1D0, 0xDF8F_F37F_E2D8_EDF8, 0x3514_D5E9_066B_B160),
        (0x1937_7427_137A_81C7, 0xFF45_3D6F_900F_144A, 0xF919_A00D_ABBF_5FA5, 0x30CD_3006_931A_D636),
        (0x5B6A_7422_0692_B506, 0x8F9E_4B2C_AE2E_BB51, 0x41F8_1A5C_F613_C8DF, 0x253D_1A5C_5293_4127),
    ),
    (
        (0x73F6_66CB_86A4_8E8E, 0x851B_3A59_C990_FAFC, 0xA35E_9613_E7F5_FE92, 0x035B_461C_02D7_9D19),
        (0x7CFB_F86A_3AA0_4780, 0x92B1_283C_2D5F_CCDE, 0x5BC0_0EED_D56B_93E0, 0x23A9_9280_79D1_75BD),
        (0xF1E4_CCD7_3FA0_0A82, 0xB5E2_EA34_36EE_F957, 0xF159_4A07_63C6_11AB, 0x13A7_785A_E134_EA92),
    ),
    (
        (0xBBF0_4F52_52DE_4279, 0x3889_C578_6344_6D88, 0x4962_AE3C_0DA1_7E31, 0x39FC_E308_B7D4_3C57),
        (0x3B57_E344_89B5_3FAD, 0xBEF0_0A08_C6ED_38D2, 0xC0FD_F016_62F6_0D22, 0x1AAE_1883_3F8E_1D3A),
        (0x5551_3E03_3398_513F, 0x27C1_B3FD_8F85_D8A8, 0x8B2E_80C0_64FD_83ED, 0x1A76_1CE8_2400_AF01),
    ),
    (
        (0x5244_CA74_9B73_E481, 0xDCF6_AF28_30A5_0287, 0x16DD_1A87_CA22_E1CC, 0x275A_03E4_5ADD_A7C3),
        (0x58A2_53CF_B6A9_5786, 0x07E5_6145_3FC5_648B, 0xEB08_E47E_5FEA_BCF8, 0x2E5A_10F0_8B5A_B8BB),
        (0xE033_D82C_EFE7_8CE3, 0xC141_A5B6_D594_BEC4, 0xB84E_9C33_3B29_32F1, 0x1459_CB85_8720_8473),
    ),
    (
        (0x5CEC_7E7B_338F_BE1B, 0x52F9_332F_BFFC_FBBD, 0x7B92_CE81_0E14_A400, 0x193A_E592_1D78_B5DE),
        (0x6022_4BE6_7248_E82C, 0x3743_84F4_A072_8205, 0x8911_1FB2_C466_0281, 0x3097_898A_5D00_11A4),
        (0x5499_80DE_8629_30F5, 0x1979_B2D1_C465_B4D9, 0x5717_82FD_96CE_54B4, 0x378D_97BF_8C86_4AE7),
    ),
    (
        (0x37EA_32A9_71D1_7884, 0xDBC7_F5CB_4609_3421, 0x8813_6287_CE37_6B08, 0x2EB0_4EA7_C01D_97EC),
        (0xEAD3_726F_1AF2_E7B0, 0x861C_BDA4_7680_4E6C, 0x2302_A1C2_2E49_BAEC, 0x3642_5347_EA03_F641),
        (0xECD6_27E5_9590_D09E, 0x3F5B_5CA5_A19A_9701, 0xCC99_6CD8_5C98_A1D8, 0x26B7_2DF4_7408_AD42),
    ),
    (
        (0x59BE_CE31_F0A3_1E95, 0xDE01_212E_E458_8F89, 0x1F05_636C_610B_89AA, 0x1301_80E4_4E29_24DB),
        (0x9EA8_E7BC_7926_3550, 0xDF77_93CC_89E5_B52F, 0x7327_5ACA_ED5F_579C, 0x219E_9773_7D39_79BA),
        (0x9C12_635D_F251_D153, 0x3B06_72DD_7D42_CBB4, 0x3461_363F_81C4_89A2, 0x3CDB_9359_8A5C_A528),
    ),
    (
        (0x2861_CE16_F219_D5A9, 0x4AD0_4470_45A7_C5AA, 0x2072_4B92_7A0C_A81C, 0x0E59_E6F3_32D7_ED37),
        (0x43B0_A3FC_FF20_36BD, 0x172C_C07B_9D33_FBF9, 0x3D73_6946_7222_697A, 0x1B06_4342_D51A_4275),
        (0x3EB3_1022_8A0E_5F6C, 0x78FA_9FB9_1712_21B7, 0x2F36_3C55_B288_2E0B, 0x30B8_2A99_8CBD_8E8A),
    ),
    (
        (0xE46F_6D42_9874_0107, 0x8AD7_1EA7_15BE_0573, 0x63DF_7A76_E858_A4AA, 0x23E4_AB37_183A_CBA4),
        (0xFCA9_95E2_B599_14A1, 0xACFE_1464_0DE0_44F2, 0x5D33_094E_0BED_A75B, 0x2795_D5C5_FA42_8022),
        (0xC26D_909D_EE8B_53C0, 0xA668_7C3D_F16C_8FE4, 0xD765_F26D_D03F_4C45, 0x3001_CA40_1E89_601C),
    ),
    (
        (0xE7FE_A6BD_F347_1380, 0xE84B_5BEB_AE4E_501D, 0xF7BF_86E8_9280_827F, 0x0072_E45C_C676_B08E),
        (0xD0C5_4DDE_B26B_86C0, 0xB648_29E2_D40E_41BD, 0xE2AB_E4C5_18CE_599E, 0x13DE_7054_8487_4BB5),
        (0x3891_5B43_2A99_59A5, 0x82BB_18E5_AF1B_05BB, 0x3159_50F1_211D_EFE8, 0x0408_A9FC_F9D6_1ABF),
    ),
    (
        (0x3407_0CBE_E268_86A0, 0xAE4D_23B0_B41B_E9A8, 0xBB4E_4A14_00CC_D2C4, 0x2780_B9E7_5B55_676E),
        (0x9405_5920_98B4_056F, 0xDC4D_8FBE_FE24_405A, 0xF803_33EC_8563_4AC9, 0x3A57_0D4D_7C4E_7AC3),
        (0x78D2_B247_8995_20B4, 0xE2CC_1507_BEBD_CC62, 0xF347_C247_FCF0_9294, 0x0C13_CCA7_CB1F_9D2C),
    ),
    (
        (0x2E8C_88F7_7074_70E0, 0x0B50_BB2E_B82D_F74D, 0xD261_4A19_7C6B_794B, 0x14F5_9BAA_03CD_0CA4),
        (0xBE52_476E_0A16_F3BE, 0xA51D_54ED_E661_67F5, 0x6F54_6E17_04C3_9C60, 0x307D_EFEE_925D_FB43),
        (0x380B_67D8_0473_DCE3, 0x6611_0683_6ADF_E5E7, 0x7A07_E767_4B5A_2621, 0x1960_CD51_1A91_E060),
    ),
    (
        (0x15AA_F1F7_7125_89DD, 0xB8EE_335D_8828_4CBE, 0xCA2A_D0FB_5667_2500, 0x2301_EF9C_63EA_84C5),
        (0x5E68_478C_4D60_27A9, 0xC861_82D1_B424_6B58, 0xD10F_4CD5_2BE9_7F6B, 0x029A_5A47_DA79_A488),
        (0x2CC4_F962_EAAE_2260, 0xF97F_E46B_6A92_5428, 0x2360_D17D_890E_55CB, 0x32D7_B16A_7F11_CC96),
    ),
    (
        (0xC0CA_B915_D536_3D9F, 0xA5F2_404C_D7B3_5EB0, 0x18E8_57A9_8D49_8CF7, 0x2670_3E48_C03B_81CA),
        (0xF691_123A_E112_B928, 0xF443_88BD_6B89_221E, 0x88AC_8D25_A246_03F1, 0x0486_82A3_5B32_65BC),
        (0x3AB7_DEFC_B8D8_03E2, 0x91D6_E171_5164_775E, 0xD72C_DDC6_CF06_B507, 0x06B1_3904_41FA_7030),
    ),
    (
        (0xBCD7_9541_4A6E_2E86, 0x43B3_60F6_386A_86D7, 0x1689_426D_CE05_FCD8, 0x31AA_0EEB_868C_626D),
        (0xED77_F5D5_76B9_9CC3, 0x90EF_D8F4_1B20_78B2, 0x057A_BAD3_764C_104B, 0x2394_64F7_5BF7_B6AF),
        (0xB2CB_4873_07C1_CECF, 0xA5CC_47C5_9654_B2A7, 0xA45E_19ED_813A_54AB, 0x0A64_D4C0_4FD4_26BD),
    ),
    (
        (0x1F73_1532_2F65_8735, 0x777C_7A92_1A06_2E9D, 0x576A_4AD2_5986_0FB1, 0x21FB_BDBB_7367_0734),
        (0x6743_2400_3FC5_2146, 0x5B86_D294_63D3_1564, 0xD937_1CA2_EB95_ACF3, 0x31B8_6F3C_F017_05D4),
        (0x7045_F48A_A4EB_4F6F, 0x1354_1D65_157E_E1CE, 0x05EF_1736_D090_56F6, 0x2BFD_E533_5437_7C91),
    ),
    (
        (0x5A13_A58D_2001_1E2F, 0xF4D5_239C_11D0_EAFA, 0xD558_F36E_65F8_ECA7, 0x1233_CA93_6EC2_4671),
        (0x6E70_AF0A_7A92_4B3A, 0x8780_58D0_234A_576F, 0xC437_846D_8E0B_2B30, 0x27D4_52A4_3AC7_DEA2),
        (0xA025_76B9_4392_F980, 0x6A30_641A_1C3D_87B2, 0xE816_EA8D_A493_E0FA, 0x2699_DBA8_2184_E413),
    ),
    (
        (0x608C_6F7A_61B5_6E55, 0xF185_8466_4F8C_AB49, 0xC398_8BAE_E42E_4B10, 0x36C7_22F0_EFCC_8803),
        (0x6E49_AC17_0DBB_7FCD, 0x85C3_8899_A7B5_A833, 0x08B0_F2EC_89CC_AA37, 0x02B3_FF48_861E_339B),
        (0xA8C5_AE03_AD98_E405, 0x6FC3_FF4C_49EB_59AD, 0x6016_2F44_27BC_657B, 0x0B70_D061_D58D_8A7F),
    ),
    (
        (0x2E06_CC4A_F33B_0A06, 0xAD3D_E8BE_46ED_9693, 0xF875_3ADE_B9D7_CEE2, 0x3FC2_A13F_127F_96A4),
        (0xC120_80AC_117E_E15F, 0x00CB_3D62_1E17_1D80, 0x1BD6_3434_AC8C_419F, 0x0C41_A6E4_8DD2_3A51),
        (0x9685_213E_9692_F5E1, 0x72AA_AD7E_4E75_339D, 0xED44_7653_7169_084E, 0x2DE8_072A_6BD8_6884),
    ),
    (
        (0x0AD0_1184_567B_027C, 0xB81C_F735_CC9C_39C0, 0x9D34_96A3_D9FE_05EC, 0x0355_7A8F_7B38_A17F),
        (0x45BC_B5AC_0082_6ABC, 0x060F_4336_3D81_8E54, 0xEE97_6D34_282F_1A37, 0x0B5F_5955_2F49_8735),
        (0x2F29_09E1_7E22_B0DF, 0xF5D6_46E5_7507_E548, 0xFEDB_B185_70DC_7300, 0x0E29_23A5_FEE7_B878),
    ),
    (
        (0xF71E_ED73_F15B_3326, 0xCF1C_B37C_3B03_2AF6, 0xC787_BE97_020A_7FDD, 0x1D78_5005_A7A0_0592),
        (0x0ACF_BFB2_23F8_F00D, 0xA590_B88A_3B06_0294, 0x0BA5_FEDC_B8F2_5BD2, 0x1AD7_72C2_73D9_C6DF),
        (0xC1CE_13D6_0F2F_5031, 0x8105_10EB_61F0_672D, 0xA78F_3275_C278_234B, 0x027B_D647_85FC_BD2A),
    ),
    (
        (0x8337_F5E0_7923_A853, 0xE224_3134_6945_7B8E, 0xCE6F_8FFE_A103_1B6D, 0x2080_0F44_1B4A_0526),
        (0xA33D_7BED_89A4_408A, 0x36CD_C8EE_D662_AD37, 0x6EEA_2CD4_9F43_12B4, 0x3D5A_D61D_7B65_F938),
        (0x3BBB_AE94_CC19_5284, 0x1DF9_6CC0_3EA4_B26D, 0x02C5_F91B_E4DD_8E3D, 0x1333_8BC3_51FC_46DD),
    ),
    (
        (0xC527_1C29_7852_819E, 0x646C_49F9_B46C_BF19, 0xB87D_B1E2_AF3E_A923, 0x25E5_2BE5_07C9_2760),
        (0x5C38_0AB7_01B5_2EA9, 0xA34C_83A3_485C_6B2D, 0x7109_6D8B_1B98_3C98, 0x1C49_2D64_C157_AAA4),
        (0xA20C_0B3D_A0DA_4CA3, 0xD434_87BC_288D_F682, 0xF4E6_C5E7_A573_F592, 0x0C5B_8015_7999_2718),
    ),
    (
        (0x7EA3_3C93_E408_33CF, 0x584E_9E62_A7F9_554E, 0x6869_5C0C_D7CB_F43D, 0x1090_B1B4_D2BE_BE7A),
        (0xE383_E1EC_3BAA_8D69, 0x1B21_8E35_ECF2_328E, 0x68F5_CE5C_BED1_9CAD, 0x33E3_8018_A801_387A),
        (0xB76B_0B3D_787E_E953, 0x5F4A_02D2_8729_E3AE, 0xEEF8_D83D_0E87_6BAC, 0x1654_AF18_772B_2DA5),
    ),
    (
        (0xEF7C_E6A0_1326_5477, 0xBB08_9387_0367_EC6C, 0x4474_2DE8_8C5A_B0D5, 0x1678_BE3C_C9C6_7993),
        (0xAF5D_4789_3348_F766, 0xDAF1_8183_55B1_3B4F, 0x7FF9_C6BE_546E_928A, 0x3780_BD1E_01F3_4C22),
        (0xA123_8032_0D7C_C1DE, 0x5D11_E69A_A6C0_B98C, 0x0786_018E_7CB7_7267, 0x1E83_D631_5C9F_125B),
    ),
    (
        (0x1799_603E_855C_E731, 0xC486_894D_76E0_C33B, 0x160B_4155_2F29_31C8, 0x354A_FD0A_2F9D_0B26),
        (0x8B99_7EE0_6BE1_BFF3, 0x60B0_0DBE_1FAC_ED07, 0x2D8A_FFA6_2905_C5A5, 0x00CD_6D29_F166_EADC),
        (0x08D0_6419_1708_2F2C, 0xC60D_0197_3F18_3057, 0xDBE0_E3D7_CDBC_66EF, 0x1D62_1935_2768_E3AE),
    ),
    (
        (0xFA08_DD98_0638_7577, 0xAFE3_CA1D_B8D4_F529, 0xE48D_2370_D7D1_A142, 0x1463_36E2_5DB5_181D),
        (0xA901_D3CE_84DE_0AD4, 0x022E_54B4_9C13_D907, 0x997A_2116_3E2E_43DF, 0x0005_D8E0_85FD_72EE),
        (0x1C36_F313_4196_4484, 0x6F8E_BC1D_2296_021A, 0x0DD5_E61C_8A4E_8642, 0x364E_97C7_A389_3227),
    ),
    (
        (0xD7A0_0C03_D2E0_BAAA, 0xFA97_EC80_AD30_7A52, 0x561C_6FFF_1534_6878, 0x0118_9910_671B_C16B),
        (0x63FD_8AC5_7A95_CA8C, 0x4C0F_7E00_1DF4_90AA, 0x5229_DFAA_0123_1A45, 0x162A_7C80_F4D2_D12E),
        (0x32E6_9EFB_22F4_0B96, 0xCAFF_31B4_FDA3_2124, 0x2604_E4AF_B09F_8603, 0x2A0D_6C09_5766_66BB),
    ),
    (
        (0xC0A0_180F_8CBF_C0D2, 0xF444_D10D_63A7_4E2C, 0xE16A_4D60_3D5A_808E, 0x0978_E5C5_1E1E_5649),
        (0x03F4_460E_BC35_1B6E, 0x0508_7D90_3BDA_CFD1, 0xEBE1_9BBD_CE25_1011, 0x1BDC_EE3A_ACA9_CD25),
        (0xF619_64BF_3ADE_7670, 0x0C94_7321_E007_5E3F, 0xE494_7914_0B19_44FD, 0x1862_CCCB_70B5_B885),
    ),
    (
        (0xC326_7DA6_E94A_DC50, 0x39EE_99C1_CC6E_5DDA, 0xBC26_CC88_3A19_87E1, 0x1F3E_91D8_63C1_6922),
        (0x0F85_B4AC_2C36_7406, 0xFA66_1465_C656_AD99, 0xEF5C_08F8_478F_663A, 0x1AF4_7A48_A601_6A49),
        (0x0EAB_CD87_E7D0_1B15, 0x1C36_98B0_A2E3_DA10, 0x009D_5733_8C69_3505, 0x3C8E_E901_956E_3D3F),
    ),
    (
        (0x8B94_7721_8967_3476, 0xE10C_E2B7_069F_4DBD, 0x68D0_B024_F591_B520, 0x1660_A8CD_E7FE_C553),
        (0x9D8D_0F67_FDAA_79D5, 0x3963_C2C1_F558_6E2F, 0x1303_9363_34DD_1132, 0x0F6D_9919_29D5_E4E7),
        (0x7A43_3091_E1CE_2D3A, 0x4E7F_DA77_0712_F343, 0xCC62_5EAA_AB52_B4DC, 0x02B9_CEA1_921C_D9F6),
    ),
    (
        (0x3797_B2D8_3760_43B3, 0xD8CA_F468_976F_0472, 0x214F_7C67_84AC_B565, 0x14A3_23B9_9B90_0331),
        (0x347F_EF2C_00F0_953A, 0x718B_7FBC_7788_AF78, 0xEC01_EA79_642D_5760, 0x1904_76B5_80CB_9277),
        (0xFF4E_7E6F_B268_DFD7, 0x9660_902B_6008_7651, 0xA424_63D3_0B44_2B6F, 0x090A_3A9D_869D_2EEF),
    ),
    (
        (0xF983_387E_A045_6203, 0xE365_0013_04F9_A11E, 0x0DBE_8FD2_270A_6795, 0x3877_A955_8636_7567),
        (0x39C0_AF0F_E01F_4A06, 0x6011_8C53_A218_1352, 0x5DF3_9A2C_C63D_DC0A, 0x2D89_4691_240F_E953),
        (0x1ACA_9EAF_9BBA_9850, 0x5914_E855_EEB4_4AA1, 0x7EF7_1780_2016_6189, 0x21B9_C182_92BD_BC59),
    ),
    (
        (0x33F5_09A7_4AD9_D39B, 0x272E_1CC6_C36A_2968, 0x505A_05F2_A6AE_834C, 0x2FE7_6BE7_CFF7_23E2),
        (0x0DF9_FA97_277F_A8B4, 0xD15B_FF84_0DDA_E8A5, 0x9299_81D7_CFCE_253B, 0x187A_A448_F391_E3CA),
        (0xF0C6_6AF5_FFC7_3736, 0x663C_CF7B_2FFE_4B5E, 0x007A_B3AA_3617_F422, 0x0B70_83AD_7517_07BF),
    ),
    (
        (0x2F9B_20F1_FBD4_9791, 0x1975_B962_F6CB_8E0B, 0x3BC4_CA99_02C5_2ACB, 0x030D_DBB4_7049_3F16),
        (0x3A1C_62CA_8FBF_2525, 0x8FB8_AB9D_60EA_17B2, 0x950B_0AB1_8D35_46DF, 0x3130_FBAF_FB5A_A82A),
        (0x43A8_7618_0DC3_82E0, 0x15CE_2EAD_2FCD_051E, 0x4F74_D74B_AC2E_E457, 0x337F_5447_07C4_30F0),
    ),
    (
        (0x26DE_98A8_736D_1D11, 0x7D8E_471A_9FB9_5FEF, 0xAC9D_91B0_930D_AC75, 0x3499_7991_9015_394F),
        (0xCCFC_B618_31D5_C775, 0x3BF9_3DA6_FFF3_1D95, 0x2305_CD7A_921E_C5F1, 0x027C_C4EF_E3FB_35DD),
        (0xC3FA_2629_635D_27DE, 0x67F1_C6B7_3147_64AF, 0x61B7_1A36_9868_2AD2, 0x037F_9F23_6595_4C5B),
    ),
    (
        (0x77C5_B024_8483_71AE, 0x6041_4ABE_362D_01C9, 0x10F1_CC6D_F8B4_BCD7, 0x1F69_7CAC_4D07_FEB7),
        (0x786A_DD24_4AA0_EF29, 0x3145_C478_0631_09D6, 0x26E6_C851_FBD5_72A6, 0x267A_750F_E5D7_CFBC),
        (0x180E_2B4D_3E75_6F65, 0xAF28_5FA8_2CE4_FAE5, 0x678C_9996_D9A4_72C8, 0x0C91_FEAB_4A43_193A),
    ),
    (
        (0x79C4_7C57_3AC4_10F7, 0x7E3B_83AF_4A4B_A3BA, 0x2186_C303_8EA0_5E69, 0x1745_569A_0A3E_3014),
        (0x1E03_8852_2696_191F, 0xFDFF_66C6_F3B5_FFE1, 0xECA5_1207_78A5_6711, 0x2986_3D54_6E7E_7C0D),
        (0x2F22_5E63_66BF_E390, 0xA79A_03DF_8339_94C6, 0xBF06_BAE4_9EF8_53F6, 0x1148_D6AB_2BD0_0192),
    ),
    (
        (0xF4F6_331A_8B26_5D15, 0xF745_F45D_350D_41D4, 0xE18B_1499_060D_A366, 0x02E0_E121_B0F3_DFEF),
        (0x078A_E6AA_1510_54B7, 0x6904_0173_6D44_A653, 0xB89E_F73A_40A2_B274, 0x0D0A_A46E_76A6_A278),
        (0x9A4D_532C_7B6E_0958, 0x392D_DE71_0F1F_06DB, 0xEEE5_45F3_FA6D_3D08, 0x1394_3675_B04A_A986),
    ),
    (
        (0x961F_C818_DCBB_66B5, 0xC9F2_B325_7530_DAFE, 0xD97A_11D6_3088_F5D9, 0x2901_EC61_942D_34AA),
        (0xFDF5_44B9_63D1_FDC7, 0x22FF_A2A2_AF9F_A3E3, 0xF431_D544_34A3_E0CF, 0x2020_4A21_05D2_2E7E),
        (0x1211_B9E2_190D_6852, 0xA004_ABE8_E015_28C4, 0x5C1E_3E9E_27A5_71C3, 0x3A8A_6282_9512_1D5C),
    ),
)


@cache
def _round_constants() -> tuple[tuple[Fp, Fp, Fp], ...]:
    table = tuple(
        (from_raw(a), from_raw(b), from_raw(c)) for a, b, c in _RAW_ROUND_CONSTANTS
    )
    if len(table) != ROUNDS:
        raise RuntimeError(f"round constant table has {len(table)} rows, expected {ROUNDS}")
    return table


def round_constants() -> list[tuple[Fp, Fp, Fp]]:
    """Return the 64 rows of 3 round constants, one row per round, in order.

    Each call returns a new list, so callers may change it freely.
    """
    return list(_round_constants())