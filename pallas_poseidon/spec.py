"""The P128Pow5T3 Poseidon specification over the Pallas base field."""

from __future__ import annotations

from .field import Fp
from .mds import mds, mds_inv
from .round_constants import round_constants


class P128Pow5T3Pallas:
    """Poseidon parameters: width 3, rate 2, x^5 S-box, 8 full and 56 partial rounds."""

    WIDTH = 3
    RATE = 2
    FULL_ROUNDS = 8
    PARTIAL_ROUNDS = 56
    SBOX_EXPONENT = 5

    def round_constants(self) -> list[tuple[Fp, Fp, Fp]]:
        """Return one row of round constants per round, in round order."""
        return round_constants()

    def mds(self) -> list[tuple[Fp, Fp, Fp]]:
        """Return the MDS matrix."""
        return mds()

    def mds_inv(self) -> list[tuple[Fp, Fp, Fp]]:
        """Return the inverse of the MDS matrix."""
        return mds_inv()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"