# pallas_poseidon

Arithmetic in the Pallas base field, and the parameters of the Poseidon
P128Pow5T3 instance over that field: width 3, rate 2, x⁵ S-box, 8 full and
56 partial rounds.

The field modulus is

```
p = 0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001
```

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Field elements: `pallas_poseidon.field`

`Fp(value)` is an element of the Pallas base field. The value is reduced
modulo `p` when the element is built, and the canonical integer is available
as `.value` or through `int()`.

Elements support `+`, `-`, `*`, `/`, unary `-`, `**`, equality, hashing and
truth testing (zero is false). Plain integers mix in with `+`, `-`, `*` and
`/`. Methods:

- `square()`
- `pow(exponent)`: the exponent is an int or an iterable of little-endian
  64-bit limbs; a negative int exponent inverts first
- `inverse()`: raises `ZeroDivisionError` for zero (as does division by zero)
- `sqrt()`: raises `ValueError` when the element is not a square
- `to_bytes()`: 32 little-endian bytes
- `Fp.from_bytes(data)`: reads 32 little-endian bytes; raises `ValueError`
  for a wrong length or a value not below `p`

Module-level helpers:

- `from_raw(limbs)` builds an element from exactly four 64-bit limbs, least
  significant first, reducing the result; it raises `ValueError` for a wrong
  count or a limb outside 64 bits.
- `sqrt_tonelli_shanks(value, tm1d2)` returns a square root of `value`, or
  `None` when there is none. `tm1d2` is `(T - 1) // 2`, where
  `p - 1 = 2^S · T`, given as an int or as 64-bit limbs.

The module also defines `MODULUS`, `S` (32), `T`, `GENERATOR` (5), `ZERO`,
`ONE` and `ROOT_OF_UNITY` (a primitive `2^S`-th root of unity).

```python
from pallas_poseidon.field import Fp, from_raw

a = Fp(5)
assert a.square() * a.inverse() == a

x = from_raw([1, 0, 0, 0])
assert Fp.from_bytes(x.to_bytes()) == x

root = Fp(4).sqrt()
assert root.square() == Fp(4)
```

## Poseidon parameters

- `pallas_poseidon.round_constants.round_constants()` returns 64 rows of
  3 field elements, one row per round, in round order.
- `pallas_poseidon.mds.mds()` and `pallas_poseidon.mds.mds_inv()` return the
  3×3 MDS matrix and its inverse as lists of rows.
- `pallas_poseidon.spec.P128Pow5T3Pallas` gathers these as the methods
  `round_constants()`, `mds()` and `mds_inv()`, with the class attributes
  `WIDTH`, `RATE`, `FULL_ROUNDS`, `PARTIAL_ROUNDS` and `SBOX_EXPONENT`.

Every call returns a new list, so callers may change it freely.

```python
from pallas_poseidon.mds import mds, mds_inv
from pallas_poseidon.round_constants import round_constants
from pallas_poseidon.spec import P128Pow5T3Pallas

spec = P128Pow5T3Pallas()
assert spec.round_constants() == round_constants()
assert spec.mds() == mds()
assert spec.mds_inv() == mds_inv()
```

## What this package does not do

It provides the field and the parameters only. It has no Poseidon
permutation, no sponge and no hash function; code that hashes with these
constants has to supply its own rounds.