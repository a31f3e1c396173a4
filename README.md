# bikekit

The building blocks that BIKE, a code-based post-quantum key encapsulation
mechanism, uses to turn 32-byte seeds into secret-key polynomials and error
vectors.

| Module | What it holds |
| --- | --- |
| `bikekit.params` | `BikeParams` and `params_for_level(level)` for security levels 1, 3 and 5, with derived sizes (`r_bytes`, `r_padded`, `n_bits`, `secret_key_bytes`, ...), plus `divide_and_ceil` and `log2_msb` |
| `bikekit.errors` | `BikeError`, raised with an `ErrorCode` |
| `bikekit.utilities` | fixed-width helpers: `bswap_64`, `bit_scan_reverse_vartime`, `secure_cmp`, `secure_cmp32`, `secure_l32`, `secure_l32_mask`, `secure_cmpeq64_mask`, and `secure_clean` to zero a writable buffer |
| `bikekit.keccak` | the Keccak-f[1600] permutation (`keccak_f1600`), `shake256`, `shake256_absorb`, `shake256_squeeze` and `sha3_384`, in pure Python |
| `bikekit.sha384` | a pure-Python `sha384`, and `sha(msg, kind)` which picks SHA3-384 (the default) or SHA-384 through `HashKind` |
| `bikekit.aes` | `Aes256`, single-block AES-256 encryption backed by the `cryptography` library |
| `bikekit.prf` | `ShakePrf` and `AesCtrPrf`, seeded pseudorandom byte streams, and `new_prf` to pick one |
| `bikekit.bits` | `secure_set_bits`, which turns a list of indices into a little-endian bit vector, and `sample_error_vec_indices` |
| `bikekit.sampling` | `get_seeds`, `sample_uniform_r_bits`, `generate_indices_mod_z`, `sample_indices_fisher_yates`, `generate_secret_key` and `generate_error_vector` |

## Installation

```
pip install bikekit
```

The only dependency is `cryptography`, used for AES.

## Usage

```python
from bikekit.params import params_for_level
from bikekit.keccak import shake256, sha3_384
from bikekit.sha384 import HashKind, sha
from bikekit.prf import new_prf
from bikekit.sampling import get_seeds, generate_secret_key, generate_error_vector

params = params_for_level(1)          # r_bits=12323, d=71, t=134
seed = bytes(range(32))

# Extendable-output and fixed-length hashing
stream = shake256(b"abc", 64)
digest = sha3_384(b"abc")
digest2 = sha(b"abc", HashKind.SHA2_384)

# A pseudorandom byte stream keyed by a 32-byte seed
with new_prf(seed, 2**32 - 1, use_shake=True) as prf:
    chunk = prf.read(16)

# Sparse secret-key polynomials and a weight-t error vector
h0, h1 = generate_secret_key(seed, params, uniform=False, use_shake=True)
print(h0.weight, h0.wlist[:5], len(h0.bits))     # 71, ..., params.r_padded_bytes

e0, e1 = generate_error_vector(seed, params, uniform=False, use_shake=True)

# Fresh seeds from the operating system
seed_a, seed_b = get_seeds()
```

The same seed always gives the same output, so a saved seed is enough to
rebuild keys and error vectors. Pass `use_shake=False` to use the AES-CTR PRF
in place of SHAKE256, and `uniform=True` to sample indices with rejection
sampling in place of Fisher–Yates.

### PRF behaviour

- `ShakePrf.read(n)` returns at most one SHAKE256 block (136 bytes) per call.
  When the current block cannot cover the request, what is left of it is
  dropped and a new block is squeezed. Each squeeze counts as one invocation.
- `AesCtrPrf.read(n)` returns any number of bytes of the AES-256 counter-mode
  key stream; each encrypted block counts as one invocation.
- Both raise `BikeError` when created with a limit of zero invocations, and
  when used past their limit (`SHAKE_OVER_USED` or `AES_OVER_USED`).
- Both are context managers; leaving the `with` block calls `clean()`, which
  wipes the state.

### Errors

`BikeError` carries `code` (an `ErrorCode`) and `message`. Malformed
arguments, such as a seed that is not 32 bytes or an unknown level, raise
`ValueError`.

## What this package does not do

It stops at sampling. There is no key generation, encapsulation or
decapsulation, no arithmetic on polynomials modulo x^r − 1 (multiplication,
inversion), and no decoder. `generate_secret_key` gives the two sparse halves
h0 and h1 but not the public key, and `generate_error_vector` gives the padded
e0 and e1 but no ciphertext. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```