import hashlib

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from bikekit.errors import BikeError, ErrorCode
from bikekit.prf import AesCtrPrf, ShakePrf, new_prf

SEED = bytes(range(32))


def _shake(n):
    return hashlib.shake_256(SEED).digest(n)


def _aes_blocks(count):
    enc = Cipher(algorithms.AES(SEED), modes.ECB()).encryptor()
    return b"".join(
        enc.update(i.to_bytes(8, "little") + bytes(8)) for i in range(count)
    )


def test_shake_first_read_matches_shake256():
    prf = ShakePrf(SEED)
    assert prf.read(40) == _shake(40)


def test_shake_reads_within_block_are_contiguous():
    prf = ShakePrf(SEED)
    out = prf.read(50) + prf.read(50) + prf.read(36)
    assert out == _shake(136)


def test_shake_crossing_block_drops_remainder():
    prf = ShakePrf(SEED)
    first = prf.read(100)
    second = prf.read(100)
    stream = _shake(272)
    assert first == stream[:100]
    assert second == stream[136:236]


def test_shake_invocation_limit():
    prf = ShakePrf(SEED, max_invocations=1)
    assert prf.read(10) == _shake(10)
    with pytest.raises(BikeError) as info:
        prf.read(1)
    assert info.value.code is ErrorCode.SHAKE_OVER_USED


def test_shake_zero_invocations_fails_init():
    with pytest.raises(BikeError) as info:
        ShakePrf(SEED, max_invocations=0)
    assert info.value.code is ErrorCode.SHAKE_PRF_INIT_FAIL


def test_shake_read_too_long():
    with pytest.raises(ValueError):
        ShakePrf(SEED).read(137)


def test_shake_clean_stops_output():
    with ShakePrf(SEED) as prf:
        prf.read(4)
    with pytest.raises(BikeError) as info:
        prf.read(4)
    assert info.value.code is ErrorCode.SHAKE_OVER_USED


def test_bad_seed_length():
    with pytest.raises(ValueError):
        ShakePrf(b"short")
    with pytest.raises(ValueError):
        AesCtrPrf(bytes(31))


def test_aes_first_block_is_encrypted_zero_counter():
    prf = AesCtrPrf(SEED)
    assert prf.read(16) == _aes_blocks(1)


def test_aes_chunking_gives_same_stream():
    whole = AesCtrPrf(SEED).read(100)
    prf = AesCtrPrf(SEED)
    parts = b"".join(prf.read(n) for n in (5, 16, 3, 40, 36))
    assert parts == whole
    assert whole == _aes_blocks(7)[:100]


def test_aes_counts_invocations():
    prf = AesCtrPrf(SEED, max_invocations=10)
    prf.read(16)
    assert prf.remaining_invocations == 8


def test_aes_over_used():
    prf = AesCtrPrf(SEED, max_invocations=1)
    with pytest.raises(BikeError) as info:
        prf.read(16)
    assert info.value.code is ErrorCode.AES_OVER_USED


def test_aes_zero_invocations_fails_init():
    with pytest.raises(BikeError) as info:
        AesCtrPrf(SEED, max_invocations=0)
    assert info.value.code is ErrorCode.AES_CTR_PRF_INIT_FAIL


def test_aes_clean_stops_new_blocks():
    prf = AesCtrPrf(SEED)
    prf.read(3)
    prf.clean()
    with pytest.raises(BikeError) as info:
        prf.read(32)
    assert info.value.code is ErrorCode.AES_OVER_USED


def test_new_prf_selects_kind():
    shake = new_prf(SEED)
    aes = new_prf(SEED, use_shake=False)
    assert shake.read(16) == _shake(16)
    assert aes.read(16) == _aes_blocks(1)