import pytest

from bikekit.aes import AES256_BLOCK_BYTES, Aes256

FIPS197_KEY = bytes(range(32))
FIPS197_PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")
FIPS197_CIPHERTEXT = bytes.fromhex("8ea2b7ca516745bfeafc49904b496089")


def test_fips197_vector():
    assert Aes256(FIPS197_KEY).encrypt_block(FIPS197_PLAINTEXT) == FIPS197_CIPHERTEXT


def test_encryption_is_stateless_per_block():
    cipher = Aes256(FIPS197_KEY)
    first = cipher.encrypt_block(FIPS197_PLAINTEXT)
    second = cipher.encrypt_block(FIPS197_PLAINTEXT)
    assert first == second == FIPS197_CIPHERTEXT


def test_output_length_and_change():
    cipher = Aes256(bytes(32))
    out = cipher.encrypt_block(bytes(16))
    assert len(out) == AES256_BLOCK_BYTES
    assert out != bytes(16)


def test_different_keys_give_different_blocks():
    block = bytes(16)
    a = Aes256(bytes(32)).encrypt_block(block)
    b = Aes256(bytes([1]) + bytes(31)).encrypt_block(block)
    assert a != b


def test_different_blocks_give_different_outputs():
    cipher = Aes256(FIPS197_KEY)
    outputs = {cipher.encrypt_block(i.to_bytes(16, "little")) for i in range(20)}
    assert len(outputs) == 20


def test_accepts_bytearray_inputs():
    cipher = Aes256(bytearray(FIPS197_KEY))
    assert cipher.encrypt_block(bytearray(FIPS197_PLAINTEXT)) == FIPS197_CIPHERTEXT


@pytest.mark.parametrize("length", [0, 16, 24, 31, 33])
def test_bad_key_length_raises(length):
    with pytest.raises(ValueError):
        Aes256(bytes(length))


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_bad_block_length_raises(length):
    with pytest.raises(ValueError):
        Aes256(FIPS197_KEY).encrypt_block(bytes(length))