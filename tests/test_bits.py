from dataclasses import replace

import pytest

from bikekit.bits import IDX_INVALID_VAL, sample_error_vec_indices, secure_set_bits
from bikekit.params import params_for_level
from bikekit.prf import ShakePrf


def _set_bits(data: bytes) -> set:
    value = int.from_bytes(data, "little")
    return {i for i in range(len(data) * 8) if value >> i & 1}


class _ListPrf:
    """Hands out a fixed list of 32-bit values, one per read."""

    def __init__(self, values):
        self._values = list(values)
        self.reads = 0

    def read(self, length):
        assert length == 4
        value = self._values[self.reads]
        self.reads += 1
        return value.to_bytes(4, "little")


def _small_params(t=3, max_draws=6):
    # r_bits=10 gives n_bits=20 and a 5-bit draw mask.
    return replace(params_for_level(1), r_bits=10, t=t, max_rand_indices_t=max_draws)


def test_set_bits_length_and_positions():
    out = secure_set_bits(0, [0, 1, 64, 127], 128)
    assert len(out) == 16
    assert _set_bits(out) == {0, 1, 64, 127}


def test_set_bits_little_endian_layout():
    out = secure_set_bits(0, [0, 1, 64], 128)
    assert out[0] == 0x03
    assert out[8] == 0x01


def test_set_bits_with_offset_skips_lower_indices():
    out = secure_set_bits(100, [5, 99, 100, 163, 300], 128)
    assert _set_bits(out) == {0, 63}


def test_set_bits_ignores_invalid_and_out_of_range():
    out = secure_set_bits(0, [IDX_INVALID_VAL, 200, 3], 128)
    assert _set_bits(out) == {3}


def test_set_bits_empty_list_is_zero():
    assert secure_set_bits(0, [], 64) == bytes(8)


@pytest.mark.parametrize("padded_bits", [-64, 65, 100])
def test_set_bits_rejects_bad_width(padded_bits):
    with pytest.raises(ValueError):
        secure_set_bits(0, [1], padded_bits)


def test_set_bits_splits_error_vector_halves():
    params = params_for_level(1)
    wlist = [0, params.r_bits - 1, params.r_bits, 2 * params.r_bits - 1]
    e0 = secure_set_bits(0, wlist, params.r_padded)
    e1 = secure_set_bits(params.r_bits, wlist, params.r_padded)
    assert {0, params.r_bits - 1} <= _set_bits(e0)
    assert _set_bits(e1) == {0, params.r_bits - 1}


def test_sample_skips_duplicates_and_invalid():
    prf = _ListPrf([5, 5, 25, 7, 3, 9])
    out = sample_error_vec_indices(prf, _small_params())
    assert out == [5, 7, 3]
    assert prf.reads == 6


def test_sample_masks_draws():
    prf = _ListPrf([37, 1, 2, 4, 4, 4])
    out = sample_error_vec_indices(prf, _small_params())
    assert out == [5, 1, 2]


def test_sample_leaves_unfilled_slots_invalid():
    prf = _ListPrf([1, 1, 30, 31, 1, 1])
    out = sample_error_vec_indices(prf, _small_params())
    assert out == [1, IDX_INVALID_VAL, IDX_INVALID_VAL]


def test_sample_from_shake_is_distinct_and_in_range():
    params = params_for_level(1)
    out = sample_error_vec_indices(ShakePrf(bytes(range(32))), params)
    assert len(out) == params.t
    assert len(set(out)) == params.t
    assert all(0 <= idx < params.n_bits for idx in out)


def test_sample_is_deterministic_for_seed():
    params = params_for_level(1)
    first = sample_error_vec_indices(ShakePrf(bytes(32)), params)
    second = sample_error_vec_indices(ShakePrf(bytes(32)), params)
    other = sample_error_vec_indices(ShakePrf(b"\x01" * 32), params)
    assert first == second
    assert first != other


def test_sample_rejects_short_prf_output():
    class ShortPrf:
        def read(self, length):
            return b"\x00"

    with pytest.raises(ValueError):
        sample_error_vec_indices(ShortPrf(), _small_params())