import pytest

from bikekit.errors import BikeError, ErrorCode


@pytest.mark.parametrize(
    "name, value",
    [
        ("DECODING_FAILURE", 1),
        ("AES_CTR_PRF_INIT_FAIL", 2),
        ("AES_OVER_USED", 3),
        ("EXTERNAL_LIB_ERROR_OPENSSL", 4),
        ("SHAKE_PRF_INIT_FAIL", 5),
        ("SHAKE_OVER_USED", 6),
    ],
)
def test_error_code_values(name, value):
    assert ErrorCode[name] == value
    assert ErrorCode(value).name == name


def test_error_carries_code():
    err = BikeError(ErrorCode.SHAKE_OVER_USED)
    assert err.code is ErrorCode.SHAKE_OVER_USED


def test_error_accepts_plain_int():
    err = BikeError(3)
    assert err.code is ErrorCode.AES_OVER_USED


def test_custom_message_is_kept():
    err = BikeError(ErrorCode.DECODING_FAILURE, "syndrome not zero")
    assert str(err) == "syndrome not zero"
    assert err.message == "syndrome not zero"


@pytest.mark.parametrize("code", list(ErrorCode))
def test_default_message_is_non_empty(code):
    err = BikeError(code)
    assert len(str(err)) > 0
    assert str(err) == err.message


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        BikeError(42)


def test_error_is_raised_and_caught():
    err = BikeError(ErrorCode.AES_CTR_PRF_INIT_FAIL, "init failed")
    with pytest.raises(BikeError) as info:
        raise err
    assert info.value is err
    assert err.code == ErrorCode.AES_CTR_PRF_INIT_FAIL
    assert str(info.value) == "init failed"


def test_repr_names_code():
    err = BikeError(ErrorCode.SHAKE_PRF_INIT_FAIL, "bad")
    assert "SHAKE_PRF_INIT_FAIL" in repr(err)