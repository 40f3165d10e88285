import numpy as np
import pytest

from chromascheme.utils import (
    format_number,
    get_dimension,
    is_number,
    np_round_half_up,
    round_half_up,
    unpack_triple,
    value_or_default,
)


def test_none_dimension():
    assert get_dimension(None) == 0


def test_sized_dimension():
    assert get_dimension([1, 2, 3]) == 3
    assert get_dimension((1, 2)) == 2
    assert get_dimension("hello") == 5


def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(3.14) == 1


def test_unpack_triple():
    assert unpack_triple(1, 2, 3) == (1, 2, 3)
    assert unpack_triple((1, 2, 3)) == (1, 2, 3)
    assert unpack_triple(np.array([1, 2, 3])) == (1, 2, 3)
    with pytest.raises(ValueError):
        unpack_triple((1, 2, 3, 4))
    with pytest.raises(TypeError):
        unpack_triple(1, 2)


def test_value_or_default():
    assert value_or_default(None, 5) == 5
    assert value_or_default(0, 5) == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(76.5) == 77
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0
    assert isinstance(round_half_up(1.0), int)


def test_np_round_half_up():
    result = np_round_half_up([2.5, 76.5, -2.5, 0.49])
    assert np.array_equal(result, [3, 77, -2, 0])
    assert np.issubdtype(result.dtype, np.integer)


def test_format_number():
    assert format_number(12) == "12"
    assert format_number(1.0) == "1"
    assert format_number(0.5) == "0.5"
    assert format_number(np.int64(3)) == "3"
    assert format_number(np.float64(2.0)) == "2"


def test_is_number():
    assert is_number(1)
    assert is_number(0.5)
    assert is_number(np.float32(1))
    assert not is_number("1")
    assert not is_number(None)
