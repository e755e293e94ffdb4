import pytest
from hypothesis import given
from hypothesis import strategies as st

from bmstools.chart import Note, Silent
from bmstools.testutils import strategies as bmst

from ..symbols import decode_symbol, decode_symbols, encode_object, to_base_36


@given(bmst.base_36_symbol())
def test_that_valid_symbols_are_decoded_as_base_36(symbol: str) -> None:
    value = int(symbol, 36)
    expected = Silent() if value == 0 else Note(value)
    assert decode_symbol(symbol) == expected


@pytest.mark.parametrize("symbol", ["00", "0"])
def test_that_zero_is_silent(symbol: str) -> None:
    assert decode_symbol(symbol) == Silent()


@pytest.mark.parametrize("symbol", ["", "  ", "-1", "+", "1_", " 1", "é1"])
def test_that_invalid_symbols_are_rejected(symbol: str) -> None:
    assert decode_symbol(symbol) is None


def test_that_decoding_is_case_insensitive() -> None:
    assert decode_symbol("zz") == decode_symbol("ZZ") == Note(36 ** 2 - 1)


def test_that_invalid_symbols_shorten_the_line() -> None:
    assert decode_symbols("01??0200") == [Note(1), Note(2), Silent()]


def test_that_a_trailing_lone_character_is_decoded() -> None:
    assert decode_symbols("01A") == [Note(1), Note(10)]


def test_that_an_empty_payload_gives_no_objects() -> None:
    assert decode_symbols("") == []


@given(st.lists(bmst.bms_object(), max_size=50))
def test_that_encoded_objects_are_decoded_back(objects: list) -> None:
    payload = "".join(encode_object(o) for o in objects)
    assert decode_symbols(payload) == objects


def test_that_to_base_36_refuses_negative_values() -> None:
    with pytest.raises(ValueError):
        to_base_36(-1)


def test_that_a_leading_plus_sign_is_accepted() -> None:
    assert decode_symbols("+1+0") == [Note(1), Silent()]
