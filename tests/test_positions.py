import pytest

from wordfit.errors import InputFormatError
from wordfit.positions import PositionPair, format_position_pairs, letter_index, parse_position_pairs


def test_parse_converts_to_zero_based():
    assert parse_position_pairs("a3g1") == [PositionPair("a", 2), PositionPair("g", 0)]
    assert parse_position_pairs("") == []


def test_format_parse_round_trip():
    pairs = [("n", 2), ("a", 1), ("g", 3), ("y", 4), ("a", 0)]
    s = format_position_pairs(pairs)
    assert s == "n3a2g4y5a1"
    assert parse_position_pairs(s) == pairs


@pytest.mark.parametrize("bad", ["a", "a3g", "a6", "a0", "ab", "11", "A1", "é1", " 1"])
def test_malformed_pairs_raise(bad):
    with pytest.raises(InputFormatError):
        parse_position_pairs(bad)


def test_input_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_position_pairs("z9")


def test_format_rejects_out_of_range_positions():
    with pytest.raises(InputFormatError):
        format_position_pairs([("a", 5)])
    with pytest.raises(InputFormatError):
        format_position_pairs([("1", 0)])


def test_letter_index():
    assert letter_index("a") == 0
    assert letter_index("z") == 25
    with pytest.raises(InputFormatError):
        letter_index("Z")
