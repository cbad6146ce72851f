import pytest

from passing_siteswap.errors import ParseError
from passing_siteswap.notation import format_swaps, parse_swaps

def test_parse_digits():
    assert parse_swaps("633") == (6, 3, 3)
    assert parse_swaps("0") == (0,)

def test_parse_letters_case_insensitive():
    assert parse_swaps("9A7") == (9, 10, 7)
    assert parse_swaps("9a7") == (9, 10, 7)
    assert parse_swaps("bZ") == (11, 35)

@pytest.mark.parametrize("text", [None, "", "6 3 3", "63-3", "3.5"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ParseError):
        parse_swaps(text)

def test_format_swaps_uses_letters_above_nine():
    assert format_swaps((9, 10, 7)) == "9a7"
    with pytest.raises(ParseError):
        format_swaps((36,))
