import re

import pytest

from passing_siteswap import formatters
from passing_siteswap.errors import LabelError
from passing_siteswap.pattern import Pattern
from passing_siteswap.siteswap import Siteswap

RRLL = ("R", "R", "L", "L")

def _lands_everywhere(text):
    """Follow every throw of a two-juggler Prechac string to its catch.

    Each throw must land on a beat and side where the catcher throws, and
    every such throw must be fed exactly once.
    """
    jugglers = [throws.split() for throws in text[1:-1].split(" | ")]
    n = len(jugglers)
    sides = [[t[0] if t[0] in "RL" else "RL"[b % 2] for b, t in enumerate(throws)]
             for throws in jugglers]
    lands = [[0] * len(throws) for throws in jugglers]
    for j, throws in enumerate(jugglers):
        for b, throw in enumerate(throws):
            ss, p, x, to = re.match(r"[RL]?(\d+(?:\.\d+)?)(p?)(x?)([A-Z]?)$", throw).groups()
            to = ord(to) - ord("A") if p else j
            height = float(ss) + (j - to) / n
            assert height.is_integer()
            height = int(height)
            diff_hand = sides[to][b] != sides[j][b]
            crossed = diff_hand ^ bool(x) ^ (height % 2 == 1)
            side_to = {"R": "L", "L": "R"}[sides[j][b]] if crossed else sides[j][b]
            beat_to = (b + height) % len(throws)
            if sides[to][beat_to] != side_to:
                return False
            lands[to][beat_to] += 1
    return all(count == 1 for row in lands for count in row)

def test_local_siteswap_633():
    p = Pattern(2, "633")
    assert formatters.local_siteswap(p) == "< 1.5d 3 1.5d 1.5b 3 1.5b | 1.5a 1.5c 3 1.5c 1.5a 3 >"

def test_local_siteswap_html():
    p = Pattern(2, "7")
    assert formatters.local_siteswap(p) == "< 3.5d 3.5b | 3.5a 3.5c >"
    assert formatters.local_siteswap_html(p) == "&lt; 3.5d 3.5b | 3.5a 3.5c &gt;"

def test_local_siteswap_three_jugglers():
    p = Pattern(3, "7")
    assert formatters.local_siteswap(p) == "< 2.333b 2.333e | 2.333c 2.333f | 2.333d 2.333a >"

def test_prechac():
    assert formatters.prechac(Pattern(2, "7")) == "<3.5pB 3.5pB | 3.5pA 3.5pA>"
    assert formatters.prechac(Pattern(2, "633")) == (
        "<1.5pB 3 1.5pB 1.5pB 3 1.5pB | 1.5pA 1.5pA 3 1.5pA 1.5pA 3>")

def test_prechac_marks_sides_off_the_default_order():
    # the odd table gives A two right hands and B two left hands
    assert formatters.prechac(Pattern(2, "5")) == "<R2.5pB R2.5pB | L2.5pxA L2.5pxA>"
    assert formatters.prechac(Pattern(3, "7")) == (
        "<2.333pB 2.333pB | L2.333pC R2.333pC | 2.333pA 2.333pA>")

@pytest.mark.parametrize("notation", ["633", "7", "5", "966", "b97", "86277", "501", "53"])
def test_prechac_throws_land_in_throwing_hands(notation):
    assert _lands_everywhere(formatters.prechac(Pattern(2, notation)))

def test_joepass_two_jugglers():
    assert formatters.joepass(Pattern(2, "7")) == (
        "#sx\n"
        "#objectCount 7\n"
        "#jugglerDelay 1 0\n"
        "#jugglerDelay 2 0.5\n"
        "#D -\n"
        "< 3.5p | 3.5p >\n"
        "< 3.5p | 3.5p >\n")

def test_joepass_633_blocks():
    lines = formatters.joepass(Pattern(2, "633")).splitlines()
    assert lines[1] == "#objectCount 4"
    assert lines[5:] == [
        "< 1.5p | 1.5p >",
        "< 3 | 1.5p >",
        "< 1.5p | 3 >",
        "< 1.5p | 1.5p >",
        "< 3 | 1.5p >",
        "< 1.5p | 3 >",
    ]

def test_joepass_names_catcher_for_three_jugglers():
    text = formatters.joepass(Pattern(3, "7"), line_end="<br/>")
    assert text == (
        "#sx<br/>"
        "#objectCount 7<br/>"
        "#jugglerDelay 1 0<br/>"
        "#jugglerDelay 2 0.333<br/>"
        "#jugglerDelay 3 0.667<br/>"
        "#D -<br/>"
        "< 2.333p2 | 2.333p3 | 2.333p1 ><br/>"
        "< 2.333p2 | 2.333p3 | 2.333p1 ><br/>")

def test_describe_633():
    assert formatters.describe(Pattern(2, "633")) == (
        "Juggler A: R straight zap to B, L self single, R straight zap to B, "
        "L straight zap to B, R self single, L straight zap to B\n"
        "Juggler B: R diagonal zap to A, L diagonal zap to A, R self single, "
        "L diagonal zap to A, R diagonal zap to A, L self single\n")

def test_describe_line_end():
    text = formatters.describe(Pattern(2, "7"), line_end="<br/>")
    assert text == ("Juggler A: R straight double to B, L straight double to B<br/>"
                    "Juggler B: R diagonal double to A, L diagonal double to A<br/>")

def test_height_names():
    names = [formatters.height_name(Siteswap(0, v, 2, RRLL)) for v in (0, 2, 4, 6, 8, 10, 12, 14)]
    assert names == ["empty", "zip", "hold", "single", "double-hef", "triple",
                     "quad or higher", "quad or higher"]
    assert formatters.height_name(Siteswap(0, 7, 2, RRLL)) == "double"
    assert formatters.height_name(Siteswap(0, 11, 2, RRLL)) == "quad or higher"

def test_describe_throw():
    assert formatters.describe_throw(Siteswap(0, 0, 2, RRLL)) == "empty"
    assert formatters.describe_throw(Siteswap(0, 4, 2, RRLL)) == "self hold"
    assert formatters.describe_throw(Siteswap(0, 5, 2, RRLL)) == "diagonal pass to B"

def test_describe_odd_table_for_two_jugglers():
    assert formatters.describe(Pattern(2, "5")) == (
        "Juggler A: R straight pass to B, R straight pass to B\n"
        "Juggler B: L straight pass to A, L straight pass to A\n")

def test_juggler_letters_stop_at_z():
    assert formatters.juggler_letter(25) == "Z"
    with pytest.raises(LabelError):
        formatters.juggler_letter(26)
