"""Tests for QI console tparm"""

import pytest

from qi.console.description import unescape
from qi.console.tparm import (
    expand,
    get_required_parm_count,
    process_capability_parms,
    to_number,
)

SETAF_256 = (
    "\\E[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;m"
)


def run(cap_string, *args):
    return expand(cap_string, ["test"] + list(args))


@pytest.mark.parametrize(
    "cap_string, count",
    [
        ("%p1%d", 1),
        ("%i%p1%p2%d%d", 2),
        ("\\E[H\\E[2J", 0),
        ("%i", 1),
        ("%p2%d", 2),
        ("%%p3", 0),
        ("%?%p1%t%p1%d%e%p9%d%;", 9),
        (SETAF_256, 1),
    ],
)
def test_get_required_parm_count(cap_string, count):
    assert get_required_parm_count(cap_string) == count


def test_fast_path_matches_interpreter():
    cap_string = "\\E[H\\E[2J\\E(B^J\\017"
    fast = expand(cap_string, ["clear"])
    slow = process_capability_parms(unescape(cap_string), ["clear"])
    assert fast == slow == "\x1b[H\x1b[2J\x1b(B\n\x0f"


def test_caret_notation():
    assert run("^J") == "\n"
    assert run("^H") == "\b"
    assert run("^[") == "\x1b"
    assert run("^?") == "\x7f"


def test_conditional():
    assert run("%?%p1%t1%e0%;", True) == "1"
    assert run("%?%p1%t1%e0%;", 1) == "1"
    assert run("%?%p1%t1%e0%;", False) == "0"
    assert run("%?%p1%t1%e0%;", 0) == "0"


def test_conditional_without_else():
    assert run("a%?%p1%tb%;c", 1) == "abc"
    assert run("a%?%p1%tb%;c", 0) == "ac"


def test_nested_conditional():
    cap_string = "%?%p1%t%?%p2%tA%eB%;%eC%;"
    assert run(cap_string, 1, 1) == "A"
    assert run(cap_string, 1, 0) == "B"
    assert run(cap_string, 0, 1) == "C"


def test_else_if_chain():
    assert run(SETAF_256, 1) == "\x1b[31m"
    assert run(SETAF_256, 9) == "\x1b[91m"
    assert run(SETAF_256, 196) == "\x1b[38;5;196m"


def test_percent():
    assert run("100%%") == "100%"
    assert run("%p1%d%%", 50) == "50%"


def test_formats():
    assert run("%p1%d", 42) == "42"
    assert run("%p1%o", 8) == "10"
    assert run("%p1%x", 255) == "ff"
    assert run("%p1%X", 255) == "FF"
    assert run("%p1%c", 65) == "A"
    assert run("%p1%c", "B") == "B"
    assert run("%p1%s", "abc") == "abc"


def test_formats_with_flags():
    assert run("%p1%02x", 10) == "0a"
    assert run("%p1%3d|", 7) == "  7|"
    assert run("%p1%:-3d|", 7) == "7  |"
    assert run("%p1%:+d", 7) == "+7"
    assert run("%p1%#x", 255) == "0xff"
    assert run("%p1%#o", 8) == "010"
    assert run("%p1%.3d", 7) == "007"


def test_char_zero_is_not_nul():
    assert run("%p1%c", 0) == "\x80"


def test_increment():
    assert run("%i%p1%d;%p2%d", 1, 2) == "2;3"
    assert run("\\E[%i%p1%d;%p2%dH", 0, 0) == "\x1b[1;1H"


def test_increment_keeps_parms():
    parms = ["cup", 1, 2]
    process_capability_parms("%i%p1%d;%p2%d", parms)
    assert parms == ["cup", 1, 2]


def test_constants():
    assert run("%{8}%d") == "8"
    assert run("%{16}%d") == "16"
    assert run("%'A'%d") == "65"
    assert run("%{65}%c") == "A"


def test_char_constant_comparison():
    cap_string = "%{a}%p1%=%t1%e0%;"
    assert run(cap_string, "a") == "1"
    assert run(cap_string, "b") == "0"


def test_equal_pops_both():
    assert run("%p1%p2%=%d", 3, 3) == "1"
    assert run("%p1%p2%=%d", 3, 4) == "0"
    assert run("%p1%p2%=%p1%d%d", 3, 4) == "30"


def test_arithmetic():
    assert run("%p1%p2%+%d", 3, 4) == "7"
    assert run("%p1%p2%-%d", 3, 4) == "-1"
    assert run("%p1%p2%*%d", 3, 4) == "12"
    assert run("%p1%p2%/%d", 7, 2) == "3"
    assert run("%p1%p2%/%d", -7, 2) == "-3"
    assert run("%p1%p2%m%d", 7, 2) == "1"
    assert run("%p1%p2%m%d", -7, 2) == "-1"
    assert run("%p1%p2%/%d", 7, 0) == "0"
    assert run("%p1%p2%m%d", 7, 0) == "0"


def test_bit_and_logic_operators():
    assert run("%p1%p2%&%d", 6, 3) == "2"
    assert run("%p1%p2%|%d", 6, 3) == "7"
    assert run("%p1%p2%^%d", 6, 3) == "5"
    assert run("%p1%p2%<%d", 1, 2) == "1"
    assert run("%p1%p2%>%d", 1, 2) == "0"
    assert run("%p1%p2%A%d", 1, 0) == "0"
    assert run("%p1%p2%O%d", 1, 0) == "1"
    assert run("%p1%!%d", 0) == "1"
    assert run("%p1%~%d", 0) == "-1"


def test_variables():
    assert run("%p1%Pa%ga%ga%+%d", 5) == "10"
    assert run("%p1%PZ%gZ%d", 3) == "3"
    assert run("%gb%d") == "0"


def test_strlen():
    assert run("%p1%l%d", "abcd") == "4"


def test_empty_stack_pops_zero():
    assert run("%d") == "0"


def test_unknown_operator_is_ignored():
    assert run("a%zb") == "ab"
    assert run("trailing%") == "trailing"


def test_to_number():
    assert to_number(True) == 1
    assert to_number(7) == 7
    assert to_number("12") == 12
    assert to_number("a") == 97
    assert to_number("abc") == 0
    assert to_number(None) == 0


def test_only_ascii_digits_are_parameters():
    assert get_required_parm_count("%p²%d") == 0
    assert run("%p²%d", 5) == "0"
    assert run("%p1%²d", 5) == "d"
