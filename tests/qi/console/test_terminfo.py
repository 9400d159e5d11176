"""Tests for QI console terminfo"""

# pylint: disable=protected-access

import sys

import pytest

from qi.console import tparm
from qi.console.description import parse_description
from qi.console.exceptions import MissingParametersError, TerminfoEnvironmentError
from qi.console.loader import DescriptionLoader
from qi.console.terminfo import Terminfo


@pytest.fixture
def no_description(mocker):
    mocker.patch.object(DescriptionLoader, "load", return_value=None)
    return Terminfo()


def test_terminfo(terminfo):
    assert terminfo.has_terminfo_db is True
    assert terminfo.names == ("xterm-test", "xterm-t", "xterm terminal emulator for testing")


def test_terminfo_loads_description(mocker, xterm_description):
    load = mocker.patch.object(DescriptionLoader, "load", return_value=xterm_description)
    terminfo = Terminfo(override_terminal="xterm-test")
    load.assert_called_once_with()
    assert terminfo.loader.override_terminal == "xterm-test"
    assert terminfo.has_capability("am") is True


def test_terminfo_outside_command_line(mocker):
    mocker.patch.object(sys, "argv", [])
    with pytest.raises(TerminfoEnvironmentError):
        Terminfo()


def test_terminfo_under_cgi(monkeypatch, xterm_description):
    monkeypatch.setenv("GATEWAY_INTERFACE", "CGI/1.1")
    with pytest.raises(TerminfoEnvironmentError):
        Terminfo(description=xterm_description)


def test_end_to_end():
    description = parse_description("xterm|xterm terminal,\n\tam, cols#80, setaf=\\E[3%p1%dm,\n")
    terminfo = Terminfo(description=description)
    assert terminfo.has_capability("am") is True
    assert terminfo.get_capability("am") is True
    assert terminfo.get_capability("cols") == 80
    assert terminfo.do_capability("setaf", 1) == "\x1b[31m"


def test_get_capability(terminfo):
    assert terminfo.get_capability("op") == "\\E[39;49m"
    assert terminfo.get_capability("nonexistent") is False


def test_get_capability_verbose(terminfo):
    result = terminfo.get_capability("op", True)
    assert result.startswith("op : (orig_pair) Set default pair to its original value = '")

    result = terminfo.get_capability("am", verbose=True)
    assert result == "am : (auto_right_margin) terminal has automatic margins = 'true'"

    assert terminfo.get_capability("xxxxxx", True) is False


def test_display_capability(terminfo):
    result = terminfo.display_capability("op")
    assert result == "op : (orig_pair) Set default pair to its original value = '\\E[39;49m'"


def test_display_capability_not_capable(terminfo):
    result = terminfo.display_capability("sgr1")
    assert result == (
        "sgr1 : (set_a_attributes) "
        "Define second set of video attributes #1-#6 = 'NOT CAPABLE'"
    )
    assert result.endswith("NOT CAPABLE'")


def test_display_capability_not_found(terminfo):
    assert terminfo.display_capability("nonexistent") == "nonexistent : NOT FOUND"


def test_display_capability_non_standard(terminfo):
    assert terminfo.display_capability("meml") == "meml : (non-standard) = '\\El'"


def test_has_capability(terminfo):
    assert terminfo.has_capability("am") is True
    assert terminfo.has_capability("cols") is True
    assert terminfo.has_capability("barnacle") is False


def test_no_description(no_description):
    assert no_description.has_terminfo_db is False
    assert no_description.names == ()
    assert no_description.has_capability("am") is False
    assert no_description.get_capability("am") is False
    assert no_description.do_capability("cup", 1, 2) == ""
    assert no_description.display_capability("am").endswith("'NOT CAPABLE'")


def test_no_description_dump(no_description, capsys):
    no_description.dump()
    no_description.dump_cache()
    captured = capsys.readouterr()
    assert captured.out == ""


def test_dump(terminfo, capsys):
    terminfo.dump()
    captured = capsys.readouterr()
    assert "[am] => (terminal has automatic margins)  'true'\n" in captured.out
    assert "[cols] => (number of columns in a line)  '80'\n" in captured.out
    # non-standard capabilities are left out
    assert "[meml]" not in captured.out
    assert "[XM]" not in captured.out


def test_dump_cache(terminfo, capsys):
    terminfo.do_capability("op")
    terminfo.do_capability("setaf", 1)
    terminfo.do_capability("op")

    terminfo.dump_cache()
    captured = capsys.readouterr()
    assert captured.out == (
        "op => 1B 5B 33 39 3B 34 39 6D \n" "setaf-1 => 1B 5B 33 31 6D \n"
    )


def test_do_capability(terminfo):
    assert terminfo.do_capability("op") == "\x1b[39;49m"
    assert terminfo.do_capability("clear") == "\x1b[H\x1b[2J"
    assert terminfo.do_capability("cup", 2, 4) == "\x1b[3;5H"
    assert terminfo.do_capability("setab", 5) == "\x1b[45m"
    assert terminfo.do_capability("hpa", 9) == "\x1b[10G"
    assert terminfo.do_capability("rep", "x", 5) == "x\x1b[4b"
    assert terminfo.do_capability("XM", 1) == "\x1b[?1006;1000h"
    assert terminfo.do_capability("XM", 0) == "\x1b[?1006;1000l"


def test_do_capability_control_characters(terminfo):
    assert terminfo.do_capability("bel") == "\x07"
    assert terminfo.do_capability("cr") == "\r"
    assert terminfo.do_capability("cud1") == "\n"
    assert terminfo.do_capability("ht") == "\t"
    assert terminfo.do_capability("kbs") == "\x7f"


def test_do_capability_not_a_string(terminfo):
    assert terminfo.do_capability("am") == ""
    assert terminfo.do_capability("cols") == ""
    assert terminfo.do_capability("barnacle") == ""


def test_do_capability_missing_parameters(terminfo):
    with pytest.raises(MissingParametersError) as excinfo:
        terminfo.do_capability("cup", 1)

    assert excinfo.value.cap_name == "cup"
    assert excinfo.value.expected == 2
    assert excinfo.value.received == 1
    assert "'cup'" in str(excinfo.value)
    assert "received 1, expecting 2" in str(excinfo.value)


def test_do_capability_with_cache(terminfo, mocker):
    expand = mocker.patch("qi.console.terminfo.expand", wraps=tparm.expand)

    first = terminfo.do_capability("cup", 7, 2)
    second = terminfo.do_capability("cup", 7, 2)

    assert first == second == "\x1b[8;3H"
    assert expand.call_count == 1

    terminfo.do_capability("cup", 2, 7)
    assert expand.call_count == 2


def test_cache_key_keeps_parameters_apart(terminfo):
    assert terminfo.do_capability("cup", 1, 2) == "\x1b[2;3H"
    with pytest.raises(MissingParametersError):
        terminfo.do_capability("cup", "1-2")


def test_do_capability_keeps_arguments(terminfo):
    args = [7, 2]
    terminfo.do_capability("cup", *args)
    assert args == [7, 2]


def test_hex_dump_is_opt_in(tmp_path, monkeypatch, capsys, xtest_compiled):
    (tmp_path / "x").mkdir()
    (tmp_path / "x" / "xtest").write_bytes(xtest_compiled)
    monkeypatch.setenv("TERMINFO", str(tmp_path))

    terminfo = Terminfo(force_bin=True, override_terminal="xtest", hexdump=False)
    assert terminfo.do_capability("cup", 2, 4) == "\x1b[3;5H"
    assert capsys.readouterr().out == ""

    Terminfo(force_bin=True, override_terminal="xtest", hexdump=True)
    captured = capsys.readouterr()
    assert captured.out.startswith("1A 01 ")
    assert "| .." in captured.out

    terminfo.hex_dump()
    assert capsys.readouterr().out.startswith("1A 01 ")
