"""Tests for terminfoclient module"""

# pylint: disable=redefined-outer-name

import pytest

from qi.console.description import parse_description
from qi.console.exceptions import TerminfoEnvironmentError
from qi.console.terminal import Terminal
from qi.console.terminfo import Terminfo
from terminfoclient.__main__ import main, parse_args
from terminfoclient.terminfoclient import TerminfoClient


@pytest.fixture
def client(terminfo):
    return TerminfoClient(terminfo, terminal=Terminal(terminfo=terminfo))


def test_client(client, terminfo):
    assert client.terminfo is terminfo
    assert client.prompt == "terminfo> "
    assert isinstance(client.terminal, Terminal)


def test_get_attr(client, capsys):
    """Test the special __getattr__ method on client"""

    with pytest.raises(AttributeError):
        client.make_pizza()

    # Help method that doesn't have a corresponding do_ method
    with pytest.raises(AttributeError):
        client.help_make_pizza()

    client.help_show()
    captured = capsys.readouterr()
    assert captured.out.startswith("Describe capabilities\nUsage: show <capname>")


def test_help_expand(client, capsys):
    client.onecmd("help expand")
    captured = capsys.readouterr()
    assert "Usage: expand [options] <capname> [<param> ...]" in captured.out
    assert "  -x, --hex    Display the bytes in hex" in captured.out


def test_emptyline(client):
    assert client.emptyline() == 0


def test_eof(client, capsys):
    assert client.do_EOF("") is True
    assert capsys.readouterr().out == "\n"


def test_names(client, capsys):
    assert client.do_names("") == 0
    captured = capsys.readouterr()
    assert captured.out == (
        "xterm-test\n"
        "  xterm-t\n"
        "  xterm terminal emulator for testing\n"
        "Loaded from None\n"
    )


def test_names_no_description(capsys, mocker):
    mocker.patch("qi.console.terminfo.DescriptionLoader.load", return_value=None)
    terminfo = Terminfo(override_terminal="nosuchterm")
    client = TerminfoClient(terminfo, terminal=Terminal(terminfo=terminfo))

    assert client.do_names("") == 1
    assert capsys.readouterr().out == "No terminfo description\n"


def test_dump(client, capsys):
    assert client.do_dump("") == 0
    captured = capsys.readouterr()
    assert "[am] => (terminal has automatic margins)  'true'\n" in captured.out
    assert "[meml]" not in captured.out


def test_show(client, capsys):
    assert client.do_show("am cup bw barnacle meml") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "am : (auto_right_margin) terminal has automatic margins = 'true'",
        "cup : (cursor_address) move to row #1 columns #2 = '\\E[%i%p1%d;%p2%dH'",
        "bw : (auto_left_margin) cub1 wraps from column 0 to last column = "
        "'NOT CAPABLE'",
        "barnacle : NOT FOUND",
        "meml : (non-standard) = '\\El'",
    ]


def test_show_missing_argument(client, capsys):
    assert client.do_show("") == 1
    assert capsys.readouterr().out == "Missing argument\n"


def test_expand(client, capsys):
    assert client.do_expand("cup 4 10") == 0
    assert capsys.readouterr().out == "\x1b[5;11H"


def test_expand_hex(client, capsys):
    assert client.do_expand("--hex setaf 1") == 0
    assert capsys.readouterr().out == "1B 5B 33 31 6D\n"

    assert client.do_expand("-x rep a 3") == 0
    assert capsys.readouterr().out == "61 1B 5B 32 62\n"


def test_expand_no_parameters(client, capsys):
    assert client.do_expand("clear") == 0
    assert capsys.readouterr().out == "\x1b[H\x1b[2J"


def test_expand_missing_parameters(client, capsys):
    assert client.do_expand("cup 4") == 2
    captured = capsys.readouterr()
    assert captured.out == (
        "Too few parameters for call to 'cup': received 1, expecting 2\n"
    )


def test_expand_missing_argument(client, capsys):
    assert client.do_expand("") == 1
    assert capsys.readouterr().out == "Missing argument\n"


def test_expand_not_capable(client, capsys):
    assert client.do_expand("barnacle") == 1
    assert capsys.readouterr().out == "Not capable of 'barnacle'\n"


def test_cache(client, capsys):
    client.do_expand("setaf 1")
    client.do_expand("op")
    capsys.readouterr()

    assert client.do_cache("") == 0
    captured = capsys.readouterr()
    assert captured.out == (
        "setaf-1 => 1B 5B 33 31 6D \n" "op => 1B 5B 33 39 3B 34 39 6D \n"
    )


def test_hexdump(tmp_path, monkeypatch, xtest_compiled, capsys):
    (tmp_path / "x").mkdir()
    (tmp_path / "x" / "xtest").write_bytes(xtest_compiled)
    monkeypatch.setenv("TERMINFO", str(tmp_path))

    terminfo = Terminfo(
        override_terminal="xtest", description=parse_description("xtest|xtest,am,")
    )
    client = TerminfoClient(terminfo, terminal=Terminal(terminfo=terminfo))

    assert client.do_hexdump("") == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("1A 01 ")


def test_hexdump_not_read(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("TERMINFO", str(tmp_path))
    terminfo = Terminfo(
        override_terminal="xtest", description=parse_description("xtest|xtest,am,")
    )
    client = TerminfoClient(terminfo, terminal=Terminal(terminfo=terminfo))

    assert client.do_hexdump("") == 1
    assert capsys.readouterr().out == "The compiled terminfo file was not read\n"


def test_parse_args():
    argv = ["-T", "vt100", "--force-bin", "expand", "--hex", "cup", "1", "2"]
    pargs = parse_args(argv)
    assert pargs.term == "vt100"
    assert pargs.force_bin is True
    assert pargs.hexdump is False
    assert pargs.command == ["expand", "--hex", "cup", "1", "2"]


def test_main_command(mocker, terminfo, capsys):
    mock_terminfo = mocker.patch(
        "terminfoclient.__main__.Terminfo", return_value=terminfo
    )

    assert main(["-T", "xterm-test", "expand", "--hex", "setaf", "2"]) == 0
    assert capsys.readouterr().out == "1B 5B 33 32 6D\n"
    mock_terminfo.assert_called_once_with(
        force_bin=False, override_terminal="xterm-test", hexdump=None
    )


def test_main_command_fails(mocker, terminfo, capsys):
    mocker.patch("terminfoclient.__main__.Terminfo", return_value=terminfo)
    assert main(["expand", "barnacle"]) == 1
    assert capsys.readouterr().out == "Not capable of 'barnacle'\n"


def test_main_no_description(mocker, capsys):
    mocker.patch("qi.console.terminfo.DescriptionLoader.load", return_value=None)
    assert main(["-T", "nosuchterm", "names"]) == 1
    assert capsys.readouterr().err == "No terminfo description found\n"


def test_main_environment_error(mocker, capsys):
    mocker.patch(
        "terminfoclient.__main__.Terminfo",
        side_effect=TerminfoEnvironmentError("Is this not a shell terminal?"),
    )
    assert main(["names"]) == 1
    assert capsys.readouterr().err == "Is this not a shell terminal?\n"


def test_main_interactive(mocker, terminfo):
    mocker.patch("terminfoclient.__main__.Terminfo", return_value=terminfo)
    cmdloop = mocker.patch.object(TerminfoClient, "cmdloop")

    assert main([]) == 0
    cmdloop.assert_called_once()


def test_expand_parameter_types(client, capsys):
    assert client.do_expand("-x rep ² -1") == 0
    assert capsys.readouterr().out == "B2 1B 5B 2D 32 62\n"
