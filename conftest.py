"""Shared fixtures for the tests"""

import struct

import pytest

from qi.console.capabilities import BOOLEAN_NAMES, NUMBER_NAMES, STRING_NAMES
from qi.console.description import parse_description
from qi.console.terminfo import Terminfo

XTERM_TEST = r"""#	Reconstructed via infocmp from file: /usr/share/terminfo/x/xterm-test
xterm-test|xterm-t|xterm terminal emulator for testing,
	am, bce, km, mir, msgr, xenl,
	colors#8, cols#80, it#8, lines#24, pairs#64,
	acsc=``aaffggjjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~,
	bel=^G, bold=\E[1m, clear=\E[H\E[2J, cr=\r,
	cup=\E[%i%p1%d;%p2%dH, cud1=\n, hpa=\E[%i%p1%dG, ht=^I,
	kbs=^?, meml=\El, op=\E[39;49m,
	rep=%p1%c\E[%p2%{1}%-%db, setab=\E[4%p1%dm,
	setaf=\E[3%p1%dm, sgr0=\E(B\E[m, smacs=\E(0,
	XM=\E[?1006;1000%?%p1%{1}%=%th%el%;,
"""


@pytest.fixture
def xterm_text():
    return XTERM_TEST


@pytest.fixture
def xterm_description():
    return parse_description(XTERM_TEST)


@pytest.fixture
def terminfo(xterm_description):
    return Terminfo(description=xterm_description)


def build_compiled(
    names, flags=(), numbers=None, strings=None, extended=None, magic=0o432
):
    """Build compiled terminfo data the way tic lays it out

    extended is an optional (flags, numbers, strings) triple of
    user-defined capabilities."""

    numbers = numbers or {}
    strings = strings or {}
    num_format = "h" if magic == 0o432 else "i"

    def count(table, present):
        indexes = [table.index(name) for name in present]
        return max(indexes) + 1 if indexes else 0

    bool_count = count(BOOLEAN_NAMES, flags)
    num_count = count(NUMBER_NAMES, numbers)
    str_count = count(STRING_NAMES, strings)

    names_bytes = names.encode("latin-1") + b"\x00"
    bools = bytes(1 if BOOLEAN_NAMES[i] in flags else 0 for i in range(bool_count))
    nums = b"".join(
        struct.pack("<" + num_format, numbers.get(NUMBER_NAMES[i], -1))
        for i in range(num_count)
    )

    table = b""
    offsets = []
    for i in range(str_count):
        if STRING_NAMES[i] in strings:
            offsets.append(len(table))
            table += strings[STRING_NAMES[i]] + b"\x00"
        else:
            offsets.append(-1)

    data = struct.pack(
        "<6h", magic, len(names_bytes), bool_count, num_count, str_count, len(table)
    )
    data += names_bytes + bools
    if len(data) % 2:
        data += b"\x00"
    data += nums + struct.pack("<{}h".format(str_count), *offsets) + table

    if extended:
        ext_flags, ext_numbers, ext_strings = extended
        if len(data) % 2:
            data += b"\x00"

        values = b""
        value_offsets = []
        for value in ext_strings.values():
            value_offsets.append(len(values))
            values += value + b"\x00"

        ext_names = list(ext_flags) + list(ext_numbers) + list(ext_strings)
        names_table = b""
        name_offsets = []
        for name in ext_names:
            name_offsets.append(len(names_table))
            names_table += name.encode("latin-1") + b"\x00"

        ext_table = values + names_table
        data += struct.pack(
            "<5h",
            len(ext_flags),
            len(ext_numbers),
            len(ext_strings),
            len(ext_strings) + len(ext_names),
            len(ext_table),
        )
        data += b"\x01" * len(ext_flags)
        if len(data) % 2:
            data += b"\x00"
        data += b"".join(
            struct.pack("<" + num_format, value) for value in ext_numbers.values()
        )
        data += struct.pack("<{}h".format(len(value_offsets)), *value_offsets)
        data += struct.pack("<{}h".format(len(name_offsets)), *name_offsets)
        data += ext_table

    return data


@pytest.fixture
def make_compiled():
    return build_compiled


@pytest.fixture
def xtest_compiled():
    return build_compiled(
        "xtest|xtest terminal",
        flags=("am", "xenl"),
        numbers={"cols": 80, "lines": 24},
        strings={
            "bel": b"\x07",
            "cr": b"\r",
            "cup": b"\x1b[%i%p1%d;%p2%dH",
            "op": b"\x1b[39;49m",
            "setaf": b"\x1b[3%p1%dm",
        },
    )
