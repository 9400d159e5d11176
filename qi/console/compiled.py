"""QI Console compiled terminfo module

Decodes the binary files tic writes (see term(5), STORAGE FORMAT) into a
TerminalDescription. String values are converted back to terminfo source
notation so a description decoded here reads the same as one parsed from
infocmp output.
"""

import logging
import struct

from .capabilities import BOOLEAN_NAMES, NUMBER_NAMES, STRING_NAMES
from .description import (
    CAP_TYPE_FLAG,
    CAP_TYPE_NUMBER,
    CAP_TYPE_STRING,
    Capability,
    TerminalDescription,
    escape,
)
from .exceptions import CompiledTerminfoError

logger = logging.getLogger(__name__)

MAGIC_LEGACY = 0o432  # 16 bit numbers
MAGIC_EXTENDED_NUMBERS = 0o1036  # 32 bit numbers

HEADER_FORMAT = "<6h"
EXTENDED_HEADER_FORMAT = "<5h"

# Values for absent and cancelled numbers and string offsets
ABSENT = -1
CANCELLED = -2


class _Reader(object):
    """Cursor over the compiled data that refuses to read past the end"""

    def __init__(self, data):
        self.data = data
        self.pos = 0

    def remaining(self):
        return len(self.data) - self.pos

    def take(self, size):
        if size < 0 or self.pos + size > len(self.data):
            raise CompiledTerminfoError(
                f"Compiled terminfo is truncated at byte {self.pos}"
            )
        chunk = self.data[self.pos : self.pos + size]
        self.pos += size
        return chunk

    def unpack(self, fmt):
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))

    def values(self, count, fmt):
        if count == 0:
            return ()
        return self.unpack("<{}{}".format(count, fmt))

    def align(self):
        """Sections after the booleans start on an even byte"""
        if self.pos % 2:
            self.take(1)


def is_compiled(data):
    if len(data) < 2:
        return False
    magic = struct.unpack("<h", data[:2])[0]
    return magic in (MAGIC_LEGACY, MAGIC_EXTENDED_NUMBERS)


def parse_compiled(data):
    """Decode compiled terminfo data into a TerminalDescription"""

    reader = _Reader(data)
    magic, names_size, bool_count, num_count, str_count, table_size = reader.unpack(
        HEADER_FORMAT
    )

    if magic == MAGIC_LEGACY:
        num_format = "h"
    elif magic == MAGIC_EXTENDED_NUMBERS:
        num_format = "i"
    else:
        raise CompiledTerminfoError(
            f"Invalid magic number {oct(magic)}. Expected either "
            f"{oct(MAGIC_LEGACY)} or {oct(MAGIC_EXTENDED_NUMBERS)}"
        )

    if bool_count > len(BOOLEAN_NAMES) or num_count > len(NUMBER_NAMES):
        raise CompiledTerminfoError("Compiled terminfo has too many capabilities")
    if str_count > len(STRING_NAMES):
        raise CompiledTerminfoError("Compiled terminfo has too many capabilities")

    names = reader.take(names_size).rstrip(b"\x00").decode("latin-1").split("|")

    bools = reader.take(bool_count)
    reader.align()
    numbers = reader.values(num_count, num_format)
    offsets = reader.values(str_count, "h")
    table = reader.take(table_size)

    capabilities = []
    for index, value in enumerate(bools):
        if value == 1:
            capabilities.append(Capability(BOOLEAN_NAMES[index], CAP_TYPE_FLAG, True))

    for index, value in enumerate(numbers):
        if value >= 0:
            capabilities.append(
                Capability(NUMBER_NAMES[index], CAP_TYPE_NUMBER, value)
            )

    for index, offset in enumerate(offsets):
        if offset >= 0:
            capabilities.append(
                Capability(
                    STRING_NAMES[index], CAP_TYPE_STRING, _table_string(table, offset)
                )
            )

    reader.align()
    if reader.remaining() >= struct.calcsize(EXTENDED_HEADER_FORMAT):
        capabilities += _parse_extended(reader, num_format)

    logger.debug("Decoded compiled terminfo for %s", names[0])
    return TerminalDescription(names[0], names[1:], capabilities)


def _parse_extended(reader, num_format):
    """Decode the user-defined capabilities that follow the standard ones

    The extended string table holds the string values first and then the
    capability names; name offsets are relative to the start of the names."""

    bool_count, num_count, str_count, _, table_size = reader.unpack(
        EXTENDED_HEADER_FORMAT
    )
    if min(bool_count, num_count, str_count, table_size) < 0:
        raise CompiledTerminfoError("Invalid extended capabilities header")

    bools = reader.take(bool_count)
    reader.align()
    numbers = reader.values(num_count, num_format)
    offsets = reader.values(str_count, "h")
    name_offsets = reader.values(bool_count + num_count + str_count, "h")
    table = reader.take(table_size)

    names_start = 0
    for offset in offsets:
        if offset >= 0:
            end = table.find(b"\x00", offset)
            if end < 0:
                raise CompiledTerminfoError("Unterminated extended string")
            names_start = max(names_start, end + 1)

    names = [_table_string(table, names_start + offset) for offset in name_offsets]

    capabilities = []
    for index, value in enumerate(bools):
        if value == 1:
            capabilities.append(Capability(names[index], CAP_TYPE_FLAG, True))

    for index, value in enumerate(numbers):
        if value >= 0:
            capabilities.append(
                Capability(names[bool_count + index], CAP_TYPE_NUMBER, value)
            )

    for index, offset in enumerate(offsets):
        if offset >= 0:
            code = names[bool_count + num_count + index]
            capabilities.append(
                Capability(code, CAP_TYPE_STRING, _table_string(table, offset))
            )

    return capabilities


def _table_string(table, offset):
    end = table.find(b"\x00", offset)
    if offset >= len(table) or end < 0:
        raise CompiledTerminfoError(f"Bad string table offset {offset}")
    return escape(table[offset:end].decode("latin-1"))
