"""QI Console terminal description module

Holds the parsed capabilities of one terminal and the parser for terminfo
source text, as printed by infocmp.
"""

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Capability type constants
CAP_TYPE_FLAG = 1
CAP_TYPE_NUMBER = 2
CAP_TYPE_STRING = 3
CAP_TYPE_NUMBER_CHAR = "#"
CAP_TYPE_STRING_CHAR = "="

CAP_TYPES = {
    CAP_TYPE_NUMBER_CHAR: CAP_TYPE_NUMBER,
    CAP_TYPE_STRING_CHAR: CAP_TYPE_STRING,
}

ESC = "\x1b"
OCTAL_DIGITS = "01234567"

# Single character backslash escapes of terminfo source notation
_BACKSLASH_ESCAPES = {
    "E": ESC,
    "e": ESC,
    "n": "\n",
    "l": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "a": "\x07",
    "s": " ",
}

# Raw characters that are written back as backslash escapes
_RAW_ESCAPES = {
    ESC: "\\E",
    "\n": "\\n",
    "\r": "\\r",
    " ": "\\s",
    ",": "\\,",
    "^": "\\^",
    "\\": "\\\\",
}


class Capability(object):
    """A single capability value: a flag, a number or a string template"""

    __slots__ = ("code", "kind", "value")

    def __init__(self, code, kind, value):
        self.code = code
        self.kind = kind
        self.value = value

    def is_flag(self):
        return self.kind == CAP_TYPE_FLAG

    def is_number(self):
        return self.kind == CAP_TYPE_NUMBER

    def is_string(self):
        return self.kind == CAP_TYPE_STRING

    def __eq__(self, other):
        if not isinstance(other, Capability):
            return NotImplemented
        return (self.code, self.kind, self.value) == (
            other.code,
            other.kind,
            other.value,
        )

    def __repr__(self):
        return f"Capability({self.code!r}, {self.kind!r}, {self.value!r})"


class TerminalDescription(object):
    """The name, aliases and capabilities of one terminal type

    Built once and read-only afterwards; capabilities keep the order they
    were defined in."""

    def __init__(self, name, aliases=None, capabilities=None):
        self.name = name
        self.aliases = tuple(aliases or ())

        caps = {}
        for cap in capabilities or ():
            caps[cap.code] = cap
        self._capabilities = MappingProxyType(caps)

    @property
    def capabilities(self):
        return self._capabilities

    @property
    def long_name(self):
        """The last name in the header is conventionally a description"""
        if self.aliases:
            return self.aliases[-1]
        return self.name

    @property
    def names(self):
        return (self.name,) + self.aliases

    def get(self, code):
        return self._capabilities.get(code)

    def __contains__(self, code):
        return code in self._capabilities

    def __iter__(self):
        return iter(self._capabilities.values())

    def __len__(self):
        return len(self._capabilities)

    def __repr__(self):
        return f"<TerminalDescription {self.name} ({len(self)} capabilities)>"


def parse_description(data):
    """Parse terminfo source text into a TerminalDescription

    data is either the whole text or a sequence of lines. Returns None when
    there is no header line to name the terminal."""

    if isinstance(data, str):
        lines = data.splitlines()
    else:
        lines = list(data or [])

    # Drop comments (infocmp starts with "#\tReconstructed via infocmp...")
    content = []
    for line in lines:
        line = line.strip()
        if line == "" or line.startswith("#"):
            continue
        content.append(line)

    if not content:
        return None

    # The first line is the header; it may carry capabilities after its
    # first comma
    header_fields = split_definitions(content[0])
    if not header_fields:
        return None

    header = header_fields[0].strip(",\t\r\n ")
    if header == "":
        return None

    names = header.split("|")
    definitions = header_fields[1:] + split_definitions("".join(content[1:]))

    capabilities = []
    for definition in definitions:
        cap = parse_capability(definition)
        if cap is not None:
            capabilities.append(cap)

    return TerminalDescription(names[0], names[1:], capabilities)


def split_definitions(text):
    """Split terminfo source on commas that are not escaped"""

    definitions = []
    current = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "\\" and pos + 1 < length:
            current.append(text[pos : pos + 2])
            pos += 2
            continue
        if char == ",":
            definitions.append("".join(current))
            current = []
        else:
            current.append(char)
        pos += 1

    if current:
        definitions.append("".join(current))

    return [d for d in definitions if d.strip() != ""]


def parse_capability(definition):
    """Parse one capability definition

    Returns a Capability, or None for empty and cancelled definitions"""

    definition = definition.strip()
    if definition == "":
        return None

    # The first separator decides the kind; '#' or '=' inside a string
    # value is part of the value
    split_at = None
    for pos, char in enumerate(definition):
        if char in CAP_TYPES:
            split_at = pos
            break

    if not split_at:
        if definition.endswith("@"):
            # Cancelled capability
            return None
        return Capability(definition, CAP_TYPE_FLAG, True)

    code = definition[:split_at]
    value = definition[split_at + 1 :]
    kind = CAP_TYPES[definition[split_at]]

    if kind == CAP_TYPE_NUMBER:
        number = parse_number(value)
        if number is None:
            logger.warning("Ignoring capability %s with bad number %r", code, value)
            return None
        return Capability(code, kind, number)

    return Capability(code, kind, value)


def parse_number(value):
    value = value.strip()
    try:
        return int(value, 0)
    except ValueError:
        pass

    try:
        # int() refuses leading zeroes with base 0
        return int(value, 10)
    except ValueError:
        return None


def unescape(text):
    """Decode terminfo source notation into the characters it stands for

    Handles the backslash escapes, octal escapes and caret notation (^J)."""

    out = []
    pos = 0
    length = len(text)
    # True right after a % that starts an operator
    in_operator = False
    while pos < length:
        char = text[pos]
        after_percent = in_operator
        in_operator = char == "%" and not after_percent
        if char == "\\" and pos + 1 < length:
            pos += 1
            char = text[pos]
            if char in _BACKSLASH_ESCAPES:
                out.append(_BACKSLASH_ESCAPES[char])
            elif char in OCTAL_DIGITS:
                digits = char
                while (
                    len(digits) < 3
                    and pos + 1 < length
                    and text[pos + 1] in OCTAL_DIGITS
                ):
                    pos += 1
                    digits += text[pos]
                code = int(digits, 8) & 0xFF
                # \0 is stored as \200, since NUL ends a compiled string
                out.append(chr(code or 0o200))
            else:
                # \^ \\ \, \: and anything unknown stand for themselves
                out.append(char)
        elif char == "^" and pos + 1 < length and not after_percent:
            # %^ is the xor operator, not caret notation; %%^A is a
            # literal percent and then ^A
            pos += 1
            out.append(control_character(text[pos]))
        else:
            out.append(char)
        pos += 1

    return "".join(out)


def control_character(char):
    """Caret notation: ^J is LF, ^[ is ESC, ^? is DEL"""
    if char == "?":
        return "\x7f"
    return chr(ord(char) & 0x1F)


def escape(raw):
    """Encode raw characters into terminfo source notation"""

    out = []
    for char in raw:
        code = ord(char)
        if char in _RAW_ESCAPES:
            out.append(_RAW_ESCAPES[char])
        elif code < 32:
            out.append("^" + chr(code + 64))
        elif code == 127:
            out.append("^?")
        elif code >= 128:
            out.append(f"\\{code:03o}")
        else:
            out.append(char)

    return "".join(out)
