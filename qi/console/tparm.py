"""QI Console tparm module

Expands the parameterized strings of terminfo (see terminfo(5), Parameterized
Strings). Ported from the tput library: _nc_tparm_analyze() and tparm() in
ncurses/tinfo/lib_tparm.c.

Parameters are passed as a list whose 0th item is the capability name, so
%p1 refers to parms[1].
"""

import logging

from .description import unescape

logger = logging.getLogger(__name__)

FORMAT_CONVERSIONS = "doxXs"
FORMAT_FLAGS = "-+# "
DIGITS = "0123456789"


def get_required_parm_count(cap_string):
    """Count how many parms are needed for this capability

    Conditionals are not evaluated, so parameters referenced only in a
    branch that is never taken are still counted."""

    popcount = 0  # highest param number
    str_len = len(cap_string)

    cp = 0
    while cp < str_len:
        if cap_string[cp] == "%" and cp + 1 < str_len:
            cp += 1
            verb = cap_string[cp]
            if verb == "i":
                popcount = max(popcount, 1)
            elif verb == "p" and cp + 1 < str_len:
                cp += 1
                if cap_string[cp] in DIGITS:
                    popcount = max(popcount, int(cap_string[cp]))
        cp += 1

    return popcount


def expand(cap_string, parms):
    """Expand a capability string in terminfo source notation

    Strings without any % operator take the fast path and only have their
    escapes decoded."""

    if "%" not in cap_string and get_required_parm_count(cap_string) == 0:
        return unescape(cap_string)

    return process_capability_parms(unescape(cap_string), parms)


def process_capability_parms(cap_string, parms):
    """Fold in the parms supplied into the cap_string

    cap_string has its escapes already decoded. The parms list is copied,
    %i never changes the caller's list."""
    return _Machine(cap_string, parms).run()


def to_number(value):
    """Numeric value of a stack item"""

    if isinstance(value, int):
        return int(value)

    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        if len(value) == 1:
            return ord(value)

    return 0


def _c_div(x, y):
    """Integer division truncating toward zero, as C does"""
    if y == 0:
        return 0
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


class _Machine(object):
    """State of one expansion: the parms, the stack and the variables"""

    def __init__(self, cap_string, parms):
        self.cap_string = cap_string
        self.strlen = len(cap_string)
        self.parms = list(parms)
        self.stack = []
        self.static_vars = {}
        self.dynamic_vars = {}
        self.out = []
        self.cp = 0

    def push(self, value):
        self.stack.append(value)

    def pop(self):
        if not self.stack:
            return 0
        return self.stack.pop()

    def pop_number(self):
        return to_number(self.pop())

    def next_char(self):
        """Advance the cursor and return the character there, or ''"""
        self.cp += 1
        if self.cp >= self.strlen:
            return ""
        return self.cap_string[self.cp]

    def run(self):
        while self.cp < self.strlen:
            char = self.cap_string[self.cp]
            if char != "%":
                self.out.append(char)
            else:
                verb = self.next_char()
                if verb:
                    self.do_verb(verb)
            self.cp += 1

        return "".join(self.out)

    def do_verb(self, verb):
        # pylint: disable=too-many-branches,too-many-statements
        if verb == "%":
            self.out.append("%")
        elif verb == "c":
            value = self.pop()
            if isinstance(value, str):
                self.out.append(value[:1])
            else:
                # NUL can't be sent, tparm substitutes \200
                self.out.append(chr(to_number(value) & 0xFF or 0o200))
        elif verb in FORMAT_CONVERSIONS or verb in ":# ." or verb in DIGITS:
            self.do_format(verb)
        elif verb == "p":
            index = self.next_char()
            if index and index in DIGITS:
                index = int(index)
                self.push(self.parms[index] if index < len(self.parms) else 0)
        elif verb == "P":
            name = self.next_char()
            if name.isupper():
                self.static_vars[name] = self.pop()
            elif name.islower():
                self.dynamic_vars[name] = self.pop()
        elif verb == "g":
            name = self.next_char()
            if name.isupper():
                self.push(self.static_vars.get(name, 0))
            elif name.islower():
                self.push(self.dynamic_vars.get(name, 0))
        elif verb == "'":
            # %'c' char constant
            self.push(ord(self.next_char() or "\0"))
            self.next_char()  # closing quote
        elif verb == "{":
            self.push_constant()
        elif verb == "l":
            self.push(len(str(self.pop())))
        elif verb in "+-*/m&|^<>AO":
            self.do_binary(verb)
        elif verb == "=":
            x = self.pop()
            y = self.pop()
            self.push(self._equal(x, y))
        elif verb == "!":
            self.push(int(not self.pop_number()))
        elif verb == "~":
            self.push(~self.pop_number())
        elif verb == "i":
            for index in (1, 2):
                if index < len(self.parms):
                    self.parms[index] = to_number(self.parms[index]) + 1
        elif verb == "t":
            if not self.pop_number():
                # skip forward to the next %e or %; in level 0
                self.skip(stop_at_else=True)
        elif verb == "e":
            # skip forward to the next %; in level 0
            self.skip(stop_at_else=False)
        # %? and %; only mark where %t and %e skip to, anything else is
        # not an operator this knows about

    def push_constant(self):
        """%{nn} pushes an integer, a non-numeric %{c} pushes the character"""

        end = self.cap_string.find("}", self.cp + 1)
        if end < 0:
            end = self.strlen

        literal = self.cap_string[self.cp + 1 : end]
        self.cp = end
        try:
            self.push(int(literal))
        except ValueError:
            self.push(literal)

    def do_format(self, verb):
        """%[[:]flags][width[.precision]][doxXs]"""

        start = self.cp
        flags = ""
        if verb == ":":
            verb = self.next_char()
            while verb and verb in FORMAT_FLAGS:
                flags += verb
                verb = self.next_char()
        while verb and verb in "# ":
            flags += verb
            verb = self.next_char()

        width = ""
        while verb and verb in DIGITS + ".":
            width += verb
            verb = self.next_char()

        if verb not in FORMAT_CONVERSIONS or verb == "":
            logger.debug(
                "Ignoring format %%%s", self.cap_string[start : self.cp + 1]
            )
            return

        spec = "%" + flags + width + verb
        if verb == "s":
            text = spec % str(self.pop())
        else:
            text = spec % self.pop_number()
            if verb == "o" and "#" in flags:
                text = text.replace("0o", "0", 1)

        self.out.append(text)

    def do_binary(self, verb):
        y = self.pop_number()
        x = self.pop_number()

        if verb == "+":
            result = x + y
        elif verb == "-":
            result = x - y
        elif verb == "*":
            result = x * y
        elif verb == "/":
            result = _c_div(x, y)
        elif verb == "m":
            result = x - y * _c_div(x, y) if y else 0
        elif verb == "&":
            result = x & y
        elif verb == "|":
            result = x | y
        elif verb == "^":
            result = x ^ y
        elif verb == "<":
            result = int(x < y)
        elif verb == ">":
            result = int(x > y)
        elif verb == "A":
            result = int(bool(x) and bool(y))
        else:
            result = int(bool(x) or bool(y))

        self.push(result)

    @staticmethod
    def _equal(x, y):
        if isinstance(x, str) and isinstance(y, str):
            return int(x == y)
        return int(to_number(x) == to_number(y))

    def skip(self, stop_at_else):
        """Move the cursor onto the verb of the %e or %; that closes this level"""

        level = 0
        self.cp += 1
        while self.cp < self.strlen:
            if self.cap_string[self.cp] == "%":
                self.cp += 1
                if self.cp >= self.strlen:
                    break
                verb = self.cap_string[self.cp]
                if verb == "?":
                    level += 1
                elif verb == ";":
                    if level > 0:
                        level -= 1
                    else:
                        break
                elif verb == "e" and level == 0 and stop_at_else:
                    break
            self.cp += 1
