"""QI Console Terminal module"""

import os
import sys

from .terminfo import Terminfo


def is_a_tty(stream):
    return hasattr(stream, "isatty") and stream.isatty()


class Terminal:
    """Console terminal

    Provides functions to output text to a terminal. Provides mechanism for
    doing different colors and other terminal functions. Will bypass terminal
    output codes if detecting that current output is not to a TTY"""

    # Output colors
    C_BLACK = 0  # whatever basic terminal color is set at?
    C_RED = 1
    C_GREEN = 2
    C_YELLOW = 3
    C_BLUE = 4
    C_MAGENTA = 5
    C_CYAN = 6
    C_WHITE = 7

    def __init__(self, **options):
        if "terminfo" in options:
            self.terminfo = options["terminfo"]
        else:
            self.terminfo = Terminfo()

        # Set whether output is a tty
        self._isatty = is_a_tty(sys.stdout)

        # Set the columns and lines
        self.columns, self.lines = self._get_size()

    def isatty(self):
        return self._isatty

    def do_capability(self, cap_name, *args):
        """Control sequence for a capability, empty when not on a tty"""
        if not self.isatty():
            return ""
        return self.terminfo.do_capability(cap_name, *args)

    def get_capability(self, cap_name, verbose=False):
        return self.terminfo.get_capability(cap_name, verbose)

    def has_capability(self, cap_name):
        return self.terminfo.has_capability(cap_name)

    def printterm(self, text):
        if self.isatty():
            sys.stdout.write(text)

    def clear(self):
        self.printterm(self.do_capability("clear"))
        return self

    def locate(self, row, col):
        self.printterm(self.do_capability("cup", row, col))
        return self

    def bold_type(self):
        self.printterm(self.do_capability("bold"))
        return self

    def set_fg_color(self, num):
        self.printterm(self.do_capability("setaf", num))
        return self

    def set_bg_color(self, num):
        self.printterm(self.do_capability("setab", num))
        return self

    def prompt(self, text):
        """Prompt the user for input and return the line entered"""
        return input(text)

    def start_alt_charset_mode(self):
        self.printterm(self.do_capability("enacs") + self.do_capability("smacs"))
        return self

    def end_alt_charset_mode(self):
        self.printterm(self.do_capability("rmacs"))
        return self

    def acs_map(self):
        """Map of VT100 line drawing characters to this terminal's own (acsc)"""
        acsc = self.do_capability("acsc")
        return dict(zip(acsc[::2], acsc[1::2]))

    def make_box(self, y, x, w, h):
        """Draw a box with its upper left corner at row y, column x

        Uses the line drawing characters when the terminal has an alternate
        character set, plain ASCII otherwise."""

        if self.has_capability("smacs"):
            acs = self.acs_map()
            tl, tr, bl, br, horiz, vert = [acs.get(char, char) for char in "lkmjqx"]
            self.start_alt_charset_mode()
        else:
            tl, tr, bl, br, horiz, vert = "++++-|"

        self.locate(y, x)
        self.printterm(tl + horiz * w + tr)

        for i in range(1, h):
            self.locate(y + i, x)
            self.printterm(vert + " " * w + vert)

        self.locate(y + h, x)
        self.printterm(bl + horiz * w + br)

        if self.has_capability("smacs"):
            self.end_alt_charset_mode()

        return self

    def pretty_message(self, text, fg=7, bg=4, max_width=None, vertical_padding=True):
        """Print a pretty message to the terminal"""

        if max_width is None:
            max_width = self.columns

        length = len(text) + 4

        start = self.do_capability("setaf", fg) + self.do_capability("setab", bg)
        end = self.do_capability("op") + "\n"
        newline = end + start

        if length > max_width or "\n" in text:
            length = max_width
            text = self.wordwrap(text, max_width - 4)
            lines = text.split("\n")
            text = ""
            for line in lines:
                line = "  " + line.strip()
                text = text + line.ljust(max_width) + newline
        else:
            text = "  " + text + "  " + newline

        if vertical_padding is True:
            padding = " " * length
        else:
            padding = ""
            end = end.strip()
            newline = end + start

        out = start + padding + newline + text + padding + end

        print(out)

        return self

    def wordwrap(self, string, width=80, ind1=0, ind2=0, prefix=""):
        """Word wrapping function.

        string: the string to wrap
        width: the column number to wrap at
        prefix: prefix each line with this string (goes before any indentation)
        ind1: number of characters to indent the first line
        ind2: number of characters to indent the rest of the lines
        """

        lead = prefix + ind2 * " "
        string = prefix + ind1 * " " + string
        newstring = ""
        while len(string) > width > len(lead):
            # Find position of nearest whitespace char to the left of "width"
            marker = width - 1
            while marker > len(lead) and not string[marker].isspace():
                marker = marker - 1

            if marker <= len(lead):
                # No whitespace to break at, cut the word
                newstring = newstring + string[0:width] + "\n"
                string = lead + string[width:]
                continue

            # Remove line from original string and add it to the new string
            newline = string[0:marker] + "\n"
            newstring = newstring + newline
            string = lead + string[marker + 1 :]

        return newstring + string

    def get_columns(self):
        self.columns, self.lines = self._get_size()
        return self.columns

    def get_lines(self):
        self.columns, self.lines = self._get_size()
        return self.lines

    def center_text(self, text):
        """Pad text with spaces to center it on the terminal"""
        width = self.get_columns()
        if len(text) >= width:
            return text
        return " " * ((width - len(text)) // 2) + text

    def dump(self):
        self.terminfo.dump()

    def dump_cache(self):
        self.terminfo.dump_cache()

    def _get_size(self):
        """Attempt to get the size of the current terminal

        Returns a tuple of columns,lines"""

        def ioctl_gwinsz(fd):
            try:
                # pylint: disable=import-outside-toplevel
                import fcntl
                import termios
                import struct

                cr = struct.unpack("hh", fcntl.ioctl(fd, termios.TIOCGWINSZ, "1234"))
            except (ImportError, OSError):
                return None
            return cr

        cr = ioctl_gwinsz(0) or ioctl_gwinsz(1) or ioctl_gwinsz(2)
        if cr and cr[0] > 0 and cr[1] > 0:
            return int(cr[1]), int(cr[0])

        # The terminal description knows the default size
        columns = self.terminfo.get_capability("cols")
        lines = self.terminfo.get_capability("lines")
        if not isinstance(columns, int) or isinstance(columns, bool):
            columns = os.getenv("COLUMNS", "80")
        if not isinstance(lines, int) or isinstance(lines, bool):
            lines = os.getenv("LINES", "25")

        return int(columns), int(lines)
