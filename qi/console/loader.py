"""QI Console terminfo loader module

Gets the capability description for a terminal, either from infocmp or,
failing that, from the compiled terminfo file for the terminal.
"""

import logging
import os
import subprocess
import sys

from . import config
from .compiled import parse_compiled
from .description import parse_description
from .exceptions import CompiledTerminfoError

logger = logging.getLogger(__name__)

PRINTABLE_RANGE = range(32, 127)


def is_cygwin():
    return "cygwin" in os.getenv("TERM", "")


def is_windows():
    """Native windows, where there is no terminfo database to ask"""
    return sys.platform == "win32" and not is_cygwin()


class DescriptionLoader(object):
    """Loads the description of one terminal

    override_terminal names the terminal to describe instead of $TERM.
    force_bin skips infocmp and goes straight to the compiled file."""

    def __init__(self, override_terminal=None, force_bin=False):
        self.override_terminal = override_terminal
        self.force_bin = force_bin

        # Where the description came from, for diagnostics
        self.source = None
        self.terminfo_data = None
        self.terminfo_bindata = None
        self.terminfo_filename = None

    @property
    def term(self):
        return self.override_terminal or os.getenv("TERM", "")

    def load(self):
        """Get the description, or None when neither source has one"""

        if not self.force_bin:
            self.get_terminfo_data()
            if self.terminfo_data:
                description = parse_description(self.terminfo_data)
                if description is not None:
                    self.source = config.INFOCMP_COMMAND
                    return description

        if is_windows() or is_cygwin():
            return None

        if not self.get_terminfo_bin_data():
            return None

        try:
            description = parse_compiled(self.terminfo_bindata)
        except CompiledTerminfoError as error:
            logger.warning("Cannot read %s: %s", self.terminfo_filename, error)
            return None

        self.source = self.terminfo_filename
        return description

    def get_terminfo_data(self):
        """Use infocmp to get the terminfo data as a list of lines"""

        self.terminfo_data = None
        if is_windows() or not self.term:
            logger.debug("No terminal to ask infocmp about")
            return None

        cmd = [config.INFOCMP_COMMAND]
        if self.override_terminal:
            cmd.append(self.override_terminal)

        try:
            output = subprocess.check_output(
                cmd, stderr=subprocess.DEVNULL, universal_newlines=True
            )
        except OSError as error:
            logger.debug("Cannot run %s: %s", cmd[0], error)
            return None
        except subprocess.CalledProcessError as error:
            logger.debug("%s exited with status %s", cmd[0], error.returncode)
            return None

        self.terminfo_data = output.splitlines()
        return self.terminfo_data

    def get_terminfo_bin_data(self):
        """Read the compiled terminfo file for the terminal"""

        self.terminfo_bindata = None
        if not self.term:
            return None

        self.terminfo_filename = self.get_terminfo_filename()
        if self.terminfo_filename is None:
            logger.debug("No compiled terminfo file for %s", self.term)
            return None

        try:
            with open(self.terminfo_filename, "rb") as fd:
                self.terminfo_bindata = fd.read()
        except OSError as error:
            logger.debug("Cannot read %s: %s", self.terminfo_filename, error)
            return None

        return self.terminfo_bindata

    def get_terminfo_filename(self, dirs=None):
        """Find the compiled file at <dir>/<first letter>/<name>

        Some systems (macOS) name the directory after the hex code of the
        first letter instead."""

        term = self.term
        if not term:
            return None

        if dirs is None:
            dirs = config.get_terminfo_dirs()

        for path in dirs:
            for letter_dir in (term[0], "{:02x}".format(ord(term[0]))):
                filename = os.path.join(path, letter_dir, term)
                if os.path.isfile(filename):
                    return filename
            logger.debug("No %s in %s", term, path)

        return None


def hex_view(data, num=16):
    """View hex chars of binary data

    Returns a listing of hexadecimal values in rows of num bytes, each row
    followed by its printable characters."""

    out = []
    for i in range(0, len(data), num):
        row = data[i : i + num]
        hex_part = "".join("{:02X} ".format(byte) for byte in row)
        print_part = "".join(
            chr(byte) if byte in PRINTABLE_RANGE else "." for byte in row
        )
        out.append(hex_part.ljust(num * 3) + " | " + print_part + "\n")

    return "".join(out)
