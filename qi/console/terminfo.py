"""QI Terminfo module"""

import logging
import os
import sys

from . import config
from .capabilities import get_definition
from .exceptions import MissingParametersError, TerminfoEnvironmentError
from .loader import DescriptionLoader, hex_view
from .tparm import expand, get_required_parm_count

logger = logging.getLogger(__name__)

NOT_CAPABLE = "NOT CAPABLE"
NOT_FOUND = "NOT FOUND"


def check_environment():
    """Refuse to run where there is no command line terminal

    Embedded interpreters have no argv and CGI scripts run under a web
    server; neither has a terminal to describe."""

    if not getattr(sys, "argv", None):
        raise TerminfoEnvironmentError(
            "There is no command line. Is this not a shell terminal?"
        )

    if os.getenv("GATEWAY_INTERFACE"):
        raise TerminfoEnvironmentError(
            "Running under a CGI gateway. Is this not a shell terminal?"
        )


def format_value(value):
    if value is True:
        return "true"
    return str(value)


class Terminfo(object):
    """Terminfo class defines the current terminal's capabilities

    force_bin: get the description from the compiled terminfo file only
    override_terminal: describe this terminal instead of $TERM
    description: use this already parsed TerminalDescription
    hexdump: print a hex view of the compiled data when it is used
    """

    def __init__(
        self, force_bin=False, override_terminal=None, description=None, hexdump=None
    ):
        check_environment()

        self.loader = DescriptionLoader(override_terminal, force_bin)
        self._cache = {}

        if description is None:
            description = self.loader.load()
            if hexdump is None:
                hexdump = config.HEXDUMP_ON_FALLBACK
            if hexdump and self.loader.terminfo_bindata:
                self.hex_dump()

        # None when there was nothing to load; every lookup then misses
        self.description = description

        if description is None:
            logger.debug("No terminfo description for %r", self.loader.term)
        else:
            logger.debug(
                "Loaded %s from %s (%d capabilities)",
                description.name,
                self.loader.source,
                len(description),
            )

    @property
    def has_terminfo_db(self):
        return self.description is not None

    @property
    def names(self):
        if self.description is None:
            return ()
        return self.description.names

    def _lookup(self, cap_name):
        if self.description is None:
            return None
        return self.description.get(cap_name)

    def get_capability(self, cap_name, verbose=False):
        """Get capability by name

        Returns the raw value (True, a number or the string template), the
        display line when verbose, or False when the terminal lacks it."""

        capability = self._lookup(cap_name)
        if capability is None:
            return False

        if verbose:
            return self.display_capability(cap_name)

        return capability.value

    def display_capability(self, cap_name):
        """Output the capability for a given cap name

        Capabilities missing from both the catalog and the terminal are
        NOT FOUND; catalog capabilities this terminal lacks are NOT CAPABLE.
        Non-standard capabilities are shown without a description."""

        definition = get_definition(cap_name)
        capability = self._lookup(cap_name)

        if definition is None and capability is None:
            return f"{cap_name} : {NOT_FOUND}"

        if definition is None:
            out = f"{cap_name} : (non-standard) = '"
        else:
            out = (
                f"{cap_name} : ({definition.variable_name}) "
                f"{definition.description} = '"
            )

        if capability is not None:
            out += format_value(capability.value)
        else:
            out += NOT_CAPABLE

        return out + "'"

    def has_capability(self, cap_name):
        """Whether this terminal has a certain capability"""
        return self._lookup(cap_name) is not None

    def dump(self):
        """Print all the standard capabilities this terminal has"""

        if self.description is None:
            return

        out = ""
        for capability in self.description:
            definition = get_definition(capability.code)
            if definition is None:
                # Ignore non-standard termcaps like meml or memu
                continue

            out += "[{}] => ({})  '{}'\n".format(
                capability.code,
                definition.description,
                format_value(capability.value),
            )

        sys.stdout.write(out)

    def dump_cache(self):
        """Print the cached expansions as hex bytes"""
        for parms, value in self._cache.items():
            key = self.get_cache_key(parms)
            hex_bytes = "".join("{:02X} ".format(ord(char)) for char in value)
            sys.stdout.write(f"{key} => {hex_bytes}\n")

    def hex_dump(self):
        """Print a hex view of the compiled terminfo data, if it was read"""
        if self.loader.terminfo_bindata:
            sys.stdout.write(hex_view(self.loader.terminfo_bindata))

    def get_cache_key(self, parms):
        """Printable form of the parms a cached expansion was made with"""
        return config.CACHE_KEY_SEPARATOR.join(str(parm) for parm in parms)

    def do_capability(self, cap_name, *args):
        """Get the control sequence for a capability

        String capabilities are expanded with args as their parameters.
        The result is a str with one character per byte. Capabilities the
        terminal lacks, flags and numbers give an empty string."""

        parms = [cap_name] + list(args)
        # ("cup", "1-2") and ("cup", 1, 2) are different keys
        cache_key = tuple(parms)

        if cache_key in self._cache:
            logger.debug("Cache hit for %s", self.get_cache_key(parms))
            return self._cache[cache_key]

        capability = self._lookup(cap_name)
        if capability is None or not capability.is_string():
            return ""

        cap_string = capability.value
        req_parm_count = get_required_parm_count(cap_string)
        if len(args) < req_parm_count:
            raise MissingParametersError(cap_name, req_parm_count, len(args))

        out = expand(cap_string, parms)

        self._cache[cache_key] = out
        return out
