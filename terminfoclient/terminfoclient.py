"""CLI client for inspecting terminfo descriptions"""

import argparse
import cmd
import shlex
import sys
import textwrap

from qi.console.client import Client
from qi.console.exceptions import MissingParametersError


def to_parm(text):
    """Parameters that read as integers are passed as integers"""
    try:
        return int(text)
    except ValueError:
        return text


class TerminfoClient(Client, cmd.Cmd):
    """Terminfo inspector client"""

    prompt = "terminfo> "

    def __init__(self, terminfo, **kwargs):
        """Constructor"""

        cmd.Cmd.__init__(self)
        Client.__init__(self, **kwargs)

        self.terminfo = terminfo

    def __getattr__(self, name):
        """Special method called when attempting to check for an attr of this class"""

        if name.startswith("help_"):
            # Dedent the help text taken from the do_* method's docstring
            command = name.replace("help_", "")
            doc = getattr(self, "do_" + command).__doc__
            if doc:
                return lambda: print(
                    textwrap.dedent("{}{}".format(" " * 8, doc.rstrip()))
                )

        raise AttributeError(name)

    def emptyline(self):
        """Don't repeat the last command on an empty line"""
        return 0

    def do_EOF(self, args):  # pylint: disable=invalid-name,unused-argument
        print()
        return True

    def do_names(self, args):  # pylint: disable=unused-argument
        """Display the terminal name and its aliases
        Usage: names"""

        if not self.terminfo.has_terminfo_db:
            print(self.text_error("No terminfo description"))
            return 1

        names = self.terminfo.names
        print(self.text_success(names[0]))
        for alias in names[1:]:
            print(f"  {alias}")
        print(self.text_info(f"Loaded from {self.terminfo.loader.source}"))
        return 0

    def do_dump(self, args):  # pylint: disable=unused-argument
        """Display every standard capability of the terminal
        Usage: dump"""
        self.terminfo.dump()
        return 0

    def do_show(self, args):
        """Describe capabilities
        Usage: show <capname> [<capname> ...]

        Example: show cup setaf am"""

        cap_names = shlex.split(args)
        if len(cap_names) == 0:
            print(self.text_error("Missing argument"))
            return 1

        for cap_name in cap_names:
            print(self.terminfo.display_capability(cap_name))

        return 0

    def do_expand(self, args):
        """Expand a capability with its parameters
        Usage: expand [options] <capname> [<param> ...]
          -x, --hex    Display the bytes in hex

        Examples:
          expand cup 4 10
             Print the sequence that moves the cursor to row 4, column 10

          expand --hex setaf 1
             Show the bytes that set the foreground color to red"""

        parser = argparse.ArgumentParser(add_help=False, prog="expand")
        parser.add_argument("cap_name", nargs="?")
        parser.add_argument("parms", nargs="*")
        parser.add_argument("-x", "--hex", action="store_true")
        pargs, _ = parser.parse_known_args(shlex.split(args))

        if pargs.cap_name is None:
            print(self.text_error("Missing argument"))
            return 1

        if not self.terminfo.has_capability(pargs.cap_name):
            print(self.text_error(f"Not capable of '{pargs.cap_name}'"))
            return 1

        parms = [to_parm(parm) for parm in pargs.parms]
        try:
            result = self.terminfo.do_capability(pargs.cap_name, *parms)
        except MissingParametersError as error:
            print(self.text_error(str(error)))
            return 2

        if pargs.hex:
            print(" ".join("{:02X}".format(ord(char)) for char in result))
        else:
            sys.stdout.write(result)
            sys.stdout.flush()

        return 0

    def do_cache(self, args):  # pylint: disable=unused-argument
        """Display the capabilities expanded so far, in hex
        Usage: cache"""
        self.terminfo.dump_cache()
        return 0

    def do_hexdump(self, args):  # pylint: disable=unused-argument
        """Display a hex view of the compiled terminfo file
        Usage: hexdump"""

        if not self.terminfo.loader.terminfo_bindata:
            self.terminfo.loader.get_terminfo_bin_data()

        if not self.terminfo.loader.terminfo_bindata:
            print(self.text_notify("The compiled terminfo file was not read"))
            return 1

        self.terminfo.hex_dump()
        return 0
