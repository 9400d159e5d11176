"""Run the terminfo inspector: python -m terminfoclient"""

import argparse
import logging
import shlex
import sys

from qi.console.exceptions import TerminfoEnvironmentError
from qi.console.terminal import Terminal
from qi.console.terminfo import Terminfo

from terminfoclient.terminfoclient import TerminfoClient


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="qi-terminfo",
        description="Display terminfo capabilities and expand them",
    )
    parser.add_argument(
        "-T", "--term", dest="term", help="Describe this terminal instead of $TERM"
    )
    parser.add_argument(
        "--force-bin",
        action="store_true",
        help="Read the compiled terminfo file instead of asking infocmp",
    )
    parser.add_argument(
        "--hexdump",
        action="store_true",
        help="Print a hex view of the compiled terminfo data when it is read",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("command", nargs=argparse.REMAINDER)
    return parser.parse_args(argv)


def main(argv=None):
    pargs = parse_args(sys.argv[1:] if argv is None else argv)

    if pargs.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        terminfo = Terminfo(
            force_bin=pargs.force_bin,
            override_terminal=pargs.term,
            hexdump=pargs.hexdump or None,
        )
    except TerminfoEnvironmentError as error:
        print(error, file=sys.stderr)
        return 1

    client = TerminfoClient(terminfo, terminal=Terminal(terminfo=terminfo))

    if not terminfo.has_terminfo_db:
        client.display_error("No terminfo description found")
        return 1

    if pargs.command:
        return client.onecmd(shlex.join(pargs.command)) or 0

    client.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
