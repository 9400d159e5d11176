"""Default config values for the QI console terminfo engine"""

import os

# Executable used to query the terminal database. It is called with the
# terminal name as its only argument when a name is given.
INFOCMP_COMMAND = os.getenv("QI_INFOCMP", "infocmp")

# The base directory probed first for compiled terminfo files, laid out as
# <base>/<first letter of name>/<name>
TERMINFO_PATH = os.getenv("QI_TERMINFO_PATH", "/lib/terminfo")

# Print a hex view of the compiled data whenever the binary fallback is used.
# export QI_TERMINFO_HEXDUMP=1
HEXDUMP_ON_FALLBACK = os.getenv("QI_TERMINFO_HEXDUMP", "") == "1"

# Joins the capability name and its parameters when cache keys are printed
CACHE_KEY_SEPARATOR = "-"


def get_terminfo_dirs():
    """Get the ordered list of directories to search for compiled files

    $TERMINFO, when set, is the only directory searched (see terminfo(5))."""

    terminfo = os.getenv("TERMINFO")
    if terminfo:
        return [terminfo]

    dirs = []
    terminfo_dirs = os.getenv("TERMINFO_DIRS")
    if terminfo_dirs:
        for path in terminfo_dirs.split(os.pathsep):
            # An empty entry stands for the system directory
            dirs.append(path or "/usr/share/terminfo")

    dirs += [
        os.path.expanduser("~/.terminfo"),
        TERMINFO_PATH,
        "/etc/terminfo",
        "/usr/share/terminfo",
    ]

    # remove duplicates preserving order
    return list(dict.fromkeys(dirs))
