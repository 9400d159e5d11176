"""QI Console terminfo exceptions"""


class TerminfoError(Exception):
    """Base class for terminfo errors"""


class TerminfoEnvironmentError(TerminfoError):
    """Raised when there is no command line terminal to describe"""


class CompiledTerminfoError(TerminfoError):
    """Raised when a compiled terminfo file cannot be decoded"""


class MissingParametersError(TerminfoError):
    """Raised when a capability is called with too few parameters"""

    def __init__(self, cap_name, expected, received):
        self.cap_name = cap_name
        self.expected = expected
        self.received = received
        super().__init__(
            f"Too few parameters for call to '{cap_name}': "
            f"received {received}, expecting {expected}"
        )
