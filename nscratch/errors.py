"""Exception types raised by nscratch."""


class NscratchError(Exception):
    """Base class for nscratch errors."""


class NiriError(NscratchError):
    """A compositor query failed or returned data we cannot use."""
