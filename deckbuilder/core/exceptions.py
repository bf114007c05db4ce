"""
Deck builder exception definitions.

Option factories raise eagerly on out-of-contract parameters so a bad
option fails where it is created, not halfway through a build.
"""


class DeckError(Exception):
    """Base class for deck builder errors"""
    pass


class InvalidOptionError(DeckError, ValueError):
    """A deck option was given a parameter outside its contract"""
    pass


class DeckConfigError(DeckError, ValueError):
    """Invalid deck configuration"""
    pass
