# errors.py - exception types raised by the autocorrecter package


class AutocorrecterError(Exception):
    """Base class for every error raised by this package."""


class InvalidCapacityError(AutocorrecterError, ValueError):
    """Frequency store built with a slot count that is not a positive int."""


class UnknownWordError(AutocorrecterError, KeyError):
    """
    Raised when the ranking comparator is asked about a word that is not in
    the store. Public queries only rank words already confirmed present, so
    seeing this means the engine itself is broken.
    """
