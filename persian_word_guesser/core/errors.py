# errors.py - exception types raised by the word guesser


class GuesserError(Exception):
    """Base class for every error the guesser surfaces to its host."""


class DictionaryLoadError(GuesserError):
    """The bundled word list could not be read."""


class WordListFormatError(DictionaryLoadError):
    """The word list was readable but its contents are malformed."""


class StateSaveError(GuesserError):
    """Persisting the selection history failed."""
