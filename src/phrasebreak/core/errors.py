"""Exception types raised by phrasebreak."""


class PhraseBreakError(Exception):
    """Base class for phrasebreak errors."""
    pass


class ModelFormatError(PhraseBreakError):
    """Exception raised when a model representation cannot be turned into a weight table."""
    pass


class ConfigurationError(PhraseBreakError):
    """Exception raised when a parse is requested without a usable weight table."""
    pass
