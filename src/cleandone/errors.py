"""Exceptions raised at the host boundary."""


class DocumentError(Exception):
    """A note could not be resolved, read or written."""


class DocumentNotFound(DocumentError):
    pass


class DocumentReadError(DocumentError):
    pass


class DocumentWriteError(DocumentError):
    pass


class ConfigError(ValueError):
    """A configuration value was rejected."""
