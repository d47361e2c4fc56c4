class ScanBiteError(Exception):
    """Base class for errors raised by the scan flows."""


class ConfigurationError(ScanBiteError):
    pass


class InvalidDataURIError(ScanBiteError, ValueError):
    pass


class InvalidImageError(ScanBiteError, ValueError):
    pass


class ModelResponseError(ScanBiteError):
    """The model answered with something we could not parse or validate."""


class ProductLookupError(ScanBiteError):
    """Open Food Facts could not be reached or returned an unexpected error."""
