class HeraldError(Exception):
    """Base class for errors raised by herald."""


class InvalidConfiguration(HeraldError, ValueError):
    """Raised by the registration API for an unknown level or missing stream."""
