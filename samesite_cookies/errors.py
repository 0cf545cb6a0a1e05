class SameSiteError(Exception):
    """Base class for all samesite_cookies errors."""


class InvalidSameSiteValue(ValueError, SameSiteError):
    """Raised when a samesite option is not one of None, Lax or Strict."""


class ConfigurationError(SameSiteError):
    """Raised when settings cannot be parsed."""
