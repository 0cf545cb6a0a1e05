from samesite_cookies.attributes import CookieAttributes, SameSite
from samesite_cookies.cache import InMemoryVerdictCache, NullVerdictCache, VerdictCache
from samesite_cookies.compatibility import CompatibilityClassifier, is_browser_compatible
from samesite_cookies.emitters import CookieSetter, LegacyCookieEmitter, Mode, NativeCookieEmitter, set_cookie
from samesite_cookies.environment import CookieEnvironment, ResponseEnvironment
from samesite_cookies.errors import ConfigurationError, InvalidSameSiteValue, SameSiteError
from samesite_cookies.middleware import SameSiteMiddleware

__all__ = [
    "CookieAttributes",
    "SameSite",
    "VerdictCache",
    "InMemoryVerdictCache",
    "NullVerdictCache",
    "CompatibilityClassifier",
    "is_browser_compatible",
    "CookieSetter",
    "NativeCookieEmitter",
    "LegacyCookieEmitter",
    "Mode",
    "set_cookie",
    "CookieEnvironment",
    "ResponseEnvironment",
    "SameSiteMiddleware",
    "SameSiteError",
    "InvalidSameSiteValue",
    "ConfigurationError",
]

__version__ = "0.1.0"
