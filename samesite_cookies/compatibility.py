"""
User agent classification for SameSite support.

Some clients reject or misinterpret cookies carrying `SameSite=None`
(Chrome 51-66, iOS 12 WebKit, Safari and embedded WebKit on macOS 10.14,
UC Browser 12.13.2). For them the attribute must not be sent at all.
"""
import logging
import re
import typing

from samesite_cookies.cache import InMemoryVerdictCache, NullVerdictCache, VerdictCache, make_cache_key

__all__ = [
    "Rule",
    "DEFAULT_RULES",
    "CompatibilityClassifier",
    "default_classifier",
    "is_browser_compatible",
    "is_old_chrome",
    "is_old_ios",
    "is_macos_mojave_webkit",
    "is_broken_uc_browser",
]

logger = logging.getLogger(__name__)

Rule = typing.Callable[[str], bool]
"""A rule returns True when the user agent is known to mishandle SameSite."""

CHROME_RE = re.compile(r"(CriOS|Chrome)/([0-9]*)")
IOS_RE = re.compile(r"iP.+; CPU .*OS (\d+)_\d")
MACOS_RE = re.compile(r"Macintosh;.*Mac OS X (\d+)_(\d+)_.*AppleWebKit")
MACOS_SAFARI_RE = re.compile(r"Version/.* Safari/")
MACOS_EMBEDDED_RE = re.compile(r"AppleWebKit/[.\d]+ \(KHTML, like Gecko\)")
UC_BROWSER_RE = re.compile(r"UCBrowser/(\d+)\.(\d+)\.(\d+)")


def is_old_chrome(user_agent: str) -> bool:
    if match := CHROME_RE.search(user_agent):
        return int(match.group(2) or 0) < 67
    return False


def is_old_ios(user_agent: str) -> bool:
    if match := IOS_RE.search(user_agent):
        return int(match.group(1)) < 13
    return False


def is_macos_mojave_webkit(user_agent: str) -> bool:
    """Safari and embedded browsers on macOS 10.14."""
    match = MACOS_RE.search(user_agent)
    if not match or (int(match.group(1)), int(match.group(2))) != (10, 14):
        return False
    return bool(MACOS_SAFARI_RE.search(user_agent) or MACOS_EMBEDDED_RE.search(user_agent))


def is_broken_uc_browser(user_agent: str) -> bool:
    if match := UC_BROWSER_RE.search(user_agent):
        return tuple(int(part) for part in match.groups()) == (12, 13, 2)
    return False


DEFAULT_RULES: tuple[Rule, ...] = (
    is_old_chrome,
    is_old_ios,
    is_macos_mojave_webkit,
    is_broken_uc_browser,
)


class CompatibilityClassifier:
    """
    Tell whether a user agent handles SameSite cookies correctly.

    Rules are checked in order and the first one that reports a broken client wins.
    A user agent that matches no rule (including an empty one) is compatible.
    Verdicts are memoized in `cache` under a digest of the raw user agent string.

    Usage:
        classifier = CompatibilityClassifier(InMemoryVerdictCache())
        classifier.is_compatible(request.headers.get("user-agent", ""))
    """

    def __init__(self, cache: VerdictCache | None = None, rules: typing.Sequence[Rule] = DEFAULT_RULES) -> None:
        self.cache = cache if cache is not None else NullVerdictCache()
        self.rules = tuple(rules)

    def evaluate(self, user_agent: str) -> bool:
        return not any(rule(user_agent) for rule in self.rules)

    def is_compatible(self, user_agent: str | None) -> bool:
        user_agent = user_agent or ""
        key = make_cache_key(user_agent)
        verdict = self.cache.get(key)
        if verdict is None:
            verdict = self.evaluate(user_agent)
            self.cache.put(key, verdict)
            logger.debug("SameSite compatibility computed for %r: %s", user_agent, verdict)
        return verdict


default_classifier = CompatibilityClassifier(InMemoryVerdictCache())


def is_browser_compatible(user_agent: str | None) -> bool:
    return default_classifier.is_compatible(user_agent)
