import pytest

from samesite_cookies.cache import InMemoryVerdictCache
from samesite_cookies.compatibility import CompatibilityClassifier
from samesite_cookies.emitters import CookieSetter, Mode


@pytest.fixture
def verdict_cache() -> InMemoryVerdictCache:
    return InMemoryVerdictCache()


@pytest.fixture
def classifier(verdict_cache: InMemoryVerdictCache) -> CompatibilityClassifier:
    return CompatibilityClassifier(verdict_cache)


@pytest.fixture
def native_setter(classifier: CompatibilityClassifier) -> CookieSetter:
    return CookieSetter.for_mode(Mode.NATIVE, classifier)


@pytest.fixture
def legacy_setter(classifier: CompatibilityClassifier) -> CookieSetter:
    return CookieSetter.for_mode(Mode.LEGACY, classifier)
