from __future__ import annotations

import abc
import enum
import functools
import logging
import typing
from starlette.requests import HTTPConnection
from starlette.responses import Response

from samesite_cookies.attributes import CookieAttributes
from samesite_cookies.compatibility import CompatibilityClassifier, default_classifier
from samesite_cookies.environment import CookieEnvironment, ResponseEnvironment, supports_samesite
from samesite_cookies.headers import HeaderRecord, append_labels, find_cookie_header, missing_labels, replace_record

__all__ = ["Mode", "CookieEmitter", "NativeCookieEmitter", "LegacyCookieEmitter", "CookieSetter", "set_cookie"]

logger = logging.getLogger(__name__)

CookieOptions = CookieAttributes | typing.Mapping[str, typing.Any] | None


class Mode(enum.StrEnum):
    AUTO = "auto"
    NATIVE = "native"
    LEGACY = "legacy"


class CookieEmitter(abc.ABC):  # pragma: no cover
    @abc.abstractmethod
    def emit(
        self,
        environment: CookieEnvironment,
        name: str,
        value: str,
        attributes: CookieAttributes,
        compatible: bool,
    ) -> bool:
        pass


class NativeCookieEmitter(CookieEmitter):
    """Pass every attribute to a primitive that understands SameSite.

    Incompatible clients get no SameSite attribute at all."""

    def emit(
        self,
        environment: CookieEnvironment,
        name: str,
        value: str,
        attributes: CookieAttributes,
        compatible: bool,
    ) -> bool:
        return environment.set_cookie(name, value, attributes.effective(compatible, clear_samesite=True))


class LegacyCookieEmitter(CookieEmitter):
    """
    Emit through a primitive that only knows expires, path and domain, then patch the header.

    For compatible clients the Set-Cookie header just staged for the cookie is located
    and the missing HttpOnly, Secure and SameSite labels are appended to it. The header
    list is then cleared and replayed in the original order with that single substitution.
    When no header can be found the cookie stays as the primitive emitted it.
    """

    def emit(
        self,
        environment: CookieEnvironment,
        name: str,
        value: str,
        attributes: CookieAttributes,
        compatible: bool,
    ) -> bool:
        result = environment.set_legacy_cookie(name, value, attributes.expires, attributes.path, attributes.domain)
        if not compatible:
            return result

        attributes = attributes.effective(compatible, clear_samesite=False)
        records = environment.header_list()
        index = find_cookie_header(records, name)
        if index is None:
            logger.debug('No staged Set-Cookie header for "%s", SameSite attributes not added.', name)
            return result

        target = records[index]
        labels = missing_labels(
            target.value,
            httponly=attributes.httponly,
            secure=attributes.secure,
            samesite=attributes.samesite,
        )
        if labels:
            rewritten = HeaderRecord(target.name, append_labels(target.value, labels))
            environment.remove_headers()
            for record in replace_record(records, index, rewritten):
                environment.add_header(record)
            logger.debug('Added "%s" to Set-Cookie header of "%s".', "".join(labels), name)
        return result


class CookieSetter:
    """
    Set cookies with SameSite support adjusted to the client.

    The emitter is chosen once, when the setter is created.

    Usage:
        setter = CookieSetter.for_mode(Mode.AUTO)
        setter.set_cookie(ResponseEnvironment.from_request(request, response), "sid", "abc123", {"samesite": "Lax"})
    """

    def __init__(self, emitter: CookieEmitter, classifier: CompatibilityClassifier | None = None) -> None:
        self.emitter = emitter
        self.classifier = classifier or default_classifier

    @classmethod
    def for_mode(
        cls,
        mode: Mode,
        classifier: CompatibilityClassifier | None = None,
        primitive: typing.Callable[..., typing.Any] = Response.set_cookie,
    ) -> CookieSetter:
        if mode == Mode.AUTO:
            mode = Mode.NATIVE if supports_samesite(primitive) else Mode.LEGACY
        emitter = NativeCookieEmitter() if mode == Mode.NATIVE else LegacyCookieEmitter()
        return cls(emitter, classifier)

    def set_cookie(
        self,
        environment: CookieEnvironment,
        name: str,
        value: str = "",
        attributes: CookieOptions = None,
    ) -> bool:
        if not isinstance(attributes, CookieAttributes):
            attributes = CookieAttributes.from_options(attributes)
        compatible = self.classifier.is_compatible(environment.user_agent)
        return self.emitter.emit(environment, name, value, attributes, compatible)


@functools.cache
def get_default_setter() -> CookieSetter:
    from samesite_cookies.config import Settings, create_cookie_setter

    return create_cookie_setter(Settings.from_environ())


def set_cookie(
    request: HTTPConnection,
    response: Response,
    name: str,
    value: str = "",
    attributes: CookieOptions = None,
) -> bool:
    """Set a cookie on `response` honoring SameSite support of the client that sent `request`."""
    return get_default_setter().set_cookie(ResponseEnvironment.from_request(request, response), name, value, attributes)
