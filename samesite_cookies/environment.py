"""Boundary between the cookie emitters and the hosting web framework."""
from __future__ import annotations

import datetime
import http.cookies
import inspect
import logging
import typing
from starlette.requests import HTTPConnection
from starlette.responses import Response

from samesite_cookies.attributes import CookieAttributes
from samesite_cookies.headers import HeaderRecord

__all__ = ["CookieEnvironment", "ResponseEnvironment", "supports_samesite"]

logger = logging.getLogger(__name__)


def supports_samesite(primitive: typing.Callable[..., typing.Any]) -> bool:
    """Test if a cookie-setting callable accepts a `samesite` argument."""
    try:
        return "samesite" in inspect.signature(primitive).parameters
    except (TypeError, ValueError):  # pragma: no cover, builtins without a signature
        return False


class CookieEnvironment(typing.Protocol):  # pragma: no cover
    user_agent: str

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> bool:
        ...

    def set_legacy_cookie(
        self,
        name: str,
        value: str,
        expires: datetime.datetime | None,
        path: str | None,
        domain: str | None,
    ) -> bool:
        ...

    def header_list(self) -> list[HeaderRecord]:
        ...

    def remove_headers(self) -> None:
        ...

    def add_header(self, record: HeaderRecord) -> None:
        ...


class ResponseEnvironment:
    """Stage cookies on a Starlette response.

    The header API is deliberately limited to list/append/clear, the same operations
    a response exposes before it is sent."""

    def __init__(self, response: Response, user_agent: str | None = "") -> None:
        self.response = response
        self.user_agent = user_agent or ""

    @classmethod
    def from_request(cls, request: HTTPConnection, response: Response) -> ResponseEnvironment:
        return cls(response, request.headers.get("user-agent", ""))

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> bool:
        return self._call(
            name,
            value,
            expires=attributes.expires,
            path=attributes.path,
            domain=attributes.domain,
            secure=attributes.secure,
            httponly=attributes.httponly,
            samesite=attributes.samesite.value or None,
        )

    def set_legacy_cookie(
        self,
        name: str,
        value: str,
        expires: datetime.datetime | None,
        path: str | None,
        domain: str | None,
    ) -> bool:
        return self._call(name, value, expires=expires, path=path, domain=domain, samesite=None)

    def header_list(self) -> list[HeaderRecord]:
        return [HeaderRecord.from_raw(raw) for raw in self.response.raw_headers]

    def remove_headers(self) -> None:
        del self.response.raw_headers[:]

    def add_header(self, record: HeaderRecord) -> None:
        self.response.raw_headers.append(record.to_raw())

    def _call(self, name: str, value: str, **kwargs: typing.Any) -> bool:
        try:
            self.response.set_cookie(name, value, **kwargs)
        except http.cookies.CookieError as ex:
            logger.warning('Cookie "%s" was rejected: %s', name, ex)
            return False
        return True
