from __future__ import annotations

import dataclasses
import datetime
import enum
import typing

from samesite_cookies.errors import InvalidSameSiteValue

__all__ = ["SameSite", "CookieAttributes"]


class SameSite(enum.StrEnum):
    NONE = "None"
    LAX = "Lax"
    STRICT = "Strict"
    UNSET = ""

    @classmethod
    def parse(cls, value: str | SameSite | None) -> SameSite:
        """Convert a user supplied value into a member. Lookup is case-insensitive, empty means unset."""
        if isinstance(value, SameSite):
            return value
        if not value:
            return cls.UNSET
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise InvalidSameSiteValue(f'Invalid SameSite value "{value}". Expected one of: None, Lax, Strict.')


@dataclasses.dataclass(frozen=True)
class CookieAttributes:
    # datetime or a unix timestamp, 0 means a session cookie
    expires: datetime.datetime | int | float | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: SameSite = SameSite.UNSET

    def __post_init__(self) -> None:
        object.__setattr__(self, "samesite", SameSite.parse(self.samesite))
        if isinstance(self.expires, (int, float)):
            expires = datetime.datetime.fromtimestamp(self.expires, datetime.timezone.utc) if self.expires else None
            object.__setattr__(self, "expires", expires)

    @classmethod
    def from_options(cls, options: typing.Mapping[str, typing.Any] | None = None) -> CookieAttributes:
        """Build attributes from an option mapping.

        Recognized keys: expires, path, domain, secure, httponly and samesite.
        Unknown keys are ignored."""
        options = options or {}
        return cls(
            expires=options.get("expires"),
            path=options.get("path"),
            domain=options.get("domain"),
            secure=bool(options.get("secure", False)),
            httponly=bool(options.get("httponly", False)),
            samesite=SameSite.parse(options.get("samesite")),
        )

    def effective(self, compatible: bool, clear_samesite: bool) -> CookieAttributes:
        """Return attributes as they must be emitted for a client.

        When `clear_samesite` is set and the client is not compatible, samesite is dropped entirely.
        SameSite=None that survives forces Secure."""
        samesite = self.samesite
        if clear_samesite and not compatible:
            samesite = SameSite.UNSET
        secure = True if samesite == SameSite.NONE else self.secure
        return dataclasses.replace(self, secure=secure, samesite=samesite)
