"""Operations over the ordered list of staged response headers."""
from __future__ import annotations

import typing

from samesite_cookies.attributes import SameSite

__all__ = [
    "SET_COOKIE",
    "HeaderRecord",
    "cookie_name",
    "find_cookie_header",
    "has_attribute",
    "missing_labels",
    "append_labels",
    "strip_attribute",
    "replace_record",
]

SET_COOKIE = "set-cookie"


class HeaderRecord(typing.NamedTuple):
    name: str
    value: str

    @classmethod
    def from_raw(cls, raw: tuple[bytes, bytes]) -> HeaderRecord:
        return cls(raw[0].decode("latin-1"), raw[1].decode("latin-1"))

    def to_raw(self) -> tuple[bytes, bytes]:
        return self.name.encode("latin-1"), self.value.encode("latin-1")

    @property
    def is_set_cookie(self) -> bool:
        return self.name.lower() == SET_COOKIE


def cookie_name(value: str) -> str:
    """Return the cookie name of a Set-Cookie header value."""
    return value.split("=", 1)[0].strip()


def find_cookie_header(records: typing.Sequence[HeaderRecord], name: str) -> int | None:
    """Return the index of the most recently added Set-Cookie header for cookie `name`."""
    prefix = f"{name}="
    for index in range(len(records) - 1, -1, -1):
        record = records[index]
        if record.is_set_cookie and record.value.startswith(prefix):
            return index
    return None


def _attribute_names(value: str) -> list[str]:
    return [segment.split("=", 1)[0].strip().lower() for segment in value.split(";")[1:]]


def has_attribute(value: str, attribute: str) -> bool:
    return attribute.lower() in _attribute_names(value)


def missing_labels(value: str, *, httponly: bool, secure: bool, samesite: SameSite) -> list[str]:
    """Compute labels to append to a Set-Cookie value, always in HttpOnly, Secure, SameSite order.

    SameSite is appended even when unset (a bare `; SameSite=`) unless the value already has one."""
    labels = []
    if httponly and not has_attribute(value, "HttpOnly"):
        labels.append("; HttpOnly")
    if secure and not has_attribute(value, "Secure"):
        labels.append("; Secure")
    if not has_attribute(value, "SameSite"):
        labels.append(f"; SameSite={samesite.value}")
    return labels


def append_labels(value: str, labels: typing.Iterable[str]) -> str:
    return value + "".join(labels)


def strip_attribute(value: str, attribute: str) -> str:
    segments = value.split(";")
    kept = [segments[0]] + [
        segment for segment in segments[1:] if segment.split("=", 1)[0].strip().lower() != attribute.lower()
    ]
    return ";".join(kept)


def replace_record(records: typing.Sequence[HeaderRecord], index: int, record: HeaderRecord) -> list[HeaderRecord]:
    """Return a copy of `records` with the item at `index` substituted, every other item kept in place."""
    return [record if position == index else item for position, item in enumerate(records)]
